"""Terminal-state detection.

The only ways a game ends are the capture of a king and a side having no
legal move on its turn; both hand the win to the other side.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from simplechess.core.enums import Color, GameResult, PieceType
from simplechess.core.piece import Piece


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    KING_CAPTURED = auto()
    NO_LEGAL_MOVES = auto()


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Either in progress (``winner is None``) or terminal with a winner."""

    winner: Color | None = None
    reason: GameEndReason | None = None

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None

    @property
    def result(self) -> GameResult:
        if self.winner is None:
            return GameResult.IN_PROGRESS
        return GameResult.win_for(self.winner)


IN_PROGRESS = GameOutcome()


def check_outcome(captured: Piece | None, mover: Color) -> GameOutcome:
    """Outcome after *mover* captured *captured* (``None`` for a quiet move)."""
    if captured is not None and captured.piece_type == PieceType.KING:
        return GameOutcome(mover, GameEndReason.KING_CAPTURED)
    return IN_PROGRESS


def no_moves_outcome(stuck: Color) -> GameOutcome:
    """Outcome when *stuck* has no legal move on its turn: it loses."""
    return GameOutcome(stuck.opposite, GameEndReason.NO_LEGAL_MOVES)
