"""Game state machine — tracks the board, turn, captures and history."""

from __future__ import annotations

from dataclasses import dataclass, field

from simplechess.core.board import Board
from simplechess.core.enums import Color, GameResult
from simplechess.core.move import Move
from simplechess.core.move_generator import MoveGenerator
from simplechess.core.outcome import (
    IN_PROGRESS,
    GameOutcome,
    check_outcome,
    no_moves_outcome,
)
from simplechess.core.piece import Piece
from simplechess.core.rules import apply_move
from simplechess.core.types import Square
from simplechess.game.interfaces import GamePhase


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


def _empty_captures() -> dict[Color, list[Piece]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Manages game lifecycle: board, side to move, captures, outcome.

    This is a pure data/logic class — no timers, no UI.  The board is
    replaced wholesale on every applied move.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    outcome: GameOutcome = field(default=IN_PROGRESS, init=False)
    captured: dict[Color, list[Piece]] = field(default_factory=_empty_captures, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, discarding the previous board."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.outcome = IN_PROGRESS
        self.captured = _empty_captures()
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for the legality check.  The capture is
        reflected on the board before a king capture ends the game.
        """
        mover = self.side_to_move
        self.board, captured = apply_move(self.board, move)
        if captured is not None:
            self.captured[mover].append(captured)

        record = MoveRecord(move=move, captured=captured)
        self.move_history.append(record)
        self.side_to_move = mover.opposite

        outcome = check_outcome(captured, mover)
        if outcome.is_terminal:
            self._finish(outcome)
        return record

    def declare_no_moves(self) -> None:
        """The side to move has nothing to play and loses."""
        self._finish(no_moves_outcome(self.side_to_move))

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        return self.outcome.winner

    @property
    def result(self) -> GameResult:
        return self.outcome.result

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).generate_moves(self.side_to_move)

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Destinations for the side to move's piece on *sq*."""
        return MoveGenerator(self.board).legal_destinations(sq, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self, outcome: GameOutcome) -> None:
        self.outcome = outcome
        self.phase = GamePhase.GAME_OVER
