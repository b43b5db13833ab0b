"""Heuristic move scoring for the automated opponent.

A move's score is the sum of four terms:

* capture value: ten times the captured piece's material value, plus a
  flat bonus when the captured piece is a king;
* centralization: ``(7 - d) * 0.5`` where ``d`` is the Manhattan
  distance from the destination to the board centre ``(3.5, 3.5)``;
* pawn advance: ``(7 - row) * 0.3`` for pawn moves, measured from row 7
  for both colours;
* jitter: a uniform draw from ``[0, 2)`` that breaks ties and varies play.
"""

from __future__ import annotations

import random
from typing import Final, Protocol

from simplechess.core.board import Board
from simplechess.core.enums import PieceType
from simplechess.core.move import Move
from simplechess.core.tables import PIECE_VALUES

CAPTURE_WEIGHT: Final = 10
KING_CAPTURE_BONUS: Final = 1000
CENTER: Final = 3.5
CENTRALIZATION_BASE: Final = 7
CENTRALIZATION_WEIGHT: Final = 0.5
PAWN_ADVANCE_ORIGIN_ROW: Final = 7
PAWN_ADVANCE_WEIGHT: Final = 0.3
JITTER_RANGE: Final = 2.0


class RandomSource(Protocol):
    """Anything with ``random() -> float`` in ``[0, 1)``, e.g. :class:`random.Random`."""

    def random(self) -> float: ...


def static_score(move: Move, board: Board) -> float:
    """Deterministic part of the score: everything except the jitter."""
    score = 0.0

    target = board[move.to_sq]
    if target is not None:
        score += CAPTURE_WEIGHT * PIECE_VALUES[target.piece_type]
        if target.piece_type == PieceType.KING:
            score += KING_CAPTURE_BONUS

    row, col = move.to_sq
    center_distance = abs(row - CENTER) + abs(col - CENTER)
    score += (CENTRALIZATION_BASE - center_distance) * CENTRALIZATION_WEIGHT

    if move.piece.piece_type == PieceType.PAWN:
        score += (PAWN_ADVANCE_ORIGIN_ROW - row) * PAWN_ADVANCE_WEIGHT

    return score


class MoveScorer:
    """Scores candidate moves, drawing jitter from an injectable source.

    Args:
        rng: Random source; a fresh unseeded :class:`random.Random`
            when omitted.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()

    def score(self, move: Move, board: Board) -> float:
        return static_score(move, board) + self._rng.random() * JITTER_RANGE
