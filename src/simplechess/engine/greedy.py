"""One-ply greedy move selection."""

from __future__ import annotations

import logging

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.core.move import Move
from simplechess.core.move_generator import MoveGenerator
from simplechess.engine.scoring import MoveScorer, RandomSource
from simplechess.engine.search import IEngine, SearchResult

_LOGGER = logging.getLogger(__name__)


class GreedyEngine(IEngine):
    """Scores every legal move once and plays the best one.

    Never looks at the opponent's reply.  On an exact score tie the move
    generated first wins.
    """

    __slots__ = ("_scorer",)

    def __init__(self, scorer: MoveScorer | None = None) -> None:
        self._scorer = scorer if scorer is not None else MoveScorer()

    def search(self, board: Board, color: Color) -> SearchResult:
        candidates = MoveGenerator(board).generate_moves(color)
        if not candidates:
            _LOGGER.debug("No legal moves for %s", color)
            return SearchResult(None, float("-inf"), 0)

        best_move = candidates[0]
        best_score = float("-inf")
        for move in candidates:
            score = self._scorer.score(move, board)
            if score > best_score:
                best_score = score
                best_move = move

        _LOGGER.debug(
            "%s picks %s (score %.2f) out of %d candidates",
            color,
            best_move,
            best_score,
            len(candidates),
        )
        return SearchResult(best_move, best_score, len(candidates))


def select_move(
    board: Board, color: Color, rng: RandomSource | None = None
) -> Move | None:
    """Best move for *color*, or ``None`` if it has no legal move."""
    return GreedyEngine(MoveScorer(rng)).search(board, color).best_move
