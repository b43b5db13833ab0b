"""Automated opponent: move scoring, greedy selection and the Qt bridge."""

from simplechess.engine.greedy import GreedyEngine, select_move
from simplechess.engine.qt_bridge import EngineWorker
from simplechess.engine.scoring import MoveScorer, RandomSource, static_score
from simplechess.engine.search import IEngine, SearchResult

__all__ = [
    "EngineWorker",
    "GreedyEngine",
    "IEngine",
    "MoveScorer",
    "RandomSource",
    "SearchResult",
    "select_move",
    "static_score",
]
