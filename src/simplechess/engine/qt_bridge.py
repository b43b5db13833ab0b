"""Qt bridge exposing the engine through signals."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.engine.greedy import GreedyEngine
from simplechess.engine.scoring import MoveScorer
from simplechess.engine.search import IEngine

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Computes engine moves on demand and reports them as signals.

    The engine answers instantly, so the worker lives on the UI thread;
    any deliberation pause is the caller's business.
    """

    best_move_ready = pyqtSignal(int, object, float)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(self, *, seed: int | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._engine: IEngine = GreedyEngine(MoveScorer(random.Random(seed)))

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, color_value: int, request_id: int) -> None:
        """Pick a move for ``Color(color_value)`` on *board_obj* and emit it."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        try:
            result = self._engine.search(board_obj, Color(color_value))
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, result.best_move, result.score)
