"""Computer-move orchestration for the main UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.core.move import Move
from simplechess.engine.qt_bridge import EngineWorker
from simplechess.game.controller import GameController
from simplechess.game.player import AIPlayer
from simplechess.ui.i18n import t

_LOGGER = logging.getLogger(__name__)

MAX_RETRIES = 2  # failed attempts re-armed before the computer forfeits


class EngineSession:
    """Owns the thinking pause and the move handoff to the controller.

    A request arms a single-shot timer; when it fires the worker picks a
    move, which is submitted like a human move.  Each request gets an id
    so that answers to cancelled requests are dropped.  A failed attempt
    (engine error or illegal reply) is re-armed up to ``MAX_RETRIES``
    times; after that the computer side loses instead of leaving the
    board stuck in the thinking phase.
    """

    __slots__ = (
        "__weakref__",
        "_controller",
        "_set_status",
        "_worker",
        "_dispatch_timer",
        "_request_id",
        "_pending_request",
        "_pending_board",
        "_pending_color",
        "_retries",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        set_status: Callable[[str], None],
        parent: QObject | None = None,
        delay_ms: int = 500,
        seed: int | None = None,
    ) -> None:
        self._controller = controller
        self._set_status = set_status

        self._worker = EngineWorker(seed=seed, parent=parent)
        self._worker.best_move_ready.connect(self._on_best_move)
        self._worker.search_no_move.connect(self._on_no_move)
        self._worker.search_error.connect(self._on_error)

        self._dispatch_timer = QTimer(parent)
        self._dispatch_timer.setSingleShot(True)
        self._dispatch_timer.setInterval(delay_ms)
        self._dispatch_timer.timeout.connect(self.dispatch_pending)

        self._request_id = 0
        self._pending_request: int | None = None
        self._pending_board: Board | None = None
        self._pending_color: Color | None = None
        self._retries = 0

    # ── Public API ───────────────────────────────────────────────────────

    def create_player(self, color: Color) -> AIPlayer:
        """An :class:`AIPlayer` whose requests go through this session."""
        return AIPlayer(
            color,
            t().computer_name,
            on_request_move=self.request_move,
            on_cancel=self.cancel,
        )

    def request_move(self, board: Board) -> None:
        """Schedule a computer move for the side to move on *board*."""
        self._retries = 0
        self._schedule(board, self._controller.state.side_to_move)

    def cancel(self) -> None:
        """Drop the pending request, if any."""
        self._dispatch_timer.stop()
        self._clear_pending()
        self._retries = 0

    @property
    def is_pending(self) -> bool:
        return self._pending_request is not None

    @property
    def retries(self) -> int:
        """Failed attempts re-armed for the current turn."""
        return self._retries

    @property
    def delay_ms(self) -> int:
        return self._dispatch_timer.interval()

    def set_delay_ms(self, delay_ms: int) -> None:
        self._dispatch_timer.setInterval(delay_ms)

    def dispatch_pending(self) -> None:
        """Ask the worker for the pending request's move now."""
        if (
            self._pending_request is None
            or self._pending_board is None
            or self._pending_color is None
        ):
            return
        self._worker.request_move(
            self._pending_board, int(self._pending_color), self._pending_request
        )

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _on_best_move(self, request_id: int, move: object, score: float) -> None:
        if request_id != self._pending_request:
            return
        board, color = self._take_pending()
        if not isinstance(move, Move):
            self._on_failure(board, color, "invalid move")
            return
        _LOGGER.debug("Computer plays %s (score %.2f)", move, score)
        if self._controller.submit_move(move):
            self._retries = 0
        else:
            self._on_failure(board, color, f"illegal move {move}")

    def _on_no_move(self, request_id: int) -> None:
        if request_id != self._pending_request:
            return
        self._take_pending()
        self._controller.declare_no_moves()

    def _on_error(self, request_id: int, message: str) -> None:
        if request_id != self._pending_request:
            return
        board, color = self._take_pending()
        self._on_failure(board, color, message)

    # ── Internal ─────────────────────────────────────────────────────────

    def _schedule(self, board: Board, color: Color) -> None:
        self._request_id += 1
        self._pending_request = self._request_id
        self._pending_board = board
        self._pending_color = color
        _LOGGER.debug("Computer move %d scheduled for %s", self._request_id, color)
        self._dispatch_timer.start()

    def _on_failure(
        self, board: Board | None, color: Color | None, message: str
    ) -> None:
        self._set_status(t().status_engine_error.format(msg=message))
        if board is None or color is None:
            return
        if self._retries < MAX_RETRIES:
            self._retries += 1
            _LOGGER.warning(
                "Computer move failed (%s), retry %d/%d",
                message,
                self._retries,
                MAX_RETRIES,
            )
            self._schedule(board, color)
            return
        _LOGGER.error(
            "Computer move failed %d times (%s); it forfeits", self._retries + 1, message
        )
        self._retries = 0
        self._controller.declare_no_moves()

    def _take_pending(self) -> tuple[Board | None, Color | None]:
        board, color = self._pending_board, self._pending_color
        self._clear_pending()
        return board, color

    def _clear_pending(self) -> None:
        self._pending_request = None
        self._pending_board = None
        self._pending_color = None
