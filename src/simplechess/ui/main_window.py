"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from simplechess.config import AppSettings
from simplechess.core.enums import Color
from simplechess.core.outcome import GameEndReason, GameOutcome
from simplechess.core.types import Square
from simplechess.game.controller import GameController
from simplechess.game.interfaces import GameMode, GamePhase, IPlayer
from simplechess.game.player import HumanPlayer
from simplechess.game.state import GameState, MoveRecord
from simplechess.ui.board.board_view import BoardView
from simplechess.ui.engine_session import EngineSession
from simplechess.ui.i18n import set_language, t
from simplechess.ui.panels.captured_panel import CapturedPanel
from simplechess.ui.panels.control_panel import ControlPanel
from simplechess.ui.panels.mode_panel import ModePanel
from simplechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])

_MODE_PAGE = 0
_GAME_PAGE = 1


def color_label(color: Color) -> str:
    s = t()
    return s.color_white if color == Color.WHITE else s.color_black


class MainWindow(QMainWindow):
    """Main application window: mode selection page and game page."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)

        self.setWindowTitle(t().window_title)
        self.setMinimumSize(760, 640)

        self._controller = GameController()
        self._engine_session = EngineSession(
            controller=self._controller,
            set_status=self._set_status,
            parent=self,
            delay_ms=self._settings.ai_delay_ms,
            seed=self._settings.ai_seed,
        )

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()
        self._stack.setCurrentIndex(_MODE_PAGE)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._mode_panel = ModePanel()
        self._stack.addWidget(self._mode_panel)

        game_page = QWidget()
        root = QVBoxLayout(game_page)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        self._title_label = QLabel()
        self._title_label.setObjectName("title")
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._title_label)

        self._mode_label = QLabel()
        self._mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._mode_label)

        turn_row = QHBoxLayout()
        turn_row.addStretch(1)
        self._turn_label = QLabel()
        turn_row.addWidget(self._turn_label)
        self._thinking_label = QLabel()
        self._thinking_label.setObjectName("thinking")
        self._thinking_label.setVisible(False)
        turn_row.addWidget(self._thinking_label)
        turn_row.addStretch(1)
        root.addLayout(turn_row)

        self._banner = QLabel()
        self._banner.setObjectName("banner")
        self._banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._banner.setVisible(False)
        root.addWidget(self._banner)

        middle = QHBoxLayout()
        self._captured_panel = CapturedPanel()
        middle.addWidget(self._captured_panel, alignment=Qt.AlignmentFlag.AlignTop)
        self._board_view = BoardView()
        self._board_view.board_scene.set_theme(
            BoardTheme.by_name(self._settings.board_theme)
        )
        self._board_view.board_scene.set_show_legal_moves(self._settings.show_legal_moves)
        middle.addWidget(self._board_view, stretch=1)
        root.addLayout(middle, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._help_label = QLabel()
        self._help_label.setWordWrap(True)
        root.addWidget(self._help_label)

        self._status_label = QLabel()
        self._status_label.setStyleSheet("color: #fca5a5;")
        root.addWidget(self._status_label)

        self._stack.addWidget(game_page)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._mode_panel.mode_chosen.connect(self._on_mode_chosen)
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.change_mode_clicked.connect(self._on_change_mode)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)
        self._replace_callback(
            events.on_selection_changed, self._on_selection_changed
        )

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_phase_changed, self._on_phase_changed)
        self._remove_callback(
            events.on_selection_changed, self._on_selection_changed
        )

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Game lifecycle ───────────────────────────────────────────────────

    def start_game(self, mode: GameMode) -> None:
        """Start a fresh game in *mode* and show the game page."""
        self._engine_session.cancel()
        ai_color = self._settings.ai_color

        players: dict[Color, IPlayer] = {}
        for color in Color:
            if mode == GameMode.AI and color == ai_color:
                players[color] = self._engine_session.create_player(color)
            else:
                players[color] = HumanPlayer(color, color_label(color))

        self._banner.setVisible(False)
        self._status_label.clear()
        self._refresh_labels(mode)
        self._stack.setCurrentIndex(_GAME_PAGE)

        self._connect_game_events()
        self._controller.new_game(players[Color.WHITE], players[Color.BLACK], mode=mode)
        self._sync_board(self._controller.state)

    def _on_mode_chosen(self, mode_value: int) -> None:
        self.start_game(GameMode(mode_value))

    def _on_new_game(self) -> None:
        self.start_game(self._controller.mode)

    def _on_change_mode(self) -> None:
        self._engine_session.cancel()
        self._controller.clear_selection()
        self._stack.setCurrentIndex(_MODE_PAGE)

    def _on_square_clicked(self, sq: object) -> None:
        if not isinstance(sq, tuple):
            return
        square: Square = sq
        self._controller.click_square(square)

    # ── Controller event handlers ────────────────────────────────────────

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        _LOGGER.debug("Move %s played", record.move)
        self._sync_board(state)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        if outcome.winner is None:
            return
        s = t()
        text = s.game_over_banner.format(color=color_label(outcome.winner).upper())
        if outcome.reason == GameEndReason.NO_LEGAL_MOVES:
            loser = color_label(outcome.winner.opposite)
            text = f"{text}\n{s.reason_no_moves.format(color=loser)}"
        elif outcome.reason == GameEndReason.KING_CAPTURED:
            text = f"{text}\n{s.reason_king_captured}"
        self._banner.setText(text)
        self._banner.setVisible(True)
        self._thinking_label.setVisible(False)
        self._board_view.board_scene.set_interactive(False)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        thinking = phase == GamePhase.THINKING
        self._thinking_label.setVisible(thinking)
        self._board_view.board_scene.set_interactive(phase == GamePhase.AWAITING_MOVE)
        self._turn_label.setText(
            t().turn_label.format(
                color=color_label(self._controller.state.side_to_move).upper()
            )
        )

    def _on_selection_changed(self, selected: Square | None, targets: list[Square]) -> None:
        self._board_view.board_scene.set_selection(selected, targets)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_board(self, state: GameState) -> None:
        self._board_view.board_scene.set_board(state.board)
        self._captured_panel.set_captured(state.captured)
        self._turn_label.setText(
            t().turn_label.format(color=color_label(state.side_to_move).upper())
        )

    def _refresh_labels(self, mode: GameMode) -> None:
        s = t()
        self._title_label.setText(s.window_title)
        self._mode_label.setText(
            s.mode_label_ai if mode == GameMode.AI else s.mode_label_pvp
        )
        self._thinking_label.setText(s.thinking)

        lines = [s.how_select, s.how_move]
        if mode == GameMode.AI:
            ai_color = self._settings.ai_color
            lines.append(
                s.how_ai_side.format(
                    human=color_label(ai_color.opposite).upper(),
                    computer=color_label(ai_color).upper(),
                )
            )
        lines.append(s.how_win)
        bullets = "".join(f"<br>• {line}" for line in lines)
        self._help_label.setText(f"<b>{s.how_to_play_heading}</b>{bullets}")

    def _set_status(self, text: str) -> None:
        self._status_label.setText(text)

    # ── Qt overrides ─────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._engine_session.cancel()
        self._disconnect_game_events()
        super().closeEvent(event)
