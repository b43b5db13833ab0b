"""ModePanel — the start page where the players pick a game mode."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from simplechess.game.interfaces import GameMode
from simplechess.ui.i18n import t


class ModePanel(QWidget):
    """Two big buttons: local two-player game or a game against the computer.

    Signals:
        mode_chosen(int): the picked :class:`GameMode` value.
    """

    mode_chosen = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        outer = QVBoxLayout(self)
        outer.addStretch(1)

        card = QFrame()
        card.setObjectName("card")
        card.setFixedWidth(420)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 28, 28, 28)
        layout.setSpacing(14)

        self._title = QLabel()
        self._title.setObjectName("title")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)

        self._prompt = QLabel()
        self._prompt.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._prompt)

        self._btn_pvp = QPushButton()
        self._btn_pvp.setObjectName("primary")
        self._btn_pvp.setMinimumHeight(48)
        self._btn_pvp.clicked.connect(lambda: self.mode_chosen.emit(int(GameMode.PVP)))
        layout.addWidget(self._btn_pvp)

        self._btn_ai = QPushButton()
        self._btn_ai.setObjectName("accent")
        self._btn_ai.setMinimumHeight(48)
        self._btn_ai.clicked.connect(lambda: self.mode_chosen.emit(int(GameMode.AI)))
        layout.addWidget(self._btn_ai)

        self._modes_help = QLabel()
        self._modes_help.setWordWrap(True)
        self._modes_help.setStyleSheet("color: #cbd5e1; font-size: 12px;")
        layout.addWidget(self._modes_help)

        outer.addWidget(card, alignment=Qt.AlignmentFlag.AlignHCenter)
        outer.addStretch(1)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.window_title)
        self._prompt.setText(s.mode_prompt)
        self._btn_pvp.setText(s.btn_pvp)
        self._btn_ai.setText(s.btn_ai)
        self._modes_help.setText(
            f"<b>{s.modes_heading}</b><br>{s.mode_pvp_desc}<br>{s.mode_ai_desc}"
        )
