"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from simplechess.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: change mode, new game."""

    change_mode_clicked = pyqtSignal()
    new_game_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(12)
        layout.addStretch(1)

        self._btn_change_mode = QPushButton()
        self._btn_change_mode.setMinimumHeight(36)
        self._btn_change_mode.clicked.connect(self.change_mode_clicked)
        layout.addWidget(self._btn_change_mode)

        self._btn_new = QPushButton()
        self._btn_new.setObjectName("primary")
        self._btn_new.setMinimumHeight(36)
        self._btn_new.clicked.connect(self.new_game_clicked)
        layout.addWidget(self._btn_new)

        layout.addStretch(1)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_change_mode.setText(s.btn_change_mode)
        self._btn_new.setText(s.btn_new_game)
