"""CapturedPanel — pieces each side has taken so far."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from simplechess.core.enums import Color
from simplechess.core.piece import Piece
from simplechess.ui.i18n import t


class CapturedPanel(QFrame):
    """Shows, per color, the glyphs of the pieces that color captured."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setFixedWidth(140)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self._heading = QLabel()
        self._heading.setStyleSheet("font-weight: bold;")
        layout.addWidget(self._heading)

        self._side_labels: dict[Color, QLabel] = {}
        self._tray_labels: dict[Color, QLabel] = {}
        for color in Color:
            side = QLabel()
            side.setStyleSheet("color: #94a3b8; font-size: 11px;")
            layout.addWidget(side)
            tray = QLabel()
            tray.setWordWrap(True)
            tray.setStyleSheet("font-size: 20px;")
            layout.addWidget(tray)
            self._side_labels[color] = side
            self._tray_labels[color] = tray
        layout.addStretch(1)

    def retranslate_ui(self) -> None:
        s = t()
        self._heading.setText(s.captured_heading)
        self._side_labels[Color.WHITE].setText(s.color_white)
        self._side_labels[Color.BLACK].setText(s.color_black)

    def set_captured(self, captured: Mapping[Color, Sequence[Piece]]) -> None:
        """Replace both trays; *captured* maps capturer → captured pieces."""
        for color, tray in self._tray_labels.items():
            tray.setText(" ".join(piece.symbol for piece in captured.get(color, ())))

    def tray_text(self, color: Color) -> str:
        return self._tray_labels[color].text()
