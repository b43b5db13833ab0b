"""Visual theme constants and QSS styles for simplechess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # ring around the selected piece
    highlight_legal: QColor  # legal move targets
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(254, 243, 199),  # amber
            dark_square=QColor(180, 83, 9),
            highlight_selected=QColor(59, 130, 246),  # blue
            highlight_legal=QColor(74, 222, 128),  # green
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(15, 23, 42),
            piece_outline=QColor(30, 41, 59),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 200, 0),
            highlight_legal=QColor(74, 222, 128),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(15, 23, 42),
            piece_outline=QColor(30, 41, 59),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a display *name*; unknown names give the classic board."""
        factory = BOARD_THEMES.get(name, cls.classic)
        return factory()


BOARD_THEMES = {
    "Classic": BoardTheme.classic,
    "Blue": BoardTheme.blue,
}


APP_STYLE = """
QMainWindow, QWidget {
    background-color: #1e293b;
    color: #e2e8f0;
    font-family: "Segoe UI", "Noto Sans", sans-serif;
    font-size: 13px;
}
QLabel#title {
    font-size: 28px;
    font-weight: bold;
    color: #ffffff;
}
QLabel#banner {
    background-color: #16a34a;
    color: #ffffff;
    border-radius: 8px;
    padding: 10px;
    font-size: 18px;
    font-weight: bold;
}
QLabel#thinking {
    color: #c084fc;
}
QPushButton {
    background-color: #475569;
    color: #ffffff;
    border: none;
    border-radius: 6px;
    padding: 8px 18px;
    font-weight: bold;
}
QPushButton:hover {
    background-color: #334155;
}
QPushButton#primary {
    background-color: #2563eb;
}
QPushButton#primary:hover {
    background-color: #1d4ed8;
}
QPushButton#accent {
    background-color: #9333ea;
}
QPushButton#accent:hover {
    background-color: #7e22ce;
}
QFrame#card {
    background-color: #334155;
    border-radius: 8px;
}
"""
