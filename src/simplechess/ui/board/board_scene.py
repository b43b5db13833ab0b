"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.core.types import BOARD_SIZE, Square, all_squares
from simplechess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, selection ring, legal-move marks and pieces.

    The scene holds no game logic: it reports clicks and draws whatever
    board and selection it is given.

    Signals:
        square_clicked(object): ``(row, col)`` of a clicked square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 64  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.classic()
        self._board: Board | None = None
        self._interactive = True
        self._show_legal_moves = True

        self._selected_sq: Square | None = None
        self._targets: list[Square] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self._sync_pieces()
        self._sync_highlights()

    def set_selection(self, selected: Square | None, targets: list[Square]) -> None:
        """Show *selected* and mark each square in *targets*."""
        self._selected_sq = selected
        self._targets = list(targets)
        self._sync_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move marks."""
        self._show_legal_moves = visible
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for row, col in all_squares():
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[(row, col)] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont()
        font.setPixelSize(int(t * 0.75))
        for sq in self._board.occupied_squares():
            piece = self._board[sq]
            assert piece is not None
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            is_white = piece.color == Color.WHITE
            item.setBrush(
                QBrush(self._theme.white_piece if is_white else self._theme.black_piece)
            )
            if is_white:
                item.setPen(QPen(self._theme.piece_outline, 1.0))
            bounds = item.boundingRect()
            row, col = sq
            item.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        t = self.TILE
        if self._selected_sq is not None:
            self._add_ring(self._selected_sq, self._theme.highlight_selected)

        if not self._show_legal_moves:
            return
        for sq in self._targets:
            if self._board is not None and not self._board.is_empty(sq):
                self._add_ring(sq, self._theme.highlight_legal)
                continue
            row, col = sq
            radius = t * 0.1
            dot = QGraphicsEllipseItem(
                col * t + t / 2 - radius, row * t + t / 2 - radius, 2 * radius, 2 * radius
            )
            dot.setBrush(QBrush(self._theme.highlight_legal))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
            dot.setOpacity(0.6)
            dot.setZValue(2)
            self.addItem(dot)
            self._highlight_items.append(dot)

    def _add_ring(self, sq: Square, color: QColor) -> None:
        t = self.TILE
        row, col = sq
        width = 4.0
        ring = QGraphicsRectItem(
            col * t + width / 2, row * t + width / 2, t - width, t - width
        )
        ring.setPen(QPen(color, width))
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        ring.setZValue(0.5)
        self.addItem(ring)
        self._highlight_items.append(ring)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._board is None or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        event.accept()

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return (row, col)
        return None
