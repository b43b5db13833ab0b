"""Move enumeration built on :class:`~simplechess.core.rules.Rules`.

Enumeration order is part of the contract: sources and destinations are
both visited row-major (row 0→7, then column 0→7), so the engine's
tie-breaking is reproducible.
"""

from __future__ import annotations

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.core.move import Move
from simplechess.core.rules import Rules
from simplechess.core.types import Square, all_squares


class MoveGenerator:
    """Generates legal moves on a given :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def legal_destinations(self, sq: Square, color: Color | None = None) -> list[Square]:
        """Destinations the piece on *sq* may move to.

        Empty when *sq* is empty, or when *color* is given and the piece
        on *sq* belongs to the other side.
        """
        piece = self._board[sq]
        if piece is None:
            return []
        if color is not None and piece.color != color:
            return []
        return [
            to_sq
            for to_sq in all_squares()
            if Rules.is_legal_destination(self._board, sq, to_sq)
        ]

    def generate_moves(self, color: Color) -> list[Move]:
        """All legal moves for *color*, source-then-destination row-major."""
        moves: list[Move] = []
        board = self._board
        for from_sq in board.occupied_squares(color):
            piece = board[from_sq]
            assert piece is not None
            for to_sq in self.legal_destinations(from_sq):
                moves.append(Move(from_sq, to_sq, piece))
        return moves

    def has_moves(self, color: Color) -> bool:
        for from_sq in self._board.occupied_squares(color):
            if self.legal_destinations(from_sq):
                return True
        return False


def legal_destinations(
    board: Board, sq: Square, color: Color | None = None
) -> list[Square]:
    """Legal destinations of the piece on *sq*; backs move highlighting."""
    return MoveGenerator(board).legal_destinations(sq, color)
