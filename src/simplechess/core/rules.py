"""Move legality for the simplified rule set, and move application.

Deliberate simplifications: a king may move onto an attacked square and
may be left attacked, since capturing the king is the only way to win.
There is no castling, en passant or promotion.
"""

from __future__ import annotations

from collections.abc import Callable

from simplechess.core.board import Board
from simplechess.core.enums import PieceType
from simplechess.core.move import Move
from simplechess.core.piece import Piece
from simplechess.core.tables import PAWN_DIRECTION, PAWN_START_ROW
from simplechess.core.types import Square, is_on_board

_GeometryCheck = Callable[[Board, Square, Square, Piece], bool]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _pawn_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    direction = PAWN_DIRECTION[piece.color]
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    target = board[to_sq]

    if dc == 0 and target is None:
        if dr == direction:
            return True
        if (
            dr == 2 * direction
            and from_sq[0] == PAWN_START_ROW[piece.color]
            and board.is_empty((from_sq[0] + direction, from_sq[1]))
        ):
            return True

    # Diagonal steps are capture-only.
    return abs(dc) == 1 and dr == direction and target is not None


def _rook_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    if from_sq[0] != to_sq[0] and from_sq[1] != to_sq[1]:
        return False
    return Rules.is_path_clear(board, from_sq, to_sq)


def _bishop_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    if abs(to_sq[0] - from_sq[0]) != abs(to_sq[1] - from_sq[1]):
        return False
    return Rules.is_path_clear(board, from_sq, to_sq)


def _queen_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    dr = to_sq[0] - from_sq[0]
    dc = to_sq[1] - from_sq[1]
    if dr != 0 and dc != 0 and abs(dr) != abs(dc):
        return False
    return Rules.is_path_clear(board, from_sq, to_sq)


def _knight_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    offset = (abs(to_sq[0] - from_sq[0]), abs(to_sq[1] - from_sq[1]))
    return offset in ((2, 1), (1, 2))


def _king_ok(board: Board, from_sq: Square, to_sq: Square, piece: Piece) -> bool:
    return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


_GEOMETRY: dict[PieceType, _GeometryCheck] = {
    PieceType.PAWN: _pawn_ok,
    PieceType.KNIGHT: _knight_ok,
    PieceType.BISHOP: _bishop_ok,
    PieceType.ROOK: _rook_ok,
    PieceType.QUEEN: _queen_ok,
    PieceType.KING: _king_ok,
}


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_legal_destination(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may move to *to_sq*.

        Total over all inputs: off-board squares, an empty source and a
        destination held by the mover's own side all yield ``False``.
        """
        if not is_on_board(from_sq) or not is_on_board(to_sq):
            return False
        piece = board[from_sq]
        if piece is None:
            return False

        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return False

        return _GEOMETRY[piece.piece_type](board, from_sq, to_sq, piece)

    @staticmethod
    def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """No square strictly between *from_sq* and *to_sq* is occupied.

        Assumes the two squares share a row, column or diagonal.
        """
        row_step = _sign(to_sq[0] - from_sq[0])
        col_step = _sign(to_sq[1] - from_sq[1])
        row, col = from_sq[0] + row_step, from_sq[1] + col_step
        while (row, col) != to_sq:
            if board[(row, col)] is not None:
                return False
            row += row_step
            col += col_step
        return True


def apply_move(board: Board, move: Move) -> tuple[Board, Piece | None]:
    """Return the successor board and the piece captured on the destination.

    The input board is left unchanged.  Legality is the caller's concern;
    only the source square is checked against ``move.piece``.
    """
    if board[move.from_sq] != move.piece:
        raise ValueError(
            f"Move {move} expects {move.piece!r} on its source square, "
            f"found {board[move.from_sq]!r}"
        )
    captured = board[move.to_sq]
    return board.with_move(move.from_sq, move.to_sq), captured
