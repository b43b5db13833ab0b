"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from simplechess.core.enums import Color, PieceType
from simplechess.core.piece import Piece
from simplechess.core.tables import BACK_RANK, HOME_ROW, PAWN_START_ROW
from simplechess.core.types import BOARD_SIZE, Square, all_squares, is_on_board

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


def _index(sq: Square) -> int:
    return sq[0] * BOARD_SIZE + sq[1]


class Board:
    """Immutable 64-square board.

    A board is never changed in place: :meth:`with_move` returns the
    successor board and leaves the receiver untouched.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * _SQUARE_COUNT
        assert len(cells) == _SQUARE_COUNT, f"board needs 64 squares, got {len(cells)}"
        self._squares: tuple[Piece | None, ...] = cells

    # ── Element access ──────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> Piece | None:
        """Piece on *sq*, or ``None`` if the square is empty or off the board."""
        if not is_on_board(sq):
            return None
        return self._squares[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # ── Query helpers ──────────────────────────────────────────────

    def occupied_squares(self, color: Color | None = None) -> Iterator[Square]:
        """Occupied squares in row-major order, optionally filtered by *color*."""
        for sq in all_squares():
            piece = self._squares[_index(sq)]
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq

    def occupied_count(self) -> int:
        return sum(1 for piece in self._squares if piece is not None)

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        return Piece(color, piece_type) in self._squares

    # ── Successor ──────────────────────────────────────────────

    def with_move(self, from_sq: Square, to_sq: Square) -> Board:
        """Board after moving whatever stands on *from_sq* to *to_sq*."""
        cells = list(self._squares)
        cells[_index(to_sq)] = cells[_index(from_sq)]
        cells[_index(from_sq)] = None
        return Board(cells)

    # ── Factories ──────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: black on rows 0–1, white on rows 6–7."""
        placement: dict[Square, Piece] = {}
        for color in Color:
            for col, ptype in enumerate(BACK_RANK):
                placement[(HOME_ROW[color], col)] = Piece(color, ptype)
                placement[(PAWN_START_ROW[color], col)] = Piece(color, PieceType.PAWN)
        return cls.from_placement(placement)

    @classmethod
    def from_placement(cls, placement: Mapping[Square, Piece]) -> Board:
        """Build a board from a ``{square: piece}`` mapping."""
        cells: list[Piece | None] = [None] * _SQUARE_COUNT
        for sq, piece in placement.items():
            if not is_on_board(sq):
                raise ValueError(f"Square off the board: {sq!r}")
            cells[_index(sq)] = piece
        return cls(cells)

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Parse an 8-line text diagram, row 0 first.

        Uppercase letters are white, lowercase black, ``.`` is empty;
        spaces inside a line are ignored::

            r n b q k b n r
            p p p p p p p p
            . . . . . . . .
            ...
        """
        lines = [line.replace(" ", "") for line in diagram.strip().splitlines()]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Diagram needs 8 rows, got {len(lines)}")

        cells: list[Piece | None] = []
        for row, line in enumerate(lines):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Diagram row {row} needs 8 squares: {line!r}")
            for char in line:
                cells.append(None if char == "." else Piece.from_char(char))
        return cls(cells)

    # ── Dunder helpers ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = self._squares[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]
            line = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{BOARD_SIZE - row} {line}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
