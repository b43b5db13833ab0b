"""Square type alias and coordinate helpers.

Board layout (row-major, black's back rank on top)::

    (0, 0)=a8  (0, 1)=b8  ...  (0, 7)=h8
    ...
    (7, 0)=a1  (7, 1)=b1  ...  (7, 7)=h1

Row 0 is black's home row, row 7 is white's.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), each 0–7

BOARD_SIZE = 8


def is_on_board(sq: Square) -> bool:
    """Whether both coordinates fall inside the 8x8 grid."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def all_squares() -> Iterator[Square]:
    """Every square in row-major order (row 0→7, then column 0→7)."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield (row, col)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    row, col = sq
    return chr(ord("a") + col) + str(BOARD_SIZE - row)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))
