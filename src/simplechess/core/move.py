"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from simplechess.core.piece import Piece
from simplechess.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A single ply: *piece* travelling from *from_sq* to *to_sq*.

    *piece* is the mover as it stood on *from_sq* before the move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
