"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from simplechess.core.enums import Color, PieceType

_TYPE_CHARS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}
_CHARS: dict[PieceType, str] = {v: k for k, v in _TYPE_CHARS.items()}

# Outline glyphs for every piece; the UI colours them per side.
_GLYPHS: dict[PieceType, str] = {
    PieceType.KING: "♔",
    PieceType.QUEEN: "♕",
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.PAWN: "♙",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Pieces carry no identity of their own; a piece is identified by the
    square it currently occupies.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Diagram character (uppercase = white, lowercase = black)."""
        char = _CHARS[self.piece_type]
        return char.upper() if self.color == Color.WHITE else char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a diagram character, e.g. 'N' → white knight."""
        try:
            ptype = _TYPE_CHARS[char.lower()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♘."""
        return _GLYPHS[self.piece_type]
