"""Shared lookup tables used by both the move validator and the scorer."""

from __future__ import annotations

from typing import Final

from simplechess.core.enums import Color, PieceType

PIECE_VALUES: Final[dict[PieceType, int]] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 100,
}

# Row delta of a single pawn step. White advances toward row 0.
PAWN_DIRECTION: Final[dict[Color, int]] = {
    Color.WHITE: -1,
    Color.BLACK: 1,
}

PAWN_START_ROW: Final[dict[Color, int]] = {
    Color.WHITE: 6,
    Color.BLACK: 1,
}

HOME_ROW: Final[dict[Color, int]] = {
    Color.WHITE: 7,
    Color.BLACK: 0,
}

BACK_RANK: Final[tuple[PieceType, ...]] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)
