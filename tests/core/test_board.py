"""Tests for the Board value object and coordinate helpers."""

import pytest

from simplechess.core.board import Board
from simplechess.core.enums import Color, PieceType
from simplechess.core.piece import Piece
from simplechess.core.types import all_squares, is_on_board, parse_square, square_name

INITIAL_DIAGRAM = """
r n b q k b n r
p p p p p p p p
. . . . . . . .
. . . . . . . .
. . . . . . . .
. . . . . . . .
P P P P P P P P
R N B Q K B N R
"""


class TestSquares:
    def test_parse_square(self) -> None:
        assert parse_square("a8") == (0, 0)
        assert parse_square("e2") == (6, 4)
        assert parse_square("h1") == (7, 7)

    def test_square_name(self) -> None:
        assert square_name((0, 0)) == "a8"
        assert square_name((4, 4)) == "e4"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "e22"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_is_on_board(self) -> None:
        assert is_on_board((0, 0))
        assert is_on_board((7, 7))
        assert not is_on_board((8, 0))
        assert not is_on_board((0, -1))

    def test_all_squares_row_major(self) -> None:
        squares = list(all_squares())
        assert len(squares) == 64
        assert squares[:2] == [(0, 0), (0, 1)]
        assert squares[8] == (1, 0)

    def test_package_exports_resolve(self) -> None:
        import simplechess.core as core

        for name in core.__all__:
            assert hasattr(core, name), name


class TestInitialBoard:
    def test_piece_count(self) -> None:
        assert Board.initial().occupied_count() == 32

    def test_back_ranks(self) -> None:
        b = Board.initial()
        assert b[(0, 4)] == Piece(Color.BLACK, PieceType.KING)
        assert b[(0, 3)] == Piece(Color.BLACK, PieceType.QUEEN)
        assert b[(7, 4)] == Piece(Color.WHITE, PieceType.KING)
        assert b[(7, 0)] == Piece(Color.WHITE, PieceType.ROOK)
        assert b[(7, 6)] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_pawn_rows(self) -> None:
        b = Board.initial()
        for col in range(8):
            assert b[(1, col)] == Piece(Color.BLACK, PieceType.PAWN)
            assert b[(6, col)] == Piece(Color.WHITE, PieceType.PAWN)

    def test_middle_empty(self) -> None:
        b = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert b.is_empty((row, col))

    def test_matches_diagram(self) -> None:
        assert Board.from_diagram(INITIAL_DIAGRAM) == Board.initial()


class TestBoardAccess:
    def test_off_board_reads_empty(self) -> None:
        b = Board.initial()
        assert b[(8, 0)] is None
        assert b[(-1, 3)] is None

    def test_occupied_squares_row_major(self) -> None:
        squares = list(Board.initial().occupied_squares(Color.BLACK))
        assert squares == sorted(squares)
        assert squares[0] == (0, 0)
        assert len(squares) == 16

    def test_has_piece(self) -> None:
        b = Board.from_diagram(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ........
            ....K...
            """
        )
        assert b.has_piece(Color.WHITE, PieceType.KING)
        assert not b.has_piece(Color.WHITE, PieceType.QUEEN)


class TestWithMove:
    def test_returns_new_board(self) -> None:
        b = Board.initial()
        after = b.with_move((6, 4), (4, 4))
        assert after is not b
        assert after[(4, 4)] == Piece(Color.WHITE, PieceType.PAWN)
        assert after.is_empty((6, 4))

    def test_original_untouched(self) -> None:
        b = Board.initial()
        b.with_move((6, 4), (4, 4))
        assert b == Board.initial()

    def test_equal_boards_hash_equal(self) -> None:
        a = Board.initial().with_move((6, 4), (4, 4))
        b = Board.initial().with_move((6, 4), (4, 4))
        assert a == b
        assert hash(a) == hash(b)


class TestFactories:
    def test_empty(self) -> None:
        assert Board.empty().occupied_count() == 0

    def test_from_placement(self) -> None:
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        b = Board.from_placement({(3, 3): knight})
        assert b[(3, 3)] == knight
        assert b.occupied_count() == 1

    def test_from_placement_off_board(self) -> None:
        with pytest.raises(ValueError):
            Board.from_placement({(8, 8): Piece(Color.WHITE, PieceType.KING)})

    def test_diagram_wrong_row_count(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("........\n........")

    def test_diagram_bad_char(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))

    def test_wrong_square_count_is_programmer_error(self) -> None:
        with pytest.raises(AssertionError):
            Board([None] * 63)

    def test_repr_lists_ranks(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert text.splitlines()[-1] == "  a b c d e f g h"


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)

    def test_str_round_trip(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("z")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
