"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from simplechess.core import Board, Color, MoveGenerator, apply_move

    board = Board.initial()
    for move in MoveGenerator(board).generate_moves(Color.WHITE):
        print(move)
"""

from simplechess.core.board import Board
from simplechess.core.enums import Color, GameResult, PieceType
from simplechess.core.move import Move
from simplechess.core.move_generator import MoveGenerator, legal_destinations
from simplechess.core.outcome import (
    IN_PROGRESS,
    GameEndReason,
    GameOutcome,
    check_outcome,
    no_moves_outcome,
)
from simplechess.core.piece import Piece
from simplechess.core.rules import Rules, apply_move
from simplechess.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "legal_destinations",
    # Outcome
    "IN_PROGRESS",
    "GameEndReason",
    "GameOutcome",
    "check_outcome",
    "no_moves_outcome",
]
