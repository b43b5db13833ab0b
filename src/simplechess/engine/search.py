"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from simplechess.core.board import Board
    from simplechess.core.enums import Color
    from simplechess.core.move import Move


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine for one side to move.

    ``best_move`` is ``None`` when the side has no legal move, which
    loses the game.
    """

    best_move: Move | None
    score: float
    candidates: int


class IEngine(Protocol):
    """Protocol for engines used by the UI/game layer."""

    def search(self, board: Board, color: Color) -> SearchResult: ...
