"""Game phases, game modes and the player interface.

GameController only talks to players through :class:`IPlayer`, so a
human at the board and the computer opponent are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from simplechess.core.enums import Color

if TYPE_CHECKING:
    from simplechess.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is about to move
    GAME_OVER = auto()


class GameMode(IntEnum):
    """Who sits at the board."""

    PVP = auto()  # two humans sharing the board
    AI = auto()  # human against the computer


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via the board).
        For the computer this schedules the engine.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Drop a pending move request (computer only, no-op for human)."""
