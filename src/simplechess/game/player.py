"""Concrete player implementations."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from simplechess.core.enums import Color
from simplechess.game.interfaces import IPlayer

if TYPE_CHECKING:
    from simplechess.core.board import Board


class _SeatedPlayer(IPlayer):
    """Side and display name shared by every kind of player."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color}, {self._name!r})"


class HumanPlayer(_SeatedPlayer):
    """Someone at the board; their moves arrive as square clicks."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # GameController.click_square() drives human moves

    def cancel(self) -> None:
        pass


class AIPlayer(_SeatedPlayer):
    """The computer side.

    Holds no engine itself: ``request_move`` forwards the board to a
    callback, which in the application arms the thinking pause of an
    ``EngineSession``.  The chosen move comes back through
    ``GameController.submit_move``.

    Args:
        color: Side the computer plays.
        name: Display name.
        on_request_move: ``(Board) -> None`` hook for a new request.
        on_cancel: ``() -> None`` hook that drops a pending request.
    """

    __slots__ = ("_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Computer",
        on_request_move: Callable[[Board], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
