"""GameController — the central orchestrator of a game.

Coordinates: Players, GameState, MoveGenerator, square selection.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from simplechess.core.board import Board
from simplechess.core.enums import Color
from simplechess.core.move import Move
from simplechess.core.outcome import GameOutcome
from simplechess.core.types import Square
from simplechess.game.interfaces import GameMode, GamePhase, IPlayer
from simplechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]
SelectionCallback = Callable[[Square | None, list[Square]], None]  # selected, targets


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, alternates turns,
    tracks the selected square, notifies listeners.

    Methods are meant to be called from a single thread (the UI thread).
    Computer moves arrive through ``submit_move`` like human ones.
    """

    __slots__ = (
        "_state",
        "_players",
        "_mode",
        "_selected",
        "_highlighted",
        "events",
    )

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._mode = GameMode.PVP
        self._selected: Square | None = None
        self._highlighted: list[Square] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def highlighted_squares(self) -> list[Square]:
        """Legal destinations of the selected piece."""
        return list(self._highlighted)

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        *,
        mode: GameMode = GameMode.PVP,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game, dropping any request pending in the old one."""
        for old in self._players.values():
            if not old.is_human:
                old.cancel()

        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._mode = mode
        self._state = GameState()
        self._state.setup(board, side_to_move)
        self._set_selection(None, [])

        _LOGGER.info("New %s game: %s vs %s", mode.name, white.name, black.name)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        """Apply *move* if it is legal for the side to move."""
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if move not in self._state.legal_moves():
            _LOGGER.warning(
                "Rejected move %s for %s", move, self._state.side_to_move
            )
            return False

        record = self._state.apply_move(move)
        self._set_selection(None, [])
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over(self._state.outcome)
            return True

        self._prompt_current_player()
        return True

    def declare_no_moves(self) -> None:
        """The side to move reported it cannot move; it loses."""
        if self._state.is_game_over:
            return
        self._state.declare_no_moves()
        self._set_selection(None, [])
        self._emit_game_over(self._state.outcome)

    # ── Square selection ─────────────────────────────────────────────────

    def click_square(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns True if a move was made.

        A click on an own piece selects it and highlights its
        destinations; a click on a highlighted square moves there; any
        other click clears the selection.  Ignored while the game is over
        or while the computer is to move.
        """
        if self._state.is_game_over:
            return False
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False

        if self._selected is not None and sq in self._highlighted:
            piece = self._state.board[self._selected]
            assert piece is not None
            return self.submit_move(Move(self._selected, sq, piece))

        piece = self._state.board[sq]
        if piece is not None and piece.color == self._state.side_to_move:
            self._set_selection(sq, self._state.legal_destinations(sq))
        else:
            self._set_selection(None, [])
        return False

    def clear_selection(self) -> None:
        self._set_selection(None, [])

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move, or end the game if it cannot."""
        cp = self.current_player
        if cp is None:
            return

        if not self._state.legal_moves():
            self.declare_no_moves()
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _set_selection(self, sq: Square | None, highlighted: list[Square]) -> None:
        if sq == self._selected and highlighted == self._highlighted:
            return
        self._selected = sq
        self._highlighted = highlighted
        for cb in self.events.on_selection_changed:
            cb(sq, list(highlighted))

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        _LOGGER.info(
            "Game over: %s wins (%s)",
            outcome.winner,
            outcome.reason.name if outcome.reason else "unknown",
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
