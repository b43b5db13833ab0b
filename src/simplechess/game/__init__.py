"""Game management layer — controller, players, state machine.

Quick start::

    from simplechess.core import Color
    from simplechess.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
    )
"""

from simplechess.game.controller import GameController, GameEvents
from simplechess.game.interfaces import GameMode, GamePhase, IPlayer
from simplechess.game.player import AIPlayer, HumanPlayer
from simplechess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameMode",
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
