"""Game management layer — controller, players, state machine.

Quick start::

    from pawnchess.game import GameController
    from pawnchess.core import parse_square

    ctrl = GameController()
    ctrl.new_game("Alice", "Bob")
    ctrl.apply_move(parse_square("e2"), parse_square("e4"))
"""

from pawnchess.game.controller import GameController, GameEvents
from pawnchess.game.interfaces import (
    GamePhase,
    IGameController,
    MoveOutcome,
    RejectReason,
)
from pawnchess.game.player import HumanPlayer
from pawnchess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveOutcome",
    "RejectReason",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
