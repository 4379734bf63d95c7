"""Game management layer: controller and state machine.

Quick start::

    from rookie.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(4, 6, 4, 4)   # e2-e4
"""

from rookie.game.controller import GameController, GameEvents
from rookie.game.interfaces import GamePhase
from rookie.game.state import GameState, MoveRecord

__all__ = [
    "GameController",
    "GameEvents",
    "GamePhase",
    "GameState",
    "MoveRecord",
]
