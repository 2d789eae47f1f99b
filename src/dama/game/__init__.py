"""Game management layer - controller, players, turn timer, state machine.

Quick start::

    from dama.game import new_computer_game

    ctrl = new_computer_game("Ayse", "hard")
    move = ctrl.legal_moves()[0]
    ctrl.submit_move(move)
    ctrl.play_computer_turn()
"""

from dama.game.controller import GameController, GameEvents, new_computer_game
from dama.game.interfaces import (
    GameEndReason,
    GamePhase,
    IGameController,
    IPlayer,
    ITurnTimer,
)
from dama.game.player import AIPlayer, HumanPlayer
from dama.game.state import GameState, MoveRecord
from dama.game.timer import TimerSnapshot, TurnTimer

__all__ = [
    # Interfaces
    "GameEndReason",
    "GamePhase",
    "IGameController",
    "IPlayer",
    "ITurnTimer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "TimerSnapshot",
    "TurnTimer",
    "new_computer_game",
]
