"""Abstract interfaces for the game layer.

The :class:`~dama.game.controller.GameController` depends on these ABCs,
not on concrete player or timer implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from dama.core.enums import Side

if TYPE_CHECKING:
    from dama.core.board import Board
    from dama.core.move import Move


# -- Game phase FSM states ---------------------------------------------------


class GamePhase(IntEnum):
    """Finite-state-machine states for a Dama game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # computer is searching
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    """Why a finished game ended."""

    NONE = 0
    NO_MOVES = auto()  # side to move is blocked or has no pieces
    REPETITION = auto()
    TIMEOUT = auto()


# -- Abstract interfaces -----------------------------------------------------


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI). For the computer
        it hands the board to whatever runs the search.
        """


class ITurnTimer(ABC):
    """Interface for the per-turn countdown."""

    @abstractmethod
    def start(self, side: Side) -> None:
        """Start a fresh countdown for *side*."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the running countdown."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left in the current turn."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Has the current turn run out of time?"""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        blue: IPlayer,
        yellow: IPlayer,
        turn_time_limit_s: float | None = None,
        board: Board | None = None,
        side_to_move: Side = Side.BLUE,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def check_timeout(self) -> bool:
        """End the game if the side to move ran out of time."""
