"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from dama.config import Difficulty
from dama.core.enums import Side
from dama.game.interfaces import IPlayer

if TYPE_CHECKING:
    from dama.core.board import Board


class HumanPlayer(IPlayer):
    """A person at the board.

    Their moves arrive through
    :meth:`~dama.game.controller.GameController.submit_move`, which holds
    them to the mandatory maximal capture and, when one is set, the turn
    timer. ``request_move`` has nothing to compute.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str = "") -> None:
        self._side = side
        self._name = name or "Player"

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass


class AIPlayer(IPlayer):
    """A computer participant searching at a difficulty-selected depth.

    The search itself is decoupled: ``request_move`` only forwards the board
    to *on_request_move*, which typically queues a call to an
    ``EngineWorker`` or schedules
    :meth:`~dama.game.controller.GameController.play_computer_turn` after
    :attr:`move_delay_ms`, so the human sees their own move land first.

    Args:
        side: Side the computer plays.
        difficulty: Strength preset, resolved to a depth via configuration.
        name: Display name.
        on_request_move: ``(Board) -> None`` called when the controller asks
            the computer to start thinking.
        move_delay_ms: Pause before the computer's move is shown.
    """

    __slots__ = ("_side", "_name", "_difficulty", "_on_request_move", "_move_delay_ms")

    def __init__(
        self,
        side: Side,
        difficulty: Difficulty = Difficulty.MEDIUM,
        name: str = "Patnos Dama",
        on_request_move: Callable[[Board], None] | None = None,
        move_delay_ms: int = 0,
    ) -> None:
        self._side = side
        self._name = name
        self._difficulty = difficulty
        self._on_request_move = on_request_move
        self._move_delay_ms = max(0, move_delay_ms)

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def depth(self) -> int:
        return self._difficulty.depth()

    @property
    def move_delay_ms(self) -> int:
        return self._move_delay_ms

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)
