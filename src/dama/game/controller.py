"""GameController - the central orchestrator of a Dama game.

Coordinates: Players, TurnTimer, GameState, the search engine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dama.config import CONFIG, Difficulty
from dama.core.board import Board
from dama.core.enums import GameResult, Side
from dama.core.move import Move
from dama.engine.python_search import MinimaxSearchEngine
from dama.engine.search import IEngine, SearchLimits
from dama.game.interfaces import GameEndReason, GamePhase, IGameController, IPlayer
from dama.game.player import AIPlayer, HumanPlayer
from dama.game.state import GameState
from dama.game.timer import TurnTimer

_LOGGER = logging.getLogger(__name__)

# -- Event definitions -------------------------------------------------------

MoveCallback = Callable[[Move, str, "GameState"], None]  # move, text, state
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# -- Controller --------------------------------------------------------------


class GameController(IGameController):
    """Orchestrates a full Dama game: validates moves, runs the turn timer,
    switches turns, notifies listeners.

    Methods are meant to be called from a single thread (the main/UI
    thread). Only human turns are timed; the computer's turn is not.
    """

    __slots__ = ("_state", "_players", "_timer", "_engine", "events")

    def __init__(self, engine: IEngine | None = None) -> None:
        self._state = GameState(repetition_limit=CONFIG.game.repetition_limit)
        self._players: dict[Side, IPlayer] = {}
        self._timer: TurnTimer | None = None
        self._engine: IEngine = engine or MinimaxSearchEngine()
        self.events = GameEvents()

    # -- Properties ---------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def timer(self) -> TurnTimer | None:
        return self._timer

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    def legal_moves(self) -> list[Move]:
        """Moves the side to move may play (what a UI lets the user drag)."""
        return self._state.legal_moves()

    # -- IGameController impl -----------------------------------------------

    def new_game(
        self,
        blue: IPlayer,
        yellow: IPlayer,
        turn_time_limit_s: float | None = None,
        board: Board | None = None,
        side_to_move: Side = Side.BLUE,
    ) -> None:
        self._players = {Side.BLUE: blue, Side.YELLOW: yellow}
        self._timer = TurnTimer(turn_time_limit_s) if turn_time_limit_s else None

        self._state = GameState(repetition_limit=self._state.repetition_limit)
        self._state.setup(board, side_to_move)
        _LOGGER.info("New game: %s (blue) vs %s (yellow)", blue.name, yellow.name)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if move not in self._state.legal_moves():
            _LOGGER.warning("Rejected illegal move %s for %s", move, self._state.side_to_move)
            return False

        if self._timer is not None and self._timer.is_running:
            self._timer.stop()
            if self._timer.is_expired():
                self._state.flag_fall(self._state.side_to_move)
                self._emit_game_over(self._state.result)
                return False

        record = self._state.apply_move(move)
        self._emit_move(move, record.text)

        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return True

        self._prompt_current_player()
        return True

    def check_timeout(self) -> bool:
        if self._state.is_game_over or self._timer is None:
            return False
        if not self._timer.is_running or not self._timer.is_expired():
            return False
        self._timer.stop()
        self._state.flag_fall(self._state.side_to_move)
        self._emit_game_over(self._state.result)
        return True

    def play_computer_turn(self) -> Move | None:
        """Search and play the computer's move synchronously.

        Returns the move played, or ``None`` when it is not the computer's
        turn or the computer has no move (the game is then lost for it).
        """
        cp = self.current_player
        if cp is None or cp.is_human or self._state.phase != GamePhase.THINKING:
            return None

        depth = cp.depth if isinstance(cp, AIPlayer) else CONFIG.search.medium_depth
        result = self._engine.search(
            self._state.board, cp.side, SearchLimits(max_depth=depth)
        )
        if result.best_move is None:
            self._state.declare_loss(cp.side, GameEndReason.NO_MOVES)
            self._emit_game_over(self._state.result)
            return None

        self.submit_move(result.best_move)
        return result.best_move

    # -- Internal helpers ---------------------------------------------------

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
            if self._timer is not None:
                self._timer.start(cp.side)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, move: Move, text: str) -> None:
        for cb in self.events.on_move:
            cb(move, text, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s (%s)", result.name, self._state.end_reason.name)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)


def new_computer_game(
    player_name: str,
    difficulty: Difficulty | str | None = None,
    human_side: Side = Side.BLUE,
    engine: IEngine | None = None,
) -> GameController:
    """Controller for a human-vs-computer game using configured defaults.

    The human is timed with ``CONFIG.game.turn_time_limit_s``. The caller
    drives the computer via :meth:`GameController.play_computer_turn`,
    waiting the computer player's ``move_delay_ms``
    (``CONFIG.game.ai_move_delay_ms``) before showing its move.
    """
    if difficulty is None:
        difficulty = CONFIG.game.default_difficulty
    if isinstance(difficulty, str):
        difficulty = Difficulty.parse(difficulty)

    human = HumanPlayer(human_side, player_name)
    computer = AIPlayer(
        human_side.opposite,
        difficulty,
        move_delay_ms=CONFIG.game.ai_move_delay_ms,
    )
    players = {human_side: human, human_side.opposite: computer}

    ctrl = GameController(engine)
    ctrl.new_game(
        blue=players[Side.BLUE],
        yellow=players[Side.YELLOW],
        turn_time_limit_s=CONFIG.game.turn_time_limit_s,
    )
    return ctrl
