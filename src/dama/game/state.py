"""Game state machine - tracks phase transitions, history and repetitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dama.core.board import Board
from dama.core.enums import GameResult, Side
from dama.core.move_generator import MoveGenerator
from dama.core.rules import Rules, apply_move
from dama.game.interfaces import GameEndReason, GamePhase

if TYPE_CHECKING:
    from dama.core.move import Move


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    side: Side
    text: str
    board_after: Board
    captured: int = 0


@dataclass
class GameState:
    """Manages game lifecycle: board, phase, result, history, repetitions.

    This is a pure data/logic class - no threading, no UI. Prior boards are
    kept in :attr:`move_history` only; nothing is persisted.
    """

    repetition_limit: int = 3
    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Side = field(default=Side.BLUE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason = field(default=GameEndReason.NONE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _key_counts: dict[str, int] = field(default_factory=dict, init=False, repr=False)

    # -- Initialisation -----------------------------------------------------

    def setup(self, board: Board | None = None, side_to_move: Side = Side.BLUE) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.move_history.clear()
        self._key_counts.clear()
        self._check_game_over(mover=None)

    # -- Move application ---------------------------------------------------

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for the legality check.
        """
        mover = self.side_to_move
        self.board = apply_move(self.board, move)
        self.side_to_move = mover.opposite

        record = MoveRecord(
            move=move,
            side=mover,
            text=str(move),
            board_after=self.board,
            captured=move.capture_count,
        )
        self.move_history.append(record)

        key = self.board.key()
        self._key_counts[key] = self._key_counts.get(key, 0) + 1

        self._check_game_over(mover=mover)
        return record

    # -- Terminal transitions -----------------------------------------------

    def flag_fall(self, side: Side) -> None:
        """Time ran out for *side*."""
        self.declare_loss(side, GameEndReason.TIMEOUT)

    def declare_loss(self, side: Side, reason: GameEndReason) -> None:
        self._finish(GameResult.win_for(side.opposite), reason)

    # -- Query helpers ------------------------------------------------------

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1].move if self.move_history else None

    def repetition_count(self) -> int:
        """How many times the current board occurred after a move."""
        return self._key_counts.get(self.board.key(), 0)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        if self.is_game_over:
            return []
        return MoveGenerator(self.board).generate_legal_moves(self.side_to_move)

    # -- Internal -----------------------------------------------------------

    def _check_game_over(self, mover: Side | None) -> None:
        if mover is not None and self.repetition_count() >= self.repetition_limit:
            self._finish(GameResult.DRAW, GameEndReason.REPETITION)
            return
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self._finish(result, GameEndReason.NO_MOVES)

    def _finish(self, result: GameResult, reason: GameEndReason) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
