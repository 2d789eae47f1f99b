"""Move application and high-level game rules."""

from __future__ import annotations

import logging

from dama.core.board import Board
from dama.core.enums import GameResult, Rank, Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator

_LOGGER = logging.getLogger(__name__)


def create_initial_board() -> Board:
    """Standard starting position."""
    return Board.initial()


def apply_move(board: Board, move: Move) -> Board:
    """Return the board that results from playing *move* on *board*.

    *board* itself is left untouched. Captured pieces are removed jump by
    jump and a pawn is promoted on whichever landing reaches its far row.
    A move whose origin is empty yields *board* unchanged.
    """
    return _play(board, move, jumps=move.capture_count)


def apply_capture_step(board: Board, move: Move, index: int) -> Board:
    """Board after the first ``index + 1`` jumps of capture *move*.

    Lets a UI animate a chain one landing at a time; the last step equals
    :func:`apply_move`.
    """
    if not move.is_capture:
        raise ValueError(f"Move {move} is not a capture")
    if not 0 <= index < move.capture_count:
        raise ValueError(f"Capture step {index} out of range for {move}")
    return _play(board, move, jumps=index + 1)


def _play(board: Board, move: Move, jumps: int) -> Board:
    piece = board[move.from_cell]
    if piece is None:
        _LOGGER.debug("No piece on %s, ignoring move %s", move.from_cell, move)
        return board

    new_board = board.copy()
    new_board[move.from_cell] = None

    if move.path is None or move.captures is None:
        piece = piece.moved_to(move.to_cell)
        new_board[move.to_cell] = piece
        return new_board

    for landing, captured in zip(move.path[:jumps], move.captures[:jumps]):
        new_board[captured] = None
        piece = piece.moved_to(landing)
    new_board[piece.cell] = piece
    return new_board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def has_legal_moves(board: Board, side: Side) -> bool:
        return bool(MoveGenerator(board).generate_legal_moves(side))

    @staticmethod
    def is_loss(board: Board, side: Side) -> bool:
        """A side that cannot move (no pieces or all blocked) has lost."""
        return not Rules.has_legal_moves(board, side)

    @staticmethod
    def count_pieces(board: Board, side: Side) -> tuple[int, int]:
        """``(pawns, kings)`` owned by *side*."""
        return board.count(side, Rank.PAWN), board.count(side, Rank.KING)

    @staticmethod
    def game_result(board: Board, side_to_move: Side) -> GameResult:
        """Result by position alone; repetition and timeouts live in the game layer."""
        if Rules.is_loss(board, side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.IN_PROGRESS
