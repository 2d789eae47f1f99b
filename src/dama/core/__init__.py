"""Core domain layer - pure Dama rules with zero external dependencies.

Quick start::

    from dama.core import Side, apply_move, create_initial_board, legal_moves

    board = create_initial_board()
    for move in legal_moves(board, Side.BLUE):
        print(move)
"""

from dama.core.board import Board
from dama.core.enums import GameResult, Rank, Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator, legal_moves
from dama.core.notation import (
    STARTING_DIAGRAM,
    board_from_diagram,
    board_to_diagram,
    parse_move,
)
from dama.core.piece import Piece
from dama.core.rules import Rules, apply_capture_step, apply_move, create_initial_board
from dama.core.types import (
    BOARD_SIZE,
    Cell,
    cell_name,
    is_on_board,
    parse_cell,
)

__all__ = [
    # Enums
    "GameResult",
    "Rank",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "cell_name",
    "is_on_board",
    "parse_cell",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply_capture_step",
    "apply_move",
    "create_initial_board",
    "legal_moves",
    # Notation
    "STARTING_DIAGRAM",
    "board_from_diagram",
    "board_to_diagram",
    "parse_move",
]
