"""Turkish Dama rules engine, search engine and game session layer.

The four core operations::

    from dama import Side, apply_move, create_initial_board, legal_moves, select_move

    board = create_initial_board()
    board = apply_move(board, legal_moves(board, Side.BLUE)[0])
    reply = select_move(board, Side.YELLOW, depth=2)
"""

from dama.core import (
    Board,
    GameResult,
    Move,
    Piece,
    Rank,
    Side,
    apply_move,
    create_initial_board,
    legal_moves,
)
from dama.engine import select_move

__version__ = "1.0.0"

__all__ = [
    "Board",
    "GameResult",
    "Move",
    "Piece",
    "Rank",
    "Side",
    "apply_move",
    "create_initial_board",
    "legal_moves",
    "select_move",
]
