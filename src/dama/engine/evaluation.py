"""Static position evaluation."""

from __future__ import annotations

from dama.core.board import Board
from dama.core.enums import Rank, Side
from dama.core.move_generator import MoveGenerator

KING_VALUE = 10_000
PAWN_VALUE = 1_000
ADVANCE_BONUS = 20  # per row travelled from the own edge
PROMOTION_ZONE_BONUS = 100  # pawn on the last three rows before promotion
CENTER_BONUS = 50
BACK_ROW_BONUS = 30
PAWN_COUNT_WEIGHT = 500
KING_COUNT_WEIGHT = 5_000
MOBILITY_WEIGHT = 10

_CENTER = range(2, 6)


def evaluate(board: Board, perspective: Side) -> int:
    """Score *board* from *perspective*'s point of view (positive = better).

    Pure: the board is only read.
    """
    score = 0
    pawns = {Side.BLUE: 0, Side.YELLOW: 0}
    kings = {Side.BLUE: 0, Side.YELLOW: 0}

    for piece in board:
        row, col = piece.row, piece.col
        if piece.rank == Rank.KING:
            value = KING_VALUE
            kings[piece.side] += 1
        else:
            value = PAWN_VALUE
            pawns[piece.side] += 1
            value += advancement(piece.side, row) * ADVANCE_BONUS
            if abs(piece.side.promotion_row - row) <= 2:
                value += PROMOTION_ZONE_BONUS

        if row in _CENTER and col in _CENTER:
            value += CENTER_BONUS
        if row == piece.side.back_row:
            value += BACK_ROW_BONUS

        score += value if piece.side == perspective else -value

    opponent = perspective.opposite
    score += (pawns[perspective] - pawns[opponent]) * PAWN_COUNT_WEIGHT
    score += (kings[perspective] - kings[opponent]) * KING_COUNT_WEIGHT

    gen = MoveGenerator(board)
    mobility = len(gen.generate_legal_moves(perspective)) - len(
        gen.generate_legal_moves(opponent)
    )
    score += mobility * MOBILITY_WEIGHT
    return score


def advancement(side: Side, row: int) -> int:
    """Rows travelled toward the promotion row, 0 on the own edge."""
    return row if side is Side.YELLOW else 7 - row
