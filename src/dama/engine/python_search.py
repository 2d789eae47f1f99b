"""Pure-Python Dama search (minimax + alpha-beta + quiescence)."""

from __future__ import annotations

import logging

from dama.core.board import Board
from dama.core.enums import Side
from dama.core.move import Move
from dama.core.move_generator import MoveGenerator
from dama.core.rules import apply_move
from dama.engine.evaluation import evaluate
from dama.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 10_000_000
# Larger than any static evaluation, so a forced loss always ranks last.
LOSS_SCORE = 1_000_000


class MinimaxSearchEngine(IEngine):
    """Fixed-depth minimax searcher with a capture-only quiescence tail.

    The searching side maximises :func:`~dama.engine.evaluation.evaluate`
    from its own perspective, the opponent minimises it. Nothing is kept
    between searches except the node counter of the last one.
    """

    __slots__ = ("_nodes", "_root_side")

    def __init__(self) -> None:
        self._nodes = 0
        self._root_side = Side.YELLOW

    @property
    def nodes(self) -> int:
        return self._nodes

    def search(
        self,
        board: Board,
        side: Side,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        self._nodes = 0
        self._root_side = side

        root_moves = MoveGenerator(board).generate_legal_moves(side)
        if not root_moves:
            return SearchResult(None, -LOSS_SCORE, 0, self._nodes)

        score, move = self._search_root(board, root_moves, limits.max_depth)
        _LOGGER.debug(
            "%s searched depth %d: %s (score %d, %d nodes)",
            side,
            limits.max_depth,
            move,
            score,
            self._nodes,
        )
        return SearchResult(move, score, limits.max_depth, self._nodes)

    def _search_root(
        self,
        board: Board,
        root_moves: list[Move],
        depth: int,
    ) -> tuple[int, Move | None]:
        self._nodes += 1
        best_score = -_INF_SCORE
        best_move: Move | None = None
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for move in self._order_moves(root_moves):
            score = self._minimax(
                apply_move(board, move), depth - 1, alpha, beta, maximizing=False
            )
            if score > best_score:
                best_score = score
                best_move = move
            if score > alpha:
                alpha = score

        return best_score, best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        self._nodes += 1
        side = self._root_side if maximizing else self._root_side.opposite
        legal = MoveGenerator(board).generate_legal_moves(side)

        if not legal:
            return -LOSS_SCORE if maximizing else LOSS_SCORE

        if depth <= 0:
            return self._quiescence(board, alpha, beta, maximizing)

        if maximizing:
            best_score = -_INF_SCORE
            for move in self._order_moves(legal):
                score = self._minimax(
                    apply_move(board, move), depth - 1, alpha, beta, False
                )
                if score > best_score:
                    best_score = score
                if score > alpha:
                    alpha = score
                if alpha >= beta:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in self._order_moves(legal):
            score = self._minimax(apply_move(board, move), depth - 1, alpha, beta, True)
            if score < best_score:
                best_score = score
            if score < beta:
                beta = score
            if alpha >= beta:
                break
        return best_score

    def _quiescence(
        self,
        board: Board,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        """Capture-only search from a horizon node, bounded by stand-pat."""
        self._nodes += 1
        stand_pat = self._static_eval(board)
        side = self._root_side if maximizing else self._root_side.opposite

        if maximizing:
            if stand_pat >= beta:
                return beta
            if stand_pat > alpha:
                alpha = stand_pat
            for move in self._noisy_moves(board, side):
                score = self._quiescence(apply_move(board, move), alpha, beta, False)
                if score >= beta:
                    return beta
                if score > alpha:
                    alpha = score
            return alpha

        if stand_pat <= alpha:
            return alpha
        if stand_pat < beta:
            beta = stand_pat
        for move in self._noisy_moves(board, side):
            score = self._quiescence(apply_move(board, move), alpha, beta, True)
            if score <= alpha:
                return alpha
            if score < beta:
                beta = score
        return beta

    def _noisy_moves(self, board: Board, side: Side) -> list[Move]:
        legal = MoveGenerator(board).generate_legal_moves(side)
        return self._order_moves([m for m in legal if m.is_capture])

    def _order_moves(self, moves: list[Move]) -> list[Move]:
        """Longest capture chains first; stable, so ties keep generation order."""
        return sorted(moves, key=lambda move: move.capture_count, reverse=True)

    def _static_eval(self, board: Board) -> int:
        return evaluate(board, self._root_side)


def select_move(board: Board, side: Side, depth: int) -> Move | None:
    """Best move for *side* searched *depth* plies deep, or ``None`` if it cannot move."""
    return MinimaxSearchEngine().search(board, side, SearchLimits(max_depth=depth)).best_move
