"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from dama.core.board import Board
from dama.core.enums import Side
from dama.engine.python_search import MinimaxSearchEngine
from dama.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and invoke :meth:`request_move` through a queued
    signal; results come back on the signals below, tagged with the request
    id so the receiver can drop answers to requests it no longer cares about.
    The search itself always runs to completion.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_engine", "_limits")

    def __init__(self, *, max_depth: int = 5) -> None:
        super().__init__()
        self._engine = MinimaxSearchEngine()
        self._limits = SearchLimits(max_depth=max_depth)

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, side_obj: object, request_id: int) -> None:
        """Search for *side_obj*'s best move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board) or not isinstance(side_obj, Side):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        try:
            result = self._engine.search(board_obj, side_obj, self._limits)
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
