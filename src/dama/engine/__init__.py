"""Dama engine package: evaluation, minimax search and Qt worker bridge.

The Qt bridge lives in :mod:`dama.engine.qt_bridge` and is not imported
here, so the search runs without loading Qt.
"""

from dama.engine.evaluation import evaluate
from dama.engine.python_search import LOSS_SCORE, MinimaxSearchEngine, select_move
from dama.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "IEngine",
    "LOSS_SCORE",
    "MinimaxSearchEngine",
    "SearchLimits",
    "SearchResult",
    "evaluate",
    "select_move",
]
