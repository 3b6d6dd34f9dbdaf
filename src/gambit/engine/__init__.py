"""Chess engine package: evaluation, minimax search and Qt worker bridge.

The Qt bridge is imported from :mod:`gambit.engine.qt_bridge` directly so
that the search itself stays usable without PyQt6 loaded.
"""

from gambit.engine.evaluator import evaluate
from gambit.engine.minimax import MinimaxEngine, select_move
from gambit.engine.search import Difficulty, IEngine, MoveChoice, SearchResult
from gambit.engine.settings import EngineSettings

__all__ = [
    "Difficulty",
    "EngineSettings",
    "IEngine",
    "MinimaxEngine",
    "MoveChoice",
    "SearchResult",
    "evaluate",
    "select_move",
]
