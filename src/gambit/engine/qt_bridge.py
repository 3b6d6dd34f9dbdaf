"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import random
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.engine.minimax import MinimaxEngine, select_move
from gambit.engine.search import Difficulty
from gambit.engine.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move it to a ``QThread`` and connect a queued signal to
    :meth:`request_move`.  The search itself cannot be interrupted;
    :meth:`cancel` only marks the running request so its result is
    dropped.
    """

    best_move_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(
        self,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        settings: EngineSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._engine = MinimaxEngine()
        self._difficulty = difficulty
        self._settings = settings or EngineSettings()
        self._rng = rng or random.Random()
        self._cancel_event = threading.Event()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @pyqtSlot(object, object, int)
    def request_move(self, board_obj: object, color_obj: object, request_id: int) -> None:
        """Search for *color_obj*'s move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board) or not isinstance(color_obj, Color):
            self.search_error.emit(request_id, "Engine received invalid position")
            return

        self._cancel_event.clear()
        try:
            choice = select_move(
                board_obj,
                color_obj,
                self._difficulty,
                rng=self._rng,
                settings=self._settings,
                engine=self._engine,
            )
        except Exception as exc:
            _LOGGER.warning("Engine search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if choice is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, choice)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the result of the search currently running."""
        self._cancel_event.set()

    @pyqtSlot(str)
    def set_difficulty(self, name: str) -> None:
        """Change the difficulty for subsequent searches."""
        self._difficulty = Difficulty.parse(name)
