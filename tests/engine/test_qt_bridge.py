"""Tests for Qt engine bridge worker."""

from __future__ import annotations

import pytest
from PyQt6.QtTest import QSignalSpy

from gambit.core.board import Board
from gambit.core.enums import Color
from gambit.core.move_generator import MoveGenerator
from gambit.core.types import D2, D4
from gambit.engine.qt_bridge import EngineWorker
from gambit.engine.search import Difficulty, MoveChoice, SearchResult
from gambit.engine.settings import EngineSettings


class _CancellingEngine:
    def __init__(self, worker: EngineWorker) -> None:
        self._worker = worker

    def search(self, board: Board, color: Color, depth: int) -> SearchResult:
        legal = MoveGenerator(board).all_legal_moves(color)
        self._worker.cancel()
        return SearchResult(best_move=legal[0], score=0.0, depth=depth, nodes=1)


class _NoMoveEngine:
    def search(self, board: Board, color: Color, depth: int) -> SearchResult:
        return SearchResult(best_move=None, score=-1000.0, depth=depth, nodes=1)


class _FailingEngine:
    def search(self, board: Board, color: Color, depth: int) -> SearchResult:
        raise RuntimeError("engine exploded")


@pytest.mark.usefixtures("qapp")
class TestEngineWorker:
    def test_emits_best_move(self) -> None:
        worker = EngineWorker(
            difficulty=Difficulty.EASY,
            settings=EngineSettings(random_move_rate=0.0),
        )
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Board.initial(), Color.WHITE, 5)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 5
        assert best_moves[0][1] == MoveChoice(D2, D4)

    def test_emits_cancelled_when_search_is_cancelled(self) -> None:
        worker = EngineWorker()
        worker._engine = _CancellingEngine(worker)

        cancelled = QSignalSpy(worker.search_cancelled)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Board.initial(), Color.WHITE, 7)

        assert len(cancelled) == 1
        assert cancelled[0][0] == 7
        assert len(best_moves) == 0

    def test_cancel_flag_resets_for_next_request(self) -> None:
        worker = EngineWorker(settings=EngineSettings(max_depth=1))
        worker.cancel()
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(Board.initial(), Color.WHITE, 8)

        assert len(best_moves) == 1

    def test_emits_no_move_when_search_returns_none(self) -> None:
        worker = EngineWorker()
        worker._engine = _NoMoveEngine()

        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), Color.WHITE, 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0
        assert len(errors) == 0

    def test_emits_error_when_search_raises(self) -> None:
        worker = EngineWorker()
        worker._engine = _FailingEngine()
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), Color.WHITE, 13)

        assert len(errors) == 1
        assert errors[0][0] == 13
        assert "exploded" in errors[0][1]

    def test_rejects_invalid_position(self) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a board", Color.WHITE, 3)

        assert len(errors) == 1
        assert errors[0][1] == "Engine received invalid position"

    def test_set_difficulty(self) -> None:
        worker = EngineWorker()
        assert worker.difficulty is Difficulty.MEDIUM
        worker.set_difficulty("hard")
        assert worker.difficulty is Difficulty.HARD
        with pytest.raises(ValueError):
            worker.set_difficulty("impossible")
