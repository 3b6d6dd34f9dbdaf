"""Pure-Python chess engine search (minimax + alpha-beta)."""

from __future__ import annotations

import logging
import math
import random

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.executor import apply
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.rules import Rules
from gambit.engine.evaluator import evaluate
from gambit.engine.search import Difficulty, IEngine, MoveChoice, SearchResult
from gambit.engine.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Fixed-depth minimax with alpha-beta pruning.

    White maximises and black minimises the :func:`evaluate` score.  Moves
    are tried in board-scan order and only a strictly better score replaces
    the incumbent, so ties go to the first move found.  There is no
    cancellation or time limit: a search always runs to completion.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    def search(self, board: Board, color: Color, depth: int) -> SearchResult:
        if depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        score, move = self._minimax(board, depth, -math.inf, math.inf, color)
        _LOGGER.debug(
            "search %s depth=%d nodes=%d score=%.2f move=%s",
            color,
            depth,
            self._nodes,
            score,
            move,
        )
        return SearchResult(move, score, depth, self._nodes)

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        color: Color,
    ) -> tuple[float, Move | None]:
        self._nodes += 1

        if (
            depth == 0
            or Rules.is_checkmate(board, Color.WHITE)
            or Rules.is_checkmate(board, Color.BLACK)
        ):
            return evaluate(board), None

        moves = MoveGenerator(board).all_legal_moves(color)
        if not moves:
            return evaluate(board), None

        maximizing = color == Color.WHITE
        best_score = -math.inf if maximizing else math.inf
        best_move: Move | None = None

        for move in moves:
            score, _ = self._minimax(
                apply(board, move), depth - 1, alpha, beta, color.opposite
            )

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, best_score)

            if beta <= alpha:
                break

        return best_score, best_move


def select_move(
    board: Board,
    color: Color,
    difficulty: Difficulty,
    rng: random.Random | None = None,
    settings: EngineSettings | None = None,
    engine: IEngine | None = None,
) -> MoveChoice | None:
    """Pick the computer's move for *color*, or ``None`` if it has none.

    On :attr:`Difficulty.EASY` the engine plays a uniformly random legal
    move with probability ``settings.random_move_rate``.  Pass *rng* to make
    that choice reproducible.
    """
    settings = settings or EngineSettings()

    if difficulty == Difficulty.EASY:
        rng = rng or random.Random()
        if rng.random() < settings.random_move_rate:
            candidates = MoveGenerator(board).all_legal_moves(color)
            if candidates:
                move = rng.choice(candidates)
                _LOGGER.debug("random %s move %s", color, move)
                return _to_choice(board, move)

    engine = engine or MinimaxEngine()
    result = engine.search(board, color, settings.depth_for(difficulty))
    if result.best_move is None:
        return None
    return _to_choice(board, result.best_move)


def _to_choice(board: Board, move: Move) -> MoveChoice:
    piece = board[move.from_sq]
    promotes = (
        piece is not None
        and piece.piece_type == PieceType.PAWN
        and move.to_sq.row == piece.color.promotion_rank
    )
    return MoveChoice(move.from_sq, move.to_sq, promotes)
