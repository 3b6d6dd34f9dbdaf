"""High-level chess rules: check and checkmate."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult
from gambit.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy: stalemate, the fifty-move rule and repetition are not
    # detected. A stalemated side simply has no moves.

    @staticmethod
    def is_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_legal_moves(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_legal_move(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result (checkmate only)."""
        if Rules.is_checkmate(board, Color.WHITE):
            return GameResult.BLACK_WINS
        if Rules.is_checkmate(board, Color.BLACK):
            return GameResult.WHITE_WINS
        return GameResult.IN_PROGRESS


def is_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked?"""
    return Rules.is_check(board, color)


def is_checkmate(board: Board, color: Color) -> bool:
    """Is *color* in check with no legal move?"""
    return Rules.is_checkmate(board, color)
