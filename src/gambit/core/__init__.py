"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from gambit.core import initial_board, legal_moves, notate
    from gambit.core.types import E2

    board = initial_board()
    for to_sq in legal_moves(board, E2):
        print(notate(board, E2, to_sq, False, False))
"""

from gambit.core.board import Board, initial_board
from gambit.core.enums import Color, GameResult, PieceType
from gambit.core.executor import apply, apply_move
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator, legal_moves
from gambit.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    move_to_san,
    notate,
    parse_san,
)
from gambit.core.piece import Piece
from gambit.core.rules import Rules, is_check, is_checkmate
from gambit.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Operations
    "apply",
    "apply_move",
    "initial_board",
    "is_check",
    "is_checkmate",
    "legal_moves",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "move_to_san",
    "notate",
    "parse_san",
]
