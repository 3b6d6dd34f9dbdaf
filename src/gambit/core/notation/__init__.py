"""Notation package: FEN and SAN parsing and serialization."""

from gambit.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen
from gambit.core.notation.san import move_to_san, notate, parse_san

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "move_to_san",
    "notate",
    "parse_san",
]
