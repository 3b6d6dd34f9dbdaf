"""Static position evaluation (positive favours white)."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move_generator import MoveGenerator

PIECE_VALUES: dict[PieceType, float] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}

CHECKMATE_SCORE = 1000.0
CHECK_PENALTY = 0.5
CENTER_BONUS = 0.3
INNER_RING_BONUS = 0.1

# rows/cols 2..5 form the centre block; 3..4 are the four central squares.
_CENTER_BLOCK = range(2, 6)
_CENTER_CORE = (3, 4)


def _center_bonus(row: int, col: int) -> float:
    if row not in _CENTER_BLOCK or col not in _CENTER_BLOCK:
        return 0.0
    if row in _CENTER_CORE and col in _CENTER_CORE:
        return CENTER_BONUS
    return INNER_RING_BONUS


def evaluate(board: Board) -> float:
    """Material plus centre control, overridden by mate and nudged by check.

    A checkmated side scores exactly ``∓CHECKMATE_SCORE`` whatever the
    material balance.
    """
    score = 0.0
    for sq, piece in board:
        value = PIECE_VALUES[piece.piece_type] + _center_bonus(sq.row, sq.col)
        score += value if piece.color == Color.WHITE else -value

    gen = MoveGenerator(board)
    white_in_check = gen.is_in_check(Color.WHITE)
    black_in_check = gen.is_in_check(Color.BLACK)

    if white_in_check and not gen.has_legal_move(Color.WHITE):
        return -CHECKMATE_SCORE
    if black_in_check and not gen.has_legal_move(Color.BLACK):
        return CHECKMATE_SCORE
    if white_in_check:
        score -= CHECK_PENALTY
    elif black_in_check:
        score += CHECK_PENALTY
    return score
