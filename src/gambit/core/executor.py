"""Move execution: derive the board that follows a move."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square

# kingside? -> (rook origin col, rook destination col)
_CASTLE_ROOK_COLS: dict[bool, tuple[int, int]] = {
    True: (7, 5),
    False: (0, 3),
}


def apply_move(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> Board:
    """Return the board after moving the piece on *from_sq* to *to_sq*.

    Handles the castling rook, pawn promotion (queen unless *promotion*
    says otherwise) and the ``has_moved`` flag.  An empty *from_sq* yields
    *board* itself.  Legality is the caller's concern.
    """
    piece = board[from_sq]
    if piece is None:
        return board

    changes: dict[Square, Piece | None] = {}

    if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        rook_from_col, rook_to_col = _CASTLE_ROOK_COLS[to_sq.col > from_sq.col]
        rook = board[Square(to_sq.row, rook_from_col)]
        changes[Square(to_sq.row, rook_from_col)] = None
        changes[Square(to_sq.row, rook_to_col)] = rook.moved() if rook else None

    if piece.piece_type == PieceType.PAWN and to_sq.row in (0, 7):
        piece = piece.promoted(promotion or PieceType.QUEEN)

    changes[from_sq] = None
    changes[to_sq] = piece.moved()
    return board.replace(changes)


def apply(board: Board, move: Move) -> Board:
    """Apply a :class:`Move` value."""
    return apply_move(board, move.from_sq, move.to_sq, move.promotion)
