"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (dr, dc) in row/col space; row 0 is the top of the board.
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.ROOK: ROOK_DIRS,
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

_ORTHOGONAL_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)
_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)


class MoveGenerator:
    """Generates legal moves and answers attack queries for a :class:`Board`.

    Legality is decided by simulation: every pseudo-legal destination is
    played on a fresh board and dropped if the mover's king is attacked
    afterwards.  The wrapped board is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Square]:
        """Legal destinations for the piece on *sq* (empty if none)."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_moves(sq)
            if not self.leaves_king_attacked(sq, to_sq)
        ]

    def pseudo_legal_moves(self, sq: Square) -> list[Square]:
        """Destinations matching the raw movement pattern of the piece on *sq*."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_stepping(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif pt == PieceType.KING:
            self._gen_stepping(sq, piece.color, KING_OFFSETS, moves)
            self._gen_castling(sq, piece, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDER_DIRS[pt], moves)
        return moves

    def all_legal_moves(self, color: Color) -> list[Move]:
        """Every legal move for *color*: board scan order, then per-piece order.

        Pawn moves onto the last rank promote to a queen.
        """
        moves: list[Move] = []
        for from_sq in self._board.pieces(color):
            piece = self._board[from_sq]
            promotes = piece is not None and piece.piece_type == PieceType.PAWN
            for to_sq in self.legal_moves(from_sq):
                if promotes and to_sq.row == color.promotion_rank:
                    moves.append(Move(from_sq, to_sq, PieceType.QUEEN))
                else:
                    moves.append(Move(from_sq, to_sq))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has at least one legal move (stops at the first)."""
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    def leaves_king_attacked(self, from_sq: Square, to_sq: Square) -> bool:
        """Would moving *from_sq* → *to_sq* leave the mover's king attacked?

        Only the moving piece is relocated; castling rooks stay put.
        """
        board = self._board
        piece = board[from_sq]
        if piece is None:
            return False

        after = board.replace({to_sq: piece, from_sq: None})
        if piece.piece_type == PieceType.KING:
            king_sq: Square | None = to_sq
        else:
            king_sq = after.find_king(piece.color)
        if king_sq is None:
            return False
        return MoveGenerator(after).is_square_attacked(king_sq, piece.color.opposite)

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        board = self._board

        # A pawn of by_color attacks sq from one row "behind" it.
        pawn_row = -by_color.forward
        for dc in (-1, 1):
            src = sq.offset(pawn_row, dc)
            if src is not None and _is(board[src], by_color, PieceType.PAWN):
                return True

        for dr, dc in KNIGHT_OFFSETS:
            src = sq.offset(dr, dc)
            if src is not None and _is(board[src], by_color, PieceType.KNIGHT):
                return True

        for dr, dc in KING_OFFSETS:
            src = sq.offset(dr, dc)
            if src is not None and _is(board[src], by_color, PieceType.KING):
                return True

        return self._ray_attacked(
            sq, by_color, ROOK_DIRS, _ORTHOGONAL_ATTACKERS
        ) or self._ray_attacked(sq, by_color, BISHOP_DIRS, _DIAGONAL_ATTACKERS)

    def _ray_attacked(
        self,
        sq: Square,
        by_color: Color,
        directions: tuple[tuple[int, int], ...],
        attackers: tuple[PieceType, ...],
    ) -> bool:
        board = self._board
        for dr, dc in directions:
            cur = sq.offset(dr, dc)
            while cur is not None:
                piece = board[cur]
                if piece is not None:
                    if piece.color == by_color and piece.piece_type in attackers:
                        return True
                    break
                cur = cur.offset(dr, dc)
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        forward = piece.color.forward

        one_step = sq.offset(forward, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if not piece.has_moved:
                two_step = sq.offset(2 * forward, 0)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(two_step)

        for dc in (-1, 1):
            cap_sq = sq.offset(forward, dc)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.append(cap_sq)

    def _gen_stepping(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for dr, dc in offsets:
            to_sq = sq.offset(dr, dc)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for dr, dc in directions:
            to_sq = sq.offset(dr, dc)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(dr, dc)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_castling(self, king_sq: Square, king: Piece, moves: list[Square]) -> None:
        if king.has_moved:
            return

        # Kingside first, then queenside.
        for rook_col, step in ((7, 1), (0, -1)):
            if self._can_castle(king_sq, king, rook_col, step):
                moves.append(Square(king_sq.row, king_sq.col + 2 * step))

    def _can_castle(self, king_sq: Square, king: Piece, rook_col: int, step: int) -> bool:
        board = self._board
        row = king_sq.row
        rook = board[Square(row, rook_col)]
        if (
            rook is None
            or rook.piece_type != PieceType.ROOK
            or rook.color != king.color
            or rook.has_moved
        ):
            return False

        low, high = sorted((king_sq.col, rook_col))
        if any(not board.is_empty(Square(row, col)) for col in range(low + 1, high)):
            return False

        transit = king_sq.offset(0, step)
        destination = king_sq.offset(0, 2 * step)
        if transit is None or destination is None:
            return False

        return (
            not self.is_in_check(king.color)
            and not self.leaves_king_attacked(king_sq, transit)
            and not self.leaves_king_attacked(king_sq, destination)
        )


def _is(piece: Piece | None, color: Color, piece_type: PieceType) -> bool:
    return piece is not None and piece.color == color and piece.piece_type == piece_type


def legal_moves(board: Board, sq: Square) -> list[Square]:
    """Legal destinations for the piece on *sq*."""
    return MoveGenerator(board).legal_moves(sq)
