"""FEN parsing and serialization (placement and castling fields)."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# castling letter -> (color, rook home square)
_CASTLING_ROOKS: dict[str, tuple[Color, Square]] = {
    "K": (Color.WHITE, Square(7, 7)),
    "Q": (Color.WHITE, Square(7, 0)),
    "k": (Color.BLACK, Square(0, 7)),
    "q": (Color.BLACK, Square(0, 0)),
}
_KING_HOME: dict[Color, Square] = {
    Color.WHITE: Square(7, 4),
    Color.BLACK: Square(0, 4),
}
_PAWN_HOME_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def board_from_fen(fen: str) -> Board:
    """Parse a FEN string into a :class:`Board`.

    Only the placement field is required.  Side-to-move, en passant and
    clocks are ignored; the castling field, when present, decides which
    kings and rooks count as unmoved.  Without it, kings and rooks on
    their home squares are unmoved.  Pawns off their start row are moved.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    placement = parts[0]
    castling_part = parts[2] if len(parts) >= 3 else None
    rights = _parse_castling(castling_part, fen)

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")

    pieces: dict[Square, Piece] = {}
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                sq = Square(row, col)
                piece = Piece.from_char(ch)
                pieces[sq] = Piece(
                    piece.color, piece.piece_type, _has_moved(piece, sq, rights)
                )
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    return Board.from_pieces(pieces)


def board_to_fen(board: Board, side_to_move: Color = Color.WHITE) -> str:
    """Serialize *board* to a full FEN string (no en passant, fresh clocks)."""
    ranks: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)

    castling = "".join(
        letter
        for letter, (color, rook_sq) in _CASTLING_ROOKS.items()
        if _unmoved(board[_KING_HOME[color]], color, PieceType.KING)
        and _unmoved(board[rook_sq], color, PieceType.ROOK)
    )
    side = "w" if side_to_move == Color.WHITE else "b"
    return f"{'/'.join(ranks)} {side} {castling or '-'} - 0 1"


def _parse_castling(field: str | None, fen: str) -> set[str] | None:
    if field is None:
        return None
    if field == "-":
        return set()
    if any(ch not in _CASTLING_ROOKS for ch in field) or len(set(field)) != len(field):
        raise ValueError(f"Invalid FEN castling field: {field!r}")
    return set(field)


def _has_moved(piece: Piece, sq: Square, rights: set[str] | None) -> bool:
    color = piece.color
    pt = piece.piece_type

    if pt == PieceType.PAWN:
        return sq.row != _PAWN_HOME_ROW[color]

    if pt == PieceType.KING:
        if sq != _KING_HOME[color]:
            return True
        if rights is None:
            return False
        return not any(_CASTLING_ROOKS[letter][0] == color for letter in rights)

    if pt == PieceType.ROOK:
        for letter, (rook_color, rook_sq) in _CASTLING_ROOKS.items():
            if rook_color == color and rook_sq == sq:
                return rights is not None and letter not in rights
        return True

    return False


def _unmoved(piece: Piece | None, color: Color, piece_type: PieceType) -> bool:
    return (
        piece is not None
        and piece.color == color
        and piece.piece_type == piece_type
        and not piece.has_moved
    )
