"""SAN (Standard Algebraic Notation) conversion and parsing."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.executor import apply
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.types import Square, file_char, parse_square, rank_char, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_SAN_PIECE_REV: dict[str, PieceType] = {v: k for k, v in _SAN_PIECE.items()}


def notate(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    is_check_after: bool,
    is_mate_after: bool,
    promotion: PieceType | None = None,
) -> str:
    """Render a move in SAN given the *board* before the move.

    The caller supplies the check / mate state of the opponent after the
    move.  Returns ``""`` when *from_sq* is empty.
    """
    piece = board[from_sq]
    if piece is None:
        return ""

    # Castling
    if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        return "O-O" if to_sq.col > from_sq.col else "O-O-O"

    san = ""
    is_capture = board[to_sq] is not None

    if piece.piece_type != PieceType.PAWN:
        san += _SAN_PIECE[piece.piece_type]

        # Disambiguation
        ambiguous = _ambiguous_origins(board, from_sq, to_sq)
        if ambiguous:
            if all(sq.col != from_sq.col for sq in ambiguous):
                san += file_char(from_sq)
            elif all(sq.row != from_sq.row for sq in ambiguous):
                san += rank_char(from_sq)
            else:
                san += square_name(from_sq)

    if is_capture:
        if piece.piece_type == PieceType.PAWN:
            san += file_char(from_sq)
        san += "x"

    san += square_name(to_sq)

    if piece.piece_type == PieceType.PAWN and to_sq.row in (0, 7):
        san += "=" + _SAN_PIECE[promotion or PieceType.QUEEN]

    if is_mate_after:
        san += "#"
    elif is_check_after:
        san += "+"
    return san


def move_to_san(board: Board, move: Move) -> str:
    """Convert a legal *move* to SAN, working out the check suffix itself."""
    piece = board[move.from_sq]
    if piece is None:
        return ""

    opponent = piece.color.opposite
    gen_after = MoveGenerator(apply(board, move))
    in_check = gen_after.is_in_check(opponent)
    mated = in_check and not gen_after.has_legal_move(opponent)
    return notate(board, move.from_sq, move.to_sq, in_check, mated, move.promotion)


def parse_san(board: Board, san: str, color: Color) -> Move:
    """Parse a SAN string into a legal :class:`Move` for *color*."""
    gen = MoveGenerator(board)
    legal = gen.all_legal_moves(color)

    clean = san.strip().rstrip("+#!?")

    # Castling
    if clean in ("O-O", "0-0", "O-O-O", "0-0-0"):
        step = 2 if clean in ("O-O", "0-0") else -2
        for m in legal:
            p = board[m.from_sq]
            if (
                p is not None
                and p.piece_type == PieceType.KING
                and m.to_sq.col - m.from_sq.col == step
            ):
                return m
        raise ValueError(f"Illegal move: {san}")

    # Promotion
    promotion: PieceType | None = None
    if "=" in clean:
        clean, _, promo_char = clean.partition("=")
        if promo_char not in _SAN_PIECE_REV or promo_char == "K":
            raise ValueError(f"Invalid promotion piece in {san!r}")
        promotion = _SAN_PIECE_REV[promo_char]

    if len(clean) < 2:
        raise ValueError(f"Invalid SAN: {san!r}")

    # Destination (last two chars)
    to_sq = parse_square(clean[-2:])
    clean = clean[:-2]

    # Capture marker
    if clean.endswith("x"):
        clean = clean[:-1]

    # Piece type
    if clean and clean[0] in _SAN_PIECE_REV:
        piece_type = _SAN_PIECE_REV[clean[0]]
        clean = clean[1:]
    else:
        piece_type = PieceType.PAWN

    # Disambiguation
    from_col: int | None = None
    from_row: int | None = None
    for ch in clean:
        if ch in "abcdefgh":
            from_col = ord(ch) - ord("a")
        elif ch in "12345678":
            from_row = 8 - int(ch)
        else:
            raise ValueError(f"Invalid SAN: {san!r}")

    candidates: list[Move] = []
    for m in legal:
        p = board[m.from_sq]
        if p is None or p.piece_type != piece_type:
            continue
        if m.to_sq != to_sq:
            continue
        if from_col is not None and m.from_sq.col != from_col:
            continue
        if from_row is not None and m.from_sq.row != from_row:
            continue
        candidates.append(m)

    if len(candidates) > 1:
        raise ValueError(f"Ambiguous move: {san} → {[str(m) for m in candidates]}")
    if not candidates:
        raise ValueError(f"Illegal move: {san}")

    move = candidates[0]
    if promotion is not None:
        if move.promotion is None:
            raise ValueError(f"Illegal move: {san}")
        move = Move(move.from_sq, move.to_sq, promotion)
    return move


def _ambiguous_origins(board: Board, from_sq: Square, to_sq: Square) -> list[Square]:
    """Other same-type, same-colour pieces that can also legally reach *to_sq*."""
    piece = board[from_sq]
    if piece is None:
        return []
    gen = MoveGenerator(board)
    return [
        sq
        for sq in board.pieces(piece.color, piece.piece_type)
        if sq != from_sq and to_sq in gen.legal_moves(sq)
    ]
