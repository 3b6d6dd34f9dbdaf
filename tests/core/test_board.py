"""Tests for Board."""

import pytest

from gambit.core.board import Board, initial_board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    @pytest.mark.parametrize(
        ("piece_type", "total"),
        [
            (PieceType.PAWN, 16),
            (PieceType.ROOK, 4),
            (PieceType.KNIGHT, 4),
            (PieceType.BISHOP, 4),
            (PieceType.QUEEN, 2),
            (PieceType.KING, 2),
        ],
    )
    def test_piece_counts(self, piece_type: PieceType, total: int) -> None:
        board = initial_board()
        assert board.count(Color.WHITE, piece_type) + board.count(
            Color.BLACK, piece_type
        ) == total

    def test_mirrored_across_colors(self) -> None:
        board = Board.initial()
        for sq, piece in board:
            mirror = board[Square(7 - sq.row, sq.col)]
            assert mirror is not None
            assert mirror.piece_type == piece.piece_type
            assert mirror.color == piece.color.opposite

    def test_pieces_start_unmoved(self) -> None:
        assert all(not piece.has_moved for _, piece in Board.initial())

    def test_middle_empty(self) -> None:
        board = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert board.is_empty(Square(row, col))


class TestBoardQueries:
    def test_pieces_row_major(self) -> None:
        pawns = Board.initial().pieces(Color.WHITE, PieceType.PAWN)
        assert pawns == [Square(6, col) for col in range(8)]

    def test_pieces_of_color(self) -> None:
        assert len(Board.initial().pieces(Color.BLACK)) == 16

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Color.WHITE) == E1
        assert board.find_king(Color.BLACK) == E8

    def test_find_king_missing(self) -> None:
        assert Board.empty().find_king(Color.WHITE) is None

    def test_off_board_raises(self) -> None:
        with pytest.raises(IndexError):
            Board.initial()[Square(8, 0)]

    def test_wrong_cell_count_raises(self) -> None:
        with pytest.raises(ValueError):
            Board((None,) * 10)


class TestBoardValue:
    def test_replace_returns_new_board(self) -> None:
        board = Board.initial()
        pawn = board[E2]
        moved = board.replace({E2: None, E4: pawn})
        assert moved[E4] == pawn
        assert moved.is_empty(E2)
        assert board[E2] == pawn
        assert board.is_empty(E4)

    def test_equality_and_hash(self) -> None:
        a = Board.initial()
        b = Board.initial()
        assert a == b
        assert hash(a) == hash(b)
        assert a != a.replace({E2: None})

    def test_from_pieces(self) -> None:
        king = Piece(Color.WHITE, PieceType.KING)
        board = Board.from_pieces({E1: king})
        assert board[E1] == king
        assert len(list(board)) == 1

    def test_repr(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
