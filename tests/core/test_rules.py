"""Tests for Rules: check and checkmate."""

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult
from gambit.core.executor import apply_move
from gambit.core.notation import board_from_fen
from gambit.core.rules import Rules, is_check, is_checkmate
from gambit.core.types import D1, D2, D4, D8, E2, E4, E5, E7, F2, F3, F6, F7, G2, G4, G5, G7, H4, H5


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not is_check(Board.initial(), Color.WHITE)
        assert not is_check(Board.initial(), Color.BLACK)

    def test_fools_mate_in_check(self, fools_mate: Board) -> None:
        assert is_check(fools_mate, Color.WHITE)
        assert not is_check(fools_mate, Color.BLACK)

    def test_missing_king_is_not_check(self) -> None:
        assert not is_check(Board.empty(), Color.WHITE)


class TestCheckmate:
    def test_fools_mate(self, fools_mate: Board) -> None:
        assert is_checkmate(fools_mate, Color.WHITE)
        assert Rules.game_result(fools_mate) == GameResult.BLACK_WINS

    def test_scripted_fools_mate(self) -> None:
        board = Board.initial()
        for from_sq, to_sq in ((F2, F3), (E7, E5), (G2, G4), (D8, H4)):
            board = apply_move(board, from_sq, to_sq)
        assert is_checkmate(board, Color.WHITE)

    def test_scripted_mate_of_black(self) -> None:
        board = Board.initial()
        for from_sq, to_sq in ((E2, E4), (F7, F6), (D2, D4), (G7, G5), (D1, H5)):
            board = apply_move(board, from_sq, to_sq)
        assert is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board) == GameResult.WHITE_WINS

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert is_checkmate(board, Color.BLACK)

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert is_check(board, Color.WHITE)
        assert not is_checkmate(board, Color.WHITE)

    def test_not_checkmate_when_can_block(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/5PPP/r5K1 w - - 0 1")
        assert is_checkmate(board, Color.WHITE)
        blocked = board_from_fen("4k3/8/8/8/8/8/5PPP/r4RK1 w - - 0 1")
        assert not is_check(blocked, Color.WHITE)
        interposable = board_from_fen("4k3/8/8/8/8/8/2R2PPP/r5K1 w - - 0 1")
        assert not is_checkmate(interposable, Color.WHITE)

    def test_checkmate_requires_check(self) -> None:
        board = Board.initial()
        assert not is_checkmate(board, Color.WHITE)

    def test_checkmate_iff_check_and_no_moves(self, fools_mate: Board) -> None:
        for board in (Board.initial(), fools_mate):
            for color in Color:
                assert is_checkmate(board, color) == (
                    is_check(board, color) and not Rules.has_legal_moves(board, color)
                )


class TestStalemateGap:
    def test_stalemate_is_not_reported(self) -> None:
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert not is_check(board, Color.BLACK)
        assert not Rules.has_legal_moves(board, Color.BLACK)
        assert not is_checkmate(board, Color.BLACK)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS


class TestGameResult:
    def test_in_progress_at_start(self) -> None:
        assert Rules.game_result(Board.initial()) == GameResult.IN_PROGRESS

    def test_after_e4(self) -> None:
        board = apply_move(Board.initial(), E2, E4)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS
