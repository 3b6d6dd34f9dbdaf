"""Game state machine: tracks turns, phase transitions and move history."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import IntEnum, auto

from gambit.core.board import Board
from gambit.core.enums import Color, GameResult, PieceType
from gambit.core.executor import apply_move
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.notation import board_from_fen, notate, parse_san
from gambit.core.piece import Piece
from gambit.core.types import Square, square_name
from gambit.engine.minimax import select_move
from gambit.engine.search import Difficulty
from gambit.engine.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None
    san: str
    board_after: Board
    was_check: bool = False
    was_checkmate: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: turn, phase, result and move history.

    This is a pure data/logic class with no threading or UI.  Unlike the
    core functions it enforces turn order and move legality.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_board: Board = field(default_factory=Board.initial, init=False)
    start_side: Color = field(default=Color.WHITE, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None, side_to_move: Color | None = None) -> None:
        """Initialise (or reset) the game.

        The side to move comes from *side_to_move*, else the FEN's second
        field, else white.
        """
        self.start_board = board_from_fen(fen) if fen else Board.initial()
        if side_to_move is None:
            parts = fen.split() if fen else []
            side_to_move = Color.BLACK if len(parts) > 1 and parts[1] == "b" else Color.WHITE
        self.start_side = side_to_move
        self.board = self.start_board
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def play(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> MoveRecord:
        """Validate and apply a move for the side to move."""
        if self.phase == GamePhase.NOT_STARTED:
            self.setup()
        if self.phase == GamePhase.GAME_OVER:
            raise ValueError("Game is over")

        piece = self.board[from_sq]
        if piece is None or piece.color != self.side_to_move:
            raise ValueError(
                f"No {self.side_to_move} piece on {square_name(from_sq)}"
            )
        if to_sq not in MoveGenerator(self.board).legal_moves(from_sq):
            raise ValueError(
                f"Illegal move: {square_name(from_sq)}{square_name(to_sq)}"
            )
        if promotion in (PieceType.PAWN, PieceType.KING):
            raise ValueError(f"Cannot promote to {promotion}")
        if piece.piece_type == PieceType.PAWN and to_sq.row == piece.color.promotion_rank:
            promotion = promotion or PieceType.QUEEN
        else:
            promotion = None

        captured = self.board[to_sq]
        board_after = apply_move(self.board, from_sq, to_sq, promotion)

        opponent = self.side_to_move.opposite
        gen_after = MoveGenerator(board_after)
        was_check = gen_after.is_in_check(opponent)
        was_checkmate = was_check and not gen_after.has_legal_move(opponent)
        san = notate(self.board, from_sq, to_sq, was_check, was_checkmate, promotion)

        record = MoveRecord(
            move=Move(from_sq, to_sq, promotion),
            piece=piece,
            captured=captured,
            san=san,
            board_after=board_after,
            was_check=was_check,
            was_checkmate=was_checkmate,
        )
        self.move_history.append(record)
        self.board = board_after
        self.side_to_move = opponent
        _LOGGER.debug("ply %d: %s", self.ply_count, san)

        self._check_game_over()
        return record

    def play_move(self, move: Move) -> MoveRecord:
        return self.play(move.from_sq, move.to_sq, move.promotion)

    def play_san(self, san: str) -> MoveRecord:
        """Parse *san* for the side to move and play it."""
        return self.play_move(parse_san(self.board, san, self.side_to_move))

    def engine_move(
        self,
        difficulty: Difficulty,
        rng: random.Random | None = None,
        settings: EngineSettings | None = None,
    ) -> MoveRecord | None:
        """Let the engine play for the side to move. ``None`` if it has no move."""
        if self.phase == GamePhase.GAME_OVER:
            raise ValueError("Game is over")
        choice = select_move(
            self.board, self.side_to_move, difficulty, rng=rng, settings=settings
        )
        if choice is None:
            return None
        return self.play_move(choice.as_move())

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None
        record = self.move_history[-1]
        self.truncate(len(self.move_history) - 2)
        return record.move

    def truncate(self, index: int) -> None:
        """Keep history up to and including *index* (``-1`` clears it)."""
        if not -1 <= index < len(self.move_history):
            raise IndexError(f"No move at index {index}")
        del self.move_history[index + 1 :]
        self.board = self.board_at(index)
        self.side_to_move = (
            self.start_side if len(self.move_history) % 2 == 0 else self.start_side.opposite
        )
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self._check_game_over()

    # ── Query helpers ────────────────────────────────────────────────────

    def board_at(self, index: int) -> Board:
        """Board after the move at *index*; ``-1`` is the starting board."""
        if index == -1:
            return self.start_board
        return self.move_history[index].board_after

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def in_check(self) -> bool:
        """Whether the side to move is in check."""
        return MoveGenerator(self.board).is_in_check(self.side_to_move)

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).all_legal_moves(self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        gen = MoveGenerator(self.board)
        side = self.side_to_move
        if gen.is_in_check(side) and not gen.has_legal_move(side):
            self.result = (
                GameResult.BLACK_WINS if side == Color.WHITE else GameResult.WHITE_WINS
            )
            self.phase = GamePhase.GAME_OVER
