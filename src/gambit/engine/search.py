"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from gambit.core.enums import PieceType
from gambit.core.move import Move
from gambit.core.types import Square

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.enums import Color


class Difficulty(Enum):
    """Computer opponent strength; the value is the search depth in plies."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def depth(self) -> int:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Difficulty:
        """Look up a difficulty by name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: float
    depth: int
    nodes: int


@dataclass(slots=True, frozen=True)
class MoveChoice:
    """Move picked for the computer side.

    ``promotion`` is set when a pawn reaches its last rank; the engine
    always promotes to a queen.
    """

    from_sq: Square
    to_sq: Square
    promotion: bool = False

    def as_move(self) -> Move:
        return Move(
            self.from_sq,
            self.to_sq,
            PieceType.QUEEN if self.promotion else None,
        )


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(self, board: Board, color: Color, depth: int) -> SearchResult: ...
