"""Square type and coordinate helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black's back rank), row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """A board coordinate as ``(row, col)``."""

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Square | None:
        """Square shifted by ``(dr, dc)``, or ``None`` when off the board."""
        row = self.row + dr
        col = self.col + dc
        if is_on_board(row, col):
            return Square(row, col)
        return None

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(row: int, col: int) -> bool:
    """Check whether a coordinate pair lies inside the 8x8 board."""
    return 0 <= row < 8 and 0 <= col < 8


def file_char(sq: Square) -> str:
    """File letter a-h."""
    return chr(ord("a") + sq.col)


def rank_char(sq: Square) -> str:
    """Rank digit 1-8."""
    return str(8 - sq.row)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 0)`` -> 'a1'."""
    return file_char(sq) + rank_char(sq)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)

# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[56:64]
