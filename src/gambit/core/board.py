"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: Square) -> int:
    row, col = sq
    if not (0 <= row < 8 and 0 <= col < 8):
        raise IndexError(f"Square off the board: {sq!r}")
    return row * 8 + col


class Board:
    """Immutable 64-cell board.

    Each cell holds a :class:`Piece` or ``None`` (empty).  Every
    transformation returns a new board; instances are hashable and compare
    by contents.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: tuple[Piece | None, ...] | None = None) -> None:
        if cells is None:
            cells = (None,) * 64
        elif len(cells) != 64:
            raise ValueError(f"Board needs 64 cells, got {len(cells)}")
        self._cells: tuple[Piece | None, ...] = tuple(cells)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self._cells[_index(sq)] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, row-major."""
        for sq, piece in zip(ALL_SQUARES, self._cells):
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType | None = None) -> list[Square]:
        """Squares occupied by *color* (optionally only *piece_type*), row-major."""
        return [
            sq
            for sq, piece in self
            if piece.color == color
            and (piece_type is None or piece.piece_type == piece_type)
        ]

    def count(self, color: Color, piece_type: PieceType) -> int:
        return len(self.pieces(color, piece_type))

    def find_king(self, color: Color) -> Square | None:
        """First square (row-major) holding *color*'s king, if any."""
        for sq, piece in self:
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with the cells in *changes* overwritten."""
        cells = list(self._cells)
        for sq, piece in changes.items():
            cells[_index(sq)] = piece
        return Board(tuple(cells))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        """Board holding only *pieces*."""
        return cls().replace(pieces)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        pieces: dict[Square, Piece] = {}
        for col, pt in enumerate(_BACK_RANK):
            pieces[Square(0, col)] = Piece(Color.BLACK, pt)
            pieces[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            pieces[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            pieces[Square(7, col)] = Piece(Color.WHITE, pt)
        return cls.from_pieces(pieces)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = self._cells[row * 8 : row * 8 + 8]
            rows.append(f"{8 - row} {' '.join(str(p) if p else '.' for p in cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def initial_board() -> Board:
    """Standard 32-piece starting position."""
    return Board.initial()
