"""Square value type and coordinate helpers.

Board layout (row/column, as seen from White):
    row 0 = rank 8 (Black's back rank), row 7 = rank 1 (White's back rank)
    col 0 = file a, col 7 = file h

So ``Square(7, 4)`` is e1 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    row: int
    col: int

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Square(4, 4).name == 'e4'``."""
        return square_name(self)

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < 8 and 0 <= self.col < 8

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by (*d_row*, *d_col*); may fall off the board."""
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq.col


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return 7 - sq.row


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return Square(7 - rank, file)


def square_name(sq: Square) -> str:
    """Algebraic name of *sq*, e.g. ``Square(7, 0)`` → 'a1'."""
    if not sq.is_on_board:
        raise ValueError(f"Square off the board: {sq!r}")
    return _FILES[file_of(sq)] + _RANKS[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_FILES.index(name[0]), _RANKS.index(name[1]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(8) for col in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (make_square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (make_square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (make_square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (make_square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (make_square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (make_square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (make_square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (make_square(f, 7) for f in range(8))
