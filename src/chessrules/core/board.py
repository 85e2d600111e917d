"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, parse_square

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

Row = tuple[Piece | None, ...]


class Board:
    """Immutable 64-square board.

    Every "mutation" returns a new :class:`Board`; the rows of the original
    are shared where untouched. No legality checks happen here, callers
    only pass on-board squares.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[Piece | None]] | None = None) -> None:
        if rows is None:
            self._rows: tuple[Row, ...] = tuple((None,) * 8 for _ in range(8))
            return
        frozen = tuple(tuple(row) for row in rows)
        if len(frozen) != 8 or any(len(row) != 8 for row in frozen):
            raise ValueError("Board must be 8x8")
        self._rows = frozen

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq.row][sq.col]

    def piece_at(self, sq: Square) -> Piece | None:
        return self._rows[sq.row][sq.col]

    def color_of(self, sq: Square) -> Color | None:
        piece = self._rows[sq.row][sq.col]
        return None if piece is None else piece.color

    def type_of(self, sq: Square) -> PieceType | None:
        piece = self._rows[sq.row][sq.col]
        return None if piece is None else piece.piece_type

    def is_empty(self, sq: Square) -> bool:
        return self._rows[sq.row][sq.col] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every piece (of *color*, if given)."""
        for row_idx, row in enumerate(self._rows):
            for col_idx, piece in enumerate(row):
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield Square(row_idx, col_idx), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq for sq, piece in self.occupied(color) if piece.piece_type == piece_type
        ]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        for sq, piece in self.occupied(color):
            if piece.piece_type == PieceType.KING:
                return sq
        raise ValueError(f"No {color.name} king on board")

    # -- Copy-on-write updates ---------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """New board with *sq* holding *piece* (``None`` clears it)."""
        rows = list(self._rows)
        row = list(rows[sq.row])
        row[sq.col] = piece
        rows[sq.row] = tuple(row)
        return Board._from_rows(tuple(rows))

    def with_move(self, from_sq: Square, to_sq: Square, piece: Piece) -> Board:
        """New board with *to_sq* holding *piece* and *from_sq* cleared."""
        rows = list(self._rows)
        to_row = list(rows[to_sq.row])
        to_row[to_sq.col] = piece
        rows[to_sq.row] = tuple(to_row)
        from_row = list(rows[from_sq.row])
        from_row[from_sq.col] = None
        rows[from_sq.row] = tuple(from_row)
        return Board._from_rows(tuple(rows))

    @classmethod
    def _from_rows(cls, rows: tuple[Row, ...]) -> Board:
        b = cls.__new__(cls)
        b._rows = rows
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        rows: list[Row] = [
            tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK),
            (Piece(Color.BLACK, PieceType.PAWN),) * 8,
        ]
        rows.extend((None,) * 8 for _ in range(4))
        rows.append((Piece(Color.WHITE, PieceType.PAWN),) * 8)
        rows.append(tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK))
        return cls._from_rows(tuple(rows))

    @classmethod
    def from_placement(cls, placement: Mapping[str, str]) -> Board:
        """Build a board from ``{"e1": "K", "e8": "k", ...}``."""
        board = cls()
        for name, char in placement.items():
            board = board.with_piece(parse_square(name), Piece.from_char(char))
        return board

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{8 - row_idx} {cells}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
