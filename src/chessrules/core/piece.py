"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Letters per piece type; white pieces use upper case, black lower case.
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_WHITE_SYMBOLS = "♙♘♗♖♕♔"
_BLACK_SYMBOLS = "♟♞♝♜♛♚"


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece occupying a square."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Piece character (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a character, e.g. 'N' → white knight."""
        for piece_type, letter in _TYPE_LETTERS.items():
            if char == letter:
                return cls(Color.WHITE, piece_type)
            if char == letter.lower():
                return cls(Color.BLACK, piece_type)
        raise ValueError(f"Invalid piece character: {char!r}")

    @property
    def letter(self) -> str:
        """Upper-case type letter regardless of color, e.g. 'Q'."""
        return _TYPE_LETTERS[self.piece_type]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        symbols = _WHITE_SYMBOLS if self.color == Color.WHITE else _BLACK_SYMBOLS
        return symbols[int(self.piece_type) - 1]

    def promoted_to(self, piece_type: PieceType) -> Piece:
        """Same-colored piece of *piece_type*."""
        return Piece(self.color, piece_type)


def piece_type_from_letter(letter: str) -> PieceType:
    """Map a type letter ('Q', 'n', …) to its :class:`PieceType`."""
    for piece_type, known in _TYPE_LETTERS.items():
        if letter.upper() == known and len(letter) == 1:
            return piece_type
    raise ValueError(f"Invalid piece letter: {letter!r}")
