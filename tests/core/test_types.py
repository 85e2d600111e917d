"""Tests for Square helpers and Piece."""

import pytest

from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece, piece_type_from_letter
from chessrules.core.types import (
    A1, E1, E4, E8, H8,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)


class TestSquare:
    def test_orientation(self) -> None:
        # Row 0 is Black's back rank, row 7 White's.
        assert E1 == Square(7, 4)
        assert E8 == Square(0, 4)
        assert A1 == Square(7, 0)
        assert H8 == Square(0, 7)

    def test_names_round_trip(self) -> None:
        assert square_name(E4) == "e4"
        assert parse_square("e4") == E4
        assert str(Square(4, 4)) == "e4"
        assert Square(4, 4).name == "e4"

    def test_file_and_rank(self) -> None:
        assert file_of(E4) == 4
        assert rank_of(E4) == 3
        assert make_square(4, 3) == E4

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_on_board(self) -> None:
        assert Square(0, 0).is_on_board
        assert not Square(-1, 0).is_on_board
        assert not Square(0, 8).is_on_board
        assert not E1.offset(1, 0).is_on_board

    def test_off_board_square_has_no_name(self) -> None:
        for sq in (Square(9, 0), Square(8, -1), Square(0, 8)):
            with pytest.raises(ValueError):
                square_name(sq)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_symbol_and_letter(self) -> None:
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        assert knight.symbol == "♞"
        assert knight.letter == "N"
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"

    def test_promoted_to_keeps_color(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert pawn.promoted_to(PieceType.QUEEN) == Piece(Color.BLACK, PieceType.QUEEN)

    def test_type_from_letter(self) -> None:
        assert piece_type_from_letter("Q") == PieceType.QUEEN
        assert piece_type_from_letter("n") == PieceType.KNIGHT
        with pytest.raises(ValueError):
            piece_type_from_letter("Z")
        with pytest.raises(ValueError):
            piece_type_from_letter("QQ")


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.BLACK) == "black"

    def test_castling_allows(self) -> None:
        rights = CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        assert rights.allows(Color.WHITE, kingside=True)
        assert not rights.allows(Color.WHITE, kingside=False)
        assert rights.allows(Color.BLACK, kingside=False)
        assert not rights.allows(Color.BLACK, kingside=True)

    def test_castling_both(self) -> None:
        assert CastlingRights.both(Color.BLACK) == CastlingRights.BLACK_BOTH
        assert CastlingRights.ALL & ~CastlingRights.both(Color.WHITE) == (
            CastlingRights.BLACK_BOTH
        )

    def test_castle_flags(self) -> None:
        assert MoveFlag.CASTLE_KINGSIDE.is_castle
        assert MoveFlag.CASTLE_QUEENSIDE.is_castle
        assert not MoveFlag.PROMOTION.is_castle
        assert Move(E1, parse_square("g1"), MoveFlag.CASTLE_KINGSIDE).is_castle
        assert not Move(E1, parse_square("f1")).is_castle
