"""Tests for legal move generation and move application."""

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, apply_move, classify_move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, C1, D1, D5, D6, E1, E2, E3, E4, E5, E7, E8, F1, G1, H1, H8,
    parse_square,
)

W, B = Color.WHITE, Color.BLACK


class TestLegalMoves:
    def test_opening_counts(self) -> None:
        gen = MoveGenerator(Board.initial(), CastlingRights.ALL)
        assert len(gen.generate_legal_moves(W)) == 20
        assert len(gen.generate_legal_moves(B)) == 20

    def test_pawn_destinations(self) -> None:
        gen = MoveGenerator(Board.initial(), CastlingRights.ALL)
        assert sorted(gen.legal_moves(E2)) == sorted([E3, E4])

    def test_empty_square_has_no_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(E4) == []

    def test_pinned_piece_cannot_leave_line(self) -> None:
        board = Board.from_placement({"e1": "K", "e2": "B", "e8": "r", "a8": "k"})
        gen = MoveGenerator(board)
        assert gen.legal_moves(E2) == []

    def test_must_answer_check(self) -> None:
        # Rook checks along the e-file; the knight can only interpose on e3.
        board = Board.from_placement(
            {"e1": "K", "g2": "N", "e8": "r", "a8": "k"}
        )
        gen = MoveGenerator(board)
        assert gen.legal_moves(parse_square("g2")) == [E3]
        assert E2 not in gen.legal_moves(E1)
        assert D1 in gen.legal_moves(E1)

    def test_king_cannot_step_into_attack(self) -> None:
        board = Board.from_placement({"e1": "K", "d8": "r", "a8": "k"})
        gen = MoveGenerator(board)
        moves = gen.legal_moves(E1)
        assert D1 not in moves
        assert parse_square("d2") not in moves
        assert E2 in moves

    def test_king_cannot_capture_defended_piece(self) -> None:
        board = Board.from_placement({"e1": "K", "e2": "q", "e8": "r", "a8": "k"})
        gen = MoveGenerator(board)
        assert E2 not in gen.legal_moves(E1)

    def test_castling_listed(self) -> None:
        board = Board.from_placement({"e1": "K", "h1": "R", "a1": "R", "e8": "k"})
        gen = MoveGenerator(board, CastlingRights.ALL)
        moves = gen.legal_moves(E1)
        assert G1 in moves
        assert C1 in moves

    def test_en_passant_exposing_king_is_illegal(self) -> None:
        # Capturing e.p. would clear the fifth rank between king and rook.
        board = Board.from_placement(
            {"a5": "K", "e5": "P", "d5": "p", "h5": "r", "e8": "k"}
        )
        gen = MoveGenerator(board, CastlingRights.NONE, D6)
        assert D6 not in gen.legal_moves(E5)

    def test_has_legal_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.has_legal_moves(W)
        assert gen.is_in_check(W) is False


class TestClassifyMove:
    def test_kinds(self) -> None:
        board = Board.from_placement(
            {"e1": "K", "h1": "R", "e2": "P", "e7": "p", "d7": "P", "e8": "k"}
        )
        assert classify_move(board, E2, E4, None) == MoveFlag.DOUBLE_PAWN
        assert classify_move(board, E2, E3, None) == MoveFlag.NORMAL
        assert classify_move(board, E1, G1, None) == MoveFlag.CASTLE_KINGSIDE
        assert classify_move(board, E1, C1, None) == MoveFlag.CASTLE_QUEENSIDE
        assert classify_move(board, E1, F1, None) == MoveFlag.NORMAL
        assert classify_move(board, parse_square("d7"), E8, None) == MoveFlag.PROMOTION

    def test_en_passant(self) -> None:
        board = Board.from_placement({"e1": "K", "e5": "P", "d5": "p", "e8": "k"})
        assert classify_move(board, E5, D6, D6) == MoveFlag.EN_PASSANT
        assert classify_move(board, E5, D6, None) == MoveFlag.NORMAL


class TestApplyMove:
    def test_double_push_sets_en_passant(self) -> None:
        outcome = apply_move(
            Board.initial(), Move(E2, E4, MoveFlag.DOUBLE_PAWN), CastlingRights.ALL
        )
        assert outcome.en_passant == E3
        assert outcome.board[E4] == Piece(W, PieceType.PAWN)
        assert outcome.captured is None

    def test_other_moves_clear_en_passant(self) -> None:
        outcome = apply_move(Board.initial(), Move(E2, E3), CastlingRights.ALL)
        assert outcome.en_passant is None

    def test_en_passant_removes_pawn(self) -> None:
        board = Board.from_placement({"e1": "K", "e5": "P", "d5": "p", "e8": "k"})
        outcome = apply_move(board, Move(E5, D6, MoveFlag.EN_PASSANT), CastlingRights.NONE)
        assert outcome.board[D5] is None
        assert outcome.board[D6] == Piece(W, PieceType.PAWN)
        assert outcome.captured == Piece(B, PieceType.PAWN)

    def test_castle_moves_rook(self) -> None:
        board = Board.from_placement({"e1": "K", "h1": "R", "a1": "R", "e8": "k"})
        outcome = apply_move(
            board, Move(E1, G1, MoveFlag.CASTLE_KINGSIDE), CastlingRights.ALL
        )
        assert outcome.board[G1] == Piece(W, PieceType.KING)
        assert outcome.board[F1] == Piece(W, PieceType.ROOK)
        assert outcome.board[H1] is None
        assert outcome.castling == CastlingRights.BLACK_BOTH

    def test_queenside_castle_moves_rook(self) -> None:
        board = Board.from_placement({"e1": "K", "a1": "R", "e8": "k"})
        outcome = apply_move(
            board, Move(E1, C1, MoveFlag.CASTLE_QUEENSIDE), CastlingRights.ALL
        )
        assert outcome.board[D1] == Piece(W, PieceType.ROOK)
        assert outcome.board[A1] is None

    def test_rook_move_drops_one_wing(self) -> None:
        board = Board.from_placement({"e1": "K", "h1": "R", "a1": "R", "e8": "k"})
        outcome = apply_move(board, Move(H1, parse_square("h4")), CastlingRights.ALL)
        assert not outcome.castling.allows(W, kingside=True)
        assert outcome.castling.allows(W, kingside=False)

    def test_rook_capture_on_corner_drops_opponent_wing(self) -> None:
        board = Board.from_placement({"e1": "K", "h1": "R", "h8": "r", "e8": "k"})
        outcome = apply_move(board, Move(H1, H8), CastlingRights.ALL)
        assert not outcome.castling.allows(B, kingside=True)
        assert not outcome.castling.allows(W, kingside=True)
        assert outcome.castling.allows(B, kingside=False)

    def test_rook_off_corner_keeps_rights(self) -> None:
        board = Board.from_placement({"e1": "K", "d4": "R", "a8": "r", "e8": "k"})
        outcome = apply_move(board, Move(parse_square("d4"), parse_square("d1")), CastlingRights.ALL)
        assert outcome.castling == CastlingRights.ALL

    def test_promotion_pending_keeps_pawn(self) -> None:
        board = Board.from_placement({"a1": "K", "e7": "P", "h8": "k"})
        outcome = apply_move(board, Move(E7, E8, MoveFlag.PROMOTION), CastlingRights.NONE)
        assert outcome.needs_promotion
        assert outcome.board[E8] == Piece(W, PieceType.PAWN)

    def test_promotion_with_type(self) -> None:
        board = Board.from_placement({"a1": "K", "e7": "P", "h8": "k"})
        outcome = apply_move(
            board, Move(E7, E8, MoveFlag.PROMOTION, PieceType.KNIGHT), CastlingRights.NONE
        )
        assert not outcome.needs_promotion
        assert outcome.board[E8] == Piece(W, PieceType.KNIGHT)

    def test_original_board_untouched(self) -> None:
        board = Board.initial()
        apply_move(board, Move(E2, E4, MoveFlag.DOUBLE_PAWN), CastlingRights.ALL)
        assert board == Board.initial()
