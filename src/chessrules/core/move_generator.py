"""Legal move generation: geometry plus the self-check filter."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square
from chessrules.core.validator import (
    BACK_ROW,
    KINGSIDE_ROOK_COL,
    PROMOTION_ROW,
    QUEENSIDE_ROOK_COL,
    is_pseudo_legal,
)

# Castling flag -> (rook from column, rook to column)
_ROOK_SLIDE: dict[MoveFlag, tuple[int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (KINGSIDE_ROOK_COL, 5),
    MoveFlag.CASTLE_QUEENSIDE: (QUEENSIDE_ROOK_COL, 3),
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Everything that changes when a move is played."""

    move: Move
    piece: Piece
    board: Board
    castling: CastlingRights
    en_passant: Square | None
    captured: Piece | None

    @property
    def needs_promotion(self) -> bool:
        """Pawn on the far rank still waiting for its new type."""
        return self.move.flag == MoveFlag.PROMOTION and self.move.promotion is None


def classify_move(
    board: Board, from_sq: Square, to_sq: Square, en_passant: Square | None
) -> MoveFlag:
    """Work out which kind of move ``from_sq -> to_sq`` is."""
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {from_sq}")

    if piece.piece_type == PieceType.KING and abs(to_sq.col - from_sq.col) == 2:
        return (
            MoveFlag.CASTLE_KINGSIDE
            if to_sq.col > from_sq.col
            else MoveFlag.CASTLE_QUEENSIDE
        )

    if piece.piece_type != PieceType.PAWN:
        return MoveFlag.NORMAL
    if abs(to_sq.row - from_sq.row) == 2:
        return MoveFlag.DOUBLE_PAWN
    if to_sq.row == PROMOTION_ROW[piece.color]:
        return MoveFlag.PROMOTION
    if to_sq == en_passant and to_sq.col != from_sq.col and board.is_empty(to_sq):
        return MoveFlag.EN_PASSANT
    return MoveFlag.NORMAL


def apply_move(board: Board, move: Move, castling: CastlingRights) -> MoveOutcome:
    """Play *move* on a copy of *board*.

    Used both for real moves and for what-if simulation. The caller is
    responsible for legality. A promotion move without ``move.promotion``
    leaves the pawn on the far rank.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    captured = board[move.to_sq]
    placed = piece
    if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
        placed = piece.promoted_to(move.promotion)
    new_board = board.with_move(move.from_sq, move.to_sq, placed)

    # En passant: the captured pawn sits beside the origin, not on to_sq
    if move.flag == MoveFlag.EN_PASSANT:
        victim_sq = Square(move.from_sq.row, move.to_sq.col)
        captured = board[victim_sq]
        new_board = new_board.with_piece(victim_sq, None)

    # Slide the rook for castling
    if move.is_castle:
        rook_from_col, rook_to_col = _ROOK_SLIDE[move.flag]
        row = move.from_sq.row
        rook = board[Square(row, rook_from_col)]
        if rook is not None:
            new_board = new_board.with_move(
                Square(row, rook_from_col), Square(row, rook_to_col), rook
            )

    next_en_passant: Square | None = None
    if move.flag == MoveFlag.DOUBLE_PAWN:
        next_en_passant = Square(
            (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col
        )

    return MoveOutcome(
        move=move,
        piece=piece,
        board=new_board,
        castling=_updated_castling(castling, move, piece, captured),
        en_passant=next_en_passant,
        captured=captured,
    )


def _rook_home_wing(sq: Square, color: Color) -> CastlingRights:
    """Castling right tied to a rook of *color* standing on *sq*."""
    if sq.row != BACK_ROW[color]:
        return CastlingRights.NONE
    if sq.col == KINGSIDE_ROOK_COL:
        return CastlingRights.wing(color, kingside=True)
    if sq.col == QUEENSIDE_ROOK_COL:
        return CastlingRights.wing(color, kingside=False)
    return CastlingRights.NONE


def _updated_castling(
    castling: CastlingRights, move: Move, piece: Piece, captured: Piece | None
) -> CastlingRights:
    lost = CastlingRights.NONE
    if piece.piece_type == PieceType.KING:
        lost |= CastlingRights.both(piece.color)
    elif piece.piece_type == PieceType.ROOK:
        lost |= _rook_home_wing(move.from_sq, piece.color)

    if captured is not None and captured.piece_type == PieceType.ROOK:
        lost |= _rook_home_wing(move.to_sq, captured.color)

    return castling & ~lost


class MoveGenerator:
    """Strictly legal moves for a board plus castling/en-passant state.

    The board is immutable, so candidate moves are simulated on copies and
    nothing needs restoring afterwards.
    """

    __slots__ = ("_board", "_castling", "_en_passant")

    def __init__(
        self,
        board: Board,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> None:
        self._board = board
        self._castling = castling
        self._en_passant = en_passant

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, from_sq: Square) -> list[Square]:
        """Destinations the piece on *from_sq* may legally move to."""
        return [move.to_sq for move in self._legal_moves_from(from_sq)]

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*."""
        moves: list[Move] = []
        for sq, _piece in self._board.occupied(color):
            moves.extend(self._legal_moves_from(sq))
        return moves

    def has_legal_moves(self, color: Color) -> bool:
        for sq, _piece in self._board.occupied(color):
            if next(self._legal_moves_from(sq), None) is not None:
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._board, color, self._en_passant, self._castling)

    def make_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Classify and apply ``from_sq -> to_sq`` (legality not checked)."""
        flag = classify_move(self._board, from_sq, to_sq, self._en_passant)
        return apply_move(self._board, Move(from_sq, to_sq, flag), self._castling)

    # -- Internal -----------------------------------------------------------

    def _legal_moves_from(self, from_sq: Square) -> Iterator[Move]:
        piece = self._board[from_sq]
        if piece is None:
            return
        mover = piece.color
        for to_sq in ALL_SQUARES:
            if not is_pseudo_legal(
                self._board,
                from_sq,
                to_sq,
                mover,
                self._castling,
                en_passant=self._en_passant,
            ):
                continue
            outcome = self.make_move(from_sq, to_sq)
            if not is_in_check(
                outcome.board, mover, outcome.en_passant, outcome.castling
            ):
                yield outcome.move
