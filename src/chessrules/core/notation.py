"""Algebraic notation for a single move.

Two identical pieces able to reach the same square are *not*
disambiguated: both produce e.g. ``Nd2``.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import file_of, square_name

_SAN_PIECE: dict[PieceType, str] = {
    PieceType.PAWN: "",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_CASTLE_SAN: dict[MoveFlag, str] = {
    MoveFlag.CASTLE_KINGSIDE: "O-O",
    MoveFlag.CASTLE_QUEENSIDE: "O-O-O",
}


def move_to_san(
    board: Board,
    move: Move,
    *,
    captured: Piece | None = None,
    is_check: bool = False,
    is_checkmate: bool = False,
) -> str:
    """Notation for *move* given the *board* before it was played.

    *captured* is the piece actually taken (which for en passant is not on
    ``move.to_sq``); the check flags describe the opponent after the move.
    """
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)}")

    if move.is_castle:
        san = _CASTLE_SAN[move.flag]
    else:
        is_capture = captured is not None and captured.color != piece.color
        san = _SAN_PIECE[piece.piece_type]
        if is_capture:
            if piece.piece_type == PieceType.PAWN:
                san += "abcdefgh"[file_of(move.from_sq)]
            san += "x"
        san += square_name(move.to_sq)
        if move.promotion is not None:
            san += "=" + _SAN_PIECE[move.promotion]

    return san + check_suffix(is_check=is_check, is_checkmate=is_checkmate)


def check_suffix(*, is_check: bool, is_checkmate: bool) -> str:
    if is_checkmate:
        return "#"
    if is_check:
        return "+"
    return ""
