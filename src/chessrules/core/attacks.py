"""Attack Oracle - is a square reachable by any piece of a given color?"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.types import Square
from chessrules.core.validator import is_adjacent, is_pseudo_legal


def is_square_attacked(
    board: Board,
    target: Square,
    by_color: Color,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.NONE,
) -> bool:
    """Is *target* attacked by any piece of *by_color*?

    Kings are tested by adjacency only. Routing them through the validator
    would let castling safety ask the other king the same question and
    recurse without end.
    """
    for sq, piece in board.occupied(by_color):
        if piece.piece_type == PieceType.KING:
            if is_adjacent(sq, target):
                return True
        elif is_pseudo_legal(
            board,
            sq,
            target,
            by_color,
            castling,
            attack_only=True,
            en_passant=en_passant,
        ):
            return True
    return False


def is_in_check(
    board: Board,
    color: Color,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.NONE,
) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    king_sq = board.king_square(color)
    return is_square_attacked(board, king_sq, color.opposite, en_passant, castling)
