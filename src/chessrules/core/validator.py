"""Move Validator - raw piece geometry and obstruction rules.

Self-check is *not* considered here; see
:class:`chessrules.core.move_generator.MoveGenerator` for the filter.
"""

from __future__ import annotations

from collections.abc import Callable

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.types import Square

# Row deltas and special rows per color. White moves toward row 0.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
EN_PASSANT_ROW: dict[Color, int] = {Color.WHITE: 3, Color.BLACK: 4}
BACK_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}

KING_HOME_COL = 4
KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0

# (must be empty, must not be attacked) per wing, as column indexes.
_CASTLE_KINGSIDE_EMPTY = (5, 6)
_CASTLE_KINGSIDE_SAFE = (4, 5, 6)
_CASTLE_QUEENSIDE_EMPTY = (1, 2, 3)
_CASTLE_QUEENSIDE_SAFE = (4, 3, 2)

_Geometry = Callable[
    [Board, Square, Square, Color, CastlingRights, bool, Square | None], bool
]


def is_pseudo_legal(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights = CastlingRights.NONE,
    *,
    attack_only: bool = False,
    en_passant: Square | None = None,
) -> bool:
    """Whether the piece on *from_sq* may go to *to_sq*, ignoring self-check.

    With *attack_only* the question becomes "does this piece attack
    *to_sq*": pawns reach their diagonals even when empty, pawn pushes do
    not count, and the king cannot castle.
    """
    if not (from_sq.is_on_board and to_sq.is_on_board) or from_sq == to_sq:
        return False

    piece = board[from_sq]
    if piece is None:
        return False
    if not attack_only and piece.color != mover:
        return False
    if board.color_of(to_sq) == mover:
        return False

    check = _GEOMETRY[piece.piece_type]
    return check(board, from_sq, to_sq, mover, castling, attack_only, en_passant)


# -- Per-piece geometry -----------------------------------------------------


def _pawn(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    direction = PAWN_DIRECTION[mover]
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    if abs(d_col) == 1 and d_row == direction:
        if attack_only:
            return True
        target = board[to_sq]
        if target is not None:
            return target.color != mover
        return to_sq == en_passant and from_sq.row == EN_PASSANT_ROW[mover]

    if d_col != 0 or attack_only:
        return False

    if d_row == direction:
        return board.is_empty(to_sq)
    if d_row == 2 * direction and from_sq.row == PAWN_START_ROW[mover]:
        return board.is_empty(from_sq.offset(direction, 0)) and board.is_empty(to_sq)
    return False


def _knight(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    d_row = abs(to_sq.row - from_sq.row)
    d_col = abs(to_sq.col - from_sq.col)
    return (d_row, d_col) in ((1, 2), (2, 1))


def _rook(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
        return False
    return _path_clear(board, from_sq, to_sq)


def _bishop(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    if abs(to_sq.row - from_sq.row) != abs(to_sq.col - from_sq.col):
        return False
    return _path_clear(board, from_sq, to_sq)


def _queen(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    straight = from_sq.row == to_sq.row or from_sq.col == to_sq.col
    diagonal = abs(to_sq.row - from_sq.row) == abs(to_sq.col - from_sq.col)
    if not (straight or diagonal):
        return False
    return _path_clear(board, from_sq, to_sq)


def _king(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    attack_only: bool,
    en_passant: Square | None,
) -> bool:
    if is_adjacent(from_sq, to_sq):
        return True
    if attack_only:
        return False
    return _can_castle(board, from_sq, to_sq, mover, castling, en_passant)


_GEOMETRY: dict[PieceType, _Geometry] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


# -- Helpers ------------------------------------------------------------------


def is_adjacent(a: Square, b: Square) -> bool:
    """One king step apart (and not the same square)."""
    return a != b and abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """No piece strictly between two squares on a line or diagonal."""
    step_row = _sign(to_sq.row - from_sq.row)
    step_col = _sign(to_sq.col - from_sq.col)
    sq = from_sq.offset(step_row, step_col)
    while sq != to_sq:
        if not board.is_empty(sq):
            return False
        sq = sq.offset(step_row, step_col)
    return True


def _can_castle(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    mover: Color,
    castling: CastlingRights,
    en_passant: Square | None,
) -> bool:
    from chessrules.core.attacks import is_square_attacked

    row = BACK_ROW[mover]
    if from_sq != Square(row, KING_HOME_COL) or to_sq.row != row:
        return False

    if to_sq.col == 6:
        kingside = True
        rook_col, empty_cols, safe_cols = (
            KINGSIDE_ROOK_COL,
            _CASTLE_KINGSIDE_EMPTY,
            _CASTLE_KINGSIDE_SAFE,
        )
    elif to_sq.col == 2:
        kingside = False
        rook_col, empty_cols, safe_cols = (
            QUEENSIDE_ROOK_COL,
            _CASTLE_QUEENSIDE_EMPTY,
            _CASTLE_QUEENSIDE_SAFE,
        )
    else:
        return False

    if not castling.allows(mover, kingside=kingside):
        return False

    rook = board[Square(row, rook_col)]
    if rook is None or rook.color != mover or rook.piece_type != PieceType.ROOK:
        return False

    if any(not board.is_empty(Square(row, col)) for col in empty_cols):
        return False

    opponent = mover.opposite
    return not any(
        is_square_attacked(board, Square(row, col), opponent, en_passant, castling)
        for col in safe_cols
    )
