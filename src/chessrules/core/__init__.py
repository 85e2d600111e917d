"""Core rules layer — pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import Board, CastlingRights, Color, MoveGenerator, Rules
    from chessrules.core.types import E2

    board = Board.initial()
    gen = MoveGenerator(board, CastlingRights.ALL)
    print(gen.legal_moves(E2))          # [Square(row=4, col=4), Square(row=5, col=4)]
    print(Rules.game_status(board, Color.WHITE))
"""

from chessrules.core.attacks import is_in_check, is_square_attacked
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    MoveGenerator,
    MoveOutcome,
    apply_move,
    classify_move,
)
from chessrules.core.notation import move_to_san
from chessrules.core.piece import Piece
from chessrules.core.rules import GameStatus, Rules
from chessrules.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chessrules.core.validator import is_pseudo_legal

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "MoveOutcome",
    "Piece",
    "Rules",
    # Operations
    "apply_move",
    "classify_move",
    "is_in_check",
    "is_pseudo_legal",
    "is_square_attacked",
    "move_to_san",
]
