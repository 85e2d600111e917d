"""chessrules — a two-player chess rules engine driven by a turn state machine."""

from chessrules.core import Board, CastlingRights, Color, Piece, PieceType, Square
from chessrules.game import (
    GameContext,
    GameController,
    GamePhase,
    GameSetup,
    initial_context,
    transition,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "CastlingRights",
    "Color",
    "GameContext",
    "GameController",
    "GamePhase",
    "GameSetup",
    "Piece",
    "PieceType",
    "Square",
    "__version__",
    "initial_context",
    "transition",
]
