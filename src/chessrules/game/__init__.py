"""Game layer — turn state machine, controller, events.

Quick start::

    from chessrules.game import GameController
    from chessrules.core.types import E2, E4

    ctrl = GameController()
    ctrl.select_piece(E2)
    ctx = ctrl.move_piece(E4)
    print(ctx.history[-1].notation)   # "e4"

The Qt adapter lives in :mod:`chessrules.game.qt_bridge` and is imported
explicitly so the rest of the package works without a Qt runtime.
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.events import (
    ChoosePromotionPiece,
    GameEvent,
    MovePiece,
    ResetGame,
    SelectPiece,
    event_from_dict,
)
from chessrules.game.interfaces import GamePhase, IGameController
from chessrules.game.machine import PROMOTION_CHOICES, initial_context, transition
from chessrules.game.state import GameContext, GameSetup, MoveRecord, SetupError

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Events
    "ChoosePromotionPiece",
    "GameEvent",
    "MovePiece",
    "ResetGame",
    "SelectPiece",
    "event_from_dict",
    # State
    "GameContext",
    "GameSetup",
    "MoveRecord",
    "SetupError",
    # Machine / controller
    "PROMOTION_CHOICES",
    "GameController",
    "GameEvents",
    "initial_context",
    "transition",
]
