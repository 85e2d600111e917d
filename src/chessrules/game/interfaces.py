"""Abstract interfaces and phase definitions for the game layer.

High-level callers (UI, persistence) depend on :class:`IGameController`,
not on the concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.game.events import GameEvent
    from chessrules.game.state import GameContext, GameSetup


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn sequence."""

    AWAITING_SELECTION = auto()
    PIECE_SELECTED = auto()
    AWAITING_PROMOTION = auto()
    CHECKMATE = auto()
    STALEMATE = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.CHECKMATE, GamePhase.STALEMATE)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @property
    @abstractmethod
    def context(self) -> GameContext:
        """Current immutable snapshot."""

    @abstractmethod
    def dispatch(self, event: GameEvent) -> GameContext:
        """Feed one event through the state machine and return the new snapshot."""

    @abstractmethod
    def new_game(self, setup: GameSetup | None = None) -> GameContext:
        """Start over from *setup* (the standard position when ``None``)."""
