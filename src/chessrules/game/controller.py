"""GameController — owns the live game context and notifies listeners.

The state machine itself is the pure :func:`chessrules.game.machine.transition`;
the controller only keeps the latest snapshot and fans out callbacks so the
UI / persistence layers can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import PieceType
from chessrules.core.types import Square
from chessrules.game.events import (
    ChoosePromotionPiece,
    GameEvent,
    MovePiece,
    ResetGame,
    SelectPiece,
)
from chessrules.game.interfaces import IGameController
from chessrules.game.machine import initial_context, transition
from chessrules.game.state import GameContext, GameSetup, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

ContextCallback = Callable[[GameContext], None]
MoveCallback = Callable[[MoveRecord, GameContext], None]  # record, new context
ErrorCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_context_changed: list[ContextCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[ContextCallback] = field(default_factory=list)
    on_error: list[ErrorCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Feeds events through the state machine one at a time.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Callbacks run synchronously inside ``dispatch``.
    """

    __slots__ = ("_context", "events")

    def __init__(self, setup: GameSetup | None = None) -> None:
        self._context = initial_context(setup)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def context(self) -> GameContext:
        return self._context

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, setup: GameSetup | None = None) -> GameContext:
        self._context = initial_context(setup)
        _LOGGER.debug("New game, %s to move", self._context.current_player)
        self._emit_context_changed()
        return self._context

    def dispatch(self, event: GameEvent) -> GameContext:
        _LOGGER.debug("Dispatching %r in phase %s", event, self._context.phase.name)
        previous = self._context
        self._context = transition(previous, event)

        self._emit_context_changed()

        # Accepted events clear the error; a set error means this one was rejected.
        if self._context.error is not None:
            _LOGGER.info("Rejected %r: %s", event, self._context.error)
            self._emit_error(self._context.error)
            return self._context

        if self._context.history is not previous.history and self._context.history:
            self._emit_move(self._context.history[-1])

        if self._context.game_over and not previous.game_over:
            _LOGGER.info(
                "Game over: %s (winner: %s)",
                self._context.phase.name,
                self._context.winner,
            )
            self._emit_game_over()
        return self._context

    # ── Convenience wrappers ─────────────────────────────────────────────

    def select_piece(self, square: Square) -> GameContext:
        return self.dispatch(SelectPiece(square))

    def move_piece(self, square: Square) -> GameContext:
        return self.dispatch(MovePiece(square))

    def choose_promotion_piece(self, piece_type: PieceType) -> GameContext:
        return self.dispatch(ChoosePromotionPiece(piece_type))

    def reset_game(self) -> GameContext:
        return self.dispatch(ResetGame())

    def play(self, from_sq: Square, to_sq: Square) -> GameContext:
        """Select *from_sq* then move to *to_sq* (two events)."""
        self.select_piece(from_sq)
        if self._context.error is not None:
            return self._context
        return self.move_piece(to_sq)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_context_changed(self) -> None:
        for cb in self.events.on_context_changed:
            cb(self._context)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._context)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._context)

    def _emit_error(self, message: str) -> None:
        for cb in self.events.on_error:
            cb(message)
