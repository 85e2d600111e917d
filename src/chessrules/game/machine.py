"""Turn state machine - a pure reducer from (context, event) to context.

Phases::

    AWAITING_SELECTION ──select──▶ PIECE_SELECTED ──move──▶ AWAITING_SELECTION
                                        │                        │
                                        │ pawn on far rank       ▼
                                        └──▶ AWAITING_PROMOTION  CHECKMATE / STALEMATE
                                                 │ choose piece
                                                 ▼
                                        AWAITING_SELECTION (or terminal)

Rejected events never raise. They return the same context with ``error``
set and nothing else changed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, MoveOutcome
from chessrules.core.notation import move_to_san
from chessrules.core.rules import GameStatus, Rules
from chessrules.game.events import (
    ChoosePromotionPiece,
    GameEvent,
    MovePiece,
    ResetGame,
    SelectPiece,
)
from chessrules.game.interfaces import GamePhase
from chessrules.game.state import GameContext, GameSetup, MoveRecord

PROMOTION_CHOICES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

ERR_INVALID_SELECTION = "Cannot select opponent's piece or empty square."
ERR_PROMOTION_PENDING = "Choose a promotion piece first."
ERR_NO_SELECTION = "Select a piece first."
ERR_ILLEGAL_MOVE = "That move is not allowed."
ERR_NO_PROMOTION = "No promotion is pending."
ERR_INVALID_PROMOTION = "A pawn can only promote to a queen, rook, bishop or knight."
ERR_GAME_OVER = "The game is over."


# ── Initialisation ───────────────────────────────────────────────────────────


def initial_context(setup: GameSetup | None = None) -> GameContext:
    """Fresh context for *setup* (the standard position when ``None``).

    Raises :class:`~chessrules.game.state.SetupError` for unplayable setups.
    A setup that is already mate or stalemate starts in the terminal phase.
    """
    if setup is None:
        setup = GameSetup()
    setup.validate()
    context = GameContext(
        board=setup.board,
        current_player=setup.side_to_move,
        castling=setup.castling,
        en_passant=setup.en_passant,
    )
    status = Rules.game_status(
        setup.board, setup.side_to_move, setup.castling, setup.en_passant
    )
    return _with_status(context, status)


# ── Reducer ──────────────────────────────────────────────────────────────────


def transition(context: GameContext, event: GameEvent) -> GameContext:
    """Apply *event* to *context* and return the resulting context."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported event: {event!r}")
    if context.phase.is_terminal and not isinstance(event, ResetGame):
        return _reject(context, ERR_GAME_OVER)
    return handler(context, event)


def _on_select(context: GameContext, event: SelectPiece) -> GameContext:
    if context.phase == GamePhase.AWAITING_PROMOTION:
        return _reject(context, ERR_PROMOTION_PENDING)

    square = event.square
    if square == context.selected:
        return replace(
            context,
            phase=GamePhase.AWAITING_SELECTION,
            selected=None,
            legal_moves=(),
            error=None,
        )

    if (
        not square.is_on_board
        or context.board.color_of(square) != context.current_player
    ):
        return _reject(context, ERR_INVALID_SELECTION)

    gen = MoveGenerator(context.board, context.castling, context.en_passant)
    return replace(
        context,
        phase=GamePhase.PIECE_SELECTED,
        selected=square,
        legal_moves=tuple(gen.legal_moves(square)),
        error=None,
    )


def _on_move(context: GameContext, event: MovePiece) -> GameContext:
    if context.phase == GamePhase.AWAITING_PROMOTION:
        return _reject(context, ERR_PROMOTION_PENDING)
    if context.selected is None:
        return _reject(context, ERR_NO_SELECTION)

    gen = MoveGenerator(context.board, context.castling, context.en_passant)
    if event.square not in gen.legal_moves(context.selected):
        return _reject(context, ERR_ILLEGAL_MOVE)

    mover = context.current_player
    outcome = gen.make_move(context.selected, event.square)
    moved = replace(
        context,
        board=outcome.board,
        selected=None,
        legal_moves=(),
        error=None,
        castling=outcome.castling,
        en_passant=outcome.en_passant,
    )

    if outcome.needs_promotion:
        # Side to move stays put until the piece is chosen; the record's
        # notation and flags are filled in by _on_promote.
        record = _record(context, outcome, GameStatus())
        return replace(
            moved,
            phase=GamePhase.AWAITING_PROMOTION,
            pending_promotion=event.square,
            is_check=False,
            is_checkmate=False,
            is_stalemate=False,
            history=context.history + (record,),
        )

    status = Rules.game_status(
        outcome.board, mover.opposite, outcome.castling, outcome.en_passant
    )
    record = _record(context, outcome, status)
    return _with_status(
        replace(
            moved,
            current_player=mover.opposite,
            history=context.history + (record,),
        ),
        status,
    )


def _on_promote(context: GameContext, event: ChoosePromotionPiece) -> GameContext:
    square = context.pending_promotion
    if square is None or not context.history:
        return _reject(context, ERR_NO_PROMOTION)
    if event.piece_type not in PROMOTION_CHOICES:
        return _reject(context, ERR_INVALID_PROMOTION)

    pawn = context.board[square]
    if pawn is None:
        raise ValueError(f"No pawn on pending promotion square {square}")
    board = context.board.with_piece(square, pawn.promoted_to(event.piece_type))

    mover = context.current_player
    status = Rules.game_status(board, mover.opposite, context.castling, None)

    pending = context.history[-1]
    move = Move(pending.from_sq, pending.to_sq, MoveFlag.PROMOTION, event.piece_type)
    resolved = replace(
        pending,
        notation=move_to_san(
            pending.board_before,
            move,
            captured=pending.captured,
            is_check=status.is_check,
            is_checkmate=status.is_checkmate,
        ),
        board_after=board,
        promotion=event.piece_type,
        is_check=status.is_check,
        is_checkmate=status.is_checkmate,
        is_stalemate=status.is_stalemate,
    )

    return _with_status(
        replace(
            context,
            board=board,
            current_player=mover.opposite,
            en_passant=None,
            pending_promotion=None,
            error=None,
            history=context.history[:-1] + (resolved,),
        ),
        status,
    )


def _on_reset(context: GameContext, event: ResetGame) -> GameContext:
    del context, event
    return initial_context()


_HANDLERS: dict[type, Callable[[GameContext, Any], GameContext]] = {
    SelectPiece: _on_select,
    MovePiece: _on_move,
    ChoosePromotionPiece: _on_promote,
    ResetGame: _on_reset,
}


# ── Helpers ──────────────────────────────────────────────────────────────────


def _reject(context: GameContext, message: str) -> GameContext:
    return replace(context, error=message)


def _with_status(context: GameContext, status: GameStatus) -> GameContext:
    """Copy *status* of the side to move onto *context* and pick the phase."""
    if status.is_checkmate:
        phase = GamePhase.CHECKMATE
        winner = context.current_player.opposite
    elif status.is_stalemate:
        phase = GamePhase.STALEMATE
        winner = None
    else:
        phase = GamePhase.AWAITING_SELECTION
        winner = None
    return replace(
        context,
        phase=phase,
        winner=winner,
        is_check=status.is_check,
        is_checkmate=status.is_checkmate,
        is_stalemate=status.is_stalemate,
    )


def _record(
    context: GameContext, outcome: MoveOutcome, status: GameStatus
) -> MoveRecord:
    move = outcome.move
    return MoveRecord(
        from_sq=move.from_sq,
        to_sq=move.to_sq,
        piece=outcome.piece,
        notation=move_to_san(
            context.board,
            move,
            captured=outcome.captured,
            is_check=status.is_check,
            is_checkmate=status.is_checkmate,
        ),
        board_before=context.board,
        board_after=outcome.board,
        castling_before=context.castling,
        en_passant_before=context.en_passant,
        flag=move.flag,
        captured=outcome.captured,
        is_check=status.is_check,
        is_checkmate=status.is_checkmate,
        is_stalemate=status.is_stalemate,
    )
