"""Game context - the immutable snapshot the state machine produces."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.attacks import is_in_check
from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveFlag, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.core.validator import EN_PASSANT_ROW, PAWN_DIRECTION
from chessrules.game.interfaces import GamePhase


class SetupError(ValueError):
    """A custom starting position breaks a board invariant."""


@dataclass(frozen=True, slots=True)
class GameSetup:
    """Starting position for a game.

    ``GameSetup()`` is the standard opening position; tests and callers
    inject custom positions by passing their own board and state.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None

    def validate(self) -> None:
        """Raise :class:`SetupError` if the position cannot be played."""
        for color in Color:
            kings = self.board.pieces(color, PieceType.KING)
            if len(kings) != 1:
                raise SetupError(
                    f"Expected exactly one {color} king, found {len(kings)}"
                )

        # The side that just moved cannot have left its own king attacked.
        just_moved = self.side_to_move.opposite
        if is_in_check(self.board, just_moved):
            raise SetupError(
                f"The {just_moved} king is in check with {self.side_to_move} to move"
            )

        if self.en_passant is None:
            return
        if not self.en_passant.is_on_board:
            raise SetupError(f"Invalid en passant target {self.en_passant!r}")
        # The target sits behind a pawn of the side that just moved.
        capture_row = EN_PASSANT_ROW[self.side_to_move]
        expected_row = capture_row + PAWN_DIRECTION[self.side_to_move]
        pawn = self.board[Square(capture_row, self.en_passant.col)]
        if self.en_passant.row != expected_row or pawn != Piece(
            just_moved, PieceType.PAWN
        ):
            raise SetupError(f"Invalid en passant target {self.en_passant!r}")


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history.

    Flags describe the opponent's situation right after the move.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    notation: str
    board_before: Board
    board_after: Board
    castling_before: CastlingRights
    en_passant_before: Square | None
    flag: MoveFlag = MoveFlag.NORMAL
    captured: Piece | None = None
    promotion: PieceType | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True, slots=True)
class GameContext:
    """Aggregate root of a game.

    Never mutated: every event yields a new context.
    """

    board: Board
    current_player: Color = Color.WHITE
    phase: GamePhase = GamePhase.AWAITING_SELECTION
    selected: Square | None = None
    legal_moves: tuple[Square, ...] = ()
    error: str | None = None
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    winner: Color | None = None
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    pending_promotion: Square | None = None
    history: tuple[MoveRecord, ...] = ()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self.history[-1] if self.history else None

    def can_castle(self, color: Color, *, kingside: bool) -> bool:
        return self.castling.allows(color, kingside=kingside)
