"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Status of the side to move.

    At most one of ``is_checkmate`` / ``is_stalemate`` is ever true.
    """

    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate


class Rules:
    """Static rule-checker that operates on a board and its move state."""

    @staticmethod
    def game_status(
        board: Board,
        player: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> GameStatus:
        """Check / checkmate / stalemate for *player*, the side to move."""
        gen = MoveGenerator(board, castling, en_passant)
        check = gen.is_in_check(player)
        if gen.has_legal_moves(player):
            return GameStatus(is_check=check)
        return GameStatus(
            is_check=check,
            is_checkmate=check,
            is_stalemate=not check,
        )

    @staticmethod
    def is_in_check(
        board: Board,
        player: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> bool:
        return MoveGenerator(board, castling, en_passant).is_in_check(player)

    @staticmethod
    def is_checkmate(
        board: Board,
        player: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> bool:
        return Rules.game_status(board, player, castling, en_passant).is_checkmate

    @staticmethod
    def is_stalemate(
        board: Board,
        player: Color,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> bool:
        return Rules.game_status(board, player, castling, en_passant).is_stalemate
