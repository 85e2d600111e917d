"""Tests for the Qt signal/slot adapter."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import E8
from chessrules.game.controller import GameController
from chessrules.game.interfaces import GamePhase
from chessrules.game.machine import ERR_INVALID_SELECTION
from chessrules.game.qt_bridge import GameBridge
from chessrules.game.state import GameSetup


class TestGameBridge:
    def test_move_emits_context_and_record(self, qapp: object) -> None:
        del qapp
        bridge = GameBridge()
        contexts = QSignalSpy(bridge.context_changed)
        moves = QSignalSpy(bridge.move_recorded)

        bridge.select_piece(6, 4)
        bridge.move_piece(4, 4)

        assert len(contexts) == 2
        assert len(moves) == 1
        assert moves[0][0].notation == "e4"
        assert bridge.context.current_player == Color.BLACK

    def test_rejection_emits_error(self, qapp: object) -> None:
        del qapp
        bridge = GameBridge()
        errors = QSignalSpy(bridge.error_raised)

        bridge.select_piece(4, 4)

        assert len(errors) == 1
        assert errors[0][0] == ERR_INVALID_SELECTION

    def test_bad_promotion_letter(self, qapp: object) -> None:
        del qapp
        bridge = GameBridge()
        errors = QSignalSpy(bridge.error_raised)

        bridge.choose_promotion_piece("X")

        assert len(errors) == 1
        assert bridge.context.error is None

    def test_promotion_and_game_over(self, qapp: object) -> None:
        del qapp
        setup = GameSetup(board=Board.from_placement({"g6": "K", "e7": "P", "h8": "k"}))
        bridge = GameBridge(GameController(setup))
        over = QSignalSpy(bridge.game_over)

        bridge.select_piece(1, 4)
        bridge.move_piece(0, 4)
        assert bridge.context.phase == GamePhase.AWAITING_PROMOTION
        bridge.choose_promotion_piece("Q")

        assert bridge.context.board[E8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert len(over) == 1
        assert over[0][0].winner == Color.WHITE

    def test_reset_and_new_game(self, qapp: object) -> None:
        del qapp
        bridge = GameBridge()
        contexts = QSignalSpy(bridge.context_changed)

        bridge.select_piece(6, 4)
        bridge.reset_game()
        bridge.new_game()

        assert len(contexts) == 3
        assert bridge.context.selected is None
        assert bridge.controller.context is bridge.context
