"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.piece import piece_type_from_letter
from chessrules.core.types import Square
from chessrules.game.controller import GameController
from chessrules.game.state import GameContext, GameSetup, MoveRecord


class GameBridge(QObject):
    """GUI-thread adapter: widgets call the slots, re-render on the signals.

    Board coordinates arrive as plain ``(row, col)`` ints so QML / widget
    code does not need to know about :class:`Square`.
    """

    context_changed = pyqtSignal(object)
    move_recorded = pyqtSignal(object)
    game_over = pyqtSignal(object)
    error_raised = pyqtSignal(str)

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_context_changed.append(self._forward_context)
        events.on_move.append(self._forward_move)
        events.on_game_over.append(self._forward_game_over)
        events.on_error.append(self.error_raised.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def context(self) -> GameContext:
        return self._controller.context

    # -- Slots ----------------------------------------------------------------

    @pyqtSlot(int, int)
    def select_piece(self, row: int, col: int) -> None:
        self._controller.select_piece(Square(row, col))

    @pyqtSlot(int, int)
    def move_piece(self, row: int, col: int) -> None:
        self._controller.move_piece(Square(row, col))

    @pyqtSlot(str)
    def choose_promotion_piece(self, letter: str) -> None:
        """Promote to the piece named by *letter* ('Q', 'R', 'B' or 'N')."""
        try:
            piece_type = piece_type_from_letter(letter)
        except ValueError as exc:
            self.error_raised.emit(str(exc))
            return
        self._controller.choose_promotion_piece(piece_type)

    @pyqtSlot()
    def reset_game(self) -> None:
        self._controller.reset_game()

    def new_game(self, setup: GameSetup | None = None) -> None:
        self._controller.new_game(setup)

    # -- Controller callbacks -------------------------------------------------

    def _forward_context(self, context: GameContext) -> None:
        self.context_changed.emit(context)

    def _forward_move(self, record: MoveRecord, context: GameContext) -> None:
        del context
        self.move_recorded.emit(record)

    def _forward_game_over(self, context: GameContext) -> None:
        self.game_over.emit(context)
