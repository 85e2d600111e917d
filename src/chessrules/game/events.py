"""The four events accepted by the state machine, and their plain-dict form.

The UI sends payloads shaped like::

    {"type": "SELECT_PIECE", "position": {"row": 6, "col": 4}}
    {"type": "MOVE_PIECE", "position": {"row": 4, "col": 4}}
    {"type": "CHOOSE_PROMOTION_PIECE", "piece": "Q"}
    {"type": "RESET_GAME"}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from chessrules.core.enums import PieceType
from chessrules.core.piece import piece_type_from_letter
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class SelectPiece:
    TYPE: ClassVar[str] = "SELECT_PIECE"

    square: Square


@dataclass(frozen=True, slots=True)
class MovePiece:
    TYPE: ClassVar[str] = "MOVE_PIECE"

    square: Square


@dataclass(frozen=True, slots=True)
class ChoosePromotionPiece:
    TYPE: ClassVar[str] = "CHOOSE_PROMOTION_PIECE"

    piece_type: PieceType


@dataclass(frozen=True, slots=True)
class ResetGame:
    TYPE: ClassVar[str] = "RESET_GAME"


GameEvent = Union[SelectPiece, MovePiece, ChoosePromotionPiece, ResetGame]


def event_from_dict(payload: Mapping[str, Any]) -> GameEvent:
    """Decode a UI payload into an event object.

    Raises :class:`ValueError` for unknown types or malformed fields.
    """
    kind = payload.get("type")
    if kind == SelectPiece.TYPE:
        return SelectPiece(_square_from(payload))
    if kind == MovePiece.TYPE:
        return MovePiece(_square_from(payload))
    if kind == ChoosePromotionPiece.TYPE:
        letter = payload.get("piece")
        if not isinstance(letter, str):
            raise ValueError(f"Missing promotion piece in {dict(payload)!r}")
        return ChoosePromotionPiece(piece_type_from_letter(letter))
    if kind == ResetGame.TYPE:
        return ResetGame()
    raise ValueError(f"Unknown event type: {kind!r}")


def _square_from(payload: Mapping[str, Any]) -> Square:
    position = payload.get("position")
    if not isinstance(position, Mapping):
        raise ValueError(f"Missing position in {dict(payload)!r}")
    row, col = position.get("row"), position.get("col")
    if not isinstance(row, int) or not isinstance(col, int):
        raise ValueError(f"Position needs integer row/col: {dict(position)!r}")
    square = Square(row, col)
    if not square.is_on_board:
        raise ValueError(f"Position off the board: {dict(position)!r}")
    return square
