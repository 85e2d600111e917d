"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """A single half-move from one square to another.

    ``promotion`` is only filled in once the promoted type is known; a pawn
    reaching the far rank is first applied with ``promotion=None`` and
    resolved later by the state machine.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def is_castle(self) -> bool:
        return self.flag.is_castle
