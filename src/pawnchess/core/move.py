"""Move value object (long-algebraic, four-character representation)."""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.core.enums import MoveFlag
from pawnchess.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single pawn move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def captured_square(self) -> Square | None:
        """Square of the pawn this move removes, if it captures."""
        if self.flag == MoveFlag.CAPTURE:
            return self.to_sq
        if self.flag == MoveFlag.EN_PASSANT:
            # The captured pawn stands beside the mover, not on the destination.
            return Square(self.to_sq.column, self.from_sq.row)
        return None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq}{self.to_sq}"
