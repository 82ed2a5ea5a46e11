"""Pawn value object."""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.core.enums import Color
from pawnchess.core.types import Square

# Per-color rules, indexed by Color.
_FORWARD: tuple[int, int] = (1, -1)
_START_ROW: tuple[int, int] = (2, 7)
_FAR_ROW: tuple[int, int] = (8, 1)

_CHARS: dict[Color, str] = {Color.WHITE: "P", Color.BLACK: "p"}


def forward(color: Color) -> int:
    """Row delta of one step forward for *color*."""
    return _FORWARD[int(color)]


def start_row(color: Color) -> int:
    """Row every pawn of *color* starts on."""
    return _START_ROW[int(color)]


def far_row(color: Color) -> int:
    """Row that wins the game when a pawn of *color* reaches it."""
    return _FAR_ROW[int(color)]


@dataclass(frozen=True, slots=True)
class Pawn:
    """Immutable value object: a pawn of *color* standing on *square*."""

    square: Square
    color: Color

    @property
    def direction(self) -> int:
        return forward(self.color)

    @property
    def on_start_row(self) -> bool:
        """Whether the pawn still stands on its color's starting row.

        A pawn never moves backwards, so this also means it has not moved yet.
        """
        return self.square.row == start_row(self.color)

    def moved_to(self, square: Square) -> Pawn:
        """Same pawn relocated to *square*."""
        return Pawn(square, self.color)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (uppercase = white, lowercase = black)."""
        return _CHARS[self.color]

    @classmethod
    def from_char(cls, char: str, square: Square) -> Pawn:
        """Create pawn from layout character, e.g. 'P' → white pawn."""
        for color, ch in _CHARS.items():
            if ch == char:
                return cls(square, color)
        raise ValueError(f"Invalid pawn character: {char!r}")
