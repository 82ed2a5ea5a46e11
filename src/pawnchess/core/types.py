"""Square value object and coordinate helpers.

Board layout:
    columns a–h (left to right from White's side)
    rows 1–8 (White starts on row 2, Black on row 7)
"""

from __future__ import annotations

from dataclasses import dataclass

COLUMNS = "abcdefgh"
ROWS = range(1, 9)


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate, e.g. ``Square("e", 4)``."""

    column: str
    row: int

    def __post_init__(self) -> None:
        if len(self.column) != 1 or self.column not in COLUMNS or self.row not in ROWS:
            raise ValueError(f"Square off the board: {self.column!r}{self.row!r}")

    # ── Navigation ───────────────────────────────────────────────────────

    @property
    def column_index(self) -> int:
        """Column index 0–7 (a–h)."""
        return COLUMNS.index(self.column)

    def offset(self, columns: int, rows: int) -> Square | None:
        """Square shifted by *columns*/*rows*, or ``None`` if it leaves the board."""
        col_idx = self.column_index + columns
        row = self.row + rows
        if not (0 <= col_idx < 8 and row in ROWS):
            return None
        return Square(COLUMNS[col_idx], row)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square("a", 1)`` → 'a1'."""
    return str(sq)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square("e", 4)``."""
    if len(name) != 2 or name[0] not in COLUMNS or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(name[0], int(name[1]))


def all_squares() -> list[Square]:
    """Every square, a1..h1 then a2..h2 and so on."""
    return [Square(c, r) for r in ROWS for c in COLUMNS]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(c, 1) for c in COLUMNS)
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(c, 2) for c in COLUMNS)
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(c, 3) for c in COLUMNS)
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(c, 4) for c in COLUMNS)
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(c, 5) for c in COLUMNS)
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(c, 6) for c in COLUMNS)
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(c, 7) for c in COLUMNS)
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(c, 8) for c in COLUMNS)
