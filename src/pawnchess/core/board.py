"""PawnState - pawn placement on an 8x8 board plus en-passant targets."""

from __future__ import annotations

from pawnchess.core.enums import Color
from pawnchess.core.piece import Pawn, start_row
from pawnchess.core.types import COLUMNS, Square, all_squares


class PawnState:
    """Mutable set of living pawns for both sides.

    Pawns are indexed by square per color, so each side is unique by square
    and a square can only be claimed once across both sides.
    """

    __slots__ = ("_pawns", "en_passant_targets")

    def __init__(self) -> None:
        # [color] -> {square: pawn}
        self._pawns: tuple[dict[Square, Pawn], dict[Square, Pawn]] = ({}, {})
        # Pawns that double-stepped on the previous ply.
        self.en_passant_targets: set[Pawn] = set()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Pawn | None:
        pawn = self._pawns[0].get(sq)
        if pawn is None:
            pawn = self._pawns[1].get(sq)
        return pawn

    def __contains__(self, pawn: object) -> bool:
        if not isinstance(pawn, Pawn):
            return False
        return self._pawns[int(pawn.color)].get(pawn.square) == pawn

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._pawns[0] and sq not in self._pawns[1]

    # -- Query helpers ------------------------------------------------------

    def pawns(self, color: Color) -> list[Pawn]:
        """All pawns of *color*, in no particular order."""
        return list(self._pawns[int(color)].values())

    @property
    def white_pawns(self) -> frozenset[Pawn]:
        return frozenset(self._pawns[Color.WHITE].values())

    @property
    def black_pawns(self) -> frozenset[Pawn]:
        return frozenset(self._pawns[Color.BLACK].values())

    def count(self, color: Color) -> int:
        return len(self._pawns[int(color)])

    def is_en_passant_target(self, pawn: Pawn) -> bool:
        return pawn in self.en_passant_targets

    def snapshot(self) -> dict[Square, Color]:
        """Fresh ``{square: color}`` mapping of every occupied square."""
        occupied: dict[Square, Color] = {}
        for sq in all_squares():
            pawn = self[sq]
            if pawn is not None:
                occupied[sq] = pawn.color
        return occupied

    # -- Mutation -----------------------------------------------------------

    def place(self, pawn: Pawn) -> None:
        """Put *pawn* on its square; the square must be empty."""
        if not self.is_empty(pawn.square):
            raise ValueError(f"Square {pawn.square} is already occupied")
        self._pawns[int(pawn.color)][pawn.square] = pawn

    def remove(self, pawn: Pawn) -> None:
        """Take *pawn* off the board; it also stops being an en-passant target."""
        side = self._pawns[int(pawn.color)]
        if side.get(pawn.square) != pawn:
            raise ValueError(f"No {pawn.color} pawn on {pawn.square}")
        del side[pawn.square]
        self.en_passant_targets.discard(pawn)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> PawnState:
        """Standard 16-pawn starting layout."""
        state = cls()
        for color in Color:
            for column in COLUMNS:
                state.place(Pawn(Square(column, start_row(color)), color))
        return state

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PawnState):
            return NotImplemented
        return (
            self._pawns == other._pawns
            and self.en_passant_targets == other.en_passant_targets
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8, 0, -1):
            cells = []
            for column in COLUMNS:
                p = self[Square(column, row)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
