"""Layout strings: a FEN-like text form for pawn positions.

A layout has up to three space-separated fields::

    8/pppppppp/8/8/8/8/PPPPPPPP/8 w -

1. placement, row 8 first, ``P`` = white pawn, ``p`` = black pawn,
   digits = runs of empty squares;
2. side to move, ``w`` or ``b`` (default ``w``);
3. square of the pawn capturable en passant, or ``-``. It must hold a pawn
   of the side that just moved, standing where a double step lands.
"""

from __future__ import annotations

from pawnchess.core.board import PawnState
from pawnchess.core.enums import Color
from pawnchess.core.piece import Pawn, forward, start_row
from pawnchess.core.types import COLUMNS, Square, parse_square

STARTING_LAYOUT = "8/pppppppp/8/8/8/8/PPPPPPPP/8 w -"

_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def state_from_layout(layout: str) -> PawnState:
    """Parse a layout string into a :class:`PawnState`."""
    parts = layout.split()
    if not (1 <= len(parts) <= 3):
        raise ValueError(f"Invalid layout (need 1-3 fields): {layout!r}")

    if len(parts) >= 2 and parts[1] not in _SIDE_CHARS:
        raise ValueError(f"Invalid layout side-to-move field: {parts[1]!r}")

    rows = parts[0].split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid layout board (must contain 8 rows): {layout!r}")

    state = PawnState()
    for row_idx, row_text in enumerate(rows):
        row = 8 - row_idx
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid layout row width: {layout!r}")
                state.place(Pawn.from_char(ch, Square(COLUMNS[col], row)))
                col += 1
            if col > 8:
                raise ValueError(f"Invalid layout row width: {layout!r}")
        if col != 8:
            raise ValueError(f"Invalid layout row width: {layout!r}")

    if len(parts) == 3 and parts[2] != "-":
        state.en_passant_targets.add(
            _en_passant_pawn(state, parts[2], side_from_layout(layout).opposite)
        )

    return state


def _en_passant_pawn(state: PawnState, name: str, mover: Color) -> Pawn:
    """Pawn named by the en-passant field; *mover* made the last move."""
    if "," in name:
        raise ValueError(f"Invalid layout: more than one en-passant square {name!r}")
    pawn = state[parse_square(name)]
    if pawn is None or pawn.color != mover:
        raise ValueError(f"Invalid layout en-passant square {name!r}: no {mover} pawn")
    if pawn.square.row != start_row(mover) + 2 * forward(mover):
        raise ValueError(f"Invalid layout en-passant square {name!r}: no double step")
    return pawn


def side_from_layout(layout: str) -> Color:
    """Side to move recorded in *layout* (White when omitted)."""
    parts = layout.split()
    if len(parts) < 2:
        return Color.WHITE
    try:
        return _SIDE_CHARS[parts[1]]
    except KeyError:
        raise ValueError(f"Invalid layout side-to-move field: {parts[1]!r}") from None


def layout_from_state(state: PawnState, side_to_move: Color = Color.WHITE) -> str:
    """Serialize *state* to a layout string."""
    rows: list[str] = []
    for row in range(8, 0, -1):
        empty = 0
        row_text = ""
        for column in COLUMNS:
            pawn = state[Square(column, row)]
            if pawn is None:
                empty += 1
                continue
            if empty:
                row_text += str(empty)
                empty = 0
            row_text += str(pawn)
        if empty:
            row_text += str(empty)
        rows.append(row_text)

    side = "w" if side_to_move == Color.WHITE else "b"
    targets = sorted(p.square for p in state.en_passant_targets)
    ep = ",".join(str(sq) for sq in targets) if targets else "-"
    return f"{'/'.join(rows)} {side} {ep}"
