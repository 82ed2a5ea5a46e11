"""MoveExecutor — applies a validated move to a :class:`PawnState`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnchess.core.enums import MoveFlag

if TYPE_CHECKING:
    from pawnchess.core.board import PawnState
    from pawnchess.core.move import Move
    from pawnchess.core.piece import Pawn


class MoveExecutor:
    """Mutates a :class:`PawnState` in place, one move at a time.

    Moves must come from :class:`~pawnchess.core.move_generator.MoveGenerator`
    for the same state; nothing is re-validated here.
    """

    __slots__ = ("_state",)

    def __init__(self, state: PawnState) -> None:
        self._state = state

    def execute(self, move: Move) -> Pawn | None:
        """Apply *move* and return the captured pawn, if any."""
        state = self._state
        piece = state[move.from_sq]
        if piece is None:
            raise ValueError(f"No pawn on {move.from_sq}")

        # Lift pawn from origin
        state.remove(piece)

        # Remove captured pawn (normal capture or en passant)
        captured: Pawn | None = None
        capture_sq = move.captured_square
        if capture_sq is not None:
            captured = state[capture_sq]
            if captured is None or captured.color == piece.color:
                raise ValueError(f"Nothing to capture on {capture_sq} for {move}")
            state.remove(captured)

        moved = piece.moved_to(move.to_sq)
        state.place(moved)

        # En-passant window lasts exactly one opponent ply
        state.en_passant_targets.clear()
        if move.flag == MoveFlag.DOUBLE_PAWN:
            state.en_passant_targets.add(moved)

        return captured
