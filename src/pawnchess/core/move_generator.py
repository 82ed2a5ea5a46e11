"""Legal move generation for pawns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnchess.core.enums import MoveFlag
from pawnchess.core.move import Move
from pawnchess.core.types import Square

if TYPE_CHECKING:
    from pawnchess.core.board import PawnState
    from pawnchess.core.enums import Color
    from pawnchess.core.piece import Pawn


# Column offsets of the two diagonal neighbours.
_SIDEWAYS: tuple[int, int] = (-1, 1)


class MoveGenerator:
    """Generates legal moves for pawns of a given :class:`PawnState`.

    Generation never mutates the state.
    """

    __slots__ = ("_state",)

    def __init__(self, state: PawnState) -> None:
        self._state = state

    # -- Public API ---------------------------------------------------------

    def legal_destinations(self, pawn: Pawn) -> set[Square]:
        """Squares *pawn* may legally move to."""
        return {move.to_sq for move in self.generate_moves(pawn)}

    def generate_moves(self, pawn: Pawn) -> list[Move]:
        """All legal moves of *pawn*, each flagged with its kind."""
        moves: list[Move] = []
        self._gen_pushes(pawn, moves)
        self._gen_captures(pawn, moves)
        return moves

    def generate_legal_moves(self, color: Color) -> list[Move]:
        """All legal moves for every pawn of *color*."""
        moves: list[Move] = []
        for pawn in self._state.pawns(color):
            moves.extend(self.generate_moves(pawn))
        return moves

    def has_moves(self, pawn: Pawn) -> bool:
        return bool(self.generate_moves(pawn))

    def find_move(self, pawn: Pawn, to_sq: Square) -> Move | None:
        """The legal move of *pawn* ending on *to_sq*, if there is one."""
        for move in self.generate_moves(pawn):
            if move.to_sq == to_sq:
                return move
        return None

    # -- Pawn generators (private) ------------------------------------------

    def _gen_pushes(self, pawn: Pawn, moves: list[Move]) -> None:
        state = self._state
        sq = pawn.square
        step = pawn.direction

        one_step = sq.offset(0, step)
        if one_step is None or not state.is_empty(one_step):
            return
        moves.append(Move(sq, one_step))

        if pawn.on_start_row:
            two_step = sq.offset(0, 2 * step)
            if two_step is not None and state.is_empty(two_step):
                moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

    def _gen_captures(self, pawn: Pawn, moves: list[Move]) -> None:
        state = self._state
        sq = pawn.square
        step = pawn.direction

        for side in _SIDEWAYS:
            cap_sq = sq.offset(side, step)
            if cap_sq is None:
                continue

            target = state[cap_sq]
            if target is not None:
                if target.color != pawn.color:
                    moves.append(Move(sq, cap_sq, MoveFlag.CAPTURE))
                continue

            beside = sq.offset(side, 0)
            if beside is None:
                continue
            victim = state[beside]
            if (
                victim is not None
                and victim.color != pawn.color
                and state.is_en_passant_target(victim)
            ):
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))
