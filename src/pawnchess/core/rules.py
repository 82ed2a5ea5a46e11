"""High-level rules: win by far rank or elimination, stalemate detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pawnchess.core.enums import Color, GameResult
from pawnchess.core.move_generator import MoveGenerator
from pawnchess.core.piece import far_row

if TYPE_CHECKING:
    from pawnchess.core.board import PawnState


class Rules:
    """Static rule-checker that operates on a :class:`PawnState`."""

    # Stalemate is checked for both sides after every move, not only for the
    # side about to move: one side being frozen ends the game.

    @staticmethod
    def is_eliminated(state: PawnState, color: Color) -> bool:
        return state.count(color) == 0

    @staticmethod
    def has_reached_far_row(state: PawnState, color: Color) -> bool:
        target = far_row(color)
        return any(p.square.row == target for p in state.pawns(color))

    @staticmethod
    def is_win(state: PawnState) -> bool:
        return any(
            Rules.is_eliminated(state, color)
            or Rules.has_reached_far_row(state, color)
            for color in Color
        )

    @staticmethod
    def is_blocked(state: PawnState, color: Color) -> bool:
        """Whether no pawn of *color* has a legal move."""
        gen = MoveGenerator(state)
        return not any(gen.has_moves(p) for p in state.pawns(color))

    @staticmethod
    def is_stalemate(state: PawnState) -> bool:
        if Rules.is_win(state):
            return False
        return Rules.is_blocked(state, Color.WHITE) or Rules.is_blocked(
            state, Color.BLACK
        )

    @staticmethod
    def game_result(state: PawnState, mover: Color) -> GameResult:
        """Classify *state* right after *mover* completed a move."""
        if Rules.is_win(state):
            return GameResult.win_for(mover)
        if Rules.is_stalemate(state):
            return GameResult.STALEMATE
        return GameResult.IN_PROGRESS
