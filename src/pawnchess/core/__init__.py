"""Core domain layer — pure pawn-only chess logic with zero external dependencies.

Quick start::

    from pawnchess.core import MoveGenerator, PawnState, parse_square

    state = PawnState.initial()
    gen = MoveGenerator(state)
    print(gen.legal_destinations(state[parse_square("e2")]))
"""

from pawnchess.core.board import PawnState
from pawnchess.core.enums import Color, GameResult, MoveFlag
from pawnchess.core.move import Move
from pawnchess.core.move_executor import MoveExecutor
from pawnchess.core.move_generator import MoveGenerator
from pawnchess.core.notation import (
    STARTING_LAYOUT,
    layout_from_state,
    side_from_layout,
    state_from_layout,
)
from pawnchess.core.piece import Pawn, far_row, forward, start_row
from pawnchess.core.rules import Rules
from pawnchess.core.types import Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "Color",
    "GameResult",
    "MoveFlag",
    # Types / helpers
    "Square",
    "far_row",
    "forward",
    "parse_square",
    "square_name",
    "start_row",
    # Domain objects
    "Move",
    "MoveExecutor",
    "MoveGenerator",
    "Pawn",
    "PawnState",
    "Rules",
    # Notation
    "STARTING_LAYOUT",
    "layout_from_state",
    "side_from_layout",
    "state_from_layout",
]
