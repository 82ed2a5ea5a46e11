"""Game state machine — tracks phase transitions and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pawnchess.core.board import PawnState
from pawnchess.core.enums import Color, GameResult
from pawnchess.core.move_executor import MoveExecutor
from pawnchess.core.move_generator import MoveGenerator
from pawnchess.core.notation import (
    STARTING_LAYOUT,
    layout_from_state,
    side_from_layout,
    state_from_layout,
)
from pawnchess.core.rules import Rules
from pawnchess.game.interfaces import GamePhase

if TYPE_CHECKING:
    from pawnchess.core.move import Move
    from pawnchess.core.piece import Pawn
    from pawnchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    mover: Color
    layout_after: str
    captured: Pawn | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Manages game lifecycle: pawns, side to move, phase, result, history.

    This is a pure data/logic class — no I/O.
    """

    pawns: PawnState = field(default_factory=PawnState.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_layout: str = field(default=STARTING_LAYOUT, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, layout: str | None = None) -> None:
        """Initialise (or reset) the game."""
        self.start_layout = layout or STARTING_LAYOUT
        self.pawns = state_from_layout(self.start_layout)
        self.side_to_move = side_from_layout(self.start_layout)
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        mover = self.side_to_move
        captured = MoveExecutor(self.pawns).execute(move)

        self.side_to_move = mover.opposite
        record = MoveRecord(
            move=move,
            mover=mover,
            layout_after=layout_from_state(self.pawns, self.side_to_move),
            captured=captured,
        )
        self.move_history.append(record)
        _LOGGER.debug("%s played %s (%s)", mover, move, move.flag.name)

        self._check_game_over(mover)
        return record

    def exit(self) -> None:
        self.phase = GamePhase.EXITED

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def layout(self) -> str:
        return layout_from_state(self.pawns, self.side_to_move)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.pawns).generate_legal_moves(self.side_to_move)

    def legal_destinations(self, origin: Square) -> set[Square]:
        pawn = self.pawns[origin]
        if pawn is None:
            return set()
        return MoveGenerator(self.pawns).legal_destinations(pawn)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self, mover: Color) -> None:
        result = Rules.game_result(self.pawns, mover)
        if result == GameResult.IN_PROGRESS:
            return
        self.result = result
        if result == GameResult.STALEMATE:
            self.phase = GamePhase.STALEMATE
        else:
            self.phase = GamePhase.WON
        _LOGGER.info("Game over after %d plies: %s", self.ply_count, result.name)
