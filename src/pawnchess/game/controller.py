"""GameController — the central orchestrator of a pawn-only game.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from pawnchess.core.enums import Color, GameResult
from pawnchess.core.move_generator import MoveGenerator
from pawnchess.core.types import Square
from pawnchess.game.interfaces import (
    GamePhase,
    IGameController,
    MoveOutcome,
    RejectReason,
)
from pawnchess.game.player import HumanPlayer
from pawnchess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, applies them, switches
    turns, detects the end of the game and notifies listeners.

    Each controller owns its own state, so several games can run side by
    side.  Methods are meant to be called from a single thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, HumanPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def current_player(self) -> HumanPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> HumanPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white_name: str = "",
        black_name: str = "",
        layout: str | None = None,
    ) -> None:
        self._players = {
            Color.WHITE: HumanPlayer(Color.WHITE, white_name),
            Color.BLACK: HumanPlayer(Color.BLACK, black_name),
        }
        self._state = GameState()
        self._state.setup(layout)
        _LOGGER.info(
            "New game: %s (white) vs %s (black)",
            self._players[Color.WHITE].name,
            self._players[Color.BLACK].name,
        )
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def apply_move(self, origin: Square, destination: Square) -> MoveOutcome:
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return self._reject(RejectReason.GAME_OVER, origin, destination)

        pawn = state.pawns[origin]
        if pawn is None or pawn.color != state.side_to_move:
            return self._reject(RejectReason.NO_SUCH_PAWN, origin, destination)

        move = MoveGenerator(state.pawns).find_move(pawn, destination)
        if move is None:
            return self._reject(RejectReason.ILLEGAL_DESTINATION, origin, destination)

        record = state.apply_move(move)
        self._emit_move(record)

        if state.is_game_over:
            self._emit_game_over(state.result)
        return MoveOutcome.applied(move, state.result)

    def legal_destinations(self, origin: Square) -> set[Square]:
        return self._state.legal_destinations(origin)

    def exit(self) -> None:
        if self._state.is_game_over:
            return
        self._state.exit()
        self._emit_phase(GamePhase.EXITED)

    def snapshot(self) -> dict[Square, Color]:
        return self._state.pawns.snapshot()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(
        self, reason: RejectReason, origin: Square, destination: Square
    ) -> MoveOutcome:
        _LOGGER.debug(
            "Rejected %s%s for %s: %s",
            origin,
            destination,
            self._state.side_to_move,
            reason.name,
        )
        return MoveOutcome.rejected(reason, self._state.result)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(self._state.phase)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
