"""Game-layer interfaces and value types.

The console front end depends on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from pawnchess.core.enums import Color, GameResult

if TYPE_CHECKING:
    from pawnchess.core.move import Move
    from pawnchess.core.types import Square


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a pawn-only game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    WON = auto()
    STALEMATE = auto()
    EXITED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.STALEMATE, GamePhase.EXITED)


class RejectReason(IntEnum):
    """Why a submitted move was refused."""

    NO_SUCH_PAWN = auto()  # origin empty or holds an opposing pawn
    ILLEGAL_DESTINATION = auto()
    GAME_OVER = auto()


# ── Move outcome ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Result of :meth:`IGameController.apply_move`.

    Either *rejection* is set (nothing changed) or *move* is the move that
    was applied and *result* the game result right after it.
    """

    result: GameResult
    move: Move | None = None
    rejection: RejectReason | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None

    @classmethod
    def applied(cls, move: Move, result: GameResult) -> MoveOutcome:
        return cls(result=result, move=move)

    @classmethod
    def rejected(cls, reason: RejectReason, result: GameResult) -> MoveOutcome:
        return cls(result=result, rejection=reason)


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white_name: str = "",
        black_name: str = "",
        layout: str | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def apply_move(self, origin: Square, destination: Square) -> MoveOutcome:
        """Submit a move for the side to move."""

    @abstractmethod
    def legal_destinations(self, origin: Square) -> set[Square]:
        """Squares the pawn on *origin* may move to."""

    @property
    @abstractmethod
    def side_to_move(self) -> Color:
        """Side whose turn it is."""

    @abstractmethod
    def exit(self) -> None:
        """End the session without a result."""

    @abstractmethod
    def snapshot(self) -> dict[Square, Color]:
        """Which side's pawn stands on every occupied square."""
