"""Text-console front end: board printing, command parsing, input loop."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from pawnchess.core.enums import Color, GameResult
from pawnchess.core.types import COLUMNS, Square, parse_square
from pawnchess.game.controller import GameController
from pawnchess.game.interfaces import GamePhase, IGameController, RejectReason
from pawnchess.ui.i18n import Strings, t

_LOGGER = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
_COMMAND_RE = re.compile(r"[a-h][1-8][a-h][1-8]|exit")

_BORDER = "  +---+---+---+---+---+---+---+---+"
_FOOTER = "    " + "   ".join(COLUMNS)
_CELL: dict[Color, str] = {Color.WHITE: "W", Color.BLACK: "B"}

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """A move typed as four characters, e.g. ``e2e4``."""

    origin: Square
    destination: Square


def parse_command(text: str) -> MoveCommand | Literal["exit"] | None:
    """Parse one line of input; ``None`` means it is not a valid command."""
    text = text.strip()
    if not _COMMAND_RE.fullmatch(text):
        return None
    if text == EXIT_COMMAND:
        return EXIT_COMMAND
    return MoveCommand(parse_square(text[:2]), parse_square(text[2:]))


def render_board(snapshot: dict[Square, Color]) -> str:
    """Board grid with ``W``/``B`` cells, row 8 on top."""
    lines = [_BORDER]
    for row in range(8, 0, -1):
        cells = []
        for column in COLUMNS:
            color = snapshot.get(Square(column, row))
            cells.append(f" {' ' if color is None else _CELL[color]} |")
        lines.append(f"{row} |{''.join(cells)}")
        lines.append(_BORDER)
    lines.append(_FOOTER)
    lines.append("")
    return "\n".join(lines)


class ConsoleGame:
    """Interactive two-player session over a pair of line-oriented streams.

    Args:
        controller: Game engine; a fresh :class:`GameController` by default.
        input_fn: Reads one line (``input`` by default).
        output_fn: Writes one line (``print`` by default).
        strings: Locale strings; the active locale by default.
        layout: Optional starting layout instead of the standard setup.
    """

    def __init__(
        self,
        controller: IGameController | None = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        strings: Strings | None = None,
        layout: str | None = None,
    ) -> None:
        self._controller = controller if controller is not None else GameController()
        self._input = input_fn
        self._output = output_fn
        self._strings = strings if strings is not None else t()
        self._layout = layout

    @property
    def controller(self) -> IGameController:
        return self._controller

    # ── Session ──────────────────────────────────────────────────────────

    def run(self) -> GamePhase:
        """Play one game to completion and return the terminal phase."""
        s = self._strings
        self._output(s.title)
        try:
            white_name = self._ask(s.first_player_name)
            black_name = self._ask(s.second_player_name)
        except EOFError:
            self._output(s.bye)
            return GamePhase.EXITED

        ctrl = self._controller
        ctrl.new_game(white_name, black_name, layout=self._layout)
        self._print_board()

        names = {Color.WHITE: white_name, Color.BLACK: black_name}
        while True:
            side = ctrl.side_to_move
            command = self._read_command(names[side])
            if not isinstance(command, MoveCommand):
                ctrl.exit()
                self._output(s.bye)
                return GamePhase.EXITED

            outcome = ctrl.apply_move(command.origin, command.destination)
            if outcome.rejection == RejectReason.NO_SUCH_PAWN:
                self._output(
                    s.no_pawn.format(
                        color=s.color_name_lower(side), square=command.origin
                    )
                )
                continue
            if not outcome.accepted:
                self._output(s.invalid_input)
                continue

            self._print_board()

            winner = outcome.result.winner
            if winner is not None:
                self._output(s.wins.format(color=s.color_name(winner)))
                self._output(s.bye)
                self._output("")
                return GamePhase.WON
            if outcome.result == GameResult.STALEMATE:
                self._output(s.stalemate)
                self._output(s.bye)
                return GamePhase.STALEMATE

    # ── Internal helpers ─────────────────────────────────────────────────

    def _ask(self, message: str) -> str:
        self._output(message)
        return self._input()

    def _read_command(self, name: str) -> MoveCommand | Literal["exit"] | None:
        """Prompt until the input parses; ``None`` on end of input."""
        while True:
            try:
                line = self._ask(self._strings.turn.format(name=name))
            except EOFError:
                _LOGGER.debug("Input closed, leaving the game")
                return None
            command = parse_command(line)
            if command is not None:
                return command
            self._output(self._strings.invalid_input)

    def _print_board(self) -> None:
        self._output(render_board(self._controller.snapshot()))
