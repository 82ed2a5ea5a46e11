"""Console front end — board printing, command parsing, input loop."""

from pawnchess.ui.console import ConsoleGame, MoveCommand, parse_command, render_board
from pawnchess.ui.i18n import LANGUAGES, Strings, set_language, t

__all__ = [
    "LANGUAGES",
    "ConsoleGame",
    "MoveCommand",
    "Strings",
    "parse_command",
    "render_board",
    "set_language",
    "t",
]
