"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from pawnchess.core.notation import state_from_layout
from pawnchess.ui.console import ConsoleGame
from pawnchess.ui.i18n import LANGUAGES, set_language

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pawnchess", description="Two-player pawns-only chess in the terminal"
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default="English",
        help="Language of console messages (default: English)",
    )
    parser.add_argument(
        "--layout",
        metavar="LAYOUT",
        help='Start from a custom layout, e.g. "8/8/8/3p4/4P3/8/8/8 w -"',
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity, written to stderr (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a console game. Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    set_language(args.language)

    if args.layout is not None:
        try:
            state_from_layout(args.layout)
        except ValueError as exc:
            _LOGGER.error("Rejected --layout: %s", exc)
            print(f"pawnchess: invalid layout: {exc}", file=sys.stderr)
            return 2

    phase = ConsoleGame(layout=args.layout).run()
    _LOGGER.info("Session ended in phase %s", phase.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
