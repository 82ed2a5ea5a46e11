"""Tests for the console front end, driven by scripted input."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from pawnchess.core.board import PawnState
from pawnchess.core.types import E2, E4
from pawnchess.game.controller import GameController
from pawnchess.game.interfaces import GamePhase
from pawnchess.ui.console import (
    EXIT_COMMAND,
    ConsoleGame,
    MoveCommand,
    parse_command,
    render_board,
)
from pawnchess.ui.i18n import set_language


class _Script:
    """Feeds lines to the game and records everything it prints."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def read(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.extend(text.split("\n"))


def _run(
    lines: Iterable[str], layout: str | None = None
) -> tuple[GamePhase, _Script, GameController]:
    script = _Script(lines)
    ctrl = GameController()
    game = ConsoleGame(ctrl, script.read, script.write, layout=layout)
    return game.run(), script, ctrl


class TestParseCommand:
    def test_move(self) -> None:
        assert parse_command("e2e4") == MoveCommand(E2, E4)

    def test_exit(self) -> None:
        assert parse_command("exit") == EXIT_COMMAND

    def test_surrounding_whitespace(self) -> None:
        assert parse_command("  e2e4\n") == MoveCommand(E2, E4)

    @pytest.mark.parametrize(
        "text", ["", "e2", "e2e9", "i2i4", "E2E4", "e2-e4", "e2e4e5", "quit", "EXIT"]
    )
    def test_invalid(self, text: str) -> None:
        assert parse_command(text) is None


class TestRenderBoard:
    def test_initial_board(self) -> None:
        lines = render_board(PawnState.initial().snapshot()).split("\n")
        border = "  +---+---+---+---+---+---+---+---+"
        assert len(lines) == 19
        assert lines[0] == border
        assert lines[1] == "8 |   |   |   |   |   |   |   |   |"
        assert lines[3] == "7 | B | B | B | B | B | B | B | B |"
        assert lines[13] == "2 | W | W | W | W | W | W | W | W |"
        assert lines[16] == border
        assert lines[17] == "    a   b   c   d   e   f   g   h"
        assert lines[18] == ""

    def test_empty_board(self) -> None:
        lines = render_board({}).split("\n")
        assert all("W" not in line and "B" not in line for line in lines[:17])


class TestSession:
    def test_exit_right_away(self) -> None:
        phase, script, ctrl = _run(["Alice", "Bob", "exit"])
        assert phase == GamePhase.EXITED
        assert ctrl.phase == GamePhase.EXITED
        assert script.output[:3] == [
            " Pawns-Only Chess",
            "First Player's name:",
            "Second Player's name:",
        ]
        assert "Alice's turn:" in script.output
        assert script.output[-1] == "Bye!"

    def test_turns_alternate(self) -> None:
        _, script, _ = _run(["Alice", "Bob", "e2e4", "exit"])
        turns = [line for line in script.output if line.endswith("'s turn:")]
        assert turns == ["Alice's turn:", "Bob's turn:"]

    def test_board_reprinted_after_move(self) -> None:
        _, script, _ = _run(["Alice", "Bob", "e2e4", "exit"])
        assert script.output.count("4 |   |   |   |   | W |   |   |   |") == 1
        assert script.output.count("    a   b   c   d   e   f   g   h") == 2

    def test_malformed_input(self) -> None:
        _, script, ctrl = _run(["Alice", "Bob", "e2e9", "exit"])
        assert "Invalid Input" in script.output
        assert ctrl.state.ply_count == 0

    def test_no_pawn_at_origin(self) -> None:
        _, script, _ = _run(["Alice", "Bob", "e3e4", "exit"])
        assert "No white pawn at e3" in script.output

    def test_opponent_pawn_at_origin(self) -> None:
        _, script, _ = _run(["Alice", "Bob", "e2e4", "e2e3", "exit"])
        assert "No black pawn at e2" in script.output

    def test_illegal_destination(self) -> None:
        _, script, ctrl = _run(["Alice", "Bob", "e2e5", "exit"])
        assert "Invalid Input" in script.output
        assert "Bob's turn:" not in script.output
        assert ctrl.state.ply_count == 0

    def test_white_wins(self) -> None:
        phase, script, _ = _run(
            ["Alice", "Bob", "b7b8"], layout="8/1P5p/8/8/8/8/8/8 w -"
        )
        assert phase == GamePhase.WON
        assert script.output[-3:] == ["White Wins!", "Bye!", ""]

    def test_black_wins_by_elimination(self) -> None:
        phase, script, _ = _run(
            ["Alice", "Bob", "d5e4"], layout="8/8/8/3p4/4P3/8/8/8 b -"
        )
        assert phase == GamePhase.WON
        assert script.output[-3:] == ["Black Wins!", "Bye!", ""]

    def test_stalemate(self) -> None:
        phase, script, _ = _run(
            ["Alice", "Bob", "e4e5"], layout="8/8/4p3/8/4P3/8/8/8 w -"
        )
        assert phase == GamePhase.STALEMATE
        assert script.output[-2:] == ["Stalemate!", "Bye!"]

    def test_end_of_input_exits(self) -> None:
        phase, script, ctrl = _run(["Alice", "Bob", "e2e4"])
        assert phase == GamePhase.EXITED
        assert ctrl.phase == GamePhase.EXITED
        assert script.output[-1] == "Bye!"

    def test_end_of_input_before_names(self) -> None:
        phase, script, _ = _run(["Alice"])
        assert phase == GamePhase.EXITED
        assert script.output[-1] == "Bye!"

    def test_russian_strings(self) -> None:
        set_language("Russian")
        _, script, _ = _run(["Алиса", "Борис", "e3e4", "exit"])
        assert script.output[0] == " Шахматы только пешками"
        assert "Нет белой пешки на e3" in script.output
        assert script.output[-1] == "До свидания!"
