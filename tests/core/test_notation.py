"""Tests for layout strings."""

import pytest

from pawnchess.core.board import PawnState
from pawnchess.core.enums import Color
from pawnchess.core.notation import (
    STARTING_LAYOUT,
    layout_from_state,
    side_from_layout,
    state_from_layout,
)
from pawnchess.core.piece import Pawn
from pawnchess.core.types import B5, C4, C6, D5, E4


class TestParse:
    def test_starting_layout(self) -> None:
        assert state_from_layout(STARTING_LAYOUT) == PawnState.initial()

    def test_placement_only(self) -> None:
        state = state_from_layout("8/8/8/3p4/4P3/8/8/8")
        assert state[D5] == Pawn(D5, Color.BLACK)
        assert state[E4] == Pawn(E4, Color.WHITE)
        assert state.count(Color.WHITE) == 1
        assert state.count(Color.BLACK) == 1

    def test_en_passant_field(self) -> None:
        state = state_from_layout("8/8/2p5/1p6/P1P5/8/8/8 w b5")
        assert state.en_passant_targets == {Pawn(B5, Color.BLACK)}
        assert state[C6] == Pawn(C6, Color.BLACK)

    def test_white_en_passant_target(self) -> None:
        state = state_from_layout("8/8/2p5/1p6/P1P5/8/8/8 b c4")
        assert state.en_passant_targets == {Pawn(C4, Color.WHITE)}

    @pytest.mark.parametrize(
        "layout",
        [
            # two targets at once
            "8/8/2p5/1p6/P1P5/8/8/8 w c4,b5",
            # target belongs to the side to move
            "8/8/2p5/1p6/P1P5/8/8/8 w c4",
            "8/8/2p5/1p6/P1P5/8/8/8 b b5",
            # target not on its double-step landing row
            "8/8/8/8/8/Pp6/8/8 b a3",
            "8/8/2p5/1p6/P1P5/8/8/8 w c6",
            # empty square
            "8/8/2p5/1p6/P1P5/8/8/8 w d5",
        ],
    )
    def test_invalid_en_passant_field(self, layout: str) -> None:
        with pytest.raises(ValueError):
            state_from_layout(layout)

    def test_side(self) -> None:
        assert side_from_layout(STARTING_LAYOUT) == Color.WHITE
        assert side_from_layout("8/8/8/8/8/8/8/8 b -") == Color.BLACK
        assert side_from_layout("8/8/8/8/8/8/8/8") == Color.WHITE

    @pytest.mark.parametrize(
        "layout",
        [
            "",
            "8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "7/8/8/8/8/8/8/8",
            "pppppppppp/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/7n",
            "8/8/8/8/8/8/8/8 w e4",
            "8/8/8/8/8/8/8/8 w - extra",
            "8/8/8/8/8/8/8/8 x -",
        ],
    )
    def test_invalid(self, layout: str) -> None:
        with pytest.raises(ValueError):
            state_from_layout(layout)

    def test_invalid_side(self) -> None:
        with pytest.raises(ValueError):
            side_from_layout("8/8/8/8/8/8/8/8 x -")


class TestSerialize:
    def test_starting(self) -> None:
        assert layout_from_state(PawnState.initial()) == STARTING_LAYOUT

    def test_side_and_targets(self) -> None:
        state = state_from_layout("8/8/8/3p4/4P3/8/8/8 b e4")
        assert layout_from_state(state, Color.BLACK) == "8/8/8/3p4/4P3/8/8/8 b e4"

    def test_empty_board(self) -> None:
        assert layout_from_state(PawnState()) == "8/8/8/8/8/8/8/8 w -"
