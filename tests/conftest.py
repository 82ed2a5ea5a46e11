"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

import pytest

from pawnchess.core.board import PawnState
from pawnchess.core.enums import Color
from pawnchess.core.piece import Pawn
from pawnchess.core.types import parse_square

StateFactory = Callable[..., PawnState]


def build_state(
    white: Iterable[str] = (),
    black: Iterable[str] = (),
    en_passant: Iterable[str] = (),
) -> PawnState:
    """PawnState from square names, e.g. ``build_state(["e4"], ["d5"])``."""
    state = PawnState()
    for name in white:
        state.place(Pawn(parse_square(name), Color.WHITE))
    for name in black:
        state.place(Pawn(parse_square(name), Color.BLACK))
    for name in en_passant:
        pawn = state[parse_square(name)]
        assert pawn is not None, f"no pawn on {name} to flag"
        state.en_passant_targets.add(pawn)
    return state


@pytest.fixture
def make_state() -> StateFactory:
    return build_state


@pytest.fixture
def initial_state() -> PawnState:
    return PawnState.initial()


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from pawnchess.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")
