"""Internationalisation strings for the console front end.

Usage::

    from pawnchess.ui.i18n import t, set_language

    set_language("Russian")
    print(t().bye)                     # "До свидания!"
    print(t().wins.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass

from pawnchess.core.enums import Color


@dataclass(frozen=True)
class Strings:
    title: str
    first_player_name: str
    second_player_name: str
    turn: str  # "{name}'s turn:"
    invalid_input: str
    no_pawn: str  # "No {color} pawn at {square}"
    wins: str  # "{color} Wins!"
    stalemate: str
    bye: str

    # Color names: capitalised for results, lowercase inside sentences.
    color_white: str
    color_black: str
    color_white_lower: str
    color_black_lower: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black

    def color_name_lower(self, color: Color) -> str:
        if color == Color.WHITE:
            return self.color_white_lower
        return self.color_black_lower


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    title=" Pawns-Only Chess",
    first_player_name="First Player's name:",
    second_player_name="Second Player's name:",
    turn="{name}'s turn:",
    invalid_input="Invalid Input",
    no_pawn="No {color} pawn at {square}",
    wins="{color} Wins!",
    stalemate="Stalemate!",
    bye="Bye!",
    color_white="White",
    color_black="Black",
    color_white_lower="white",
    color_black_lower="black",
)

_RU = Strings(
    title=" Шахматы только пешками",
    first_player_name="Имя первого игрока:",
    second_player_name="Имя второго игрока:",
    turn="Ход игрока {name}:",
    invalid_input="Неверный ввод",
    no_pawn="Нет {color} пешки на {square}",
    wins="{color} побеждают!",
    stalemate="Пат!",
    bye="До свидания!",
    color_white="Белые",
    color_black="Чёрные",
    color_white_lower="белой",
    color_black_lower="чёрной",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
