"""Pawns-only chess: a two-player console game."""

__version__ = "0.1.0"
