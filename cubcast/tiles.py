"""Map tile kinds and small character helpers used by the parser."""

from __future__ import annotations

from enum import Enum

_WHITESPACE = frozenset("\t\n\v\f\r ")


class Tile(str, Enum):
    """Characters that have a meaning in a map grid."""

    EMPTY = " "
    WALL = "1"
    FLOOR = "0"
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


PLAYER_TILES = frozenset({Tile.NORTH, Tile.EAST, Tile.SOUTH, Tile.WEST})


def is_whitespace(c: str) -> bool:
    """Return True for a tab, newline, vertical tab, form feed, carriage return or space."""
    return c in _WHITESPACE and len(c) == 1


def skip_whitespaces(text: str, start: int = 0) -> int:
    """Return the index of the first non-whitespace character at or after ``start``."""
    index = start
    while index < len(text) and is_whitespace(text[index]):
        index += 1
    return index


def is_player(c: str) -> bool:
    """Return True if ``c`` marks the player's starting tile."""
    return c in PLAYER_TILES