"""Reading ``.cub`` level descriptions: texture settings followed by a map grid."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, Union

from cubcast.level import Level, Textures
from cubcast.player import retrieve_player
from cubcast.tiles import Tile, is_player, is_whitespace, skip_whitespaces

TEXTURE_COUNT = 6

_WALL_KEYS = (("NO", "north"), ("EA", "east"), ("SO", "south"), ("WE", "west"))
_COLOUR_KEYS = (("F", "floor"), ("C", "ceiling"))


class ParseError(ValueError):
    """Raised when a level description cannot be read or is not valid."""


def _is_blank(line: str) -> bool:
    return skip_whitespaces(line) == len(line)


def _strip_whitespace(line: str) -> str:
    return "".join(c for c in line if not is_whitespace(c))


def _assign(textures: Textures, entry: str) -> None:
    for prefix, name in _WALL_KEYS:
        if entry.startswith(prefix):
            setattr(textures, name, entry[len(prefix):])
            return
    for prefix, name in _COLOUR_KEYS:
        if entry.startswith(prefix):
            setattr(textures, name, entry[len(prefix):])
            return
    raise ParseError(f"unknown texture identifier in {entry!r}")


def parse_textures(lines: Iterable[str]) -> Textures:
    """Read the six texture lines from ``lines``.

    Blank lines are skipped and all whitespace inside an entry is removed.
    When ``lines`` is an iterator, it is left just past the line that follows
    the sixth entry; that line is consumed as the separator before the map.
    """
    it: Iterator[str] = iter(lines)
    entries: list[str] = []
    for line in it:
        if _is_blank(line):
            continue
        entries.append(_strip_whitespace(line))
        if len(entries) == TEXTURE_COUNT:
            next(it, None)
            break
    if len(entries) < TEXTURE_COUNT:
        raise ParseError(
            f"expected {TEXTURE_COUNT} texture lines, found {len(entries)}"
        )
    textures = Textures()
    for entry in entries:
        _assign(textures, entry)
    return textures


def _to_row(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    return "".join(Tile.EMPTY.value if is_whitespace(c) else c for c in line)


def parse_map(lines: Iterable[str]) -> Level:
    """Build a level from the remaining map lines; whitespace becomes empty tiles."""
    grid = [_to_row(line) for line in lines]
    if not grid:
        raise ParseError("no map data")
    return Level(grid=grid)


def _neighbour(grid: list[str], x: int, y: int) -> str:
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return Tile.EMPTY.value
    return grid[y][x]


def _invalid_tile(grid: list[str], x: int, y: int) -> bool:
    tile = grid[y][x]
    if tile in (Tile.EMPTY, Tile.WALL):
        return False
    if x == 0 or x + 1 >= len(grid[y]) or y == 0 or y + 1 >= len(grid):
        return True
    return any(
        _neighbour(grid, nx, ny) == Tile.EMPTY
        for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y))
    )


def map_is_valid(grid: list[str]) -> bool:
    """Return True if the map is closed by walls and holds exactly one player."""
    players = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if is_player(tile):
                players += 1
            if _invalid_tile(grid, x, y):
                return False
    return players == 1


def parse_text(text: str) -> Level:
    """Parse the full contents of a ``.cub`` description."""
    lines = iter(text.splitlines(keepends=True))
    textures = parse_textures(lines)
    level = parse_map(lines)
    level.textures = textures
    if not map_is_valid(level.grid):
        raise ParseError("Map is invalid")
    level.player = retrieve_player(level.grid)
    if level.player is None:
        raise ParseError("Player not found in map")
    return level


def parse(path: Union[str, os.PathLike]) -> Level:
    """Read and parse the ``.cub`` file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParseError(f"Failed to open .cub file: {path}") from exc
    return parse_text(text)