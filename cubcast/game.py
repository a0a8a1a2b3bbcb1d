"""Game state, input handling and the window loop."""

from __future__ import annotations

import argparse
import sys
from array import array
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence, Union

from cubcast.image import (
    EMPTY_COLOR,
    FLOOR_COLOR,
    PLAYER_SIZE,
    RECT_SIZE,
    WALL_COLOR,
    Image,
    draw_rectangle,
)
from cubcast.level import Level
from cubcast.parsing import ParseError, parse
from cubcast.player import MOVE_SPEED, TURN_SPEED, PlayerData
from cubcast.raycast import IMG_HEIGHT, IMG_WIDTH, RayHit, raycast_dda
from cubcast.tiles import Tile, is_player

DEFAULT_MAP = "maps/subject_example1.cub"
UNKNOWN_TILE_COLOR = 0x12345678
MOUSE_SENSITIVITY = 0.0006
WINDOW_TITLE = "CUB3D"


class Key(IntEnum):
    """Keys the game reacts to, with their keyboard codes."""

    A = 65
    D = 68
    S = 83
    W = 87
    ESCAPE = 256
    RIGHT = 262
    LEFT = 263


def tile_color(tile: str) -> int:
    """Return the minimap colour for a tile character."""
    if tile == Tile.FLOOR:
        return FLOOR_COLOR
    if tile == Tile.EMPTY:
        return EMPTY_COLOR
    if tile == Tile.WALL:
        return WALL_COLOR
    if is_player(tile):
        return FLOOR_COLOR
    return UNKNOWN_TILE_COLOR


def player_draw_location(x: int, y: int) -> tuple[int, int]:
    """Return the top-left pixel of the player marker drawn in map cell ``(x, y)``."""
    offset = RECT_SIZE // 2 - (PLAYER_SIZE // 2 - 1)
    return x * RECT_SIZE + offset, y * RECT_SIZE + offset


@dataclass
class Game:
    """A running level with its minimap and first-person frame."""

    level: Level
    width: int = int(IMG_WIDTH)
    height: int = int(IMG_HEIGHT)
    prev_mouse_x: Optional[float] = None
    running: bool = True
    minimap: Image = field(init=False)
    frame: Image = field(init=False)

    def __post_init__(self) -> None:
        if self.level.player is None:
            raise ValueError("level has no player")
        self.minimap = Image(self.width, self.height)
        self.frame = Image(self.width, self.height)

    @property
    def player(self) -> PlayerData:
        """The level's player."""
        assert self.level.player is not None
        return self.level.player

    @property
    def center(self) -> tuple[float, float]:
        """The point the mouse is held at between frames."""
        return self.width / 2, self.height / 2

    def draw_minimap(self) -> None:
        """Draw one coloured square per map tile; tiles that do not fit are left out."""
        for y, row in enumerate(self.level.grid):
            for x, tile in enumerate(row):
                left, top = x * RECT_SIZE, y * RECT_SIZE
                if left + RECT_SIZE > self.minimap.width or top + RECT_SIZE > self.minimap.height:
                    continue
                draw_rectangle(self.minimap, RECT_SIZE, RECT_SIZE, left, top, tile_color(tile))

    def draw(self) -> list[RayHit]:
        """Redraw the minimap and the wall view from the current player state."""
        self.frame.clear()
        self.minimap.clear()
        self.draw_minimap()
        return raycast_dda(self.level, self.minimap, self.frame)

    def handle_key(self, key: Union[Key, int]) -> None:
        """Move, turn or quit in response to a key; other keys are reported."""
        player = self.player
        if key == Key.W:
            player.move(MOVE_SPEED)
        elif key == Key.A:
            player.move(0.0, -MOVE_SPEED)
        elif key == Key.S:
            player.move(-MOVE_SPEED)
        elif key == Key.D:
            player.move(0.0, MOVE_SPEED)
        elif key == Key.RIGHT:
            player.rotate(TURN_SPEED)
        elif key == Key.LEFT:
            player.rotate(-TURN_SPEED)
        elif key == Key.ESCAPE:
            self.running = False
        else:
            print(f"Key {int(key)} pressed")

    def mouse_move(self, x: float, y: float) -> None:
        """Turn by the horizontal distance of the mouse from the window centre."""
        del y
        if self.prev_mouse_x is None:
            self.prev_mouse_x = x
            return
        x_delta = self.width / 2 - x
        self.prev_mouse_x = x
        self.player.rotate(-(x_delta * MOUSE_SENSITIVITY))


def _to_surface(img: Image):
    import pygame

    data = array("I", img.pixels)
    if sys.byteorder == "big":
        data.byteswap()
    return pygame.image.frombuffer(data.tobytes(), (img.width, img.height), "RGBA")


def _run_window(game: Game) -> None:
    import pygame

    keymap = {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.width, game.height))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.mouse.set_visible(False)
        pygame.key.set_repeat(200, 30)
        center = (int(game.center[0]), int(game.center[1]))
        pygame.mouse.set_pos(center)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.handle_key(keymap.get(event.key, event.key))
                elif event.type == pygame.MOUSEMOTION:
                    game.mouse_move(*event.pos)
            if not game.running:
                break
            game.draw()
            screen.fill((0, 0, 0))
            screen.blit(_to_surface(game.frame), (0, 0))
            screen.blit(_to_surface(game.minimap), (0, 0))
            pygame.display.flip()
            pygame.mouse.set_pos(center)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a level, print its texture settings and run the game window."""
    parser = argparse.ArgumentParser(prog="cubcast", description="Ray-cast a .cub level.")
    parser.add_argument("map", nargs="?", default=DEFAULT_MAP, help="path of the .cub file")
    args = parser.parse_args(argv)
    try:
        level = parse(args.map)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1
    textures = level.textures
    print("Texture struct:")
    print(f"NO: {textures.north}")
    print(f"SO: {textures.south}")
    print(f"WE: {textures.west}")
    print(f"EA: {textures.east}")
    print(f"F: {textures.floor}")
    print(f"C: {textures.ceiling}")
    _run_window(Game(level))
    return 0