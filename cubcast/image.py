"""In-memory RGBA images and the primitive drawing routines used for the views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

RECT_SIZE = 12
PLAYER_SIZE = 2
WALL_COLOR = 0xFF0000FF
EMPTY_COLOR = 0x00000000
FLOOR_COLOR = 0xFF00FF00
PLAYER_COLOR = 0xFFFF0000
LINE_SMOOTHNESS = 1000

_LINE_TOLERANCE = 0.001

Point = tuple[int, int]


@dataclass
class Image:
    """A ``width`` by ``height`` grid of 32-bit colour values, stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        self.pixels = [EMPTY_COLOR] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.width + x

    def clear(self) -> None:
        """Reset every pixel to transparent black."""
        self.pixels = [EMPTY_COLOR] * (self.width * self.height)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at ``(x, y)``."""
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Set the colour at ``(x, y)``."""
        self.pixels[self._index(x, y)] = color


def draw_rectangle(img: Image, width: int, height: int, x: int, y: int, color: int) -> None:
    """Fill a ``width`` by ``height`` rectangle whose top-left corner is ``(x, y)``.

    The rectangle must lie wholly inside the image; otherwise IndexError is raised
    and nothing is drawn.
    """
    if width <= 0 or height <= 0:
        return
    if x < 0 or y < 0 or x + width > img.width or y + height > img.height:
        raise IndexError(
            f"rectangle {width}x{height} at ({x}, {y}) outside "
            f"{img.width}x{img.height} image"
        )
    run = [color] * width
    for row in range(y, y + height):
        start = row * img.width + x
        img.pixels[start:start + width] = run


def _line_positions(a: Point, b: Point) -> Iterator[tuple[float, float]]:
    inc_x = (b[0] - a[0]) / LINE_SMOOTHNESS
    inc_y = (b[1] - a[1]) / LINE_SMOOTHNESS
    pos_x, pos_y = float(a[0]), float(a[1])
    for _ in range(2 * LINE_SMOOTHNESS):
        if abs(b[0] - pos_x) <= _LINE_TOLERANCE and abs(b[1] - pos_y) <= _LINE_TOLERANCE:
            return
        yield pos_x, pos_y
        pos_x += inc_x
        pos_y += inc_y


def draw_line(img: Image, a: Point, b: Point, color: int) -> None:
    """Draw a line from ``a`` towards ``b``, silently clipping pixels outside the image.

    A line whose ends coincide sets that single pixel, which must lie inside the image.
    """
    if a == b:
        img.set_pixel(a[0], a[1], color)
        return
    for pos_x, pos_y in _line_positions(a, b):
        rx = pos_x + 0.5
        ry = pos_y + 0.5
        if rx < 0 or ry < 0:
            continue
        x, y = int(rx), int(ry)
        if x < img.width and y < img.height:
            img.pixels[y * img.width + x] = color


def draw_vertical(img: Image, x: int, y_start: int, y_end: int, color: int) -> None:
    """Fill column ``x`` between the two rows inclusive, clamped to the image height."""
    if x < 0 or x >= img.width:
        return
    lo = max(min(y_start, y_end), 0)
    hi = min(max(y_start, y_end), img.height - 1)
    if hi < lo:
        return
    img.pixels[lo * img.width + x:hi * img.width + x + 1:img.width] = [color] * (hi - lo + 1)