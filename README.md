# cubcast

A small raycasting engine in the style of early first-person games. It reads a
`.cub` level description, checks that the map is closed, and renders a
first-person wall view with DDA (digital differential analysis) ray casting,
together with an overhead minimap that shows the map tiles and some of the
cast rays.

## Installing

```
pip install .
```

The window, keyboard and mouse handling use `pygame`.

## Running

```
cubcast path/to/level.cub
```

With no argument, `cubcast` loads `maps/subject_example1.cub` relative to the
current directory. Before opening the window it prints the texture settings it
read:

```
Texture struct:
NO: ./textures/north.xpm
SO: ./textures/south.xpm
WE: ./textures/west.xpm
EA: ./textures/east.xpm
F: 220,100,0
C: 225,30,0
```

If the file cannot be opened or is not a valid level, the error is printed to
standard error and the command exits with status 1.

The window is 1920×1080. The mouse pointer is hidden and held at the centre of
the window; moving it sideways turns the view.

### Controls

| Key          | Action                |
|--------------|-----------------------|
| W / S        | move forward / back   |
| A / D        | strafe left / right   |
| Left / Right | turn                  |
| Mouse        | turn                  |
| Escape       | quit                  |

Other keys print `Key <code> pressed`.

## The `.cub` format

A level starts with six non-blank identifier lines, in any order. All
whitespace inside them is removed, and each is recognised by its prefix:
`NO`, `EA`, `SO`, `WE` (wall textures), `F` (floor) and `C` (ceiling). The
values are kept as plain strings; colours are not checked or converted. Any
other identifier is an error. Blank lines before and between the identifiers
are skipped.

The line directly after the sixth identifier is taken as a separator and
dropped, so leave one blank line before the map. Every line after that is a
map row:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `1` is a wall, `0` is floor, and whitespace is empty space outside the level.
- Exactly one of `N`, `E`, `S`, `W` marks the player's start and facing.
- Every tile that is neither a wall nor empty must be enclosed: it may not lie
  on the edge of the map, and none of its four neighbours may be empty or
  beyond the end of a row.

The player starts at the centre of its tile, facing north (up the map), east,
south or west.

## Using it as a library

```python
from cubcast.parsing import parse, ParseError
from cubcast.raycast import cast_ray

level = parse("maps/example.cub")
print(level.textures.north, level.textures.floor)

player = level.player
hit = cast_ray(level, player, 960, 1920)
print(hit.map_x, hit.map_y, hit.side, hit.perp_dist)

player.rotate(0.05)
player.move(forward=0.1, strafe=0.0)
```

### Modules

- `cubcast.tiles` — the `Tile` enum (`EMPTY`, `WALL`, `FLOOR`, `NORTH`,
  `EAST`, `SOUTH`, `WEST`) and the helpers `is_whitespace`,
  `skip_whitespaces` and `is_player`.
- `cubcast.player` — `PlayerData` (position, direction and camera plane) with
  `rotate(angle)` and `move(forward, strafe)`; `starting_direction(tile)` and
  `retrieve_player(grid)`, which builds the player from the first player tile.
- `cubcast.level` — `Textures` and `Level` (`grid`, `textures`, `player`),
  with `tile_at(x, y)`, which reports positions outside the map as empty, and
  `is_wall(x, y)`.
- `cubcast.parsing` — `parse(path)`, `parse_text(text)`,
  `parse_textures(lines)`, `parse_map(lines)` and `map_is_valid(grid)`.
  `parse` and `parse_text` raise `ParseError` (a `ValueError`) when the file
  cannot be read, there are fewer than six identifiers, an identifier is
  unknown, there is no map, the map is not closed, or there is not exactly one
  player start.
- `cubcast.image` — `Image`, a plain buffer of 32-bit colour values with
  `clear`, `get_pixel` and `set_pixel`, and the drawing helpers
  `draw_rectangle`, `draw_line` (clips to the image) and `draw_vertical`
  (clamps to the image height).
- `cubcast.raycast` — `calculate_raydir`, `calculate_delta`, `cast_ray`
  (returns a `RayHit`; raises `ValueError` if the ray leaves the map without
  meeting a wall), `draw_wall`, and `raycast_dda`, which casts one ray per
  column, draws the walls into one image and every tenth ray into the
  minimap, and returns the hits.
- `cubcast.game` — `Game`, holding a level, its minimap and frame images,
  with `draw_minimap`, `draw`, `handle_key` and `mouse_move`; the `Key` enum;
  `tile_color`, `player_draw_location`; and `main`, the `cubcast` command.

## What it does not do

- Wall textures are not loaded or drawn. Walls are filled with one of two
  flat colours depending on whether a ray crossed a vertical or a horizontal
  grid line; the texture paths are only read and printed.
- The floor and ceiling settings are not drawn either.
- There is no collision: the player can walk through walls. A ray cast from
  outside the closed part of the map raises `ValueError`.
- There are no sounds, enemies, weapons or doors.

## Running the tests

```
pip install ".[test]"
pytest
```