# raycub

raycub holds the building blocks of a grid-based first-person explorer: a ray
caster that finds where each screen column's ray meets a wall, a packed 32-bit
pixel image with simple drawing primitives, and a reader for XPM texture files.
It uses only the standard library.

## Installing

```
pip install .
```

## Modules

### `raycub.config`

- `Settings` is a frozen dataclass of fixed parameters: window size
  (`win_width`, `win_height`), `fov`, `rays`, `dof` (how many grid steps a ray
  may take), player speed and turn rate, minimap ratio and more. It also gives
  `minimap_size`, `column_width` and `ray_step` (radians between two rays).
- `settings_for(bonus)` returns the plain variant or the bonus variant; the
  bonus variant has a larger minimap ratio and a practically unlimited `dof`.
- `Key` is an `IntEnum` of the keys a game reacts to, valued by their X11
  keysyms (`W`, `A`, `S`, `D`, `E`, `M`, `LEFT`, `RIGHT`, `ESC`).

### `raycub.geometry`

- `Vector(x, y)`, a frozen point with `+`, `-` and `scaled(factor)`.
- `reset_angle(angle)` brings an angle at most one turn out of range back into
  `[0, 2*pi]`.
- `deg_to_rad(degrees)` and `calc_hyp(a, b)` (the distance between two points).

### `raycub.canvas`

- `create_trgb(t, r, g, b)` packs channels into one integer.
- `Image(width, height, endian=0)` stores 32-bit pixels in a `bytearray`
  (`data`), least significant byte first when `endian` is 0.
  - `put_pixel(x, y, color)` ignores coordinates outside the image.
  - `get_pixel(x, y)` raises `IndexError` outside the image.
  - `draw_rectangle(rect)` fills a `Rect(size, pos, color)`, clipped to the image.
  - `draw_ray(start, angle, length, color)` plots a line in unit steps.
  - `to_rgb_bytes()` returns the pixels as packed RGB triples, row by row.

### `raycub.colornames`

- `lookup_color(name)` returns the `0xRRGGBB` value of an X11 colour name,
  ignoring case; `"none"` gives `-1`, unknown names give `None`.

### `raycub.wordtab`

- `find(text, pattern, limit)`, `find_unquoted(text, pattern, limit)` and
  `split_words(text)`: the string helpers used by the XPM reader.

### `raycub.xpm`

- `load_xpm(path)` reads an XPM file and returns an `Image`.
- `parse_xpm(lines)` builds an `Image` from the XPM strings, header first.
- `strip_comments(text)` blanks out comments outside quotes, keeping the length.
- `text_to_rgb(name, extra)` resolves a colour word (`#rrggbb` or a name).
- Unreadable or malformed data raises `XpmError`. Pixels whose colour is
  `None` are stored as `0xFF000000`.

### `raycub.casting`

- `cast_rays(position, angle, grid, settings)` casts `settings.rays` rays
  spread over the field of view centred on `angle` and returns a list of `Ray`.
- `cast_ray(position, angle, grid, dof)` casts one horizontal-line ray and one
  vertical-line ray and returns the shorter.
- `horizontal_ray`, `vertical_ray` and `march` are the steps it is made of.
- A `Ray` carries `start`, `end`, `length`, `vertical`, `angle` and `color`.
- The grid is a sequence of strings; the character `1` is a wall.

## Example

```python
from raycub.canvas import Image, Rect, create_trgb
from raycub.casting import cast_rays
from raycub.config import settings_for
from raycub.geometry import Vector

grid = ["11111", "10001", "10001", "11111"]
settings = settings_for(False)
rays = cast_rays(Vector(2.5, 1.5), 0.0, grid, settings)
print(len(rays), rays[len(rays) // 2].length)

image = Image(64, 64)
image.draw_rectangle(Rect(Vector(10, 10), Vector(5, 5), create_trgb(0, 255, 0, 0)))
print(hex(image.get_pixel(6, 6)))
```

## What this package does not do

- It opens no window, reads no keyboard or mouse and has no command to run.
- It does not read `.cub` level files and does not check that a map is closed
  or has a single starting cell.
- It has no player model and no movement or collision handling.
- It does not draw the textured 3D view, background or minimap; it provides the
  ray hits and the image those would be drawn with.