# cubkit

Building blocks for a grid-map raycaster. The package has no dependencies
outside the standard library.

- `cubkit.text_search` provides ASCII character classes and case mapping:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`. It also has C-style searches and comparisons over strings and
  bytes: `find_char`, `rfind_char`, `find_bounded`, `compare_n`,
  `compare_bytes` and `find_byte`. The searches return an index, or `None`
  when nothing is found.
- `cubkit.text_transform` provides the following:
  - `parse_int` parses numbers the way `atoi` does, with 32-bit wrap-around.
  - `int_to_str` formats an integer as text.
  - `split` splits on runs of one separator character and drops empty words.
  - `trim`, `substring`, `map_indexed` and `each_indexed` cover the remaining
    text operations.
- `cubkit.formatting` is a small printf with `%c %s %d %i %u %p %x %X %%`:
  - `format_string` returns the formatted text.
  - `printf` writes the formatted text to a stream (stdout by default) and
    returns the number of characters written.
  - The writers `put_char`, `put_str`, `put_endl` and `put_nbr` each take an
    optional `stream`.
- `cubkit.linereader` has `LineReader`, which returns one line at a time,
  newline included, from a text or binary stream. It reads `buffer_size`
  characters or bytes at a time (1 by default) and can also be iterated.
  `read_lines` yields every line of a stream.
- `cubkit.minimap` draws a top-down minimap of a `Scene` and its `Player`
  onto an in-memory `Canvas`, using `draw_grid`, `draw_player`, `draw_rays`
  or `render`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from cubkit.text_transform import split, parse_int
from cubkit.formatting import format_string

split("  map  rows here ", " ")          # ['map', 'rows', 'here']
parse_int("  -42abc")                     # -42
format_string("%s is %x", "width", 255)   # 'width is ff'
```

```python
import io
from cubkit.linereader import LineReader

reader = LineReader(io.BytesIO(b"NO ./north.xpm\nSO ./south.xpm\n"), 4)
for line in reader:
    print(line)   # b'NO ./north.xpm\n', then b'SO ./south.xpm\n'
```

```python
from cubkit.minimap import Canvas, Player, Scene, render

scene = Scene(
    ["11111", "10001", "10N01", "11111"],
    Player(x_pos=2.5, y_pos=2.5, dir_x=0.0, dir_y=-1.0),
)
canvas = render(Canvas(), scene)   # Canvas() is 2000 x 1200
canvas.get_pixel(0, 1199)          # a cell border pixel: 0x808080
```

## The minimap

Each pixel of a `Canvas` holds a `0xRRGGBB` colour. Writes outside the canvas
are ignored, and `get_pixel` raises `IndexError` outside it.

The cell size is 500 pixels divided by the larger of the map's row count and
its longest row. The grid sits in the lower-left corner of the canvas:

- Walls (`1`) are drawn as dark-red squares.
- Open and spawn cells (`0`, `N`, `S`, `E`, `W`) are drawn as white squares.
- Every square has a gray border.
- The player is a 4x4 dark-blue dot.

`draw_rays` draws a fan of 400 dotted blue rays around the player's facing
direction. Each ray stops at a wall, at the edge of the map, or where a
diagonal step would squeeze between two walls; `ray_can_pass` and
`corner_blocked` check these cases.

## What this package does not do

`cubkit` does not open a window or handle keyboard input. It does not render
the first-person 3D view or load wall textures. It does not read or validate
map description files either. It only draws the minimap into an in-memory
`Canvas`, and displaying the result is left to the caller.