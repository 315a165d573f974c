# evilpixie

This package provides building blocks for a pixel-art paint program. It is
written in plain Python and has no third-party dependencies.

Images are plain lists of rows. Each row is a list of integer palette
indices.

## What is in it

- `evilpixie.geometry` holds `Point` and `Box`, the frozen integer geometry
  that everything else is built on.
  - `Point` supports `+`, `-`, unary `-` and `*`. Multiplying by a number
    truncates the results toward zero.
  - `Box` is a top-left corner with a width and a height. Its methods are
    `x_min`, `x_max`, `y_min`, `y_max`, `top_left`, `is_empty` and
    `contains`.
- `evilpixie.pathutil` holds small path and text helpers:
  - `base_name`, `dir_name`, `ext_name` and `join_path`. These treat `/`,
    `\` and `:` as separators. `ext_name` returns everything from the first
    `.` of the file part.
  - `to_lower`, which lower-cases ASCII letters only.
  - `split_line`, a shell-like splitter. It understands single and double
    quoted strings, and a `#` at the start of an argument begins a comment.
- `evilpixie.constants` holds the `Button`, `MouseStyle` and `ToolType`
  enumerations, and the `VERSION` and `VERSION_NAME` strings.
  `MouseStyle.DEFAULT` is the same value as `MouseStyle.CROSSHAIR`.
- `evilpixie.listener` holds `ProjectListener`, a base class with `on_*`
  hooks for project changes:
  - changes to images, palettes and ranges;
  - changes to the modified flag;
  - frames being added, removed or replaced.

  The default hooks only note the event in a short private history and
  have no other effect. Subclasses override the hooks they care about.
- `evilpixie.scale2x` holds `scale2x(pixels)`, which doubles an indexed
  image with the Scale2x algorithm. Edge pixels are repeated beyond the
  border. An empty image or ragged rows raise `ValueError`.
- `evilpixie.ranges` holds `PenColour` and `RangeGrid`. A range grid is a
  crossword-like grid of pens, and any horizontal or vertical run of two or
  more pens forms a colour range.
  - Reading with `get` or `is_set` outside the grid counts as unset.
  - `set` and `clear` raise `IndexError` outside the grid.
  - `update_pen`, `update_all` and `remap` keep pens in step with palette
    changes. The palette passed to them is any object with a `colours`
    sequence and a `closest(colour)` method.
- `evilpixie.sheet` holds `SpriteGrid`, `frames_to_sprite_sheet` and
  `frames_from_sprite_sheet`. They lay animation frames out on a regular
  grid and cut them back apart.
  - `SpriteGrid.parse` reads `name=value` pairs. The names are `cols`,
    `rows`, `xpad`, `ypad`, `w`, `h` and `frames`.
  - `SpriteGrid.stringify` writes the pairs back, leaving out values that
    can be inferred from the image size.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

This doubles an indexed image with Scale2x:

```python
from evilpixie.scale2x import scale2x

doubled = scale2x([[1, 2], [3, 4]])  # 4 rows of 4 pixels
```

This describes a sprite-sheet layout and reads it back:

```python
from evilpixie.geometry import Box
from evilpixie.sheet import SpriteGrid, frames_from_sprite_sheet

bounds = Box(0, 0, 64, 32)
grid = SpriteGrid.parse("cols=4 rows=2", bounds)  # 16x16 cells, 8 frames
cells = grid.layout()                             # one Box per frame
text = grid.stringify(bounds)                     # "cols=4 rows=2"

sheet = [[0] * 64 for _ in range(32)]
frames = frames_from_sprite_sheet(sheet, grid)    # 8 images of 16x16
```

This picks a colour range from a range grid:

```python
from evilpixie.geometry import Point
from evilpixie.ranges import PenColour, RangeGrid

grid = RangeGrid(8, 8)
for x in range(3):
    grid.set(Point(x, 0), PenColour((x * 80, 0, 0, 255), x))

span = grid.pick_range(Point(1, 0))  # Box(0, 0, 3, 1), the horizontal run
pens = grid.fetch_pens(span)         # the three pens, left to right
```

## What it does not do

This is a library of parts, not a paint program. Several things are not
included:

- There is no editor window, no command to start one, and no loading or
  saving of image files.
- There is no palette class. The range functions take any object with the
  shape described above.
- The drawing tools are only named by `ToolType`. No tool is implemented.
- `ProjectListener` describes the notifications a project would send, but
  no project object exists to send them.