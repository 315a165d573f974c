"""Laying out animation frames on a regular sprite-sheet grid."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from evilpixie.geometry import Box

Image = list[list[int]]

_ASSIGNMENT = re.compile(r"\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(-?\d+)")

_FIELDS = {
    "cols": "num_columns",
    "rows": "num_rows",
    "xpad": "pad_x",
    "ypad": "pad_y",
    "w": "cell_w",
    "h": "cell_h",
    "frames": "num_frames",
}


@dataclass
class SpriteGrid:
    """How sprites are laid out on a regular grid.

    ``cell_w``/``cell_h`` exclude the padding; 0 means unset.
    """

    num_columns: int = 1
    num_rows: int = 1
    pad_x: int = 0
    pad_y: int = 0
    cell_w: int = 0
    cell_h: int = 0
    num_frames: int = 1

    def _pitch(self) -> tuple[int, int]:
        return self.pad_x + self.cell_w + self.pad_x, self.pad_y + self.cell_h + self.pad_y

    def layout(self) -> list[Box]:
        """Return the box of each frame's cell, in frame order."""
        if self.cell_w <= 0 or self.cell_h <= 0:
            raise ValueError("cell size must be positive")
        if self.num_frames > self.num_columns * self.num_rows:
            raise ValueError("more frames than grid cells")
        w, h = self._pitch()
        return [
            Box((i % self.num_columns) * w, (i // self.num_columns) * h, self.cell_w, self.cell_h)
            for i in range(self.num_frames)
        ]

    def extent(self) -> Box:
        """Return the overall size of the layout."""
        if self.num_columns <= 0 or self.num_rows <= 0:
            raise ValueError("grid must have at least one row and column")
        if self.cell_w <= 0 or self.cell_h <= 0:
            raise ValueError("cell size must be positive")
        w, h = self._pitch()
        return Box(0, 0, self.num_columns * w, self.num_rows * h)

    def stringify(self, imgbounds: Box) -> str:
        """Describe the grid as "name=value" pairs.

        Values that can be inferred from the image size are left out; a grid
        of fewer than two frames gives an empty string.
        """
        if self.num_frames < 2:
            return ""
        parts: list[str] = []
        if self.num_columns != 1:
            parts.append(f"cols={self.num_columns}")
        if self.num_rows != 1:
            parts.append(f"rows={self.num_rows}")
        if self.pad_x > 0:
            parts.append(f"xpad={self.pad_x}")
        if self.pad_y > 0:
            parts.append(f"ypad={self.pad_y}")
        w, h = self._pitch()
        if self.num_columns * w != imgbounds.w:
            parts.append(f"w={self.cell_w}")
        if self.num_rows * h != imgbounds.h:
            parts.append(f"h={self.cell_h}")
        if self.num_frames != self.num_columns * self.num_rows:
            parts.append(f"frames={self.num_frames}")
        return " ".join(parts)

    @classmethod
    def parse(cls, text: str, imgbounds: Box) -> SpriteGrid:
        """Build a grid from "name=value" pairs, deriving what is missing.

        Unknown names are ignored; parsing stops at the first text that is
        not an assignment.
        """
        grid = cls(num_frames=0)
        pos = 0
        while (match := _ASSIGNMENT.match(text, pos)) is not None:
            field = _FIELDS.get(match.group(1))
            if field is not None:
                setattr(grid, field, int(match.group(2)))
            pos = match.end()

        if grid.cell_w == 0:
            grid.cell_w = imgbounds.w // grid.num_columns - grid.pad_x * 2
        if grid.cell_h == 0:
            grid.cell_h = imgbounds.h // grid.num_rows - grid.pad_y * 2
        if grid.num_frames == 0:
            grid.num_frames = grid.num_columns * grid.num_rows
        return grid


def _blank(w: int, h: int) -> Image:
    return [[0] * w for _ in range(h)]


def _copy(src: Sequence[Sequence[int]], src_box: Box, dest: Image, dest_box: Box) -> None:
    """Copy the overlapping part of ``src_box`` into ``dest_box``, clipped to both images."""
    for dy in range(min(src_box.h, dest_box.h)):
        sy, ty = src_box.y + dy, dest_box.y + dy
        if not (0 <= sy < len(src) and 0 <= ty < len(dest)):
            continue
        src_row, dest_row = src[sy], dest[ty]
        for dx in range(min(src_box.w, dest_box.w)):
            sx, tx = src_box.x + dx, dest_box.x + dx
            if 0 <= sx < len(src_row) and 0 <= tx < len(dest_row):
                dest_row[tx] = src_row[sx]


def _bounds(img: Sequence[Sequence[int]]) -> Box:
    return Box(0, 0, len(img[0]) if img else 0, len(img))


def frames_to_sprite_sheet(frames: Sequence[Sequence[Sequence[int]]], grid: SpriteGrid) -> Image:
    """Lay out a sequence of frame images on one sheet according to ``grid``."""
    if not frames:
        raise ValueError("no frames to lay out")
    if grid.num_frames < len(frames):
        raise ValueError("grid has room for fewer frames than given")
    extent = grid.extent()
    sheet = _blank(extent.w, extent.h)
    for frame, cell in zip(frames, grid.layout()):
        _copy(frame, _bounds(frame), sheet, cell)
    return sheet


def frames_from_sprite_sheet(src: Sequence[Sequence[int]], grid: SpriteGrid) -> list[Image]:
    """Cut a sprite sheet into one image per grid cell."""
    frames: list[Image] = []
    for cell in grid.layout():
        dest = _blank(cell.w, cell.h)
        _copy(src, cell, dest, _bounds(dest))
        frames.append(dest)
    return frames