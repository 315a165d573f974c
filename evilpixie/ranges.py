"""Free-form colour ranges laid out on a crossword-style grid."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from evilpixie.geometry import Box, Point


class Palette(Protocol):
    """What the range grid needs from a palette."""

    colours: Sequence[Any]

    def closest(self, colour: Any) -> int:
        """Index of the palette entry nearest to ``colour``."""


@dataclass(frozen=True)
class PenColour:
    """A drawing colour, optionally tied to a palette index."""

    rgb: Any = (0, 0, 0, 255)
    idx: int = -1

    def idx_valid(self) -> bool:
        """True if the pen refers to a palette entry."""
        return self.idx >= 0


class RangeGrid:
    """A grid in which pens can be placed.

    A range is any continuous horizontal or vertical run of two or more set
    cells, so two ranges can share a cell where they cross.
    """

    def __init__(self, w: int, h: int) -> None:
        self.bound = Box(0, 0, w, h)
        self._pens: list[PenColour | None] = [None] * (w * h)

    def _index(self, pos: Point) -> int:
        b = self.bound
        return (pos.y - b.y) * b.w + (pos.x - b.x)

    def _require_inside(self, pos: Point) -> int:
        if not self.bound.contains(pos):
            raise IndexError(f"position {pos} lies outside the grid")
        return self._index(pos)

    def get(self, pos: Point) -> PenColour | None:
        """Return the pen at ``pos``, or None if unset or outside the grid."""
        if not self.bound.contains(pos):
            return None
        return self._pens[self._index(pos)]

    def is_set(self, pos: Point) -> bool:
        return self.get(pos) is not None

    def set(self, pos: Point, pen: PenColour) -> None:
        """Place a pen; raises IndexError outside the grid."""
        self._pens[self._require_inside(pos)] = pen

    def clear(self, pos: Point) -> None:
        """Remove any pen at ``pos``; raises IndexError outside the grid."""
        self._pens[self._require_inside(pos)] = None

    def update_pen(self, idx: int, colour: Any) -> int:
        """Give every pen using palette entry ``idx`` the new colour.

        Returns the number of pens updated.
        """
        count = 0
        for i, pen in enumerate(self._pens):
            if pen is not None and pen.idx_valid() and pen.idx == idx:
                self._pens[i] = PenColour(colour, idx)
                count += 1
        return count

    def update_all(self, palette: Palette) -> int:
        """Refresh indexed pens from a new palette.

        Pens whose index falls off the end of the palette are removed.
        Returns the number of pens removed.
        """
        count = 0
        colours = palette.colours
        for i, pen in enumerate(self._pens):
            if pen is None or not pen.idx_valid():
                continue
            if pen.idx < len(colours):
                self._pens[i] = PenColour(colours[pen.idx], pen.idx)
            else:
                self._pens[i] = None
                count += 1
        return count

    def remap(self, palette: Palette) -> int:
        """Move indexed pens to the closest entries of a new palette.

        Pens without a palette index are left alone. Returns the number of
        pens changed.
        """
        count = 0
        for i, pen in enumerate(self._pens):
            if pen is None or not pen.idx_valid():
                continue
            new_idx = palette.closest(pen.rgb)
            new_rgb = palette.colours[new_idx]
            if new_idx != pen.idx and new_rgb != pen.rgb:
                self._pens[i] = PenColour(new_rgb, new_idx)
                count += 1
        return count

    def _run(self, pos: Point, dx: int, dy: int) -> Box:
        start = pos
        while self.is_set(Point(start.x - dx, start.y - dy)):
            start = Point(start.x - dx, start.y - dy)
        length = 1
        while self.is_set(Point(start.x + dx * length, start.y + dy * length)):
            length += 1
        if dx:
            return Box(start.x, start.y, length, 1)
        return Box(start.x, start.y, 1, length)

    def pick_range(self, pos: Point) -> Box:
        """Return a range passing through ``pos``.

        A vertical range is preferred over a horizontal one. A lone pen gives
        a 1x1 box; an unset position gives an empty box.
        """
        if not self.is_set(pos):
            return Box(0, 0, 0, 0)
        vert = self._run(pos, 0, 1)
        if vert.h > 1:
            return vert
        horiz = self._run(pos, 1, 0)
        if horiz.w > 1:
            return horiz
        return Box(pos.x, pos.y, 1, 1)

    def is_shared(self, pos: Point) -> bool:
        """True if ``pos`` is where a horizontal and a vertical range cross."""
        if not self.is_set(pos):
            return False
        horiz = self.is_set(Point(pos.x - 1, pos.y)) or self.is_set(Point(pos.x + 1, pos.y))
        vert = self.is_set(Point(pos.x, pos.y - 1)) or self.is_set(Point(pos.x, pos.y + 1))
        return horiz and vert

    def fetch_pens(self, rng: Box) -> list[PenColour]:
        """Read out the pens of a range, in order. An empty range gives []."""
        if rng.h == 1:
            points = (Point(rng.x + i, rng.y) for i in range(rng.w))
        elif rng.w == 1:
            points = (Point(rng.x, rng.y + i) for i in range(rng.h))
        else:
            return []
        pens = []
        for p in points:
            pen = self.get(p)
            if pen is None:
                raise ValueError(f"no pen set at {p}")
            pens.append(pen)
        return pens