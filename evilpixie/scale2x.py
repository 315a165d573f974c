"""The Scale2x pixel-art upscaler for indexed images."""

from __future__ import annotations

from collections.abc import Sequence


def _expand(a: int, c: int, p: int, b: int, d: int) -> tuple[int, int, int, int]:
    # a above, c left, p centre, b right, d below.
    e0 = a if (c == a and c != d and a != b) else p
    e1 = b if (a == b and a != c and b != d) else p
    e2 = c if (d == c and d != b and c != a) else p
    e3 = d if (b == d and b != a and d != c) else p
    return e0, e1, e2, e3


def scale2x(pixels: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return an image twice the size of ``pixels`` using Scale2x.

    ``pixels`` is a sequence of equally long rows of palette indices.
    Pixels beyond the image edges are taken to repeat the edge pixels.
    """
    rows = [list(row) for row in pixels]
    if not rows or not rows[0]:
        raise ValueError("image must have at least one pixel")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")

    last = len(rows) - 1
    out: list[list[int]] = []
    for y, row in enumerate(rows):
        above = rows[max(y - 1, 0)]
        below = rows[min(y + 1, last)]
        left = [row[0]] + row[:-1]
        right = row[1:] + [row[-1]]
        top: list[int] = []
        bottom: list[int] = []
        for a, c, p, b, d in zip(above, left, row, right, below):
            e0, e1, e2, e3 = _expand(a, c, p, b, d)
            top += (e0, e1)
            bottom += (e2, e3)
        out.append(top)
        out.append(bottom)
    return out