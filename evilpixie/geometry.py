"""Integer points and rectangles used for image coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A position on an integer grid."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, scale: float) -> Point:
        """Scale both coordinates, truncating the results toward zero."""
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Point(int(self.x * scale), int(self.y * scale))


@dataclass(frozen=True)
class Box:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def x_min(self) -> int:
        return self.x

    def x_max(self) -> int:
        """Rightmost column inside the box."""
        return self.x + self.w - 1

    def y_min(self) -> int:
        return self.y

    def y_max(self) -> int:
        """Bottom row inside the box."""
        return self.y + self.h - 1

    def top_left(self) -> Point:
        return Point(self.x, self.y)

    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def contains(self, point: Point) -> bool:
        """True if the point lies within the box."""
        return (
            self.x <= point.x < self.x + self.w
            and self.y <= point.y < self.y + self.h
        )