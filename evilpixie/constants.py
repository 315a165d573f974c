"""Enumerations and version details shared across the editor."""

from __future__ import annotations

from enum import IntEnum

VERSION = "0.3.1"
VERSION_NAME = '"Your in test" TCE Shanghai Gutter Edition'


class Button(IntEnum):
    """Which mouse action is in progress."""

    NONE = 0
    DRAW = 1
    ERASE = 2
    PAN = 3


class MouseStyle(IntEnum):
    """Pointer shapes; CROSSHAIR is the default."""

    DEFAULT = 0
    CROSSHAIR = 0
    EYEDROPPER = 1


class ToolType(IntEnum):
    """The drawing tools, in menu order."""

    PENCIL = 0
    LINE = 1
    BRUSH_PICKUP = 2
    FLOODFILL = 3
    RECT = 4
    CIRCLE = 5
    FILLEDRECT = 6
    FILLEDCIRCLE = 7
    EYEDROPPER = 8