"""Base class for objects that observe changes to a project."""

from __future__ import annotations

from collections import deque
from typing import Any

_HISTORY_LIMIT = 64


class ProjectListener:
    """Receives change notifications from a project.

    By default each hook only notes the notification in a short history of
    recent events, and has no other effect. Subclasses override the hooks
    they care about.
    """

    def _record(self, event: str, *details: Any) -> None:
        history = self.__dict__.get("_history")
        if history is None:
            history = deque(maxlen=_HISTORY_LIMIT)
            self.__dict__["_history"] = history
        history.append((event, details))

    def on_damaged(self, target: Any, frame: int, dmg: Any) -> None:
        """An area of a frame's image was changed."""
        self._record("damaged", target, frame, dmg)

    def on_palette_changed(self, target: Any, frame: int, index: int, colour: Any) -> None:
        """A single palette entry was changed."""
        self._record("palette_changed", target, frame, index, colour)

    def on_palette_replaced(self, target: Any, frame: int) -> None:
        """A whole palette was replaced."""
        self._record("palette_replaced", target, frame)

    def on_ranges_blatted(self, target: Any, frame: int) -> None:
        """The colour ranges were replaced."""
        self._record("ranges_blatted", target, frame)

    def on_modified_flag_changed(self, modified: bool) -> None:
        """The project's unsaved-changes flag was toggled."""
        self._record("modified_flag_changed", modified)

    def on_frames_added(self, target: Any, first: int, count: int) -> None:
        """Frames were inserted."""
        self._record("frames_added", target, first, count)

    def on_frames_removed(self, target: Any, first: int, count: int) -> None:
        """Frames were deleted."""
        self._record("frames_removed", target, first, count)

    def on_frames_blatted(self, target: Any, first: int, count: int) -> None:
        """Existing frames were wholly replaced."""
        self._record("frames_blatted", target, first, count)