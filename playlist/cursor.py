"""Cursor helpers shared by playlist readers."""

from __future__ import annotations


class PlaylistCursor:
    """Circular position into a playlist of a given length.

    The cursor holds no reference to the items; callers pass the current
    length so any reader can compose it regardless of how items are stored.
    """

    def __init__(self, position: int = 0) -> None:
        self.position = max(0, int(position))

    def advance(self, length: int) -> int:
        """Move one step forward, wrapping to 0 past the last index."""
        if length <= 0:
            return self.position
        self.position += 1
        if self.position >= length:
            self.position = 0
        return self.position

    def select(self, index: int, length: int) -> bool:
        """Jump to ``index`` when it is in range. Returns whether it moved."""
        if 0 <= index < length:
            self.position = index
            return True
        return False

    def reset(self) -> None:
        self.position = 0
