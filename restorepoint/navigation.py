"""Repeated "navigate previous" stepping through a position ring."""

from __future__ import annotations

from enum import Enum

from .position import Position, PositionRing


class HistoryEnd(Enum):
    """Sentinel returned when navigation runs past the oldest entry."""

    END_OF_HISTORY = "end-of-history"


END_OF_HISTORY = HistoryEnd.END_OF_HISTORY


class NavigationCursor:
    """Index into a ring that grows while the navigation command repeats.

    The index starts at 1, so the first step skips the most recent snapshot.
    """

    def __init__(self) -> None:
        self.nth = 1

    def advance(self, consecutive: bool) -> int:
        """Step one further back when ``consecutive``, otherwise restart at 1."""
        if consecutive:
            self.nth += 1
        else:
            self.nth = 1
        return self.nth

    def current_target(self, ring: PositionRing) -> Position | HistoryEnd:
        """Return the ring entry at the current index, or ``END_OF_HISTORY``.

        The index is left untouched either way.
        """
        target = ring.peek(self.nth)
        if target is None:
            return END_OF_HISTORY
        return target

    def reset(self) -> None:
        self.nth = 1


__all__ = ["END_OF_HISTORY", "HistoryEnd", "NavigationCursor"]
