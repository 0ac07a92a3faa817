"""Cursor positions and the bounded per-document position ring.

This module intentionally has no host concerns.
It provides the value objects shared by the controller and its hosts.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_MAX_RING_SIZE = 128


@dataclass(frozen=True)
class Position:
    """Immutable cursor location inside one document."""

    document: Hashable
    offset: int = 0


def _checked_size(max_size: int) -> int:
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 1:
        raise ConfigurationError(f"ring size must be a positive integer, got {max_size!r}")
    return max_size


class PositionRing:
    """Bounded most-recent-first stack of remembered positions.

    A push equal to the current head is dropped; non-adjacent repeats are kept.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_RING_SIZE) -> None:
        """Create an empty ring holding at most ``max_size`` entries."""
        self._entries: deque[Position] = deque(maxlen=_checked_size(max_size))

    @property
    def max_size(self) -> int:
        return self._entries.maxlen or 1

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._entries)

    def push(self, position: Position) -> None:
        """Prepend ``position`` unless it duplicates the head, evicting from the tail."""
        if self._entries and self._entries[0] == position:
            return
        self._entries.appendleft(position)

    def peek(self, n: int) -> Position | None:
        """Return the entry at rank ``n`` (0 is most recent) or ``None``."""
        if n < 0 or n >= len(self._entries):
            return None
        return self._entries[n]

    def clear(self) -> None:
        self._entries.clear()

    def resize(self, max_size: int) -> None:
        """Change the bound, keeping the most recent entries."""
        max_size = _checked_size(max_size)
        kept = list(self._entries)[:max_size]
        self._entries = deque(kept, maxlen=max_size)


__all__ = ["DEFAULT_MAX_RING_SIZE", "Position", "PositionRing"]
