"""Command-transition detection.

A snapshot is due only when the command stream *enters* a run of tracked
commands: the current command is tracked and differs from the previous one,
and the previous one is not tracked.
"""

from __future__ import annotations

from collections.abc import Hashable, Set
from dataclasses import dataclass


def should_push(previous: Hashable | None, current: Hashable | None, tracked: Set[Hashable]) -> bool:
    """Return whether the ``previous -> current`` edge enters a tracked run."""
    return current != previous and current in tracked and previous not in tracked


@dataclass
class TransitionState:
    """The two most recently reported canonical command identifiers."""

    previous: Hashable | None = None
    current: Hashable | None = None

    def shift(self, command: Hashable) -> None:
        """Record ``command`` as current, demoting the old current to previous."""
        self.previous = self.current
        self.current = command

    def reset(self) -> None:
        self.previous = None
        self.current = None


__all__ = ["TransitionState", "should_push"]
