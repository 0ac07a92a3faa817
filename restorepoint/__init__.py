"""Public package surface for restorepoint.

Re-exports the history primitives and the controller hosts wire up.
``main`` is imported lazily to keep package imports lightweight.
"""

from __future__ import annotations

from .controller import CursorHost, DocumentContext, RestoreController, RunState
from .navigation import END_OF_HISTORY, NavigationCursor
from .position import Position, PositionRing
from .transition import TransitionState, should_push


def main(*args, **kwargs):
    """Lazily import CLI entrypoint so library users never load Pygments."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "END_OF_HISTORY",
    "CursorHost",
    "DocumentContext",
    "NavigationCursor",
    "Position",
    "PositionRing",
    "RestoreController",
    "RunState",
    "TransitionState",
    "main",
    "should_push",
]
