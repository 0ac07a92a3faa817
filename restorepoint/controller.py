"""Wiring of transition tracking, position rings and navigation to host events.

The host owns the command loop and reports three events per document context:

- ``on_before_command`` before every command, with its canonical identifier;
- ``on_cancel_action`` when a cancel command runs;
- ``on_navigate_previous`` when the navigation command runs.

All handlers run synchronously inside the host's dispatch step.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from .config import RestoreSettings
from .errors import PositionUnavailableError
from .navigation import END_OF_HISTORY, NavigationCursor
from .position import Position, PositionRing
from .transition import TransitionState, should_push

logger = logging.getLogger(__name__)


class CursorHost(Protocol):
    """Outbound calls the controller makes into the hosting editor."""

    def current_position(self, document: Hashable) -> Position:
        ...

    def move_cursor_to(self, position: Position) -> None:
        """Move the cursor, raising ``PositionUnavailableError`` for stale positions."""
        ...

    def notify_end_of_history(self) -> None:
        ...


class RunState(Enum):
    IDLE = "idle"
    IN_TRACKED_RUN = "in-tracked-run"


@dataclass
class DocumentContext:
    """Per-document history state, created on first use and discarded with the document."""

    document: Hashable
    ring: PositionRing
    transition: TransitionState = field(default_factory=TransitionState)
    navigation: NavigationCursor = field(default_factory=NavigationCursor)


class RestoreController:
    """Snapshot on entry into tracked-command runs and restore on cancel."""

    def __init__(self, host: CursorHost, settings: RestoreSettings | None = None) -> None:
        self.host = host
        self.settings = settings if settings is not None else RestoreSettings()
        self.enabled = True
        self._contexts: dict[Hashable, DocumentContext] = {}

    def context_for(self, document: Hashable) -> DocumentContext:
        """Return the context for ``document``, creating it on first use."""
        context = self._contexts.get(document)
        if context is None:
            context = DocumentContext(document=document, ring=PositionRing(self.settings.max_ring_size))
            self._contexts[document] = context
        return context

    def discard_context(self, document: Hashable) -> None:
        """Clear and drop the context of a destroyed document."""
        context = self._contexts.pop(document, None)
        if context is None:
            return
        context.ring.clear()
        context.transition.reset()
        context.navigation.reset()
        logger.debug("Discarded history for %r", document)

    def reconfigure(self, settings: RestoreSettings) -> None:
        """Replace settings, resizing existing rings to the new bound."""
        self.settings = settings
        for context in self._contexts.values():
            context.ring.resize(settings.max_ring_size)

    def state_of(self, context: DocumentContext) -> RunState:
        if context.transition.current in self.settings.tracked_commands:
            return RunState.IN_TRACKED_RUN
        return RunState.IDLE

    def on_before_command(self, context: DocumentContext, command: Hashable) -> None:
        """Shift the transition state and snapshot when entering a tracked run."""
        if not self.enabled:
            return
        transition = context.transition
        transition.shift(command)
        if should_push(transition.previous, transition.current, self.settings.tracked_commands):
            position = self.host.current_position(context.document)
            context.ring.push(position)
            logger.debug("Snapshot %r before %r", position, command)

    def on_cancel_action(self, context: DocumentContext) -> bool:
        """Restore the most recent snapshot when the cancelled run was tracked.

        The snapshot is read, not removed. Returns whether the cursor moved.
        """
        if not self.enabled:
            return False
        if context.transition.previous not in self.settings.tracked_commands:
            return False
        target = context.ring.peek(0)
        if target is None:
            return False
        return self._move_to(target)

    def on_navigate_previous(self, context: DocumentContext) -> bool:
        """Step further back on repeated invocation; returns whether the cursor moved."""
        if not self.enabled:
            return False
        consecutive = context.transition.previous == self.settings.navigate_command
        context.navigation.advance(consecutive)
        target = context.navigation.current_target(context.ring)
        if target is END_OF_HISTORY:
            logger.debug("End of history at index %d for %r", context.navigation.nth, context.document)
            self.host.notify_end_of_history()
            return False
        return self._move_to(target)

    def dispatch(self, context: DocumentContext, command: Hashable) -> bool:
        """Report ``command`` and run the matching restore hook.

        Returns whether a cancel or navigation hook moved the cursor.
        """
        self.on_before_command(context, command)
        if command in self.settings.cancel_commands:
            return self.on_cancel_action(context)
        if command == self.settings.navigate_command:
            return self.on_navigate_previous(context)
        return False

    def _move_to(self, target: Position) -> bool:
        try:
            self.host.move_cursor_to(target)
        except PositionUnavailableError as exc:
            logger.debug("Skipped restore to stale position %r: %s", target, exc)
            return False
        logger.debug("Restored cursor to %r", target)
        return True


__all__ = ["CursorHost", "DocumentContext", "RestoreController", "RunState"]
