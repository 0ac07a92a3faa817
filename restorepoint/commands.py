"""Command identifiers and the canonical-command dispatch table.

Hosts must report *canonical* command identifiers to the controller: the
command a physical action finally resolved to, never an intermediate alias.
``CommandRegistry`` performs that resolution before invoking handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

NAVIGATE_PREVIOUS = "restore-point-nav-previous"
KEYBOARD_QUIT = "keyboard-quit"

BUFFER_BOUNDARY_COMMANDS: frozenset[str] = frozenset(
    {
        "beginning-of-buffer",
        "end-of-buffer",
    }
)

MARK_COMMANDS: frozenset[str] = frozenset(
    {
        "mark-whole-buffer",
        "mark-defun",
        "mark-paragraph",
        "mark-page",
        "mark-sexp",
        "mark-word",
        "mark-end-of-sentence",
    }
)

SCROLL_COMMANDS: frozenset[str] = frozenset(
    {
        "scroll-up-command",
        "scroll-down-command",
        "scroll-other-window",
        "scroll-other-window-down",
        "recenter-top-bottom",
    }
)

DEFAULT_TRACKED_COMMANDS: frozenset[str] = (
    BUFFER_BOUNDARY_COMMANDS | MARK_COMMANDS | SCROLL_COMMANDS | {NAVIGATE_PREVIOUS}
)
DEFAULT_CANCEL_COMMANDS: frozenset[str] = frozenset({KEYBOARD_QUIT})


@dataclass(frozen=True)
class CommandBinding:
    """Canonical command id plus the aliases that resolve to it."""

    command: str
    handler: Callable[..., object]
    aliases: tuple[str, ...] = ()
    takes_argument: bool = False


class CommandRegistry:
    """Alias-resolving command table with an optional name normalizer."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._canonical: dict[str, str] = {}
        self._handlers: dict[str, Callable[..., object]] = {}
        self._takes_argument: set[str] = set()

    @staticmethod
    def _identity(name: str) -> str:
        return name

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting earlier bindings for the same names."""
        command = self._normalize(binding.command)
        self._handlers[command] = binding.handler
        self._canonical[command] = command
        if binding.takes_argument:
            self._takes_argument.add(command)
        else:
            self._takes_argument.discard(command)
        for alias in binding.aliases:
            self._canonical[self._normalize(alias)] = command
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def canonical(self, name: str) -> str | None:
        """Resolve ``name`` (command or alias) to its canonical command id."""
        return self._canonical.get(self._normalize(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.canonical(name) is not None

    def handler_for(self, name: str) -> Callable[..., object] | None:
        command = self.canonical(name)
        if command is None:
            return None
        return self._handlers[command]

    def takes_argument(self, name: str) -> bool:
        return self.canonical(name) in self._takes_argument

    def commands(self) -> frozenset[str]:
        return frozenset(self._handlers)


def normalize_command_name(name: str) -> str:
    """Fold user-typed command names to the kebab-case id form."""
    return name.strip().lower().replace("_", "-").replace(" ", "-")


__all__ = [
    "BUFFER_BOUNDARY_COMMANDS",
    "CommandBinding",
    "CommandRegistry",
    "DEFAULT_CANCEL_COMMANDS",
    "DEFAULT_TRACKED_COMMANDS",
    "KEYBOARD_QUIT",
    "MARK_COMMANDS",
    "NAVIGATE_PREVIOUS",
    "SCROLL_COMMANDS",
    "normalize_command_name",
]
