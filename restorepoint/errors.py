"""Exception types raised across restorepoint."""

from __future__ import annotations


class RestorePointError(Exception):
    """Base class for restorepoint errors."""


class ConfigurationError(RestorePointError):
    """Raised when settings are constructed with invalid values."""


class UnknownCommandError(RestorePointError):
    """Raised when a command name resolves to no registered command."""


class CommandArgumentError(RestorePointError):
    """Raised when an argument is passed to a command that takes none."""


class PositionUnavailableError(RestorePointError):
    """Raised by hosts when a stored position no longer maps to a document location.

    The controller treats this as an expected race and skips the cursor move.
    """


__all__ = [
    "CommandArgumentError",
    "ConfigurationError",
    "PositionUnavailableError",
    "RestorePointError",
    "UnknownCommandError",
]
