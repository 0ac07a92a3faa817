"""Persistent JSON config helpers.

Stores the ring size bound and the tracked/cancel/navigation command names.
All file access is defensive: malformed or missing config falls back to
defaults.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

from .commands import DEFAULT_CANCEL_COMMANDS, DEFAULT_TRACKED_COMMANDS, NAVIGATE_PREVIOUS
from .errors import ConfigurationError
from .position import DEFAULT_MAX_RING_SIZE

logger = logging.getLogger(__name__)

APP_NAME = "restorepoint"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class RestoreSettings:
    """Effective configuration consumed read-only by the controller."""

    max_ring_size: int = DEFAULT_MAX_RING_SIZE
    tracked_commands: frozenset[str] = DEFAULT_TRACKED_COMMANDS
    cancel_commands: frozenset[str] = DEFAULT_CANCEL_COMMANDS
    navigate_command: str = NAVIGATE_PREVIOUS

    def __post_init__(self) -> None:
        if isinstance(self.max_ring_size, bool) or not isinstance(self.max_ring_size, int):
            raise ConfigurationError(f"max_ring_size must be an integer, got {self.max_ring_size!r}")
        if self.max_ring_size < 1:
            raise ConfigurationError("max_ring_size must be >= 1")
        object.__setattr__(self, "tracked_commands", frozenset(self.tracked_commands))
        object.__setattr__(self, "cancel_commands", frozenset(self.cancel_commands))

    def with_tracked(self, commands: Iterable[str]) -> RestoreSettings:
        """Return a copy whose tracked set is replaced by ``commands``."""
        return replace(self, tracked_commands=frozenset(commands))

    def with_extra_tracked(self, commands: Iterable[str]) -> RestoreSettings:
        """Return a copy whose tracked set also includes ``commands``."""
        return replace(self, tracked_commands=self.tracked_commands | frozenset(commands))


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.debug("Could not write config %s: %s", CONFIG_PATH, exc)


def _coerce_positive_int(value: object) -> int | None:
    """Accept strictly positive integers; booleans and other types are invalid."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _coerce_command_names(value: object) -> frozenset[str] | None:
    """Return non-empty stripped strings from a JSON list, ``None`` if not a list."""
    if not isinstance(value, list):
        return None
    return frozenset(item.strip() for item in value if isinstance(item, str) and item.strip())


def load_max_ring_size() -> int:
    value = _coerce_positive_int(load_config().get("max_ring_size"))
    return value if value is not None else DEFAULT_MAX_RING_SIZE


def load_settings() -> RestoreSettings:
    """Build effective settings from the config file.

    ``tracked_commands`` replaces the default tracked set, while
    ``extra_tracked_commands`` extends whichever set is in effect.
    """
    data = load_config()
    max_ring_size = _coerce_positive_int(data.get("max_ring_size"))
    settings = RestoreSettings(max_ring_size=max_ring_size or DEFAULT_MAX_RING_SIZE)

    tracked = _coerce_command_names(data.get("tracked_commands"))
    if tracked is not None:
        settings = settings.with_tracked(tracked)
    extra = _coerce_command_names(data.get("extra_tracked_commands"))
    if extra:
        settings = settings.with_extra_tracked(extra)

    cancel = _coerce_command_names(data.get("cancel_commands"))
    if cancel:
        settings = replace(settings, cancel_commands=cancel)

    navigate = data.get("navigate_command")
    if isinstance(navigate, str) and navigate.strip():
        settings = replace(settings, navigate_command=navigate.strip())
    return settings


def save_max_ring_size(max_ring_size: int) -> None:
    """Persist the ring bound, ignoring non-positive values."""
    if _coerce_positive_int(max_ring_size) is None:
        return
    config = load_config()
    config["max_ring_size"] = max_ring_size
    save_config(config)


def save_tracked_commands(commands: Iterable[str]) -> None:
    """Persist a replacement tracked-command list in sorted order."""
    names = sorted({name.strip() for name in commands if isinstance(name, str) and name.strip()})
    config = load_config()
    config["tracked_commands"] = names
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "RestoreSettings",
    "load_config",
    "load_max_ring_size",
    "load_settings",
    "save_config",
    "save_max_ring_size",
    "save_tracked_commands",
]
