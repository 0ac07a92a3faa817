"""Tests for config persistence and input sanitization.

Validates the effective settings built from the JSON file.
Ensures malformed config data falls back to defaults.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from restorepoint import config
from restorepoint.commands import DEFAULT_CANCEL_COMMANDS, DEFAULT_TRACKED_COMMANDS, NAVIGATE_PREVIOUS
from restorepoint.config import RestoreSettings
from restorepoint.errors import ConfigurationError


class RestoreSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = RestoreSettings()
        self.assertEqual(settings.max_ring_size, 128)
        self.assertEqual(settings.tracked_commands, DEFAULT_TRACKED_COMMANDS)
        self.assertEqual(settings.cancel_commands, DEFAULT_CANCEL_COMMANDS)
        self.assertEqual(settings.navigate_command, NAVIGATE_PREVIOUS)

    def test_invalid_ring_size_raises(self) -> None:
        for bad in (0, -1, True, 2.5):
            with self.subTest(bad=bad), self.assertRaises(ConfigurationError):
                RestoreSettings(max_ring_size=bad)

    def test_command_sets_are_frozen(self) -> None:
        settings = RestoreSettings(tracked_commands={"a", "b"})
        self.assertIsInstance(settings.tracked_commands, frozenset)

    def test_with_extra_tracked_extends_the_set(self) -> None:
        settings = RestoreSettings(tracked_commands=frozenset({"a"})).with_extra_tracked(["b"])
        self.assertEqual(settings.tracked_commands, frozenset({"a", "b"}))


class ConfigFileTests(unittest.TestCase):
    def _patched(self, tmp: str):
        return mock.patch("restorepoint.config.CONFIG_PATH", Path(tmp) / "restorepoint" / "config.json")

    def test_missing_file_yields_default_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            self.assertEqual(config.load_config(), {})
            self.assertEqual(config.load_settings(), RestoreSettings())

    def test_malformed_file_yields_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.CONFIG_PATH.parent.mkdir(parents=True)
            config.CONFIG_PATH.write_text("{not json", encoding="utf-8")
            self.assertEqual(config.load_config(), {})

            config.CONFIG_PATH.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(config.load_config(), {})

    def test_load_settings_applies_every_key(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_config(
                {
                    "max_ring_size": 16,
                    "tracked_commands": ["scroll-up-command", " end-of-buffer ", 7, ""],
                    "extra_tracked_commands": ["isearch-forward"],
                    "cancel_commands": ["keyboard-escape-quit"],
                    "navigate_command": "jump-back",
                }
            )
            settings = config.load_settings()

        self.assertEqual(settings.max_ring_size, 16)
        self.assertEqual(
            settings.tracked_commands,
            frozenset({"scroll-up-command", "end-of-buffer", "isearch-forward"}),
        )
        self.assertEqual(settings.cancel_commands, frozenset({"keyboard-escape-quit"}))
        self.assertEqual(settings.navigate_command, "jump-back")

    def test_extra_tracked_commands_extend_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_config({"extra_tracked_commands": ["goto-line"]})
            settings = config.load_settings()

        self.assertEqual(settings.tracked_commands, DEFAULT_TRACKED_COMMANDS | {"goto-line"})

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        for bad_size in (True, -3, 0, "5", 1.5):
            with self.subTest(bad_size=bad_size), tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
                config.save_config(
                    {
                        "max_ring_size": bad_size,
                        "tracked_commands": "scroll-up-command",
                        "cancel_commands": [],
                        "navigate_command": "   ",
                    }
                )
                self.assertEqual(config.load_settings(), RestoreSettings())

    def test_saved_tracked_commands_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_tracked_commands(["b", "a", " a ", ""])
            self.assertEqual(config.load_config()["tracked_commands"], ["a", "b"])
            self.assertEqual(config.load_settings().tracked_commands, frozenset({"a", "b"}))

    def test_save_max_ring_size_ignores_invalid_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, self._patched(tmp):
            config.save_max_ring_size(0)
            self.assertEqual(config.load_config(), {})

            config.save_max_ring_size(32)
            self.assertEqual(config.load_max_ring_size(), 32)


if __name__ == "__main__":
    unittest.main()
