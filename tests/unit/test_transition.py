"""Tests for tracked-run entry detection."""

from __future__ import annotations

import unittest

from restorepoint.transition import TransitionState, should_push

TRACKED = frozenset({"scroll-up-command", "scroll-down-command"})


class ShouldPushTests(unittest.TestCase):
    def test_untracked_to_tracked_pushes(self) -> None:
        self.assertTrue(should_push("self-insert-command", "scroll-up-command", TRACKED))

    def test_tracked_to_other_tracked_does_not_push(self) -> None:
        self.assertFalse(should_push("scroll-up-command", "scroll-down-command", TRACKED))

    def test_tracked_to_untracked_does_not_push(self) -> None:
        self.assertFalse(should_push("scroll-up-command", "forward-char", TRACKED))

    def test_untracked_to_untracked_does_not_push(self) -> None:
        self.assertFalse(should_push("forward-char", "next-line", TRACKED))

    def test_repeated_tracked_command_does_not_push(self) -> None:
        self.assertFalse(should_push("scroll-up-command", "scroll-up-command", TRACKED))

    def test_first_command_of_session_can_push(self) -> None:
        self.assertTrue(should_push(None, "scroll-down-command", TRACKED))
        self.assertFalse(should_push(None, "forward-char", TRACKED))


class TransitionStateTests(unittest.TestCase):
    def test_shift_demotes_current_to_previous(self) -> None:
        state = TransitionState()
        state.shift("a")
        self.assertEqual((state.previous, state.current), (None, "a"))
        state.shift("b")
        self.assertEqual((state.previous, state.current), ("a", "b"))

    def test_reset_forgets_both_commands(self) -> None:
        state = TransitionState("a", "b")
        state.reset()
        self.assertEqual((state.previous, state.current), (None, None))


if __name__ == "__main__":
    unittest.main()
