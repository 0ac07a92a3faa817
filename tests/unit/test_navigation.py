"""Tests for the navigate-previous index and its end-of-history sentinel."""

from __future__ import annotations

import unittest

from restorepoint.navigation import END_OF_HISTORY, NavigationCursor
from restorepoint.position import Position, PositionRing


def _ring(*offsets: int) -> PositionRing:
    """Build a ring whose most recent entry is the last offset given."""
    ring = PositionRing(max_size=8)
    for offset in offsets:
        ring.push(Position("doc", offset))
    return ring


class NavigationCursorTests(unittest.TestCase):
    def test_index_starts_at_one(self) -> None:
        self.assertEqual(NavigationCursor().nth, 1)

    def test_consecutive_calls_walk_back_until_end_of_history(self) -> None:
        ring = _ring(10, 20)
        cursor = NavigationCursor()

        self.assertEqual(cursor.advance(False), 1)
        self.assertEqual(cursor.current_target(ring), Position("doc", 10))

        self.assertEqual(cursor.advance(True), 2)
        self.assertEqual(cursor.advance(True), 3)
        self.assertIs(cursor.current_target(ring), END_OF_HISTORY)
        self.assertEqual(cursor.nth, 3)

    def test_end_of_history_leaves_index_unchanged(self) -> None:
        cursor = NavigationCursor()
        cursor.advance(False)

        self.assertIs(cursor.current_target(PositionRing()), END_OF_HISTORY)
        self.assertIs(cursor.current_target(PositionRing()), END_OF_HISTORY)
        self.assertEqual(cursor.nth, 1)

    def test_non_consecutive_call_resets_index(self) -> None:
        cursor = NavigationCursor()
        cursor.advance(False)
        cursor.advance(True)
        cursor.advance(True)

        self.assertEqual(cursor.advance(False), 1)

    def test_reset_returns_index_to_one(self) -> None:
        cursor = NavigationCursor()
        cursor.advance(True)
        cursor.reset()
        self.assertEqual(cursor.nth, 1)

    def test_current_target_does_not_mutate_ring(self) -> None:
        ring = _ring(1, 2, 3)
        cursor = NavigationCursor()
        cursor.advance(False)
        cursor.current_target(ring)

        self.assertEqual(len(ring), 3)
        self.assertEqual(ring.peek(0), Position("doc", 3))


if __name__ == "__main__":
    unittest.main()
