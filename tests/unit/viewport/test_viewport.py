"""Scroll-window arithmetic tests for ``Viewport``."""

from __future__ import annotations

import unittest

from lazytree.viewport import Viewport, clamp


class ClampTests(unittest.TestCase):
    def test_upper_bound_wins_when_bounds_cross(self) -> None:
        self.assertEqual(clamp(5, 0, 3), 3)
        self.assertEqual(clamp(-2, 0, 3), 0)
        self.assertEqual(clamp(1, 0, -1), -1)


class ViewportTests(unittest.TestCase):
    def _assert_invariants(self, viewport: Viewport, count: int) -> None:
        self.assertGreaterEqual(viewport.cursor, 0)
        self.assertLessEqual(viewport.cursor, max(0, count - 1))
        self.assertGreaterEqual(viewport.offset, 0)
        self.assertLessEqual(viewport.offset, viewport.max_offset(count))
        if count:
            self.assertLessEqual(viewport.offset, viewport.cursor)
            self.assertLessEqual(viewport.cursor, viewport.offset + viewport.rows() - 1)

    def test_moves_scroll_just_enough_to_follow_cursor(self) -> None:
        viewport = Viewport(width=10, height=3)
        self.assertTrue(viewport.move_by(5, 10))
        self.assertEqual((viewport.cursor, viewport.offset), (5, 3))
        self.assertTrue(viewport.move_by(-4, 10))
        self.assertEqual((viewport.cursor, viewport.offset), (1, 1))
        self.assertTrue(viewport.move_by(100, 10))
        self.assertEqual((viewport.cursor, viewport.offset), (9, 7))
        self._assert_invariants(viewport, 10)

    def test_move_within_window_keeps_offset(self) -> None:
        viewport = Viewport(width=10, height=5)
        viewport.move_by(3, 10)
        self.assertEqual(viewport.offset, 0)

    def test_move_past_edges_reports_no_change(self) -> None:
        viewport = Viewport(width=10, height=3)
        self.assertFalse(viewport.move_by(-1, 10))
        self.assertFalse(viewport.move_by(1, 0))

    def test_shrinking_count_reclamps_cursor_and_offset(self) -> None:
        viewport = Viewport(width=10, height=3)
        viewport.move_by(100, 10)
        viewport.clamp(4)
        self.assertEqual((viewport.cursor, viewport.offset), (3, 1))
        self._assert_invariants(viewport, 4)

    def test_empty_count_resets_to_origin(self) -> None:
        viewport = Viewport(width=10, height=3, offset=4, cursor=6)
        viewport.clamp(0)
        self.assertEqual((viewport.cursor, viewport.offset), (0, 0))

    def test_resize_taller_pulls_offset_back(self) -> None:
        viewport = Viewport(width=10, height=3)
        viewport.move_by(9, 10)
        self.assertTrue(viewport.resize(10, 8, 10))
        self.assertEqual((viewport.cursor, viewport.offset), (9, 2))
        self.assertFalse(viewport.resize(10, 8, 10))

    def test_resize_shorter_keeps_cursor_visible(self) -> None:
        viewport = Viewport(width=10, height=8)
        viewport.move_by(7, 10)
        viewport.resize(10, 2, 10)
        self._assert_invariants(viewport, 10)
        self.assertEqual((viewport.cursor, viewport.offset), (7, 6))

    def test_zero_height_scrolls_as_single_row(self) -> None:
        viewport = Viewport(width=10, height=0)
        viewport.move_by(2, 3)
        self.assertEqual((viewport.cursor, viewport.offset), (2, 2))
        self.assertEqual(viewport.page_size(), 1)
        self.assertEqual(viewport.half_page_size(), 1)

    def test_half_page_rounds_down(self) -> None:
        self.assertEqual(Viewport(height=5).half_page_size(), 2)
        self.assertEqual(Viewport(height=1).half_page_size(), 1)

    def test_fit_advances_offset_for_tall_nodes(self) -> None:
        viewport = Viewport(width=10, height=4, offset=0, cursor=2)
        viewport.fit([1, 3, 2])
        self.assertEqual(viewport.offset, 2)

    def test_fit_never_passes_cursor(self) -> None:
        viewport = Viewport(width=10, height=2, offset=1, cursor=1)
        viewport.fit([5])
        self.assertEqual(viewport.offset, 1)

    def test_fit_leaves_fitting_window_alone(self) -> None:
        viewport = Viewport(width=10, height=6, offset=0, cursor=2)
        viewport.fit([1, 2, 3])
        self.assertEqual(viewport.offset, 0)


if __name__ == "__main__":
    unittest.main()
