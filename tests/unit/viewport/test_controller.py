"""Cursor, paging, and expand/collapse tests for ``TreeController``."""

from __future__ import annotations

import unittest

from lazytree.controller import TreeController
from lazytree.node import NodeState, TreeNode, is_expanded, is_selected
from lazytree.visibility import visible_nodes


def small_tree() -> TreeNode:
    return TreeNode.build(
        "root",
        TreeNode.build("exampleLeaf"),
        TreeNode.build("test", TreeNode.build("file1"), TreeNode.build("file2")),
    )


def all_nodes(root: TreeNode) -> list[TreeNode]:
    found = [root]
    for child in root.children():
        found.extend(all_nodes(child))
    return found


class TreeControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.root = small_tree()
        self.controller = TreeController([self.root])
        self.controller.resize(20, 2)

    def _selected(self) -> list[TreeNode]:
        return [node for node in all_nodes(self.root) if is_selected(node)]

    def test_initial_cursor_selects_first_node(self) -> None:
        self.assertIs(self.controller.current(), self.root)
        self.assertEqual(self._selected(), [self.root])
        self.assertEqual(self.controller.visible_count(), 5)

    def test_exactly_one_node_selected_after_moves(self) -> None:
        for move in (
            self.controller.goto_bottom,
            self.controller.page_up,
            self.controller.half_page_down,
            self.controller.goto_top,
        ):
            move()
            self.assertEqual(self._selected(), [self.controller.current()])

    def test_collapse_shrinks_sequence_and_reclamps(self) -> None:
        self.controller.goto_bottom()
        self.assertEqual((self.controller.viewport.cursor, self.controller.viewport.offset), (4, 3))
        self.controller.move_up(2)
        self.assertEqual(self.controller.current().text, "test")
        self.assertTrue(self.controller.toggle_expand())
        self.assertFalse(is_expanded(self.controller.current()))
        self.assertEqual(self.controller.visible_count(), 3)
        self.assertEqual((self.controller.viewport.cursor, self.controller.viewport.offset), (2, 1))

    def test_expand_restores_children(self) -> None:
        self.controller.move_down(2)
        self.controller.toggle_expand()
        self.controller.toggle_expand()
        self.assertEqual(
            [node.text for node in visible_nodes(self.controller.forest)],
            ["root", "exampleLeaf", "test", "file1", "file2"],
        )

    def test_toggle_on_leaf_is_noop(self) -> None:
        self.controller.move_down()
        before = self.controller.current().state()
        self.assertFalse(self.controller.toggle_expand())
        self.assertEqual(self.controller.current().state(), before)

    def test_collapsing_ancestor_pulls_cursor_into_range(self) -> None:
        self.controller.goto_bottom()
        self.root.set_state(self.root.state() | NodeState.COLLAPSED)
        self.controller.sync()
        self.assertEqual(self.controller.viewport.cursor, 0)
        self.assertEqual(self._selected(), [self.root])

    def test_paging_moves_by_window_height(self) -> None:
        self.assertTrue(self.controller.page_down())
        self.assertEqual(self.controller.viewport.cursor, 2)
        self.assertTrue(self.controller.half_page_down())
        self.assertEqual(self.controller.viewport.cursor, 3)
        self.assertTrue(self.controller.half_page_up())
        self.assertTrue(self.controller.page_up())
        self.assertEqual(self.controller.viewport.cursor, 0)
        self.assertFalse(self.controller.page_up())

    def test_set_forest_resets_cursor_and_selection(self) -> None:
        self.controller.goto_bottom()
        other = TreeNode("other")
        self.controller.set_forest([other])
        self.assertEqual(self._selected(), [])
        self.assertIs(self.controller.current(), other)
        self.assertTrue(is_selected(other))
        self.assertEqual(self.controller.viewport.cursor, 0)

    def test_empty_forest_is_inert(self) -> None:
        controller = TreeController()
        self.assertIsNone(controller.current())
        self.assertFalse(controller.move_down())
        self.assertFalse(controller.toggle_expand())


if __name__ == "__main__":
    unittest.main()
