"""Visible-sequence linearization tests.

Covers pre-order indexing, hidden pruning, collapse round trips, and the
depth cap that keeps malformed (cyclic) trees from hanging traversal.
"""

from __future__ import annotations

import unittest

from lazytree import visibility
from lazytree.node import NodeState, TreeNode, is_last_child, has_previous_sibling, toggle_flag


def tree_one() -> TreeNode:
    return TreeNode.build(
        "tmp",
        TreeNode.build("example1"),
        TreeNode.build(
            "test",
            TreeNode.build(
                "example",
                TreeNode.build("file2"),
                TreeNode.build("file4"),
                TreeNode.build("lastchild", TreeNode.build("file")),
            ),
            TreeNode.build("file1"),
            TreeNode.build("file3"),
            TreeNode.build("file5"),
        ),
    )


def texts(nodes) -> list[str]:
    return [node.render(80) for node in nodes]


class LoopNode:
    """Malformed node that is its own parent and its own only child."""

    def __init__(self) -> None:
        self._state = NodeState.COLLAPSIBLE

    def parent(self):
        return self

    def children(self):
        return [self]

    def state(self) -> NodeState:
        return self._state

    def set_state(self, state: NodeState) -> None:
        self._state = NodeState(state)

    def render(self, width: int) -> str:
        return "loop"


class VisibleSequenceTests(unittest.TestCase):
    def test_empty_forest_has_no_visible_nodes(self) -> None:
        for forest in (None, []):
            self.assertEqual(visibility.count_visible(forest), 0)
            self.assertIsNone(visibility.node_at(forest, 0))
            self.assertIsNone(visibility.node_at(forest, 1))
            self.assertEqual(visibility.visible_nodes(forest), [])

    def test_pre_order_places_children_before_later_siblings(self) -> None:
        forest = [tree_one()]
        self.assertEqual(
            texts(visibility.visible_nodes(forest)),
            ["tmp", "example1", "test", "example", "file2", "file4", "lastchild", "file", "file1", "file3", "file5"],
        )
        self.assertEqual(visibility.count_visible(forest), 11)

    def test_count_matches_indexable_positions(self) -> None:
        forest = [tree_one(), TreeNode.build("other", TreeNode.build("leaf"))]
        toggle_flag(forest[0].children()[1], NodeState.COLLAPSED)
        count = visibility.count_visible(forest)
        resolved = [visibility.node_at(forest, idx) for idx in range(count)]
        self.assertTrue(all(node is not None for node in resolved))
        self.assertIsNone(visibility.node_at(forest, count))
        self.assertIsNone(visibility.node_at(forest, -1))
        self.assertEqual(resolved, visibility.visible_nodes(forest))

    def test_hidden_node_prunes_its_subtree(self) -> None:
        hidden = TreeNode.build("hidden", TreeNode.build("inner"), state=NodeState.HIDDEN)
        root = TreeNode.build("one", hidden, TreeNode.build("two"))
        forest = [root]
        self.assertEqual(texts(visibility.visible_nodes(forest)), ["one", "two"])
        self.assertEqual(visibility.node_at(forest, 1).render(80), "two")
        self.assertIsNone(visibility.node_at(forest, 2))

    def test_collapsed_node_contributes_only_itself(self) -> None:
        root = TreeNode.build("one collapsed", TreeNode.build("child"), state=NodeState.COLLAPSED)
        self.assertIs(visibility.node_at([root], 0), root)
        self.assertIsNone(visibility.node_at([root], 1))
        self.assertEqual(visibility.count_visible([root]), 1)

    def test_collapse_round_trip_restores_count(self) -> None:
        forest = [tree_one()]
        example = forest[0].children()[1].children()[0]
        before = visibility.count_visible(forest)
        toggle_flag(example, NodeState.COLLAPSED)
        self.assertEqual(visibility.count_visible(forest), before - 4)
        toggle_flag(example, NodeState.COLLAPSED)
        self.assertEqual(visibility.count_visible(forest), before)

    def test_non_collapsible_node_does_not_expose_children(self) -> None:
        root = TreeNode.build("root", TreeNode.build("child"))
        root.set_state(NodeState.NONE)
        self.assertEqual(visibility.count_visible([root]), 1)

    def test_repeated_queries_are_idempotent(self) -> None:
        forest = [tree_one()]
        first = visibility.visible_nodes(forest)
        self.assertEqual(visibility.visible_nodes(forest), first)
        self.assertIs(visibility.node_at(forest, 5), visibility.node_at(forest, 5))

    def test_index_of_uses_identity(self) -> None:
        forest = [tree_one()]
        target = visibility.node_at(forest, 7)
        self.assertEqual(visibility.index_of(forest, target), 7)
        self.assertIsNone(visibility.index_of(forest, TreeNode("file")))


class DepthTests(unittest.TestCase):
    def test_depth_counts_ancestors(self) -> None:
        root = tree_one()
        leaf = root.children()[1].children()[0].children()[2].children()[0]
        self.assertEqual(visibility.depth_of(root), 0)
        self.assertEqual(visibility.depth_of(leaf), 4)
        self.assertEqual(visibility.depth_of(None), 0)
        self.assertIs(visibility.ancestor_at(leaf, 4), root)
        self.assertIsNone(visibility.ancestor_at(leaf, 5))

    def test_cyclic_parent_chain_is_capped(self) -> None:
        with self.assertLogs("lazytree.visibility", level="WARNING"):
            self.assertEqual(visibility.depth_of(LoopNode()), visibility.MAX_DEPTH)

    def test_cyclic_children_terminate_at_depth_cap(self) -> None:
        with self.assertLogs("lazytree.visibility", level="WARNING"):
            self.assertEqual(visibility.count_visible([LoopNode()]), visibility.MAX_DEPTH)


class AnnotateSiblingsTests(unittest.TestCase):
    def test_last_visible_sibling_is_marked(self) -> None:
        a = TreeNode("a")
        b = TreeNode("b")
        hidden = TreeNode("hidden", state=NodeState.HIDDEN)
        root = TreeNode.build("root", a, b, hidden)
        visibility.annotate_siblings([root])
        self.assertTrue(is_last_child(root))
        self.assertFalse(is_last_child(a))
        self.assertTrue(is_last_child(b))
        self.assertFalse(has_previous_sibling(a))
        self.assertTrue(has_previous_sibling(b))

    def test_flags_follow_current_sibling_list(self) -> None:
        root = TreeNode.build("root", TreeNode.build("a"))
        visibility.annotate_siblings([root])
        first = root.children()[0]
        self.assertTrue(is_last_child(first))
        root.add(TreeNode("b"))
        visibility.annotate_siblings([root])
        self.assertFalse(is_last_child(first))

    def test_forest_roots_are_siblings(self) -> None:
        roots = [TreeNode("one"), TreeNode("two")]
        visibility.annotate_siblings(roots)
        self.assertFalse(is_last_child(roots[0]))
        self.assertTrue(is_last_child(roots[1]))


if __name__ == "__main__":
    unittest.main()
