"""Node contract and flag vocabulary shared by every tree element.

Collaborators supply objects satisfying :class:`Node`; the engine only reads
tree shape and flips :class:`NodeState` bits through ``set_state``.
``TreeNode`` is a plain in-memory implementation for literal trees.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable


class NodeState(enum.IntFlag):
    """Independent display-state bits carried by each node."""

    NONE = 0
    COLLAPSED = 1 << 0
    COLLAPSIBLE = 1 << 1
    HIDDEN = 1 << 2
    SELECTED = 1 << 3
    LAST_CHILD = 1 << 4
    HAS_PREVIOUS_SIBLING = 1 << 5
    MULTI_LINE = 1 << 6
    SKIP_RENDER = 1 << 7

    def is_(self, flags: NodeState | int) -> bool:
        """Return whether every bit in ``flags`` is set."""
        return self & flags == flags


@runtime_checkable
class Node(Protocol):
    """Capability interface the engine is generic over."""

    def parent(self) -> Node | None: ...

    def children(self) -> Sequence[Node] | None: ...

    def state(self) -> NodeState: ...

    def set_state(self, state: NodeState) -> None: ...

    def render(self, width: int) -> str: ...


def _has(node: Node | None, flag: NodeState) -> bool:
    if node is None:
        return False
    return NodeState(node.state()).is_(flag)


def is_hidden(node: Node | None) -> bool:
    return _has(node, NodeState.HIDDEN)


def is_expanded(node: Node | None) -> bool:
    if node is None:
        return False
    return not _has(node, NodeState.COLLAPSED)


def is_collapsible(node: Node | None) -> bool:
    return _has(node, NodeState.COLLAPSIBLE)


def is_last_child(node: Node | None) -> bool:
    return _has(node, NodeState.LAST_CHILD)


def is_selected(node: Node | None) -> bool:
    return _has(node, NodeState.SELECTED)


def is_multi_line(node: Node | None) -> bool:
    return _has(node, NodeState.MULTI_LINE)


def has_previous_sibling(node: Node | None) -> bool:
    return _has(node, NodeState.HAS_PREVIOUS_SIBLING)


def skip_render(node: Node | None) -> bool:
    return _has(node, NodeState.SKIP_RENDER)


def set_flag(node: Node, flag: NodeState, enabled: bool) -> None:
    """Set or clear ``flag``, writing back only when the state changes."""
    current = NodeState(node.state())
    updated = current | flag if enabled else current & ~flag
    if updated != current:
        node.set_state(updated)


def toggle_flag(node: Node, flag: NodeState) -> None:
    node.set_state(NodeState(node.state()) ^ flag)


def child_list(node: Node) -> Sequence[Node]:
    """Return ``node.children()`` with ``None`` normalized to an empty tuple."""
    children = node.children()
    return children if children is not None else ()


class TreeNode:
    """In-memory node with a text body and ordered children.

    Appending a child marks the receiver collapsible. Body text may contain
    newlines, which makes the node span several display lines.
    """

    def __init__(
        self,
        text: str,
        children: Iterable[TreeNode] | None = None,
        state: NodeState = NodeState.NONE,
    ) -> None:
        self.text = text
        self._parent: Node | None = None
        self._children: list[Node] = []
        self._state = NodeState(state)
        for child in children or ():
            self.add(child)

    @classmethod
    def build(cls, text: str, *children: TreeNode, state: NodeState = NodeState.NONE) -> TreeNode:
        return cls(text, children, state=state)

    def add(self, child: TreeNode) -> TreeNode:
        child._parent = self
        self._children.append(child)
        self._state |= NodeState.COLLAPSIBLE
        return child

    def parent(self) -> Node | None:
        return self._parent

    def children(self) -> Sequence[Node]:
        return self._children

    def state(self) -> NodeState:
        return self._state

    def set_state(self, state: NodeState) -> None:
        self._state = NodeState(state)

    def render(self, width: int) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TreeNode({self.text!r}, state={self._state!r})"


__all__ = [
    "NodeState",
    "Node",
    "TreeNode",
    "is_hidden",
    "is_expanded",
    "is_collapsible",
    "is_last_child",
    "is_selected",
    "is_multi_line",
    "has_previous_sibling",
    "skip_render",
    "set_flag",
    "toggle_flag",
    "child_list",
]
