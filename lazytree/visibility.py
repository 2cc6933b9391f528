"""Linearize a forest into the ordered sequence of displayable nodes.

Ordering is strict depth-first pre-order. Hidden nodes prune their whole
subtree, collapsed nodes contribute only themselves. Nothing is cached: every
query walks the current flags, so toggles between calls are always observed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from itertools import islice

from .node import (
    Node,
    NodeState,
    child_list,
    is_collapsible,
    is_expanded,
    is_hidden,
    set_flag,
)

logger = logging.getLogger(__name__)

# Upper bound for ancestor walks and descent; deeper chains are treated as
# malformed (cyclic) trees and truncated.
MAX_DEPTH = 256

_END = object()


def _descends(node: Node) -> bool:
    return is_collapsible(node) and is_expanded(node)


def iter_visible(forest: Sequence[Node] | None) -> Iterator[Node]:
    """Yield visible nodes in pre-order."""
    if not forest:
        return
    stack: list[Iterator[Node]] = [iter(forest)]
    while stack:
        node = next(stack[-1], _END)
        if node is _END:
            stack.pop()
            continue
        if node is None or is_hidden(node):
            continue
        yield node
        if not _descends(node):
            continue
        if len(stack) >= MAX_DEPTH:
            logger.warning("tree deeper than %d levels; not descending further", MAX_DEPTH)
            continue
        stack.append(iter(child_list(node)))


def visible_nodes(forest: Sequence[Node] | None) -> list[Node]:
    return list(iter_visible(forest))


def count_visible(forest: Sequence[Node] | None) -> int:
    """Return the number of visible slots in ``forest``."""
    return sum(1 for _ in iter_visible(forest))


def node_at(forest: Sequence[Node] | None, index: int) -> Node | None:
    """Return the node at visible position ``index``, or ``None`` past the end."""
    if index < 0:
        return None
    return next(islice(iter_visible(forest), index, None), None)


def index_of(forest: Sequence[Node] | None, target: Node) -> int | None:
    """Return the visible position of ``target`` (identity match)."""
    for idx, node in enumerate(iter_visible(forest)):
        if node is target:
            return idx
    return None


def depth_of(node: Node | None) -> int:
    """Count ancestors of ``node``; roots are depth 0.

    Parent chains longer than ``MAX_DEPTH`` are cut off at that depth.
    """
    if node is None:
        return 0
    depth = 0
    parent = node.parent()
    while parent is not None:
        depth += 1
        if depth >= MAX_DEPTH:
            logger.warning("parent chain exceeds %d levels; assuming a cycle", MAX_DEPTH)
            break
        parent = parent.parent()
    return depth


def ancestor_at(node: Node | None, steps: int) -> Node | None:
    """Walk ``steps`` parents up from ``node``."""
    current = node
    for _ in range(min(max(0, steps), MAX_DEPTH)):
        if current is None:
            return None
        current = current.parent()
    return current


def annotate_siblings(forest: Sequence[Node] | None) -> None:
    """Derive LAST_CHILD / HAS_PREVIOUS_SIBLING for every visible node.

    Positions are relative to the non-hidden siblings as they are right now;
    the forest itself is the top-level sibling list.
    """
    if not forest:
        return
    pending: list[tuple[Sequence[Node], int]] = [(forest, 0)]
    while pending:
        siblings, depth = pending.pop()
        shown = [node for node in siblings if node is not None and not is_hidden(node)]
        last = len(shown) - 1
        for pos, node in enumerate(shown):
            set_flag(node, NodeState.LAST_CHILD, pos == last)
            set_flag(node, NodeState.HAS_PREVIOUS_SIBLING, pos > 0)
            if _descends(node) and depth + 1 < MAX_DEPTH:
                pending.append((child_list(node), depth + 1))


__all__ = [
    "MAX_DEPTH",
    "iter_visible",
    "visible_nodes",
    "count_visible",
    "node_at",
    "index_of",
    "depth_of",
    "ancestor_at",
    "annotate_siblings",
]
