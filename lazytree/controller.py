"""Cursor, scrolling, and expand/collapse operations over a forest.

``TreeController`` owns the :class:`Viewport` and is the only writer of the
``SELECTED`` and ``COLLAPSED`` flags. Every mutation ends by re-clamping the
viewport against the current visible count and re-selecting the node under
the cursor, so at most one node is ever selected.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .node import Node, NodeState, is_collapsible, set_flag, toggle_flag
from .viewport import Viewport
from .visibility import count_visible, node_at

logger = logging.getLogger(__name__)


class TreeController:
    def __init__(self, forest: Sequence[Node] | None = None, viewport: Viewport | None = None) -> None:
        self.forest: list[Node] = list(forest or [])
        self.viewport = viewport if viewport is not None else Viewport()
        self._selected: Node | None = None
        self.sync()

    def set_forest(self, forest: Sequence[Node] | None) -> None:
        """Swap the displayed forest and reset the cursor to the top."""
        self._select(None)
        self.forest = list(forest or [])
        self.viewport.cursor = 0
        self.viewport.offset = 0
        self.sync()

    def visible_count(self) -> int:
        return count_visible(self.forest)

    def current(self) -> Node | None:
        """Return the node under the cursor."""
        return node_at(self.forest, self.viewport.cursor)

    def _select(self, node: Node | None) -> None:
        previous = self._selected
        if previous is not None and previous is not node:
            set_flag(previous, NodeState.SELECTED, False)
        if node is not None:
            set_flag(node, NodeState.SELECTED, True)
        self._selected = node

    def sync(self) -> None:
        """Re-clamp the viewport and move the selection flag to the cursor node."""
        self.viewport.clamp(self.visible_count())
        self._select(self.current())

    def resize(self, width: int, height: int) -> bool:
        changed = self.viewport.resize(width, height, self.visible_count())
        self._select(self.current())
        return changed

    def move_by(self, delta: int) -> bool:
        changed = self.viewport.move_by(delta, self.visible_count())
        self._select(self.current())
        return changed

    def move_up(self, n: int = 1) -> bool:
        return self.move_by(-n)

    def move_down(self, n: int = 1) -> bool:
        return self.move_by(n)

    def page_up(self) -> bool:
        return self.move_by(-self.viewport.page_size())

    def page_down(self) -> bool:
        return self.move_by(self.viewport.page_size())

    def half_page_up(self) -> bool:
        return self.move_by(-self.viewport.half_page_size())

    def half_page_down(self) -> bool:
        return self.move_by(self.viewport.half_page_size())

    def goto_top(self) -> bool:
        return self.move_by(-self.viewport.cursor)

    def goto_bottom(self) -> bool:
        return self.move_by(self.visible_count() - 1 - self.viewport.cursor)

    def toggle_expand(self) -> bool:
        """Flip ``COLLAPSED`` on the cursor node; no-op for non-collapsible nodes."""
        node = self.current()
        if node is None or not is_collapsible(node):
            return False
        toggle_flag(node, NodeState.COLLAPSED)
        logger.debug("toggled %r at index %d", node, self.viewport.cursor)
        self.sync()
        return True


__all__ = ["TreeController"]
