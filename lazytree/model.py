"""Tree widget model: event dispatch, focus, and viewport rendering.

One ``update`` call handles one input event synchronously; ``view`` then
returns at most ``height`` styled lines for the current window. Hosts drive
both from their own event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from itertools import islice

from .controller import TreeController
from .events import (
    GotoBottom,
    GotoTop,
    HalfPageDown,
    HalfPageUp,
    MoveDown,
    MoveUp,
    PageDown,
    PageUp,
    Resize,
    ToggleExpand,
)
from .node import Node, NodeState, set_flag
from .render import LayoutCache, RenderConfig, node_line_count, render_forest, render_window
from .symbols import DrawSymbols, default_symbols
from .theme import PLAIN_THEME, DepthStyle, TreeTheme
from .visibility import iter_visible

logger = logging.getLogger(__name__)


class TreeModel:
    """Collapsible tree view over an application-supplied forest."""

    def __init__(
        self,
        forest: Sequence[Node] | None = None,
        *,
        symbols: DrawSymbols | None = None,
        theme: TreeTheme | None = None,
        depth_style: DepthStyle | None = None,
        show_markers: bool = True,
    ) -> None:
        self.controller = TreeController(forest)
        self.symbols = symbols if symbols is not None else default_symbols()
        self.theme = theme if theme is not None else PLAIN_THEME
        self.depth_style = depth_style
        self.show_markers = show_markers
        self._focus = True
        self._window: dict[int, Node] = {}
        self._skipped: dict[int, Node] = {}
        self._handlers: dict[type, Callable[[object], bool]] = {
            MoveUp: lambda event: self.controller.move_up(event.n),
            MoveDown: lambda event: self.controller.move_down(event.n),
            PageUp: lambda _event: self.controller.page_up(),
            PageDown: lambda _event: self.controller.page_down(),
            HalfPageUp: lambda _event: self.controller.half_page_up(),
            HalfPageDown: lambda _event: self.controller.half_page_down(),
            GotoTop: lambda _event: self.controller.goto_top(),
            GotoBottom: lambda _event: self.controller.goto_bottom(),
            ToggleExpand: lambda _event: self.controller.toggle_expand(),
        }

    @property
    def width(self) -> int:
        return self.controller.viewport.width

    @property
    def height(self) -> int:
        return self.controller.viewport.height

    def set_width(self, width: int) -> None:
        self.controller.resize(width, self.height)

    def set_height(self, height: int) -> None:
        self.controller.resize(self.width, height)

    def focus(self) -> None:
        self._focus = True

    def blur(self) -> None:
        self._focus = False

    def focused(self) -> bool:
        return self._focus

    def children(self) -> list[Node]:
        return self.controller.forest

    def set_children(self, forest: Sequence[Node] | None) -> None:
        self._clear_skip_flags()
        self._window = {}
        self.controller.set_forest(forest)

    def current(self) -> Node | None:
        return self.controller.current()

    def visible_count(self) -> int:
        return self.controller.visible_count()

    def render_config(self) -> RenderConfig:
        return RenderConfig(
            symbols=self.symbols,
            theme=self.theme,
            depth_style=self.depth_style,
            show_markers=self.show_markers,
            focused=self._focus,
        )

    def update(self, event: object) -> bool:
        """Apply one event; return whether the view needs redrawing."""
        if isinstance(event, Resize):
            return self.controller.resize(event.width, event.height)
        if not self._focus:
            logger.debug("ignoring %r while blurred", event)
            return False
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.debug("ignoring unsupported event %r", event)
            return False
        return handler(event)

    def _window_nodes(self, config: RenderConfig, cache: LayoutCache) -> list[Node]:
        viewport = self.controller.viewport
        nodes: list[Node] = []
        used = 0
        for node in islice(iter_visible(self.controller.forest), viewport.offset, None):
            nodes.append(node)
            used += node_line_count(node, viewport.width, config, cache)
            if used >= viewport.height:
                break
        return nodes

    def _mark_window(self, window: list[Node]) -> None:
        """Flag nodes that scrolled out with SKIP_RENDER; clear it for shown ones."""
        shown = {id(node): node for node in window}
        for key, node in self._window.items():
            if key not in shown:
                set_flag(node, NodeState.SKIP_RENDER, True)
                self._skipped[key] = node
        for key, node in shown.items():
            set_flag(node, NodeState.SKIP_RENDER, False)
            self._skipped.pop(key, None)
        self._window = shown

    def _clear_skip_flags(self) -> None:
        for node in self._skipped.values():
            set_flag(node, NodeState.SKIP_RENDER, False)
        self._skipped = {}

    def view(self) -> list[str]:
        """Render the current window; empty when either dimension is zero."""
        viewport = self.controller.viewport
        if viewport.width <= 0 or viewport.height <= 0:
            return []
        config = self.render_config()
        forest = self.controller.forest
        cache: LayoutCache = {}
        span = viewport.cursor - viewport.offset + 1
        line_counts = [
            node_line_count(node, viewport.width, config, cache)
            for node in islice(iter_visible(forest), viewport.offset, viewport.offset + span)
        ]
        viewport.fit(line_counts)
        self._mark_window(self._window_nodes(config, cache))
        return render_window(forest, viewport.offset, viewport.height, viewport.width, config, cache)

    def render_all(self, width: int | None = None) -> list[str]:
        """Render every visible line regardless of the scroll window."""
        self._clear_skip_flags()
        return render_forest(self.controller.forest, self.width if width is None else width, self.render_config())


__all__ = ["TreeModel"]
