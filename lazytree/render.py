"""Connector prefixes and row rendering for visible tree nodes.

Glyphs are computed per column by walking up from the node to the ancestor
that owns the column, so any single node can be drawn without rendering the
rows above it. That keeps viewport-sliced redraws correct.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import islice

from .ansi import RESET, clip_ansi_line, display_width, ellipsize
from .node import (
    Node,
    NodeState,
    child_list,
    is_collapsible,
    is_expanded,
    is_hidden,
    is_last_child,
    is_selected,
    set_flag,
    skip_render,
)
from .symbols import DrawSymbols, default_symbols
from .theme import PLAIN_THEME, DepthStyle, TreeTheme
from .visibility import MAX_DEPTH, ancestor_at, annotate_siblings, depth_of, iter_visible


class LineKind(enum.Enum):
    """Which body line of a node a prefix is drawn for."""

    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"


@dataclass(frozen=True)
class RenderConfig:
    """Everything a render pass needs; passed explicitly into every call."""

    symbols: DrawSymbols = field(default_factory=default_symbols)
    theme: TreeTheme = PLAIN_THEME
    depth_style: DepthStyle | None = None
    show_markers: bool = True
    focused: bool = True


def selected_with_ansi(text: str, theme: TreeTheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text
    selected = theme.selected or "\033[7m"
    # Keep reverse video active even when the text contains internal resets.
    return selected + text.replace(RESET, RESET + selected) + RESET


def connector_for_position(
    node: Node | None,
    position: int,
    max_depth: int,
    symbols: DrawSymbols,
    line: LineKind = LineKind.FIRST,
) -> str:
    """Return the glyph drawn in column ``position`` for ``node``.

    Column ``max_depth`` belongs to the node itself; lower columns belong to
    the ancestor ``max_depth - position`` steps up, which shows a vertical
    continuation only while it still has a sibling below.
    """
    if node is None or position < 0 or position > max_depth:
        return ""
    if position == max_depth:
        if line is LineKind.FIRST:
            if is_last_child(node):
                return symbols.draw_last(position)
            return symbols.draw_node(position)
        if line is LineKind.LAST and is_last_child(node):
            return symbols.padding(position)
        return symbols.draw_vertical(position)

    ancestor = ancestor_at(node, max_depth - position)
    if ancestor is None or is_last_child(ancestor):
        return symbols.padding(position)
    return symbols.draw_vertical(position)


def render_prefix(
    node: Node | None,
    symbols: DrawSymbols,
    line: LineKind = LineKind.FIRST,
    depth_style: DepthStyle | None = None,
    max_depth: int | None = None,
) -> str:
    """Concatenate connector glyphs for columns ``0..max_depth``."""
    if node is None:
        return ""
    if max_depth is None:
        max_depth = depth_of(node)
    parts: list[str] = []
    for position in range(max_depth + 1):
        glyph = connector_for_position(node, position, max_depth, symbols, line)
        if depth_style is not None:
            glyph = depth_style(position, glyph)
        parts.append(glyph)
    return "".join(parts)


def _marker(node: Node, config: RenderConfig) -> str:
    if not config.show_markers or not is_collapsible(node):
        return ""
    symbols = config.symbols
    glyph = symbols.expanded if is_expanded(node) else symbols.collapsed
    if config.theme.marker:
        glyph = f"{config.theme.marker}{glyph}{config.theme.reset}"
    return glyph + " "


@dataclass(frozen=True)
class _NodeLayout:
    depth: int
    marker: str
    body_width: int
    body_lines: list[str]


# Per-frame layouts keyed by node identity, so each body is rendered once.
LayoutCache = dict[int, _NodeLayout]


def _layout(node: Node, width: int, config: RenderConfig, cache: LayoutCache | None = None) -> _NodeLayout:
    if cache is not None:
        cached = cache.get(id(node))
        if cached is not None:
            return cached
    depth = depth_of(node)
    marker = _marker(node, config)
    prefix_width = (depth + 1) * config.symbols.width
    body_width = max(0, width - prefix_width - display_width(marker))
    body = node.render(body_width) or ""
    body_lines = [line.rstrip("\r") for line in body.split("\n")]
    layout = _NodeLayout(depth=depth, marker=marker, body_width=body_width, body_lines=body_lines)
    if cache is not None:
        cache[id(node)] = layout
    return layout


def node_line_count(
    node: Node | None,
    width: int,
    config: RenderConfig | None = None,
    cache: LayoutCache | None = None,
) -> int:
    """Return how many display lines ``node`` occupies at ``width``."""
    if node is None or width <= 0:
        return 0
    return len(_layout(node, width, config or RenderConfig(), cache).body_lines)


def render_node(
    node: Node | None,
    width: int,
    config: RenderConfig | None = None,
    cache: LayoutCache | None = None,
) -> list[str]:
    """Render the display lines of one node (children excluded).

    Connectors read the LAST_CHILD flags of the node and its ancestors, so
    ``annotate_siblings`` must have run over the forest first.
    ``render_forest`` and ``render_window`` do that themselves.
    """
    if node is None or width <= 0 or skip_render(node):
        return []
    config = config or RenderConfig()
    layout = _layout(node, width, config, cache)
    last = len(layout.body_lines) - 1
    set_flag(node, NodeState.MULTI_LINE, last > 0)

    marker_pad = " " * display_width(layout.marker)
    highlight = config.focused and is_selected(node)
    lines: list[str] = []
    for idx, text in enumerate(layout.body_lines):
        if idx == 0:
            kind = LineKind.FIRST
        elif idx == last:
            kind = LineKind.LAST
        else:
            kind = LineKind.MIDDLE
        prefix = render_prefix(node, config.symbols, kind, config.depth_style, layout.depth)
        lead = layout.marker if idx == 0 else marker_pad
        body = ellipsize(text, layout.body_width, config.symbols.ellipsis)
        line = clip_ansi_line(prefix + lead + body, width)
        if highlight:
            line = selected_with_ansi(line, config.theme)
        lines.append(line)
    return lines


def render_subtree(
    node: Node | None,
    width: int,
    config: RenderConfig | None = None,
    _level: int = 0,
) -> list[str]:
    """Render ``node`` followed by its expanded descendants.

    Like :func:`render_node`, this expects sibling flags from a prior
    ``annotate_siblings`` call over the whole forest.
    """
    if node is None or is_hidden(node):
        return []
    config = config or RenderConfig()
    lines = render_node(node, width, config)
    if is_collapsible(node) and is_expanded(node) and _level + 1 < MAX_DEPTH:
        for child in child_list(node):
            lines.extend(render_subtree(child, width, config, _level + 1))
    return lines


def render_forest(
    forest: Sequence[Node] | None,
    width: int,
    config: RenderConfig | None = None,
) -> list[str]:
    """Render every visible line of ``forest``."""
    if not forest or width <= 0:
        return []
    annotate_siblings(forest)
    lines: list[str] = []
    for root in forest:
        lines.extend(render_subtree(root, width, config))
    return lines


def render_window(
    forest: Sequence[Node] | None,
    offset: int,
    height: int,
    width: int,
    config: RenderConfig | None = None,
    cache: LayoutCache | None = None,
) -> list[str]:
    """Render visible nodes from index ``offset`` until ``height`` lines are filled."""
    if not forest or width <= 0 or height <= 0:
        return []
    annotate_siblings(forest)
    lines: list[str] = []
    for node in islice(iter_visible(forest), max(0, offset), None):
        lines.extend(render_node(node, width, config, cache))
        if len(lines) >= height:
            break
    return lines[:height]


__all__ = [
    "LineKind",
    "RenderConfig",
    "LayoutCache",
    "selected_with_ansi",
    "connector_for_position",
    "render_prefix",
    "node_line_count",
    "render_node",
    "render_subtree",
    "render_forest",
    "render_window",
]
