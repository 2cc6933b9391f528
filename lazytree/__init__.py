"""Public package surface for lazytree.

Exports the node contract, the linearizer queries, the renderer, and the
``TreeModel`` widget. ``main`` is imported lazily to keep package imports
lightweight.
"""

from __future__ import annotations

import logging

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
from .model import TreeModel
from .node import Node, NodeState, TreeNode
from .render import RenderConfig, render_forest, render_node, render_window
from .symbols import Symbols, available_symbol_names, default_symbols, symbols_by_name
from .viewport import Viewport
from .visibility import count_visible, node_at, visible_nodes

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "Node",
    "NodeState",
    "TreeNode",
    "TreeModel",
    "TreeController",
    "Viewport",
    "RenderConfig",
    "Symbols",
    "count_visible",
    "node_at",
    "visible_nodes",
    "render_node",
    "render_forest",
    "render_window",
    "default_symbols",
    "symbols_by_name",
    "available_symbol_names",
    "Resize",
    "MoveUp",
    "MoveDown",
    "PageUp",
    "PageDown",
    "HalfPageUp",
    "HalfPageDown",
    "GotoTop",
    "GotoBottom",
    "ToggleExpand",
]
