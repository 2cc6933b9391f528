"""Node collaborators shipped with lazytree."""

from __future__ import annotations

from .fs import PathNode, build_path_forest

__all__ = ["PathNode", "build_path_forest"]
