"""Filesystem-backed tree nodes.

``PathNode`` implements the node contract over a directory tree. Directories
list their children synchronously the first time they are asked for them,
and only become collapsible when that listing is non-empty. Files can carry
a highlighted preview of their first lines as a multi-line body.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from ..highlight import DEFAULT_STYLE, highlight_source
from ..node import Node, NodeState

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child."""

    name: str
    path: Path
    is_dir: bool


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


def list_directory_children(
    directory: Path,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], OSError | None]:
    """List visible children sorted directories-first, then case-insensitively.

    Returns ``(children, scan_error)``; ``scan_error`` is set when the
    directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def read_head_lines(path: Path, max_lines: int) -> list[str]:
    """Return up to ``max_lines`` lines of ``path`` with tolerant decoding.

    Binary files (NUL bytes in the first chunk) and unreadable files yield
    an empty list.
    """
    if max_lines <= 0:
        return []
    try:
        with path.open("rb") as handle:
            raw = handle.read(64 * 1024)
    except OSError:
        return []
    if b"\x00" in raw:
        return []
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            text = raw.decode(encoding)
            break
        except UnicodeDecodeError:
            continue
    else:
        text = raw.decode("utf-8", errors="replace")
    return text.splitlines()[:max_lines]


class PathNode:
    """Tree node for one filesystem path."""

    def __init__(
        self,
        path: Path | str,
        parent: PathNode | None = None,
        *,
        is_dir: bool | None = None,
        show_hidden: bool = False,
        preview_lines: int = 0,
        style: str | None = DEFAULT_STYLE,
        max_depth: int | None = None,
    ) -> None:
        self.path = Path(path)
        self._parent = parent
        self.is_dir = self.path.is_dir() if is_dir is None else is_dir
        self.show_hidden = show_hidden
        self.preview_lines = max(0, preview_lines)
        self.style = style
        self.max_depth = max_depth
        self.level = 0 if parent is None else parent.level + 1
        self.error: str | None = None
        self._children: list[PathNode] | None = None
        # Roots start expanded, nested directories start collapsed.
        self._state = NodeState.COLLAPSED if self.is_dir and parent is not None else NodeState.NONE

    def _load_children(self) -> list[PathNode]:
        if not self.is_dir:
            return []
        if self.max_depth is not None and self.level >= self.max_depth:
            return []
        listed, error = list_directory_children(self.path, self.show_hidden)
        if error is not None:
            self.error = error.strerror or type(error).__name__
            logger.warning("cannot list %s: %s", self.path, error)
        return [
            PathNode(
                child.path,
                self,
                is_dir=child.is_dir,
                show_hidden=self.show_hidden,
                preview_lines=self.preview_lines,
                style=self.style,
                max_depth=self.max_depth,
            )
            for child in listed
        ]

    def parent(self) -> Node | None:
        return self._parent

    def children(self) -> list[PathNode]:
        if self._children is None:
            self._children = self._load_children()
        return self._children

    def state(self) -> NodeState:
        if self.is_dir and self.children():
            return self._state | NodeState.COLLAPSIBLE
        return self._state

    def set_state(self, state: NodeState) -> None:
        self._state = NodeState(state) & ~NodeState.COLLAPSIBLE

    def display_name(self) -> str:
        if self._parent is None:
            name = str(self.path)
        else:
            name = self.path.name
        if self.is_dir and not name.endswith(os.sep):
            name += "/"
        return sanitize_terminal_text(name)

    def render(self, width: int) -> str:
        name = self.display_name()
        if self.error:
            name = f"{name} [{self.error}]"
        if self.is_dir or not self.preview_lines:
            return name
        lines = read_head_lines(self.path, self.preview_lines)
        if not lines:
            return name
        source = sanitize_terminal_text("\n".join(lines))
        if self.style:
            source = highlight_source(source, self.path, self.style)
        return name + "\n" + source

    def __repr__(self) -> str:
        return f"PathNode({str(self.path)!r})"


def build_path_forest(
    root: Path | str,
    *,
    show_hidden: bool = False,
    preview_lines: int = 0,
    style: str | None = DEFAULT_STYLE,
    max_depth: int | None = None,
) -> list[PathNode]:
    """Return a single-root forest for ``root``."""
    return [
        PathNode(
            Path(root),
            show_hidden=show_hidden,
            preview_lines=preview_lines,
            style=style,
            max_depth=max_depth,
        )
    ]


__all__ = [
    "DirectoryChild",
    "PathNode",
    "build_path_forest",
    "list_directory_children",
    "read_head_lines",
    "sanitize_terminal_text",
]
