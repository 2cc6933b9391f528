"""Pre-classified input events consumed by :class:`lazytree.model.TreeModel`."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class MoveUp:
    n: int = 1


@dataclass(frozen=True)
class MoveDown:
    n: int = 1


@dataclass(frozen=True)
class PageUp:
    pass


@dataclass(frozen=True)
class PageDown:
    pass


@dataclass(frozen=True)
class HalfPageUp:
    pass


@dataclass(frozen=True)
class HalfPageDown:
    pass


@dataclass(frozen=True)
class GotoTop:
    pass


@dataclass(frozen=True)
class GotoBottom:
    pass


@dataclass(frozen=True)
class ToggleExpand:
    pass


TreeEvent = Resize | MoveUp | MoveDown | PageUp | PageDown | HalfPageUp | HalfPageDown | GotoTop | GotoBottom | ToggleExpand

__all__ = [
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
    "TreeEvent",
]
