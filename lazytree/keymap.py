"""Key-token to tree-event bindings.

``KeyComboRegistry`` is the reusable dispatch table; ``KeyMap`` binds the
default navigation keys and handles vi-style numeric count prefixes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .events import (
    GotoBottom,
    GotoTop,
    HalfPageDown,
    HalfPageUp,
    MoveDown,
    MoveUp,
    PageDown,
    PageUp,
    ToggleExpand,
)

QUIT_KEYS = frozenset({"q", "Q", "ESC", "CTRL_C"})
MAX_COUNT = 9999


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single event factory."""

    combos: tuple[str, ...]
    handler: Callable[[int], object]


class KeyComboRegistry:
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[int], object]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match dispatch registries."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str, count: int = 1) -> object | None:
        """Return the event bound to ``key``, or ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler(count)


def default_bindings() -> tuple[KeyComboBinding, ...]:
    return (
        KeyComboBinding(("UP", "k"), lambda count: MoveUp(count)),
        KeyComboBinding(("DOWN", "j"), lambda count: MoveDown(count)),
        KeyComboBinding(("PAGE_UP", "b", "CTRL_B"), lambda _count: PageUp()),
        KeyComboBinding(("PAGE_DOWN", "f", "CTRL_F"), lambda _count: PageDown()),
        KeyComboBinding(("CTRL_U",), lambda _count: HalfPageUp()),
        KeyComboBinding(("CTRL_D",), lambda _count: HalfPageDown()),
        KeyComboBinding(("HOME", "g"), lambda _count: GotoTop()),
        KeyComboBinding(("END", "G"), lambda _count: GotoBottom()),
        KeyComboBinding(("ENTER", "TAB", " ", "o", "LEFT", "RIGHT"), lambda _count: ToggleExpand()),
    )


class KeyMap:
    """Translate key tokens into events, accumulating count prefixes like ``5j``."""

    def __init__(self, registry: KeyComboRegistry | None = None) -> None:
        if registry is None:
            registry = KeyComboRegistry().register_bindings(*default_bindings())
        self.registry = registry
        self.count_buffer = ""

    def is_quit(self, key: str) -> bool:
        return key in QUIT_KEYS

    def event_for(self, key: str) -> object | None:
        """Return the event for ``key``; digits only extend the pending count."""
        if len(key) == 1 and key in "0123456789" and (self.count_buffer or key != "0"):
            self.count_buffer += key
            return None
        count = 1
        if self.count_buffer:
            count = max(1, min(MAX_COUNT, int(self.count_buffer)))
            self.count_buffer = ""
        return self.registry.dispatch(key, count)


__all__ = [
    "QUIT_KEYS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyMap",
    "default_bindings",
]
