"""Connector glyph sets used to draw tree ancestry columns.

Every set names a continuation, a branch, a corner/terminator and an optional
horizontal rule, plus the cell width of one column. ``DrawSymbols`` is the
structural interface; hosts may supply their own implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .ansi import clip_ansi_line, display_width, pad_to_width


class DrawSymbols(Protocol):
    """Uniform drawing API for tree connector columns."""

    width: int
    collapsed: str
    expanded: str
    ellipsis: str

    def padding(self, depth: int) -> str: ...

    def draw_node(self, depth: int) -> str: ...

    def draw_last(self, depth: int) -> str: ...

    def draw_vertical(self, depth: int) -> str: ...


@dataclass(frozen=True)
class Symbols:
    """Built-in glyph set; each drawn column is exactly ``width`` cells."""

    name: str
    width: int
    vertical: str
    vertical_and_right: str
    up_and_right: str
    horizontal: str = ""
    collapsed: str = "⊞"
    expanded: str = "⊟"
    ellipsis: str = "…"

    def _draw(self, glyph: str, rule: str) -> str:
        text = glyph
        if rule:
            # The final cell always stays blank to separate the body.
            while display_width(text) + display_width(rule) <= self.width - 1:
                text += rule
        return pad_to_width(clip_ansi_line(text, self.width), self.width)

    def padding(self, depth: int) -> str:
        return " " * self.width

    def draw_node(self, depth: int) -> str:
        return self._draw(self.vertical_and_right, self.horizontal)

    def draw_last(self, depth: int) -> str:
        return self._draw(self.up_and_right, self.horizontal)

    def draw_vertical(self, depth: int) -> str:
        return self._draw(self.vertical, "")


NORMAL_SYMBOLS = Symbols(
    name="normal",
    width=3,
    vertical="│",
    vertical_and_right="├",
    up_and_right="└",
    horizontal="─",
)

ROUNDED_SYMBOLS = Symbols(
    name="rounded",
    width=3,
    vertical="│",
    vertical_and_right="├",
    up_and_right="╰",
    horizontal="─",
)

THICK_SYMBOLS = Symbols(
    name="thick",
    width=3,
    vertical="┃",
    vertical_and_right="┣",
    up_and_right="┗",
    horizontal="━",
)

DOUBLE_SYMBOLS = Symbols(
    name="double",
    width=3,
    vertical="║",
    vertical_and_right="╠",
    up_and_right="╚",
    horizontal="═",
)

NORMAL_EDGE_SYMBOLS = Symbols(
    name="edge",
    width=2,
    vertical="│",
    vertical_and_right="├",
    up_and_right="└",
)

ROUNDED_EDGE_SYMBOLS = Symbols(
    name="rounded-edge",
    width=2,
    vertical="│",
    vertical_and_right="├",
    up_and_right="╰",
)

_SYMBOL_SETS: dict[str, Symbols] = {
    symbols.name: symbols
    for symbols in (
        NORMAL_SYMBOLS,
        ROUNDED_SYMBOLS,
        THICK_SYMBOLS,
        DOUBLE_SYMBOLS,
        NORMAL_EDGE_SYMBOLS,
        ROUNDED_EDGE_SYMBOLS,
    )
}


def default_symbols() -> Symbols:
    return NORMAL_SYMBOLS


def available_symbol_names() -> tuple[str, ...]:
    """Return selectable symbol-set names in declaration order."""
    return tuple(_SYMBOL_SETS.keys())


def symbols_by_name(name: str | None) -> Symbols:
    """Return the named set, falling back to ``normal`` for unknown names."""
    if not name:
        return NORMAL_SYMBOLS
    return _SYMBOL_SETS.get(str(name).strip().lower(), NORMAL_SYMBOLS)


__all__ = [
    "DrawSymbols",
    "Symbols",
    "NORMAL_SYMBOLS",
    "ROUNDED_SYMBOLS",
    "THICK_SYMBOLS",
    "DOUBLE_SYMBOLS",
    "NORMAL_EDGE_SYMBOLS",
    "ROUNDED_EDGE_SYMBOLS",
    "default_symbols",
    "available_symbol_names",
    "symbols_by_name",
]
