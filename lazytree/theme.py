"""Tree theme definitions and selection helpers.

Themes are ANSI palettes for connector columns, collapse markers, and the
selected row. Depth colors cycle per ancestor column through the callback
returned by :func:`depth_style_for`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DepthStyle = Callable[[int, str], str]


@dataclass(frozen=True)
class TreeTheme:
    """Semantic ANSI palette used by the tree renderer."""

    name: str
    reset: str
    selected: str
    marker: str
    error: str
    depth_colors: tuple[str, ...]


DEFAULT_THEME = TreeTheme(
    name="default",
    reset="\033[0m",
    selected="\033[7m",
    marker="\033[38;5;44m",
    error="\033[38;5;203m",
    depth_colors=(
        "\033[38;5;244m",
        "\033[38;5;110m",
        "\033[38;5;150m",
        "\033[38;5;180m",
        "\033[38;5;175m",
    ),
)

OCEAN_THEME = TreeTheme(
    name="ocean",
    reset="\033[0m",
    selected="\033[7m",
    marker="\033[38;5;39m",
    error="\033[38;5;215m",
    depth_colors=(
        "\033[38;5;31m",
        "\033[38;5;39m",
        "\033[38;5;45m",
        "\033[38;5;117m",
        "\033[38;5;153m",
    ),
)

PLAIN_THEME = TreeTheme(
    name="plain",
    reset="",
    selected="",
    marker="",
    error="",
    depth_colors=(),
)

_THEMES: dict[str, TreeTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> TreeTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


def depth_style_for(theme: TreeTheme) -> DepthStyle | None:
    """Build a per-depth connector colorizer, or ``None`` for plain themes."""
    colors = theme.depth_colors
    if not colors:
        return None

    def style(depth: int, glyph: str) -> str:
        if not glyph.strip():
            return glyph
        return f"{colors[depth % len(colors)]}{glyph}{theme.reset}"

    return style


__all__ = [
    "DepthStyle",
    "TreeTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "depth_style_for",
]
