"""Pygments-based syntax coloring for multi-line preview bodies."""

from __future__ import annotations

from pathlib import Path

DEFAULT_STYLE = "monokai"

_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()
_FORMATTERS: dict[str, object] = {}


def _normalize_style(style: str) -> str:
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE

    from pygments.styles import get_style_by_name
    from pygments.util import ClassNotFound

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str):
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    from pygments.formatters import TerminalFormatter

    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def highlight_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ``source`` colored for a terminal, choosing a lexer by filename.

    Unknown file types use the plain text lexer. The trailing newline pygments
    appends is removed so line counts match the input.
    """
    from pygments import highlight
    from pygments.lexers import TextLexer, get_lexer_for_filename
    from pygments.util import ClassNotFound

    style = _normalize_style(style)
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    rendered = highlight(source, lexer, _formatter_for_style(style))
    if not source.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


__all__ = ["DEFAULT_STYLE", "highlight_source"]
