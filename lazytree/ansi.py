"""ANSI-aware text measurement and line shaping utilities.

Provides width measurement, clipping, and ellipsizing that preserve escape
sequences. These helpers keep tree rows aligned when connector glyphs and
node bodies carry color codes or wide characters.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return terminal column width for ANSI-styled text."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if ch == "\t":
            if col + w > max_cols:
                break
            out.append(" " * w)
            col += w
            i += 1
            continue
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def pad_to_width(text: str, width: int) -> str:
    """Right-pad styled text with spaces up to ``width`` display columns."""
    missing = width - display_width(text)
    if missing <= 0:
        return text
    return text + " " * missing


def ellipsize(text: str, width: int, ellipsis: str = "…") -> str:
    """Fit ``text`` into ``width`` cells, ending in ``ellipsis`` when cut.

    The last visible cell is given up for the marker, so a 12-cell body in a
    10-cell column keeps 9 cells of text. Styled text gets a trailing reset
    before the marker so the color does not bleed into it.
    """
    if width <= 0 or not text:
        return ""
    if display_width(text) <= width:
        return text
    marker_width = display_width(ellipsis)
    if marker_width >= width:
        return clip_ansi_line(ellipsis, width)
    clipped = clip_ansi_line(text, width - marker_width)
    if "\x1b" in clipped:
        clipped += RESET
    return clipped + ellipsis


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "TAB_STOP",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "clip_ansi_line",
    "pad_to_width",
    "ellipsize",
]
