"""Scroll window and cursor bookkeeping over the visible node sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def clamp(value: int, low: int, high: int) -> int:
    """Constrain ``value`` to ``[low, high]``; ``high`` wins when bounds cross."""
    return min(high, max(low, value))


@dataclass
class Viewport:
    """Cell dimensions plus scroll offset and cursor, both node indexes.

    Invariants after every transition, for ``count`` visible nodes:
    ``0 <= cursor <= count - 1`` (``0`` when empty),
    ``0 <= offset <= max_offset(count)``, and the cursor lies inside
    ``[offset, offset + rows() - 1]``.
    """

    width: int = 0
    height: int = 0
    offset: int = 0
    cursor: int = 0

    def rows(self) -> int:
        """Return scroll-math height; a zero-height window scrolls like one row."""
        return max(1, self.height)

    def max_offset(self, count: int) -> int:
        return max(0, count - self.rows())

    def page_size(self) -> int:
        return self.rows()

    def half_page_size(self) -> int:
        return max(1, self.rows() // 2)

    def _follow_cursor(self) -> None:
        rows = self.rows()
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor > self.offset + rows - 1:
            self.offset = self.cursor - rows + 1

    def clamp(self, count: int) -> None:
        """Re-apply cursor and offset bounds for ``count`` visible nodes."""
        if count <= 0:
            self.cursor = 0
            self.offset = 0
            return
        self.cursor = clamp(self.cursor, 0, count - 1)
        self._follow_cursor()
        self.offset = clamp(self.offset, 0, self.max_offset(count))

    def resize(self, width: int, height: int, count: int) -> bool:
        before = (self.width, self.height, self.offset, self.cursor)
        self.width = width
        self.height = height
        self.clamp(count)
        return (self.width, self.height, self.offset, self.cursor) != before

    def move_by(self, delta: int, count: int) -> bool:
        """Move the cursor by ``delta`` and scroll just enough to keep it shown."""
        if count <= 0:
            return False
        before = (self.offset, self.cursor)
        self.cursor = clamp(self.cursor + delta, 0, count - 1)
        self.clamp(count)
        return (self.offset, self.cursor) != before

    def fit(self, line_counts: Sequence[int]) -> None:
        """Advance the offset until the cursor node's lines fit in the window.

        ``line_counts`` holds the display height of every node from ``offset``
        through ``cursor``. Only multi-line nodes can trigger this.
        """
        if self.height <= 0:
            return
        used = sum(line_counts)
        for lines in line_counts:
            if used <= self.height or self.offset >= self.cursor:
                break
            used -= lines
            self.offset += 1


__all__ = ["Viewport", "clamp"]
