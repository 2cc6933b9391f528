"""Interactive event loop and non-interactive printing for a tree model.

The loop polls terminal size, feeds ``Resize`` and key-derived events into the
model one at a time, and repaints after every event that changed the view.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from .events import Resize
from .input import read_key
from .keymap import KeyMap
from .model import TreeModel
from .terminal import TerminalController

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_SIZE = (80, 24)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 200


def run_main_loop(
    model: TreeModel,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    keymap: KeyMap | None = None,
    timing: RuntimeLoopTiming | None = None,
    get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run until a quit key is read."""
    keymap = keymap if keymap is not None else KeyMap()
    timing = timing if timing is not None else RuntimeLoopTiming()
    dirty = True
    while True:
        size = get_terminal_size(DEFAULT_TERMINAL_SIZE)
        if (size.columns, size.lines) != (model.width, model.height):
            model.update(Resize(size.columns, size.lines))
            dirty = True
        if dirty:
            terminal.draw(model.view())
            dirty = False

        key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
        if not key:
            continue
        if keymap.is_quit(key):
            logger.debug("quit on %s", key)
            return
        event = keymap.event_for(key)
        if event is None:
            continue
        dirty = model.update(event)


def run_tree(model: TreeModel, *, keymap: KeyMap | None = None) -> None:
    """Run the interactive viewer on the controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        run_main_loop(model, terminal, stdin_fd, keymap=keymap)


def print_tree(model: TreeModel, out: TextIO, width: int | None = None) -> None:
    """Write every visible line of the model, ignoring the scroll window.

    The model is blurred first so printed output carries no cursor highlight.
    """
    model.blur()
    if width is None:
        width = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE).columns
    for line in model.render_all(width):
        out.write(line + "\n")


__all__ = ["RuntimeLoopTiming", "run_main_loop", "run_tree", "print_tree"]
