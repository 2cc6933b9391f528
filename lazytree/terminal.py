"""Terminal control helpers for the interactive viewer.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .ansi import RESET


class TerminalController:
    """Manage terminal mode transitions and full-frame redraws."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor and restore the main screen buffer and tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw(self, lines: list[str]) -> None:
        """Repaint the screen from the top-left with ``lines``."""
        os.write(self.stdout_fd, compose_frame(lines).encode("utf-8"))

    @contextlib.contextmanager
    def raw_mode(self):
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


def compose_frame(lines: list[str]) -> str:
    """Build one redraw payload: home cursor, each line cleared to EOL, rest erased."""
    rows = [f"{line}{RESET}\x1b[K" for line in lines]
    return "\x1b[H" + "\r\n".join(rows) + "\x1b[J"


__all__ = ["TerminalController", "compose_frame"]
