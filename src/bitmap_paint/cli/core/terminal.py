"""Low-level terminal control for the interactive editor."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

CSI = "\x1b["


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Escape-sequence helpers and mode switching for stdout/stdin."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions (24x80 when not a tty)."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    @staticmethod
    def is_interactive() -> bool:
        return sys.stdin.isatty() and sys.stdout.isatty()

    @staticmethod
    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def clear() -> None:
        """Clear screen and move cursor to home."""
        Terminal.write(f"{CSI}2J{CSI}H")

    @staticmethod
    def move_to(row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        Terminal.write(f"{CSI}{row};{col}H")

    @staticmethod
    def clear_below() -> None:
        """Erase from the cursor to the end of the screen."""
        Terminal.write(f"{CSI}J")

    @staticmethod
    @contextmanager
    def raw_mode() -> Iterator[None]:
        """Disable echo and line buffering for the duration (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            yield
            return

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    @staticmethod
    @contextmanager
    def managed_mode() -> Iterator[None]:
        """Full editor mode: alternate screen, hidden cursor, unbuffered input."""
        Terminal.write(f"{CSI}?1049h{CSI}?25l")
        try:
            with Terminal.raw_mode():
                yield
        finally:
            Terminal.write(f"{CSI}0m{CSI}?25h{CSI}?1049l")
