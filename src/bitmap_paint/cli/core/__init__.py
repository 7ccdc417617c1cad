"""Core TUI infrastructure - terminal control and key decoding."""

from bitmap_paint.cli.core.input import InputReader, Key, KeyEvent, decode_events
from bitmap_paint.cli.core.terminal import Terminal, TerminalSize

__all__ = ["Terminal", "TerminalSize", "InputReader", "Key", "KeyEvent", "decode_events"]
