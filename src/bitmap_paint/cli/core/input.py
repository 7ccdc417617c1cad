"""Keyboard input decoding with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""

    @property
    def is_char(self) -> bool:
        return self.char is not None and self.key is None


# Escape sequences without the leading ESC
SEQUENCES: dict[str, Key] = {
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    '[H': Key.HOME,
    '[F': Key.END,
    '[1~': Key.HOME,
    '[4~': Key.END,
}

SIMPLE_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def decode_events(buffer: str) -> tuple[list[KeyEvent], str]:
    """
    Decode as many key events as possible from raw input.

    Returns:
        (events, remainder) where remainder is an incomplete escape
        sequence that needs more input
    """
    events: list[KeyEvent] = []
    i = 0
    while i < len(buffer):
        ch = buffer[i]

        if ch in SIMPLE_KEYS:
            events.append(KeyEvent(key=SIMPLE_KEYS[ch], raw=ch))
            i += 1
            continue

        if ch == '\x1b':
            rest = buffer[i + 1:]
            if not rest:
                return events, buffer[i:]
            if rest[0] not in '[O':
                events.append(KeyEvent(key=Key.ESCAPE, raw=ch))
                i += 1
                continue
            # Sequence ends at the first letter or '~' after the introducer
            end = next(
                (j for j in range(1, len(rest)) if rest[j].isalpha() or rest[j] == '~'),
                None,
            )
            if end is None:
                return events, buffer[i:]
            seq = rest[:end + 1]
            events.append(KeyEvent(key=SEQUENCES.get(seq), raw='\x1b' + seq))
            i += 1 + len(seq)
            continue

        if ch.isprintable():
            events.append(KeyEvent(char=ch, raw=ch))
        i += 1

    return events, ""


class InputReader:
    """
    Non-blocking keyboard reader.

    Uses os.read() on the raw file descriptor so escape sequences that
    arrive split across reads are reassembled before being decoded.
    """

    ESCAPE_WAIT = 0.05

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending: list[KeyEvent] = []
        self._buffer = ""

    def read(self, timeout: float = 0.1) -> Optional[KeyEvent]:
        """Return the next key event, or None if nothing arrives within timeout."""
        if self._pending:
            return self._pending.pop(0)
        if not self._wait(timeout):
            return None

        self._fill()
        if self._buffer.startswith('\x1b'):
            deadline = time.monotonic() + self.ESCAPE_WAIT
            while time.monotonic() < deadline and self._incomplete():
                if self._wait(deadline - time.monotonic()):
                    self._fill()

        events, self._buffer = decode_events(self._buffer)
        if self._buffer:
            # Still incomplete after the wait: a lone ESC, or a broken sequence
            key = Key.ESCAPE if self._buffer == '\x1b' else None
            events.append(KeyEvent(key=key, raw=self._buffer))
            self._buffer = ""
        self._pending.extend(events)
        return self._pending.pop(0) if self._pending else None

    def _incomplete(self) -> bool:
        return bool(decode_events(self._buffer)[1])

    def _fill(self) -> None:
        try:
            data = os.read(self._fd, 1024)
        except (OSError, BlockingIOError):
            return
        self._buffer += data.decode('utf-8', errors='replace')

    def _wait(self, timeout: float) -> bool:
        if timeout <= 0:
            return False
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
