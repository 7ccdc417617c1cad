"""Status area widget: mode/frame info, shortcuts and messages."""

from __future__ import annotations

from dataclasses import dataclass

from bitmap_paint.cli.widgets.base import BaseWidget, Rect

REVERSE = "\x1b[7m"
RESET = "\x1b[0m"


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str


class StatusBarWidget(BaseWidget):
    """Three-line status area below the canvas.

    Line 1 shows the editor status, line 2 the shortcuts that fit,
    line 3 a pending-gesture hint or a transient message.
    """

    def __init__(self) -> None:
        super().__init__()
        self._status: str = ""
        self._detail: str = ""
        self._shortcuts: list[Shortcut] = []

    def set_status(self, text: str) -> None:
        self._status = text

    def set_detail(self, text: str) -> None:
        """Set the hint/message line (empty to blank it)."""
        self._detail = text

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        self._shortcuts = shortcuts

    def render(self, bounds: Rect) -> list[str]:
        width = bounds.width

        parts: list[str] = []
        used = 0
        for sc in self._shortcuts:
            visible = len(sc.key) + len(sc.label) + 3
            if used + visible > width:
                break
            parts.append(f"{REVERSE}{sc.key}{RESET} {sc.label} ")
            used += visible

        lines = [
            self._status[:width],
            "".join(parts),
            self._detail[:width],
        ]
        return lines[:bounds.height]
