"""Widget showing the live grid with the cursor overlaid."""

from __future__ import annotations

from bitmap_paint.cli.widgets.base import BaseWidget, Rect
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.render.terminal import TerminalRenderer


class CanvasViewWidget(BaseWidget):
    """Bordered view of a PixelGrid, cropped to the available bounds."""

    def __init__(self) -> None:
        super().__init__()
        self._renderer = TerminalRenderer()
        self._grid: PixelGrid | None = None
        self._cursor: tuple[int, int] | None = None

    def update(self, grid: PixelGrid, cursor: tuple[int, int] | None) -> None:
        self._grid = grid
        self._cursor = cursor

    def render(self, bounds: Rect) -> list[str]:
        if self._grid is None or not self.visible:
            return []
        lines = self._renderer.render_lines(self._grid, self._cursor)
        return [line[:bounds.width] for line in lines[:bounds.height]]
