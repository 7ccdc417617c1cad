"""Render a PixelGrid for display in a terminal."""

from __future__ import annotations

from bitmap_paint.core.constants import BLOCK, BORDER
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel


class TerminalRenderer:
    """
    Render a grid as box-bordered text, two columns per pixel.

    ON pixels are drawn as full blocks, OFF pixels as spaces. An
    optional cursor is overlaid with a shade block that shows the
    pixel value underneath it.
    """

    def __init__(self, border: bool = True):
        self.border = border

    def render_lines(
        self,
        grid: PixelGrid,
        cursor: tuple[int, int] | None = None,
    ) -> list[str]:
        """Render to a list of lines (no trailing newlines)."""
        lines: list[str] = []
        horizontal = BORDER["horizontal"] * (grid.width * 2)

        if self.border:
            lines.append(f"{BORDER['top_left']}{horizontal}{BORDER['top_right']}")

        for y, row in enumerate(grid.rows()):
            cells = [self._cell(pixel, cursor == (x, y)) for x, pixel in enumerate(row)]
            body = "".join(cells)
            if self.border:
                body = f"{BORDER['vertical']}{body}{BORDER['vertical']}"
            lines.append(body)

        if self.border:
            lines.append(f"{BORDER['bottom_left']}{horizontal}{BORDER['bottom_right']}")

        return lines

    def render(self, grid: PixelGrid, cursor: tuple[int, int] | None = None) -> str:
        """Render to a single newline-joined string."""
        return "\n".join(self.render_lines(grid, cursor))

    @staticmethod
    def _cell(pixel: Pixel, under_cursor: bool) -> str:
        if under_cursor:
            return BLOCK["cursor_on"] if pixel is Pixel.ON else BLOCK["cursor_off"]
        return BLOCK["on"] if pixel is Pixel.ON else BLOCK["off"]
