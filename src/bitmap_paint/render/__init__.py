"""Render module - display grids in a terminal."""

from bitmap_paint.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
