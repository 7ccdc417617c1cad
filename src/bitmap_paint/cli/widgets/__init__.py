"""TUI widgets for the paint studio."""

from bitmap_paint.cli.widgets.base import BaseWidget, Rect
from bitmap_paint.cli.widgets.canvas_view import CanvasViewWidget
from bitmap_paint.cli.widgets.status_bar import Shortcut, StatusBarWidget

__all__ = ["BaseWidget", "Rect", "CanvasViewWidget", "StatusBarWidget", "Shortcut"]
