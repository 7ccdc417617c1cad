"""Edit module - drawing primitives, animation frames and the edit controller."""

from bitmap_paint.edit.controller import EditMode, EditorController
from bitmap_paint.edit.frames import FrameBuffer, FrameTransition
from bitmap_paint.edit.primitives import draw_line, draw_rectangle, flood_fill

__all__ = [
    "draw_line",
    "draw_rectangle",
    "flood_fill",
    "FrameBuffer",
    "FrameTransition",
    "EditMode",
    "EditorController",
]
