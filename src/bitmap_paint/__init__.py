"""
bitmap-paint: monochrome raster editor for the terminal

Draw fixed-size 1-bit bitmaps and short animations, save them as a
readable text grid, and export them as packed byte arrays for
embedded firmware.

Quick Start:
    >>> import bitmap_paint as bp
    >>> grid = bp.create(16, 8)
    >>> bp.draw_line(grid, 0, 0, 15, 7, bp.Pixel.ON)
    >>> bp.save(grid, "diagonal.txt")
    >>> print(bp.export_grid(grid))

Features:
    - Pixel grids up to 128x64 with silent clipping
    - Line, rectangle and flood fill primitives
    - Up to 16 animation frames with playback timing
    - Text grid format (load/save) and packed C array export
    - Image import via Pillow
"""

__version__ = "0.1.0"

# Core types
from bitmap_paint.core.errors import GridError, InvalidFormat, InvalidSize, SizeExceeded
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel

# Drawing and animation
from bitmap_paint.edit.controller import EditMode, EditorController
from bitmap_paint.edit.frames import FrameBuffer
from bitmap_paint.edit.primitives import draw_line, draw_rectangle, flood_fill

# Codecs and I/O
from bitmap_paint.codec.packed import export_animation, export_grid
from bitmap_paint.codec.text_grid import decode, encode
from bitmap_paint.io.reader import load, load_frames
from bitmap_paint.io.writer import save, save_export, save_frames


def create(width: int, height: int) -> PixelGrid:
    """Create a new all-OFF grid."""
    return PixelGrid(width, height)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Pixel",
    "PixelGrid",
    "GridError",
    "InvalidSize",
    "SizeExceeded",
    "InvalidFormat",
    "create",
    # Drawing and animation
    "draw_line",
    "draw_rectangle",
    "flood_fill",
    "FrameBuffer",
    "EditMode",
    "EditorController",
    # Codecs and I/O
    "encode",
    "decode",
    "export_grid",
    "export_animation",
    "load",
    "load_frames",
    "save",
    "save_frames",
    "save_export",
]
