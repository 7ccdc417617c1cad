"""Core data structures for monochrome raster editing."""

from bitmap_paint.core.errors import GridError, InvalidFormat, InvalidSize, SizeExceeded
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel

__all__ = [
    "Pixel",
    "PixelGrid",
    "GridError",
    "InvalidSize",
    "SizeExceeded",
    "InvalidFormat",
]
