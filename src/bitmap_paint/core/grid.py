"""PixelGrid - fixed-size 2D grid of monochrome pixels."""

from __future__ import annotations

from typing import Iterator

from bitmap_paint.core.constants import MAX_HEIGHT, MAX_WIDTH
from bitmap_paint.core.errors import InvalidSize, SizeExceeded
from bitmap_paint.core.pixel import Pixel


def check_dimensions(width: int, height: int) -> None:
    """Validate grid dimensions against the supported bounds.

    Raises:
        InvalidSize: If either dimension is less than 1
        SizeExceeded: If width > MAX_WIDTH or height > MAX_HEIGHT
    """
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise SizeExceeded(
            f"Grid {width}x{height} exceeds maximum {MAX_WIDTH}x{MAX_HEIGHT}"
        )
    if width < 1 or height < 1:
        raise InvalidSize(f"Grid dimensions must be at least 1x1, got {width}x{height}")


class PixelGrid:
    """
    A dense, row-major grid of Pixels with fixed dimensions.

    Every in-range coordinate always holds a Pixel; writes outside the
    grid are ignored and reads outside the grid return None. The grid
    never changes size after creation.
    """

    def __init__(self, width: int, height: int):
        """
        Create a grid with every pixel OFF.

        Args:
            width: Width in pixels (1 to MAX_WIDTH)
            height: Height in pixels (1 to MAX_HEIGHT)

        Raises:
            InvalidSize: If either dimension is zero
            SizeExceeded: If either dimension is over its maximum
        """
        check_dimensions(width, height)
        self._width = width
        self._height = height
        self._pixels: list[list[Pixel]] = [
            [Pixel.OFF] * width for _ in range(height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return (self._width, self._height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Pixel | None:
        """Get the pixel at (x, y), or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._pixels[y][x]

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        """Set the pixel at (x, y). Out-of-bounds coordinates are ignored."""
        if not self.in_bounds(x, y):
            return
        self._pixels[y][x] = Pixel(pixel)

    def __getitem__(self, pos: tuple[int, int]) -> Pixel | None:
        """Get pixel using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], pixel: Pixel) -> None:
        """Set pixel using indexing: grid[x, y] = pixel."""
        x, y = pos
        self.set(x, y, pixel)

    def clear(self) -> None:
        """Set every pixel to OFF."""
        for row in self._pixels:
            row[:] = [Pixel.OFF] * self._width

    def clone(self) -> PixelGrid:
        """Create an independent deep copy with the same dimensions and contents."""
        copy = PixelGrid(self._width, self._height)
        copy._pixels = [list(row) for row in self._pixels]
        return copy

    def rows(self) -> Iterator[tuple[Pixel, ...]]:
        """Iterate over rows, top to bottom, as read-only tuples."""
        for row in self._pixels:
            yield tuple(row)

    def pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Iterate over all pixels as (x, y, pixel) tuples."""
        for y, row in enumerate(self._pixels):
            for x, pixel in enumerate(row):
                yield x, y, pixel

    def count(self, pixel: Pixel = Pixel.ON) -> int:
        """Count pixels equal to the given value."""
        return sum(row.count(pixel) for row in self._pixels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.size == other.size and self._pixels == other._pixels

    def __repr__(self) -> str:
        return f"PixelGrid({self._width}x{self._height}, on={self.count()})"
