"""Drawing primitives that mutate a PixelGrid in place.

All primitives clip silently: any point that falls outside the grid is
skipped, and the rest of the shape is still drawn. Coordinates are plain
(signed) ints so gesture math can run before any bounds check.
"""

from __future__ import annotations

import logging
from collections import deque

from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel

logger = logging.getLogger(__name__)


def draw_line(
    grid: PixelGrid,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    pixel: Pixel,
) -> None:
    """Draw a line between two points using Bresenham's algorithm.

    Both endpoints are always plotted (when in bounds). Terminates after
    max(dx, dy) + 1 steps.

    Args:
        grid: Grid to draw on
        x0, y0: Start point
        x1, y1: End point
        pixel: Pixel value to plot
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    x, y = x0, y0
    while True:
        if x >= 0 and y >= 0:
            grid.set(x, y, pixel)

        if x == x1 and y == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_rectangle(
    grid: PixelGrid,
    x: int,
    y: int,
    w: int,
    h: int,
    pixel: Pixel,
    filled: bool = False,
) -> None:
    """Draw a w x h rectangle anchored at its top-left corner (x, y).

    An outline draws the full top and bottom rows and, for the rows
    strictly between them, only the leftmost and rightmost columns.
    A one-pixel-high rectangle is a single row; a one-pixel-wide
    rectangle is a single column. Empty sizes draw nothing.

    Args:
        grid: Grid to draw on
        x, y: Top-left corner
        w, h: Width and height in pixels
        pixel: Pixel value to plot
        filled: Fill the interior instead of drawing the outline
    """
    if w <= 0 or h <= 0:
        return

    if filled:
        for py in range(y, y + h):
            for px in range(x, x + w):
                grid.set(px, py, pixel)
        return

    bottom = y + h - 1
    right = x + w - 1

    for px in range(x, x + w):
        grid.set(px, y, pixel)
        if h > 1:
            grid.set(px, bottom, pixel)

    for py in range(y + 1, bottom):
        grid.set(x, py, pixel)
        if w > 1:
            grid.set(right, py, pixel)


def flood_fill(
    grid: PixelGrid,
    x: int,
    y: int,
    pixel: Pixel,
    capacity: int | None = None,
) -> int:
    """Fill the 4-connected region containing (x, y) with a new pixel value.

    Breadth-first traversal over a bounded queue. A cell is overwritten
    with the new value as soon as it is queued, so the new value doubles
    as the visited marker and no cell is ever queued twice.

    The queue holds at most `capacity` pending cells. When it is full,
    further neighbours are not queued and the fill is left partial.
    The default capacity is width * height, which can never be reached,
    so the default fill is always complete.

    Args:
        grid: Grid to fill
        x, y: Seed point
        pixel: New pixel value
        capacity: Maximum number of queued cells (default: width * height)

    Returns:
        Number of pixels changed (0 if the seed is out of bounds or
        already holds the new value)

    Raises:
        ValueError: If capacity is given and less than 1
    """
    if capacity is None:
        capacity = grid.width * grid.height
    elif capacity < 1:
        raise ValueError(f"Flood fill capacity must be positive, got {capacity}")

    old = grid.get(x, y)
    if old is None or old == pixel:
        return 0

    grid.set(x, y, pixel)
    queue: deque[tuple[int, int]] = deque([(x, y)])
    changed = 1
    dropped = 0

    while queue:
        cx, cy = queue.popleft()
        for nx, ny in ((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)):
            if grid.get(nx, ny) != old:
                continue
            if len(queue) >= capacity:
                dropped += 1
                continue
            grid.set(nx, ny, pixel)
            queue.append((nx, ny))
            changed += 1

    if dropped:
        logger.debug(
            "Flood fill at (%d, %d) hit queue capacity %d; %d neighbours skipped",
            x, y, capacity, dropped,
        )
    return changed
