"""Convert raster images (PNG, JPG, GIF, ...) to monochrome grids.

The image is flattened onto white, converted to grayscale, downscaled
to fit the grid bounds and thresholded: dark pixels become ON.

Example:
    from bitmap_paint.import_image import to_grid

    grid = to_grid("logo.png", width=64, threshold=100)
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

try:
    from PIL import Image, ImageOps
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

from bitmap_paint.core.constants import MAX_HEIGHT, MAX_WIDTH
from bitmap_paint.core.grid import PixelGrid, check_dimensions
from bitmap_paint.core.pixel import Pixel


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image import. "
            "Install with: pip install Pillow"
        )


def fit_size(
    source: tuple[int, int],
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """
    Work out the target grid size for an image.

    With neither dimension given, the image is scaled down (never up)
    to fit MAX_WIDTH x MAX_HEIGHT. With one dimension given, the other
    follows the aspect ratio and is clamped to its maximum.

    Args:
        source: (width, height) of the source image
        width: Requested grid width, or None
        height: Requested grid height, or None

    Returns:
        (width, height) of the grid
    """
    src_w, src_h = source
    if width is not None and height is not None:
        return width, height

    if width is not None:
        return width, max(1, min(MAX_HEIGHT, round(width * src_h / src_w)))
    if height is not None:
        return max(1, min(MAX_WIDTH, round(height * src_w / src_h))), height

    scale = min(1.0, MAX_WIDTH / src_w, MAX_HEIGHT / src_h)
    return max(1, round(src_w * scale)), max(1, round(src_h * scale))


def to_grid(
    input_path: Union[str, Path],
    width: int | None = None,
    height: int | None = None,
    *,
    threshold: int = 128,
    invert: bool = False,
) -> PixelGrid:
    """
    Convert an image file to a PixelGrid.

    Args:
        input_path: Path to the input image
        width: Target width in pixels (default: fit to MAX_WIDTH)
        height: Target height in pixels (default: follow aspect ratio)
        threshold: Gray level (0-255) below which a pixel is ON
        invert: Make light pixels ON instead of dark ones

    Returns:
        A new PixelGrid

    Raises:
        ImportError: If Pillow is not installed
        InvalidSize, SizeExceeded: If the target size is unsupported
        OSError: If the image cannot be opened
    """
    _check_pil()

    with Image.open(Path(input_path)) as img:
        target = fit_size(img.size, width, height)
        check_dimensions(*target)

        # Flatten transparency onto white so transparent areas stay OFF
        img = img.convert("RGBA")
        background = Image.new("RGBA", img.size, (255, 255, 255, 255))
        gray = Image.alpha_composite(background, img).convert("L")

    gray = gray.resize(target, Image.Resampling.LANCZOS)
    if invert:
        gray = ImageOps.invert(gray)

    grid = PixelGrid(*target)
    pixels = gray.load()
    for y in range(grid.height):
        for x in range(grid.width):
            if pixels[x, y] < threshold:
                grid.set(x, y, Pixel.ON)
    return grid
