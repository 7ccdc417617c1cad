"""Load grids from text files."""

from __future__ import annotations

import logging
from pathlib import Path

from bitmap_paint.codec.text_grid import decode, decode_frames
from bitmap_paint.core.grid import PixelGrid

logger = logging.getLogger(__name__)


def load(path: str | Path) -> PixelGrid:
    """
    Load a single grid from a text-format file.

    For an animation file, the first frame is returned.

    Raises:
        OSError: If the file cannot be read
        InvalidFormat: If the header is missing or unparsable
        InvalidSize, SizeExceeded: If the declared size is unsupported
    """
    path = Path(path)
    grid = decode(path.read_text(encoding="utf-8", errors="replace"))
    logger.info("Loaded %dx%d grid from %s", grid.width, grid.height, path)
    return grid


def load_frames(path: str | Path) -> list[PixelGrid]:
    """
    Load every frame from a text-format file.

    A plain single-grid file yields a one-frame list.
    """
    path = Path(path)
    frames = decode_frames(path.read_text(encoding="utf-8", errors="replace"))
    logger.info(
        "Loaded %d frame(s) of %dx%d from %s",
        len(frames), frames[0].width, frames[0].height, path,
    )
    return frames
