"""Save grids as text files and export them as packed C arrays."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from bitmap_paint.codec.packed import export_animation, export_grid
from bitmap_paint.codec.text_grid import encode, encode_frames
from bitmap_paint.core.grid import PixelGrid

logger = logging.getLogger(__name__)


def save(grid: PixelGrid, path: str | Path) -> None:
    """Save a single grid in the text format."""
    path = Path(path)
    path.write_text(encode(grid), encoding="utf-8")
    logger.info("Saved %dx%d grid to %s", grid.width, grid.height, path)


def save_frames(frames: Sequence[PixelGrid], path: str | Path) -> None:
    """Save a frame sequence in the text format."""
    path = Path(path)
    path.write_text(encode_frames(list(frames)), encoding="utf-8")
    logger.info("Saved %d frame(s) to %s", len(frames), path)


def save_export(grid: PixelGrid, path: str | Path, name: str = "bitmap") -> None:
    """Write a single grid as a packed C array file."""
    path = Path(path)
    path.write_text(export_grid(grid, name=name), encoding="utf-8")
    logger.info("Exported %dx%d bitmap to %s", grid.width, grid.height, path)


def save_animation_export(
    frames: Sequence[PixelGrid],
    path: str | Path,
    name: str = "animation",
) -> None:
    """Write a frame sequence as a packed C array file with size constants."""
    path = Path(path)
    path.write_text(export_animation(frames, name=name), encoding="utf-8")
    logger.info("Exported %d-frame animation to %s", len(frames), path)
