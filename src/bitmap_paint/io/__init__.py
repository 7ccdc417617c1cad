"""I/O module - load and save grid files."""

from bitmap_paint.io.reader import load, load_frames
from bitmap_paint.io.writer import save, save_animation_export, save_export, save_frames

__all__ = ["load", "load_frames", "save", "save_frames", "save_export", "save_animation_export"]
