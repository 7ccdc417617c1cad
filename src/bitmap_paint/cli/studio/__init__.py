"""Interactive paint studio."""

from bitmap_paint.cli.studio.editor import PaintApp, run_editor

__all__ = ["PaintApp", "run_editor"]
