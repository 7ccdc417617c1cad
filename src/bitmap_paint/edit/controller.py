"""EditorController - edit-mode state machine driving the drawing core.

The controller receives already-decoded, high-level events (move,
activate, change mode, save, frame navigation, ...) from the input layer
and applies them to the live grid, the drawing primitives and the
frame buffer. It holds no terminal or keyboard logic.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from bitmap_paint.core.constants import (
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FRAME_DELAY_STEP_MS,
)
from bitmap_paint.core.errors import GridError
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel
from bitmap_paint.edit.frames import FrameBuffer
from bitmap_paint.edit.primitives import draw_line, draw_rectangle, flood_fill
from bitmap_paint.io.reader import load_frames
from bitmap_paint.io.writer import save_animation_export, save_export, save_frames

logger = logging.getLogger(__name__)


class EditMode(Enum):
    """Editing mode, in cycle order."""
    PEN = "pen"
    LINE = "line"
    RECTANGLE = "rectangle"
    FILL = "fill"
    ANIMATION = "animation"

    def next(self) -> EditMode:
        modes = list(EditMode)
        return modes[(modes.index(self) + 1) % len(modes)]


class EditorController:
    """
    Interaction state for one editing session.

    Attributes:
        grid: The live grid receiving edits
        frames: Animation frames; the live grid is committed on navigation
        cursor_x, cursor_y: Cursor position, always inside the grid
        mode: Current edit mode
        color: Pixel value used for drawing
        anchor: First point of a pending line/rectangle gesture, if any
        message: Last status message for the UI (None when cleared)
        modified: Whether there are unsaved edits
        running: False once quit() was called

    Example:
        editor = EditorController(16, 8)
        editor.cycle_mode()            # LINE
        editor.activate()              # anchor at (0, 0)
        editor.move(5, 3)
        editor.activate()              # line (0, 0) -> (5, 3)
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        frame_delay: int = DEFAULT_FRAME_DELAY_MS,
        fill_capacity: int | None = None,
    ):
        """
        Args:
            width: Grid width in pixels
            height: Grid height in pixels
            frame_delay: Initial animation delay in milliseconds
            fill_capacity: Flood fill queue capacity (None = width * height)

        Raises:
            InvalidSize, SizeExceeded: If the size is unsupported
        """
        self.grid = PixelGrid(width, height)
        self.frames = FrameBuffer(self.grid, frame_delay=frame_delay)
        self.fill_capacity = fill_capacity
        self.cursor_x = 0
        self.cursor_y = 0
        self.mode = EditMode.PEN
        self.color = Pixel.ON
        self.anchor: tuple[int, int] | None = None
        self.message: str | None = None
        self.modified = False
        self.running = True

    # -------------------------------------------------------------------------
    # Cursor and modes
    # -------------------------------------------------------------------------

    def move(self, dx: int, dy: int) -> None:
        """Move the cursor, clamped to the grid."""
        self.cursor_x = max(0, min(self.grid.width - 1, self.cursor_x + dx))
        self.cursor_y = max(0, min(self.grid.height - 1, self.cursor_y + dy))

    def cycle_mode(self) -> EditMode:
        """Switch to the next mode, dropping any pending gesture."""
        self.mode = self.mode.next()
        self.anchor = None
        return self.mode

    def set_mode(self, mode: EditMode) -> None:
        self.mode = mode
        self.anchor = None

    def toggle_color(self) -> Pixel:
        self.color = self.color.toggled()
        return self.color

    def clear(self) -> None:
        """Clear the live grid."""
        self.grid.clear()
        self.modified = True

    def quit(self) -> None:
        self.running = False

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def activate(self) -> None:
        """Apply the current mode at the cursor.

        PEN and ANIMATION plot one pixel, FILL flood fills, LINE and
        RECTANGLE place the anchor on the first call and draw the shape
        on the second.
        """
        x, y = self.cursor_x, self.cursor_y

        if self.mode in (EditMode.PEN, EditMode.ANIMATION):
            self.grid.set(x, y, self.color)
            self.modified = True
        elif self.mode == EditMode.FILL:
            if flood_fill(self.grid, x, y, self.color, capacity=self.fill_capacity):
                self.modified = True
        elif self.mode == EditMode.LINE:
            if self.anchor is None:
                self.anchor = (x, y)
            else:
                ax, ay = self.anchor
                draw_line(self.grid, ax, ay, x, y, self.color)
                self.anchor = None
                self.modified = True
        elif self.mode == EditMode.RECTANGLE:
            if self.anchor is None:
                self.anchor = (x, y)
            else:
                self._complete_rectangle(filled=False)

    def fill_rectangle(self) -> bool:
        """Complete a pending rectangle as filled. Returns False if none is pending."""
        if self.mode != EditMode.RECTANGLE or self.anchor is None:
            return False
        self._complete_rectangle(filled=True)
        return True

    def _complete_rectangle(self, filled: bool) -> None:
        ax, ay = self.anchor
        x = min(ax, self.cursor_x)
        y = min(ay, self.cursor_y)
        w = abs(self.cursor_x - ax) + 1
        h = abs(self.cursor_y - ay) + 1
        draw_rectangle(self.grid, x, y, w, h, self.color, filled=filled)
        self.anchor = None
        self.modified = True

    # -------------------------------------------------------------------------
    # Animation
    # -------------------------------------------------------------------------

    def new_frame(self) -> None:
        self.grid = self.frames.new_frame(self.grid)

    def duplicate_frame(self) -> None:
        self.grid = self.frames.duplicate_frame(self.grid)

    def delete_frame(self) -> None:
        if len(self.frames) > 1:
            self.modified = True
        self.grid = self.frames.delete_frame(self.grid)

    def prev_frame(self) -> None:
        self.grid = self.frames.prev_frame(self.grid)

    def next_frame(self) -> None:
        self.grid = self.frames.next_frame(self.grid)

    def toggle_play(self) -> bool:
        return self.frames.toggle_play()

    def adjust_speed(self, delta: int) -> int:
        """Change the frame delay by `delta` ms (positive = slower)."""
        return self.frames.adjust_speed(delta)

    def slower(self) -> int:
        return self.adjust_speed(FRAME_DELAY_STEP_MS)

    def faster(self) -> int:
        return self.adjust_speed(-FRAME_DELAY_STEP_MS)

    @property
    def playing(self) -> bool:
        return self.mode == EditMode.ANIMATION and self.frames.playing

    def advance_playback(self) -> bool:
        """Advance one frame if playback is due. Returns True if it advanced."""
        if self.mode != EditMode.ANIMATION or not self.frames.due():
            return False
        self.grid = self.frames.tick(self.grid)
        return True

    def all_frames(self) -> list[PixelGrid]:
        """Commit the live grid and return copies of every frame."""
        self.frames.commit(self.grid)
        return [self.frames.frame(i) for i in range(len(self.frames))]

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def save(self, path: str | Path) -> bool:
        """Save the grid (or every frame, when animated) in the text format."""
        path = Path(path)
        try:
            save_frames(self.all_frames(), path)
        except (OSError, GridError) as e:
            return self._fail("saving", path, e)
        self.modified = False
        self.message = f"Saved: {path}"
        return True

    def save_export(self, path: str | Path) -> bool:
        """Export a packed C array: every frame in animation mode, else the live grid."""
        path = Path(path)
        try:
            if self.mode == EditMode.ANIMATION:
                save_animation_export(self.all_frames(), path)
            else:
                save_export(self.grid, path)
        except (OSError, GridError) as e:
            return self._fail("exporting", path, e)
        self.message = f"Exported: {path}"
        return True

    def load(self, path: str | Path) -> bool:
        """Replace the grid and frames with a file's content.

        On failure the current grid and frames are kept as they are.
        """
        path = Path(path)
        try:
            loaded = load_frames(path)
            frames = FrameBuffer.from_frames(loaded, frame_delay=self.frames.frame_delay)
        except (OSError, GridError) as e:
            return self._fail("loading", path, e)

        self.frames = frames
        self.grid = frames.live_copy()
        self.cursor_x = 0
        self.cursor_y = 0
        self.anchor = None
        self.modified = False
        self.message = f"Loaded: {path.name}"
        return True

    def _fail(self, action: str, path: Path, error: Exception) -> bool:
        logger.warning("Error %s %s: %s", action, path, error)
        self.message = f"Error {action} {path.name}: {error}"
        return False
