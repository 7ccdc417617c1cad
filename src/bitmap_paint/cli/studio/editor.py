"""Interactive bitmap paint studio.

Ties together:
- EditorController: edit modes, drawing and animation state
- CanvasViewWidget: the bordered grid with the cursor overlay
- StatusBarWidget: mode/frame status, shortcuts and messages

Keyboard Controls:
    Everywhere:
        Arrow keys / hjkl: Move cursor
        Space / Enter: Draw (pen), place/complete line or rectangle, fill
        f: Complete the pending rectangle as filled
        m: Next mode (pen, line, rectangle, fill, animation)
        x: Toggle drawing color
        C: Clear the grid
        s: Save (text format)
        S: Export packed C array (all frames in animation mode)
        L: Load
        q: Quit

    Animation mode:
        [ / ]: Previous / next frame
        n: New blank frame
        c: Duplicate frame
        d: Delete frame
        p: Play / pause
        - / +: Slower / faster
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from bitmap_paint.cli.core.input import InputReader, Key, KeyEvent
from bitmap_paint.cli.core.terminal import Terminal
from bitmap_paint.cli.widgets.base import Rect
from bitmap_paint.cli.widgets.canvas_view import CanvasViewWidget
from bitmap_paint.cli.widgets.status_bar import Shortcut, StatusBarWidget
from bitmap_paint.edit.controller import EditMode, EditorController

logger = logging.getLogger(__name__)

STATUS_HEIGHT = 3
IDLE_POLL = 0.1
PLAYING_POLL = 0.01

MOVES: dict[object, tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    'k': (0, -1),
    'j': (0, 1),
    'h': (-1, 0),
    'l': (1, 0),
}


class PromptAction(Enum):
    """What a filename prompt is collecting a path for."""
    SAVE = "Save as"
    EXPORT = "Export C array to"
    LOAD = "Load"


class PaintApp:
    """Terminal front end for an EditorController.

    The app maps key events to controller operations and redraws the
    screen; all editing state lives in the controller.
    """

    def __init__(self, controller: EditorController, path: Optional[Path] = None) -> None:
        """
        Args:
            controller: Editing session to drive
            path: File used as the default name in save prompts
        """
        self.controller = controller
        self.canvas_view = CanvasViewWidget()
        self.status_bar = StatusBarWidget()
        self._file_path = path
        self._needs_redraw = True

        # Filename prompt state
        self._prompt: PromptAction | None = None
        self._prompt_text = ""

        self._keys: dict[str, Callable[[], object]] = {
            ' ': controller.activate,
            'f': controller.fill_rectangle,
            'm': controller.cycle_mode,
            'x': controller.toggle_color,
            'C': controller.clear,
            's': lambda: self._open_prompt(PromptAction.SAVE),
            'S': lambda: self._open_prompt(PromptAction.EXPORT),
            'L': lambda: self._open_prompt(PromptAction.LOAD),
            'q': controller.quit,
        }
        self._animation_keys: dict[str, Callable[[], object]] = {
            '[': controller.prev_frame,
            ']': controller.next_frame,
            'n': controller.new_frame,
            'c': controller.duplicate_frame,
            'd': controller.delete_frame,
            'p': controller.toggle_play,
            '-': controller.slower,
            '+': controller.faster,
            '=': controller.faster,
        }

    @property
    def prompt_active(self) -> bool:
        return self._prompt is not None

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Run until the controller quits. Requires an interactive terminal."""
        reader = InputReader()
        logger.info("Studio started (%dx%d)", self.controller.grid.width,
                    self.controller.grid.height)

        with Terminal.managed_mode():
            Terminal.clear()
            while self.controller.running:
                if self.controller.advance_playback():
                    self._needs_redraw = True

                if self._needs_redraw:
                    self._render()
                    self._needs_redraw = False

                timeout = PLAYING_POLL if self.controller.playing else IDLE_POLL
                event = reader.read(timeout=timeout)
                if event is not None:
                    self.handle_event(event)

        logger.info("Studio closed")

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def handle_event(self, event: KeyEvent) -> None:
        """Apply one key event to the controller."""
        self._needs_redraw = True

        if self._prompt is not None:
            self._handle_prompt_input(event)
            return

        move = MOVES.get(event.key) or MOVES.get(event.char)
        if move is not None:
            self.controller.move(*move)
            return

        if event.key == Key.ENTER:
            self.controller.activate()
            return

        if event.char is None:
            return

        if self.controller.mode == EditMode.ANIMATION:
            action = self._animation_keys.get(event.char)
            if action is not None:
                action()
                return

        action = self._keys.get(event.char)
        if action is not None:
            action()

    def _open_prompt(self, action: PromptAction) -> None:
        self._prompt = action
        if action is PromptAction.SAVE and self._file_path:
            self._prompt_text = str(self._file_path)
        else:
            self._prompt_text = ""

    def _handle_prompt_input(self, event: KeyEvent) -> None:
        """Edit the filename; Enter runs the action, Esc cancels."""
        if event.key == Key.ESCAPE:
            self._prompt = None
            self.controller.message = "Cancelled"
            return

        if event.key == Key.ENTER:
            action, text = self._prompt, self._prompt_text.strip()
            self._prompt = None
            if not text:
                self.controller.message = "No filename given"
                return
            self._run_file_action(action, Path(text))
            return

        if event.key == Key.BACKSPACE:
            self._prompt_text = self._prompt_text[:-1]
            return

        if event.char is not None:
            self._prompt_text += event.char

    def _run_file_action(self, action: PromptAction, path: Path) -> None:
        controller = self.controller
        if action is PromptAction.SAVE:
            if controller.save(path):
                self._file_path = path
        elif action is PromptAction.EXPORT:
            controller.save_export(path)
        elif controller.load(path):
            self._file_path = path
            Terminal.clear()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def status_text(self) -> str:
        """The first status line for the current state."""
        c = self.controller
        if c.mode == EditMode.ANIMATION:
            state = "PLAYING" if c.frames.playing else "EDITING"
            return (
                f"Animation Mode | Frame: {c.frames.current_frame + 1}/{len(c.frames)}"
                f" | Speed: {c.frames.frame_delay}ms | {state}"
            )
        modified = " [*]" if c.modified else ""
        return (
            f"Mode: {c.mode.value} | Color: {c.color.name.lower()}"
            f" | Position: ({c.cursor_x}, {c.cursor_y}){modified}"
        )

    def detail_text(self) -> str:
        """Pending-gesture hint, or the controller's last message."""
        c = self.controller
        if self._prompt is not None:
            return f"{self._prompt.value}: {self._prompt_text}_"
        if c.anchor is not None and c.mode == EditMode.LINE:
            return f"Line from {c.anchor} - press space to complete"
        if c.anchor is not None and c.mode == EditMode.RECTANGLE:
            return f"Rectangle from {c.anchor} - press space to complete, f for filled"
        return c.message or ""

    def _shortcuts(self) -> list[Shortcut]:
        if self.controller.mode == EditMode.ANIMATION:
            return [
                Shortcut("[ ]", "Frame"),
                Shortcut("n", "New"),
                Shortcut("c", "Copy"),
                Shortcut("d", "Delete"),
                Shortcut("p", "Play"),
                Shortcut("- +", "Speed"),
                Shortcut("S", "Export"),
                Shortcut("m", "Mode"),
                Shortcut("q", "Quit"),
            ]
        return [
            Shortcut("hjkl", "Move"),
            Shortcut("Space", "Draw"),
            Shortcut("m", "Mode"),
            Shortcut("x", "Color"),
            Shortcut("s", "Save"),
            Shortcut("S", "Export"),
            Shortcut("L", "Load"),
            Shortcut("C", "Clear"),
            Shortcut("q", "Quit"),
        ]

    def _render(self) -> None:
        size = Terminal.size()
        c = self.controller

        self.canvas_view.update(c.grid, (c.cursor_x, c.cursor_y))
        canvas_height = max(1, size.rows - STATUS_HEIGHT)
        lines = self.canvas_view.render(Rect(0, 0, size.cols, canvas_height))

        self.status_bar.set_status(self.status_text())
        self.status_bar.set_shortcuts(self._shortcuts())
        self.status_bar.set_detail(self.detail_text())
        lines.extend(self.status_bar.render(Rect(0, 0, size.cols, STATUS_HEIGHT)))

        Terminal.move_to(1, 1)
        sys.stdout.write("\x1b[K\r\n".join(lines) + "\x1b[K")
        Terminal.clear_below()

        if not self._prompt:
            c.message = None


def run_editor(controller: EditorController, path: Optional[Path] = None) -> None:
    """Launch the studio on an existing controller."""
    PaintApp(controller, path).run()
