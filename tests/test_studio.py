"""Tests for the studio key handling and TUI pieces (no terminal needed)."""

from pathlib import Path

import pytest

from bitmap_paint.cli.core.input import Key, KeyEvent, decode_events
from bitmap_paint.cli.studio.editor import PaintApp
from bitmap_paint.cli.widgets.base import Rect
from bitmap_paint.cli.widgets.canvas_view import CanvasViewWidget
from bitmap_paint.cli.widgets.status_bar import Shortcut, StatusBarWidget
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel
from bitmap_paint.edit.controller import EditMode, EditorController
from bitmap_paint.render.terminal import TerminalRenderer

from conftest import lit


def char(c: str) -> KeyEvent:
    return KeyEvent(char=c, raw=c)


def key(k: Key) -> KeyEvent:
    return KeyEvent(key=k)


def type_text(app: PaintApp, text: str) -> None:
    for c in text:
        app.handle_event(char(c))


@pytest.fixture
def app(editor: EditorController) -> PaintApp:
    return PaintApp(editor)


class TestDecodeEvents:
    """Tests for raw input decoding."""

    def test_plain_chars(self) -> None:
        events, rest = decode_events("ab")
        assert [e.char for e in events] == ['a', 'b']
        assert rest == ""

    def test_arrows(self) -> None:
        events, rest = decode_events("\x1b[A\x1b[B\x1bOC\x1b[D")
        assert [e.key for e in events] == [Key.UP, Key.DOWN, Key.RIGHT, Key.LEFT]
        assert rest == ""

    def test_enter_and_backspace(self) -> None:
        events, _ = decode_events("\r\x7f")
        assert [e.key for e in events] == [Key.ENTER, Key.BACKSPACE]

    def test_incomplete_sequence(self) -> None:
        events, rest = decode_events("x\x1b[")
        assert [e.char for e in events] == ['x']
        assert rest == "\x1b["

    def test_lone_escape_waits(self) -> None:
        events, rest = decode_events("\x1b")
        assert events == []
        assert rest == "\x1b"

    def test_escape_then_char(self) -> None:
        events, _ = decode_events("\x1bq")
        assert events[0].key is Key.ESCAPE
        assert events[1].char == 'q'

    def test_unknown_sequence(self) -> None:
        events, _ = decode_events("\x1b[Z")
        assert events[0].key is None
        assert events[0].raw == "\x1b[Z"


class TestKeyHandling:
    """Tests for PaintApp.handle_event."""

    def test_moves(self, app: PaintApp) -> None:
        app.handle_event(key(Key.RIGHT))
        app.handle_event(char('l'))
        app.handle_event(char('j'))
        assert (app.controller.cursor_x, app.controller.cursor_y) == (2, 1)

    def test_space_and_enter_draw(self, app: PaintApp) -> None:
        app.handle_event(char(' '))
        app.handle_event(key(Key.RIGHT))
        app.handle_event(key(Key.ENTER))
        assert lit(app.controller.grid) == {(0, 0), (1, 0)}

    def test_mode_and_filled_rectangle(self, app: PaintApp) -> None:
        type_text(app, "mm")
        assert app.controller.mode is EditMode.RECTANGLE
        app.handle_event(char(' '))
        type_text(app, "lljj")
        assert "f for filled" in app.detail_text()
        app.handle_event(char('f'))
        assert app.controller.grid.count() == 9

    def test_animation_keys_ignored_outside_animation(self, app: PaintApp) -> None:
        type_text(app, "nc]")
        assert len(app.controller.frames) == 1

    def test_animation_keys(self, app: PaintApp) -> None:
        app.controller.set_mode(EditMode.ANIMATION)
        type_text(app, "n")
        assert len(app.controller.frames) == 2
        type_text(app, "[")
        assert app.controller.frames.current_frame == 0
        type_text(app, "]")
        assert app.controller.frames.current_frame == 1
        type_text(app, "d")
        assert len(app.controller.frames) == 1
        type_text(app, "p")
        assert app.controller.playing
        type_text(app, "-")
        assert app.controller.frames.frame_delay == 150
        type_text(app, "=+")
        assert app.controller.frames.frame_delay == 50

    def test_duplicate_key(self, app: PaintApp) -> None:
        app.controller.set_mode(EditMode.ANIMATION)
        type_text(app, " c")
        assert len(app.controller.frames) == 2
        assert lit(app.controller.grid) == {(0, 0)}

    def test_quit(self, app: PaintApp) -> None:
        app.handle_event(char('q'))
        assert not app.controller.running


class TestPrompt:
    """Tests for the filename prompt."""

    def test_save_prompt(self, app: PaintApp, tmp_path: Path) -> None:
        path = tmp_path / "drawing.txt"
        app.handle_event(char(' '))
        app.handle_event(char('s'))
        assert app.prompt_active
        type_text(app, str(path))
        assert app.detail_text() == f"Save as: {path}_"
        app.handle_event(key(Key.ENTER))
        assert not app.prompt_active
        assert path.read_text().startswith("16 8\n")
        assert app.controller.message == f"Saved: {path}"

    def test_keys_go_to_prompt(self, app: PaintApp) -> None:
        app.handle_event(char('L'))
        type_text(app, "q")
        assert app.controller.running
        assert app.detail_text() == "Load: q_"

    def test_backspace(self, app: PaintApp) -> None:
        app.handle_event(char('S'))
        type_text(app, "ab")
        app.handle_event(key(Key.BACKSPACE))
        assert app.detail_text() == "Export C array to: a_"

    def test_escape_cancels(self, app: PaintApp) -> None:
        app.handle_event(char('s'))
        app.handle_event(key(Key.ESCAPE))
        assert not app.prompt_active
        assert app.controller.message == "Cancelled"

    def test_empty_name(self, app: PaintApp) -> None:
        app.handle_event(char('s'))
        app.handle_event(key(Key.ENTER))
        assert app.controller.message == "No filename given"

    def test_save_prompt_prefilled(self, editor: EditorController, tmp_path: Path) -> None:
        app = PaintApp(editor, tmp_path / "current.txt")
        app.handle_event(char('s'))
        assert app.detail_text() == f"Save as: {tmp_path / 'current.txt'}_"

    def test_failed_load_reports(self, app: PaintApp, tmp_path: Path) -> None:
        app.handle_event(char('L'))
        type_text(app, str(tmp_path / "missing.txt"))
        app.handle_event(key(Key.ENTER))
        assert app.controller.message.startswith("Error loading missing.txt")


class TestStatusText:
    """Tests for the status line contents."""

    def test_edit_status(self, app: PaintApp) -> None:
        assert app.status_text() == "Mode: pen | Color: on | Position: (0, 0)"
        app.handle_event(char(' '))
        assert app.status_text().endswith(" [*]")

    def test_animation_status(self, app: PaintApp) -> None:
        app.controller.set_mode(EditMode.ANIMATION)
        app.controller.new_frame()
        assert app.status_text() == "Animation Mode | Frame: 2/2 | Speed: 100ms | EDITING"

    def test_line_hint(self, app: PaintApp) -> None:
        app.controller.set_mode(EditMode.LINE)
        app.handle_event(char(' '))
        assert app.detail_text() == "Line from (0, 0) - press space to complete"


class TestRendering:
    """Tests for the renderer and widgets."""

    def test_renderer(self) -> None:
        grid = PixelGrid(2, 1)
        grid.set(0, 0, Pixel.ON)
        assert TerminalRenderer().render(grid) == "┌────┐\n│██  │\n└────┘"

    def test_renderer_cursor(self) -> None:
        grid = PixelGrid(2, 1)
        grid.set(1, 0, Pixel.ON)
        lines = TerminalRenderer(border=False).render_lines(grid, cursor=(1, 0))
        assert lines == ["  ▓▓"]
        lines = TerminalRenderer(border=False).render_lines(grid, cursor=(0, 0))
        assert lines == ["▒▒██"]

    def test_canvas_view_crops(self) -> None:
        view = CanvasViewWidget()
        assert view.render(Rect(0, 0, 80, 24)) == []
        view.update(PixelGrid(10, 10), None)
        lines = view.render(Rect(0, 0, 5, 4))
        assert len(lines) == 4
        assert all(len(line) == 5 for line in lines)

    def test_status_bar(self) -> None:
        bar = StatusBarWidget()
        bar.set_status("Mode: pen")
        bar.set_detail("hello")
        bar.set_shortcuts([Shortcut("q", "Quit"), Shortcut("s", "Save")])
        lines = bar.render(Rect(0, 0, 10, 3))
        assert lines[0] == "Mode: pen"
        assert "Quit" in lines[1]
        assert "Save" not in lines[1]
        assert lines[2] == "hello"
