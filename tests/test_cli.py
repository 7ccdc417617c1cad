"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bitmap_paint.cli.app import create_app
from bitmap_paint.io.reader import load

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def anim_file(tmp_path: Path) -> Path:
    path = tmp_path / "anim.txt"
    path.write_text("8 2 3\n10000000\n00000000\n01000000\n00000000\n00100000\n00000001\n")
    return path


class TestView:
    """Tests for the view command."""

    def test_view(self, app, sample_file: Path) -> None:
        result = runner.invoke(app, ["view", str(sample_file)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "┌" + "─" * 8 + "┐"
        assert lines[1] == "│██    ██│"
        assert lines[-1] == "└" + "─" * 8 + "┘"

    def test_view_frame(self, app, anim_file: Path) -> None:
        result = runner.invoke(app, ["view", str(anim_file), "--frame", "3"])
        assert result.exit_code == 0
        assert "│    ██          │" in result.stdout

    def test_view_frame_out_of_range(self, app, sample_file: Path) -> None:
        result = runner.invoke(app, ["view", str(sample_file), "-f", "2"])
        assert result.exit_code == 1

    def test_view_missing_file(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["view", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1


class TestInfo:
    """Tests for the info command."""

    def test_info_json(self, app, anim_file: Path) -> None:
        result = runner.invoke(app, ["info", str(anim_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data == {
            "width": 8,
            "height": 2,
            "frames": 3,
            "bytes_per_frame": 2,
            "pixels_on": [1, 1, 2],
        }

    def test_info_text(self, app, sample_file: Path) -> None:
        result = runner.invoke(app, ["info", str(sample_file)])
        assert result.exit_code == 0
        assert "4x3" in result.stdout

    def test_info_bad_file(self, app, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("not a grid\n")
        result = runner.invoke(app, ["info", str(path)])
        assert result.exit_code == 1


class TestExport:
    """Tests for the export command."""

    def test_export_single(self, app, sample_file: Path, tmp_path: Path) -> None:
        dest = tmp_path / "sample.h"
        result = runner.invoke(app, ["export", str(sample_file), str(dest), "--name", "sample"])
        assert result.exit_code == 0
        text = dest.read_text()
        assert "const unsigned char sample[] PROGMEM = {" in text
        assert "0x90, 0x60, 0xf0" in text

    def test_export_animation(self, app, anim_file: Path, tmp_path: Path) -> None:
        dest = tmp_path / "anim.h"
        result = runner.invoke(app, ["export", str(anim_file), str(dest)])
        assert result.exit_code == 0
        text = dest.read_text()
        assert "animation[] PROGMEM" in text
        assert "const unsigned int FRAME_COUNT = 3;" in text


class TestImportImage:
    """Tests for the import-image command."""

    def test_import(self, app, tmp_path: Path) -> None:
        from PIL import Image

        image = tmp_path / "half.png"
        img = Image.new("L", (16, 8), 255)
        for x in range(8):
            for y in range(8):
                img.putpixel((x, y), 0)
        img.save(image)

        dest = tmp_path / "half.txt"
        result = runner.invoke(app, ["import-image", str(image), str(dest)])
        assert result.exit_code == 0
        grid = load(dest)
        assert grid.size == (16, 8)
        assert grid.count() == 64

    def test_import_missing_image(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["import-image", str(tmp_path / "none.png"), str(tmp_path / "o.txt")])
        assert result.exit_code == 1


class TestPaint:
    """Tests for the paint command outside a terminal."""

    def test_requires_terminal(self, app) -> None:
        result = runner.invoke(app, ["paint"])
        assert result.exit_code == 1
