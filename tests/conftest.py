"""Shared fixtures for bitmap-paint tests."""

from pathlib import Path

import pytest

from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel
from bitmap_paint.edit.controller import EditorController


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


def lit(grid: PixelGrid) -> set[tuple[int, int]]:
    """Coordinates of every ON pixel."""
    return {(x, y) for x, y, pixel in grid.pixels() if pixel is Pixel.ON}


@pytest.fixture
def grid() -> PixelGrid:
    """A blank 10x8 grid."""
    return PixelGrid(10, 8)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def editor() -> EditorController:
    """A 16x8 editing session."""
    return EditorController(16, 8)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small text grid file with a few lit pixels."""
    path = tmp_path / "sample.txt"
    path.write_text("4 3\n1001\n0110\n1111\n")
    return path
