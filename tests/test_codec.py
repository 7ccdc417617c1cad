"""Tests for the text grid format and the packed C export."""

import pytest

from bitmap_paint.codec.packed import (
    bytes_per_frame,
    bytes_per_row,
    export_animation,
    export_grid,
    pack_grid,
    pack_row,
)
from bitmap_paint.codec.text_grid import decode, decode_frames, encode, encode_frames
from bitmap_paint.core.errors import InvalidFormat, InvalidSize, SizeExceeded
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel
from bitmap_paint.edit.primitives import draw_rectangle

from conftest import lit


class TestTextEncode:
    """Tests for encoding grids as text."""

    def test_encode(self) -> None:
        grid = PixelGrid(4, 2)
        grid.set(0, 0, Pixel.ON)
        grid.set(3, 1, Pixel.ON)
        assert encode(grid) == "4 2\n1000\n0001\n"

    def test_round_trip(self, grid: PixelGrid) -> None:
        draw_rectangle(grid, 1, 1, 6, 5, Pixel.ON)
        grid.set(4, 3, Pixel.ON)
        assert decode(encode(grid)) == grid

    def test_single_frame_sequence_uses_plain_header(self, grid: PixelGrid) -> None:
        assert encode_frames([grid]) == encode(grid)

    def test_frame_sequence_header(self) -> None:
        a, b = PixelGrid(3, 1), PixelGrid(3, 1)
        b.set(2, 0, Pixel.ON)
        assert encode_frames([a, b]) == "3 1 2\n000\n001\n"

    def test_empty_sequence(self) -> None:
        with pytest.raises(InvalidSize):
            encode_frames([])

    def test_mismatched_sequence(self) -> None:
        with pytest.raises(InvalidSize):
            encode_frames([PixelGrid(2, 2), PixelGrid(3, 3)])


class TestTextDecode:
    """Tests for decoding the text format."""

    def test_decode(self) -> None:
        grid = decode("4 3\n1001\n0110\n1111\n")
        assert grid.size == (4, 3)
        assert lit(grid) == {(0, 0), (3, 0), (1, 1), (2, 1), (0, 2), (1, 2), (2, 2), (3, 2)}

    def test_missing_rows_stay_off(self) -> None:
        grid = decode("3 3\n111\n")
        assert lit(grid) == {(0, 0), (1, 0), (2, 0)}

    def test_short_rows_stay_off(self) -> None:
        grid = decode("4 1\n11\n")
        assert lit(grid) == {(0, 0), (1, 0)}

    def test_long_rows_are_truncated(self) -> None:
        grid = decode("2 1\n1111\n")
        assert grid.size == (2, 1)
        assert grid.count() == 2

    def test_other_characters_ignored(self) -> None:
        grid = decode("3 1\n1x1\n")
        assert lit(grid) == {(0, 0), (2, 0)}

    def test_blank_lines_skipped(self) -> None:
        grid = decode("\n2 2\n\n10\n\n01\n")
        assert lit(grid) == {(0, 0), (1, 1)}

    def test_crlf_line_endings(self) -> None:
        grid = decode("2 2\r\n10\r\n01\r\n")
        assert lit(grid) == {(0, 0), (1, 1)}

    def test_no_trailing_newline(self) -> None:
        assert decode("1 1\n1").count() == 1

    @pytest.mark.parametrize("text", ["", "\n\n", "12\n", "a b\n01\n", "-3 2\n", "3 x\n"])
    def test_bad_header(self, text: str) -> None:
        with pytest.raises(InvalidFormat):
            decode(text)

    @pytest.mark.parametrize("text", ["0 4\n", "4 0\n"])
    def test_zero_size(self, text: str) -> None:
        with pytest.raises(InvalidSize):
            decode(text)

    @pytest.mark.parametrize("text", ["129 2\n", "2 65\n"])
    def test_too_large(self, text: str) -> None:
        with pytest.raises(SizeExceeded):
            decode(text)

    def test_largest_size(self) -> None:
        grid = decode("128 64\n")
        assert grid.size == (128, 64)
        assert grid.count() == 0

    def test_decode_returns_first_frame(self) -> None:
        grid = decode("2 1 2\n10\n01\n")
        assert lit(grid) == {(0, 0)}

    def test_trailing_text_after_size(self) -> None:
        grid = decode("2 1 frames\n11\n")
        assert grid.count() == 2


class TestTextFrames:
    """Tests for frame sequences."""

    def test_decode_frames(self) -> None:
        frames = decode_frames("2 1 3\n10\n01\n11\n")
        assert [lit(frame) for frame in frames] == [{(0, 0)}, {(1, 0)}, {(0, 0), (1, 0)}]

    def test_plain_file_is_one_frame(self) -> None:
        frames = decode_frames("2 2\n11\n00\n")
        assert len(frames) == 1
        assert frames[0].count() == 2

    def test_missing_frames_are_blank(self) -> None:
        frames = decode_frames("2 1 3\n11\n")
        assert len(frames) == 3
        assert [frame.count() for frame in frames] == [2, 0, 0]

    def test_round_trip(self) -> None:
        frames = [PixelGrid(5, 3) for _ in range(4)]
        for index, frame in enumerate(frames):
            frame.set(index, index % 3, Pixel.ON)
        assert decode_frames(encode_frames(frames)) == frames

    def test_zero_frames(self) -> None:
        with pytest.raises(InvalidSize):
            decode_frames("2 2 0\n")

    def test_too_many_frames(self) -> None:
        with pytest.raises(SizeExceeded):
            decode_frames("2 2 17\n")


class TestPacking:
    """Tests for MSB-first packing."""

    @pytest.mark.parametrize("width,expected", [(1, 1), (8, 1), (9, 2), (16, 2), (128, 16)])
    def test_bytes_per_row(self, width: int, expected: int) -> None:
        assert bytes_per_row(width) == expected

    def test_bytes_per_frame(self) -> None:
        assert bytes_per_frame(10, 3) == 6
        assert bytes_per_frame(128, 64) == 1024

    def test_msb_first(self) -> None:
        row = [Pixel.ON] + [Pixel.OFF] * 7
        assert pack_row(row) == b"\x80"
        row = [Pixel.OFF] * 7 + [Pixel.ON]
        assert pack_row(row) == b"\x01"

    def test_partial_byte_is_zero_padded(self) -> None:
        grid = PixelGrid(10, 3)
        draw_rectangle(grid, 0, 0, 10, 3, Pixel.ON, filled=True)
        assert pack_grid(grid) == bytes([0xFF, 0xC0] * 3)

    def test_rows_start_new_byte(self) -> None:
        grid = PixelGrid(3, 2)
        grid.set(0, 1, Pixel.ON)
        assert pack_grid(grid) == b"\x00\x80"


class TestExport:
    """Tests for the C array text."""

    def test_export_grid(self) -> None:
        grid = PixelGrid(10, 3)
        draw_rectangle(grid, 0, 0, 10, 3, Pixel.ON, filled=True)
        text = export_grid(grid)
        assert text == (
            "// 10x3 pixels, 2 bytes per row\n"
            "const unsigned char bitmap[] PROGMEM = {\n"
            "    0xff, 0xc0, 0xff, 0xc0, 0xff, 0xc0\n"
            "};\n"
        )

    def test_export_name(self, grid: PixelGrid) -> None:
        assert "const unsigned char logo[] PROGMEM = {" in export_grid(grid, name="logo")

    def test_twelve_bytes_per_line(self) -> None:
        grid = PixelGrid(16, 8)
        lines = export_grid(grid).splitlines()
        data = [line for line in lines if line.startswith("    0x")]
        assert len(data) == 2
        assert data[0].count("0x") == 12
        assert data[0].endswith(",")
        assert data[1].count("0x") == 4
        assert not data[1].endswith(",")

    def test_export_animation(self) -> None:
        a, b = PixelGrid(8, 1), PixelGrid(8, 1)
        b.set(0, 0, Pixel.ON)
        text = export_animation([a, b])
        assert text == (
            "// Animation with 2 frames, 8x1 pixels each\n"
            "const unsigned char animation[] PROGMEM = {\n"
            "    // Frame 1\n"
            "    0x00,\n"
            "    // Frame 2\n"
            "    0x80\n"
            "};\n"
            "\n"
            "const unsigned int FRAME_WIDTH = 8;\n"
            "const unsigned int FRAME_HEIGHT = 1;\n"
            "const unsigned int FRAME_COUNT = 2;\n"
            "const unsigned int BYTES_PER_FRAME = 1;\n"
        )

    def test_export_animation_empty(self) -> None:
        with pytest.raises(InvalidSize):
            export_animation([])

    def test_export_animation_mismatched(self) -> None:
        with pytest.raises(InvalidSize):
            export_animation([PixelGrid(8, 1), PixelGrid(8, 2)])
