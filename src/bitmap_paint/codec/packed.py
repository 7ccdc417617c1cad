"""Packed bitmap export for embedded firmware.

Pixels are packed 8 per byte, most significant bit first: the leftmost
pixel of each group of 8 is bit 7. Every row starts a fresh byte, and
the last byte of a row is zero-padded when the width is not a multiple
of 8. The result is written as a C byte array in program memory
(``PROGMEM``), 12 bytes per line. The export is write-only.
"""

from __future__ import annotations

from typing import Sequence

from bitmap_paint.core.constants import BYTES_PER_LINE
from bitmap_paint.core.errors import InvalidSize
from bitmap_paint.core.grid import PixelGrid
from bitmap_paint.core.pixel import Pixel


def bytes_per_row(width: int) -> int:
    """Number of packed bytes for one row: ceil(width / 8)."""
    return (width + 7) // 8


def bytes_per_frame(width: int, height: int) -> int:
    return bytes_per_row(width) * height


def pack_row(row: Sequence[Pixel]) -> bytes:
    """Pack one row of pixels, MSB first, zero-padding the final byte."""
    out = bytearray(bytes_per_row(len(row)))
    for x, pixel in enumerate(row):
        if pixel is Pixel.ON:
            out[x // 8] |= 0x80 >> (x % 8)
    return bytes(out)


def pack_grid(grid: PixelGrid) -> bytes:
    """Pack a whole grid row by row."""
    return b"".join(pack_row(row) for row in grid.rows())


def _format_bytes(data: bytes, indent: str = "    ") -> list[str]:
    """Format bytes as hex literals, BYTES_PER_LINE per line."""
    lines: list[str] = []
    for start in range(0, len(data), BYTES_PER_LINE):
        chunk = data[start:start + BYTES_PER_LINE]
        lines.append(indent + ", ".join(f"0x{byte:02x}" for byte in chunk))
    return lines


def export_grid(grid: PixelGrid, name: str = "bitmap") -> str:
    """
    Render a single grid as a C array literal.

    Args:
        grid: Grid to export
        name: C identifier for the array

    Returns:
        Source text ending with a newline
    """
    lines = [
        f"// {grid.width}x{grid.height} pixels, "
        f"{bytes_per_row(grid.width)} bytes per row",
        f"const unsigned char {name}[] PROGMEM = {{",
    ]
    lines.append(",\n".join(_format_bytes(pack_grid(grid))))
    lines.append("};")
    return "\n".join(lines) + "\n"


def export_animation(frames: Sequence[PixelGrid], name: str = "animation") -> str:
    """
    Render a frame sequence as one C array followed by size constants.

    Each frame starts on a new line after a ``// Frame N`` comment. The
    constants FRAME_WIDTH, FRAME_HEIGHT, FRAME_COUNT and BYTES_PER_FRAME
    follow the array.

    Raises:
        InvalidSize: If there are no frames or the frames differ in size
    """
    if not frames:
        raise InvalidSize("Cannot export an empty animation")
    width, height = frames[0].size
    if any(frame.size != (width, height) for frame in frames):
        raise InvalidSize("All frames of an animation must share dimensions")

    lines = [
        f"// Animation with {len(frames)} frames, {width}x{height} pixels each",
        f"const unsigned char {name}[] PROGMEM = {{",
    ]
    blocks: list[str] = []
    for index, frame in enumerate(frames):
        block = [f"    // Frame {index + 1}"]
        block.append(",\n".join(_format_bytes(pack_grid(frame))))
        blocks.append("\n".join(block))
    lines.append(",\n".join(blocks))
    lines.append("};")
    lines.append("")
    lines.append(f"const unsigned int FRAME_WIDTH = {width};")
    lines.append(f"const unsigned int FRAME_HEIGHT = {height};")
    lines.append(f"const unsigned int FRAME_COUNT = {len(frames)};")
    lines.append(f"const unsigned int BYTES_PER_FRAME = {bytes_per_frame(width, height)};")
    return "\n".join(lines) + "\n"
