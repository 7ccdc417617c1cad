"""Text grid format - human-readable, round-trippable grid encoding.

Single grid::

    <width> <height>
    0110...        (height rows of width '0'/'1' characters)

Frame sequence::

    <width> <height> <frames>
    ...            (frames * height rows, frames concatenated in order)

Decoding is lenient about the data rows: blank lines are skipped,
characters other than '0'/'1' and characters past the declared width
are ignored, and missing rows stay OFF. Only the header is strict.
"""

from __future__ import annotations

from bitmap_paint.core.constants import MAX_FRAMES
from bitmap_paint.core.errors import InvalidFormat, InvalidSize, SizeExceeded
from bitmap_paint.core.grid import PixelGrid, check_dimensions
from bitmap_paint.core.pixel import Pixel


def encode(grid: PixelGrid) -> str:
    """Encode a single grid in the text format."""
    lines = [f"{grid.width} {grid.height}"]
    lines.extend(_encode_rows(grid))
    return "\n".join(lines) + "\n"


def encode_frames(frames: list[PixelGrid]) -> str:
    """
    Encode a frame sequence in the text format.

    A single frame is written with the plain two-number header, so it
    stays readable by :func:`decode`.

    Raises:
        InvalidSize: If the sequence is empty or the frames differ in size
    """
    if not frames:
        raise InvalidSize("Cannot encode an empty frame sequence")
    if len(frames) == 1:
        return encode(frames[0])

    first = frames[0]
    lines = [f"{first.width} {first.height} {len(frames)}"]
    for frame in frames:
        if frame.size != first.size:
            raise InvalidSize("All frames of an animation must share dimensions")
        lines.extend(_encode_rows(frame))
    return "\n".join(lines) + "\n"


def decode(text: str) -> PixelGrid:
    """
    Decode a single grid. For a frame sequence, returns the first frame.

    Raises:
        InvalidFormat: If the header is missing or unparsable
        InvalidSize: If a dimension is zero
        SizeExceeded: If a dimension is over its maximum
    """
    lines = _tokenize(text)
    width, height, _ = _parse_header(lines[0] if lines else None)
    grid = PixelGrid(width, height)
    _fill_rows(grid, lines[1:1 + height])
    return grid


def decode_frames(text: str) -> list[PixelGrid]:
    """
    Decode a frame sequence (or a single grid as a one-frame sequence).

    Raises:
        InvalidFormat: If the header is missing or unparsable
        InvalidSize: If a dimension or the frame count is zero
        SizeExceeded: If a dimension or the frame count is over its maximum
    """
    lines = _tokenize(text)
    width, height, count = _parse_header(lines[0] if lines else None)
    check_dimensions(width, height)
    if count < 1:
        raise InvalidSize("Frame count must be at least 1")
    if count > MAX_FRAMES:
        raise SizeExceeded(f"{count} frames exceeds maximum of {MAX_FRAMES}")

    data = lines[1:]
    frames: list[PixelGrid] = []
    for index in range(count):
        grid = PixelGrid(width, height)
        start = index * height
        _fill_rows(grid, data[start:start + height])
        frames.append(grid)
    return frames


def _encode_rows(grid: PixelGrid) -> list[str]:
    return ["".join(pixel.char for pixel in row) for row in grid.rows()]


def _tokenize(text: str) -> list[str]:
    """Split on newlines, dropping empty lines."""
    lines = (line.rstrip("\r") for line in text.split("\n"))
    return [line for line in lines if line]


def _parse_header(header: str | None) -> tuple[int, int, int]:
    """Parse '<width> <height> [<frames>]'. Extra tokens are ignored."""
    if header is None:
        raise InvalidFormat("Missing header line")

    tokens = header.split()
    if len(tokens) < 2:
        raise InvalidFormat(f"Header needs width and height: {header!r}")

    values: list[int] = []
    for token in tokens[:3]:
        if not token.isdecimal():
            if len(values) == 2:
                break  # Trailing non-numeric token after width/height
            raise InvalidFormat(f"Invalid header value {token!r}")
        values.append(int(token))

    width, height = values[0], values[1]
    count = values[2] if len(values) > 2 else 1
    return width, height, count


def _fill_rows(grid: PixelGrid, rows: list[str]) -> None:
    for y, line in enumerate(rows):
        for x, char in enumerate(line[:grid.width]):
            pixel = Pixel.from_char(char)
            if pixel is not None:
                grid.set(x, y, pixel)
