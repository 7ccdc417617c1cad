from __future__ import annotations

from enum import IntEnum


class Pixel(IntEnum):
    """A single monochrome pixel. The integer value is the stored bit."""
    OFF = 0
    ON = 1

    def toggled(self) -> Pixel:
        return Pixel.OFF if self is Pixel.ON else Pixel.ON

    @property
    def char(self) -> str:
        """Text-format character for this pixel ('0' or '1')."""
        return chr(ord('0') + self.value)

    @classmethod
    def from_char(cls, char: str) -> Pixel | None:
        """Parse a text-format character; anything but '0'/'1' yields None."""
        if char == '0':
            return cls.OFF
        if char == '1':
            return cls.ON
        return None
