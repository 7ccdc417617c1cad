"""Codec module - text grid format and packed bitmap export."""

from bitmap_paint.codec.packed import export_animation, export_grid, pack_grid, pack_row
from bitmap_paint.codec.text_grid import decode, decode_frames, encode, encode_frames

__all__ = [
    "encode",
    "encode_frames",
    "decode",
    "decode_frames",
    "pack_row",
    "pack_grid",
    "export_grid",
    "export_animation",
]
