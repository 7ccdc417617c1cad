"""Shared constants for monochrome raster editing."""

# Canvas bounds
MAX_WIDTH = 128
MAX_HEIGHT = 64

# Animation bounds (milliseconds)
MAX_FRAMES = 16
MIN_FRAME_DELAY_MS = 50
MAX_FRAME_DELAY_MS = 1000
FRAME_DELAY_STEP_MS = 50
DEFAULT_FRAME_DELAY_MS = 100

# Editor defaults
DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 16

# Packed export layout
BYTES_PER_LINE = 12

# Block characters for terminal display (two columns per pixel)
BLOCK = {
    "on": "██",        # Full block
    "off": "  ",
    "cursor_on": "▓▓",  # Dark shade
    "cursor_off": "▒▒", # Medium shade
}

# Box drawing characters for the canvas border
BORDER = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
}
