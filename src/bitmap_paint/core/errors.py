"""Error kinds raised while creating or decoding grids."""


class GridError(ValueError):
    """Base class for grid construction and format errors."""


class InvalidSize(GridError):
    """A grid or animation dimension is zero (or negative)."""


class SizeExceeded(GridError):
    """A grid or animation dimension is over its maximum."""


class InvalidFormat(GridError):
    """Text-format header is missing or cannot be parsed."""
