"""Local logging setup.

The editor owns the terminal while it runs, so records go to a file
rather than to the console.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "bitmap_paint"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_file: File to append records to; None installs a NullHandler
        verbose: Log at DEBUG instead of INFO

    Returns:
        The package logger
    """
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.info("logging configured")
    return logger
