"""Persistent editor defaults and load/save helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from bitmap_paint.core.constants import (
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_HEIGHT,
    MAX_WIDTH,
)
from bitmap_paint.edit.frames import clamp_delay

logger = logging.getLogger(__name__)


def config_path() -> Path:
    return Path.home() / ".config" / "bitmap-paint" / "config.json"


@dataclass
class EditorConfig:
    """Editor defaults; command-line options override these."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    frame_delay_ms: int = DEFAULT_FRAME_DELAY_MS
    fill_capacity: int | None = None  # None = width * height

    def normalized(self) -> EditorConfig:
        """Return a copy with every value clamped to the supported bounds."""
        capacity = self.fill_capacity
        if capacity is not None and capacity < 1:
            capacity = None
        return EditorConfig(
            width=max(1, min(MAX_WIDTH, self.width)),
            height=max(1, min(MAX_HEIGHT, self.height)),
            frame_delay_ms=clamp_delay(self.frame_delay_ms),
            fill_capacity=capacity,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EditorConfig:
        """Build from a mapping, ignoring unknown keys and ill-typed values."""
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if value is None and f.name == "fill_capacity":
                values[f.name] = None
            elif isinstance(value, int) and not isinstance(value, bool):
                values[f.name] = value
            else:
                logger.warning("Ignoring config value %s=%r", f.name, value)
                values[f.name] = getattr(defaults, f.name)
        return cls(**values).normalized()


def load_config(path: Path | None = None) -> EditorConfig:
    """Load the config file; a missing or malformed file gives the defaults."""
    path = path or config_path()
    if not path.exists():
        return EditorConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read config %s: %s", path, e)
        return EditorConfig()
    if not isinstance(data, dict):
        logger.warning("Config %s is not a JSON object", path)
        return EditorConfig()
    return EditorConfig.from_dict(data)


def save_config(config: EditorConfig, path: Path | None = None) -> Path:
    """Write the config file, creating its directory. Returns the path written."""
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(config.normalized()), indent=2) + "\n", encoding="utf-8")
    return path
