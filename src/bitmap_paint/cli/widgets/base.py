"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


class BaseWidget(ABC):
    """A screen region that renders itself as a list of lines."""

    def __init__(self) -> None:
        self._visible = True

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        self._visible = value

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Render at most bounds.height lines of at most bounds.width columns."""
        pass
