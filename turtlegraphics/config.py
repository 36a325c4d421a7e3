"""Configuration models for turtle screens and the viewer window."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import ColorLike


@dataclass
class ScreenSettings:
    """Pixel dimensions and background of a drawing surface."""

    width: int = 600
    height: int = 600
    background: ColorLike = "white"

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass
class WindowSettings:
    """Options forwarded to ``ui.run`` when a canvas is shown."""

    title: str = "Turtle Graphics"
    favicon: str = "🐢"
    host: str = "127.0.0.1"
    port: int = 8080
    native: bool = False
    show: bool = True
    refresh_interval: float = 0.1
