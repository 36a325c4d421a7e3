"""The drawing instrument held by a :class:`~turtlegraphics.turtle.Turtle`."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .colors import BLACK, RGB, ColorLike, to_rgb
from .errors import InvalidArgument


@dataclass
class Pen:
    """Pen state: whether it touches the canvas, its color and its width.

    A turtle only draws lines while its pen is down.  The width is kept for
    callers that inspect it; canvases draw one pixel wide strokes.
    """

    down: bool = True
    color: RGB = BLACK
    width: float = 1.0

    def __post_init__(self) -> None:
        self.set_color(self.color)
        self.set_width(self.width)

    def is_down(self) -> bool:
        return self.down

    def set_down(self, down: bool) -> None:
        self.down = bool(down)

    def set_color(self, color: ColorLike) -> None:
        self.color = to_rgb(color)

    def set_width(self, width: float) -> None:
        try:
            value = float(width)
        except (TypeError, ValueError) as exc:
            raise InvalidArgument(f"Pen width must be a number, got {width!r}") from exc
        if not math.isfinite(value) or value <= 0:
            raise InvalidArgument(f"Pen width must be greater than 0, got {width!r}")
        self.width = value


__all__ = ["Pen"]
