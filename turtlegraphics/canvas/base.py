"""Drawing surface contract used by turtles."""
from __future__ import annotations

import abc
from typing import Optional

from ..colors import RGB, ColorLike, to_rgb
from ..config import ScreenSettings
from ..errors import InvalidArgument


def _check_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Canvas {name} must be an int, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"Canvas {name} must be greater than 0, got {value}")
    return value


class Canvas(abc.ABC):
    """Fixed size raster surface that turtles draw on.

    Coordinates are pixels with the origin in the top left corner.  Concrete
    canvases must commit the pixels before a drawing call returns.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        background: Optional[ColorLike] = None,
        *,
        settings: Optional[ScreenSettings] = None,
    ) -> None:
        settings = settings or ScreenSettings()
        self.width = _check_dimension("width", settings.width if width is None else width)
        self.height = _check_dimension("height", settings.height if height is None else height)
        self.background: RGB = to_rgb(settings.background if background is None else background)

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @abc.abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGB) -> None:
        """Draw a one pixel wide segment from ``(x1, y1)`` to ``(x2, y2)``."""

    @abc.abstractmethod
    def draw_dot(self, x: float, y: float, diameter: float, color: RGB) -> None:
        """Fill a circle whose bounding box has its upper-left corner at ``(x, y)``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


__all__ = ["Canvas"]
