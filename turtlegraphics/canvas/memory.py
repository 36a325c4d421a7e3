"""In-memory canvas used headlessly and as the backing store of the window."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from ..colors import RGB, ColorLike
from ..config import ScreenSettings
from ..geometry import XY
from ..logger import get_logger
from .base import Canvas

logger = get_logger(__name__)


@dataclass(frozen=True)
class DrawCall:
    """One drawing operation as received by the canvas."""

    kind: str  # line | dot
    points: Tuple[XY, ...]
    color: RGB
    diameter: Optional[float] = None


class ImageCanvas(Canvas):
    """Canvas that draws into a Pillow image and logs every call it receives."""

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        background: Optional[ColorLike] = None,
        *,
        settings: Optional[ScreenSettings] = None,
    ) -> None:
        super().__init__(width, height, background, settings=settings)
        self.image = Image.new("RGB", self.size, self.background)
        self._draw = ImageDraw.Draw(self.image)
        self.calls: List[DrawCall] = []
        self.version = 0

    # Drawing -----------------------------------------------------------
    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: RGB) -> None:
        self._draw.line([(x1, y1), (x2, y2)], fill=tuple(color), width=1)
        self._record(DrawCall("line", ((x1, y1), (x2, y2)), tuple(color)))

    def draw_dot(self, x: float, y: float, diameter: float, color: RGB) -> None:
        self._draw.ellipse([x, y, x + diameter, y + diameter], fill=tuple(color))
        self._record(DrawCall("dot", ((x, y),), tuple(color), diameter))

    # Inspection --------------------------------------------------------
    def get_pixel(self, x: int, y: int) -> RGB:
        return self.image.getpixel((x, y))

    def snapshot(self) -> Image.Image:
        return self.image.copy()

    def lines(self) -> List[DrawCall]:
        return [c for c in self.calls if c.kind == "line"]

    def dots(self) -> List[DrawCall]:
        return [c for c in self.calls if c.kind == "dot"]

    # internal ----------------------------------------------------------
    def _record(self, call: DrawCall) -> None:
        self.calls.append(call)
        self.version += 1
        logger.debug("%s %s color=%s", call.kind, call.points, call.color)


__all__ = ["ImageCanvas", "DrawCall"]
