"""Drawing surfaces for turtles."""

from .base import Canvas
from .memory import DrawCall, ImageCanvas
from .window import WindowCanvas

__all__ = ["Canvas", "DrawCall", "ImageCanvas", "WindowCanvas"]
