"""Top-level package for the turtle graphics toolkit.

This package exposes a turtle that draws lines and dots while it moves, the
coordinate mapping between turtle space and canvas pixels, and canvases that
either keep the drawing in memory or show it in a NiceGUI window.
"""

from .canvas import Canvas, DrawCall, ImageCanvas, WindowCanvas
from .colors import BLACK, WHITE, to_rgb
from .config import ScreenSettings, WindowSettings
from .errors import InvalidArgument, MissingCollaborator, TurtleGraphicsError
from .geometry import XY, CoordinateMapper, heading_to_radians, normalize_heading
from .pen import Pen
from .turtle import DEFAULT_DOT_DIAMETER, Turtle

__all__ = [
    "Turtle",
    "Pen",
    "CoordinateMapper",
    "XY",
    "heading_to_radians",
    "normalize_heading",
    "Canvas",
    "DrawCall",
    "ImageCanvas",
    "WindowCanvas",
    "ScreenSettings",
    "WindowSettings",
    "BLACK",
    "WHITE",
    "to_rgb",
    "DEFAULT_DOT_DIAMETER",
    "TurtleGraphicsError",
    "InvalidArgument",
    "MissingCollaborator",
]
