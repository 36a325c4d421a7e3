"""Coordinate systems used by the turtle and by canvases.

Turtles live in a space with the origin in the middle of the canvas, the X axis
pointing right and the Y axis pointing up.  Headings are measured in degrees,
clockwise from "up".  Canvases use pixel coordinates with the origin in the
top left corner and the Y axis pointing down.  :class:`CoordinateMapper` holds
the conversions between the two; it keeps no state besides the canvas size.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import InvalidArgument

XY = Tuple[float, float]

FULL_TURN = 360.0


def normalize_heading(heading: float) -> float:
    """Wrap ``heading`` (degrees) into ``[0, 360)``."""

    if not math.isfinite(heading):
        raise InvalidArgument(f"Heading must be finite, got {heading!r}")
    # float modulo by a positive divisor is never negative
    heading = heading % FULL_TURN
    # -1e-20 % 360 rounds to 360.0
    if heading >= FULL_TURN:
        heading = 0.0
    return heading


def heading_to_radians(heading: float) -> float:
    """Convert a turtle heading into a standard trigonometric angle.

    Turtle headings start at "up" and grow clockwise; the result starts at the
    positive X axis and grows counterclockwise, ready for ``cos``/``sin``.
    """

    return math.radians(90 - heading)


@dataclass(frozen=True)
class CoordinateMapper:
    """Convert between turtle space and the pixel space of a canvas."""

    width: int
    height: int

    # ------------------------------------------------------------------
    # turtle -> canvas
    # ------------------------------------------------------------------
    def to_canvas_x(self, x: float) -> float:
        return x + self.width / 2.0

    def to_canvas_y(self, y: float) -> float:
        return -y + self.height / 2.0

    def to_canvas_point(self, x: float, y: float) -> XY:
        return self.to_canvas_x(x), self.to_canvas_y(y)

    def dot_corner(self, x: float, y: float, diameter: float) -> XY:
        """Upper-left corner of the bounding box of a dot centered at ``(x, y)``.

        The radius is added to Y before mapping because the Y axis flips.
        """

        radius = diameter / 2.0
        return self.to_canvas_point(x - radius, y + radius)

    # ------------------------------------------------------------------
    # canvas -> turtle
    # ------------------------------------------------------------------
    def to_turtle_x(self, cx: float) -> float:
        return cx - self.width / 2.0

    def to_turtle_y(self, cy: float) -> float:
        return -(cy - self.height / 2.0)

    def to_turtle_point(self, cx: float, cy: float) -> XY:
        return self.to_turtle_x(cx), self.to_turtle_y(cy)

    # ------------------------------------------------------------------
    # headings
    # ------------------------------------------------------------------
    to_radians = staticmethod(heading_to_radians)


__all__ = [
    "XY",
    "FULL_TURN",
    "CoordinateMapper",
    "heading_to_radians",
    "normalize_heading",
]
