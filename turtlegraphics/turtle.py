"""The turtle: a cursor that draws on a canvas while it moves.

A turtle uses its own coordinate system with ``(0, 0)`` in the middle of the
canvas, the X axis pointing right and the Y axis pointing up.  Its heading is
the angle in degrees between its orientation and the positive Y axis, growing
clockwise.  Several turtles may share one canvas; a turtle keeps the canvas it
was created with for its whole life.

All mutators return the turtle itself so calls can be chained::

    Turtle(canvas).forward(100).right(90).forward(100).dot()
"""
from __future__ import annotations

import math
from dataclasses import replace
from typing import Optional, Sequence, Union

from .canvas import Canvas, WindowCanvas
from .colors import ColorLike, to_rgb
from .errors import InvalidArgument, MissingCollaborator
from .geometry import XY, CoordinateMapper, normalize_heading
from .logger import get_logger
from .pen import Pen

logger = get_logger(__name__)

DEFAULT_DOT_DIAMETER = 4.0

_NEW_SCREEN = object()


def _finite(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return value


class Turtle:
    """Cursor with a position, a heading and a :class:`Pen`."""

    def __init__(self, screen: Union[Canvas, object, None] = _NEW_SCREEN) -> None:
        if screen is _NEW_SCREEN:
            screen = WindowCanvas()
        if screen is None:
            raise MissingCollaborator("screen must not be None")
        self._screen: Canvas = screen  # type: ignore[assignment]
        self._mapper = CoordinateMapper(self._screen.width, self._screen.height)
        self._x = 0.0
        self._y = 0.0
        self._heading = 0.0
        self._pen = Pen()
        logger.debug("New turtle on %r", self._screen)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def screen(self) -> Canvas:
        return self._screen

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def pen(self) -> Pen:
        return self._pen

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def position(self) -> XY:
        return self._x, self._y

    @property
    def heading(self) -> float:
        """Degrees clockwise from "up", always in ``[0, 360)``."""
        return self._heading

    # ------------------------------------------------------------------
    # Turning
    # ------------------------------------------------------------------
    def right(self, angle: float) -> "Turtle":
        self._heading = normalize_heading(self._heading + _finite("angle", angle))
        return self

    def left(self, angle: float) -> "Turtle":
        return self.right(-_finite("angle", angle))

    # ------------------------------------------------------------------
    # Moving
    # ------------------------------------------------------------------
    def forward(self, distance: float) -> "Turtle":
        """Move ``distance`` pixels along the heading; negative moves backward."""

        distance = _finite("distance", distance)
        theta = self._mapper.to_radians(self._heading)
        new_x = self._x + distance * math.cos(theta)
        new_y = self._y + distance * math.sin(theta)
        return self._move_to(new_x, new_y)

    def goto(self, x: Union[float, Sequence[float]], y: Optional[float] = None) -> "Turtle":
        """Move to an absolute point, given as ``goto(x, y)`` or ``goto((x, y))``."""

        if y is None:
            try:
                x, y = x  # type: ignore[misc]
            except (TypeError, ValueError) as exc:
                raise InvalidArgument(f"Expected an (x, y) point, got {x!r}") from exc
        return self._move_to(_finite("x", x), _finite("y", y))  # type: ignore[arg-type]

    def _move_to(self, new_x: float, new_y: float) -> "Turtle":
        if self._pen.is_down():
            x1, y1 = self._mapper.to_canvas_point(self._x, self._y)
            x2, y2 = self._mapper.to_canvas_point(new_x, new_y)
            self._screen.draw_line(x1, y1, x2, y2, self._pen.color)
        self._x = new_x
        self._y = new_y
        return self

    # ------------------------------------------------------------------
    # Pen control
    # ------------------------------------------------------------------
    def pen_up(self) -> "Turtle":
        self._pen.set_down(False)
        return self

    def pen_down(self) -> "Turtle":
        self._pen.set_down(True)
        return self

    def set_pen_color(self, color: ColorLike) -> "Turtle":
        self._pen.set_color(color)
        return self

    # ------------------------------------------------------------------
    # Dots
    # ------------------------------------------------------------------
    def dot(self, diameter: Optional[float] = None, color: Optional[ColorLike] = None) -> "Turtle":
        """Draw a filled circle at the current position, even with the pen up.

        ``diameter`` defaults to 4 pixels and ``color`` to the pen's color.
        """

        diameter = DEFAULT_DOT_DIAMETER if diameter is None else _finite("diameter", diameter)
        if diameter <= 0:
            raise InvalidArgument(f"Dot diameter must be greater than 0, got {diameter}")
        rgb = self._pen.color if color is None else to_rgb(color)
        cx, cy = self._mapper.dot_corner(self._x, self._y, diameter)
        self._screen.draw_dot(cx, cy, diameter, rgb)
        return self

    # ------------------------------------------------------------------
    def clone(self) -> "Turtle":
        """Return a turtle on the same canvas with the same state and its own pen."""

        twin = Turtle(self._screen)
        twin._x, twin._y, twin._heading = self._x, self._y, self._heading
        twin._pen = replace(self._pen)
        return twin

    def __repr__(self) -> str:
        return (
            f"Turtle(x={self._x:.2f}, y={self._y:.2f}, heading={self._heading:.2f}, "
            f"pen_down={self._pen.is_down()})"
        )


__all__ = ["Turtle", "DEFAULT_DOT_DIAMETER"]
