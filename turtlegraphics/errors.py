"""Exceptions raised by the turtle graphics toolkit."""

from __future__ import annotations


class TurtleGraphicsError(Exception):
    """Base class for all errors raised by :mod:`turtlegraphics`."""


class InvalidArgument(TurtleGraphicsError, ValueError):
    """Raised when a setter or constructor receives an out-of-range value."""


class MissingCollaborator(TurtleGraphicsError, TypeError):
    """Raised when a turtle is constructed without a canvas."""


__all__ = ["TurtleGraphicsError", "InvalidArgument", "MissingCollaborator"]
