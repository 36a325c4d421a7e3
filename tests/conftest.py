"""Shared fixtures for the turtle graphics tests."""

from typing import List, Tuple

import pytest

from turtlegraphics import ImageCanvas, Turtle
from turtlegraphics.canvas import Canvas


class RecordingCanvas(Canvas):
    """Canvas double that only remembers what it was asked to draw."""

    def __init__(self, width: int = 600, height: int = 600) -> None:
        super().__init__(width, height, "white")
        self.calls: List[Tuple] = []

    def draw_line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", x1, y1, x2, y2, color))

    def draw_dot(self, x, y, diameter, color):
        self.calls.append(("dot", x, y, diameter, color))


class FailingCanvas(RecordingCanvas):
    def draw_line(self, x1, y1, x2, y2, color):
        raise RuntimeError("drawing backend failed")


@pytest.fixture
def recorder():
    return RecordingCanvas()


@pytest.fixture
def turtle(recorder):
    return Turtle(recorder)


@pytest.fixture
def image_canvas():
    return ImageCanvas()
