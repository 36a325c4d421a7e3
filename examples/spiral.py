"""Example script that walks a turtle along a square spiral and shows the result."""
from __future__ import annotations

from turtlegraphics import Turtle, WindowCanvas
from turtlegraphics.logger import setup_logger

PALETTE = ["#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00"]


def build_spiral(turtle: Turtle, turns: int = 60, step: float = 4.0, angle: float = 91.0) -> Turtle:
    for i in range(turns):
        turtle.set_pen_color(PALETTE[i % len(PALETTE)])
        turtle.forward(step * (i + 1)).right(angle)
        if i % 10 == 9:
            turtle.dot(6)
    return turtle


def main() -> None:
    setup_logger("DEBUG")
    screen = WindowCanvas(600, 600, "white")
    build_spiral(Turtle(screen))
    screen.show()


if __name__ == "__main__":
    main()
