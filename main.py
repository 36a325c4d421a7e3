"""Entry point: draw a small demo and show it in the NiceGUI viewer."""

from turtlegraphics import Turtle, WindowCanvas
from turtlegraphics.logger import setup_logger


if __name__ == "__main__":
    setup_logger("INFO")
    screen = WindowCanvas()
    t = Turtle(screen).set_pen_color("navy")
    for _ in range(5):
        t.forward(200).right(144)
    t.pen_up().goto(0, -150).dot(12, "crimson")
    screen.show(host="0.0.0.0", port=8080)
