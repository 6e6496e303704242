# Demo sketches
#
# Small Session subclasses showing the drawing API: a recursive
# tree, filled polygons, a rainbow spiral and an interactive sketch
# driven by keyboard/mouse polling.  Run them with
# ``python -m qturtle.qt.app <name>``.

import colorsys
from collections import deque

from .qt.session import Session


class FractalTree(Session):
    """Recursive binary tree, drawn once."""

    def __init__(self, depth=10, trunk=100):
        super().__init__(800, 600)
        self.depth = depth
        self.trunk = trunk
        self.t = None

    def setup(self):
        self.disable_looping()
        self.set_title("Fractal Tree")
        self.set_background((50, 50, 100))

        self.t = self.create_turtle()
        self.t.speed(1)
        self.t.hide_turtle()
        self.t.set_pen_size(2)

        self.t.pen_up()
        self.t.teleport(0, -250)
        self.t.pen_down()
        self.t.set_heading(90)

        self.branch(self.trunk, self.depth)

    def branch(self, length, depth):
        if depth == 0 or length < 2:
            return
        t = self.t

        # Greener towards the tips
        green = min(1.0, 0.2 + (10 - depth) * 0.08)
        red = max(0.1, 0.4 - depth * 0.03)
        t.set_pen_color((red, green, 0.1))
        t.set_pen_size(depth + 1)
        t.forward(length)

        x, y = t.position()
        heading = t.heading()
        for turn in (t.left, t.right):
            turn(30)
            self.branch(length * 0.7, depth - 1)
            t.pen_up()
            t.teleport(x, y)
            t.set_heading(heading)
            t.pen_down()


def regular_polygon(t, sides, length, fill=False):
    """Draw a regular polygon counter-clockwise from the turtle position."""
    if fill:
        t.begin_fill()
    for _ in range(sides):
        t.forward(length)
        t.left(360.0 / sides)
    if fill:
        t.end_fill()


class Polygons(Session):
    """Outlined and filled regular polygons plus a filled circle."""

    SHAPES = [
        # (sides, length, x, y, pen, fill)
        (3, 80, -250, 100, "red", None),
        (4, 70, -50, 100, "blue", (200, 200, 255)),
        (5, 50, 150, 100, "green", (200, 255, 200)),
        (6, 40, 100, -150, "magenta", (255, 200, 255)),
    ]

    def __init__(self):
        super().__init__(800, 600)

    def setup(self):
        self.disable_looping()
        self.set_title("Polygons")

        t = self.create_turtle()
        t.speed(10)
        t.set_pen_size(2)

        for sides, length, x, y, pen, fill in self.SHAPES:
            t.pen_up()
            t.teleport(x, y)
            t.pen_down()
            t.set_pen_color(pen)
            if fill is not None:
                t.set_fill_color(fill)
            regular_polygon(t, sides, length, fill is not None)

        t.pen_up()
        t.teleport(-150, -150)
        t.pen_down()
        t.set_color("orange", (255, 230, 200))
        t.begin_fill()
        t.circle(50)
        t.end_fill()

        t.hide_turtle()


class Spiral(Session):
    """Rainbow spiral of growing segments."""

    def __init__(self, iterations=360):
        super().__init__(800, 600)
        self.iterations = iterations

    def setup(self):
        self.disable_looping()
        self.set_title("Rainbow Spiral")
        self.set_background("gray")

        t = self.create_turtle()
        t.speed(1)
        t.set_pen_size(2)
        for i in range(self.iterations):
            t.set_pen_color(colorsys.hsv_to_rgb(i / self.iterations, 1.0, 1.0))
            t.forward(i * 0.5)
            t.left(59)
        t.hide_turtle()


class Steer(Session):
    """Animated sketch steered from the keyboard and mouse.

    Left/right arrows turn, space toggles the pen, a click jumps to
    the clicked point and escape closes the window.  The newest TRAIL
    positions are redrawn every frame.
    """

    STEP = 4
    TURN = 10
    TRAIL = 600

    def __init__(self):
        super().__init__(800, 600)
        self.t = None
        self.trail = deque(maxlen=self.TRAIL)

    def setup(self):
        self.set_title("Steer: arrows, space, click, escape")
        self.set_frame_rate(30)
        self.t = self.create_turtle()
        self.t.speed(0)
        self.t.shape("turtle")
        self.t.set_color("green")

    def loop(self):
        t = self.t
        key = self.get_last_key()
        if key == "escape":
            self.close()
            return
        if key == "left":
            t.left(self.TURN)
        elif key == "right":
            t.right(self.TURN)
        elif key == "space":
            if t.is_down():
                t.pen_up()
            else:
                t.pen_down()

        if self.is_mouse_clicked():
            t.pen_up()
            t.teleport(self.mouse_x(), self.mouse_y())
            t.pen_down()
        else:
            t.forward(self.STEP)

        if t.is_down():
            self.trail.append(t.position())
        else:
            self.trail.append(None)

        # Canvas was cleared before loop(); replay the trail
        previous = None
        for point in self.trail:
            if point is not None and previous is not None:
                sx1, sy1 = self.canvas.map_to_screen(*previous)
                sx2, sy2 = self.canvas.map_to_screen(*point)
                self.canvas.draw_segment(sx1, sy1, sx2, sy2, t.get_pen_color(), 2)
            previous = point


DEMOS = {
    "tree": FractalTree,
    "polygons": Polygons,
    "spiral": Spiral,
    "steer": Steer,
}
