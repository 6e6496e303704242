# Turtle - a drawing agent living on a Session canvas
#
# Holds one turtle's pose, pen, fill and cursor state and turns
# motion commands into canvas primitives.  Every command is a
# synchronous state change plus an immediate draw on the back
# surface; with speed > 0 straight moves are split into sub-steps
# with a repaint and a short sleep in between to animate them.
#
# Turtle never touches Qt directly: it talks to the session's canvas
# through draw_segment/fill_path/stroke_path/draw_disk/draw_text and
# to the session through refresh().

import logging
import time

from . import utils_core as Utils
from . import TurtleGeometry as Geometry
from .Colors import to_color
from .CursorShapes import CursorShape


def _default_speed():
    return Geometry.clamp_speed(Utils.getInt("Turtle", "speed", 50))


class Turtle:
    """A turtle drawing on the canvas of the session that created it.

    Coordinates are in turtle space: origin at the canvas center,
    +X right, +Y up.  Headings are in degrees, 0 = +X, 90 = +Y, always
    kept in [0, 360).

    The speed value is inverted: 0 draws instantly, 1 is the fastest
    animation and 255 the slowest.

    Arguments are not validated (apart from speed clamping); callers
    must pass finite numbers.
    """

    def __init__(self, session):
        self.session = session
        self.canvas = session.canvas
        self._set_defaults()
        session.register_turtle(self)

    def _set_defaults(self):
        # (x, y, heading) is replaced as a whole so the GUI thread
        # always reads a consistent pose
        self._pose = (0.0, 0.0, 0.0)
        self._pen_down = True
        self._pen_color = to_color(Utils.getStr("Turtle", "pencolor", "black"))
        self._fill_color = to_color(Utils.getStr("Turtle", "fillcolor", "black"))
        self._pen_width = Utils.getFloat("Turtle", "pensize", 1.0)
        self._visible = True
        self._shape = CursorShape.from_name(Utils.getStr("Turtle", "shape", "arrow"))
        self._turtle_size = 1.0
        self._speed = _default_speed()
        self._filling = False
        self._fill_points = None

    # ------------------------------------------------------------------
    # Motion
    # ------------------------------------------------------------------
    def move(self, distance):
        """Move along the current heading; negative goes backward."""
        x, y, heading = self._pose
        nx, ny = Geometry.polar_offset(x, y, distance, heading)
        if self._speed == 0:
            self._move_to(nx, ny)
        else:
            self._animate_to(nx, ny, abs(distance))

    def forward(self, distance):
        self.move(distance)

    fd = forward

    def backward(self, distance):
        self.move(-distance)

    bk = back = backward

    def rotate(self, angle, sign=1):
        """Turn by `angle` degrees, counter-clockwise for sign=+1."""
        x, y, heading = self._pose
        self._pose = (x, y, Geometry.normalize_angle(heading + sign * angle))

    def left(self, angle):
        self.rotate(angle, 1)

    lt = left

    def right(self, angle):
        self.rotate(angle, -1)

    rt = right

    def teleport(self, x, y):
        """Go to the absolute turtle-space point (x, y).

        Draws on the way when the pen is down and animates the same
        way move() does.
        """
        cx, cy, _ = self._pose
        if self._speed == 0:
            self._move_to(x, y)
        else:
            self._animate_to(x, y, Geometry.distance_between(cx, cy, x, y))

    goto = setpos = setposition = teleport

    def setx(self, x):
        self.teleport(x, self._pose[1])

    def sety(self, y):
        self.teleport(self._pose[0], y)

    def set_heading(self, angle):
        x, y, _ = self._pose
        self._pose = (x, y, Geometry.normalize_angle(angle))

    setheading = seth = set_heading

    def home(self):
        """Return to the origin, then face +X."""
        self.teleport(0, 0)
        self.set_heading(0)

    def towards(self, x, y):
        """Turn to face the point (x, y)."""
        cx, cy, _ = self._pose
        self.set_heading(Geometry.heading_towards(cx, cy, x, y))

    def circle(self, radius, extent=360, steps=None):
        """Draw an arc as a sequence of chords.

        The center is `radius` units to the left of the turtle; a
        negative radius puts it on the right.

        Args:
            radius: Arc radius.
            extent: Arc angle in degrees (360 = full circle).
            steps: Number of chords, default one per 10 degrees.
                   Fewer than one chord draws nothing.
        """
        if steps is None:
            steps = Geometry.circle_steps(extent)
        if steps < 1:
            logging.debug("circle() with %r steps, nothing to draw", steps)
            return
        chord, angle_step = Geometry.circle_chords(radius, extent, steps)
        for _ in range(steps):
            self.move(chord)
            self.rotate(angle_step)

    def _move_to(self, nx, ny):
        x, y, heading = self._pose
        if self._pen_down:
            sx1, sy1 = self.canvas.map_to_screen(x, y)
            sx2, sy2 = self.canvas.map_to_screen(nx, ny)
            self.canvas.draw_segment(sx1, sy1, sx2, sy2,
                                     self._pen_color, self._pen_width)
        if self._filling:
            self._fill_points.append(self.canvas.map_to_screen(nx, ny))
        self._pose = (nx, ny, heading)

    def _animate_to(self, nx, ny, distance):
        x, y, _ = self._pose
        delay = Geometry.animation_delay_ms(self._speed) / 1000.0
        for px, py in Geometry.substep_points(x, y, nx, ny, distance, self._speed):
            self._move_to(px, py)
            self.session.refresh()
            time.sleep(delay)

    # ------------------------------------------------------------------
    # Pen
    # ------------------------------------------------------------------
    def pen_down(self):
        self._pen_down = True

    pendown = pd = down = pen_down

    def pen_up(self):
        self._pen_down = False

    penup = pu = up = pen_up

    def is_down(self):
        return self._pen_down

    isdown = is_down

    def set_pen_size(self, width):
        self._pen_width = width

    pensize = width = set_pen_size

    def pen_width(self):
        return self._pen_width

    def set_pen_color(self, color):
        self._pen_color = to_color(color)

    pencolor = set_pen_color

    def get_pen_color(self):
        return self._pen_color

    def set_fill_color(self, color):
        self._fill_color = to_color(color)

    fillcolor = set_fill_color

    def get_fill_color(self):
        return self._fill_color

    def set_color(self, pen, fill=None):
        """Set pen and fill colors; one argument sets both."""
        self.set_pen_color(pen)
        self.set_fill_color(pen if fill is None else fill)

    color = set_color

    def speed(self, value=None):
        """Get the speed, or set it (clamped to 0..255)."""
        if value is None:
            return self._speed
        self._speed = Geometry.clamp_speed(value)
        return self._speed

    # ------------------------------------------------------------------
    # Fill
    # ------------------------------------------------------------------
    def begin_fill(self):
        """Start recording the outline of a shape to fill."""
        x, y, _ = self._pose
        self._fill_points = [self.canvas.map_to_screen(x, y)]
        self._filling = True

    def end_fill(self):
        """Fill the shape recorded since begin_fill().

        The outline is closed back to its first point and filled with
        the fill color; with the pen down the outline is stroked too.
        Without a pending begin_fill() nothing happens.
        """
        if self._filling and self._fill_points:
            points = self._fill_points + [self._fill_points[0]]
            self.canvas.fill_path(points, self._fill_color)
            if self._pen_down:
                self.canvas.stroke_path(points, self._pen_color, self._pen_width)
        self._filling = False
        self._fill_points = None

    def filling(self):
        return self._filling

    # ------------------------------------------------------------------
    # Stamps
    # ------------------------------------------------------------------
    def dot(self, size=None, color=None):
        """Draw a filled disk of diameter `size` at the turtle position."""
        if size is None:
            size = Geometry.default_dot_size(self._pen_width)
        color = self._pen_color if color is None else to_color(color)
        x, y, _ = self._pose
        sx, sy = self.canvas.map_to_screen(x, y)
        self.canvas.draw_disk(sx, sy, size, color)

    def write(self, text, align="left", font=None):
        """Draw `text` with its baseline anchored at the turtle position.

        Args:
            text: String to draw (non-strings are converted).
            align: "left", "center" or "right".
            font: (family, size[, style]) tuple or None for the default.
        """
        text = str(text)
        x, y, _ = self._pose
        sx, sy = self.canvas.map_to_screen(x, y)
        sx += Geometry.align_offset(align, self.canvas.text_width(text, font))
        self.canvas.draw_text(sx, sy, text, self._pen_color, font)

    def clear(self):
        """Erase the drawing; the turtle itself is left where it is."""
        self.canvas.clear()

    def reset(self):
        """Restore every default without erasing what was drawn."""
        self._set_defaults()

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------
    def show_turtle(self):
        self._visible = True

    showturtle = st = show_turtle

    def hide_turtle(self):
        self._visible = False

    hideturtle = ht = hide_turtle

    def is_visible(self):
        return self._visible

    isvisible = is_visible

    def shape(self, name=None):
        """Get the cursor shape name, or set it (unknown -> arrow)."""
        if name is None:
            return self._shape.value
        self._shape = CursorShape.from_name(name)
        return self._shape.value

    def turtle_size(self, size=None):
        """Get or set the cursor scale factor."""
        if size is None:
            return self._turtle_size
        self._turtle_size = size
        return self._turtle_size

    turtlesize = turtle_size

    def cursor_state(self):
        """Everything the cursor renderer needs, read in one go.

        Returns:
            Tuple (pose, shape, size, fill_color, visible).
        """
        return (self._pose, self._shape, self._turtle_size,
                self._fill_color, self._visible)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def pose(self):
        """Consistent (x, y, heading) snapshot."""
        return self._pose

    def position(self):
        x, y, _ = self._pose
        return x, y

    pos = position

    def xcor(self):
        return self._pose[0]

    def ycor(self):
        return self._pose[1]

    def heading(self):
        return self._pose[2]

    def distance_to(self, x, y):
        cx, cy, _ = self._pose
        return Geometry.distance_between(cx, cy, x, y)

    distance = distance_to

    def __repr__(self):
        x, y, heading = self._pose
        return f"<Turtle at ({x:.2f}, {y:.2f}) heading {heading:.2f}>"
