"""Turtle graphics on a double-buffered Qt canvas.

    from qturtle import Session

    class Square(Session):
        def setup(self):
            self.disable_looping()
            t = self.create_turtle()
            for _ in range(4):
                t.forward(100)
                t.left(90)

    Square(800, 600).run()
"""

from .Colors import Color, parse_color, to_color
from .CursorShapes import CursorShape
from .errors import SurfaceAllocationError, TurtleError
from .Turtle import Turtle
from .qt.session import Session
from .utils_core import __version__

__all__ = [
    "Color", "CursorShape", "Session", "SurfaceAllocationError", "Turtle",
    "TurtleError", "parse_color", "to_color", "__version__",
]
