# Exceptions raised by qturtle
#
# Authoring mistakes (bad colors, unknown shapes, stray end_fill) are
# absorbed silently; only host level failures surface as exceptions.


class TurtleError(Exception):
    """Base class for all qturtle errors."""


class SurfaceAllocationError(TurtleError):
    """The canvas could not allocate its pixel surfaces."""

    def __init__(self, width, height):
        super().__init__(f"cannot allocate {width}x{height} drawing surface")
        self.width = width
        self.height = height
