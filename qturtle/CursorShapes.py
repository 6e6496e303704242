# CursorShapes - Toolkit-independent turtle cursor geometry
#
# Each cursor shape is one member of the CursorShape enumeration with
# a builder that returns drawing primitives in cursor-local space:
# origin at the turtle position, +X along the heading.  A renderer
# translates/rotates the primitives to the live pose and paints them.
#
# Turtles only store the shape tag; adding a shape means adding an
# enum member and a builder, nothing else.

import enum

from .Colors import BLACK


class PolygonPrimitive:
    """A closed filled polygon."""

    __slots__ = ("coords", "fill", "outline")

    def __init__(self, coords, fill, outline=None):
        """
        Args:
            coords: List of (x, y) cursor-local coordinate pairs.
            fill: Fill Color.
            outline: Outline Color, or None for no outline.
        """
        self.coords = coords
        self.fill = fill
        self.outline = outline


class OvalPrimitive:
    """An ellipse given by its bounding box."""

    __slots__ = ("x", "y", "width", "height", "fill", "outline")

    def __init__(self, x, y, width, height, fill, outline=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.fill = fill
        self.outline = outline


class CursorShape(enum.Enum):
    ARROW = "arrow"
    CLASSIC = "classic"
    TURTLE = "turtle"
    CIRCLE = "circle"
    SQUARE = "square"
    BLANK = "blank"

    @classmethod
    def from_name(cls, name):
        """Look up a shape by name; unknown names give ARROW."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return cls.ARROW


SHAPE_NAMES = [shape.value for shape in CursorShape]


def _arrow(size, fill):
    s = 10 * size
    coords = [(s, 0), (-s * 0.7, -s * 0.5), (-s * 0.4, 0), (-s * 0.7, s * 0.5)]
    return [PolygonPrimitive(coords, fill, BLACK)]


def _classic(size, fill):
    s = 6 * size
    coords = [(s, 0), (-s, -s * 0.5), (-s * 0.5, 0), (-s, s * 0.5)]
    return [PolygonPrimitive(coords, fill, BLACK)]


def _turtle(size, fill):
    s = 10 * size
    leg = s * 0.25
    # Legs and head first so the outlined shell stays on top
    prims = [
        OvalPrimitive(-s * 0.4, -s * 0.55, leg, leg, fill),
        OvalPrimitive(s * 0.15, -s * 0.55, leg, leg, fill),
        OvalPrimitive(-s * 0.4, s * 0.3, leg, leg, fill),
        OvalPrimitive(s * 0.15, s * 0.3, leg, leg, fill),
        OvalPrimitive(s * 0.4, -s * 0.15, s * 0.4, s * 0.3, fill),
    ]
    prims.append(OvalPrimitive(-s * 0.6, -s * 0.4, s * 1.2, s * 0.8, fill, BLACK))
    return prims


def _circle(size, fill):
    s = 8 * size
    return [OvalPrimitive(-s, -s, 2 * s, 2 * s, fill, BLACK)]


def _square(size, fill):
    s = 8 * size
    coords = [(-s, -s), (s, -s), (s, s), (-s, s)]
    return [PolygonPrimitive(coords, fill, BLACK)]


def _blank(size, fill):
    return []


_BUILDERS = {
    CursorShape.ARROW: _arrow,
    CursorShape.CLASSIC: _classic,
    CursorShape.TURTLE: _turtle,
    CursorShape.CIRCLE: _circle,
    CursorShape.SQUARE: _square,
    CursorShape.BLANK: _blank,
}


def cursor_primitives(shape, size, fill):
    """Build the primitives for a cursor.

    Args:
        shape: CursorShape member or shape name.
        size: Scale factor (1.0 = normal size).
        fill: Fill Color of the cursor body.

    Returns:
        List of PolygonPrimitive/OvalPrimitive, back to front.
    """
    return _BUILDERS[CursorShape.from_name(shape)](size, fill)
