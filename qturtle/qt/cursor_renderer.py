# Qt Cursor Renderer - paints turtle cursors over the canvas
#
# Reads each turtle's live cursor state and paints the primitives
# from CursorShapes, translated to the turtle position and rotated
# to its heading.  Runs on the GUI thread during paintEvent().

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QBrush, QPen, QPolygonF

from ..CursorShapes import OvalPrimitive, PolygonPrimitive, cursor_primitives
from .canvas import qcolor


def _apply_style(painter, prim):
    painter.setBrush(QBrush(qcolor(prim.fill)))
    if prim.outline is None:
        painter.setPen(Qt.PenStyle.NoPen)
    else:
        painter.setPen(QPen(qcolor(prim.outline)))


def paint_primitive(painter, prim):
    _apply_style(painter, prim)
    if isinstance(prim, PolygonPrimitive):
        painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in prim.coords]))
    elif isinstance(prim, OvalPrimitive):
        painter.drawEllipse(QRectF(prim.x, prim.y, prim.width, prim.height))


def paint_cursor(painter, turtle, canvas):
    """Paint one turtle cursor at its current pose.

    Returns:
        True if something was painted (visible, non-blank shape).
    """
    (x, y, heading), shape, size, fill, visible = turtle.cursor_state()
    if not visible:
        return False
    prims = cursor_primitives(shape, size, fill)
    if not prims:
        return False

    sx, sy = canvas.map_to_screen(x, y)
    painter.save()
    try:
        painter.translate(sx, sy)
        # Screen Y points down, so a counter-clockwise heading is a
        # negative rotation
        painter.rotate(-heading)
        for prim in prims:
            paint_primitive(painter, prim)
    finally:
        painter.restore()
    return True


def paint_cursors(painter, turtles, canvas):
    """Paint all cursors; later turtles end up on top."""
    painted = 0
    for turtle in list(turtles):
        if paint_cursor(painter, turtle, canvas):
            painted += 1
    return painted
