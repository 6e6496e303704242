# Qt Canvas - double-buffered QImage drawing surfaces
#
# Turtles draw on the back surface from the script thread.  swap()
# copies the finished back surface into the front surface, which the
# GUI thread paints.  The two only meet in swap() and paint_front(),
# and both hold the same lock, so the display never shows a half
# copied frame.

import logging
import threading

from PySide6.QtCore import Qt, QLineF, QPointF
from PySide6.QtGui import (
    QBrush, QColor, QFont, QFontMetricsF, QImage, QPainter,
    QPainterPath, QPen,
)

from .. import utils_core as Utils
from .. import ViewTransform
from ..Colors import WHITE, to_color
from ..errors import SurfaceAllocationError

SURFACE_FORMAT = QImage.Format.Format_ARGB32_Premultiplied

RENDER_HINTS = (
    QPainter.RenderHint.Antialiasing
    | QPainter.RenderHint.TextAntialiasing
    | QPainter.RenderHint.SmoothPixmapTransform
)


def qcolor(color):
    """Convert a Color (or any accepted color input) to QColor."""
    c = to_color(color)
    return QColor(c.r, c.g, c.b, c.a)


def _config_font(value, default_family="SansSerif", default_size=12):
    """Build a QFont from a "Family,size[,bold][,italic]" string."""
    family, size, bold, italic = default_family, default_size, False, False
    parts = [p.strip() for p in (value or "").split(",") if p.strip()]
    if parts:
        family = parts[0]
    if len(parts) > 1:
        try:
            size = abs(int(float(parts[1]))) or default_size
        except ValueError:
            logging.debug("Bad font size in %r, using %d", value, default_size)
    for p in parts[2:]:
        if p.lower() == "bold":
            bold = True
        elif p.lower() == "italic":
            italic = True
    weight = QFont.Weight.Bold if bold else QFont.Weight.Normal
    return QFont(family, size, weight, italic)


def make_font(font=None):
    """Turn a write() font argument into a QFont.

    Args:
        font: None for the configured default, a QFont, a
              "Family,size[,bold][,italic]" string, or a
              (family, size[, style]) tuple where style may contain
              "bold" and/or "italic".
    """
    if font is None:
        return _config_font(Utils.getStr("Font", "write", "SansSerif,12"))
    if isinstance(font, QFont):
        return font
    if isinstance(font, str):
        return _config_font(font)
    parts = [str(p) for p in font]
    if len(parts) > 2:
        parts = parts[:2] + parts[2].split()
    return _config_font(",".join(parts))


class TurtleCanvas:
    """Front/back QImage pair plus the primitives turtles draw with.

    All primitive coordinates are in screen space (origin top-left,
    +Y down); map_to_screen() converts turtle space first.
    """

    def __init__(self, width, height, background=WHITE):
        self.width = width
        self.height = height
        self.background = to_color(background)
        self.swap_lock = threading.Lock()

        self._front = QImage(width, height, SURFACE_FORMAT)
        self._back = QImage(width, height, SURFACE_FORMAT)
        if self._front.isNull() or self._back.isNull():
            raise SurfaceAllocationError(width, height)
        self.clear_all()

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    def map_to_screen(self, x, y):
        return ViewTransform.turtle_to_screen(x, y, self.width, self.height)

    # ------------------------------------------------------------------
    # Back surface primitives (script thread)
    # ------------------------------------------------------------------
    def _begin(self):
        painter = QPainter(self._back)
        painter.setRenderHints(RENDER_HINTS)
        return painter

    @staticmethod
    def _make_pen(color, width):
        """Solid pen with round caps and joins."""
        pen = QPen(qcolor(color))
        pen.setWidthF(width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        return pen

    @staticmethod
    def _make_path(points):
        path = QPainterPath()
        path.setFillRule(Qt.FillRule.WindingFill)
        path.moveTo(points[0][0], points[0][1])
        for x, y in points[1:]:
            path.lineTo(x, y)
        path.closeSubpath()
        return path

    def draw_segment(self, x1, y1, x2, y2, color, width):
        painter = self._begin()
        try:
            painter.setPen(self._make_pen(color, width))
            painter.drawLine(QLineF(x1, y1, x2, y2))
        finally:
            painter.end()

    def fill_path(self, points, color):
        """Fill the closed polygon through `points`."""
        if len(points) < 3:
            return
        painter = self._begin()
        try:
            painter.fillPath(self._make_path(points), QBrush(qcolor(color)))
        finally:
            painter.end()

    def stroke_path(self, points, color, width):
        """Stroke the outline of the closed polygon through `points`."""
        if len(points) < 2:
            return
        painter = self._begin()
        try:
            painter.strokePath(self._make_path(points), self._make_pen(color, width))
        finally:
            painter.end()

    def draw_disk(self, cx, cy, diameter, color):
        radius = diameter / 2.0
        painter = self._begin()
        try:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(qcolor(color)))
            painter.drawEllipse(QPointF(cx, cy), radius, radius)
        finally:
            painter.end()

    def text_width(self, text, font=None):
        return QFontMetricsF(make_font(font)).horizontalAdvance(text)

    def draw_text(self, x, y, text, color, font=None):
        """Draw `text` with its baseline starting at (x, y)."""
        painter = self._begin()
        try:
            painter.setPen(qcolor(color))
            painter.setFont(make_font(font))
            painter.drawText(QPointF(x, y), text)
        finally:
            painter.end()

    def clear(self):
        """Fill the back surface with the background color."""
        self._back.fill(qcolor(self.background))

    def clear_all(self):
        """Fill both surfaces with the background color."""
        color = qcolor(self.background)
        with self.swap_lock:
            self._front.fill(color)
        self._back.fill(color)

    def set_background(self, color):
        self.background = to_color(color)
        self.clear_all()

    # ------------------------------------------------------------------
    # Front surface (shared with the GUI thread)
    # ------------------------------------------------------------------
    def swap(self):
        """Copy the back surface into the front surface."""
        with self.swap_lock:
            self._copy_back_to_front()

    def _copy_back_to_front(self):
        # caller holds swap_lock
        painter = QPainter(self._front)
        try:
            painter.setCompositionMode(
                QPainter.CompositionMode.CompositionMode_Source)
            painter.drawImage(0, 0, self._back)
        finally:
            painter.end()

    def paint_front(self, painter):
        """Draw the front surface with `painter` (GUI thread)."""
        with self.swap_lock:
            painter.drawImage(0, 0, self._front)

    def snapshot(self):
        """Copy of the front surface."""
        with self.swap_lock:
            return self._front.copy()
