# Qt Canvas Widget - displays the front surface and turtle cursors
#
# A fixed-size QWidget that repaints on a QTimer (and whenever the
# session asks for it), painting the canvas front surface and then
# every visible turtle cursor.  Keyboard and mouse events are stored
# in the session InputState for polling; no callbacks are exposed.

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QKeyEvent, QKeySequence, QMouseEvent, QPainter
from PySide6.QtWidgets import QWidget

from .. import ViewTransform
from .cursor_renderer import paint_cursors


def _code(key):
    return getattr(key, "value", key)


# Keys reported by name instead of by the text they type
SPECIAL_KEYS = {
    _code(Qt.Key.Key_Up): "up",
    _code(Qt.Key.Key_Down): "down",
    _code(Qt.Key.Key_Left): "left",
    _code(Qt.Key.Key_Right): "right",
    _code(Qt.Key.Key_Space): "space",
    _code(Qt.Key.Key_Return): "enter",
    _code(Qt.Key.Key_Enter): "enter",
    _code(Qt.Key.Key_Escape): "escape",
}


def key_name(key, text=""):
    """Name used for a key press in the polling API.

    Arrow keys, space, enter and escape get fixed names; other keys
    report the lower-cased character they type, or the lower-cased
    Qt key name when they type nothing (e.g. "shift", "f1").

    Args:
        key: Qt key code (int or Qt.Key).
        text: Text produced by the key event.
    """
    code = _code(key)
    if code in SPECIAL_KEYS:
        return SPECIAL_KEYS[code]
    if text and text.isprintable():
        return text.lower()
    return QKeySequence(code).toString().lower()


class CanvasWidget(QWidget):
    """Widget showing a TurtleCanvas plus the cursors of its turtles.

    Args:
        canvas: The TurtleCanvas to display.
        turtles: The session's live turtle list (read on every paint).
        input_state: InputState receiving key and mouse events.
        render_fps: Periodic repaint rate.
    """

    def __init__(self, canvas, turtles, input_state, render_fps=60, parent=None):
        super().__init__(parent)
        self.canvas = canvas
        self.turtles = turtles
        self.input_state = input_state

        self.setFixedSize(canvas.width, canvas.height)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self._timer = QTimer(self)
        self._timer.setInterval(max(1, 1000 // max(1, render_fps)))
        self._timer.timeout.connect(self.update)

    def start(self):
        """Start the periodic repaint timer."""
        self._timer.start()

    def stop(self):
        """Stop the periodic repaint timer."""
        self._timer.stop()

    def is_rendering(self):
        return self._timer.isActive()

    def render_frame(self, painter):
        """Paint front surface and cursors with an arbitrary painter."""
        self.canvas.paint_front(painter)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        return paint_cursors(painter, self.turtles, self.canvas)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.render_frame(painter)
        finally:
            painter.end()

    def keyPressEvent(self, event: QKeyEvent):
        self.input_state.press_key(key_name(event.key(), event.text()))
        event.accept()

    def mousePressEvent(self, event: QMouseEvent):
        pos = event.position()
        mx, my = ViewTransform.mouse_to_turtle(
            pos.x(), pos.y(), self.width(), self.height())
        self.input_state.click_mouse(mx, my)
        event.accept()
