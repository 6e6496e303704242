# Qt Session - window, run loop and turtle collection
#
# A Session owns one canvas, the window showing it and every turtle
# drawing on it.  run() shows the window, starts the script thread
# (setup() once, then loop() per frame, or a single static frame) and
# runs the Qt event loop on the calling thread until the window is
# closed.
#
# Sketches either subclass Session and override setup()/loop(), or
# pass plain callables:
#
#     def setup(session):
#         t = session.create_turtle()
#         t.forward(100)
#
#     Session(800, 600, setup=setup).run()

import logging
import sys
import threading
import time

from PySide6.QtWidgets import QApplication

from .. import utils_core as Utils
from .. import EventBus as Events
from ..Colors import to_color
from ..EventBus import EventBus
from ..InputState import InputState
from ..Turtle import Turtle
from .canvas import TurtleCanvas
from .canvas_widget import CanvasWidget
from .main_window import TurtleWindow
from .signals import SessionSignals

# Pause that lets the GUI thread pick up a repaint request
REFRESH_PAUSE = 0.001
# How long run() waits for the script thread after the window closed
JOIN_TIMEOUT = 2.0


class Session:
    """Turtle graphics window with a setup/loop run model.

    States: created -> running (static or animated) -> stopped.
    The drawing mode is read once setup() returns, so disable_looping()
    may be called before run() or from inside setup().
    """

    def __init__(self, width=None, height=None, title=None, setup=None, loop=None):
        if width is None:
            width = Utils.getInt("Screen", "width", 800)
        if height is None:
            height = Utils.getInt("Screen", "height", 600)
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")

        self._app = QApplication.instance() or QApplication(sys.argv)

        self.turtles = []
        self.input = InputState()
        self.events = EventBus()
        self.signals = SessionSignals()

        self._setup_hook = setup
        self._loop_hook = loop
        self._running = False
        self._animated = True
        self._frame_rate = max(1, Utils.getInt("Screen", "framerate", 60))
        self._static_poll = Utils.getInt("Screen", "staticpoll", 100) / 1000.0
        self._title = title or Utils.getStr("Screen", "title", Utils.__title__)
        self._worker = None

        self.canvas = TurtleCanvas(
            width, height, to_color(Utils.getStr("Screen", "background", "white")))
        self.widget = CanvasWidget(
            self.canvas, self.turtles, self.input,
            Utils.getInt("Screen", "renderfps", 60))
        self.window = TurtleWindow(self.widget, self.signals, self._title)

        self.signals.window_closed.connect(self._on_window_closed)
        self.events.on(Events.TITLE_CHANGED, self.signals.title_changed.emit)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def setup(self):
        """Called once when the session starts. Override or pass setup=."""
        if self._setup_hook is not None:
            self._setup_hook(self)

    def loop(self):
        """Called once per animated frame, after the canvas is cleared."""
        if self._loop_hook is not None:
            self._loop_hook(self)

    # ------------------------------------------------------------------
    # Turtles
    # ------------------------------------------------------------------
    def create_turtle(self):
        return Turtle(self)

    def register_turtle(self, turtle):
        """Append `turtle` to the draw order (called by Turtle itself)."""
        if turtle not in self.turtles:
            self.turtles.append(turtle)

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------
    def run(self):
        """Show the window and run until it is closed."""
        self._begin()
        self.window.show()
        self._worker = threading.Thread(
            target=self._script_main, name="qturtle-script", daemon=True)
        self._worker.start()
        self._app.exec()
        self._running = False
        self._worker.join(JOIN_TIMEOUT)
        if self._worker.is_alive():
            logging.warning("Sketch still drawing after window closed")

    mainloop = run

    def _begin(self):
        self._running = True
        logging.debug("Session started (%dx%d)", self.canvas.width, self.canvas.height)
        self.events.emit(Events.STARTED)

    def _script_main(self):
        """Body of the script thread."""
        try:
            self.setup()
            self.events.emit(Events.SETUP_DONE)
            if self._animated:
                self._run_animated()
            else:
                self._run_static()
        except Exception:
            logging.exception("Sketch raised an exception, stopping")
            self._running = False
        finally:
            logging.debug("Session stopped")
            self.events.emit(Events.STOPPED)

    def _run_static(self):
        self.canvas.swap()
        self.signals.repaint_requested.emit()
        while self._running:
            time.sleep(self._static_poll)

    def _run_animated(self):
        frame = 0
        while self._running:
            start = time.monotonic()

            self.canvas.clear()
            self.loop()
            self.canvas.swap()
            self.signals.repaint_requested.emit()

            elapsed = time.monotonic() - start
            frame += 1
            self.events.emit(Events.FRAME, frame, elapsed)

            # An overrun is not made up for; the next frame just starts
            delay = 1.0 / self._frame_rate - elapsed
            if delay > 0:
                time.sleep(delay)

    def stop(self):
        """Leave the run loop after the current iteration."""
        self._running = False

    def close(self):
        """Close the window (safe from any thread)."""
        self.signals.close_requested.emit()

    def is_running(self):
        return self._running

    def _on_window_closed(self):
        self._running = False
        self.events.emit(Events.CLOSED)

    # ------------------------------------------------------------------
    # Screen controls
    # ------------------------------------------------------------------
    def set_background(self, color):
        """Set the background color; clears both surfaces."""
        self.canvas.set_background(to_color(color))
        self.signals.repaint_requested.emit()

    bgcolor = set_background

    def set_title(self, title):
        self._title = str(title)
        self.events.emit(Events.TITLE_CHANGED, self._title)

    title = set_title

    def get_title(self):
        return self._title

    def set_frame_rate(self, fps):
        if fps < 1:
            logging.warning("Ignoring frame rate %r, keeping %d", fps, self._frame_rate)
            return
        self._frame_rate = int(fps)

    frame_rate = set_frame_rate

    def get_frame_rate(self):
        return self._frame_rate

    def enable_looping(self):
        self._animated = True

    def disable_looping(self):
        self._animated = False

    no_loop = disable_looping

    def is_looping(self):
        return self._animated

    def clear(self):
        """Erase the back surface."""
        self.canvas.clear()

    def refresh(self):
        """Publish the back surface now and give the GUI a moment."""
        self.canvas.swap()
        self.signals.repaint_requested.emit()
        time.sleep(REFRESH_PAUSE)

    def update(self):
        """Ask for a repaint without swapping."""
        self.signals.repaint_requested.emit()

    def screen_width(self):
        return self.canvas.width

    def screen_height(self):
        return self.canvas.height

    # ------------------------------------------------------------------
    # Input polling
    # ------------------------------------------------------------------
    def get_last_key(self):
        """Last key pressed since the previous call, or None."""
        return self.input.take_key()

    def check_key(self, name):
        """True (and consume it) if the last key pressed was `name`."""
        return self.input.take_key_if(name)

    def is_mouse_clicked(self):
        """True once per mouse click."""
        return self.input.take_click()

    def mouse_x(self):
        return self.input.mouse_position()[0]

    def mouse_y(self):
        return self.input.mouse_position()[1]
