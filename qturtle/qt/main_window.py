# Qt Main Window - window chrome around the canvas widget
#
# Owns the title bar and shutdown handling.  The session talks to it
# only through SessionSignals, so title changes and close requests
# issued from the script thread are applied on the GUI thread.

from PySide6.QtWidgets import QMainWindow

from .. import utils_core as Utils


class TurtleWindow(QMainWindow):
    """Fixed-size top level window hosting a CanvasWidget."""

    def __init__(self, canvas_widget, signals, title=None):
        super().__init__()
        self.canvas_widget = canvas_widget
        self.signals = signals

        self.setWindowTitle(title or Utils.__title__)
        self.setCentralWidget(canvas_widget)
        self.setFixedSize(canvas_widget.size())

        signals.title_changed.connect(self.setWindowTitle)
        signals.close_requested.connect(self.close)
        signals.repaint_requested.connect(canvas_widget.update)

    def showEvent(self, event):
        self.canvas_widget.start()
        self.canvas_widget.setFocus()
        super().showEvent(event)

    def closeEvent(self, event):
        """Stop repainting and tell the session the window is gone."""
        self.canvas_widget.stop()
        self.signals.window_closed.emit()
        event.accept()
