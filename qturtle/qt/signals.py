# Qt signal definitions for qturtle
#
# The script thread never touches widgets.  It emits these signals
# and Qt queues them onto the GUI thread, where the window and the
# canvas widget are connected.

from PySide6.QtCore import QObject, Signal


class SessionSignals(QObject):
    """Signal hub between the script thread and the GUI thread.

    Created on the GUI thread by Session; emitting from the script
    thread is safe because the receivers live on the GUI thread and
    auto connections become queued connections.
    """

    # Script thread -> GUI thread
    repaint_requested = Signal()           # front surface changed
    title_changed = Signal(str)            # new window title
    close_requested = Signal()             # Session.close()

    # GUI thread -> session
    window_closed = Signal()               # user closed the window
