# InputState - Thread-safe single-slot keyboard/mouse state
#
# The GUI thread records events as they arrive; the script thread
# polls them.  Each slot holds only the most recent event and is
# cleared by the read that observes it, so every event is seen by at
# most one poll and older unread events are overwritten.

import threading


class InputState:
    """Last key pressed and last mouse click, with read-and-clear access.

    Writes come from the windowing layer (press_key, click_mouse);
    reads come from the sketch (take_key, take_click, ...).
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last_key = None
        self._mouse_clicked = False
        self._mouse_x = 0
        self._mouse_y = 0

    # ------------------------------------------------------------------
    # Writers (windowing thread)
    # ------------------------------------------------------------------
    def press_key(self, name):
        """Record a key press, replacing any unread key."""
        with self._lock:
            self._last_key = name

    def click_mouse(self, x, y):
        """Record a mouse click at centered coordinates (x, y)."""
        with self._lock:
            self._mouse_x = x
            self._mouse_y = y
            self._mouse_clicked = True

    # ------------------------------------------------------------------
    # Readers (script thread)
    # ------------------------------------------------------------------
    def take_key(self):
        """Return the last key name and clear it, or None."""
        with self._lock:
            key = self._last_key
            self._last_key = None
        return key

    def take_key_if(self, name):
        """Clear the last key only if it equals `name` (case-insensitive).

        Returns:
            True when the key matched and was consumed.
        """
        wanted = name.lower()
        with self._lock:
            if self._last_key is not None and self._last_key == wanted:
                self._last_key = None
                return True
        return False

    def take_click(self):
        """Return True once per recorded click."""
        with self._lock:
            clicked = self._mouse_clicked
            self._mouse_clicked = False
        return clicked

    def mouse_position(self):
        """Centered (x, y) of the last click, read as one pair."""
        with self._lock:
            return self._mouse_x, self._mouse_y
