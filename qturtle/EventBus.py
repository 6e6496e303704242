# EventBus - Session lifecycle notifications
#
# Each Session owns one bus and announces its lifecycle on it.  The
# window chrome and user code subscribe instead of the session
# calling into them directly.  Subscribers run on the emitting
# thread; Qt consumers forward to a signal so the work is queued onto
# the GUI thread.

import logging
import threading
from collections import defaultdict

# Lifecycle events and the arguments they carry
STARTED = "started"              # ()
SETUP_DONE = "setup_done"        # ()
FRAME = "frame"                  # (frame_number, elapsed_seconds)
STOPPED = "stopped"              # ()
TITLE_CHANGED = "title_changed"  # (title,)
CLOSED = "closed"                # ()

EVENTS = (STARTED, SETUP_DONE, FRAME, STOPPED, TITLE_CHANGED, CLOSED)


class EventBus:
    """Publish/subscribe hub restricted to the lifecycle EVENTS.

    A failing subscriber is logged and skipped so one bad listener
    cannot stop the run loop.
    """

    def __init__(self):
        self._subscribers = defaultdict(list)
        self._lock = threading.Lock()

    @staticmethod
    def _check(event_name):
        if event_name not in EVENTS:
            raise ValueError(f"unknown session event {event_name!r}")

    def on(self, event_name, callback):
        """Subscribe `callback` to `event_name`; duplicates are ignored."""
        self._check(event_name)
        with self._lock:
            if callback not in self._subscribers[event_name]:
                self._subscribers[event_name].append(callback)

    def off(self, event_name, callback):
        self._check(event_name)
        with self._lock:
            if callback in self._subscribers[event_name]:
                self._subscribers[event_name].remove(callback)

    def emit(self, event_name, *args):
        """Call every subscriber of `event_name` with `args`.

        Returns:
            Number of subscribers that ran without raising.
        """
        self._check(event_name)
        with self._lock:
            callbacks = tuple(self._subscribers[event_name])
        ok = 0
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logging.exception("Subscriber %r failed on %s", callback, event_name)
            else:
                ok += 1
        return ok
