# Qt (PySide6) front end: surfaces, window, widget and session.
