# Colors - Toolkit-independent color values and parsing
#
# Turtles store plain Color tuples; the Qt layer converts them to
# QColor at paint time.  Parsing is permissive: anything that cannot
# be understood becomes black instead of raising.

import logging
from collections import namedtuple


def _channel(value):
    return max(0, min(255, int(value)))


class Color(namedtuple("Color", ("r", "g", "b", "a"))):
    """An RGBA color with 0-255 integer channels."""

    __slots__ = ()

    def __new__(cls, r, g, b, a=255):
        return super().__new__(cls, _channel(r), _channel(g), _channel(b),
                               _channel(a))

    def hex(self):
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

COLOR_MAP = {
    "red": Color(255, 0, 0),
    "blue": Color(0, 0, 255),
    "green": Color(0, 255, 0),
    "black": BLACK,
    "white": WHITE,
    "yellow": Color(255, 255, 0),
    "orange": Color(255, 200, 0),
    "purple": Color(128, 0, 128),
    "pink": Color(255, 175, 175),
    "cyan": Color(0, 255, 255),
    "magenta": Color(255, 0, 255),
    "brown": Color(139, 69, 19),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
}


def parse_color(text):
    """Convert a color name or hex code into a Color.

    Accepts the names in COLOR_MAP (case-insensitive) and the
    "#RRGGBB" / "#RGB" hex forms.

    Returns:
        The matching Color, or BLACK when the string is not recognized.
    """
    if not text:
        return BLACK

    lower = text.strip().lower()
    if lower in COLOR_MAP:
        return COLOR_MAP[lower]

    if lower.startswith("#"):
        hexa = lower[1:]
        if len(hexa) == 3:
            hexa = "".join(c * 2 for c in hexa)
        if len(hexa) == 6:
            try:
                rgb = int(hexa, 16)
            except ValueError:
                rgb = None
            if rgb is not None:
                return Color((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)

    logging.debug("Unrecognized color %r, using black", text)
    return BLACK


def to_color(value):
    """Coerce any accepted color input into a Color.

    Args:
        value: A Color, a color string, or an (r, g, b[, a]) sequence.
               Sequences holding a float with every channel in 0..1 are
               scaled to 0..255.

    Returns:
        Color instance (BLACK for anything unusable).
    """
    if isinstance(value, Color):
        return value
    if value is None or isinstance(value, str):
        return parse_color(value)
    try:
        channels = tuple(value)
    except TypeError:
        logging.debug("Unusable color value %r, using black", value)
        return BLACK
    if len(channels) not in (3, 4):
        logging.debug("Unusable color value %r, using black", value)
        return BLACK
    try:
        # (1.0, 0, 0) is a unit color too: any float and nothing above 1
        if (any(isinstance(c, float) for c in channels)
                and all(0 <= c <= 1 for c in channels)):
            channels = tuple(round(c * 255) for c in channels)
        return Color(*channels)
    except (TypeError, ValueError):
        logging.debug("Unusable color value %r, using black", value)
        return BLACK
