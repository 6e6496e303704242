# ViewTransform - Toolkit-independent coordinate transformation math
#
# Converts between turtle space (origin at the canvas center, +Y up)
# and screen space (origin at the top-left corner, +Y down).
#
# Zero Qt dependencies. Can be used by any rendering backend.


def turtle_to_screen(x, y, width, height):
    """Map a turtle-space point to surface pixel coordinates.

    This is the core transformation: turtle (x, y) -> screen (sx, sy).
    Note: the Y-axis is flipped for screen coordinates.

    Args:
        x: Turtle-space x coordinate.
        y: Turtle-space y coordinate.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        Tuple (sx, sy) of floats in screen space.
    """
    return width / 2.0 + x, height / 2.0 - y


def mouse_to_turtle(px, py, width, height):
    """Convert a widget pixel position into centered integer coordinates.

    Mouse positions are reported relative to the screen center with
    +Y up, truncated to whole pixels like the widget geometry.

    Args:
        px: Widget x position in pixels.
        py: Widget y position in pixels.
        width: Widget width.
        height: Widget height.

    Returns:
        Tuple (mx, my) of ints.
    """
    return int(px) - width // 2, height // 2 - int(py)
