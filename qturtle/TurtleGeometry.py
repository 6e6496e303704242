# TurtleGeometry - Toolkit-independent turtle motion math
#
# Heading normalization, polar steps, animation sub-step
# decomposition and arc approximation used by Turtle.
# All functions work in turtle space (origin at center, +Y up).
#
# Zero Qt dependencies.

import math

# Slowest speed value; speed is stored "inverted" (bigger = slower)
MAX_SPEED = 255


def normalize_angle(angle):
    """Normalize an angle in degrees to the range [0, 360)."""
    angle = angle % 360.0
    # -1e-20 % 360 rounds up to 360.0
    if angle >= 360.0:
        angle -= 360.0
    return angle


def polar_offset(x, y, distance, heading):
    """Return the point `distance` units away along `heading` degrees."""
    radians = math.radians(heading)
    return x + distance * math.cos(radians), y + distance * math.sin(radians)


def distance_between(x1, y1, x2, y2):
    return math.hypot(x2 - x1, y2 - y1)


def heading_towards(x1, y1, x2, y2):
    """Heading in degrees of the vector from (x1, y1) to (x2, y2)."""
    return normalize_angle(math.degrees(math.atan2(y2 - y1, x2 - x1)))


def clamp_speed(speed):
    return max(0, min(MAX_SPEED, int(speed)))


def animation_step_size(speed):
    """Length in turtle units of one animation sub-step.

    The step shrinks as the speed value grows, so larger speed values
    give finer and slower animation.  Speed 0 never sub-steps.
    """
    if speed == 0:
        return math.inf
    return 1 + (256 - speed) / 10.0


def animation_delay_ms(speed):
    """Pause in milliseconds after each animation sub-step."""
    if speed <= 0:
        return 0
    return max(1, speed // 3)


def substep_points(x1, y1, x2, y2, distance, speed):
    """Split a straight move into animation sub-step end points.

    Args:
        x1, y1: Start point.
        x2, y2: Target point.
        distance: Length of the move (used to size the steps).
        speed: Turtle speed value (> 0).

    Returns:
        List of (x, y) points; the last one is exactly (x2, y2).
    """
    steps = max(1, int(abs(distance) / animation_step_size(speed)))
    dx = (x2 - x1) / steps
    dy = (y2 - y1) / steps
    points = [(x1 + dx * i, y1 + dy * i) for i in range(1, steps)]
    points.append((x2, y2))
    return points


def circle_steps(extent):
    """Default number of chords for an arc of `extent` degrees."""
    return max(1, round(abs(extent) / 10.0))


def circle_chords(radius, extent, steps):
    """Compute the chord length and turn per chord of an arc.

    A negative radius turns the other way (the arc is drawn on the
    right side of the turtle) while still moving forward.

    Args:
        radius: Arc radius.
        extent: Arc angle in degrees.
        steps: Number of chords.

    Returns:
        Tuple (chord_length, angle_step).
    """
    angle_step = extent / steps
    chord = 2 * abs(radius) * math.sin(math.radians(abs(angle_step) / 2))
    if radius < 0:
        angle_step = -angle_step
    return chord, angle_step


def align_offset(align, text_width):
    """Horizontal anchor shift for left/center/right text alignment."""
    align = (align or "left").lower()
    if align == "center":
        return -text_width / 2.0
    if align == "right":
        return -float(text_width)
    return 0.0


def default_dot_size(pen_width):
    return max(pen_width + 4, 2 * pen_width)
