"""Tests for the toolkit-independent modules: geometry, colors, shapes, input, events, config."""

import math
import os
import tempfile
import threading
import unittest
from unittest.mock import patch

# Offscreen rendering, must be set before any Qt import
os.environ["QT_QPA_PLATFORM"] = "offscreen"

from qturtle import EventBus as Events  # noqa: E402
from qturtle import TurtleGeometry as Geometry  # noqa: E402
from qturtle import ViewTransform  # noqa: E402
from qturtle import utils_core as Utils  # noqa: E402
from qturtle.Colors import BLACK, WHITE, Color, parse_color, to_color  # noqa: E402
from qturtle.CursorShapes import (  # noqa: E402
    OvalPrimitive,
    PolygonPrimitive,
    SHAPE_NAMES,
    CursorShape,
    cursor_primitives,
)
from qturtle.EventBus import EventBus  # noqa: E402
from qturtle.InputState import InputState  # noqa: E402


class TestNormalizeAngle(unittest.TestCase):

    def test_range(self):
        for angle in (-1e9, -720.5, -360, -1e-20, 0, 1e-9, 359.999, 360, 721, 1e12):
            a = Geometry.normalize_angle(angle)
            self.assertGreaterEqual(a, 0.0, angle)
            self.assertLess(a, 360.0, angle)

    def test_values(self):
        self.assertEqual(Geometry.normalize_angle(360), 0)
        self.assertEqual(Geometry.normalize_angle(-90), 270)
        self.assertEqual(Geometry.normalize_angle(450), 90)


class TestMotionMath(unittest.TestCase):

    def test_polar_offset(self):
        x, y = Geometry.polar_offset(1, 2, 10, 90)
        self.assertAlmostEqual(x, 1)
        self.assertAlmostEqual(y, 12)

    def test_heading_towards(self):
        self.assertAlmostEqual(Geometry.heading_towards(0, 0, 0, -5), 270)
        self.assertAlmostEqual(Geometry.heading_towards(1, 1, 2, 2), 45)

    def test_clamp_speed(self):
        self.assertEqual(Geometry.clamp_speed(-1), 0)
        self.assertEqual(Geometry.clamp_speed(300), Geometry.MAX_SPEED)
        self.assertEqual(Geometry.clamp_speed(12.7), 12)


class TestAnimationMath(unittest.TestCase):

    def test_step_size_shrinks_with_speed(self):
        self.assertTrue(math.isinf(Geometry.animation_step_size(0)))
        self.assertAlmostEqual(Geometry.animation_step_size(1), 26.5)
        self.assertAlmostEqual(Geometry.animation_step_size(255), 1.1)
        self.assertGreater(Geometry.animation_step_size(10),
                           Geometry.animation_step_size(100))

    def test_delay(self):
        self.assertEqual(Geometry.animation_delay_ms(0), 0)
        self.assertEqual(Geometry.animation_delay_ms(1), 1)
        self.assertEqual(Geometry.animation_delay_ms(50), 16)
        self.assertEqual(Geometry.animation_delay_ms(255), 85)

    def test_substeps_end_exactly_on_target(self):
        points = Geometry.substep_points(0.1, 0.2, 33.3, -7.7, 34.1, 200)
        self.assertGreater(len(points), 1)
        self.assertEqual(points[-1], (33.3, -7.7))

    def test_short_move_is_one_step(self):
        self.assertEqual(Geometry.substep_points(0, 0, 0.5, 0, 0.5, 1), [(0.5, 0)])

    def test_zero_distance(self):
        self.assertEqual(Geometry.substep_points(3, 4, 3, 4, 0, 50), [(3, 4)])


class TestCircleMath(unittest.TestCase):

    def test_default_steps(self):
        self.assertEqual(Geometry.circle_steps(360), 36)
        self.assertEqual(Geometry.circle_steps(-90), 9)
        self.assertEqual(Geometry.circle_steps(3), 1)
        self.assertEqual(Geometry.circle_steps(45), 4)

    def test_chords(self):
        chord, step = Geometry.circle_chords(10, 360, 4)
        self.assertAlmostEqual(chord, 10 * math.sqrt(2))
        self.assertAlmostEqual(step, 90)

    def test_negative_radius_flips_turn(self):
        chord, step = Geometry.circle_chords(-10, 180, 6)
        self.assertAlmostEqual(chord, 2 * 10 * math.sin(math.radians(15)))
        self.assertAlmostEqual(step, -30)


class TestTextAndDots(unittest.TestCase):

    def test_align_offset(self):
        self.assertEqual(Geometry.align_offset("left", 50), 0)
        self.assertEqual(Geometry.align_offset("CENTER", 50), -25)
        self.assertEqual(Geometry.align_offset("right", 50), -50)
        self.assertEqual(Geometry.align_offset(None, 50), 0)

    def test_default_dot_size(self):
        self.assertEqual(Geometry.default_dot_size(1), 5)
        self.assertEqual(Geometry.default_dot_size(10), 20)


class TestViewTransform(unittest.TestCase):

    def test_center_maps_to_middle(self):
        self.assertEqual(ViewTransform.turtle_to_screen(0, 0, 800, 600), (400, 300))

    def test_y_axis_flipped(self):
        self.assertEqual(ViewTransform.turtle_to_screen(10, 20, 800, 600), (410, 280))

    def test_mouse_to_turtle(self):
        self.assertEqual(ViewTransform.mouse_to_turtle(400, 300, 800, 600), (0, 0))
        self.assertEqual(ViewTransform.mouse_to_turtle(0, 0, 800, 600), (-400, 300))
        self.assertEqual(ViewTransform.mouse_to_turtle(410.7, 299.2, 800, 600), (10, 1))


class TestColors(unittest.TestCase):

    def test_names(self):
        self.assertEqual(parse_color("red"), Color(255, 0, 0))
        self.assertEqual(parse_color(" Orange "), Color(255, 200, 0))
        self.assertEqual(parse_color("grey"), parse_color("gray"))

    def test_hex(self):
        self.assertEqual(parse_color("#102030"), Color(16, 32, 48))
        self.assertEqual(parse_color("#fff"), Color(255, 255, 255))
        self.assertEqual(Color(16, 32, 48).hex(), "#102030")

    def test_unrecognized_is_black(self):
        for bad in ("", "chartreuse-ish", "#12345", "#gggggg", None):
            self.assertEqual(parse_color(bad), BLACK)

    def test_channels_clamped(self):
        self.assertEqual(Color(300, -5, 128, 999), Color(255, 0, 128, 255))

    def test_to_color(self):
        c = Color(1, 2, 3)
        self.assertIs(to_color(c), c)
        self.assertEqual(to_color("blue"), Color(0, 0, 255))
        self.assertEqual(to_color((10, 20, 30)), Color(10, 20, 30))
        self.assertEqual(to_color([10, 20, 30, 40]), Color(10, 20, 30, 40))
        self.assertEqual(to_color((1.0, 0.5, 0.0)), Color(255, 128, 0))
        self.assertEqual(to_color((1, 2)), BLACK)
        self.assertEqual(to_color(42), BLACK)

    def test_mixed_unit_tuple_is_scaled(self):
        self.assertEqual(to_color((1.0, 0, 0)), Color(255, 0, 0))
        self.assertEqual(to_color((0, 0.5, 1)), Color(0, 128, 255))
        self.assertEqual(to_color((1, 0, 0)), Color(1, 0, 0))
        self.assertEqual(to_color((2.0, 0, 0)), Color(2, 0, 0))
        self.assertEqual(to_color(("a", 0.5, 0)), BLACK)

    def test_builtin_constants(self):
        self.assertEqual(tuple(BLACK), (0, 0, 0, 255))
        self.assertEqual(WHITE.hex(), "#ffffff")


class TestCursorShapes(unittest.TestCase):

    def test_names(self):
        self.assertEqual(SHAPE_NAMES,
                         ["arrow", "classic", "turtle", "circle", "square", "blank"])

    def test_from_name(self):
        self.assertIs(CursorShape.from_name("Turtle"), CursorShape.TURTLE)
        self.assertIs(CursorShape.from_name(CursorShape.SQUARE), CursorShape.SQUARE)
        self.assertIs(CursorShape.from_name("hexagon"), CursorShape.ARROW)

    def test_every_shape_builds(self):
        for shape in CursorShape:
            prims = cursor_primitives(shape, 1.0, BLACK)
            if shape is CursorShape.BLANK:
                self.assertEqual(prims, [])
            else:
                self.assertTrue(prims)
                for prim in prims:
                    self.assertIsInstance(prim, (PolygonPrimitive, OvalPrimitive))

    def test_arrow_points_along_heading(self):
        prim, = cursor_primitives("arrow", 1.0, BLACK)
        tip = max(prim.coords, key=lambda p: p[0])
        self.assertEqual(tip, (10, 0))

    def test_size_scales(self):
        small, = cursor_primitives("square", 1.0, BLACK)
        big, = cursor_primitives("square", 2.0, BLACK)
        self.assertEqual(big.coords[2], (2 * small.coords[2][0], 2 * small.coords[2][1]))

    def test_turtle_body_on_top(self):
        prims = cursor_primitives("turtle", 1.0, Color(0, 255, 0))
        self.assertIsNotNone(prims[-1].outline)
        for prim in prims:
            self.assertEqual(prim.fill, Color(0, 255, 0))


class TestInputState(unittest.TestCase):

    def setUp(self):
        self.input = InputState()

    def test_last_key_wins_and_is_consumed(self):
        self.input.press_key("a")
        self.input.press_key("b")
        self.assertEqual(self.input.take_key(), "b")
        self.assertIsNone(self.input.take_key())

    def test_take_key_if(self):
        self.input.press_key("space")
        self.assertFalse(self.input.take_key_if("up"))
        self.assertTrue(self.input.take_key_if("SPACE"))
        self.assertFalse(self.input.take_key_if("space"))
        self.assertIsNone(self.input.take_key())

    def test_click_seen_once(self):
        self.assertFalse(self.input.take_click())
        self.input.click_mouse(5, -7)
        self.assertTrue(self.input.take_click())
        self.assertFalse(self.input.take_click())
        self.assertEqual(self.input.mouse_position(), (5, -7))

    def test_position_pair_is_consistent(self):
        stop = threading.Event()

        def writer():
            i = 0
            while not stop.is_set():
                self.input.click_mouse(i, -i)
                i += 1

        thread = threading.Thread(target=writer)
        thread.start()
        try:
            for _ in range(2000):
                x, y = self.input.mouse_position()
                self.assertEqual(x, -y)
        finally:
            stop.set()
            thread.join()


class TestEventBus(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()

    def test_emit_with_args(self):
        seen = []
        self.bus.on(Events.FRAME, lambda n, dt: seen.append((n, dt)))
        self.assertEqual(self.bus.emit(Events.FRAME, 3, 0.01), 1)
        self.assertEqual(seen, [(3, 0.01)])

    def test_duplicate_and_off(self):
        seen = []
        cb = seen.append
        self.bus.on(Events.TITLE_CHANGED, cb)
        self.bus.on(Events.TITLE_CHANGED, cb)
        self.bus.emit(Events.TITLE_CHANGED, "x")
        self.assertEqual(seen, ["x"])
        self.bus.off(Events.TITLE_CHANGED, cb)
        self.assertEqual(self.bus.emit(Events.TITLE_CHANGED, "y"), 0)
        self.assertEqual(seen, ["x"])

    def test_unknown_event_rejected(self):
        with self.assertRaises(ValueError):
            self.bus.on("exploded", print)
        with self.assertRaises(ValueError):
            self.bus.emit("exploded")

    def test_failing_subscriber_isolated(self):
        seen = []

        def broken():
            raise RuntimeError("boom")

        self.bus.on(Events.STOPPED, broken)
        self.bus.on(Events.STOPPED, lambda: seen.append("ok"))
        with self.assertLogs(level="ERROR"):
            self.assertEqual(self.bus.emit(Events.STOPPED), 1)
        self.assertEqual(seen, ["ok"])


class TestConfiguration(unittest.TestCase):

    def test_packaged_defaults(self):
        self.assertEqual(Utils.getInt("Screen", "width", 0), 800)
        self.assertEqual(Utils.getInt("Screen", "height", 0), 600)
        self.assertEqual(Utils.getStr("Turtle", "shape"), "arrow")
        self.assertEqual(Utils.getFloat("Turtle", "pensize", 0.0), 1.0)

    def test_missing_values_use_default(self):
        self.assertEqual(Utils.getInt("Nowhere", "width", 7), 7)
        self.assertEqual(Utils.getStr("Screen", "missing", "dflt"), "dflt")
        self.assertTrue(Utils.getBool("Nowhere", "flag", True))

    def test_bad_number_uses_default(self):
        Utils.setStr("Screen", "testbad", "not-a-number")
        try:
            self.assertEqual(Utils.getInt("Screen", "testbad", 5), 5)
            self.assertEqual(Utils.getFloat("Screen", "testbad", 1.5), 1.5)
        finally:
            Utils.config.remove_option("Screen", "testbad")

    def test_save_writes_only_changes(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "user.ini")
            old_title = Utils.getStr("Screen", "title")
            with patch.object(Utils, "iniUser", path):
                Utils.setStr("Screen", "title", "Saved Title")
                try:
                    Utils.saveConfiguration()
                finally:
                    Utils.setStr("Screen", "title", old_title)
            with open(path) as f:
                text = f.read()
        self.assertIn("Saved Title", text)
        self.assertNotIn("width", text)
        self.assertEqual(Utils.getInt("Screen", "width", 0), 800)

    def test_bool_values(self):
        for text, expected in (("1", True), ("yes", True), ("off", False), ("0", False)):
            Utils.setStr("Screen", "testflag", text)
            self.assertIs(Utils.getBool("Screen", "testflag", None), expected)
        Utils.setBool("Screen", "testflag", True)
        self.assertEqual(Utils.getStr("Screen", "testflag"), "1")
        Utils.config.remove_option("Screen", "testflag")

    def test_user_changes_only_lists_overrides(self):
        Utils.setInt("Turtle", "speed", 7)
        try:
            changes = Utils.userChanges()
            self.assertEqual(changes.sections(), ["Turtle"])
            self.assertEqual(changes.get("Turtle", "speed"), "7")
        finally:
            Utils.setInt("Turtle", "speed", 50)


if __name__ == "__main__":
    unittest.main()
