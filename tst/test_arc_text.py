import unittest

import numpy as np
import numpy.testing

from stampart.arc_text import (
    ALPHABETIC,
    HANGING,
    REVERSED,
    ArcSpec,
    glyph_angles,
    layout_arc_text,
)
from stampart.coordinates import Point


class TestArcText(unittest.TestCase):

    def setUp(self):
        self.arc = ArcSpec((150, 150), 114.5, 30, 360)

    def test_one_glyph_per_character(self):
        glyphs = layout_arc_text("ACME★", self.arc, 16.666)

        self.assertEqual(len(glyphs), 5)
        self.assertEqual("".join(g.character for g in glyphs), "ACME★")

    def test_first_and_last_at_arc_ends(self):
        glyphs = layout_arc_text("ACME★", self.arc, 16.666)

        self.assertEqual(glyphs[0].rotation_degrees, 30)
        self.assertEqual(glyphs[0].position, Point(207.25, 50.84))

        self.assertEqual(glyphs[-1].rotation_degrees, 360)
        self.assertEqual(glyphs[-1].position, Point(150, 35.5))

    def test_uniform_spacing(self):
        glyphs = layout_arc_text("ACME★", self.arc, 12)

        rotations = [g.rotation_degrees for g in glyphs]

        numpy.testing.assert_almost_equal(np.diff(rotations), [82.5] * 4)

    def test_forward_styling(self):
        glyphs = layout_arc_text("AB", self.arc, 16.666, fill="#ff0000", font_family="Serif")

        for g in glyphs:
            self.assertEqual(g.baseline, ALPHABETIC)
            self.assertEqual(g.font_size, 16.67)
            self.assertEqual(g.fill, "#ff0000")
            self.assertEqual(g.font_family, "Serif")
            self.assertEqual(g.letter_spacing, 0)

    def test_single_character_at_start(self):
        glyphs = layout_arc_text("A", ArcSpec((0, 0), 10, 45, 300), 10)

        self.assertEqual(len(glyphs), 1)
        self.assertEqual(glyphs[0].rotation_degrees, 45)
        self.assertEqual(glyphs[0].position, Point(7.07, -7.07))

    def test_single_character_ignores_end_angle(self):
        a = layout_arc_text("A", ArcSpec((0, 0), 10, 45, 300), 10)
        b = layout_arc_text("A", ArcSpec((0, 0), 10, 45, 46), 10)

        self.assertEqual(a, b)

    def test_empty_text(self):
        self.assertEqual(layout_arc_text("", self.arc, 10), [])

    def test_reversed(self):
        forward = layout_arc_text("ACME★", self.arc, 16.666)
        reverse = layout_arc_text("ACME★", self.arc._replace(direction=REVERSED), 16.666)

        self.assertEqual(reverse[0].position, forward[-1].position)
        self.assertEqual(reverse[-1].position, forward[0].position)

        self.assertEqual(reverse[0].rotation_degrees, 540)
        self.assertEqual(reverse[-1].rotation_degrees, 210)

        for g in reverse:
            self.assertEqual(g.baseline, HANGING)

        # characters keep reading order
        self.assertEqual("".join(g.character for g in reverse), "ACME★")

    def test_reversed_single_character_at_end(self):
        glyphs = layout_arc_text("A", ArcSpec((0, 0), 10, 45, 300, REVERSED), 10)

        self.assertEqual(glyphs[0].rotation_degrees, 480)

    def test_full_circle_sweep(self):
        angles = glyph_angles(ArcSpec((0, 0), 1, 0, 720), 3)

        self.assertEqual(angles, [0, 360, 720])

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            layout_arc_text("AB", self.arc._replace(direction="sideways"), 10)

    def test_code_points_not_merged(self):
        # "e" followed by a combining acute accent
        glyphs = layout_arc_text("é", self.arc, 10)

        self.assertEqual(len(glyphs), 2)


if __name__ == "__main__":
    unittest.main()
