import unittest

import math

import stampart
from stampart.coordinates import Coordinates, Point, polar_to_point, round_value


class TestCoordinates(unittest.TestCase):

    def test_zero_angle_is_straight_up(self):
        p = polar_to_point((150, 150), 100, 0)

        self.assertEqual(p, Point(150, 50))

    def test_angles_grow_clockwise(self):
        # y points down, so clockwise from the top reaches the right side first
        self.assertEqual(polar_to_point((0, 0), 10, 90), Point(10, 0))
        self.assertEqual(polar_to_point((0, 0), 10, 180), Point(0, 10))
        self.assertEqual(polar_to_point((0, 0), 10, 270), Point(-10, 0))

    def test_periodic(self):
        for angle in (0, 17, 30, 112.5, 195, 333.3):
            p0 = polar_to_point((40, 60), 25, angle)
            p1 = polar_to_point((40, 60), 25, angle + 360)

            self.assertAlmostEqual(p0.x, p1.x, delta=0.011)
            self.assertAlmostEqual(p0.y, p1.y, delta=0.011)

    def test_distance_from_center(self):
        for angle in range(0, 360, 15):
            p = polar_to_point((5, 5), 50, angle)
            self.assertAlmostEqual(math.hypot(p.x - 5, p.y - 5), 50, delta=0.02)

    def test_rounded_to_two_digits(self):
        p = polar_to_point((150, 150), 114.5, 30)

        self.assertEqual(p, Point(207.25, 50.84))

    def test_zero_and_negative_radius(self):
        self.assertEqual(polar_to_point((3, 4), 0, 77), Point(3, 4))

        # a negative radius mirrors through the center
        self.assertEqual(polar_to_point((0, 0), -10, 0), Point(0, 10))

    def test_negative_zero_normalized(self):
        self.assertEqual(str(round_value(-0.001)), "0.0")

    def test_arc(self):
        coords = Coordinates.arc((0, 0), 1, [0, 90, 180])

        self.assertEqual([c for c in coords], [(0, -1), (1, 0), (0, 1)])

    def test_exported(self):
        self.assertIs(stampart.polar_to_point, polar_to_point)


if __name__ == "__main__":
    unittest.main()
