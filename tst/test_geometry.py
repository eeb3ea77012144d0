import unittest
from unittest.mock import MagicMock

import math

import shapely as sh
import shapely.geometry

from stampart.geometry import GeometryRenderer, ring_geometry
from stampart.scene import RingSpec


class TestGeometry(unittest.TestCase):

    def test_ring_geometry(self):
        ring = ring_geometry(RingSpec((150, 150), 146, 3))

        self.assertTrue(ring.is_ring)

        for x, y in ring.coords:
            self.assertAlmostEqual(math.hypot(x - 150, y - 150), 146)

        for actual, expected in zip(ring.bounds, (4, 4, 296, 296)):
            self.assertAlmostEqual(actual, expected)

    def test_non_positive_radius_is_empty(self):
        self.assertTrue(ring_geometry(RingSpec((0, 0), 0, 2)).is_empty)
        self.assertTrue(ring_geometry(RingSpec((0, 0), -10, 2)).is_empty)

    def test_render_linestring(self):
        primitive_renderer = MagicMock()
        line = sh.geometry.LineString([(0, 0), (1, 1), (2, 0)])

        GeometryRenderer().render(line, primitive_renderer, "#ff0000", 2)

        primitive_renderer.start_path.assert_called_once_with(0, 0)
        self.assertEqual(primitive_renderer.path_point.call_count, 2)
        primitive_renderer.path_point.assert_called_with(2, 0)
        primitive_renderer.stroke_path.assert_called_once_with("#ff0000", 2)

    def test_render_empty(self):
        primitive_renderer = MagicMock()

        GeometryRenderer().render(sh.geometry.LinearRing(), primitive_renderer, "#000000", 1)

        primitive_renderer.start_path.assert_not_called()

    def test_render_unsupported(self):
        with self.assertRaises(ValueError):
            GeometryRenderer().render(sh.geometry.Point(0, 0), MagicMock(), "#000000", 1)


if __name__ == "__main__":
    unittest.main()
