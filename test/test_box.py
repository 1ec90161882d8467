#!/usr/bin/env python

"""Test axis aligned rectangles
"""

import math
import unittest

if __name__ == '__main__':
    import sys
    sys.path.append('..')

from geom2d import P, Segment, Arc, Circle, Triangle, Rectangle
from geom2d import AlignedRectangle


class TestAlignedRectangle(unittest.TestCase):

    def setUp(self):
        self.box = AlignedRectangle((0, 0), (2, 2))

    def test_properties(self):
        box = AlignedRectangle((0, 0), (4, 2))
        self.assertEqual(box.min, (0.0, 0.0))
        self.assertEqual(box.max, (4.0, 2.0))
        self.assertEqual(box.size, (4.0, 2.0))
        self.assertEqual(box.center, (2.0, 1.0))
        self.assertEqual(box.width(), 4.0)
        self.assertEqual(box.height(), 2.0)
        self.assertEqual(box.area(), 8.0)
        self.assertEqual(box.perimeter(), 12.0)
        self.assertEqual(box.vertices(),
                         (P(0, 0), P(4, 0), P(4, 2), P(0, 2)))
        self.assertEqual(box.to_rectangle(), Rectangle((2, 1), (4, 2)))

    def test_contains(self):
        self.assertTrue(self.box.contains((1, 1)))
        self.assertTrue(self.box.contains((2, 2)))
        self.assertTrue(self.box.contains((0, 1)))
        self.assertFalse(self.box.contains((2.1, 1)))
        self.assertEqual(self.box.distance((1, 1)), 0.0)
        self.assertAlmostEqual(self.box.distance((3, 3)), math.sqrt(2))
        self.assertEqual(self.box.distance((1, -3)), 3.0)
        self.assertEqual(self.box.signed_distance((1, 0.5)), -0.5)

    def test_bounding(self):
        box = AlignedRectangle.from_bounding_points([(3, 1), (0, 4), (2, -1)])
        self.assertEqual(box, AlignedRectangle((0, -1), (3, 4)))
        box = AlignedRectangle.from_bounding_segment(Segment((3, 1), (1, 2)))
        self.assertEqual(box, AlignedRectangle((1, 1), (3, 2)))
        box = AlignedRectangle.from_bounding_circle(Circle((1, 1), 2))
        self.assertEqual(box, AlignedRectangle((-1, -1), (3, 3)))
        box = AlignedRectangle.from_bounding_triangle(
            Triangle((0, 0), (4, 0), (1, 3)))
        self.assertEqual(box, AlignedRectangle((0, 0), (4, 3)))
        box = AlignedRectangle.from_bounding_rectangle(
            Rectangle((0, 0), (2, 2), math.pi / 4))
        r = math.sqrt(2)
        self.assertTrue(box.min.approx_equal((-r, -r)))
        self.assertTrue(box.max.approx_equal((r, r)))

    def test_bounding_arc(self):
        box = AlignedRectangle.from_bounding_arc(Arc((0, 0), (1, 0), math.pi))
        self.assertTrue(box.min.approx_equal((-1, 0)))
        self.assertTrue(box.max.approx_equal((1, 1)))
        box = AlignedRectangle.from_bounding_arc(
            Arc((0, 0), (1, 0), math.pi / 2))
        self.assertTrue(box.min.approx_equal((0, 0)))
        self.assertTrue(box.max.approx_equal((1, 1)))

    def test_depth(self):
        other = AlignedRectangle((1, 1), (3, 3))
        v = self.box.intersect_depth(other)
        self.assertAlmostEqual(v.length(), 1.0)
        # Along one of the axes
        self.assertTrue(abs(v.x) < 1e-9 or abs(v.y) < 1e-9)
        self.assertEqual(other.intersect_depth(self.box), -v)
        moved = self.box.translate(v)
        self.assertTrue(moved.intersects(other))
        self.assertAlmostEqual(moved.distance(other), 0.0)
        moved = self.box.translate(v * 1.001)
        self.assertFalse(moved.intersects(other))
        self.assertGreater(moved.distance(other), 0.0)

    def test_circle_depth(self):
        circle = Circle((2.5, 1), 1)
        v = circle.intersect_depth(self.box)
        self.assertTrue(v.approx_equal((0.5, 0)))
        self.assertTrue(self.box.intersect_depth(circle).approx_equal(
            (-0.5, 0)))
        self.assertTrue(circle.translate(v).intersects(self.box))
        self.assertFalse(circle.translate(v * 1.01).intersects(self.box))

    def test_triangle(self):
        self.assertTrue(self.box.intersects(Triangle((1, 1), (5, 1), (1, 5))))
        far = Triangle((3, 3), (5, 3), (3, 5))
        self.assertFalse(self.box.intersects(far))
        self.assertAlmostEqual(self.box.distance(far), math.sqrt(2))
        self.assertIsNone(self.box.intersect_depth(far))

    def test_coincident(self):
        self.assertTrue(self.box.approx_coincident(
            AlignedRectangle((0, 0), (2, 2 + 1e-9))))
        self.assertFalse(self.box.approx_coincident(
            AlignedRectangle((0, 0), (2, 3))))
        self.assertTrue(self.box.approx_coincident(Rectangle((1, 1), (2, 2))))

    def test_transform(self):
        box = self.box.translate((1, 2))
        self.assertEqual(box, AlignedRectangle((1, 2), (3, 4)))
        box = AlignedRectangle((0, 0), (2, 1)).scale(-1)
        self.assertEqual(box, AlignedRectangle((-2, -1), (0, 0)))
        box = self.box.scale((2, 3))
        self.assertEqual(box, AlignedRectangle((0, 0), (4, 6)))
        rect = self.box.rotate(math.pi / 4)
        self.assertIsInstance(rect, Rectangle)
        self.assertTrue(rect.center.approx_equal((0, math.sqrt(2))))
        self.assertAlmostEqual(rect.angle, math.pi / 4)


if __name__ == '__main__':
    unittest.main(verbosity=2)
