#!/usr/bin/env python

"""Test circular arcs
"""

import math
import random
import unittest

if __name__ == '__main__':
    import sys
    sys.path.append('..')

from geom2d import P, Line, Segment, Arc, Circle
from geom2d.const import TAU


class TestArc(unittest.TestCase):

    def setUp(self):
        # Counter-clockwise quarter circle from (1, 0) to (0, 1)
        self.quarter = Arc((0, 0), (1, 0), math.pi / 2)
        # Upper half of the unit circle
        self.upper = Arc((0, 0), (1, 0), math.pi)

    def test_properties(self):
        arc = self.quarter
        self.assertEqual(arc.radius(), 1.0)
        self.assertEqual(arc.radius2(), 1.0)
        self.assertEqual(arc.center, arc.pivot)
        self.assertEqual(arc.angle_from(), 0.0)
        self.assertAlmostEqual(arc.angle_to(), math.pi / 2)
        self.assertTrue(arc.p2.approx_equal((0, 1)))
        self.assertAlmostEqual(arc.length(), math.pi / 2)
        self.assertTrue(arc.midpoint().approx_equal(
            (math.sqrt(0.5), math.sqrt(0.5))))
        self.assertFalse(arc.is_clockwise())
        self.assertTrue(Arc((0, 0), (1, 0), -1).is_clockwise())

    def test_from_pivot_radius(self):
        arc = Arc.from_pivot_radius_angle_to_angle((1, 1), 2, 0, math.pi)
        self.assertEqual(arc.p1, (3.0, 1.0))
        self.assertTrue(arc.p2.approx_equal((-1, 1)))
        self.assertEqual(arc.angle, math.pi)

    def test_endpoints_consistent(self):
        arcs = (self.quarter, self.upper,
                Arc((1, 1), (3, 1), -3 * math.pi / 4),
                Arc((0, 0), P.from_polar(2, 3.0), 0.5),
                Arc((0, 0), P.from_polar(2, -3.0), -0.5),
                Arc((2, -1), (2, 1), 5.0))
        for arc in arcs:
            p1 = arc.point_at(arc.angle_from())
            p2 = arc.point_at(arc.angle_to())
            self.assertIsNotNone(p1, msg=repr(arc))
            self.assertIsNotNone(p2, msg=repr(arc))
            self.assertTrue(p1.approx_equal(arc.p1), msg=repr(arc))
            self.assertTrue(p2.approx_equal(arc.p2), msg=repr(arc))
            self.assertTrue(arc.approx_contains(arc.midpoint()),
                            msg=repr(arc))

    def test_point_at(self):
        self.assertIsNone(self.quarter.point_at(math.pi))
        self.assertIsNone(self.quarter.point_at(-0.1))
        self.assertTrue(self.quarter.point_at(math.pi / 4).approx_equal(
            (math.sqrt(0.5), math.sqrt(0.5))))
        # Any point of the circle is on the arc at the other end
        self.assertTrue(self.quarter.unchecked_point_at(math.pi)
                        .approx_equal((-1, 0)))

    def test_contains(self):
        self.assertTrue(self.quarter.approx_contains((0, 1)))
        self.assertTrue(self.quarter.approx_contains((1, 0)))
        self.assertFalse(self.quarter.approx_contains((-1, 0)))
        self.assertFalse(self.quarter.approx_contains((0.5, 0.5)))
        clockwise = Arc((0, 0), (1, 0), -math.pi / 2)
        self.assertTrue(clockwise.approx_contains((0, -1)))
        self.assertFalse(clockwise.approx_contains((0, 1)))
        full = Arc((0, 0), (1, 0), TAU)
        self.assertTrue(full.approx_contains((-1, 0)))
        self.assertTrue(full.in_range(2.5))

    def test_from_points(self):
        arc = Arc.from_points((1, 0), (0, 1), (-1, 0))
        self.assertTrue(arc.pivot.approx_equal((0, 0)))
        self.assertAlmostEqual(arc.angle, math.pi)
        self.assertAlmostEqual(arc.radius(), 1.0)
        # Clockwise through the top
        arc = Arc.from_points((-1, 0), (0, 1), (1, 0))
        self.assertTrue(arc.pivot.approx_equal((0, 0)))
        self.assertAlmostEqual(arc.angle, -math.pi)
        self.assertTrue(arc.approx_contains((0, 1)))
        # Counter-clockwise the long way around
        arc = Arc.from_points((1, 0), (0, -1), (0, 1))
        self.assertAlmostEqual(arc.angle, -3 * math.pi / 2)
        self.assertTrue(arc.p2.approx_equal((0, 1)))

    def test_from_points_collinear(self):
        with self.assertLogs('geom2d.arc', level='DEBUG'):
            self.assertIsNone(Arc.from_points((0, 0), (1, 1), (2, 2)))
        with self.assertRaises(ZeroDivisionError):
            Arc.from_points_unchecked((0, 0), (1, 1), (2, 2))
        with self.assertLogs('geom2d.arc', level='DEBUG'):
            self.assertIsNone(
                Arc.from_points((-19, 14), (-37, 20), (-100, 41)))

    def test_from_points_collinear_random(self):
        rng = random.Random(41)
        for _ in range(500):
            d = P(rng.randint(-9, 9), rng.randint(-9, 9))
            if d == (0, 0):
                continue
            p = P(rng.randint(-50, 50), rng.randint(-50, 50))
            a, b = rng.sample(range(1, 12), 2)
            points = (p, p + d * a, p + d * (a + b))
            self.assertIsNone(Arc.from_points(*points), repr(points))
            self.assertIsNone(Circle.from_points(*points), repr(points))

    def test_normalize_angle(self):
        arc = Arc((0, 0), (1, 0), 3 * math.pi).normalize_angle()
        self.assertAlmostEqual(arc.angle, math.pi)

    def test_point_distance(self):
        self.assertEqual(self.quarter.distance((2, 0)), 1.0)
        self.assertAlmostEqual(self.quarter.distance((-2, 0)), math.sqrt(5))
        self.assertEqual(self.quarter.distance((0, 1)), 0.0)
        # The pivot is one radius from every point
        self.assertEqual(self.quarter.point_distance((0, 0)), 1.0)
        self.assertTrue(self.quarter.project_point((3, 3)).approx_equal(
            (math.sqrt(0.5), math.sqrt(0.5))))

    def test_line_intersections(self):
        points = self.upper.intersections(Line((-2, 0.5), (1, 0)))
        self.assertIsNotNone(points)
        x = math.sqrt(0.75)
        self.assertTrue(points[0].approx_equal((-x, 0.5)))
        self.assertTrue(points[1].approx_equal((x, 0.5)))
        below = Line((-2, -0.5), (1, 0))
        self.assertIsNone(self.upper.intersections(below))
        self.assertFalse(self.upper.intersects(below))
        self.assertAlmostEqual(self.upper.distance(below), 0.5)

    def test_segment(self):
        inside = Segment((-0.5, 0.1), (0.5, 0.1))
        self.assertFalse(self.upper.intersects(inside))
        self.assertAlmostEqual(self.upper.distance(inside), 1.0 - math.hypot(0.5, 0.1))
        crossing = Segment((0, 0), (0, 2))
        points = self.upper.intersections(crossing)
        self.assertTrue(points[0].approx_equal((0, 1)))
        self.assertEqual(points[0], points[1])

    def test_tangent_line(self):
        self.assertTrue(self.upper.approx_tangent(Line((-1, 1), (1, 0))))
        self.assertFalse(self.upper.approx_tangent(Line((-1, -1), (1, 0))))
        self.assertFalse(self.upper.approx_tangent(Line((-1, 0.5), (1, 0))))

    def test_arc_arc(self):
        other = Arc((1, 0), (2, 0), math.pi)
        points = self.upper.intersections(other)
        self.assertIsNotNone(points)
        self.assertTrue(points[0].approx_equal((0.5, math.sqrt(0.75))))
        self.assertEqual(points[0], points[1])
        self.assertTrue(self.upper.intersects(other))
        self.assertEqual(self.upper.distance(other), 0.0)
        far = Arc((5, 0), (6, 0), math.pi)
        self.assertFalse(self.upper.intersects(far))
        self.assertAlmostEqual(self.upper.distance(far), 3.0)
        self.assertAlmostEqual(far.distance(self.upper), 3.0)

    def test_same_circle_overlap(self):
        other = Arc((0, 0), (0, 1), math.pi)
        self.assertTrue(self.quarter.intersects(other))
        self.assertFalse(self.quarter.intersects(Arc((0, 0), (-1, 0), 1.0)))

    def test_tangent_circle(self):
        self.assertTrue(self.upper.approx_tangent(Circle((0, 2), 1)))
        self.assertFalse(self.upper.approx_tangent(Circle((0, -2), 1)))
        self.assertTrue(Circle((0, 2), 1).intersects(self.upper))

    def test_coincident(self):
        reverse = Arc((0, 0), (0, 1), -math.pi / 2)
        self.assertTrue(self.quarter.approx_coincident(reverse))
        self.assertFalse(self.quarter.approx_coincident(self.upper))

    def test_transform(self):
        arc = self.quarter.translate((1, 1))
        self.assertEqual(arc.pivot, (1.0, 1.0))
        self.assertEqual(arc.p1, (2.0, 1.0))
        arc = self.quarter.rotate(math.pi / 2)
        self.assertTrue(arc.p1.approx_equal((0, 1)))
        self.assertTrue(arc.p2.approx_equal((-1, 0)))
        self.assertEqual(arc.angle, self.quarter.angle)
        arc = self.quarter.scale(2)
        self.assertEqual(arc.radius(), 2.0)
        self.assertTrue(arc.p2.approx_equal((0, 2)))


if __name__ == '__main__':
    unittest.main(verbosity=2)
