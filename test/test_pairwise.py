#!/usr/bin/env python

"""Test pairwise relation dispatch and the symmetry of the
relations between every pair of shape kinds.
"""

import math
import random
import unittest

if __name__ == '__main__':
    import sys
    sys.path.append('..')

import geom2d

from geom2d import pairwise
from geom2d import P, Line, Ray, Segment, Arc, Circle
from geom2d import Triangle, Rectangle, AlignedRectangle


def _random_point(rng):
    return P(rng.uniform(-5, 5), rng.uniform(-5, 5))


def _random_shapes(rng):
    """One random shape of every kind."""
    p1 = _random_point(rng)
    p2 = _random_point(rng)
    return (
        Line(p1, P.from_polar(1.0, rng.uniform(-math.pi, math.pi))),
        Ray(_random_point(rng),
            P.from_polar(1.0, rng.uniform(-math.pi, math.pi))),
        Segment(p1, p2),
        Arc(_random_point(rng),
            _random_point(rng),
            rng.choice((-1, 1)) * rng.uniform(0.2, 5.0)),
        Circle(_random_point(rng), rng.uniform(0.2, 3.0)),
        Triangle(_random_point(rng), _random_point(rng), _random_point(rng)),
        Rectangle(_random_point(rng),
                  (rng.uniform(0.2, 4), rng.uniform(0.2, 4)),
                  rng.uniform(-math.pi, math.pi)),
        AlignedRectangle.from_bounding_points(
            (_random_point(rng), _random_point(rng))),
    )


class TestPairwiseOperation(unittest.TestCase):

    def setUp(self):
        self.op = pairwise.PairwiseOperation('test', mirror=lambda r: -r)

    def test_register_mirror(self):
        @self.op.register(int, float)
        def _test(a, b):
            return a - b
        self.assertEqual(self.op(3, 1.0), 2.0)
        self.assertEqual(self.op(1.0, 3), -2.0)

    def test_subclass_lookup(self):
        @self.op.register(int, str)
        def _test(a, b):
            return a
        # bool is a subclass of int
        self.assertEqual(self.op(True, 'x'), True)
        self.assertTrue(self.op.supports('x', 5))
        self.assertFalse(self.op.supports(5, 5))

    def test_same_kind_sorted(self):
        @self.op.register(int, int)
        def _test(a, b):
            return a - b
        self.assertEqual(self.op(1, 3), -2)
        self.assertEqual(self.op(3, 1), 2)

    def test_unsupported(self):
        with self.assertRaises(TypeError) as cm:
            self.op(1, 'x')
        self.assertIn('test', str(cm.exception))
        self.assertIn('int', str(cm.exception))

    def test_ordered_pair(self):
        self.assertIsNone(pairwise.ordered_pair([]))
        self.assertIsNone(pairwise.ordered_pair([None, None]))
        p = P(1, 1)
        self.assertEqual(pairwise.ordered_pair([p, None]), (p, p))
        self.assertEqual(pairwise.ordered_pair([P(2, 0), P(1, 5)]),
                         (P(1, 5), P(2, 0)))
        self.assertEqual(pairwise.ordered_pair([p, P(1, 1 + 1e-9)]), (p, p))
        self.assertEqual(pairwise.pair_points((p, p)), (p,))
        self.assertEqual(pairwise.pair_points(None), ())

    def test_ordered_pair_same_x(self):
        # X values equal within tolerance are ordered by Y
        upper = P(0.4999999999999999, 1)
        lower = P(0.5, -1)
        self.assertEqual(pairwise.ordered_pair([upper, lower]), (lower, upper))
        self.assertEqual(pairwise.ordered_pair([lower, upper]), (lower, upper))
        self.assertEqual(pairwise.ordered_pair([P(0.5, 1), P(0.4, 3)]),
                         (P(0.4, 3), P(0.5, 1)))


class TestShapeRelations(unittest.TestCase):

    def test_unsupported_pairs(self):
        circle = Circle((0, 0), 1)
        with self.assertRaises(TypeError):
            geom2d.approx_parallel(circle, circle)
        with self.assertRaises(TypeError):
            geom2d.intersection(circle, Line.axis_x())
        with self.assertRaises(TypeError):
            geom2d.intersect_depth(Segment((0, 0), (1, 1)), circle)
        with self.assertRaises(TypeError):
            geom2d.distance(circle, 'circle')

    def test_tuple_coercion(self):
        circle = Circle((3, 4), 1)
        self.assertEqual(geom2d.distance((0, 0), circle), 4.0)
        self.assertEqual(geom2d.distance(circle, [0, 0]), 4.0)
        self.assertTrue(geom2d.intersects((3, 4.5), circle))
        self.assertEqual(geom2d.distance((0, 0), (3, 4)), 5.0)
        self.assertTrue(geom2d.approx_coincident((1, 1), P(1, 1)))

    def test_point_relations(self):
        shapes = _random_shapes(random.Random(7))
        for shape in shapes:
            self.assertTrue(pairwise.distance.supports(P(0, 0), shape))
            self.assertTrue(pairwise.intersects.supports(shape, (0, 0)))

    def test_symmetry(self):
        rng = random.Random(42)
        for _ in range(25):
            shapes = _random_shapes(rng)
            others = _random_shapes(rng)
            for a in shapes:
                for b in others:
                    msg = '%r, %r' % (a, b)
                    intersects = a.intersects(b)
                    self.assertEqual(intersects, b.intersects(a), msg)
                    dist = a.distance(b)
                    self.assertEqual(dist, b.distance(a), msg)
                    self.assertGreaterEqual(dist, 0.0, msg)
                    self.assertEqual(dist == 0.0, intersects, msg)

    def test_intersections_symmetry(self):
        rng = random.Random(1234)
        curves = (Line, Ray, Segment, Arc, Circle)
        for _ in range(25):
            shapes = _random_shapes(rng)
            others = _random_shapes(rng)
            for a in shapes:
                for b in others:
                    if not pairwise.intersections.supports(a, b):
                        continue
                    msg = '%r, %r' % (a, b)
                    points = a.intersections(b)
                    self.assertEqual(points, b.intersections(a), msg)
                    if points is not None:
                        self.assertEqual(pairwise.ordered_pair(points),
                                         points, msg)
                        if isinstance(a, curves) and isinstance(b, curves):
                            self.assertTrue(a.intersects(b), msg)

    def test_depth_mirror(self):
        rng = random.Random(99)
        regions = (Circle, Triangle, Rectangle, AlignedRectangle)
        for _ in range(25):
            shapes = [s for s in _random_shapes(rng) if isinstance(s, regions)]
            others = [s for s in _random_shapes(rng) if isinstance(s, regions)]
            for a in shapes:
                for b in others:
                    v = a.intersect_depth(b)
                    w = b.intersect_depth(a)
                    if v is None:
                        self.assertIsNone(w)
                    else:
                        self.assertTrue(v.approx_equal(-w))


if __name__ == '__main__':
    unittest.main(verbosity=2)
