#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D circle geometry.

A circle is a filled region for :func:`~geom2d.pairwise.intersects` and
:func:`~geom2d.pairwise.distance`. Its boundary is used for
:func:`~geom2d.pairwise.intersections` and tangency.
"""
import math
import logging

from . import const
from . import arc
from . import pairwise

from .point import P
from .line import Line
from .ray import Ray
from .segment import Segment
from .arc import Arc
from .shape import Shape

logger = logging.getLogger(__name__)


class Circle(Shape):
    """Two dimensional immutable circle.

    Args:
        center: Center point as a 2-tuple (x, y).
        radius: Circle radius.
    """
    __slots__ = ()

    def __new__(cls, center, radius):
        return tuple.__new__(cls, (P(center), float(radius)))

    @staticmethod
    def from_center_point(center, p):
        """The circle centered at `center` that passes through point `p`.
        """
        center = P(center)
        return Circle(center, center.distance(p))

    @staticmethod
    def from_points(p1, p2, p3):
        """The circle that passes through three points.

        Returns:
            A Circle or None if the points are collinear.
        """
        center = arc.bisector_pivot(p1, p2, p3)
        if center is None:
            logger.debug('circle points are collinear: %s, %s, %s',
                         p1, p2, p3)
            return None
        return Circle.from_center_point(center, p1)

    @staticmethod
    def from_points_unchecked(p1, p2, p3):
        """Same as :meth:`from_points` but the points are not checked
        for collinearity. ZeroDivisionError is raised if they are.
        """
        l1, l2 = arc.chord_bisectors(p1, p2, p3)
        return Circle.from_center_point(l1.unchecked_intersection(l2), p1)

    @property
    def center(self):
        return self[0]

    @property
    def radius(self):
        return self[1]

    def diameter(self):
        return self.radius * 2

    def circumference(self):
        return math.pi * self.radius * 2

    perimeter = circumference

    def area(self):
        return math.pi * self.radius * self.radius

    def point_at(self, angle):
        """The point on the circle at `angle` radians from the X axis."""
        return self.center + P.from_polar(self.radius, angle)

    def normal_at(self, angle):
        """The outward unit normal at `angle` radians from the X axis."""
        return P.from_polar(1.0, angle)

    def contains(self, p):
        """True if point `p` lies inside or on the circle."""
        return P(p).distance2(self.center) <= self.radius * self.radius

    def signed_distance(self, p):
        """Distance from the circle boundary to point `p`.
        Negative inside the circle.
        """
        return P(p).distance(self.center) - self.radius

    def translate(self, offset):
        return Circle(self.center.translate(offset), self.radius)

    def rotate_at(self, origin, angle):
        return Circle(self.center.rotate(angle, origin), self.radius)

    def scale_at(self, origin, factor):
        """Return a copy of this circle scaled about `origin`.

        Args:
            origin: Scale origin.
            factor: Scalar scale factor.
        """
        return Circle(self.center.scale(factor, origin),
                      abs(self.radius * factor))

    def __str__(self):
        """Concise string representation."""
        return 'Circle(%s, %s)' % (str(self.center),
                                   const.EPSILON_FLOAT_FMT % self.radius)

    def __repr__(self):
        """Precise string representation."""
        return 'Circle(P(%r, %r), %r)' % (self[0][0], self[0][1], self[1])


def reaches(circle, dist):
    """True if something `dist` away from the circle center
    touches the filled circle.
    """
    return dist <= circle.radius or const.approx_equal(dist, circle.radius)


@pairwise.distance.register(P, Circle)
def _distance_point_circle(p, circle):
    if circle.contains(p):
        return 0.0
    return circle.signed_distance(p)


@pairwise.intersects.register(P, Circle)
def _intersects_point_circle(p, circle):
    return circle.contains(p)


def _linear_circle_intersects(linear, circle):
    return reaches(circle, abs(linear.signed_distance(circle.center)))


def _linear_circle_distance(linear, circle):
    dist = abs(linear.signed_distance(circle.center))
    if reaches(circle, dist):
        return 0.0
    return dist - circle.radius


def _linear_circle_intersections(linear, circle):
    return pairwise.ordered_pair(
        arc.circle_line_points(circle.center, circle.radius, linear))


def _linear_circle_tangent(linear, circle):
    return arc.circle_line_tangent(circle.center, circle.radius,
                                   linear) is not None


for _kind in (Line, Ray, Segment):
    pairwise.distance.register(_kind, Circle)(_linear_circle_distance)
    pairwise.intersects.register(_kind, Circle)(_linear_circle_intersects)
    pairwise.intersections.register(_kind, Circle)(
        _linear_circle_intersections)
    pairwise.approx_tangent.register(_kind, Circle)(_linear_circle_tangent)


@pairwise.intersections.register(Arc, Circle)
def _intersections_arc_circle(arc_, circle):
    points = arc.circle_circle_points(arc_.pivot, arc_.radius(),
                                      circle.center, circle.radius)
    return pairwise.ordered_pair(
        p for p in points if arc_.in_range(arc_.pivot.angle_to(p)))


@pairwise.intersects.register(Arc, Circle)
def _intersects_arc_circle(arc_, circle):
    # An arc that lies inside the circle has its start point inside
    if reaches(circle, arc_.p1.distance(circle.center)):
        return True
    return _intersections_arc_circle(arc_, circle) is not None


@pairwise.distance.register(Arc, Circle)
def _distance_arc_circle(arc_, circle):
    if _intersects_arc_circle(arc_, circle):
        return 0.0
    points = list(arc_.endpoints())
    if arc_.pivot != circle.center:
        nearest = arc_.point_at(arc_.pivot.angle_to(circle.center))
        if nearest is not None:
            points.append(nearest)
    return min(circle.signed_distance(p) for p in points)


@pairwise.approx_tangent.register(Arc, Circle)
def _tangent_arc_circle(arc_, circle):
    p = arc.tangent_point(arc_.pivot, arc_.radius(),
                          circle.center, circle.radius)
    return p is not None and arc_.in_range(arc_.pivot.angle_to(p))


@pairwise.intersects.register(Circle, Circle)
def _intersects_circle_circle(circle1, circle2):
    dist = circle1.center.distance(circle2.center)
    reach = circle1.radius + circle2.radius
    return dist <= reach or const.approx_equal(dist, reach)


@pairwise.distance.register(Circle, Circle)
def _distance_circle_circle(circle1, circle2):
    if _intersects_circle_circle(circle1, circle2):
        return 0.0
    return (circle1.center.distance(circle2.center)
            - (circle1.radius + circle2.radius))


@pairwise.intersections.register(Circle, Circle)
def _intersections_circle_circle(circle1, circle2):
    return pairwise.ordered_pair(arc.circle_circle_points(
        circle1.center, circle1.radius, circle2.center, circle2.radius))


@pairwise.approx_tangent.register(Circle, Circle)
def _tangent_circle_circle(circle1, circle2):
    return arc.tangent_point(circle1.center, circle1.radius,
                             circle2.center, circle2.radius) is not None


@pairwise.approx_coincident.register(Circle, Circle)
def _coincident_circle_circle(circle1, circle2):
    return (circle1.center.approx_equal(circle2.center)
            and const.approx_equal(circle1.radius, circle2.radius))


@pairwise.intersect_depth.register(Circle, Circle)
def _depth_circle_circle(circle1, circle2):
    """The vector that moves `circle1` out of `circle2`."""
    delta = circle1.center - circle2.center
    dist = delta.length()
    overlap = circle1.radius + circle2.radius - dist
    if overlap < 0 and not const.approx_zero(overlap):
        return None
    if const.approx_zero(dist):
        # Concentric: push along the X axis
        return P(-(circle1.radius + circle2.radius), 0.0)
    return delta / dist * overlap
