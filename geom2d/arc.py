#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D circular arc geometry.

Also contains the circle/line and circle/circle intersection code
shared with :class:`~geom2d.circle.Circle`.
"""
import math
import logging

from . import const
from . import util
from . import line
from . import pairwise

from .const import TAU
from .point import P
from .line import Line
from .ray import Ray
from .segment import Segment
from .shape import Shape

logger = logging.getLogger(__name__)


class Arc(Shape):
    """Two dimensional immutable circular arc segment.

    The arc starts at `p1` and sweeps `angle` radians about `pivot`.
    A positive angle is counter-clockwise.

    Args:
        pivot: Center of the arc circle as a 2-tuple (x, y).
        p1: Start point as a 2-tuple (x, y).
        angle: Signed sweep angle in radians.
    """
    __slots__ = ()

    def __new__(cls, pivot, p1, angle):
        return tuple.__new__(cls, (P(pivot), P(p1), float(angle)))

    @staticmethod
    def from_pivot_radius_angle_to_angle(pivot, radius, angle_from, angle_to):
        """Create an Arc given a center point, a radius and
        start and end angles.
        """
        pivot = P(pivot)
        p1 = pivot + P.from_polar(radius, angle_from)
        return Arc(pivot, p1, angle_to - angle_from)

    @staticmethod
    def from_points(start, through, end):
        """Create an Arc that starts at `start`, passes through
        `through`, and ends at `end`.

        Returns:
            An Arc or None if the three points are collinear.
        """
        pivot = bisector_pivot(start, through, end)
        if pivot is None:
            logger.debug('arc points are collinear: %s, %s, %s',
                         start, through, end)
            return None
        return _arc_through(pivot, start, through, end)

    @staticmethod
    def from_points_unchecked(start, through, end):
        """Same as :meth:`from_points` but the points are not checked
        for collinearity. ZeroDivisionError is raised if they are.
        """
        l1, l2 = chord_bisectors(start, through, end)
        return _arc_through(l1.unchecked_intersection(l2),
                            start, through, end)

    @property
    def pivot(self):
        """The center of the arc circle."""
        return self[0]

    @property
    def center(self):
        """Alias of :attr:`pivot`."""
        return self[0]

    @property
    def p1(self):
        """The start point of the arc."""
        return self[1]

    @property
    def angle(self):
        """The signed sweep angle in radians."""
        return self[2]

    @property
    def p2(self):
        """The end point of the arc."""
        return self.unchecked_point_at(self.angle_to())

    def radius(self):
        return self.pivot.distance(self.p1)

    def radius2(self):
        return self.pivot.distance2(self.p1)

    def angle_from(self):
        """The angle of the start point relative to the pivot,
        between -PI and PI.
        """
        return util.normalize_angle(self.pivot.angle_to(self.p1))

    def angle_to(self):
        """The angle of the end point relative to the pivot.
        This is :meth:`angle_from` plus the sweep angle and is
        not normalized.
        """
        return self.angle_from() + self.angle

    def endpoints(self):
        return (self.p1, self.p2)

    def normalize_angle(self):
        """Return a copy of this arc with the sweep angle
        normalized to -PI..PI.
        """
        return Arc(self.pivot, self.p1, util.normalize_angle(self.angle))

    def is_clockwise(self):
        """True if the arc sweeps clockwise from its start point."""
        return self.angle < 0

    def in_range(self, angle):
        """True if the direction `angle` from the pivot lies within
        the sweep of this arc.
        """
        if abs(self.angle) >= TAU:
            return True
        angle_from = self.angle_from()
        angle_to = angle_from + self.angle
        return util.angle_in_range(angle, min(angle_from, angle_to),
                                   max(angle_from, angle_to))

    def unchecked_point_at(self, angle):
        """The point on the arc circle at `angle`, whether or not
        it lies on the arc.
        """
        return self.pivot + P.from_polar(self.radius(), angle)

    def point_at(self, angle):
        """The point on the arc at `angle` or None if the angle is
        outside the arc.
        """
        if not self.in_range(angle):
            return None
        return self.unchecked_point_at(angle)

    def length(self):
        """The length of the arc."""
        return abs(self.radius() * self.angle)

    def midpoint(self):
        """The point halfway along the arc."""
        return self.unchecked_point_at(self.angle_from() + self.angle / 2)

    def project_point(self, p):
        """The point on the arc closest to point `p`."""
        p = P(p)
        if p == self.pivot:
            return self.p1
        proj = self.pivot + self.pivot.direction_to(p) * self.radius()
        if self.in_range(self.pivot.angle_to(proj)):
            return proj
        p2 = self.p2
        if p.distance2(self.p1) >= p.distance2(p2):
            return p2
        return self.p1

    def approx_contains(self, p):
        """True if point `p` lies on the arc."""
        p = P(p)
        if not const.approx_equal(p.distance(self.pivot), self.radius()):
            return False
        return self.in_range(self.pivot.angle_to(p))

    def point_distance(self, p):
        """Unsigned distance from the closest point of the arc
        to point `p`.
        """
        p = P(p)
        if p == self.pivot:
            return self.radius()
        return self.project_point(p).distance(p)

    def signed_distance(self, p):
        """Distance from the arc to point `p`. Negative on the side
        of the chord that bulges towards the arc.
        """
        p = P(p)
        dist = self.point_distance(p)
        cross = (self.p2 - self.p1).cross(p - self.p1)
        if self.angle < 0:
            return dist if cross > 0 else -dist
        return dist if cross <= 0 else -dist

    def translate(self, offset):
        return Arc(self.pivot.translate(offset), self.p1.translate(offset),
                   self.angle)

    def rotate_at(self, origin, angle):
        return Arc(self.pivot.rotate(angle, origin),
                   self.p1.rotate(angle, origin), self.angle)

    def scale_at(self, origin, factor):
        """Return a copy of this arc scaled about `origin`.

        Args:
            origin: Scale origin.
            factor: Scalar scale factor. Non-uniform scaling would
                produce an elliptical arc.
        """
        return Arc(self.pivot.scale(factor, origin),
                   self.p1.scale(factor, origin), self.angle)

    def __str__(self):
        """Concise string representation."""
        return 'Arc(%s, %s, %s)' % (str(self.pivot), str(self.p1),
                                    const.EPSILON_FLOAT_FMT % self.angle)

    def __repr__(self):
        """Precise string representation."""
        return 'Arc(P(%r, %r), P(%r, %r), %r)' % (
            self[0][0], self[0][1], self[1][0], self[1][1], self[2])


def chord_bisectors(start, through, end):
    start = P(start)
    through = P(through)
    end = P(end)
    l1 = Line((start + through) / 2, (through - start).normal())
    l2 = Line((through + end) / 2, (end - through).normal())
    return l1, l2


def bisector_pivot(start, through, end):
    """Intersection of the perpendicular bisectors of the two chords,
    or None if they are parallel.
    """
    l1, l2 = chord_bisectors(start, through, end)
    return pairwise.intersection(l1, l2)


def _arc_through(pivot, start, through, end):
    angle_start = pivot.angle_to(start)
    # Counter-clockwise sweeps from the start point, in (0, 2*PI]
    sweep_end = util.normalize_angle(pivot.angle_to(end) - angle_start,
                                     center=math.pi)
    sweep_through = util.normalize_angle(
        pivot.angle_to(through) - angle_start, center=math.pi)
    if sweep_through < sweep_end:
        angle = sweep_end
    else:
        angle = sweep_end - TAU
    return Arc(pivot, start, angle)


def circle_line_roots(center, radius, linear):
    """Parameters along a linear shape where it crosses a circle.

    The linear shape is parametrized with a unit direction
    (see :meth:`geom2d.line.Line.parametric`) so the roots are
    distances from its origin.

    Returns:
        A list of zero, one (tangent) or two parameters, in order,
        restricted to the range of the linear shape.
    """
    origin, direction, t_min, t_max = linear.parametric()
    delta = origin - center
    b = 2.0 * delta.dot(direction)
    c = delta.length2() - radius * radius
    discriminant = b * b - 4.0 * c
    if const.approx_zero(discriminant):
        roots = [-b / 2.0]
    elif discriminant < 0:
        roots = []
    else:
        sqrt_disc = math.sqrt(discriminant)
        roots = [(-b - sqrt_disc) / 2.0, (-b + sqrt_disc) / 2.0]
    return [t for t in roots if line.param_in_range(t, t_min, t_max)]


def circle_line_points(center, radius, linear):
    """The points where a linear shape crosses a circle."""
    origin, direction = linear.parametric()[:2]
    return [origin + direction * t
            for t in circle_line_roots(center, radius, linear)]


def circle_line_tangent(center, radius, linear):
    """The point where a linear shape touches a circle
    or None if it is not tangent.
    """
    origin, direction, t_min, t_max = linear.parametric()
    delta = origin - center
    b = 2.0 * delta.dot(direction)
    c = delta.length2() - radius * radius
    if not const.approx_zero(b * b - 4.0 * c):
        return None
    t = -b / 2.0
    if not line.param_in_range(t, t_min, t_max):
        return None
    return origin + direction * t


def circle_circle_points(center1, radius1, center2, radius2):
    """The points where two circles cross.

    See <http://mathworld.wolfram.com/Circle-CircleIntersection.html>

    Returns:
        A list of zero, one (tangent) or two points.
        Concentric circles have no intersection points, even if they
        are coincident.
    """
    d = center1.distance(center2)
    if const.approx_zero(d):
        return []
    radius_sum = radius1 + radius2
    radius_diff = abs(radius1 - radius2)
    if d > radius_sum and not const.approx_equal(d, radius_sum):
        return []
    if d < radius_diff and not const.approx_equal(d, radius_diff):
        return []
    # Distance from center1 to the radical line
    a = (radius1 * radius1 - radius2 * radius2 + d * d) / (2.0 * d)
    h2 = radius1 * radius1 - a * a
    delta = (center2 - center1) / d
    base = center1 + delta * a
    if h2 <= 0 or const.approx_zero(h2):
        return [base]
    h = math.sqrt(h2)
    offset = delta.normal() * h
    return [base + offset, base - offset]


def tangent_point(center1, radius1, center2, radius2):
    """The point where two circles touch, or None if they are
    not tangent.
    """
    d2 = center1.distance2(center2)
    if const.approx_zero(d2):
        return None
    u = center1.direction_to(center2)
    if const.approx_equal(d2, (radius1 + radius2) ** 2):
        return center1 + u * radius1
    if const.approx_equal(d2, (radius1 - radius2) ** 2):
        if radius1 >= radius2:
            return center1 + u * radius1
        return center1 - u * radius1
    return None


def nearest_on_linear(linear, p):
    """The point on a linear shape closest to point `p`."""
    origin, direction, t_min, t_max = linear.parametric()
    t = (p - origin).dot(direction)
    if t_min is not None:
        t = max(t, t_min)
    if t_max is not None:
        t = min(t, t_max)
    return origin + direction * t


def _linear_arc_intersections(linear, arc):
    points = [p for p in circle_line_points(arc.pivot, arc.radius(), linear)
              if arc.in_range(arc.pivot.angle_to(p))]
    return pairwise.ordered_pair(points)


def _linear_arc_intersects(linear, arc):
    return _linear_arc_intersections(linear, arc) is not None


def _linear_arc_distance(linear, arc):
    if _linear_arc_intersects(linear, arc):
        return 0.0
    candidates = [abs(linear.signed_distance(p)) for p in arc.endpoints()]
    candidates.extend(arc.point_distance(p) for p in linear.endpoints())
    foot = nearest_on_linear(linear, arc.pivot)
    if (foot != arc.pivot
            and arc.in_range(arc.pivot.angle_to(foot))):
        candidates.append(abs(arc.pivot.distance(foot) - arc.radius()))
    return min(candidates)


def _linear_arc_tangent(linear, arc):
    p = circle_line_tangent(arc.pivot, arc.radius(), linear)
    return p is not None and arc.in_range(arc.pivot.angle_to(p))


for _kind in (Line, Ray, Segment):
    pairwise.distance.register(_kind, Arc)(_linear_arc_distance)
    pairwise.intersects.register(_kind, Arc)(_linear_arc_intersects)
    pairwise.intersections.register(_kind, Arc)(_linear_arc_intersections)
    pairwise.approx_tangent.register(_kind, Arc)(_linear_arc_tangent)

line.register_point(Arc)


@pairwise.intersections.register(Arc, Arc)
def _intersections_arc_arc(arc1, arc2):
    points = circle_circle_points(arc1.pivot, arc1.radius(),
                                  arc2.pivot, arc2.radius())
    return pairwise.ordered_pair(
        p for p in points
        if arc1.in_range(arc1.pivot.angle_to(p))
        and arc2.in_range(arc2.pivot.angle_to(p)))


@pairwise.intersects.register(Arc, Arc)
def _intersects_arc_arc(arc1, arc2):
    if _intersections_arc_arc(arc1, arc2) is not None:
        return True
    # Arcs on the same circle may overlap
    return (any(arc1.approx_contains(p) for p in arc2.endpoints())
            or any(arc2.approx_contains(p) for p in arc1.endpoints()))


@pairwise.distance.register(Arc, Arc)
def _distance_arc_arc(arc1, arc2):
    if _intersects_arc_arc(arc1, arc2):
        return 0.0
    candidates = [arc2.point_distance(p) for p in arc1.endpoints()]
    candidates.extend(arc1.point_distance(p) for p in arc2.endpoints())
    if arc1.pivot != arc2.pivot:
        # Closest points along the line through both pivots
        u = arc1.pivot.direction_to(arc2.pivot)
        toward, away = u.angle(), (-u).angle()
        q1 = arc1.point_at(toward) or arc1.point_at(away)
        q2 = arc2.point_at(away) or arc2.point_at(toward)
        if q1 is not None and q2 is not None:
            candidates.append(q1.distance(q2))
    return min(candidates)


@pairwise.approx_tangent.register(Arc, Arc)
def _tangent_arc_arc(arc1, arc2):
    p = tangent_point(arc1.pivot, arc1.radius(), arc2.pivot, arc2.radius())
    return (p is not None
            and arc1.in_range(arc1.pivot.angle_to(p))
            and arc2.in_range(arc2.pivot.angle_to(p)))


@pairwise.approx_coincident.register(Arc, Arc)
def _coincident_arc_arc(arc1, arc2):
    """Arcs are coincident if they cover the same part of the same
    circle, in either direction.
    """
    if not (arc1.pivot.approx_equal(arc2.pivot)
            and const.approx_equal(arc1.radius(), arc2.radius())
            and const.approx_equal(abs(arc1.angle), abs(arc2.angle))):
        return False
    return ((arc1.p1.approx_equal(arc2.p1) and arc1.p2.approx_equal(arc2.p2))
            or (arc1.p1.approx_equal(arc2.p2)
                and arc1.p2.approx_equal(arc2.p1)))
