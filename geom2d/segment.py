#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D line segment geometry.
"""
from . import const
from . import line
from . import pairwise

from .point import P
from .line import Line
from .ray import Ray
from .shape import AffineShape


class Segment(AffineShape):
    """Two dimensional immutable line segment defined by two points.

    Args:
        p1: Start point as 2-tuple (x, y).
        p2: End point as 2-tuple (x, y).
    """
    __slots__ = ()

    def __new__(cls, p1, p2):
        return tuple.__new__(cls, (P(p1), P(p2)))

    @property
    def p1(self):
        """The start point of this line segment."""
        return self[0]

    @property
    def p2(self):
        """The end point of this line segment."""
        return self[1]

    def parametric(self):
        return (self[0], self.direction(), 0.0, self.length())

    def endpoints(self):
        return (self[0], self[1])

    def direction_unnormalized(self):
        """The vector from the start point to the end point."""
        return self.p2 - self.p1

    def direction(self):
        """Unit vector pointing from the start point to the end point."""
        return self.p1.direction_to(self.p2)

    def length(self):
        """Return the length of this line segment."""
        return self.p1.distance(self.p2)

    def length2(self):
        """Return the length squared of this line segment."""
        return self.p1.distance2(self.p2)

    def midpoint(self):
        """Return the midpoint of this line segment."""
        return (self.p1 + self.p2) / 2

    def point_at(self, mu):
        """Return the point that is unit distance `mu` from this segment's
        first point. The segment's first point would be at `mu=0.0` and the
        second point would be at `mu=1.0`.
        """
        return self.p1 + (self.p2 - self.p1) * mu

    def reversed(self):
        """Return a Segment with start and end points swapped."""
        return Segment(self.p2, self.p1)

    def unchecked_slope(self):
        """Slope of the segment. ZeroDivisionError if it is vertical."""
        delta = self.direction_unnormalized()
        return delta.y / delta.x

    def slope(self):
        """Slope of the segment or None if it is vertical."""
        if self.p1.x == self.p2.x:
            return None
        return self.unchecked_slope()

    def project_point(self, p):
        """The point on this segment closest to point `p`."""
        v1 = self.direction_unnormalized()
        length2 = v1.length2()
        if length2 == 0:
            return self.p1
        mu = const.clamp((P(p) - self.p1).dot(v1) / length2, 0.0, 1.0)
        return self.p1 + v1 * mu

    def approx_contains(self, p):
        """True if point `p` lies on this segment."""
        v1 = self.direction_unnormalized()
        v2 = P(p) - self.p1
        if not const.approx_zero(v1.unit().cross(v2)):
            return False
        t = v1.unit().dot(v2)
        return line.param_in_range(t, 0.0, v1.length())

    def signed_distance(self, p):
        """Distance from the closest point of this segment to point `p`.
        Positive if `p` is to the left of the segment direction.
        """
        p = P(p)
        dist = self.project_point(p).distance(p)
        return const.sign(self.direction_unnormalized().cross(p - self.p1)) * dist

    def transform(self, matrix):
        """Return a copy of this segment with the transform matrix applied."""
        return Segment(self.p1.transform(matrix), self.p2.transform(matrix))

    def __str__(self):
        """Concise string representation."""
        return 'Segment(%s, %s)' % (str(self.p1), str(self.p2))

    def __repr__(self):
        """Precise string representation."""
        return 'Segment(P(%r, %r), P(%r, %r))' % (self[0][0], self[0][1],
                                                  self[1][0], self[1][1])


line.register_point(Segment)
line.register_linear_pair(Line, Segment)
line.register_linear_pair(Ray, Segment)
line.register_linear_pair(Segment, Segment)
pairwise.approx_collinear.register(P, Segment)(line.point_collinear)


@pairwise.approx_coincident.register(Segment, Segment)
def _coincident_segment_segment(seg1, seg2):
    """Segments are coincident if their end points match in either order."""
    return ((seg1.p1.approx_equal(seg2.p1) and seg1.p2.approx_equal(seg2.p2))
            or (seg1.p1.approx_equal(seg2.p2)
                and seg1.p2.approx_equal(seg2.p1)))
