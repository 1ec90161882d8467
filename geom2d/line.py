#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D infinite line geometry.

Also contains the parametric intersection code shared by all the linear
shapes (:class:`Line`, :class:`~geom2d.ray.Ray` and
:class:`~geom2d.segment.Segment`).

A linear shape is described by ``parametric()``, which returns
``(origin, unit_direction, t_min, t_max)``. Points on the shape are
``origin + unit_direction * t`` where ``t_min <= t <= t_max``.
An unbounded end is None.
"""
from . import const
from . import pairwise

from .point import P
from .shape import AffineShape


class Line(AffineShape):
    """Two dimensional immutable infinite line defined by a point
    on the line and a direction vector.

    The direction does not need to be unit length but a zero
    direction is undefined.

    Args:
        origin: A point on the line as a 2-tuple (x, y).
        direction: Direction vector as a 2-tuple (x, y).
    """
    __slots__ = ()

    def __new__(cls, origin, direction):
        return tuple.__new__(cls, (P(origin), P(direction)))

    @staticmethod
    def from_points(p1, p2):
        """Create a Line through two points with a unit direction
        pointing from `p1` to `p2`.
        """
        p1 = P(p1)
        return Line(p1, p1.direction_to(p2))

    @staticmethod
    def from_segment(segment):
        """The line that contains a line segment."""
        return Line.from_points(segment.p1, segment.p2)

    @staticmethod
    def from_ray(ray):
        """The line that contains a ray."""
        return Line(ray.origin, ray.direction)

    @staticmethod
    def from_tangent_arc(arc, angle):
        """The line tangent to an arc at the point given by `angle`.

        Returns:
            A Line or None if the angle is outside the arc.
        """
        p = arc.point_at(angle)
        if p is None:
            return None
        return Line(p, (p - arc.pivot).normal().unit())

    @staticmethod
    def from_tangent_circle(circle, angle):
        """The line tangent to a circle at the point given by `angle`."""
        p = circle.point_at(angle)
        return Line(p, (p - circle.center).normal().unit())

    @staticmethod
    def axis_x():
        """The X axis."""
        return Line((0.0, 0.0), (1.0, 0.0))

    @staticmethod
    def axis_y():
        """The Y axis."""
        return Line((0.0, 0.0), (0.0, 1.0))

    @staticmethod
    def axis_x_offset(y):
        """A horizontal line that crosses the Y axis at `y`."""
        return Line((0.0, y), (1.0, 0.0))

    @staticmethod
    def axis_y_offset(x):
        """A vertical line that crosses the X axis at `x`."""
        return Line((x, 0.0), (0.0, 1.0))

    @staticmethod
    def from_point_slope(point, slope):
        """The line through `point` with the given slope."""
        return Line(point, P(1.0, slope).unit())

    @property
    def origin(self):
        """A point on the line."""
        return self[0]

    @property
    def direction(self):
        """The direction vector."""
        return self[1]

    def parametric(self):
        return (self[0], self[1].unit(), None, None)

    def direction_unnormalized(self):
        return self[1]

    def endpoints(self):
        """Lines have no end points."""
        return ()

    def normalize(self):
        """Return a copy of this line with a unit direction vector."""
        return Line(self.origin, self.direction.unit())

    def parallel_containing(self, p):
        """The line through point `p` that is parallel to this line."""
        return Line(p, self.direction)

    def arbitrary_perpendicular_containing(self, p):
        """A line through point `p` that is perpendicular to this line."""
        return Line(p, self.direction.normal())

    def project_point_scalar(self, p):
        """The signed distance along the line from the origin to the
        normal projection of point `p`, in units of the direction length.
        """
        return (P(p) - self.origin).dot(self.direction) / self.direction.length2()

    def project_point(self, p):
        """The normal projection of point `p` on to this line."""
        return self.origin + self.direction * self.project_point_scalar(p)

    def approx_contains(self, p):
        """True if point `p` lies on this line."""
        return const.approx_zero(self.signed_distance(p))

    def signed_distance(self, p):
        """Distance from this line to point `p`.
        Positive if the point lies to the left of the direction vector.
        """
        return (self.direction.cross(P(p) - self.origin)
                / self.direction.length())

    def unchecked_intersection(self, other):
        """Intersection point with another line. The lines must not be
        parallel, otherwise ZeroDivisionError is raised.
        """
        denom = self.direction.cross(other.direction)
        t = (other.origin - self.origin).cross(other.direction) / denom
        return self.origin + self.direction * t

    def unchecked_slope(self):
        """Slope of the line. ZeroDivisionError if the line is vertical."""
        return self.direction.y / self.direction.x

    def slope(self):
        """Slope of the line or None if the line is vertical."""
        if self.direction.x == 0:
            return None
        return self.unchecked_slope()

    def intercept_x(self):
        """The X coordinate where the line crosses the X axis,
        or None if the line is horizontal.
        """
        if self.direction.y == 0:
            return None
        return self.origin.x - self.origin.y * self.direction.x / self.direction.y

    def intercept_y(self):
        """The Y coordinate where the line crosses the Y axis,
        or None if the line is vertical.
        """
        if self.direction.x == 0:
            return None
        return self.origin.y - self.origin.x * self.unchecked_slope()

    def transform(self, matrix):
        """Return a copy of this line with the transform matrix applied.
        The direction is re-normalized.
        """
        return Line(self.origin.transform(matrix),
                    self.direction.transform_vector(matrix).unit())

    def __str__(self):
        """Concise string representation."""
        return 'Line(%s, %s)' % (str(self.origin), str(self.direction))

    def __repr__(self):
        """Precise string representation."""
        return 'Line(P(%r, %r), P(%r, %r))' % (self[0][0], self[0][1],
                                               self[1][0], self[1][1])


def param_in_range(t, t_min, t_max):
    """True if the parameter `t` lies within [t_min, t_max]
    (within EPSILON). None means unbounded.
    """
    if t_min is not None and t < t_min - const.EPSILON:
        return False
    if t_max is not None and t > t_max + const.EPSILON:
        return False
    return True


def intersect_params(a, b):
    """Parameters of the intersection point of the lines containing
    two linear shapes.

    The parallel test is done on the stored (unnormalized) directions
    so that exactly parallel input gives an exactly zero cross product.
    The parameters are then scaled to unit direction lengths.

    Returns:
        A tuple ``(t_a, t_b)`` or None if the shapes are exactly parallel.
    """
    vec_a = a.direction_unnormalized()
    vec_b = b.direction_unnormalized()
    denom = vec_a.cross(vec_b)
    if denom == 0:
        return None
    delta = b.parametric()[0] - a.parametric()[0]
    return (delta.cross(vec_b) / denom * vec_a.length(),
            delta.cross(vec_a) / denom * vec_b.length())


def linear_intersection(a, b):
    """Single intersection point of two linear shapes.
    None if they are parallel or the point is out of range
    on either shape.
    """
    params = intersect_params(a, b)
    if params is None:
        return None
    t_a, t_b = params
    origin_a, dir_a, min_a, max_a = a.parametric()
    min_b, max_b = b.parametric()[2:]
    if param_in_range(t_a, min_a, max_a) and param_in_range(t_b, min_b, max_b):
        return origin_a + dir_a * t_a
    return None


def linear_intersections(a, b):
    return pairwise.ordered_pair((linear_intersection(a, b),))


def linear_intersects(a, b):
    """True if two linear shapes share a point. Overlapping
    collinear shapes intersect.
    """
    params = intersect_params(a, b)
    if params is not None:
        return linear_intersection(a, b) is not None
    # Parallel: only collinear overlap is possible
    if not a.endpoints() and not b.endpoints():
        return a.approx_contains(b.parametric()[0])
    return (any(a.approx_contains(p) for p in b.endpoints())
            or any(b.approx_contains(p) for p in a.endpoints()))


def linear_distance(a, b):
    """Shortest distance between two linear shapes.

    If they do not intersect the closest points include an end point
    of at least one of the shapes.
    """
    if linear_intersects(a, b):
        return 0.0
    candidates = [abs(b.signed_distance(p)) for p in a.endpoints()]
    candidates.extend(abs(a.signed_distance(p)) for p in b.endpoints())
    if not candidates:
        # Two parallel lines
        return abs(a.signed_distance(b.parametric()[0]))
    return min(candidates)


def linear_parallel(a, b):
    return const.approx_zero(a.parametric()[1].cross(b.parametric()[1]))


def linear_perpendicular(a, b):
    return const.approx_zero(a.parametric()[1].dot(b.parametric()[1]))


def linear_collinear(a, b):
    """True if both shapes lie on the same infinite line."""
    return linear_parallel(a, b) and point_collinear(b.parametric()[0], a)


def point_collinear(p, linear):
    """True if point `p` lies on the infinite line containing
    the linear shape.
    """
    origin, direction = linear.parametric()[:2]
    return const.approx_zero(direction.cross(p - origin))


def register_linear_pair(kind_a, kind_b):
    """Register the relations between two kinds of linear shapes."""
    pairwise.distance.register(kind_a, kind_b)(linear_distance)
    pairwise.intersects.register(kind_a, kind_b)(linear_intersects)
    pairwise.intersection.register(kind_a, kind_b)(linear_intersection)
    pairwise.intersections.register(kind_a, kind_b)(linear_intersections)
    pairwise.approx_parallel.register(kind_a, kind_b)(linear_parallel)
    pairwise.approx_perpendicular.register(kind_a, kind_b)(
        linear_perpendicular)
    pairwise.approx_collinear.register(kind_a, kind_b)(linear_collinear)


def register_point(kind):
    """Register the point relations of a curve kind."""
    @pairwise.distance.register(P, kind)
    def _distance_point(p, shape):
        if shape.approx_contains(p):
            return 0.0
        return abs(shape.signed_distance(p))

    @pairwise.intersects.register(P, kind)
    def _intersects_point(p, shape):
        return shape.approx_contains(p)


register_point(Line)
register_linear_pair(Line, Line)
pairwise.approx_collinear.register(P, Line)(point_collinear)


@pairwise.approx_coincident.register(Line, Line)
def _coincident_line_line(line1, line2):
    return linear_collinear(line1, line2)
