#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D ray (half line) geometry.
"""
from . import const
from . import line
from . import pairwise

from .point import P
from .line import Line
from .shape import AffineShape


class Ray(AffineShape):
    """Two dimensional immutable ray that starts at `origin` and
    extends infinitely in the direction of `direction`.

    Args:
        origin: Start point as a 2-tuple (x, y).
        direction: Direction vector as a 2-tuple (x, y).
    """
    __slots__ = ()

    def __new__(cls, origin, direction):
        return tuple.__new__(cls, (P(origin), P(direction)))

    @staticmethod
    def from_point_to_point(p1, p2):
        """The ray that starts at `p1` and passes through `p2`."""
        p1 = P(p1)
        return Ray(p1, p1.direction_to(p2))

    @property
    def origin(self):
        """The start point of the ray."""
        return self[0]

    @property
    def direction(self):
        """The direction vector."""
        return self[1]

    def parametric(self):
        return (self[0], self[1].unit(), 0.0, None)

    def direction_unnormalized(self):
        return self[1]

    def endpoints(self):
        return (self[0],)

    def normalize(self):
        """Return a copy of this ray with a unit direction vector."""
        return Ray(self.origin, self.direction.unit())

    def project_point_scalar(self, p):
        """Distance along the ray to the normal projection of point `p`
        in units of the direction length. Never less than zero.
        """
        t = (P(p) - self.origin).dot(self.direction) / self.direction.length2()
        return max(0.0, t)

    def project_point(self, p):
        """The point on this ray closest to point `p`."""
        return self.origin + self.direction * self.project_point_scalar(p)

    def approx_contains(self, p):
        """True if point `p` lies on this ray."""
        delta = P(p) - self.origin
        if delta.dot(self.direction) < 0 and not delta.approx_zero():
            return False
        return const.approx_zero(self.direction.unit().cross(delta))

    def signed_distance(self, p):
        """Distance from this ray to point `p`.

        If the point projects on to the ray the distance is positive
        to the left of the direction vector and negative to the right.
        Points behind the origin are measured to the origin and are
        always positive.
        """
        delta = P(p) - self.origin
        if delta.dot(self.direction) < 0:
            return delta.length()
        return self.direction.unit().cross(delta)

    def transform(self, matrix):
        """Return a copy of this ray with the transform matrix applied.
        The direction is re-normalized.
        """
        return Ray(self.origin.transform(matrix),
                   self.direction.transform_vector(matrix).unit())

    def __str__(self):
        """Concise string representation."""
        return 'Ray(%s, %s)' % (str(self.origin), str(self.direction))

    def __repr__(self):
        """Precise string representation."""
        return 'Ray(P(%r, %r), P(%r, %r))' % (self[0][0], self[0][1],
                                              self[1][0], self[1][1])


line.register_point(Ray)
line.register_linear_pair(Line, Ray)
line.register_linear_pair(Ray, Ray)
pairwise.approx_collinear.register(P, Ray)(line.point_collinear)


@pairwise.approx_coincident.register(Ray, Ray)
def _coincident_ray_ray(ray1, ray2):
    return (ray1.origin.approx_equal(ray2.origin)
            and ray1.direction.unit().approx_equal(ray2.direction.unit()))
