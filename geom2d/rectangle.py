#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D rotated rectangle geometry.
"""
from . import const
from . import util
from . import polygon
from . import pairwise

from .point import P
from .triangle import Triangle
from .shape import scale_factors
from .polygon import ConvexPolygon


class Rectangle(ConvexPolygon):
    """Two dimensional immutable rectangle rotated about its center.

    Args:
        center: Center point as a 2-tuple (x, y).
        size: Width and height as a 2-tuple (w, h).
        angle: Rotation angle in radians.
    """
    __slots__ = ()

    def __new__(cls, center, size, angle=0.0):
        return tuple.__new__(cls, (P(center), P(size), float(angle)))

    @property
    def center(self):
        return self[0]

    @property
    def size(self):
        """Width and height as a vector (w, h)."""
        return self[1]

    @property
    def angle(self):
        """Rotation angle in radians."""
        return self[2]

    def width(self):
        return self.size.x

    def height(self):
        return self.size.y

    def vertices(self):
        """The corners, counter-clockwise in the rectangle's own frame
        starting with the bottom left corner.
        """
        half_w, half_h = self.size / 2
        corners = ((-half_w, -half_h), (half_w, -half_h),
                   (half_w, half_h), (-half_w, half_h))
        return tuple(P(corner).rotate(self.angle) + self.center
                     for corner in corners)

    def local_point(self, p):
        """Point `p` in the rectangle's own frame, where the center is
        at (0, 0) and the sides are parallel to the axes.
        """
        return (P(p) - self.center).rotate(-self.angle)

    def contains(self, p):
        """True if point `p` is inside or on the rectangle."""
        x, y = self.local_point(p)
        half_w, half_h = self.size / 2
        return abs(x) <= abs(half_w) and abs(y) <= abs(half_h)

    def boundary_distance(self, p):
        local = self.local_point(p)
        half = P(abs(self.size.x), abs(self.size.y)) / 2
        if self.contains(p):
            return min(half.x - abs(local.x), half.y - abs(local.y))
        return local.distance(local.clamp(-half, half))

    def area(self):
        return abs(self.size.x * self.size.y)

    def perimeter(self):
        return 2 * (abs(self.size.x) + abs(self.size.y))

    def translate(self, offset):
        return Rectangle(self.center.translate(offset), self.size, self.angle)

    def rotate_at(self, origin, angle):
        return Rectangle(self.center.rotate(angle, origin), self.size,
                         util.normalize_angle(self.angle + angle))

    def scale_at(self, origin, factor):
        """Return a copy of this rectangle scaled about `origin`.
        The factor is applied to the center and to the size.

        Args:
            origin: Scale origin.
            factor: A scalar or an (x, y) tuple of scale factors.
        """
        scale_x, scale_y = scale_factors(factor)
        return Rectangle(self.center.scale((scale_x, scale_y), origin),
                         (self.size.x * scale_x, self.size.y * scale_y),
                         self.angle)

    def __str__(self):
        """Concise string representation."""
        return 'Rectangle(%s, %s, %s)' % (str(self.center), str(self.size),
                                          const.EPSILON_FLOAT_FMT % self.angle)

    def __repr__(self):
        """Precise string representation."""
        return 'Rectangle(%r, %r, %r)' % (self[0], self[1], self[2])


polygon.register_region(Rectangle, (Triangle,))


@pairwise.approx_coincident.register(Rectangle, Rectangle)
def _coincident_rectangle_rectangle(rect1, rect2):
    return polygon.cyclic_approx_equal(rect1.vertices(), rect2.vertices())
