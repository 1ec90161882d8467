#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Basic 2D axis aligned rectangle (bounding box) geometry.
"""
import math

from . import polygon
from . import pairwise

from .point import P
from .triangle import Triangle
from .rectangle import Rectangle
from .shape import scale_factors
from .polygon import ConvexPolygon


class AlignedRectangle(ConvexPolygon):
    """Two dimensional immutable rectangle defined by two points,
    the lower left corner and the upper right corner respectively.

    The sides are always aligned with the X and Y axes.
    The corners are stored as given. Use :meth:`from_bounding_points`
    to canonicalize them.

    Args:
        pmin: Lower left corner as a 2-tuple (x, y).
        pmax: Upper right corner as a 2-tuple (x, y).
    """
    __slots__ = ()

    def __new__(cls, pmin, pmax):
        return tuple.__new__(cls, (P(pmin), P(pmax)))

    @staticmethod
    def from_bounding_points(points):
        """Create an AlignedRectangle from the bounding box of
        the given points.
        """
        points = list(points)
        xmin = min(p[0] for p in points)
        ymin = min(p[1] for p in points)
        xmax = max(p[0] for p in points)
        ymax = max(p[1] for p in points)
        return AlignedRectangle((xmin, ymin), (xmax, ymax))

    @staticmethod
    def from_bounding_segment(segment):
        return AlignedRectangle.from_bounding_points(segment.endpoints())

    @staticmethod
    def from_bounding_arc(arc):
        """The bounding box of an arc. Includes the points where
        the arc crosses the horizontal and vertical lines
        through its pivot.
        """
        points = list(arc.endpoints())
        for quadrant in range(4):
            p = arc.point_at(quadrant * math.pi / 2)
            if p is not None:
                points.append(p)
        return AlignedRectangle.from_bounding_points(points)

    @staticmethod
    def from_bounding_circle(circle):
        r = abs(circle.radius)
        return AlignedRectangle(circle.center - r, circle.center + r)

    @staticmethod
    def from_bounding_triangle(triangle):
        return AlignedRectangle.from_bounding_points(triangle.vertices())

    @staticmethod
    def from_bounding_rectangle(rectangle):
        return AlignedRectangle.from_bounding_points(rectangle.vertices())

    @property
    def min(self):
        """The lower left corner."""
        return self[0]

    @property
    def max(self):
        """The upper right corner."""
        return self[1]

    @property
    def size(self):
        """Width and height as a vector (w, h)."""
        return self[1] - self[0]

    @property
    def center(self):
        """Return the center point of this rectangle."""
        return (self[0] + self[1]) / 2

    def width(self):
        """Width of rectangle. (along X axis)"""
        return self[1][0] - self[0][0]

    def height(self):
        """Height of rectangle. (along Y axis)"""
        return self[1][1] - self[0][1]

    def area(self):
        return abs(self.width() * self.height())

    def perimeter(self):
        return 2 * (abs(self.width()) + abs(self.height()))

    def vertices(self):
        """The corners, counter-clockwise from the lower left."""
        pmin, pmax = self
        return (pmin, P(pmax.x, pmin.y), pmax, P(pmin.x, pmax.y))

    def contains(self, p):
        """True if point `p` is inside or on the rectangle."""
        return (self[0][0] <= p[0] <= self[1][0]
                and self[0][1] <= p[1] <= self[1][1])

    def boundary_distance(self, p):
        p = P(p)
        if self.contains(p):
            return min(p.x - self[0][0], self[1][0] - p.x,
                       p.y - self[0][1], self[1][1] - p.y)
        return p.distance(p.clamp(self[0], self[1]))

    def translate(self, offset):
        return AlignedRectangle(self[0].translate(offset),
                                self[1].translate(offset))

    def scale_at(self, origin, factor):
        """Return a copy of this rectangle scaled about `origin`.
        The corners are re-ordered if a negative factor flips them.

        Args:
            origin: Scale origin.
            factor: A scalar or an (x, y) tuple of scale factors.
        """
        factors = scale_factors(factor)
        return AlignedRectangle.from_bounding_points(
            (self[0].scale(factors, origin), self[1].scale(factors, origin)))

    def rotate_at(self, origin, angle):
        """Rotate about `origin`. The result is no longer axis aligned
        so a :class:`~geom2d.rectangle.Rectangle` is returned.
        """
        return self.to_rectangle().rotate_at(origin, angle)

    def to_rectangle(self):
        """The equivalent :class:`~geom2d.rectangle.Rectangle`."""
        return Rectangle(self.center, self.size, 0.0)

    def __str__(self):
        """Concise string representation."""
        return 'AlignedRectangle(%s, %s)' % (str(self[0]), str(self[1]))

    def __repr__(self):
        """Precise string representation."""
        return 'AlignedRectangle(%r, %r)' % (self[0], self[1])


polygon.register_region(AlignedRectangle, (Triangle, Rectangle))


@pairwise.approx_coincident.register(AlignedRectangle, AlignedRectangle)
def _coincident_box_box(rect1, rect2):
    return rect1.min.approx_equal(rect2.min) and rect1.max.approx_equal(rect2.max)


@pairwise.approx_coincident.register(Rectangle, AlignedRectangle)
def _coincident_rectangle_box(rect, box):
    return polygon.cyclic_approx_equal(rect.vertices(), box.vertices())
