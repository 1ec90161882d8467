#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Base classes for 2D shapes.

Shapes are immutable tuples. The binary relations are dispatched through
:mod:`geom2d.pairwise` so that ``a.distance(b)`` and ``b.distance(a)``
run the same code.
"""
from . import pairwise
from . import transform2d

from .point import P

#: The point (0, 0). Default origin for rotation, scaling and shearing.
ORIGIN = P(0.0, 0.0)


def scale_factors(factor):
    """Split a scalar or (x, y) scale factor into X and Y factors."""
    if isinstance(factor, (tuple, list)):
        return float(factor[0]), float(factor[1])
    return float(factor), float(factor)


class Shape(tuple):
    """Base class for all shapes.

    Subclasses supply the fields as tuple items and implement
    ``translate``, ``rotate_at`` and ``scale_at``.
    """
    __slots__ = ()

    def distance(self, other):
        """Shortest distance to another shape or point.
        Zero if they intersect.
        """
        return pairwise.distance(self, other)

    def intersects(self, other):
        """True if this shape and `other` share at least one point."""
        return pairwise.intersects(self, other)

    def intersection(self, other):
        """The single intersection point with another linear shape,
        or None.
        """
        return pairwise.intersection(self, other)

    def intersections(self, other):
        """The intersection points with `other` as a sorted pair,
        or None. A single point ``p`` is returned as ``(p, p)``.
        """
        return pairwise.intersections(self, other)

    def intersect_depth(self, other):
        """The penetration vector. Moving this shape by the vector
        resolves the overlap. None if the shapes do not intersect.
        """
        return pairwise.intersect_depth(self, other)

    def approx_parallel(self, other):
        return pairwise.approx_parallel(self, other)

    def approx_perpendicular(self, other):
        return pairwise.approx_perpendicular(self, other)

    def approx_collinear(self, other):
        return pairwise.approx_collinear(self, other)

    def approx_coincident(self, other):
        """True if both shapes describe approximately the same point set."""
        return pairwise.approx_coincident(self, other)

    def approx_tangent(self, other):
        return pairwise.approx_tangent(self, other)

    def rotate(self, angle):
        """Return a copy of this shape rotated about (0, 0)."""
        return self.rotate_at(ORIGIN, angle)

    def scale(self, factor):
        """Return a copy of this shape scaled about (0, 0)."""
        return self.scale_at(ORIGIN, factor)


class AffineShape(Shape):
    """A shape that maps onto the same kind of shape under any
    affine transform, such as lines and polygons.

    Subclasses implement ``transform(matrix)``.
    """
    __slots__ = ()

    def transform(self, matrix):
        raise NotImplementedError()

    def translate(self, offset):
        """Return a copy of this shape moved by `offset`."""
        return self.transform(
            transform2d.matrix_translate(offset[0], offset[1]))

    def rotate_at(self, origin, angle):
        """Return a copy of this shape rotated about `origin`."""
        return self.transform(transform2d.matrix_rotate(angle, origin))

    def scale_at(self, origin, factor):
        """Return a copy of this shape scaled about `origin`.

        Args:
            origin: Scale origin.
            factor: A scalar or an (x, y) tuple of scale factors.
        """
        scale_x, scale_y = scale_factors(factor)
        return self.transform(
            transform2d.matrix_scale(scale_x, scale_y, origin))

    def shear_x_at(self, origin, factor):
        """Return a copy of this shape sheared along the X axis
        about `origin`.
        """
        return self.transform(transform2d.matrix_shear_x(factor, origin))

    def shear_y_at(self, origin, factor):
        """Return a copy of this shape sheared along the Y axis
        about `origin`.
        """
        return self.transform(transform2d.matrix_shear_y(factor, origin))

    def shear_x(self, factor):
        return self.shear_x_at(ORIGIN, factor)

    def shear_y(self, factor):
        return self.shear_y_at(ORIGIN, factor)
