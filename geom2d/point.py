#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Points and free vectors in the plane.
"""
import math

from . import transform2d
from . import const


# pylint: disable=too-many-public-methods
class P(tuple):
    """An immutable 2D point, also used as a direction vector.

    P is a plain (x, y) float tuple underneath so it can be passed
    anywhere a coordinate pair is expected.

    ``==``, ``<`` and hashing are the exact tuple operations,
    so points sort lexicographically by (x, y) and work as dict keys.
    Tolerance based comparison is :meth:`approx_equal`.

    Args:
        x: X coordinate, or an (x, y) pair when `y` is omitted.
        y: Y coordinate.
    """
    __slots__ = ()

    def __new__(cls, x, y=None):
        if y is None:
            return tuple.__new__(cls, (float(x[0]), float(x[1])))
        return tuple.__new__(cls, (float(x), float(y)))

    @property
    def x(self):
        """Horizontal coordinate."""
        return self[0]

    @property
    def y(self):
        """Vertical coordinate."""
        return self[1]

    @staticmethod
    def from_polar(r, angle):
        """Make a point from a magnitude and a direction angle.

        Args:
            r: Distance from the origin.
            angle: Direction in radians, counter-clockwise from +X.
        """
        return P(r * math.cos(angle), r * math.sin(angle))

    def approx_zero(self):
        """True if this is (nearly) the null vector."""
        return const.approx_zero(self[0]) and const.approx_zero(self[1])

    def approx_equal(self, other):
        """True if each coordinate is within tolerance of `other`'s.

        Args:
            other: A point or (x, y) pair.
        """
        return (const.approx_equal(self[0], other[0])
                and const.approx_equal(self[1], other[1]))

    def length(self):
        """Magnitude of the vector."""
        return math.hypot(self[0], self[1])

    def length2(self):
        """Squared magnitude. Avoids a square root when only
        comparing lengths.
        """
        x, y = self
        return x * x + y * y

    def unit(self):
        """This vector scaled to length 1.

        Returns:
            A unit vector, or (0, 0) for the null vector.
        """
        length = self.length()
        if length > 0.0:
            return P(self[0] / length, self[1] / length)
        return P(0.0, 0.0)

    def normal(self, left=True):
        """This vector turned a quarter turn.

        Args:
            left: Counter-clockwise if True (the default),
                clockwise otherwise.
        """
        if left:
            return P(-self[1], self[0])
        return P(self[1], -self[0])

    def dot(self, other):
        """Scalar (inner) product with `other`."""
        x2, y2 = other
        return self[0] * x2 + self[1] * y2

    def cross(self, other):
        """Perp-dot product with `other`.

        The sign gives the turn direction: positive when `other` lies
        counter-clockwise of this vector, zero when they are parallel.
        """
        x2, y2 = other
        return self[0] * y2 - x2 * self[1]

    def angle(self):
        """Direction of the vector in radians, in the range [-pi, pi]."""
        return math.atan2(self[1], self[0])

    def angle_to(self, p):
        """Direction of the vector pointing from here to `p`."""
        return math.atan2(p[1] - self[1], p[0] - self[0])

    def direction_to(self, p):
        """Unit vector pointing from here to `p`."""
        return P(p[0] - self[0], p[1] - self[1]).unit()

    def distance(self, p):
        """Euclidean distance to the point `p`."""
        return math.hypot(self[0] - p[0], self[1] - p[1])

    def distance2(self, p):
        """Squared Euclidean distance to the point `p`."""
        dx = self[0] - p[0]
        dy = self[1] - p[1]
        return dx * dx + dy * dy

    def clamp(self, min_p, max_p):
        """The nearest point inside the aligned box spanned by
        `min_p` and `max_p`.
        """
        return P(const.clamp(self[0], min_p[0], max_p[0]),
                 const.clamp(self[1], min_p[1], max_p[1]))

    def transform(self, matrix):
        """Apply a 2x3 affine matrix to this point."""
        return P(transform2d.matrix_apply_to_point(matrix, self))

    def transform_vector(self, matrix):
        """Apply only the linear part of a 2x3 affine matrix,
        treating this point as a direction.
        """
        return P(transform2d.matrix_apply_to_vector(matrix, self))

    def translate(self, offset):
        return P(self[0] + offset[0], self[1] + offset[1])

    def rotate(self, angle, origin=None):
        """Rotate counter-clockwise by `angle` radians about
        `origin`, or about (0, 0) if no origin is given.
        """
        return self.transform(transform2d.matrix_rotate(angle, origin))

    def scale(self, factor, origin=None):
        """Scale about `origin`, or about (0, 0) if no origin is given.

        Args:
            factor: One factor for both axes, or an (sx, sy) pair.
            origin: Optional fixed point of the scaling.
        """
        if isinstance(factor, tuple):
            scale_x, scale_y = factor
        else:
            scale_x = scale_y = factor
        return self.transform(
            transform2d.matrix_scale(scale_x, scale_y, origin))

    def shear_x(self, factor, origin=None):
        return self.transform(transform2d.matrix_shear_x(factor, origin))

    def shear_y(self, factor, origin=None):
        return self.transform(transform2d.matrix_shear_y(factor, origin))

    def __neg__(self):
        return P(-self[0], -self[1])

    def __add__(self, other):
        """Component-wise sum with a vector, or add a scalar
        to both coordinates.
        """
        try:
            n = float(other)
            return P(self[0] + n, self[1] + n)
        except TypeError:
            x2, y2 = other
            return P(self[0] + x2, self[1] + y2)

    def __sub__(self, other):
        """Component-wise difference with a vector, or subtract
        a scalar from both coordinates.
        """
        try:
            n = float(other)
            return P(self[0] - n, self[1] - n)
        except TypeError:
            x2, y2 = other
            return P(self[0] - x2, self[1] - y2)

    def __mul__(self, other):
        """Scale by a scalar. Use dot() or cross() for products
        of two vectors.
        """
        return P(self[0] * other, self[1] * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return P(self[0] / other, self[1] / other)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.length()

    def __str__(self):
        """Coordinates rounded to the tolerance precision."""
        fmt = const.EPSILON_FLOAT_FMT
        return 'P(%s, %s)' % (fmt % self[0], fmt % self[1])

    def __repr__(self):
        return 'P(%r, %r)' % self


#: Alias of :meth:`P.length`
P.mag = P.length
