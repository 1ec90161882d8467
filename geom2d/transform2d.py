#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
2D affine transform matrices.

A matrix is a nested tuple ((a, b, c), (d, e, f)) mapping a point
(x, y) to (a*x + b*y + c, d*x + e*y + f). The third column is the
translation part and the rest is the linear part.
"""
import math


def compose_transform(m1, m2):
    """The product m1 * m2.

    The resulting matrix applies `m2` first and then `m1`.
    """
    a1, b1, c1 = m1[0]
    d1, e1, f1 = m1[1]
    a2, b2, c2 = m2[0]
    d2, e2, f2 = m2[1]
    return ((a1 * a2 + b1 * d2, a1 * b2 + b1 * e2, a1 * c2 + b1 * f2 + c1),
            (d1 * a2 + e1 * d2, d1 * b2 + e1 * e2, d1 * c2 + e1 * f2 + f1))


def _about_origin(m, origin):
    # Conjugate m by a translation so that origin becomes the fixed point
    if origin is None:
        return m
    m_to = matrix_translate(-origin[0], -origin[1])
    m_from = matrix_translate(origin[0], origin[1])
    return compose_transform(m_from, compose_transform(m, m_to))


def matrix_rotate(angle, origin=None):
    """Counter-clockwise rotation by `angle` radians about `origin`,
    or about (0, 0) if no origin is given.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return _about_origin(((cos_a, -sin_a, 0.0), (sin_a, cos_a, 0.0)), origin)


def matrix_translate(x, y):
    """Translation by (x, y)."""
    return ((1.0, 0.0, x), (0.0, 1.0, y))


def matrix_scale(scale_x, scale_y, origin=None):
    """Axis scaling about `origin`, or about (0, 0) if no origin
    is given.

    Args:
        scale_x: Factor along X.
        scale_y: Factor along Y.
        origin: Optional fixed point.
    """
    return _about_origin(((scale_x, 0.0, 0.0), (0.0, scale_y, 0.0)), origin)


def matrix_shear_x(factor, origin=None):
    """Horizontal shear: x' = x + factor * y."""
    return _about_origin(((1.0, factor, 0.0), (0.0, 1.0, 0.0)), origin)


def matrix_shear_y(factor, origin=None):
    """Vertical shear: y' = y + factor * x."""
    return _about_origin(((1.0, 0.0, 0.0), (factor, 1.0, 0.0)), origin)


def matrix_apply_to_point(matrix, p):
    """Map the point `p` through `matrix`. Returns an (x, y) tuple."""
    (a, b, c), (d, e, f) = matrix
    x, y = p
    return (a * x + b * y + c, d * x + e * y + f)


def matrix_apply_to_vector(matrix, v):
    """Map the direction `v` through the linear part of `matrix` only."""
    (a, b, _), (d, e, _) = matrix
    x, y = v
    return (a * x + b * y, d * x + e * y)
