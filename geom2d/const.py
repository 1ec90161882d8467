#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Package wide constants and the tolerance kernel that every
approximate comparison in geom2d goes through.

Module globals:

    EPSILON: Absolute tolerance, and the relative tolerance for
        values larger than 1.
    EPSILON_PRECISION: Decimal digits implied by EPSILON.
    EPSILON_FLOAT_FMT: printf style format for floats with
        EPSILON_PRECISION decimals.

A tolerance between 1e-09 and 1e-05 suits most drawings; pick one
that matches the magnitude of the coordinates in use.
The comparison functions look EPSILON up on every call, so change it
with set_epsilon() before building any shapes, and not while
shapes are being compared.
"""
import math

#: A full turn in radians.
TAU = math.pi * 2

#: Comparison tolerance.
EPSILON = 1e-06
#: Decimal digits implied by EPSILON.
EPSILON_PRECISION = 6
#: Float format matching EPSILON_PRECISION.
EPSILON_FLOAT_FMT = '%.6f'


def set_epsilon(value):
    """Replace the package wide comparison tolerance.

    The precision and the display format are derived from it.
    Coordinates much larger than a few thousand units usually need
    a larger tolerance, and very small ones a smaller tolerance.

    Args:
        value: The new tolerance, a small positive float.
    """
    #pylint: disable=global-statement
    global EPSILON, EPSILON_PRECISION, EPSILON_FLOAT_FMT
    EPSILON = float(value)
    EPSILON_PRECISION = max(0, int(round(abs(math.log(value, 10)))))
    EPSILON_FLOAT_FMT = '%%.%df' % EPSILON_PRECISION


def approx_equal(value1, value2):
    """Tolerant float equality.

    The allowed difference is EPSILON times the larger magnitude,
    or EPSILON itself when both values are small. So the test is
    absolute near zero and relative elsewhere.

    Args:
        value1: Float value
        value2: Float value
    """
    if value1 == value2:
        return True
    tolerance = max(EPSILON, EPSILON * max(abs(value1), abs(value2)))
    return abs(value1 - value2) <= tolerance


def approx_zero(value):
    """Same as approx_equal(value, 0.0)."""
    return abs(value) <= EPSILON


def sign(value):
    """-1.0 for negative values and 1.0 otherwise (including zero)."""
    return -1.0 if value < 0 else 1.0


def clamp(value, min_value, max_value):
    """Limit `value` to [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


def float_round(value):
    """Round to EPSILON_PRECISION decimal places."""
    return round(value, EPSILON_PRECISION)
