#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D angle utility functions.
"""
import math

from . import const

from .const import TAU


def normalize_angle(angle, center=0.0):
    """Normalize ``angle`` (in radians) about a 2*PI interval centered
    at ``center``. The interval is open at the low end and closed
    at the high end.

    For angle between -PI (exclusive) and PI (default):
        normalize_angle(angle, center=0.0)
    For angle between 0 (exclusive) and 2*PI:
        normalize_angle(angle, center=math.pi)

    Args:
        angle: Angle to normalize
        center: Center value about which to normalize.
            Default is 0.0.
    """
    return angle - (TAU * math.ceil((angle - math.pi - center) / TAU))


def angle_in_range(angle, start, end):
    """Determine if an angle lies within the counter-clockwise
    angular interval that begins at ``start`` and ends at ``end``.

    The interval endpoints are included (within EPSILON). If the
    interval spans a full turn or more then every angle is inside it.
    Otherwise the angles are normalized to (-PI, PI] and the interval
    either lies between them or wraps through the +/-PI seam
    when ``start`` > ``end``.

    Args:
        angle: The angle to test, in radians.
        start: Start angle of the interval, in radians.
        end: End angle of the interval, in radians.

    Returns:
        True if the angle lies within the interval.
    """
    sweep = abs(end - start)
    if sweep >= TAU or const.approx_equal(sweep, TAU):
        return True
    angle = _snap_seam(normalize_angle(angle))
    start = _snap_seam(normalize_angle(start))
    end = _snap_seam(normalize_angle(end))
    above_start = angle >= start or const.approx_equal(angle, start)
    below_end = angle <= end or const.approx_equal(angle, end)
    if start <= end:
        return above_start and below_end
    # The interval wraps through PI
    return above_start or below_end


def _snap_seam(angle):
    """Angles within EPSILON of -PI are treated as PI."""
    if const.approx_equal(angle, -math.pi):
        return math.pi
    return angle


def remainder(x, y):
    """IEEE 754 remainder of ``x`` with respect to ``y``.

    The result is ``x - n*y`` where n is the integer nearest to ``x / y``.
    """
    return math.remainder(x, y)


def calc_rotation(start_angle, end_angle):
    """Calculate the amount of rotation required to get from
    `start_angle` to `end_angle`.

    Args:
        start_angle: Start angle in radians.
        end_angle: End angle in radians.

    Returns:
        Rotation amount in radians where -PI <= rotation <= PI.
    """
    if const.approx_equal(start_angle, end_angle):
        return 0.0
    start_angle = normalize_angle(start_angle)
    end_angle = normalize_angle(end_angle)
    rotation = end_angle - start_angle
    if rotation < -math.pi:
        rotation += TAU
    elif rotation > math.pi:
        rotation -= TAU
    return rotation
