#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
2D geometry package.

Lines, rays, segments, circular arcs, circles, triangles, rotated
rectangles and axis aligned rectangles, with a full set of pairwise
relations (distance, intersection, tangency, penetration depth, etc.)
between every pair of shape kinds.

Parts of this library where inspired by planar, a 2D geometry library for
python gaming:
    https://bitbucket.org/caseman/planar/
"""
# Expose package-wide constants and functions
from .const import (TAU, set_epsilon, approx_equal, approx_zero,
                    float_round)
from .util import normalize_angle, angle_in_range, calc_rotation

# Expose the basic geometric classes at package level.
# Importing the shape modules also registers their pairwise relations.
from .point import P
from .line import Line
from .ray import Ray
from .segment import Segment
from .arc import Arc
from .circle import Circle
from .triangle import Triangle
from .rectangle import Rectangle
from .box import AlignedRectangle

# Pairwise relations as functions
from .pairwise import (distance, intersects, intersection, intersections,
                       intersect_depth, approx_parallel,
                       approx_perpendicular, approx_collinear,
                       approx_coincident, approx_tangent)
