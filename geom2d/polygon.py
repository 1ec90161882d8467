#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Convex polygon regions: the common base of triangles and rectangles,
and the relations between polygons and the other shapes.

Polygons are filled regions for :func:`~geom2d.pairwise.intersects`
and :func:`~geom2d.pairwise.distance`. Their edges are used for
:func:`~geom2d.pairwise.intersections`.
"""
from . import line
from . import sat
from . import circle
from . import pairwise

from .point import P
from .line import Line
from .ray import Ray
from .segment import Segment
from .arc import Arc
from .circle import Circle
from .shape import Shape


def signed_area(vertices):
    """Return the area of a simple polygon.

    Args:
        vertices: the polygon vertices. A list of 2-tuple (x, y) points.

    Returns (float):
        The area of the polygon. The area will be negative if the
        vertices are ordered clockwise.
    """
    area = 0.0
    for n in range(-1, len(vertices) - 1):
        p1 = vertices[n]
        p2 = vertices[n + 1]
        # Accumulate the cross product of each pair of vertices
        area += (p1[0] * p2[1]) - (p2[0] * p1[1])
    return area / 2


class ConvexPolygon(Shape):
    """Base class for convex polygons.

    Subclasses implement ``vertices()`` and ``contains(p)``.
    """
    __slots__ = ()

    def vertices(self):
        raise NotImplementedError()

    def contains(self, p):
        raise NotImplementedError()

    def edges(self):
        """The polygon edges as line segments. Edge `i` runs from
        vertex `i` to the next vertex.
        """
        vertices = self.vertices()
        n = len(vertices)
        return tuple(Segment(vertices[i], vertices[(i + 1) % n])
                     for i in range(n))

    def normals(self):
        """Outward unit normals of the edges, in edge order."""
        vertices = self.vertices()
        # Right hand normals point outward from a counter-clockwise polygon
        left = signed_area(vertices) < 0
        n = len(vertices)
        return tuple(
            vertices[i].direction_to(vertices[(i + 1) % n]).normal(left)
            for i in range(n))

    def area(self):
        return abs(signed_area(self.vertices()))

    def perimeter(self):
        return sum(edge.length() for edge in self.edges())

    def boundary_distance(self, p):
        """Distance from point `p` to the closest edge."""
        return min(abs(edge.signed_distance(p)) for edge in self.edges())

    def signed_distance(self, p):
        """Distance from the polygon boundary to point `p`.
        Negative if the point is inside the polygon.
        """
        p = P(p)
        dist = self.boundary_distance(p)
        return -dist if self.contains(p) else dist


def cyclic_approx_equal(vertices1, vertices2):
    """True if two vertex lists describe the same polygon starting
    at any vertex and in either direction.
    """
    n = len(vertices1)
    if n != len(vertices2):
        return False
    for seq in (vertices2, tuple(reversed(vertices2))):
        for start in range(n):
            if all(vertices1[i].approx_equal(seq[(start + i) % n])
                   for i in range(n)):
                return True
    return False


def _point_distance(p, region):
    if region.contains(p):
        return 0.0
    return region.boundary_distance(p)


def _point_intersects(p, region):
    return region.contains(p)


def _curve_intersects(curve, region):
    # A curve inside the region has its end points inside
    if any(region.contains(p) for p in curve.endpoints()):
        return True
    return any(pairwise.intersects(edge, curve) for edge in region.edges())


def _curve_distance(curve, region):
    if _curve_intersects(curve, region):
        return 0.0
    return min(pairwise.distance(edge, curve) for edge in region.edges())


def _linear_intersections(linear, region):
    return pairwise.ordered_pair(line.linear_intersection(edge, linear)
                                 for edge in region.edges())


def _circle_intersects(circle_, region):
    return circle.reaches(circle_, _point_distance(circle_.center, region))


def _circle_distance(circle_, region):
    dist = _point_distance(circle_.center, region)
    if circle.reaches(circle_, dist):
        return 0.0
    return dist - circle_.radius


def _region_intersects(region1, region2):
    if (region1.contains(region2.vertices()[0])
            or region2.contains(region1.vertices()[0])):
        return True
    edges2 = region2.edges()
    return any(line.linear_intersects(edge1, edge2)
               for edge1 in region1.edges() for edge2 in edges2)


def _region_distance(region1, region2):
    if _region_intersects(region1, region2):
        return 0.0
    edges2 = region2.edges()
    return min(line.linear_distance(edge1, edge2)
               for edge1 in region1.edges() for edge2 in edges2)


def register_region(kind, earlier_regions=()):
    """Register the relations between a polygon kind and every
    other kind defined before it, and itself.

    Args:
        kind: A :class:`ConvexPolygon` subclass.
        earlier_regions: Polygon kinds that were registered before this one.
    """
    pairwise.distance.register(P, kind)(_point_distance)
    pairwise.intersects.register(P, kind)(_point_intersects)
    for curve in (Line, Ray, Segment, Arc):
        pairwise.distance.register(curve, kind)(_curve_distance)
        pairwise.intersects.register(curve, kind)(_curve_intersects)
    for linear in (Line, Ray, Segment):
        pairwise.intersections.register(linear, kind)(_linear_intersections)
    pairwise.distance.register(Circle, kind)(_circle_distance)
    pairwise.intersects.register(Circle, kind)(_circle_intersects)
    pairwise.intersect_depth.register(Circle, kind)(sat.circle_polygon_depth)
    for region in tuple(earlier_regions) + (kind,):
        pairwise.distance.register(region, kind)(_region_distance)
        pairwise.intersects.register(region, kind)(_region_intersects)
        pairwise.intersect_depth.register(region, kind)(sat.polygon_depth)
