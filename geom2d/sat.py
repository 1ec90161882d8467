#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Separating axis theorem (SAT) helpers for convex shapes.

The convex shapes are circles and polygons. A polygon is anything
with ``vertices()``, ``normals()`` (outward unit edge normals) and
``edges()`` methods.

See <https://en.wikipedia.org/wiki/Hyperplane_separation_theorem>
"""
from . import const


def project_points(points, axis):
    """Project points on to an axis.

    Returns:
        The projection interval as a tuple (min, max).
    """
    dots = [p.dot(axis) for p in points]
    return (min(dots), max(dots))


def project_circle(center, radius, axis):
    """Project a circle on to a unit axis."""
    d = center.dot(axis)
    radius = abs(radius)
    return (d - radius, d + radius)


def min_overlap_vector(axes, project_a, project_b):
    """Find the axis of minimum overlap between two convex shapes.

    Args:
        axes: Candidate separating axes as unit vectors.
        project_a: Function that projects the first shape on to an axis.
        project_b: Function that projects the second shape on to an axis.

    Returns:
        The shortest vector that moves the first shape out of the
        second, or None if any axis separates them. Shapes that
        touch yield a zero length vector.
    """
    best_overlap = None
    best_vector = None
    for axis in axes:
        min_a, max_a = project_a(axis)
        min_b, max_b = project_b(axis)
        # Move backwards along the axis, or forward
        backward = max_a - min_b
        forward = max_b - min_a
        overlap = min(backward, forward)
        if overlap < 0 and not const.approx_zero(overlap):
            return None
        if best_overlap is None or overlap < best_overlap:
            best_overlap = overlap
            if backward <= forward:
                best_vector = axis * -backward
            else:
                best_vector = axis * forward
    return best_vector


def polygon_depth(polygon1, polygon2):
    """Penetration vector of two convex polygons."""
    axes = list(polygon1.normals()) + list(polygon2.normals())
    vertices1 = polygon1.vertices()
    vertices2 = polygon2.vertices()
    return min_overlap_vector(
        axes,
        lambda axis: project_points(vertices1, axis),
        lambda axis: project_points(vertices2, axis))


def closest_boundary_point(polygon, p):
    """The point on the boundary of a polygon closest to point `p`."""
    closest = None
    closest_d2 = None
    for edge in polygon.edges():
        q = edge.project_point(p)
        d2 = q.distance2(p)
        if closest is None or d2 < closest_d2:
            closest = q
            closest_d2 = d2
    return closest


def circle_polygon_depth(circle, polygon):
    """Penetration vector that moves a circle out of a convex polygon.

    If the circle center is outside the polygon the axis from the
    closest polygon feature to the center is tested as well
    as the polygon's edge normals.
    """
    axes = list(polygon.normals())
    if not polygon.contains(circle.center):
        closest = closest_boundary_point(polygon, circle.center)
        axis = closest.direction_to(circle.center)
        if not axis.approx_zero():
            axes.append(axis)
    vertices = polygon.vertices()
    return min_overlap_vector(
        axes,
        lambda axis: project_circle(circle.center, circle.radius, axis),
        lambda axis: project_points(vertices, axis))
