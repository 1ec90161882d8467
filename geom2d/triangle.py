#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""Basic 2D triangle geometry.
"""
import math
import itertools

from . import const
from . import polygon
from . import pairwise

from .point import P
from .line import Line
from .segment import Segment
from .circle import Circle
from .shape import AffineShape
from .polygon import ConvexPolygon


class Triangle(AffineShape, ConvexPolygon):
    """Two dimensional immutable triangle.

    The vertices may be in clockwise or counter-clockwise order.

    Args:
        p1: First vertex as a 2-tuple (x, y).
        p2: Second vertex as a 2-tuple (x, y).
        p3: Third vertex as a 2-tuple (x, y).
    """
    __slots__ = ()

    def __new__(cls, p1, p2, p3):
        return tuple.__new__(cls, (P(p1), P(p2), P(p3)))

    def vertex(self, index):
        """Vertex by index, 0 to 2."""
        assert 0 <= index <= 2
        return self[index]

    def vertices(self):
        return (self[0], self[1], self[2])

    def edge(self, index):
        """Edge from vertex `index` to the next vertex.
        Edges are ordered vertex 0 to 1, 1 to 2, then 2 to 0.
        """
        assert 0 <= index <= 2
        return Segment(self[index], self[(index + 1) % 3])

    def edges(self):
        return (self.edge(0), self.edge(1), self.edge(2))

    def normal(self, index):
        """The outward unit normal of edge `index`."""
        assert 0 <= index <= 2
        edge1_dir = self.edge(1).direction_unnormalized()
        edge2_dir = self.edge(2).direction_unnormalized()
        normal = self.edge(index).direction().normal()
        if edge1_dir.cross(edge2_dir) > 0:
            return -normal
        return normal

    def normals(self):
        return (self.normal(0), self.normal(1), self.normal(2))

    def centroid(self):
        """The average of the vertices."""
        return (self[0] + self[1] + self[2]) / 3

    def circumcenter(self):
        """Intersection of the perpendicular bisectors of the edges."""
        return self.perpendicular_bisector(0).unchecked_intersection(
            self.perpendicular_bisector(1))

    def incenter(self):
        """Intersection of the interior angle bisectors."""
        return self.angle_bisector(0).unchecked_intersection(
            self.angle_bisector(1))

    def orthocenter(self):
        """Intersection of the altitudes."""
        return Line.from_segment(self.altitude(0)).unchecked_intersection(
            Line.from_segment(self.altitude(1)))

    def median(self, index):
        """Segment from vertex `index` to the midpoint of the edge
        opposite to it.
        """
        assert 0 <= index <= 2
        return Segment(self[index], self.edge((index + 1) % 3).midpoint())

    def perpendicular_bisector(self, index):
        """Line perpendicular to edge `index` through its midpoint."""
        edge = self.edge(index)
        return Line(edge.midpoint(), edge.direction().normal())

    def angle(self, index):
        """Interior angle at vertex `index` in radians."""
        assert 0 <= index <= 2
        vertex = self[index]
        dir1 = self[(index + 2) % 3] - vertex
        dir2 = self[(index + 1) % 3] - vertex
        cos_a = dir1.dot(dir2) / (dir1.length() * dir2.length())
        return math.acos(const.clamp(cos_a, -1.0, 1.0))

    def angle_bisector(self, index):
        """Line through vertex `index` that halves its interior angle."""
        assert 0 <= index <= 2
        vertex = self[index]
        dir1 = vertex.direction_to(self[(index + 2) % 3])
        dir2 = vertex.direction_to(self[(index + 1) % 3])
        return Line(vertex, (dir1 + dir2).unit())

    def altitude(self, index):
        """Segment from vertex `index` perpendicular to the line
        containing the opposite edge.
        """
        assert 0 <= index <= 2
        vertex = self[index]
        base = Line.from_segment(self.edge((index + 1) % 3))
        return Segment(vertex, base.project_point(vertex))

    def lerp_point(self, weights):
        """Linearly interpolate between the vertices.

        Args:
            weights: Vertex weights as a 3-tuple.
        """
        w0, w1, w2 = weights
        return self[0] * w0 + self[1] * w1 + self[2] * w2

    def barycentric(self, p):
        """Barycentric coordinates of point `p` as a 3-tuple.
        These are the weights that :meth:`lerp_point` needs
        to reproduce `p`.
        """
        v0 = self[1] - self[0]
        v1 = self[2] - self[0]
        v2 = P(p) - self[0]
        inv_cross01 = 1.0 / v0.cross(v1)
        y = v2.cross(v1) * inv_cross01
        z = v0.cross(v2) * inv_cross01
        return (1.0 - y - z, y, z)

    def circumcircle(self):
        """The circle through all three vertices."""
        return Circle.from_points_unchecked(self[0], self[1], self[2])

    def incircle(self):
        """The largest circle inside the triangle."""
        center = self.incenter()
        return Circle(center, abs(self.edge(0).signed_distance(center)))

    def contains(self, p):
        """True if point `p` is inside or on the triangle."""
        return all(0.0 <= w <= 1.0 for w in self.barycentric(p))

    def approx_equal(self, other):
        """True if the vertices are approximately equal, in order."""
        return all(v1.approx_equal(v2) for v1, v2 in zip(self, other))

    def approx_equilateral(self):
        length1 = self.edge(0).length2()
        length2 = self.edge(1).length2()
        length3 = self.edge(2).length2()
        return (const.approx_equal(length1, length2)
                and const.approx_equal(length2, length3)
                and const.approx_equal(length3, length1))

    def approx_similar(self, other):
        """True if the triangles have the same interior angles."""
        angles = [self.angle(i) for i in range(3)]
        other_angles = [other.angle(i) for i in range(3)]
        matches = 0
        for a1 in angles:
            for a2 in other_angles:
                if const.approx_equal(a1, a2):
                    matches += 1
                    if matches >= 2:
                        return True
        return False

    def approx_right(self):
        """True if one of the interior angles is a right angle."""
        return any(const.approx_equal(self.angle(i), math.pi / 2)
                   for i in range(3))

    def transform(self, matrix):
        """Return a copy of this triangle with the transform
        matrix applied to the vertices.
        """
        return Triangle(self[0].transform(matrix), self[1].transform(matrix),
                        self[2].transform(matrix))

    def __str__(self):
        """Concise string representation."""
        return 'Triangle(%s, %s, %s)' % (str(self[0]), str(self[1]),
                                         str(self[2]))

    def __repr__(self):
        """Precise string representation."""
        return 'Triangle(%r, %r, %r)' % (self[0], self[1], self[2])


polygon.register_region(Triangle)


@pairwise.approx_coincident.register(Triangle, Triangle)
def _coincident_triangle_triangle(triangle1, triangle2):
    """Triangles are coincident if they have the same vertices
    in any order.
    """
    return any(triangle1.approx_equal(vertices)
               for vertices in itertools.permutations(triangle2))
