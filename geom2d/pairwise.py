#-----------------------------------------------------------------------------
# Copyright 2012-2016 Claude Zervas
# email: claude@utlco.com
#-----------------------------------------------------------------------------
"""
Binary relations between pairs of shapes.

Every relation (distance, intersection, tangency, etc.) is a
:class:`PairwiseOperation`. Each unordered pair of shape kinds has
exactly one implementation, registered by the module that defines the
later of the two kinds. The mirrored order is registered automatically
so that ``op(a, b)`` and ``op(b, a)`` always agree.

Plain 2-tuples and lists of length two are accepted wherever a point is
expected and are converted to :class:`P`.

====
"""
import functools

from . import const

from .point import P


class PairwiseOperation(object):
    """A binary operation dispatched on the kinds of both operands.

    Args:
        name: Operation name, used in error messages.
        mirror: Optional function applied to the result when the
            operands are given in the reverse of the registered order.
            Default is to return the result unchanged.
    """

    def __init__(self, name, mirror=None):
        self.name = name
        self._mirror = mirror
        self._registry = {}
        self._cache = {}

    def register(self, kind_a, kind_b):
        """Decorator that registers the implementation for a pair of kinds.

        The decorated function is called as ``func(a, b)`` with `a` an
        instance of `kind_a` and `b` an instance of `kind_b`.
        The reverse order ``(kind_b, kind_a)`` is registered as well.
        Operands of the same kind are passed in sorted order so that
        swapping them only ever applies the mirror function.

        Args:
            kind_a: Class of the first operand.
            kind_b: Class of the second operand.
        """
        def decorator(func):
            if kind_a is kind_b:
                self._registry[(kind_a, kind_b)] = self._sorted(func)
            else:
                self._registry[(kind_a, kind_b)] = func
                self._registry[(kind_b, kind_a)] = self._mirrored(func)
            self._cache.clear()
            return func
        return decorator

    def _sorted(self, func):
        mirrored = self._mirrored(func)
        def ordered(a, b):
            if b < a:
                return mirrored(a, b)
            return func(a, b)
        ordered.__name__ = func.__name__
        ordered.__doc__ = func.__doc__
        return ordered

    def _mirrored(self, func):
        mirror = self._mirror
        def mirrored(b, a):
            result = func(a, b)
            if mirror is not None:
                result = mirror(result)
            return result
        mirrored.__name__ = 'mirrored_' + func.__name__
        mirrored.__doc__ = func.__doc__
        return mirrored

    def lookup(self, kind_a, kind_b):
        """Find the implementation for a pair of kinds.

        Subclasses of registered kinds are matched through their MRO.

        Returns:
            The implementing function or None if the pair is
            not supported.
        """
        key = (kind_a, kind_b)
        try:
            return self._cache[key]
        except KeyError:
            pass
        func = None
        for base_a in kind_a.__mro__:
            for base_b in kind_b.__mro__:
                func = self._registry.get((base_a, base_b))
                if func is not None:
                    break
            if func is not None:
                break
        self._cache[key] = func
        return func

    def supports(self, a, b):
        """True if the operation is defined for the pair of operands."""
        return self.lookup(type(as_shape(a)), type(as_shape(b))) is not None

    def __call__(self, a, b):
        a = as_shape(a)
        b = as_shape(b)
        func = self.lookup(type(a), type(b))
        if func is None:
            raise TypeError('%s is not supported between %s and %s'
                            % (self.name, type(a).__name__,
                               type(b).__name__))
        return func(a, b)

    def __repr__(self):
        return 'PairwiseOperation(%r)' % self.name


def as_shape(value):
    """Convert a plain (x, y) tuple or list to a point.
    Anything else is returned unchanged.
    """
    if type(value) in (tuple, list) and len(value) == 2:
        return P(value)
    return value


def ordered_pair(points):
    """Reduce a sequence of intersection points to a sorted pair.

    Points that are approximately equal are merged and None values are
    ignored.

    Returns:
        None if there are no points, ``(p, p)`` for a single point,
        otherwise the first and last points ordered by X then Y.
        Approximately equal X coordinates are ordered by Y.
    """
    unique = []
    for p in points:
        if p is None:
            continue
        if not any(p.approx_equal(q) for q in unique):
            unique.append(p)
    if not unique:
        return None
    unique.sort(key=functools.cmp_to_key(_compare_points))
    return (unique[0], unique[-1])


def _compare_points(p, q):
    if not const.approx_equal(p[0], q[0]):
        return -1 if p[0] < q[0] else 1
    if p[1] != q[1]:
        return -1 if p[1] < q[1] else 1
    return 0


def pair_points(pair):
    """The distinct points of an intersection pair as a tuple."""
    if pair is None:
        return ()
    if pair[0] == pair[1]:
        return (pair[0],)
    return pair


def _negate(vector):
    if vector is None:
        return None
    return -vector


#: Shortest distance. Zero if and only if the operands intersect.
distance = PairwiseOperation('distance')
#: True if the operands share at least one point.
intersects = PairwiseOperation('intersects')
#: Single intersection point of two linear shapes, or None.
intersection = PairwiseOperation('intersection')
#: Boundary intersection points as a sorted pair, or None.
intersections = PairwiseOperation('intersections')
#: Penetration vector which moves the first operand out of the second.
intersect_depth = PairwiseOperation('intersect_depth', mirror=_negate)
approx_parallel = PairwiseOperation('approx_parallel')
approx_perpendicular = PairwiseOperation('approx_perpendicular')
approx_collinear = PairwiseOperation('approx_collinear')
approx_coincident = PairwiseOperation('approx_coincident')
approx_tangent = PairwiseOperation('approx_tangent')


@distance.register(P, P)
def _distance_point_point(p1, p2):
    return p1.distance(p2)


@intersects.register(P, P)
def _intersects_point_point(p1, p2):
    return p1.approx_equal(p2)


@approx_coincident.register(P, P)
def _coincident_point_point(p1, p2):
    return p1.approx_equal(p2)
