import logging

from functools import cmp_to_key
from typing import Iterable

import numpy as np

from geometry import Point, InvalidInput, as_points, check_width, cross, squared_distance

logger = logging.getLogger(__name__)


class HullBuilder:
    """
    Convex hull of integer points by sorting around the lowest-leftmost point
    and sweeping the sorted sequence with a stack (Graham scan).

    If `bits` is set, cross products and distances are checked to fit
    into a signed integer of that width, otherwise python integers are used.
    """

    def __init__(self, bits: int | None = None):
        if bits is not None and bits < 2:
            raise ValueError(f'Integer width must be at least 2 bits, got {bits}')
        self.bits: int | None = bits

    @staticmethod
    def lexicographic_sort(points: list[Point]) -> list[Point]:
        """
        Sort points by x, then by y.
        """
        if len(points) <= 1:
            return points
        return sorted(points)

    def polar_sort(self, points: list[Point]) -> list[Point]:
        """
        Sort points[1:] counter-clockwise around the reference point points[0].
        Collinear points go in order of increasing distance from the reference.

        Assuming points are already sorted by x and y, all of them lie
        in the right half-plane of the reference, so the cross product
        is a consistent comparator.
        """
        if len(points) <= 2:
            return points

        reference = points[0]

        def compare(a: Point, b: Point) -> int:
            turn = cross(reference, a, b, bits=self.bits)
            if turn < 0:
                return 1
            if turn > 0:
                return -1
            da = squared_distance(reference, a, bits=self.bits)
            db = squared_distance(reference, b, bits=self.bits)
            return (da > db) - (da < db)

        return [reference] + sorted(points[1:], key=cmp_to_key(compare))

    def sweep(self, points: list[Point]) -> list[Point]:
        """
        Build the hull from angularly sorted points.
        Every candidate pops the hull top while the last two hull points
        and the candidate do not make a strict left turn.

        Time complexity: O(n).
        """
        hull = points[:2]
        popped = 0
        for p in points[2:]:
            while len(hull) >= 2 and cross(hull[-2], hull[-1], p, bits=self.bits) <= 0:
                hull.pop()
                popped += 1
            hull.append(p)
        logger.debug('sweep kept %d of %d points, popped %d', len(hull), len(points), popped)
        return hull

    def compute_hull(self, points: Iterable | np.ndarray) -> list[Point]:
        """
        Compute the convex hull of a multiset of integer points.
        The hull is counter-clockwise and starts from the lowest-leftmost point.
        The input collection is left untouched.

        Time complexity: O(n*log(n)).
        """
        working = as_points(points)
        if len(working) < 2:
            raise InvalidInput(f'At least 2 points are required, got {len(working)}')
        if self.bits is not None:
            for p in working:
                check_width(p.x, self.bits)
                check_width(p.y, self.bits)

        logger.debug('computing hull of %d points', len(working))
        working = self.lexicographic_sort(working)
        working = self.polar_sort(working)
        return self.sweep(working)


def compute_convex_hull(points: Iterable | np.ndarray, bits: int | None = None) -> list[Point]:
    """Convex hull of integer points, counter-clockwise from the lowest-leftmost point."""
    return HullBuilder(bits=bits).compute_hull(points)
