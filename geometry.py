import numpy as np

from dataclasses import dataclass
from typing import Iterable


class HullError(Exception):
    """
    Base class for errors raised while computing a convex hull.
    """


class InvalidInput(HullError, ValueError):
    """
    Point set cannot be processed: too few points or non-integer coordinates.
    """


class ArithmeticOverflow(HullError, OverflowError):
    """
    Intermediate value does not fit into the configured integer width.
    """


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def as_point(value) -> Point:
    """
    Convert a Point or an (x, y) pair of integers to Point.
    numpy integers are converted to python int, so arithmetic never wraps.
    """
    try:
        x, y = value
    except (TypeError, ValueError):
        raise InvalidInput(f'Expected a pair of coordinates, got {value!r}') from None
    if not _is_integer(x) or not _is_integer(y):
        raise InvalidInput(f'Coordinates must be integers, got {value!r}')
    return Point(int(x), int(y))


def as_points(points: Iterable | np.ndarray) -> list[Point]:
    """
    Copy an iterable of points (or an (N, 2) integer array) into a new list of Points.
    """
    if isinstance(points, np.ndarray):
        if points.ndim != 2 or points.shape[1] != 2:
            raise InvalidInput(f'Expected an array of shape (N, 2), got {points.shape}')
        if points.size and points.dtype.kind not in 'iu':
            raise InvalidInput(f'Expected an integer array, got dtype {points.dtype}')
        return [Point(int(x), int(y)) for x, y in points.tolist()]
    return [as_point(p) for p in points]


def check_width(value: int, bits: int | None) -> int:
    """
    Check that value fits into a signed integer of `bits` width.
    `bits=None` stands for unbounded python integers.
    """
    if bits is not None and not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        raise ArithmeticOverflow(f'{value} does not fit into a signed {bits}-bit integer')
    return value


def cross(o: Point, a: Point, b: Point, bits: int | None = None) -> int:
    """
    Cross product of segments oa and ob.
    Positive for a counter-clockwise turn o -> a -> b, zero for collinear points.
    """
    if bits is None:
        return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)

    ax = check_width(a.x - o.x, bits)
    ay = check_width(a.y - o.y, bits)
    bx = check_width(b.x - o.x, bits)
    by = check_width(b.y - o.y, bits)
    lhs = check_width(ax * by, bits)
    rhs = check_width(ay * bx, bits)
    return check_width(lhs - rhs, bits)


def squared_distance(a: Point, b: Point, bits: int | None = None) -> int:
    if bits is None:
        return (a.x - b.x) ** 2 + (a.y - b.y) ** 2

    dx = check_width(a.x - b.x, bits)
    dy = check_width(a.y - b.y, bits)
    return check_width(check_width(dx * dx, bits) + check_width(dy * dy, bits), bits)


def convex_hull_andrew(points: Iterable[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear points are dropped, the result is counter-clockwise
    and starts from the lowest-leftmost point. Time complexity: O(n*log(n)).
    """
    points = sorted(set(points))
    if len(points) <= 2:
        return points

    lower = []  # lower hull
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []  # upper hull
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]
