# File: src/utility_router/routing/simplify.py
"""Path simplification and length measurement."""

import math
from typing import List, Sequence

from ..config.routing_config import DEFAULT_ANGLE_THRESHOLD
from .geometry import Point2D


def heading(a: Point2D, b: Point2D) -> float:
    """Heading of the segment a->b in radians."""
    return math.atan2(b.y - a.y, b.x - a.x)


def heading_change(a: float, b: float) -> float:
    """Absolute difference between two headings, wrapped to [0, pi]."""
    diff = abs(a - b) % (2 * math.pi)
    return min(diff, 2 * math.pi - diff)


def _simplify_once(
    path: Sequence[Point2D],
    angle_threshold: float
) -> List[Point2D]:
    simplified = [path[0]]
    for i in range(1, len(path) - 1):
        prev_pt, current, next_pt = path[i - 1], path[i], path[i + 1]
        incoming = heading(prev_pt, current)
        outgoing = heading(current, next_pt)
        if heading_change(incoming, outgoing) > angle_threshold:
            simplified.append(current)
    simplified.append(path[-1])
    return simplified


def simplify_path(
    path: Sequence[Point2D],
    angle_threshold: float = DEFAULT_ANGLE_THRESHOLD
) -> List[Point2D]:
    """
    Drop interior points that lie on a straight run.

    The first and last points are always kept and order is preserved.
    An interior point survives only when the heading into it and the
    heading out of it differ by more than ``angle_threshold``. Passes
    repeat until no further point is dropped.

    Args:
        path: Dense path, e.g. from the grid search
        angle_threshold: Minimum heading change to keep a point (radians)

    Returns:
        New list of points; paths of two points or fewer are copied as-is
    """
    simplified = list(path)
    while len(simplified) > 2:
        reduced = _simplify_once(simplified, angle_threshold)
        if len(reduced) == len(simplified):
            break
        simplified = reduced
    return simplified


def path_length(path: Sequence[Point2D]) -> float:
    """Sum of Euclidean distances between consecutive points."""
    return sum(path[i - 1].distance_to(path[i]) for i in range(1, len(path)))
