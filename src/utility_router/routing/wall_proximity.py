# File: src/utility_router/routing/wall_proximity.py
"""
Wall proximity queries.

Answers "how far is this point from the nearest wall" for the search
edge costs and the follows-walls flag. All functions are pure.
"""

import math
from typing import Iterable, Sequence

from .geometry import Point2D, WallFootprint


def distance_to_nearest_wall(
    point: Point2D,
    walls: Iterable[WallFootprint]
) -> float:
    """
    Distance from a point to the closest wall footprint.

    Args:
        point: Query point
        walls: Wall footprints

    Returns:
        Distance in plane units, 0 inside a wall, inf when there are no walls
    """
    nearest = math.inf
    for wall in walls:
        d = wall.distance_to(point)
        if d < nearest:
            nearest = d
            if nearest == 0.0:
                break
    return nearest


def is_near_wall(
    point: Point2D,
    walls: Iterable[WallFootprint],
    threshold: float
) -> bool:
    """Check if any wall lies within threshold of the point (inclusive)."""
    for wall in walls:
        if wall.distance_to(point) <= threshold:
            return True
    return False


def near_wall_fraction(
    path: Sequence[Point2D],
    walls: Sequence[WallFootprint],
    threshold: float
) -> float:
    """Fraction of path points that are near a wall (0.0 for an empty path)."""
    if not path:
        return 0.0
    near = sum(1 for p in path if is_near_wall(p, walls, threshold))
    return near / len(path)
