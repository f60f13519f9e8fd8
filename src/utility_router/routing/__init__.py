# File: src/utility_router/routing/__init__.py
"""
Wall-aware utility routing.

Components:
- Point2D, WallFootprint: Plane geometry value types
- Wall proximity queries: Distance from a point to the nearest wall
- GridAStarPathfinder: A* over an implicit grid, biased toward walls
- simplify_path: Reduces a grid path to its direction changes
- compute_route / UtilityRouter: Assemble a priced RouteResult
"""

from .geometry import (
    Point2D,
    WallFootprint,
    as_point,
    points_equal,
    footprints_from_pieces,
    bounding_box,
)
from .wall_proximity import (
    distance_to_nearest_wall,
    is_near_wall,
    near_wall_fraction,
)
from .pathfinding import (
    GridAStarPathfinder,
    PathResult,
    SearchNode,
    find_grid_path,
)
from .simplify import simplify_path, path_length
from .route_result import RouteResult
from .router import compute_route, make_route_id, UtilityRouter

__all__ = [
    # Geometry
    "Point2D",
    "WallFootprint",
    "as_point",
    "points_equal",
    "footprints_from_pieces",
    "bounding_box",
    # Wall proximity
    "distance_to_nearest_wall",
    "is_near_wall",
    "near_wall_fraction",
    # Pathfinding
    "GridAStarPathfinder",
    "PathResult",
    "SearchNode",
    "find_grid_path",
    # Simplification
    "simplify_path",
    "path_length",
    # Results
    "RouteResult",
    "compute_route",
    "make_route_id",
    "UtilityRouter",
]
