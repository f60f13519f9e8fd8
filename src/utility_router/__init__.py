# File: src/utility_router/__init__.py
"""
Utility Router

Wall-aware routing and cost estimation for wire and pipe runs on a 2D
floorplan.

Example:
    >>> from utility_router import compute_route, WallFootprint
    >>> wall = WallFootprint(x=-0.25, y=0.0, width=0.5, height=20.0)
    >>> route = compute_route((0, 0), (0, 20), "wire", "12AWG", walls=[wall])
    >>> route.length, route.cost
    (20.0, 13.0)
"""

__version__ = "0.1.0"

from .config import RoutingConfig, RunKind
from .materials import PriceTable, default_price_table, estimate_cost
from .routing import (
    Point2D,
    WallFootprint,
    RouteResult,
    GridAStarPathfinder,
    UtilityRouter,
    compute_route,
    distance_to_nearest_wall,
    is_near_wall,
    simplify_path,
    path_length,
)
from .reporting import summarize_routes, build_run_network, anchor_loads

__all__ = [
    "RoutingConfig",
    "RunKind",
    "PriceTable",
    "default_price_table",
    "estimate_cost",
    "Point2D",
    "WallFootprint",
    "RouteResult",
    "GridAStarPathfinder",
    "UtilityRouter",
    "compute_route",
    "distance_to_nearest_wall",
    "is_near_wall",
    "simplify_path",
    "path_length",
    "summarize_routes",
    "build_run_network",
    "anchor_loads",
]
