# File: src/utility_router/config/__init__.py
"""Configuration for the utility router."""

from .routing_config import (
    RunKind,
    RoutingConfig,
    create_default_routing_config,
    create_fine_grid_config,
    DEFAULT_GRID_SIZE,
    DEFAULT_PROXIMITY_THRESHOLD,
    DEFAULT_WALL_BONUS,
    DEFAULT_POINT_TOLERANCE,
    DEFAULT_ANGLE_THRESHOLD,
    DEFAULT_SEARCH_MARGIN,
    DEFAULT_MAX_EXPANSIONS,
    DEFAULT_FOLLOWS_WALLS_RATIO,
)

__all__ = [
    "RunKind",
    "RoutingConfig",
    "create_default_routing_config",
    "create_fine_grid_config",
    "DEFAULT_GRID_SIZE",
    "DEFAULT_PROXIMITY_THRESHOLD",
    "DEFAULT_WALL_BONUS",
    "DEFAULT_POINT_TOLERANCE",
    "DEFAULT_ANGLE_THRESHOLD",
    "DEFAULT_SEARCH_MARGIN",
    "DEFAULT_MAX_EXPANSIONS",
    "DEFAULT_FOLLOWS_WALLS_RATIO",
]
