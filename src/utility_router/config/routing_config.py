# File: src/utility_router/config/routing_config.py
"""
Routing configuration for wall-aware utility runs.

Defines the run kinds the router knows about and the search parameters
that shape every routed path (grid step, wall proximity, wall bonus).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Union


class RunKind(Enum):
    """Kinds of utility run."""
    WIRE = "wire"
    PIPE = "pipe"

    @classmethod
    def parse(cls, value: Union["RunKind", str]) -> "RunKind":
        """
        Resolve a run kind from an enum value or a case-insensitive label.

        Raises:
            ValueError: If the label is not a known run kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(
                f"Unknown run kind '{value}'. Expected one of: {valid}"
            ) from None


# Search defaults (plane units, feet)
DEFAULT_GRID_SIZE = 1.0
DEFAULT_PROXIMITY_THRESHOLD = 2.0
DEFAULT_WALL_BONUS = 0.5
DEFAULT_POINT_TOLERANCE = 0.01
DEFAULT_ANGLE_THRESHOLD = 0.1  # radians
DEFAULT_SEARCH_MARGIN = 10.0
DEFAULT_MAX_EXPANSIONS = 200_000
DEFAULT_FOLLOWS_WALLS_RATIO = 0.7


@dataclass(frozen=True)
class RoutingConfig:
    """
    Search configuration for a single routing call.

    Attributes:
        grid_size: Lattice step used by the search
        proximity_threshold: Distance at or below which a point is near a wall
        wall_bonus: Cost discount applied to edges ending near a wall
        point_tolerance: Distance within which run endpoints share an anchor
        angle_threshold: Heading change (radians) the simplifier keeps
        search_margin: Padding around start, end and walls bounding the search
        max_expansions: Node expansions allowed before falling back
        follows_walls_ratio: Near-wall fraction for a run to follow walls
    """
    grid_size: float = DEFAULT_GRID_SIZE
    proximity_threshold: float = DEFAULT_PROXIMITY_THRESHOLD
    wall_bonus: float = DEFAULT_WALL_BONUS
    point_tolerance: float = DEFAULT_POINT_TOLERANCE
    angle_threshold: float = DEFAULT_ANGLE_THRESHOLD
    search_margin: float = DEFAULT_SEARCH_MARGIN
    max_expansions: int = DEFAULT_MAX_EXPANSIONS
    follows_walls_ratio: float = DEFAULT_FOLLOWS_WALLS_RATIO

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise ValueError("Invalid routing config: " + "; ".join(errors))

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        for name in (
            "grid_size", "proximity_threshold", "wall_bonus",
            "point_tolerance", "angle_threshold", "search_margin",
            "follows_walls_ratio",
        ):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or not math.isfinite(value):
                errors.append(f"{name} must be a finite number")

        if errors:
            return errors

        if self.grid_size <= 0:
            errors.append("grid_size must be positive")
        if self.proximity_threshold < 0:
            errors.append("proximity_threshold must not be negative")
        if self.wall_bonus < 0:
            errors.append("wall_bonus must not be negative")
        if self.point_tolerance <= 0:
            errors.append("point_tolerance must be positive")
        if self.angle_threshold < 0:
            errors.append("angle_threshold must not be negative")
        if self.search_margin < 0:
            errors.append("search_margin must not be negative")
        if not isinstance(self.max_expansions, int) or self.max_expansions < 1:
            errors.append("max_expansions must be a positive integer")
        if not 0.0 <= self.follows_walls_ratio <= 1.0:
            errors.append("follows_walls_ratio must be between 0 and 1")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoutingConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f: data[f] for f in cls.__dataclass_fields__ if f in data}
        return cls(**known)


def create_default_routing_config() -> RoutingConfig:
    """Create a RoutingConfig with default settings."""
    return RoutingConfig()


def create_fine_grid_config(grid_size: float = 0.5) -> RoutingConfig:
    """Create a RoutingConfig with a finer search grid."""
    return RoutingConfig(grid_size=grid_size)
