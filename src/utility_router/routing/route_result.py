# File: src/utility_router/routing/route_result.py
"""
Routed run record.

A RouteResult is the immutable outcome of routing one wire or pipe run.
It is handed to the caller and never referenced by the router again.
"""

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from ..config.routing_config import RunKind
from .geometry import Point2D


@dataclass(frozen=True)
class RouteResult:
    """
    A complete routed run from start to end.

    Attributes:
        id: Route identifier
        start: Requested start point
        end: Requested end point
        path: Simplified polyline, first point equals start
        length: Length of the simplified path
        cost: unit_price * length
        material: Material or gauge key used for pricing
        run_kind: Wire or pipe
        name: Human-readable label
        unit_price: Price per plane unit applied to this run
        follows_walls: Whether most path points lie near a wall
        used_fallback: Whether the search gave up and routed directly
        nodes_expanded: Search effort spent on this run
        metadata: Caller tags (circuit id, fixture ids, diameter, ...)
    """
    id: str
    start: Point2D
    end: Point2D
    path: Tuple[Point2D, ...]
    length: float
    cost: float
    material: str
    run_kind: RunKind
    name: str = ""
    unit_price: float = 0.0
    follows_walls: bool = False
    used_fallback: bool = False
    nodes_expanded: int = 0
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def segment_count(self) -> int:
        """Number of straight segments in the path."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "run_kind": self.run_kind.value,
            "material": self.material,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "path": [p.to_dict() for p in self.path],
            "length": self.length,
            "unit_price": self.unit_price,
            "cost": self.cost,
            "follows_walls": self.follows_walls,
            "used_fallback": self.used_fallback,
            "nodes_expanded": self.nodes_expanded,
            "metadata": dict(self.metadata),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RouteResult":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            start=Point2D.from_dict(data["start"]),
            end=Point2D.from_dict(data["end"]),
            path=tuple(Point2D.from_dict(p) for p in data.get("path", [])),
            length=data.get("length", 0.0),
            cost=data.get("cost", 0.0),
            material=data["material"],
            run_kind=RunKind.parse(data["run_kind"]),
            name=data.get("name", ""),
            unit_price=data.get("unit_price", 0.0),
            follows_walls=data.get("follows_walls", False),
            used_fallback=data.get("used_fallback", False),
            nodes_expanded=data.get("nodes_expanded", 0),
            metadata=data.get("metadata", {}),
        )
