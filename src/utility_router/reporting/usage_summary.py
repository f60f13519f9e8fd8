# File: src/utility_router/reporting/usage_summary.py
"""
Bill-of-materials summary for routed runs.

Aggregates length and cost of stored RouteResults grouped by run kind and
material. Works on results only and never calls back into the router.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple, Union

from ..config.routing_config import RunKind
from ..routing.route_result import RouteResult


@dataclass
class MaterialUsage:
    """
    Usage of one material across runs.

    Attributes:
        run_kind: Wire or pipe
        material: Material or gauge key
        run_count: Number of runs using the material
        total_length: Sum of run lengths
        total_cost: Sum of run costs
        fallback_runs: Runs that were routed directly rather than along walls
    """
    run_kind: RunKind
    material: str
    run_count: int = 0
    total_length: float = 0.0
    total_cost: float = 0.0
    fallback_runs: int = 0

    def add(self, route: RouteResult) -> None:
        """Add a run to the totals."""
        self.run_count += 1
        self.total_length += route.length
        self.total_cost += route.cost
        if route.used_fallback:
            self.fallback_runs += 1

    @property
    def average_unit_cost(self) -> float:
        """Cost per plane unit across all runs (0 when no length)."""
        if self.total_length == 0:
            return 0.0
        return self.total_cost / self.total_length

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "run_kind": self.run_kind.value,
            "material": self.material,
            "run_count": self.run_count,
            "total_length": self.total_length,
            "total_cost": self.total_cost,
            "average_unit_cost": self.average_unit_cost,
            "fallback_runs": self.fallback_runs,
        }


@dataclass
class UsageSummary:
    """
    Usage totals across a set of runs.

    Attributes:
        items: Usage per (run kind, material), in first-seen order
    """
    items: List[MaterialUsage] = field(default_factory=list)

    @property
    def run_count(self) -> int:
        return sum(item.run_count for item in self.items)

    @property
    def total_length(self) -> float:
        return sum(item.total_length for item in self.items)

    @property
    def total_cost(self) -> float:
        return sum(item.total_cost for item in self.items)

    def by_run_kind(self, run_kind: Union[RunKind, str]) -> List[MaterialUsage]:
        """Usage entries for one run kind."""
        kind = RunKind.parse(run_kind)
        return [item for item in self.items if item.run_kind is kind]

    def get(self, run_kind: Union[RunKind, str], material: str) -> MaterialUsage:
        """
        Usage entry for a run kind and material.

        Raises:
            KeyError: If no run used that material
        """
        kind = RunKind.parse(run_kind)
        for item in self.items:
            if item.run_kind is kind and item.material == material:
                return item
        raise KeyError(f"No {kind.value} runs using '{material}'")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "items": [item.to_dict() for item in self.items],
            "run_count": self.run_count,
            "total_length": self.total_length,
            "total_cost": self.total_cost,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def summarize_routes(routes: Iterable[RouteResult]) -> UsageSummary:
    """
    Group runs by run kind and material and total their length and cost.

    Args:
        routes: Routed runs

    Returns:
        UsageSummary with one entry per (run kind, material)
    """
    groups: Dict[Tuple[RunKind, str], MaterialUsage] = {}
    for route in routes:
        key = (route.run_kind, route.material)
        usage = groups.get(key)
        if usage is None:
            usage = MaterialUsage(run_kind=route.run_kind, material=route.material)
            groups[key] = usage
        usage.add(route)
    return UsageSummary(items=list(groups.values()))
