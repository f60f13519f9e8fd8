# File: src/utility_router/reporting/run_network.py
"""
Network view of routed runs.

Builds a NetworkX multigraph whose nodes are run endpoints and whose
edges are runs. Endpoints shared by several runs are anchors: the supply,
drain or panel points that fixtures are routed back to.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from ..config.routing_config import DEFAULT_POINT_TOLERANCE
from ..routing.geometry import Point2D
from ..routing.route_result import RouteResult

logger = logging.getLogger(__name__)

NodeKey = Tuple[int, int]


def endpoint_key(point: Point2D, tolerance: float = DEFAULT_POINT_TOLERANCE) -> NodeKey:
    """Snap a point onto a tolerance grid so coincident endpoints share a node."""
    return (round(point.x / tolerance), round(point.y / tolerance))


def build_run_network(
    routes: Iterable[RouteResult],
    tolerance: float = DEFAULT_POINT_TOLERANCE
) -> "nx.MultiGraph":
    """
    Build a multigraph of runs.

    Nodes carry ``location`` (the first point seen at that key). Edges are
    keyed by route id and carry route_id, run_kind, material, length and
    cost.

    Args:
        routes: Routed runs
        tolerance: Snapping tolerance for endpoints

    Returns:
        networkx.MultiGraph
    """
    graph = nx.MultiGraph()
    for route in routes:
        u = endpoint_key(route.start, tolerance)
        v = endpoint_key(route.end, tolerance)
        for key, point in ((u, route.start), (v, route.end)):
            if key not in graph:
                graph.add_node(key, location=point.to_tuple())
        graph.add_edge(
            u, v,
            key=route.id,
            route_id=route.id,
            run_kind=route.run_kind.value,
            material=route.material,
            length=route.length,
            cost=route.cost,
        )

    logger.debug(
        f"Run network: {graph.number_of_nodes()} endpoints, "
        f"{graph.number_of_edges()} runs"
    )
    return graph


@dataclass
class AnchorLoad:
    """
    Runs converging on one endpoint.

    Attributes:
        location: Endpoint coordinates
        run_count: Number of runs ending or starting here
        total_length: Total length of those runs
        total_cost: Total cost of those runs
        route_ids: IDs of those runs
    """
    location: Tuple[float, float]
    run_count: int
    total_length: float
    total_cost: float
    route_ids: List[str]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "location": list(self.location),
            "run_count": self.run_count,
            "total_length": self.total_length,
            "total_cost": self.total_cost,
            "route_ids": list(self.route_ids),
        }


def anchor_loads(
    routes: Iterable[RouteResult],
    min_runs: int = 2,
    tolerance: float = DEFAULT_POINT_TOLERANCE,
    graph: Optional["nx.MultiGraph"] = None
) -> List[AnchorLoad]:
    """
    Report endpoints shared by at least ``min_runs`` runs.

    Zero-length runs (start == end) count once at their endpoint.

    Returns:
        AnchorLoads sorted by run count (descending), then location
    """
    if graph is None:
        graph = build_run_network(routes, tolerance)

    loads = []
    for node, data in graph.nodes(data=True):
        route_ids: List[str] = []
        total_length = 0.0
        total_cost = 0.0
        for _, _, edge in graph.edges(node, data=True):
            if edge["route_id"] in route_ids:
                continue
            route_ids.append(edge["route_id"])
            total_length += edge["length"]
            total_cost += edge["cost"]
        if len(route_ids) >= min_runs:
            loads.append(AnchorLoad(
                location=data["location"],
                run_count=len(route_ids),
                total_length=total_length,
                total_cost=total_cost,
                route_ids=route_ids,
            ))

    loads.sort(key=lambda a: (-a.run_count, a.location))
    return loads


def connected_run_groups(graph: "nx.MultiGraph") -> List[List[str]]:
    """
    Route ids grouped by connected component of the run network.

    Runs in one group share endpoints directly or through other runs,
    e.g. every branch fed from the same panel.
    """
    groups = []
    for component in nx.connected_components(graph):
        sub = graph.subgraph(component)
        ids = sorted({data["route_id"] for _, _, data in sub.edges(data=True)})
        if ids:
            groups.append(ids)
    groups.sort()
    return groups
