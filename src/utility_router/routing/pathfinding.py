# File: src/utility_router/routing/pathfinding.py
"""
A* pathfinding over an implicit floorplan grid.

Searches an 8-connected lattice anchored at the start point, discounting
edges that end near a wall so that routes hug walls the way wire and pipe
runs follow in-wall chases. The search is bounded and never fails: when
it cannot reach the goal it returns the direct start-to-end segment.
"""

import heapq
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.routing_config import RoutingConfig
from ..utils.logging_config import RouterLogger
from .geometry import Point2D, PointLike, WallFootprint, as_point, bounding_box
from .wall_proximity import is_near_wall

logger = logging.getLogger(__name__)

LatticeKey = Tuple[int, int]

# N, E, S, W, then NE, SE, SW, NW
NEIGHBOR_OFFSETS: Tuple[LatticeKey, ...] = (
    (0, 1), (1, 0), (0, -1), (-1, 0),
    (1, 1), (1, -1), (-1, -1), (-1, 1),
)


@dataclass
class SearchNode:
    """
    Entry in the per-search node arena.

    Attributes:
        point: Plane coordinates of the lattice point
        key: Integer lattice offset from the start point
        g_cost: Accumulated wall-adjusted cost from the start
        h_cost: Euclidean distance to the goal
        parent: Arena index of the predecessor, None for the start node
        is_wall_path: Whether the point is near a wall
        closed: Whether the node has been expanded
    """
    point: Point2D
    key: LatticeKey
    g_cost: float
    h_cost: float
    parent: Optional[int] = None
    is_wall_path: bool = False
    closed: bool = False

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


@dataclass
class PathResult:
    """
    Result of a grid search.

    Attributes:
        path: Points from start toward the goal (raw, not simplified)
        cost: Wall-adjusted cost of the path (0 for the fallback)
        nodes_expanded: Number of nodes moved to the closed set
        success: Whether the search reached the goal
        used_fallback: Whether the direct start-to-end segment was returned
    """
    path: List[Point2D] = field(default_factory=list)
    cost: float = 0.0
    nodes_expanded: int = 0
    success: bool = False
    used_fallback: bool = False


class GridAStarPathfinder:
    """
    A* search over an implicit, uniformly stepped grid.

    The grid is never materialized: lattice points are start + (i, j) *
    grid_size and are generated on demand. Nodes live in an arena list and
    refer to their parent by index, so nothing outlives the call.

    Open-set ordering is lowest f, then lowest h, then earliest inserted,
    which makes results deterministic among equal-cost alternatives.

    Edge cost is the step length minus ``wall_bonus`` when the neighbor is
    near a wall. This makes the heuristic non-admissible near walls and the
    search greedier there; routes prefer hugging walls over the shortest
    line.
    """

    def __init__(
        self,
        walls: Sequence[WallFootprint] = (),
        config: Optional[RoutingConfig] = None
    ):
        """
        Initialize the pathfinder.

        Args:
            walls: Wall footprint snapshot (not modified)
            config: Search configuration, defaults to RoutingConfig()
        """
        self.walls: Tuple[WallFootprint, ...] = tuple(walls)
        self.config = config or RoutingConfig()

    def find_path(self, start: PointLike, end: PointLike) -> PathResult:
        """
        Find a wall-preferring path from start to within one grid step of end.

        Args:
            start: Start point
            end: Goal point (need not lie on the lattice)

        Returns:
            PathResult; on failure the path is [start, end] with
            used_fallback set
        """
        start = as_point(start)
        end = as_point(end)
        grid = self.config.grid_size
        bonus = self.config.wall_bonus
        limits = self._lattice_limits(start, end)

        arena: List[SearchNode] = []
        index_by_key: Dict[LatticeKey, int] = {}
        near_cache: Dict[LatticeKey, bool] = {}
        open_heap: List[Tuple[float, float, int]] = []

        start_node = SearchNode(
            point=start,
            key=(0, 0),
            g_cost=0.0,
            h_cost=start.distance_to(end),
            is_wall_path=self._near_wall((0, 0), start, near_cache),
        )
        arena.append(start_node)
        index_by_key[start_node.key] = 0
        heapq.heappush(open_heap, (start_node.f_cost, start_node.h_cost, 0))

        trace = logger.isEnabledFor(RouterLogger.TRACE_LEVEL)
        expanded = 0
        while open_heap:
            _, _, current_idx = heapq.heappop(open_heap)
            current = arena[current_idx]
            if current.closed:
                # Stale entry left behind by a relaxation
                continue

            current.closed = True
            expanded += 1
            if trace:
                logger.log(
                    RouterLogger.TRACE_LEVEL,
                    "Expand %s g=%.3f h=%.3f wall=%s",
                    current.key, current.g_cost, current.h_cost,
                    current.is_wall_path,
                )

            if current.point.distance_to(end) < grid:
                path = self._reconstruct(arena, current_idx)
                logger.debug(
                    f"Path found from {start.to_tuple()} to {end.to_tuple()}: "
                    f"{len(path)} points, {expanded} nodes expanded"
                )
                return PathResult(
                    path=path,
                    cost=current.g_cost,
                    nodes_expanded=expanded,
                    success=True,
                )

            if expanded >= self.config.max_expansions:
                logger.warning(
                    f"Search from {start.to_tuple()} to {end.to_tuple()} hit "
                    f"the expansion limit ({self.config.max_expansions}); "
                    "using direct route"
                )
                return self._fallback(start, end, expanded)

            ci, cj = current.key
            for di, dj in NEIGHBOR_OFFSETS:
                key = (ci + di, cj + dj)
                if not self._within(key, limits):
                    continue

                existing_idx = index_by_key.get(key)
                if existing_idx is not None and arena[existing_idx].closed:
                    continue

                point = self._lattice_point(start, key)
                near = self._near_wall(key, point, near_cache)
                g_cost = current.g_cost + current.point.distance_to(point)
                if near:
                    g_cost -= bonus

                if existing_idx is None:
                    node = SearchNode(
                        point=point,
                        key=key,
                        g_cost=g_cost,
                        h_cost=point.distance_to(end),
                        parent=current_idx,
                        is_wall_path=near,
                    )
                    node_idx = len(arena)
                    arena.append(node)
                    index_by_key[key] = node_idx
                    heapq.heappush(open_heap, (node.f_cost, node.h_cost, node_idx))
                else:
                    node = arena[existing_idx]
                    if g_cost < node.g_cost:
                        node.g_cost = g_cost
                        node.parent = current_idx
                        heapq.heappush(
                            open_heap, (node.f_cost, node.h_cost, existing_idx)
                        )

        logger.warning(
            f"No path found from {start.to_tuple()} to {end.to_tuple()} "
            f"(expanded {expanded} nodes); using direct route"
        )
        return self._fallback(start, end, expanded)

    def _near_wall(
        self,
        key: LatticeKey,
        point: Point2D,
        cache: Dict[LatticeKey, bool]
    ) -> bool:
        """Cached near-wall classification of a lattice point."""
        near = cache.get(key)
        if near is None:
            near = is_near_wall(point, self.walls, self.config.proximity_threshold)
            cache[key] = near
        return near

    def _lattice_point(self, start: Point2D, key: LatticeKey) -> Point2D:
        """Plane coordinates of a lattice offset, computed without drift."""
        grid = self.config.grid_size
        return Point2D(start.x + key[0] * grid, start.y + key[1] * grid)

    def _lattice_limits(
        self,
        start: Point2D,
        end: Point2D
    ) -> Tuple[int, int, int, int]:
        """
        Lattice index limits of the search region.

        The region is the bounding box of start, end and every wall,
        padded by the search margin plus one grid step.

        Returns:
            (i_min, i_max, j_min, j_max)
        """
        grid = self.config.grid_size
        pad = self.config.search_margin + grid
        min_x, min_y, max_x, max_y = bounding_box((start, end), self.walls)
        return (
            math.floor((min_x - pad - start.x) / grid),
            math.ceil((max_x + pad - start.x) / grid),
            math.floor((min_y - pad - start.y) / grid),
            math.ceil((max_y + pad - start.y) / grid),
        )

    @staticmethod
    def _within(key: LatticeKey, limits: Tuple[int, int, int, int]) -> bool:
        i_min, i_max, j_min, j_max = limits
        return i_min <= key[0] <= i_max and j_min <= key[1] <= j_max

    @staticmethod
    def _reconstruct(arena: List[SearchNode], goal_idx: int) -> List[Point2D]:
        """Walk parent indices back to the start and return start-to-goal order."""
        path = []
        idx: Optional[int] = goal_idx
        while idx is not None:
            node = arena[idx]
            path.append(node.point)
            idx = node.parent
        path.reverse()
        return path

    @staticmethod
    def _fallback(start: Point2D, end: Point2D, expanded: int) -> PathResult:
        return PathResult(
            path=[start, end],
            cost=0.0,
            nodes_expanded=expanded,
            success=False,
            used_fallback=True,
        )


def find_grid_path(
    start: PointLike,
    end: PointLike,
    walls: Sequence[WallFootprint] = (),
    config: Optional[RoutingConfig] = None
) -> List[Point2D]:
    """
    Convenience function returning only the raw path.

    Args:
        start: Start point
        end: Goal point
        walls: Wall footprints
        config: Search configuration

    Returns:
        List of points, never empty
    """
    return GridAStarPathfinder(walls, config).find_path(start, end).path
