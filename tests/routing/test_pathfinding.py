# File: tests/routing/test_pathfinding.py
"""
Unit tests for the grid A* search.

Tests cover:
- Basic search on an open floor
- Wall preference
- Bounded search and the direct-route fallback
- Tie-breaking against a straightforward linear-scan search
"""

from typing import List

import pytest

from utility_router.config.routing_config import RoutingConfig
from utility_router.routing.geometry import Point2D, WallFootprint, as_point
from utility_router.routing.pathfinding import (
    GridAStarPathfinder,
    NEIGHBOR_OFFSETS,
    PathResult,
    find_grid_path,
)
from utility_router.routing.wall_proximity import is_near_wall, near_wall_fraction


def linear_scan_path(start, end, walls, config=None) -> List[Point2D]:
    """
    Reference search that selects from an unordered open list by scanning.

    Uses the same lattice and region as GridAStarPathfinder; picks the
    first node with the lowest f, ties broken by lowest h.
    """
    config = config or RoutingConfig()
    pf = GridAStarPathfinder(walls, config)
    start, end = as_point(start), as_point(end)
    limits = pf._lattice_limits(start, end)

    def near(p):
        return is_near_wall(p, walls, config.proximity_threshold)

    # node: [key, point, g, h, parent]
    open_list = [[(0, 0), start, 0.0, start.distance_to(end), None]]
    closed = {}
    while open_list:
        current = open_list[0]
        for node in open_list[1:]:
            f_node = node[2] + node[3]
            f_cur = current[2] + current[3]
            if f_node < f_cur or (f_node == f_cur and node[3] < current[3]):
                current = node
        open_list.remove(current)
        closed[current[0]] = current

        if current[1].distance_to(end) < config.grid_size:
            path = []
            node = current
            while node is not None:
                path.append(node[1])
                node = node[4]
            return list(reversed(path))

        for di, dj in NEIGHBOR_OFFSETS:
            key = (current[0][0] + di, current[0][1] + dj)
            if not pf._within(key, limits) or key in closed:
                continue
            point = pf._lattice_point(start, key)
            g = current[2] + current[1].distance_to(point)
            if near(point):
                g -= config.wall_bonus
            existing = next((n for n in open_list if n[0] == key), None)
            if existing is None:
                open_list.append([key, point, g, point.distance_to(end), current])
            elif g < existing[2]:
                existing[2] = g
                existing[4] = current
    return [start, end]


# =============================================================================
# Basic search
# =============================================================================

class TestAStarBasic:
    """Tests for basic search on an open floor."""

    def test_straight_line(self):
        """With no walls the path runs straight along the grid."""
        result = GridAStarPathfinder().find_path((0, 0), (10, 0))
        assert result.success
        assert not result.used_fallback
        assert result.path == [Point2D(float(i), 0.0) for i in range(11)]
        assert result.cost == pytest.approx(10.0)

    def test_diagonal(self):
        """Diagonal goals are reached with diagonal steps."""
        result = GridAStarPathfinder().find_path((0, 0), (4, 4))
        assert result.path[0] == Point2D(0, 0)
        assert result.path[-1] == Point2D(4.0, 4.0)
        assert len(result.path) == 5

    def test_start_equals_end(self):
        """Start equal to end yields a single-point path."""
        result = GridAStarPathfinder().find_path((5, 5), (5, 5))
        assert result.success
        assert result.path == [Point2D(5, 5)]
        assert result.nodes_expanded == 1

    def test_off_grid_endpoints(self):
        """Endpoints need not lie on the lattice."""
        start, end = Point2D(0.3, 0.7), Point2D(7.9, 2.2)
        result = GridAStarPathfinder().find_path(start, end)
        assert result.path[0] == start
        assert result.path[-1].distance_to(end) < 1.0

    def test_goal_within_one_step(self):
        """The search stops as soon as it is within one grid step."""
        result = GridAStarPathfinder().find_path((0, 0), (3.5, 0))
        assert result.path[-1].distance_to(Point2D(3.5, 0)) < 1.0

    def test_grid_size_respected(self):
        """Consecutive points are one grid step apart."""
        config = RoutingConfig(grid_size=0.5)
        path = find_grid_path((0, 0), (3, 1), config=config)
        for a, b in zip(path, path[1:]):
            step = a.distance_to(b)
            assert step == pytest.approx(0.5) or step == pytest.approx(0.5 * 2 ** 0.5)

    def test_find_grid_path_returns_points(self):
        path = find_grid_path((0, 0), (2, 0))
        assert path == [Point2D(0, 0), Point2D(1.0, 0), Point2D(2.0, 0)]


# =============================================================================
# Wall preference
# =============================================================================

class TestWallPreference:
    """Tests that the search bends toward walls."""

    def test_follows_wall_alongside(self, vertical_wall):
        """A run parallel to a wall stays next to it."""
        result = GridAStarPathfinder([vertical_wall]).find_path((0, 0), (0, 20))
        assert result.success
        fraction = near_wall_fraction(result.path, [vertical_wall], 2.0)
        assert fraction >= 0.7

    def test_detours_to_reach_wall(self, horizontal_wall):
        """A run just outside the proximity band dips toward the wall."""
        result = GridAStarPathfinder([horizontal_wall]).find_path((0, 3), (20, 3))
        assert result.success
        fraction = near_wall_fraction(result.path, [horizontal_wall], 2.0)
        assert fraction >= 0.7
        # Wall bonus makes the run cheaper than the straight line
        assert result.cost < 20.0

    def test_no_bonus_no_detour(self, horizontal_wall):
        """Without a wall bonus the straight line wins."""
        config = RoutingConfig(wall_bonus=0.0)
        result = GridAStarPathfinder([horizontal_wall], config).find_path((0, 3), (20, 3))
        assert all(p.y == 3 for p in result.path)

    def test_walls_not_mutated(self, vertical_wall):
        """The wall snapshot is stored as a tuple and left unchanged."""
        walls = [vertical_wall]
        pf = GridAStarPathfinder(walls)
        pf.find_path((0, 0), (0, 5))
        assert walls == [vertical_wall]
        assert isinstance(pf.walls, tuple)


# =============================================================================
# Bounds and fallback
# =============================================================================

class TestBoundedSearch:
    """Tests for the search region and fallback."""

    def test_gap_between_walls(self, gapped_walls):
        """Goal on the far side of a wall gap is reached in bounded effort."""
        config = RoutingConfig()
        pf = GridAStarPathfinder(gapped_walls, config)
        result = pf.find_path((0, 0), (0, 10))
        assert result.success
        assert result.path[0] == Point2D(0, 0)
        assert result.path[-1].distance_to(Point2D(0, 10)) < config.grid_size

        i_min, i_max, j_min, j_max = pf._lattice_limits(Point2D(0, 0), Point2D(0, 10))
        region = (i_max - i_min + 1) * (j_max - j_min + 1)
        assert result.nodes_expanded <= region

    def test_expansion_limit_falls_back(self, gapped_walls):
        """Hitting the expansion limit returns the direct segment."""
        config = RoutingConfig(max_expansions=3)
        result = GridAStarPathfinder(gapped_walls, config).find_path((0, 0), (0, 10))
        assert isinstance(result, PathResult)
        assert not result.success
        assert result.used_fallback
        assert result.path == [Point2D(0, 0), Point2D(0, 10)]
        assert result.nodes_expanded == 3

    def test_region_contains_goal(self):
        """The padded region always includes a lattice point near the goal."""
        config = RoutingConfig(search_margin=0.0)
        result = GridAStarPathfinder(config=config).find_path((0, 0), (-7.6, 3.2))
        assert result.success
        assert result.path[-1].distance_to(Point2D(-7.6, 3.2)) < 1.0

    def test_lattice_points_do_not_drift(self):
        """Lattice coordinates come from integer offsets, not accumulation."""
        config = RoutingConfig(grid_size=0.1)
        pf = GridAStarPathfinder(config=config)
        start = Point2D(0.0, 0.0)
        assert pf._lattice_point(start, (30, 0)) == Point2D(30 * 0.1, 0.0)


# =============================================================================
# Tie-breaking
# =============================================================================

class TestTieBreaking:
    """Heap ordering matches a first-found linear scan."""

    @pytest.mark.parametrize("start, end", [
        ((0, 0), (6, 3)),
        ((0, 0), (-4, 5)),
        ((1.5, 0.5), (8, 8)),
    ])
    def test_matches_linear_scan(self, start, end):
        walls = [
            WallFootprint(x=-0.25, y=0, width=0.5, height=10),
            WallFootprint(x=0, y=9.75, width=10, height=0.5),
        ]
        heap_path = GridAStarPathfinder(walls).find_path(start, end).path
        assert heap_path == linear_scan_path(start, end, walls)

    def test_repeatable(self, gapped_walls):
        """Repeated searches return identical paths."""
        pf = GridAStarPathfinder(gapped_walls)
        first = pf.find_path((-3, -1), (4, 9))
        second = pf.find_path((-3, -1), (4, 9))
        assert first.path == second.path
        assert first.cost == second.cost
