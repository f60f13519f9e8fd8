# File: tests/routing/test_router.py
"""
Tests for route assembly (compute_route and UtilityRouter).

Covers the floorplan scenarios from the routing design: open floor,
wall-hugging runs, degenerate runs, unknown materials and wall gaps.
"""

import dataclasses
import math

import pytest

from utility_router.config.routing_config import RoutingConfig, RunKind
from utility_router.materials.price_tables import (
    PriceTable,
    DEFAULT_WIRE_UNIT_PRICE,
    DEFAULT_PIPE_UNIT_PRICE,
)
from utility_router.routing.geometry import Point2D, WallFootprint
from utility_router.routing.route_result import RouteResult
from utility_router.routing.router import (
    UtilityRouter,
    compute_route,
    make_route_id,
    run_name,
)
from utility_router.routing.simplify import path_length, simplify_path
from utility_router.routing.wall_proximity import near_wall_fraction


# =============================================================================
# Scenarios
# =============================================================================

class TestScenarios:
    """End-to-end routing scenarios."""

    def test_open_floor(self):
        """No walls: straight run, length 10, cost 10 x unit price."""
        route = compute_route((0, 0), (10, 0), "wire", "12AWG", walls=[])
        assert route.path == (Point2D(0, 0), Point2D(10, 0))
        assert route.length == pytest.approx(10.0)
        assert route.cost == pytest.approx(10 * 0.65)
        assert route.unit_price == 0.65
        assert not route.follows_walls

    def test_hugs_wall(self, vertical_wall):
        """A run beside a wall stays near it."""
        route = compute_route(
            (0, 0), (0, 20), RunKind.WIRE, "14AWG", walls=[vertical_wall]
        )
        assert near_wall_fraction(route.path, [vertical_wall], 2.0) >= 0.7
        assert route.follows_walls
        assert route.path[0] == Point2D(0, 0)
        assert route.path[-1].distance_to(Point2D(0, 20)) < 1.0

    def test_start_equals_end(self):
        """Degenerate run: zero length and cost, no exception."""
        route = compute_route((5, 5), (5, 5), "pipe", "PEX")
        assert route.length == 0
        assert route.cost == 0
        assert Point2D(5, 5) in route.path
        assert not route.used_fallback

    def test_unknown_material_uses_default_price(self):
        """Unknown material: default unit price, no NaN anywhere."""
        route = compute_route((0, 0), (6, 0), "wire", "unobtainium")
        assert route.unit_price == DEFAULT_WIRE_UNIT_PRICE
        assert route.cost == pytest.approx(DEFAULT_WIRE_UNIT_PRICE * route.length)
        for value in (route.length, route.cost, route.unit_price):
            assert math.isfinite(value)

    def test_unknown_pipe_material(self):
        route = compute_route((0, 0), (4, 0), "pipe", "bamboo")
        assert route.unit_price == DEFAULT_PIPE_UNIT_PRICE

    def test_wall_gap(self, gapped_walls):
        """Endpoints on opposite sides of a wall gap still get a full run."""
        config = RoutingConfig()
        route = compute_route(
            (0, 0), (0, 10), "pipe", "PVC", walls=gapped_walls, config=config
        )
        assert route.path[0] == Point2D(0, 0)
        assert route.path[-1].distance_to(Point2D(0, 10)) < config.grid_size
        assert 0 < route.nodes_expanded < config.max_expansions

    def test_expansion_limit_gives_direct_run(self, gapped_walls):
        """When the search gives up the run is the direct segment."""
        config = RoutingConfig(max_expansions=2)
        route = compute_route(
            (0, 0), (0, 10), "wire", "12AWG", walls=gapped_walls, config=config
        )
        assert route.used_fallback
        assert route.path == (Point2D(0, 0), Point2D(0, 10))
        assert route.length == pytest.approx(10.0)


# =============================================================================
# Properties
# =============================================================================

class TestRouteProperties:
    """Invariants that hold for any run."""

    @pytest.mark.parametrize("start, end", [
        ((0, 0), (7, 3)),
        ((2.5, 1.25), (-6, 9)),
        ((10, 10), (10.4, 10.3)),
        ((-3, 4), (12, -2)),
    ])
    def test_path_endpoints_and_length(self, start, end, vertical_wall, horizontal_wall):
        walls = [vertical_wall, horizontal_wall]
        config = RoutingConfig()
        route = compute_route(start, end, "wire", "12AWG", walls=walls, config=config)
        a, b = Point2D(*start), Point2D(*end)

        assert route.path[0] == a
        assert route.path[-1].distance_to(b) < config.grid_size
        assert route.length >= 0
        assert route.length == pytest.approx(path_length(route.path))
        assert route.length >= a.distance_to(b) - config.grid_size - 1e-9
        assert route.cost == pytest.approx(route.unit_price * route.length)

    def test_path_is_simplified(self, vertical_wall):
        """The stored path is already minimal."""
        route = compute_route((3, 1), (1, 17), "pipe", "PEX", walls=[vertical_wall])
        assert simplify_path(list(route.path)) == list(route.path)

    def test_deterministic(self, gapped_walls):
        """Identical inputs give identical results, including the id."""
        first = compute_route((-4, -1), (5, 9), "wire", "10AWG", walls=gapped_walls)
        second = compute_route((-4, -1), (5, 9), "wire", "10AWG", walls=gapped_walls)
        assert first.to_dict() == second.to_dict()
        assert first.id == second.id

    def test_cost_linear_in_price(self):
        """Doubling the unit price doubles the cost for the same run."""
        cheap = PriceTable({"X": 1.0})
        dear = PriceTable({"X": 2.0})
        r1 = compute_route((0, 0), (5, 2), "wire", "X", price_table=cheap)
        r2 = compute_route((0, 0), (5, 2), "wire", "X", price_table=dear)
        assert r1.length == r2.length
        assert r2.cost == pytest.approx(2 * r1.cost)

    def test_inputs_not_mutated(self, vertical_wall):
        walls = [vertical_wall]
        table = PriceTable({"12AWG": 0.65})
        compute_route((0, 0), (0, 8), "wire", "12AWG", walls=walls, price_table=table)
        assert walls == [vertical_wall]
        assert table.prices == {"12AWG": 0.65}


# =============================================================================
# Result record
# =============================================================================

class TestRouteRecord:
    """Tests for the RouteResult produced by compute_route."""

    def test_fields(self):
        route = compute_route(
            (0, 0), (3, 0), "Pipe", "copper", route_id="p1",
            metadata={"from_id": "sink", "to_id": "main"},
        )
        assert route.id == "p1"
        assert route.run_kind is RunKind.PIPE
        assert route.material == "copper"
        assert route.name == "Pipe Run 0,0 to 3,0"
        assert route.metadata["from_id"] == "sink"
        assert route.segment_count == 1

    def test_immutable(self):
        route = compute_route((0, 0), (3, 0), "wire", "12AWG", metadata={"a": 1})
        with pytest.raises(dataclasses.FrozenInstanceError):
            route.cost = 0.0
        with pytest.raises(TypeError):
            route.metadata["a"] = 2
        assert isinstance(route.path, tuple)

    def test_metadata_copied(self):
        tags = {"circuit_id": "c1"}
        route = compute_route((0, 0), (3, 0), "wire", "12AWG", metadata=tags)
        tags["circuit_id"] = "c2"
        assert route.metadata["circuit_id"] == "c1"

    def test_serialization(self, vertical_wall):
        """to_dict / from_dict preserve the record."""
        route = compute_route((0, 0), (2, 9), "wire", "8AWG", walls=[vertical_wall])
        restored = RouteResult.from_dict(route.to_dict())
        assert restored.to_dict() == route.to_dict()

    def test_unknown_run_kind_rejected(self):
        with pytest.raises(ValueError):
            compute_route((0, 0), (1, 0), "gas", "black iron")


class TestRouteId:
    """Tests for the derived route id."""

    def test_format_and_sensitivity(self):
        base = make_route_id(
            Point2D(0, 0), Point2D(1, 0), RunKind.WIRE, "12AWG",
            (), PriceTable(), RoutingConfig()
        )
        other = make_route_id(
            Point2D(0, 0), Point2D(1, 0), RunKind.WIRE, "14AWG",
            (), PriceTable(), RoutingConfig()
        )
        assert base.startswith("wire-")
        assert len(base) == len("wire-") + 12
        assert base != other

    def test_run_name_format(self):
        assert run_name(RunKind.WIRE, Point2D(0.5, 2), Point2D(10, 0)) == \
            "Wire Run 0.5,2 to 10,0"


# =============================================================================
# UtilityRouter
# =============================================================================

class TestUtilityRouter:
    """Tests for the bound router."""

    def test_snapshot_is_copied(self, vertical_wall):
        walls = [vertical_wall]
        router = UtilityRouter(walls, run_kind="wire")
        walls.append(WallFootprint(50, 50, 1, 1))
        assert router.walls == (vertical_wall,)

    def test_matches_compute_route(self, vertical_wall):
        router = UtilityRouter([vertical_wall], run_kind=RunKind.PIPE)
        via_router = router.route((1, 1), (1, 15), "copper")
        direct = compute_route((1, 1), (1, 15), "pipe", "copper", walls=[vertical_wall])
        assert via_router.to_dict() == direct.to_dict()

    def test_default_pipe_prices(self):
        router = UtilityRouter(run_kind="pipe")
        route = router.route((0, 0), (2, 0), "copper")
        assert route.cost == pytest.approx(6.0)
