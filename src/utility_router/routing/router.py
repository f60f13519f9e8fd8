# File: src/utility_router/routing/router.py
"""
Route assembly for wire and pipe runs.

Composes the grid search, path simplification and cost estimation into a
single immutable RouteResult. One engine serves both run kinds; the run
kind only selects the default price table and tags the record.
"""

import hashlib
import json
import logging
from typing import Any, Mapping, Optional, Sequence, Union

from ..config.routing_config import RoutingConfig, RunKind
from ..materials.cost_estimator import estimate_cost
from ..materials.price_tables import PriceTable, default_price_table
from .geometry import Point2D, PointLike, WallFootprint, as_point
from .pathfinding import GridAStarPathfinder
from .route_result import RouteResult
from .simplify import path_length, simplify_path
from .wall_proximity import near_wall_fraction

logger = logging.getLogger(__name__)


def make_route_id(
    start: Point2D,
    end: Point2D,
    run_kind: RunKind,
    material: str,
    walls: Sequence[WallFootprint],
    price_table: PriceTable,
    config: RoutingConfig,
    metadata: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Deterministic route identifier derived from the routing inputs.

    Returns:
        "<run kind>-<12 hex digits>"
    """
    payload = json.dumps(
        {
            "start": start.to_tuple(),
            "end": end.to_tuple(),
            "run_kind": run_kind.value,
            "material": material,
            "walls": [w.to_dict() for w in walls],
            "prices": price_table.to_dict(),
            "config": config.to_dict(),
            "metadata": dict(metadata or {}),
        },
        sort_keys=True,
        default=str,
    )
    digest = hashlib.sha1(payload.encode("utf-8")).hexdigest()[:12]
    return f"{run_kind.value}-{digest}"


def _format_coord(value: float) -> str:
    return f"{value:g}"


def run_name(run_kind: RunKind, start: Point2D, end: Point2D) -> str:
    """Human-readable run label, e.g. "Wire Run 0,0 to 10,0"."""
    return (
        f"{run_kind.value.capitalize()} Run "
        f"{_format_coord(start.x)},{_format_coord(start.y)} to "
        f"{_format_coord(end.x)},{_format_coord(end.y)}"
    )


def compute_route(
    start: PointLike,
    end: PointLike,
    run_kind: Union[RunKind, str],
    material: str,
    walls: Sequence[WallFootprint] = (),
    price_table: Optional[PriceTable] = None,
    config: Optional[RoutingConfig] = None,
    route_id: Optional[str] = None,
    metadata: Optional[Mapping[str, Any]] = None
) -> RouteResult:
    """
    Route one wire or pipe run along the walls of a floorplan.

    Never raises for geometric reasons: unreachable goals fall back to the
    direct segment, start == end yields a zero-length run, and unknown
    materials are priced at the table's default.

    Args:
        start: Fixture, outlet or supply point
        end: Point to route to
        run_kind: "wire" or "pipe"
        material: Gauge or pipe material key
        walls: Wall footprint snapshot (read only)
        price_table: Unit prices, defaults to the stock table for run_kind
        config: Search configuration, defaults to RoutingConfig()
        route_id: Explicit identifier, otherwise derived from the inputs
        metadata: Caller tags copied into the result

    Returns:
        Immutable RouteResult

    Raises:
        ValueError: If run_kind is not a known run kind
    """
    start = as_point(start)
    end = as_point(end)
    kind = RunKind.parse(run_kind)
    material = str(material)
    walls = tuple(walls)
    config = config or RoutingConfig()
    table = price_table if price_table is not None else default_price_table(kind)

    search = GridAStarPathfinder(walls, config).find_path(start, end)
    path = simplify_path(search.path, config.angle_threshold)
    length = path_length(path)
    unit_price = table.unit_price(material)
    cost = estimate_cost(length, material, table)
    wall_ratio = near_wall_fraction(search.path, walls, config.proximity_threshold)

    if route_id is None:
        route_id = make_route_id(
            start, end, kind, material, walls, table, config, metadata
        )

    logger.debug(
        f"Routed {kind.value} {route_id}: {len(path)} points, "
        f"length {length:.2f}, cost {cost:.2f}"
    )

    return RouteResult(
        id=route_id,
        start=start,
        end=end,
        path=tuple(path),
        length=length,
        cost=cost,
        material=material,
        run_kind=kind,
        name=run_name(kind, start, end),
        unit_price=unit_price,
        follows_walls=wall_ratio > config.follows_walls_ratio,
        used_fallback=search.used_fallback,
        nodes_expanded=search.nodes_expanded,
        metadata=metadata or {},
    )


class UtilityRouter:
    """
    Router bound to one wall snapshot, price table and configuration.

    Convenient for placement tools that route many runs against the same
    floorplan. The wall list is copied on construction; later changes to
    the caller's list are not seen.
    """

    def __init__(
        self,
        walls: Sequence[WallFootprint] = (),
        run_kind: Union[RunKind, str] = RunKind.WIRE,
        price_table: Optional[PriceTable] = None,
        config: Optional[RoutingConfig] = None
    ):
        self.walls = tuple(walls)
        self.run_kind = RunKind.parse(run_kind)
        self.price_table = (
            price_table if price_table is not None
            else default_price_table(self.run_kind)
        )
        self.config = config or RoutingConfig()

    def route(
        self,
        start: PointLike,
        end: PointLike,
        material: str,
        route_id: Optional[str] = None,
        metadata: Optional[Mapping[str, Any]] = None
    ) -> RouteResult:
        """Route one run with the bound walls, prices and config."""
        return compute_route(
            start,
            end,
            self.run_kind,
            material,
            walls=self.walls,
            price_table=self.price_table,
            config=self.config,
            route_id=route_id,
            metadata=metadata,
        )
