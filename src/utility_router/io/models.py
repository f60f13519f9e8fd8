# File: src/utility_router/io/models.py
"""
Request models for routing a floorplan from JSON.

Validates the wall snapshot, run requests, price tables and search
configuration before handing them to the router as domain objects.
"""

import math
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..config.routing_config import (
    DEFAULT_ANGLE_THRESHOLD,
    DEFAULT_FOLLOWS_WALLS_RATIO,
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_EXPANSIONS,
    DEFAULT_POINT_TOLERANCE,
    DEFAULT_PROXIMITY_THRESHOLD,
    DEFAULT_SEARCH_MARGIN,
    DEFAULT_WALL_BONUS,
    RoutingConfig,
    RunKind,
)
from ..materials.price_tables import PriceTable, default_price_table
from ..reporting.run_network import AnchorLoad, anchor_loads
from ..reporting.usage_summary import UsageSummary, summarize_routes
from ..routing.geometry import Point2D, WallFootprint
from ..routing.route_result import RouteResult
from ..routing.router import compute_route


class PointModel(BaseModel):
    """2D point on the floorplan."""
    x: float = Field(description="X coordinate (feet)")
    y: float = Field(description="Y coordinate (feet)")

    @field_validator('x', 'y')
    @classmethod
    def validate_coordinate(cls, v: float) -> float:
        """Reject NaN and infinite coordinates."""
        if not math.isfinite(v):
            raise ValueError("Coordinate must be a finite number")
        return v

    def to_point(self) -> Point2D:
        return Point2D(self.x, self.y)


class WallModel(BaseModel):
    """Axis-aligned wall footprint."""
    id: str = Field(default="", description="Wall identifier")
    x: float = Field(description="Left edge")
    y: float = Field(description="Top edge")
    width: float = Field(description="Extent along x")
    height: float = Field(description="Extent along y")

    @field_validator('x', 'y', 'width', 'height')
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Wall dimensions must be finite numbers")
        return v

    def to_footprint(self) -> WallFootprint:
        return WallFootprint(self.x, self.y, self.width, self.height, id=self.id)


class RunRequestModel(BaseModel):
    """One wire or pipe run to route."""
    id: Optional[str] = Field(default=None, description="Route identifier")
    start: PointModel
    end: PointModel
    run_kind: Literal["wire", "pipe"] = Field(description="Kind of run")
    material: str = Field(min_length=1, description="Gauge or pipe material")
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator('run_kind', mode='before')
    @classmethod
    def normalize_run_kind(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class PriceTableModel(BaseModel):
    """Unit prices for one run kind."""
    prices: Dict[str, float] = Field(default_factory=dict)
    default_price: Optional[float] = Field(
        default=None,
        description="Price for unlisted materials (stock default if omitted)"
    )
    currency: str = "USD"

    @field_validator('prices')
    @classmethod
    def validate_prices(cls, v: Dict[str, float]) -> Dict[str, float]:
        for material, price in v.items():
            if not math.isfinite(price) or price < 0:
                raise ValueError(f"Price for '{material}' must be finite and >= 0")
        return v

    @field_validator('default_price')
    @classmethod
    def validate_default_price(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and (not math.isfinite(v) or v < 0):
            raise ValueError("default_price must be finite and >= 0")
        return v

    def to_price_table(self, run_kind: RunKind) -> PriceTable:
        """Merge over the stock table for the run kind."""
        stock = default_price_table(run_kind)
        prices = dict(stock.prices)
        prices.update(self.prices)
        default = (
            self.default_price if self.default_price is not None
            else stock.default_price
        )
        return PriceTable(prices, default, self.currency)


class RoutingConfigModel(BaseModel):
    """Search configuration overrides."""
    grid_size: float = Field(default=DEFAULT_GRID_SIZE, gt=0)
    proximity_threshold: float = Field(default=DEFAULT_PROXIMITY_THRESHOLD, ge=0)
    wall_bonus: float = Field(default=DEFAULT_WALL_BONUS, ge=0)
    point_tolerance: float = Field(
        default=DEFAULT_POINT_TOLERANCE,
        gt=0,
        description="Endpoints closer than this are treated as one anchor"
    )
    angle_threshold: float = Field(default=DEFAULT_ANGLE_THRESHOLD, ge=0)
    search_margin: float = Field(default=DEFAULT_SEARCH_MARGIN, ge=0)
    max_expansions: int = Field(default=DEFAULT_MAX_EXPANSIONS, ge=1)
    follows_walls_ratio: float = Field(default=DEFAULT_FOLLOWS_WALLS_RATIO, ge=0, le=1)

    def to_config(self) -> RoutingConfig:
        return RoutingConfig(**self.model_dump())


class FloorplanRequest(BaseModel):
    """A wall snapshot plus the runs to route against it."""
    walls: List[WallModel] = Field(default_factory=list)
    runs: List[RunRequestModel] = Field(default_factory=list)
    prices: Dict[Literal["wire", "pipe"], PriceTableModel] = Field(default_factory=dict)
    config: RoutingConfigModel = Field(default_factory=RoutingConfigModel)

    @model_validator(mode='after')
    def validate_unique_ids(self) -> 'FloorplanRequest':
        """Ensure explicit run ids are unique."""
        seen = set()
        for run in self.runs:
            if run.id is None:
                continue
            if run.id in seen:
                raise ValueError(f"Duplicate run id '{run.id}'")
            seen.add(run.id)
        return self

    def footprints(self) -> List[WallFootprint]:
        return [w.to_footprint() for w in self.walls]

    def price_table(self, run_kind: RunKind) -> PriceTable:
        model = self.prices.get(run_kind.value)
        if model is None:
            return default_price_table(run_kind)
        return model.to_price_table(run_kind)


def route_floorplan(
    request: FloorplanRequest
) -> Tuple[List[RouteResult], UsageSummary]:
    """
    Route every run in a floorplan request.

    Runs are routed independently against the same wall snapshot.

    Returns:
        (routes in request order, usage summary)
    """
    walls = tuple(request.footprints())
    config = request.config.to_config()
    tables = {kind: request.price_table(kind) for kind in RunKind}

    routes = []
    for run in request.runs:
        kind = RunKind(run.run_kind)
        routes.append(compute_route(
            run.start.to_point(),
            run.end.to_point(),
            kind,
            run.material,
            walls=walls,
            price_table=tables[kind],
            config=config,
            route_id=run.id,
            metadata=run.metadata,
        ))
    return routes, summarize_routes(routes)


def floorplan_anchors(
    request: FloorplanRequest,
    routes: List[RouteResult],
    min_runs: int = 2
) -> List[AnchorLoad]:
    """
    Anchor loads for routed runs, snapping endpoints with the request's
    ``point_tolerance``.
    """
    return anchor_loads(
        routes,
        min_runs=min_runs,
        tolerance=request.config.point_tolerance,
    )
