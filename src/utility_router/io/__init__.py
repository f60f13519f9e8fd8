# File: src/utility_router/io/__init__.py
"""JSON floorplan requests and the command-line tool."""

from .models import (
    PointModel,
    WallModel,
    RunRequestModel,
    PriceTableModel,
    RoutingConfigModel,
    FloorplanRequest,
    route_floorplan,
    floorplan_anchors,
)

__all__ = [
    "PointModel",
    "WallModel",
    "RunRequestModel",
    "PriceTableModel",
    "RoutingConfigModel",
    "FloorplanRequest",
    "route_floorplan",
    "floorplan_anchors",
]
