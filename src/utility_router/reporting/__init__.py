# File: src/utility_router/reporting/__init__.py
"""Reports over routed runs: material usage, circuit loads and the run network."""

from .usage_summary import MaterialUsage, UsageSummary, summarize_routes
from .circuits import CircuitLoad, circuit_loads
from .run_network import (
    AnchorLoad,
    anchor_loads,
    build_run_network,
    connected_run_groups,
    endpoint_key,
)

__all__ = [
    "CircuitLoad",
    "circuit_loads",
    "MaterialUsage",
    "UsageSummary",
    "summarize_routes",
    "AnchorLoad",
    "anchor_loads",
    "build_run_network",
    "connected_run_groups",
    "endpoint_key",
]
