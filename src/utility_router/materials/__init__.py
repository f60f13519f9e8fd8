# File: src/utility_router/materials/__init__.py
"""
Material pricing for utility runs.

Components:
- PriceTable: Unit prices with a default for unlisted materials
- Stock wire and pipe tables and wire ampacity checks
- Cost estimation from run length
"""

from .price_tables import (
    PriceTable,
    default_price_table,
    wire_ampacity,
    check_wire_sizing,
    calculate_circuit_load,
    DEFAULT_WIRE_PRICES,
    DEFAULT_PIPE_PRICES,
    DEFAULT_WIRE_UNIT_PRICE,
    DEFAULT_PIPE_UNIT_PRICE,
    WIRE_AMPACITY,
)
from .cost_estimator import estimate_cost

__all__ = [
    "PriceTable",
    "default_price_table",
    "wire_ampacity",
    "check_wire_sizing",
    "calculate_circuit_load",
    "DEFAULT_WIRE_PRICES",
    "DEFAULT_PIPE_PRICES",
    "DEFAULT_WIRE_UNIT_PRICE",
    "DEFAULT_PIPE_UNIT_PRICE",
    "WIRE_AMPACITY",
    "estimate_cost",
]
