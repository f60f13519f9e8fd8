# File: src/utility_router/materials/price_tables.py
"""
Unit price tables for wire and pipe runs.

Prices are per plane unit (foot). A table always carries a default price
used for materials it does not list, so cost never becomes undefined.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from ..config.routing_config import RunKind

logger = logging.getLogger(__name__)

# Wire prices per foot by gauge
DEFAULT_WIRE_PRICES: Dict[str, float] = {
    "14AWG": 0.45,
    "12AWG": 0.65,
    "10AWG": 0.95,
    "8AWG": 1.35,
}

# Pipe prices per foot by material
DEFAULT_PIPE_PRICES: Dict[str, float] = {
    "PEX": 0.50,
    "copper": 3.00,
    "PVC": 0.75,
    "cast iron": 4.00,
}

# Baseline prices for unlisted materials: the cheapest stock item
DEFAULT_WIRE_UNIT_PRICE = 0.45  # 14AWG
DEFAULT_PIPE_UNIT_PRICE = 0.50  # PEX

# Maximum breaker rating per gauge (amps)
WIRE_AMPACITY: Dict[str, int] = {
    "14AWG": 15,
    "12AWG": 20,
    "10AWG": 30,
    "8AWG": 50,
}
DEFAULT_AMPACITY = 15
CONTINUOUS_LOAD_FACTOR = 0.8  # 80% rule


def _check_price(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Price for '{name}' must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Price for '{name}' must be finite and >= 0, got {value}")
    return float(value)


@dataclass(frozen=True)
class PriceTable:
    """
    Material/gauge unit prices.

    Attributes:
        prices: Unit price per material key
        default_price: Unit price for materials not in ``prices``
        currency: Currency label for reports
    """
    prices: Mapping[str, float] = field(default_factory=dict)
    default_price: float = DEFAULT_WIRE_UNIT_PRICE
    currency: str = "USD"

    def __post_init__(self):
        checked = {str(k): _check_price(str(k), v) for k, v in dict(self.prices).items()}
        object.__setattr__(self, "prices", checked)
        object.__setattr__(
            self, "default_price", _check_price("<default>", self.default_price)
        )

    def unit_price(self, material: str) -> float:
        """
        Look up the unit price for a material.

        Falls back to ``default_price`` for unknown materials.
        """
        price = self.prices.get(material)
        if price is None:
            logger.debug(
                f"No price for material '{material}', "
                f"using default {self.default_price}"
            )
            return self.default_price
        return price

    def __contains__(self, material: object) -> bool:
        return material in self.prices

    def with_prices(self, **overrides: float) -> "PriceTable":
        """Return a copy with some prices replaced or added."""
        merged = dict(self.prices)
        merged.update(overrides)
        return PriceTable(merged, self.default_price, self.currency)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prices": dict(self.prices),
            "default_price": self.default_price,
            "currency": self.currency,
        }

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        default_price: Optional[float] = None
    ) -> "PriceTable":
        """Create from dictionary."""
        if default_price is None:
            default_price = data.get("default_price", DEFAULT_WIRE_UNIT_PRICE)
        return cls(
            prices=dict(data.get("prices", {})),
            default_price=default_price,
            currency=data.get("currency", "USD"),
        )


def default_price_table(run_kind: Union[RunKind, str]) -> PriceTable:
    """
    Fresh copy of the stock price table for a run kind.

    Raises:
        ValueError: If run_kind is not a known run kind
    """
    kind = RunKind.parse(run_kind)
    if kind is RunKind.PIPE:
        return PriceTable(dict(DEFAULT_PIPE_PRICES), DEFAULT_PIPE_UNIT_PRICE)
    return PriceTable(dict(DEFAULT_WIRE_PRICES), DEFAULT_WIRE_UNIT_PRICE)


def calculate_circuit_load(loads: Iterable[float]) -> float:
    """Total load of a circuit in amps (sum of its outlet loads)."""
    return float(sum(loads))


def wire_ampacity(gauge: str) -> int:
    """Maximum breaker rating for a wire gauge (15A for unknown gauges)."""
    return WIRE_AMPACITY.get(gauge, DEFAULT_AMPACITY)


def check_wire_sizing(gauge: str, load_amps: float) -> bool:
    """
    Check that a wire gauge can carry a continuous load.

    The load may use at most 80% of the gauge's ampacity.
    """
    return load_amps <= wire_ampacity(gauge) * CONTINUOUS_LOAD_FACTOR
