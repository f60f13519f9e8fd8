# File: src/utility_router/reporting/circuits.py
"""
Circuit load checks for routed wire runs.

Wire runs are grouped by the ``circuit_id`` tag in their metadata. Each
run may carry the ``amperage`` of the outlet it feeds; the circuit load is
the sum of those, checked against every gauge used on the circuit.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ..config.routing_config import RunKind
from ..materials.price_tables import (
    calculate_circuit_load,
    check_wire_sizing,
    wire_ampacity,
)
from ..routing.route_result import RouteResult

logger = logging.getLogger(__name__)

CIRCUIT_ID_KEY = "circuit_id"
AMPERAGE_KEY = "amperage"


@dataclass
class CircuitLoad:
    """
    Load on one circuit.

    Attributes:
        circuit_id: Circuit tag shared by the runs
        load_amps: Total outlet load
        gauges: Wire gauges used on the circuit, in first-seen order
        route_ids: Runs on the circuit
    """
    circuit_id: str
    load_amps: float = 0.0
    gauges: List[str] = field(default_factory=list)
    route_ids: List[str] = field(default_factory=list)

    @property
    def within_capacity(self) -> bool:
        """Whether every gauge on the circuit passes the 80% rule."""
        return all(check_wire_sizing(g, self.load_amps) for g in self.gauges)

    @property
    def limiting_gauge(self) -> str:
        """Gauge with the lowest ampacity on the circuit."""
        return min(self.gauges, key=wire_ampacity)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "circuit_id": self.circuit_id,
            "load_amps": self.load_amps,
            "gauges": list(self.gauges),
            "route_ids": list(self.route_ids),
            "within_capacity": self.within_capacity,
        }


def circuit_loads(routes: Iterable[RouteResult]) -> List[CircuitLoad]:
    """
    Group tagged wire runs by circuit and total their loads.

    Pipe runs and wire runs without a circuit tag are ignored. A missing
    amperage counts as zero load.

    Returns:
        CircuitLoads in first-seen circuit order
    """
    amps: Dict[str, List[float]] = {}
    circuits: Dict[str, CircuitLoad] = {}
    for route in routes:
        if route.run_kind is not RunKind.WIRE:
            continue
        circuit_id = route.metadata.get(CIRCUIT_ID_KEY)
        if circuit_id is None:
            continue
        circuit_id = str(circuit_id)
        circuit = circuits.get(circuit_id)
        if circuit is None:
            circuit = CircuitLoad(circuit_id=circuit_id)
            circuits[circuit_id] = circuit
            amps[circuit_id] = []
        amps[circuit_id].append(float(route.metadata.get(AMPERAGE_KEY, 0.0)))
        circuit.route_ids.append(route.id)
        if route.material not in circuit.gauges:
            circuit.gauges.append(route.material)

    for circuit_id, circuit in circuits.items():
        circuit.load_amps = calculate_circuit_load(amps[circuit_id])
        if not circuit.within_capacity:
            logger.warning(
                f"Circuit {circuit_id} carries {circuit.load_amps:g}A, over 80% "
                f"of {circuit.limiting_gauge} capacity"
            )
    return list(circuits.values())
