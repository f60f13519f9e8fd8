# File: src/utility_router/materials/cost_estimator.py
"""Run cost estimation from length and unit price."""

from .price_tables import PriceTable


def estimate_cost(length: float, material: str, price_table: PriceTable) -> float:
    """
    Cost of a run: unit price of the material times its length.

    Args:
        length: Run length in plane units (negative lengths count as 0)
        material: Material or gauge key
        price_table: Unit prices

    Returns:
        Cost in the table's currency
    """
    return price_table.unit_price(material) * max(length, 0.0)
