"""Cost, distance and emissions aggregation over a schedule log."""

from __future__ import annotations

from typing import Optional, Sequence

from ...config import CostModel
from ...models.domain import DispatchMethod, DispatchRecord, SimulationResult


def fleet_utilization_pct(owned_count: int, fleet_size: int) -> float:
    if fleet_size <= 0:
        return 0.0
    return owned_count / fleet_size * 100.0


def savings_pct(savings: float, manual_cost_estimate: float) -> float:
    if manual_cost_estimate <= 0:
        return 0.0
    return savings / manual_cost_estimate * 100.0


def aggregate(
    records: Sequence[DispatchRecord],
    *,
    fleet_size: int,
    costs: Optional[CostModel] = None,
) -> SimulationResult:
    """Sum a schedule log into a :class:`SimulationResult`.

    The manual baseline is ``total_cost * manual_inflation_factor``; it is an
    assumed multiplier, not a measured cost. An empty log yields all zeros.
    """
    costs = costs or CostModel.from_settings()
    if not records:
        return SimulationResult(
            total_cost=0.0,
            owned_count=0,
            outsourced_count=0,
            total_km=0,
            manual_cost_estimate=0.0,
            savings=0.0,
            co2_kg=0.0,
            fleet_size=fleet_size,
        )

    total_cost = sum(record.cost for record in records)
    total_km = sum(record.distance_km for record in records)
    owned_count = sum(1 for record in records if record.method is DispatchMethod.OWNED)
    outsourced_count = len(records) - owned_count
    manual_cost_estimate = total_cost * costs.manual_inflation_factor
    savings = manual_cost_estimate - total_cost

    return SimulationResult(
        total_cost=total_cost,
        owned_count=owned_count,
        outsourced_count=outsourced_count,
        total_km=total_km,
        manual_cost_estimate=manual_cost_estimate,
        savings=savings,
        co2_kg=total_km * costs.co2_per_km,
        fleet_size=fleet_size,
        fleet_utilization_pct=fleet_utilization_pct(owned_count, fleet_size),
        savings_pct=savings_pct(savings, manual_cost_estimate),
    )
