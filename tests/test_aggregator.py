import pytest

from fleet_dispatch.config import CostModel
from fleet_dispatch.models.domain import DispatchMethod, DispatchRecord
from fleet_dispatch.services.costing.aggregator import aggregate, fleet_utilization_pct, savings_pct


def _record(order_id: str, method: DispatchMethod, distance_km: int, cost: float) -> DispatchRecord:
    label = "3RD-PARTY" if method is DispatchMethod.OUTSOURCED else "VEH-1"
    return DispatchRecord(order_id=order_id, vehicle_label=label, method=method, distance_km=distance_km, cost=cost)


def test_aggregate_sums_schedule():
    records = [
        _record("ORD-1001", DispatchMethod.OWNED, 80, 1380.0),
        _record("ORD-1004", DispatchMethod.OWNED, 60, 1110.0),
        _record("ORD-1002", DispatchMethod.OUTSOURCED, 30, 2420.0),
        _record("ORD-1000", DispatchMethod.OUTSOURCED, 10, 2140.0),
        _record("ORD-1003", DispatchMethod.OUTSOURCED, 5, 2070.0),
    ]

    result = aggregate(records, fleet_size=2, costs=CostModel())

    assert result.total_cost == 9120.0
    assert result.total_km == 185
    assert result.owned_count == 2
    assert result.outsourced_count == 3
    assert result.order_count == 5
    assert result.co2_kg == pytest.approx(49.95)
    assert result.manual_cost_estimate == pytest.approx(9120.0 * 1.153)
    assert result.savings == result.manual_cost_estimate - result.total_cost
    assert result.savings >= 0
    assert result.fleet_utilization_pct == 100.0


def test_empty_schedule_yields_zero_aggregates():
    result = aggregate([], fleet_size=0, costs=CostModel())

    assert result.total_cost == 0
    assert result.total_km == 0
    assert result.co2_kg == 0
    assert result.manual_cost_estimate == 0
    assert result.savings == 0
    assert result.savings_pct == 0
    assert result.fleet_utilization_pct == 0


def test_percentage_helpers_guard_zero_denominators():
    assert fleet_utilization_pct(0, 0) == 0.0
    assert fleet_utilization_pct(3, 4) == 75.0
    assert savings_pct(0.0, 0.0) == 0.0
    assert savings_pct(15.3, 115.3) == pytest.approx(13.2697, rel=1e-4)


def test_aggregate_requires_fleet_size():
    records = [_record("ORD-1000", DispatchMethod.OWNED, 10, 435.0)]

    with pytest.raises(TypeError):
        aggregate(records, costs=CostModel())

    assert aggregate(records, fleet_size=4, costs=CostModel()).fleet_utilization_pct == 25.0
