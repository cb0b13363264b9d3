"""Utilities to serialize simulation runs into API models and CSV artifacts."""

from __future__ import annotations

import csv
import io
from typing import Sequence

from ...models.domain import DispatchRecord, Order, SimulationResult, SimulationRun
from ...schemas.simulation import (
    DispatchRecordModel,
    OrderModel,
    SimulationResponse,
    SimulationResultModel,
)

SCHEDULE_FIELDS = ["order_id", "vehicle_label", "method", "distance_km", "cost"]


def order_to_model(order: Order) -> OrderModel:
    return OrderModel(
        order_id=order.order_id,
        kind=order.kind.value,
        container_size=order.container_size.value,
        urgency=order.urgency.value,
        x=order.x,
        y=order.y,
        distance_km=order.distance_km,
        status=order.status.value,
    )


def record_to_model(record: DispatchRecord) -> DispatchRecordModel:
    return DispatchRecordModel(
        order_id=record.order_id,
        vehicle_label=record.vehicle_label,
        method=record.method.value,
        distance_km=record.distance_km,
        cost=record.cost,
    )


def result_to_model(result: SimulationResult) -> SimulationResultModel:
    return SimulationResultModel(
        total_cost=result.total_cost,
        owned_count=result.owned_count,
        outsourced_count=result.outsourced_count,
        total_km=result.total_km,
        manual_cost_estimate=result.manual_cost_estimate,
        savings=result.savings,
        savings_pct=result.savings_pct,
        co2_kg=result.co2_kg,
        fleet_size=result.fleet_size,
        fleet_utilization_pct=result.fleet_utilization_pct,
    )


def simulation_run_to_response(run: SimulationRun, *, metadata: dict | None = None) -> SimulationResponse:
    return SimulationResponse(
        strategy=run.strategy,
        result=result_to_model(run.result),
        orders=[order_to_model(order) for order in run.orders],
        schedule=[record_to_model(record) for record in run.schedule],
        metadata={**run.metadata, **(metadata or {})},
    )


def schedule_to_csv(schedule: Sequence[DispatchRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=SCHEDULE_FIELDS, lineterminator="\n")
    writer.writeheader()
    for record in schedule:
        writer.writerow(
            {
                "order_id": record.order_id,
                "vehicle_label": record.vehicle_label,
                "method": record.method.value,
                "distance_km": record.distance_km,
                "cost": f"{record.cost:.2f}",
            }
        )
    return buffer.getvalue()
