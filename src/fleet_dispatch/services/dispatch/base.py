"""Base classes for allocation strategy implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ...config import CostModel
from ...models.domain import (
    THIRD_PARTY_LABEL,
    DispatchMethod,
    DispatchRecord,
    Order,
    OrderStatus,
    SimulationInputError,
)


class Allocation:
    """Container for the schedule log and fleet usage of one allocation pass."""

    def __init__(self, records: List[DispatchRecord], fleet_size: int, metadata: dict | None = None):
        self.records = records
        self.fleet_size = fleet_size
        self.metadata = metadata or {}

    @property
    def owned_count(self) -> int:
        return sum(1 for record in self.records if record.method is DispatchMethod.OWNED)

    @property
    def outsourced_count(self) -> int:
        return sum(1 for record in self.records if record.method is DispatchMethod.OUTSOURCED)

    @property
    def available_trucks(self) -> int:
        return self.fleet_size - self.owned_count


class AllocationStrategy(ABC):
    """Contract for owned-vs-outsourced allocation strategies."""

    name: str = ""

    @abstractmethod
    def allocate(
        self,
        *,
        sequence: Sequence[Order],
        fleet_size: int,
        costs: CostModel,
    ) -> Allocation:
        raise NotImplementedError


def validate_fleet_size(fleet_size: int) -> None:
    if fleet_size < 0:
        raise SimulationInputError(f"fleet_size must be >= 0, got {fleet_size}")


def vehicle_label(owned_index: int) -> str:
    return f"VEH-{owned_index}"


def dispatch_owned(order: Order, owned_index: int, costs: CostModel) -> DispatchRecord:
    order.transition(OrderStatus.ASSIGNED)
    return DispatchRecord(
        order_id=order.order_id,
        vehicle_label=vehicle_label(owned_index),
        method=DispatchMethod.OWNED,
        distance_km=order.distance_km,
        cost=costs.owned_cost(order.distance_km),
    )


def dispatch_outsourced(order: Order, costs: CostModel) -> DispatchRecord:
    order.transition(OrderStatus.OUTSOURCED)
    return DispatchRecord(
        order_id=order.order_id,
        vehicle_label=THIRD_PARTY_LABEL,
        method=DispatchMethod.OUTSOURCED,
        distance_km=order.distance_km,
        cost=costs.third_party_cost(order.distance_km),
    )
