"""Domain models for orders, dispatch records and simulation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class OrderKind(str, Enum):
    DOOR_TO_DOOR = "door-to-door"
    WAREHOUSE = "warehouse"


class ContainerSize(str, Enum):
    TWENTY_FOOT = "20GP"
    FORTY_FOOT = "40GP"


class Urgency(str, Enum):
    NORMAL = "normal"
    URGENT = "urgent"


class OrderStatus(str, Enum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    OUTSOURCED = "outsourced"


class DispatchMethod(str, Enum):
    OWNED = "owned"
    OUTSOURCED = "outsourced"


THIRD_PARTY_LABEL = "3RD-PARTY"


class SimulationInputError(ValueError):
    """Raised when simulation inputs fail validation before any allocation."""


class OrderStateError(RuntimeError):
    """Raised when an order is moved out of a terminal status."""


@dataclass(frozen=True, slots=True)
class Order:
    """A single shipment request placed on the abstract planning plane.

    Orders are frozen; ``status`` only changes through :meth:`transition`.
    """

    order_id: str
    kind: OrderKind
    container_size: ContainerSize
    urgency: Urgency
    x: float
    y: float
    distance_km: int
    status: OrderStatus = field(default=OrderStatus.PENDING, hash=False)

    def __post_init__(self) -> None:
        if self.distance_km < 0:
            raise ValueError(f"distance_km must be >= 0 (order {self.order_id})")

    @property
    def is_urgent(self) -> bool:
        return self.urgency is Urgency.URGENT

    def transition(self, status: OrderStatus) -> None:
        """Move a pending order to its final status exactly once."""
        if status is OrderStatus.PENDING:
            raise OrderStateError(f"Order {self.order_id} cannot be reset to pending")
        if self.status is not OrderStatus.PENDING:
            raise OrderStateError(
                f"Order {self.order_id} is already {self.status.value}; cannot mark {status.value}"
            )
        object.__setattr__(self, "status", status)


@dataclass(frozen=True, slots=True)
class DispatchRecord:
    """One schedule log line produced when an order is allocated."""

    order_id: str
    vehicle_label: str
    method: DispatchMethod
    distance_km: int
    cost: float


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """Aggregate cost, distance and emissions snapshot of one run."""

    total_cost: float
    owned_count: int
    outsourced_count: int
    total_km: int
    manual_cost_estimate: float
    savings: float
    co2_kg: float
    fleet_size: int = 0
    fleet_utilization_pct: float = 0.0
    savings_pct: float = 0.0

    @property
    def order_count(self) -> int:
        return self.owned_count + self.outsourced_count


@dataclass(frozen=True, slots=True)
class SimulationRun:
    """Everything a single call of the simulation facade returns."""

    orders: Tuple[Order, ...]
    schedule: Tuple[DispatchRecord, ...]
    result: SimulationResult
    strategy: str = "greedy"
    metadata: dict = field(default_factory=dict, hash=False, compare=False)
