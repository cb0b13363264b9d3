import dataclasses
import random

import pytest

from fleet_dispatch.models.domain import (
    ContainerSize,
    Order,
    OrderKind,
    OrderStateError,
    OrderStatus,
    SimulationInputError,
    Urgency,
)
from fleet_dispatch.services.simulation.service import run_simulation, simulate_orders


def _order(distance_km: int = 40) -> Order:
    return Order(
        order_id="ORD-1000",
        kind=OrderKind.DOOR_TO_DOOR,
        container_size=ContainerSize.TWENTY_FOOT,
        urgency=Urgency.NORMAL,
        x=0.0,
        y=0.0,
        distance_km=distance_km,
    )


def test_order_fields_cannot_be_reassigned():
    order = _order()

    with pytest.raises(dataclasses.FrozenInstanceError):
        order.status = OrderStatus.ASSIGNED
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.distance_km = 999
    assert order.status is OrderStatus.PENDING
    assert order.distance_km == 40


def test_dispatched_order_cannot_be_reset_and_dispatched_again():
    order = _order()
    first = simulate_orders([order], 1)
    assert first.schedule[0].vehicle_label == "VEH-1"

    with pytest.raises(dataclasses.FrozenInstanceError):
        order.status = OrderStatus.PENDING
    with pytest.raises(SimulationInputError):
        simulate_orders([order], 0)
    assert order.status is OrderStatus.ASSIGNED


def test_transition_happens_exactly_once():
    order = _order()
    order.transition(OrderStatus.OUTSOURCED)

    assert order.status is OrderStatus.OUTSOURCED
    with pytest.raises(OrderStateError):
        order.transition(OrderStatus.ASSIGNED)
    with pytest.raises(OrderStateError):
        _order().transition(OrderStatus.PENDING)


def test_negative_distance_is_rejected():
    with pytest.raises(ValueError):
        _order(distance_km=-1)


def test_simulation_run_is_hashable():
    run = run_simulation(5, 2, rng=random.Random(6))

    assert hash(run) == hash(run)
    assert run.metadata["strategy"] == "greedy"
