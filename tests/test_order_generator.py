import random

import pytest

from fleet_dispatch.config import GeneratorParams
from fleet_dispatch.models.domain import OrderStatus, SimulationInputError, Urgency
from fleet_dispatch.services.orders.generator import generate_orders


def test_generate_orders_returns_requested_count():
    orders = generate_orders(40, rng=random.Random(11))

    assert len(orders) == 40
    assert [order.order_id for order in orders][:3] == ["ORD-1000", "ORD-1001", "ORD-1002"]
    assert len({order.order_id for order in orders}) == 40
    assert all(order.status is OrderStatus.PENDING for order in orders)


def test_generated_positions_stay_inside_hinterland():
    params = GeneratorParams()
    min_x, min_y, max_x, max_y = params.hinterland_bounds
    orders = generate_orders(200, rng=random.Random(3), params=params)

    for order in orders:
        assert min_x <= order.x <= max_x
        assert min_y <= order.y <= max_y
        assert order.distance_km >= params.distance_offset_km


def test_distance_uses_configured_scale_and_offset():
    params = GeneratorParams(distance_scale=0.0, distance_offset_km=7)
    orders = generate_orders(15, rng=random.Random(5), params=params)

    assert {order.distance_km for order in orders} == {7}


def test_split_ratios_are_configurable():
    everything_urgent = GeneratorParams(urgent_share=1.0)
    nothing_urgent = GeneratorParams(urgent_share=0.0)

    urgent = generate_orders(30, rng=random.Random(1), params=everything_urgent)
    normal = generate_orders(30, rng=random.Random(1), params=nothing_urgent)

    assert all(order.urgency is Urgency.URGENT for order in urgent)
    assert all(order.urgency is Urgency.NORMAL for order in normal)


def test_same_seed_produces_same_batch():
    first = generate_orders(25, rng=random.Random(99))
    second = generate_orders(25, rng=random.Random(99))

    assert first == second


def test_zero_orders_yields_empty_batch():
    assert generate_orders(0, rng=random.Random(1)) == []


def test_negative_order_count_is_rejected():
    with pytest.raises(SimulationInputError):
        generate_orders(-1)
