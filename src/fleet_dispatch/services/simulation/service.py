"""High-level orchestration for dispatch simulation runs."""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Optional, Sequence

from ...config import CostModel, GeneratorParams, Settings, settings as default_settings
from ...models.domain import Order, OrderStatus, SimulationInputError, SimulationRun
from ..costing.aggregator import aggregate
from ..dispatch.dispatcher import get_strategy
from ..dispatch.priority import prioritize
from ..orders.generator import generate_orders


def _validate_inputs(order_count: int, fleet_size: int) -> None:
    if order_count < 0:
        raise SimulationInputError(f"order_count must be >= 0, got {order_count}")
    if fleet_size < 0:
        raise SimulationInputError(f"fleet_size must be >= 0, got {fleet_size}")


def _order_mix(orders: Sequence[Order]) -> dict:
    return {
        "kinds": dict(Counter(order.kind.value for order in orders)),
        "container_sizes": dict(Counter(order.container_size.value for order in orders)),
        "urgencies": dict(Counter(order.urgency.value for order in orders)),
    }


def simulate_orders(
    orders: Sequence[Order],
    fleet_size: int,
    *,
    strategy: str = "greedy",
    costs: Optional[CostModel] = None,
) -> SimulationRun:
    """Sort, allocate and aggregate a caller-supplied batch of pending orders."""

    _validate_inputs(len(orders), fleet_size)
    allocator = get_strategy(strategy)
    not_pending = [order.order_id for order in orders if order.status is not OrderStatus.PENDING]
    if not_pending:
        raise SimulationInputError(f"Orders already dispatched: {', '.join(not_pending)}")

    costs = costs or CostModel.from_settings()
    if fleet_size == 0 and orders:
        logging.warning(f"Fleet size is 0; all {len(orders)} orders will be outsourced")

    sequence = prioritize(orders)
    allocation = allocator.allocate(sequence=sequence, fleet_size=fleet_size, costs=costs)
    result = aggregate(allocation.records, fleet_size=fleet_size, costs=costs)

    logging.info(
        f"Simulation ({allocator.name}): {result.order_count} orders, fleet {fleet_size}, "
        f"owned {result.owned_count}, outsourced {result.outsourced_count}, "
        f"total cost {result.total_cost:,.2f}"
    )

    metadata = {**allocation.metadata, "order_mix": _order_mix(sequence)}
    return SimulationRun(
        orders=tuple(sequence),
        schedule=tuple(allocation.records),
        result=result,
        strategy=allocator.name,
        metadata=metadata,
    )


def run_simulation(
    order_count: int,
    fleet_size: int,
    *,
    rng: Optional[random.Random] = None,
    strategy: str = "greedy",
    settings: Optional[Settings] = None,
) -> SimulationRun:
    """Generate a synthetic order batch and dispatch it against the owned fleet.

    Args:
        order_count: Number of orders to synthesise (>= 0).
        fleet_size: Owned trucks available for the day (>= 0).
        rng: Optional random source; inject a seeded ``random.Random`` for
            reproducible runs.
        strategy: Allocation strategy name (``greedy`` or ``premium``).
        settings: Configuration override; defaults to the module settings.

    Returns:
        A :class:`SimulationRun` holding the dispatch sequence, schedule log
        and aggregate result.

    Raises:
        SimulationInputError: If an input is negative or the strategy is unknown.
    """
    _validate_inputs(order_count, fleet_size)
    get_strategy(strategy)

    active = settings or default_settings
    orders = generate_orders(order_count, rng=rng, params=GeneratorParams.from_settings(active))
    return simulate_orders(
        orders,
        fleet_size,
        strategy=strategy,
        costs=CostModel.from_settings(active),
    )
