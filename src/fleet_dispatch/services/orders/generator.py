"""Synthetic order batch generation."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from ...config import GeneratorParams
from ...models.domain import (
    ContainerSize,
    Order,
    OrderKind,
    SimulationInputError,
    Urgency,
)
from ..geospatial import haul_distance_km, hinterland_region, planar_distance, sample_point

ORDER_ID_BASE = 1000


def format_order_id(index: int) -> str:
    return f"ORD-{ORDER_ID_BASE + index}"


def generate_orders(
    order_count: int,
    *,
    rng: Optional[random.Random] = None,
    params: Optional[GeneratorParams] = None,
) -> List[Order]:
    """Create ``order_count`` pending orders scattered across the hinterland.

    Positions are drawn uniformly from the hinterland rectangle, and the haul
    distance is the scaled straight-line distance to the port plus a fixed
    minimum. Kind, container size and urgency are independent weighted draws.

    Args:
        order_count: Number of orders to create. Zero yields an empty batch.
        rng: Random source. A fresh ``random.Random`` is used when omitted so
            concurrent callers never share generator state.
        params: Geometry and order-mix parameters; defaults to the active settings.

    Returns:
        Orders in generation order, all with ``pending`` status.
    """
    if order_count < 0:
        raise SimulationInputError(f"order_count must be >= 0, got {order_count}")

    rng = rng or random.Random()
    params = params or GeneratorParams.from_settings()
    region = hinterland_region(params.hinterland_bounds)
    port_x, port_y = params.port

    orders: List[Order] = []
    for index in range(order_count):
        point = sample_point(region, rng)
        distance_km = haul_distance_km(
            planar_distance(point.x, point.y, port_x, port_y),
            scale=params.distance_scale,
            offset_km=params.distance_offset_km,
        )
        kind = OrderKind.DOOR_TO_DOOR if rng.random() < params.door_to_door_share else OrderKind.WAREHOUSE
        size = ContainerSize.FORTY_FOOT if rng.random() < params.forty_foot_share else ContainerSize.TWENTY_FOOT
        urgency = Urgency.URGENT if rng.random() < params.urgent_share else Urgency.NORMAL
        orders.append(
            Order(
                order_id=format_order_id(index),
                kind=kind,
                container_size=size,
                urgency=urgency,
                x=point.x,
                y=point.y,
                distance_km=distance_km,
            )
        )

    logging.debug(f"Generated {len(orders)} orders around port ({port_x:.1f}, {port_y:.1f})")
    return orders
