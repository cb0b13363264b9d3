"""Dispatch sequence ordering."""

from __future__ import annotations

from typing import Iterable, List

from ...models.domain import Order


def priority_key(order: Order) -> tuple[int, int]:
    # urgent first, then farthest first
    return (0 if order.is_urgent else 1, -order.distance_km)


def prioritize(orders: Iterable[Order]) -> List[Order]:
    """Return a new list in dispatch order; ties keep their input order."""

    return sorted(orders, key=priority_key)
