"""Premium-ranked allocation that reserves owned trucks for the costliest hauls."""

from __future__ import annotations

from typing import List, Sequence

from ...config import CostModel
from ...models.domain import DispatchRecord, Order
from .base import Allocation, AllocationStrategy, dispatch_outsourced, dispatch_owned, validate_fleet_size


class PremiumAllocation(AllocationStrategy):
    """Give owned capacity to the orders whose outsourcing premium is largest.

    With per-order tariffs the saving of an owned truck is independent between
    orders, so picking the top ``fleet_size`` premiums minimises total cost.
    Records are still emitted in dispatch order and owned labels are numbered
    in visit order. Orders with a non-positive premium are always outsourced.
    """

    name = "premium"

    def allocate(
        self,
        *,
        sequence: Sequence[Order],
        fleet_size: int,
        costs: CostModel,
    ) -> Allocation:
        validate_fleet_size(fleet_size)

        ranked = sorted(
            range(len(sequence)),
            key=lambda position: (-costs.outsourcing_premium(sequence[position].distance_km), position),
        )
        selected = {
            position
            for position in ranked[:fleet_size]
            if costs.outsourcing_premium(sequence[position].distance_km) > 0
        }

        owned_index = 0
        records: List[DispatchRecord] = []
        for position, order in enumerate(sequence):
            if position in selected:
                owned_index += 1
                records.append(dispatch_owned(order, owned_index, costs))
            else:
                records.append(dispatch_outsourced(order, costs))

        return Allocation(
            records,
            fleet_size,
            metadata={"strategy": self.name, "owned_candidates": len(selected)},
        )
