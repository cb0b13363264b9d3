"""Greedy owned-vs-outsourced allocation."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ...config import CostModel
from ...models.domain import DispatchRecord, Order
from .base import Allocation, AllocationStrategy, dispatch_outsourced, dispatch_owned, validate_fleet_size


class GreedyAllocation(AllocationStrategy):
    """Hand owned trucks to orders in dispatch order until the fleet runs out.

    Single pass, no backtracking: once capacity is exhausted every later order
    is outsourced, even one that would have gained more from an owned truck.
    """

    name = "greedy"

    def allocate(
        self,
        *,
        sequence: Sequence[Order],
        fleet_size: int,
        costs: CostModel,
    ) -> Allocation:
        validate_fleet_size(fleet_size)

        available_trucks = fleet_size
        owned_index = 0
        records: List[DispatchRecord] = []
        for order in sequence:
            if available_trucks > 0:
                available_trucks -= 1
                owned_index += 1
                records.append(dispatch_owned(order, owned_index, costs))
            else:
                records.append(dispatch_outsourced(order, costs))

        return Allocation(records, fleet_size, metadata={"strategy": self.name})


def allocate(
    sequence: Sequence[Order],
    fleet_size: int,
    *,
    costs: Optional[CostModel] = None,
) -> Allocation:
    return GreedyAllocation().allocate(
        sequence=sequence,
        fleet_size=fleet_size,
        costs=costs or CostModel.from_settings(),
    )
