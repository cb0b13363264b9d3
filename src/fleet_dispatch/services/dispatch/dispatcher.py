"""Factory for allocation strategies based on caller selection."""

from __future__ import annotations

from typing import Any, Literal, get_args

from ...models.domain import SimulationInputError
from .allocator import GreedyAllocation
from .base import Allocation, AllocationStrategy
from .premium import PremiumAllocation

StrategyName = Literal["greedy", "premium"]
STRATEGIES: tuple[str, ...] = get_args(StrategyName)


def get_strategy(method: str) -> AllocationStrategy:
    match method:
        case "greedy":
            return GreedyAllocation()
        case "premium":
            return PremiumAllocation()
        case _:
            raise SimulationInputError(f"Unknown allocation strategy '{method}'.")


def execute_strategy(method: str, **kwargs: Any) -> Allocation:
    strategy = get_strategy(method)
    return strategy.allocate(**kwargs)
