"""Dispatch sequencing and fleet allocation."""

from .allocator import GreedyAllocation, allocate
from .dispatcher import STRATEGIES, execute_strategy, get_strategy
from .premium import PremiumAllocation
from .priority import prioritize

__all__ = [
    "prioritize",
    "allocate",
    "GreedyAllocation",
    "PremiumAllocation",
    "get_strategy",
    "execute_strategy",
    "STRATEGIES",
]
