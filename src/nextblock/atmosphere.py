"""Block fullness ratio — transactions per unit of block-weight utilization."""

import math

from nextblock.constants import MAX_BLOCK_WEIGHT
from nextblock.models import Immutable


class Atmosphere(Immutable):
    """Weight and transaction count of a single block."""

    __slots__ = ("weight", "transaction_count")

    def __init__(self, weight: int, transaction_count: int) -> None:
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "transaction_count", transaction_count)

    def __repr__(self) -> str:
        return f"Atmosphere(weight={self.weight}, transaction_count={self.transaction_count})"

    def conditions(self) -> float:
        """Transaction count divided by weight utilization, rounded to 2 places.

        An empty block (weight 0) reads as infinite pressure when it somehow
        carries transactions, and 0.0 otherwise.
        """
        utilization = self.weight / MAX_BLOCK_WEIGHT
        if utilization == 0:
            return math.inf if self.transaction_count else 0.0
        return round(self.transaction_count / utilization, 2)


def create_atmosphere(weight: int, transaction_count: int) -> Atmosphere:
    return Atmosphere(weight, transaction_count)
