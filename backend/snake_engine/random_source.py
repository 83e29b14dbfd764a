"""
Random number sources used for entity placement.

SnakeGame only needs random_range, so tests can hand it any object with
that method and get a deterministic board.
"""

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def random_range(self, low: int, high: int) -> int:
        """Uniform integer in the half-open range [low, high)."""
        ...


class PythonRandomSource:
    """RandomSource backed by the standard library's Mersenne Twister."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def random_range(self, low: int, high: int) -> int:
        if low >= high:
            raise ValueError(f"Empty range [{low}, {high}).")
        return self._rng.randrange(low, high)

    def __repr__(self):
        return f"<PythonRandomSource seed={self.seed}>"
