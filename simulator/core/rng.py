"""
Random number sources for the simulator.

Game rules that depend on chance receive a RandomSource instead of calling
the random module directly, so tests can supply a fixed sequence.
"""

from random import Random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that can produce uniform floats in [0.0, 1.0)."""

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        ...


class DefaultRandomSource:
    """Wrapper around random.Random, optionally seeded for reproducible runs."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def random(self) -> float:
        return self._random.random()
