from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol


class RandomSource(Protocol):
    """The two draws the obstacle generator needs."""

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Allows injecting a fixed seed for reproducible runs and tests without
    touching Python's global RNG.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)
