"""Random source injected into every engine operation that rolls."""

import random
from typing import Protocol


class RandomSource(Protocol):
    def randrange(self, n: int) -> int:
        """Return a uniformly distributed int in ``[0, n)``."""
        ...


class SeededRandom:
    """RandomSource backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def randrange(self, n: int) -> int:
        return self._random.randrange(n)
