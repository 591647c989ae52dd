from __future__ import annotations

import random
from typing import Iterable, List, Optional, Protocol


class RandomSource(Protocol):
    def next_index(self, n: int) -> int:
        """Return an index in ``range(n)``."""
        ...

    def seed(self, seed: Optional[int]) -> None:
        """Restart the sequence of indices."""
        ...


class UniformRandomSource:
    """Uniform choice backed by a private ``random.Random`` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def next_index(self, n: int) -> int:
        return self.rng.randrange(n)


class SequenceRandomSource:
    """Replays a fixed sequence of indices, cycling when exhausted.

    Each value is reduced modulo ``n`` so any integer sequence is usable.
    """

    def __init__(self, indices: Iterable[int]) -> None:
        self.indices: List[int] = list(indices)
        if not self.indices:
            raise ValueError("SequenceRandomSource needs at least one index")
        self._pos = 0

    def seed(self, seed: Optional[int]) -> None:
        self._pos = 0

    def next_index(self, n: int) -> int:
        value = self.indices[self._pos % len(self.indices)]
        self._pos += 1
        return value % n
