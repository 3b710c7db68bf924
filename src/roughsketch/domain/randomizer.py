"""Seeded random source with reset-to-seed semantics."""

import random


class Randomizer:
    """Deterministic pseudo-random source owned by a drawing configuration.

    Wraps a private ``random.Random`` instance so that no global RNG state is
    touched. The same seed always yields the same sequence, and ``reset``
    replays it from the beginning.

    Attributes:
        seed: Seed the generator was constructed with
    """

    def __init__(self, seed: int = 0) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        """Seed used for random number generation."""
        return self._seed

    def next(self) -> float:
        """Return the next value in the range [0.0, 1.0)."""
        return self._random.random()

    def reset(self) -> None:
        """Restore the state the generator had right after construction."""
        self._random.seed(self._seed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Randomizer):
            return NotImplemented
        return self._seed == other._seed

    def __hash__(self) -> int:
        return hash(self._seed)

    def __repr__(self) -> str:
        return f"Randomizer(seed={self._seed})"
