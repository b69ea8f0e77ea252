"""Seedable RNG wrapper for reproducible games."""

import random


class GameRNG:
    """Wrapper around Python's random.Random for deterministic game behavior.

    Map generation and combat rolls both draw from this class so that a
    game replays identically from the same seed.
    """

    def __init__(self, seed: int | None = None):
        """Initialize RNG with given seed.

        Args:
            seed: Integer seed, or None for an OS-seeded generator
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return random integer in range [a, b], inclusive.

        Args:
            a: Lower bound (inclusive)
            b: Upper bound (inclusive)

        Returns:
            Random integer between a and b
        """
        return self.rng.randint(a, b)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self.rng.random()

    def chance(self, probability: float) -> bool:
        """Run a single Bernoulli trial.

        Args:
            probability: Success probability in [0.0, 1.0]

        Returns:
            True with the given probability

        Raises:
            ValueError: If probability lies outside [0.0, 1.0]
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Invalid probability: {probability} (must be 0.0-1.0)")
        return self.rng.random() < probability

    def choice(self, seq):
        """Choose random element from non-empty sequence."""
        return self.rng.choice(seq)

    def random_coord(self, size: int) -> tuple[int, int]:
        """Draw a uniformly random (x, y) cell coordinate on a size x size grid."""
        return (self.rng.randrange(size), self.rng.randrange(size))
