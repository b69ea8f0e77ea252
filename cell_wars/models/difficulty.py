"""Difficulty tiers controlling initial balance and terrain density."""

from enum import Enum


class Difficulty(Enum):
    """The four named difficulty tiers.

    Each tier fixes the wall probability used by the map generator, the
    starting resource pool of both cities, and the starting level (used for
    both production and combat) of each faction's first city.
    """

    EASY = "easy"
    STANDARD = "standard"
    HARD = "hard"
    NOT_EVEN_REMOTELY_FAIR = "not-even-remotely-fair"

    @classmethod
    def default(cls) -> "Difficulty":
        return cls.STANDARD

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Parse a tier name such as "hard" or "NOT_EVEN_REMOTELY_FAIR".

        Raises:
            ValueError: If the name matches no tier
        """
        normalized = name.strip().lower().replace("_", "-").replace(" ", "-")
        for tier in cls:
            if tier.value == normalized:
                return tier
        choices = ", ".join(tier.value for tier in cls)
        raise ValueError(f"Unknown difficulty: '{name}' (choose from {choices})")

    @property
    def wall_probability(self) -> float:
        return _WALL_PROBABILITY[self]

    @property
    def starting_resources(self) -> int:
        return _STARTING_RESOURCES[self]

    @property
    def starting_enemy_level(self) -> int:
        return _STARTING_ENEMY_LEVEL[self]

    @property
    def starting_player_level(self) -> int:
        return _STARTING_PLAYER_LEVEL[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_WALL_PROBABILITY = {
    Difficulty.EASY: 0.05,
    Difficulty.STANDARD: 0.10,
    Difficulty.HARD: 0.25,
    Difficulty.NOT_EVEN_REMOTELY_FAIR: 0.30,
}

_STARTING_RESOURCES = {
    Difficulty.EASY: 10,
    Difficulty.STANDARD: 3,
    Difficulty.HARD: 0,
    Difficulty.NOT_EVEN_REMOTELY_FAIR: 0,
}

_STARTING_ENEMY_LEVEL = {
    Difficulty.EASY: 1,
    Difficulty.STANDARD: 1,
    Difficulty.HARD: 2,
    Difficulty.NOT_EVEN_REMOTELY_FAIR: 5,
}

_STARTING_PLAYER_LEVEL = {
    Difficulty.EASY: 2,
    Difficulty.STANDARD: 1,
    Difficulty.HARD: 1,
    Difficulty.NOT_EVEN_REMOTELY_FAIR: 1,
}

_LABELS = {
    Difficulty.EASY: "Easy",
    Difficulty.STANDARD: "Standard",
    Difficulty.HARD: "Hard",
    Difficulty.NOT_EVEN_REMOTELY_FAIR: "Not Even Remotely Fair",
}
