"""City data model."""

from dataclasses import dataclass
from enum import Enum


class CityOwner(Enum):
    """Who holds a city.

    DESTROYED is terminal: a ruin keeps occupying its cell until it is
    cleaned up, but it belongs to nobody and can no longer act.
    """

    PLAYER = "player"
    COMPUTER = "computer"
    DESTROYED = "destroyed"

    @property
    def opponent(self) -> "CityOwner":
        """The opposing faction (ruins have no opponent)."""
        if self is CityOwner.PLAYER:
            return CityOwner.COMPUTER
        if self is CityOwner.COMPUTER:
            return CityOwner.PLAYER
        raise ValueError("A destroyed city has no opponent")


@dataclass
class City:
    """A faction-owned settlement on a single grid cell.

    Cities accumulate resources through production and spend them on
    upgrades, demolition, founding new cities and so on. The economic
    formulas live in ``cell_wars.engine.economy``.
    """

    owner: CityOwner
    production_level: int = 1  # Drives resource income
    combat_level: int = 1  # Drives attack rolls
    resources: int = 0  # Spendable stockpile

    def __post_init__(self):
        """Validate city data after initialization."""
        if not isinstance(self.owner, CityOwner):
            raise ValueError(f"Invalid owner: {self.owner!r} (must be a CityOwner)")
        if self.production_level < 1:
            raise ValueError(
                f"Invalid production_level: {self.production_level} (must be >= 1)"
            )
        if self.combat_level < 1:
            raise ValueError(f"Invalid combat_level: {self.combat_level} (must be >= 1)")
        if self.resources < 0:
            raise ValueError(f"Invalid resources: {self.resources} (must be >= 0)")

    @property
    def is_destroyed(self) -> bool:
        return self.owner is CityOwner.DESTROYED
