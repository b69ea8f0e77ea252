"""Grid cell data model."""

from dataclasses import dataclass

from .city import City


@dataclass
class Cell:
    """One grid location.

    A cell is a wall (blocked), holds a city, or is empty. A wall never
    holds a city and a city cell is never blocked.
    """

    city: City | None = None
    blocked: bool = False

    def __post_init__(self):
        """Validate cell data after initialization."""
        if self.blocked and self.city is not None:
            raise ValueError("A blocked cell cannot hold a city")

    @property
    def is_empty(self) -> bool:
        return self.city is None and not self.blocked

    @property
    def has_ruin(self) -> bool:
        return self.city is not None and self.city.is_destroyed

    def clear(self) -> None:
        """Turn the cell back into an empty tile."""
        self.city = None
        self.blocked = False
