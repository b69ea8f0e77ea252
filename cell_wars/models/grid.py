"""Grid world container."""

from collections.abc import Iterator

from ..utils import GRID_SIZE
from .cell import Cell
from .city import City, CityOwner
from .errors import ActionError, GameError
from .position import Position


class GridWorld:
    """An N x N matrix of cells, indexed as ``cells[y][x]``.

    The grid never changes size after construction; cities are never
    relocated between cells.
    """

    def __init__(self, size: int = GRID_SIZE):
        """Create an all-empty grid.

        Args:
            size: Side length of the square grid
        """
        if size < 2:
            raise ValueError(f"Invalid grid size: {size} (must be >= 2)")
        self.size = size
        self.cells: list[list[Cell]] = []
        self.reset()

    def reset(self) -> None:
        """Clear every cell back to empty and unblocked."""
        self.cells = [[Cell() for _ in range(self.size)] for _ in range(self.size)]

    def in_bounds(self, pos: Position) -> bool:
        return pos.in_bounds(self.size)

    def require_in_bounds(self, pos: Position) -> None:
        """Raise INVALID_POSITION unless pos lies on the grid."""
        if not self.in_bounds(pos):
            raise ActionError(
                GameError.INVALID_POSITION, f"Position {pos} is off the {self.size}x{self.size} map."
            )

    def cell_at(self, pos: Position) -> Cell:
        """Return the cell at pos.

        Raises:
            ActionError: INVALID_POSITION if pos is out of bounds
        """
        self.require_in_bounds(pos)
        return self.cells[pos.y][pos.x]

    def city_at(self, pos: Position) -> City:
        """Return the city at pos.

        Raises:
            ActionError: INVALID_POSITION if pos is out of bounds,
                NO_CITY_AT_TARGET if the cell holds no city
        """
        city = self.cell_at(pos).city
        if city is None:
            raise ActionError(GameError.NO_CITY_AT_TARGET)
        return city

    def positions(self) -> Iterator[Position]:
        """Yield every position in row-major order."""
        for y in range(self.size):
            for x in range(self.size):
                yield Position(x, y)

    def cities(self, owner: CityOwner | None = None) -> Iterator[tuple[Position, City]]:
        """Yield (position, city) pairs, optionally filtered by owner."""
        for pos in self.positions():
            city = self.cells[pos.y][pos.x].city
            if city is None:
                continue
            if owner is None or city.owner is owner:
                yield pos, city

    def count_cities(self, owner: CityOwner) -> int:
        return sum(1 for _ in self.cities(owner))

    def count_blocked(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.blocked)
