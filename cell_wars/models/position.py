"""Grid coordinate model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the grid.

    Positions are value objects: two positions are equal iff both
    coordinates match, and they can be used as dict keys or set members.
    """

    x: int  # Column (0 at the left edge)
    y: int  # Row (0 at the top edge)

    def in_bounds(self, size: int) -> bool:
        """Check whether this position lies on a size x size grid."""
        return 0 <= self.x < size and 0 <= self.y < size

    def distance_to(self, other: "Position") -> int:
        """Chebyshev distance to another position.

        Diagonal steps cost the same as orthogonal ones, so this is the
        number of king moves between the two cells.

        Examples:
            >>> Position(0, 0).distance_to(Position(3, 4))
            4
        """
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by (dx, dy), without bounds checks."""
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
