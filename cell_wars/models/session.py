"""Game session state container."""

from dataclasses import dataclass, field

from ..utils import GameRNG
from .difficulty import Difficulty
from .grid import GridWorld
from .position import Position
from .state import GameState


@dataclass
class GameSession:
    """Main game state container.

    The session owns the grid exclusively and carries everything the
    presentation layer reads: the highlighted cursor cell, the turn state
    and an optional one-line status message.
    """

    grid: GridWorld  # The board
    difficulty: Difficulty  # Active difficulty tier
    cursor: Position  # Highlighted cell, always on the grid
    seed: int | None = None  # RNG seed (None = unseeded)
    state: GameState = GameState.SETUP  # Turn state machine position
    status_message: str | None = None  # Transient text for the status line
    rng: GameRNG | None = None  # Seeded RNG instance
    turn: int = 0  # Turn number (0 until the first player turn)
    acted: set[Position] = field(default_factory=set)  # Cities that acted this turn

    def __post_init__(self):
        """Initialize RNG if not provided and validate the cursor."""
        if self.rng is None:
            self.rng = GameRNG(self.seed)
        if not self.grid.in_bounds(self.cursor):
            raise ValueError(f"Invalid cursor: {self.cursor} (must be on the grid)")
        if self.turn < 0:
            raise ValueError(f"Invalid turn: {self.turn} (must be >= 0)")

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, stopping at the grid edges."""
        x = min(max(self.cursor.x + dx, 0), self.grid.size - 1)
        y = min(max(self.cursor.y + dy, 0), self.grid.size - 1)
        self.cursor = Position(x, y)

    def cursor_up(self) -> None:
        self.move_cursor(0, -1)

    def cursor_down(self) -> None:
        self.move_cursor(0, 1)

    def cursor_left(self) -> None:
        self.move_cursor(-1, 0)

    def cursor_right(self) -> None:
        self.move_cursor(1, 0)
