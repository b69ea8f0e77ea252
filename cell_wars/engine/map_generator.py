"""Random map generation parameterized by difficulty."""

import logging

from ..models import City, CityOwner, Difficulty, GameSession, GridWorld, Position
from ..utils import GRID_SIZE, GameRNG

logger = logging.getLogger(__name__)


def generate_map(
    difficulty: Difficulty, seed: int | None = None, size: int = GRID_SIZE
) -> GameSession:
    """Generate a fresh game session.

    Args:
        difficulty: Tier controlling walls and starting levels
        seed: RNG seed for reproducible maps (None for a random map)
        size: Side length of the grid

    Returns:
        GameSession in SETUP state with the cursor on the player's city
    """
    rng = GameRNG(seed)
    grid = GridWorld(size)
    player_position = generate_grid(grid, difficulty, rng)

    session = GameSession(
        grid=grid,
        difficulty=difficulty,
        cursor=player_position,
        seed=seed,
        rng=rng,
    )

    logger.info(
        f"Generated {size}x{size} map ({difficulty.label}, seed {seed}): "
        f"{grid.count_blocked()} walls"
    )
    return session


def generate_grid(grid: GridWorld, difficulty: Difficulty, rng: GameRNG) -> Position:
    """Populate a grid with two starting cities and random walls.

    Algorithm:
    1. Reset every cell to empty
    2. Draw a uniformly random cell for the player city
    3. Draw cells for the computer city until one differs from the player's
    4. Place both cities with the tier's starting levels and resources
    5. Block every other cell independently with the tier's wall probability

    Args:
        grid: Grid to (re)populate in place
        difficulty: Tier controlling walls and starting levels
        rng: Random number generator

    Returns:
        Position of the player city, where the cursor starts
    """
    grid.reset()

    player_position = _random_position(grid, rng)
    computer_position = _random_position(grid, rng)
    while computer_position == player_position:
        computer_position = _random_position(grid, rng)

    grid.cell_at(player_position).city = City(
        owner=CityOwner.PLAYER,
        production_level=difficulty.starting_player_level,
        combat_level=difficulty.starting_player_level,
        resources=difficulty.starting_resources,
    )
    grid.cell_at(computer_position).city = City(
        owner=CityOwner.COMPUTER,
        production_level=difficulty.starting_enemy_level,
        combat_level=difficulty.starting_enemy_level,
        resources=difficulty.starting_resources,
    )

    wall_probability = difficulty.wall_probability
    for pos in grid.positions():
        cell = grid.cell_at(pos)
        if cell.city is not None:
            continue
        if rng.chance(wall_probability):
            cell.blocked = True

    logger.debug(f"Player city at {player_position}, computer city at {computer_position}")
    return player_position


def _random_position(grid: GridWorld, rng: GameRNG) -> Position:
    x, y = rng.random_coord(grid.size)
    return Position(x, y)
