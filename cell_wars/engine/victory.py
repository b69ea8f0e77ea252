"""Victory condition checking.

This module handles:
1. Counting the surviving cities of each faction
2. Determining the outcome (player win, computer win, stalemate, or None)
"""

from ..models import CityOwner, GameState, GridWorld


def check_victory(grid: GridWorld) -> GameState | None:
    """Check whether either faction has been eliminated.

    A faction is eliminated once none of its cities remain; ruins count for
    nobody. Outcomes:
    - Both eliminated → STALEMATE
    - Only the player eliminated → COMPUTER_WON
    - Only the computer eliminated → PLAYER_WON
    - Neither eliminated → None (play continues)

    Args:
        grid: Current grid

    Returns:
        Terminal GameState if the game is over, None otherwise
    """
    player_alive = grid.count_cities(CityOwner.PLAYER) > 0
    computer_alive = grid.count_cities(CityOwner.COMPUTER) > 0

    if not player_alive and not computer_alive:
        return GameState.STALEMATE
    elif not player_alive:
        return GameState.COMPUTER_WON
    elif not computer_alive:
        return GameState.PLAYER_WON
    else:
        return None
