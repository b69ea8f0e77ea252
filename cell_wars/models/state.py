"""Turn/game state machine states."""

from enum import Enum


class GameState(Enum):
    """Where the game is in its turn cycle.

    SETUP is initial. PLAYER_WON, COMPUTER_WON, STALEMATE and ABANDONED are
    terminal: no transition leaves them. ABANDONED records a player quit,
    which is distinct from a real stalemate.
    """

    SETUP = "setup"
    PLAYER_TURN = "player_turn"
    COMPUTER_TURN = "computer_turn"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    STALEMATE = "stalemate"
    ABANDONED = "abandoned"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_STATES


_TERMINAL_STATES = frozenset(
    {
        GameState.PLAYER_WON,
        GameState.COMPUTER_WON,
        GameState.STALEMATE,
        GameState.ABANDONED,
    }
)
