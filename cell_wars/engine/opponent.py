"""Computer opponent hook.

An opponent is any callable taking the session and returning the actions
the computer wants to take this turn, in order. It is called once per
computer turn and must not mutate the session itself.
"""

from collections.abc import Callable

from ..models import Action, GameSession

Opponent = Callable[[GameSession], list[Action]]


def idle_opponent(session: GameSession) -> list[Action]:
    """Stand-in opponent that always passes."""
    return []
