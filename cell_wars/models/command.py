"""High-level input commands fed to the turn controller."""

from enum import Enum


class Command(Enum):
    """The closed set of commands the input layer can produce."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    INTERACT = "interact"
    END_TURN = "end_turn"
    QUIT = "quit"
    NONE = "none"  # Unmapped key, ignored

    @property
    def is_move(self) -> bool:
        return self in _MOVES


_MOVES = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}


def move_delta(command: Command) -> tuple[int, int]:
    """Cursor (dx, dy) for a move command.

    Raises:
        ValueError: If the command is not a move
    """
    try:
        return _MOVES[command]
    except KeyError:
        raise ValueError(f"Not a move command: {command}") from None
