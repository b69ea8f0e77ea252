"""Decoding of terminal key names into game commands."""

from ..models import Command

# Textual key names → commands
KEY_BINDINGS = {
    "up": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "enter": Command.INTERACT,
    "s": Command.END_TURN,
    "end": Command.END_TURN,
    "Q": Command.QUIT,
    "shift+q": Command.QUIT,
    "escape": Command.QUIT,
}

INSTRUCTIONS = "[↑↓←→ to move, enter to interact, s to end turn, ESC to quit, h for help]"


def key_to_command(key: str) -> Command:
    """Map a key name to a command; unknown keys map to Command.NONE."""
    return KEY_BINDINGS.get(key, Command.NONE)
