"""Terminal presentation layer for Cell Wars."""

from .display import describe_cell, turn_banner
from .keys import key_to_command
from .renderer import MapRenderer

__all__ = [
    "MapRenderer",
    "describe_cell",
    "key_to_command",
    "turn_banner",
]
