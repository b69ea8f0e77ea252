"""Game engine components."""

from .actions import ActionOutcome, apply_action
from .combat import AttackResult, resolve_attack, roll_for_attack
from .map_generator import generate_grid, generate_map
from .opponent import Opponent, idle_opponent
from .turn_controller import TurnController
from .victory import check_victory

__all__ = [
    "ActionOutcome",
    "AttackResult",
    "Opponent",
    "TurnController",
    "apply_action",
    "check_victory",
    "generate_grid",
    "generate_map",
    "idle_opponent",
    "resolve_attack",
    "roll_for_attack",
]
