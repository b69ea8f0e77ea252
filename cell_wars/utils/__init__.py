"""Utility functions and constants for Cell Wars."""

from .constants import (
    ACTION_RANGE,
    ATTACK_RANGE,
    CITY_FOUNDING_COST,
    GRID_SIZE,
    NEW_CITY_LEVEL,
    RNG_SEED_DEFAULT,
    ROLL_WINDOW,
    RUIN_CLEANUP_COST,
    UPGRADE_COST_PER_LEVEL,
    WALL_DEMOLITION_COST,
)
from .rng import GameRNG

__all__ = [
    "ACTION_RANGE",
    "ATTACK_RANGE",
    "CITY_FOUNDING_COST",
    "GRID_SIZE",
    "NEW_CITY_LEVEL",
    "RNG_SEED_DEFAULT",
    "ROLL_WINDOW",
    "RUIN_CLEANUP_COST",
    "UPGRADE_COST_PER_LEVEL",
    "WALL_DEMOLITION_COST",
    "GameRNG",
]
