"""Data models for Cell Wars."""

from .action import (
    Action,
    ActionKind,
    AttackCity,
    DestroyWall,
    GenerateCity,
    Produce,
    TargetedAction,
    UpgradeAttack,
    UpgradeProduce,
    build_action,
)
from .cell import Cell
from .city import City, CityOwner
from .command import Command, move_delta
from .difficulty import Difficulty
from .errors import ActionError, GameError
from .grid import GridWorld
from .position import Position
from .session import GameSession
from .state import GameState

__all__ = [
    "Action",
    "ActionError",
    "ActionKind",
    "AttackCity",
    "Cell",
    "City",
    "CityOwner",
    "Command",
    "DestroyWall",
    "Difficulty",
    "GameError",
    "GameSession",
    "GameState",
    "GenerateCity",
    "GridWorld",
    "Position",
    "Produce",
    "TargetedAction",
    "UpgradeAttack",
    "UpgradeProduce",
    "build_action",
    "move_delta",
]
