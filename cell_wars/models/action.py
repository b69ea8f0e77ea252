"""Action data models for city commands.

Actions form a closed set of tagged variants. Every variant names the
acting city by its ``source`` position; demolition, attacks and founding
also name a ``target`` cell.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ActionError, GameError
from .position import Position


@dataclass(frozen=True)
class Produce:
    """Collect resources at the source city."""

    source: Position


@dataclass(frozen=True)
class UpgradeAttack:
    """Raise the source city's combat level."""

    source: Position


@dataclass(frozen=True)
class UpgradeProduce:
    """Raise the source city's production level."""

    source: Position


@dataclass(frozen=True)
class DestroyWall:
    """Demolish a wall, or clean up a ruin, at the target cell."""

    source: Position
    target: Position


@dataclass(frozen=True)
class AttackCity:
    """Attack the enemy city at the target cell."""

    source: Position
    target: Position


@dataclass(frozen=True)
class GenerateCity:
    """Found a new city on the empty target cell."""

    source: Position
    target: Position


Action = Produce | UpgradeAttack | UpgradeProduce | DestroyWall | AttackCity | GenerateCity
TargetedAction = DestroyWall | AttackCity | GenerateCity


class ActionKind(Enum):
    """Action kinds as offered in the city menu, before a target is known."""

    PRODUCE = "produce"
    UPGRADE_ATTACK = "upgrade_attack"
    UPGRADE_PRODUCE = "upgrade_produce"
    ATTACK_CITY = "attack_city"
    DESTROY_WALL = "destroy_wall"
    GENERATE_CITY = "generate_city"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def needs_target(self) -> bool:
        return self in (
            ActionKind.ATTACK_CITY,
            ActionKind.DESTROY_WALL,
            ActionKind.GENERATE_CITY,
        )


_LABELS = {
    ActionKind.PRODUCE: "Produce Resources",
    ActionKind.UPGRADE_ATTACK: "Upgrade Combat Readiness Level",
    ActionKind.UPGRADE_PRODUCE: "Upgrade Production Level",
    ActionKind.ATTACK_CITY: "Attack City",
    ActionKind.DESTROY_WALL: "Destroy Wall / Clean Up Ruin",
    ActionKind.GENERATE_CITY: "Build New City",
}


def build_action(kind: ActionKind, source: Position, target: Position | None = None) -> Action:
    """Build a concrete action from a menu choice.

    Args:
        kind: Chosen action kind
        source: Position of the acting city
        target: Target cell, required for targeted kinds and ignored otherwise

    Returns:
        The matching action variant

    Raises:
        ActionError: NEED_TARGET_POSITION if a targeted kind has no target,
            TARGET_IS_SOURCE if the target equals the source
    """
    if kind is ActionKind.PRODUCE:
        return Produce(source)
    if kind is ActionKind.UPGRADE_ATTACK:
        return UpgradeAttack(source)
    if kind is ActionKind.UPGRADE_PRODUCE:
        return UpgradeProduce(source)

    if target is None:
        raise ActionError(GameError.NEED_TARGET_POSITION)
    if target == source:
        raise ActionError(GameError.TARGET_IS_SOURCE)

    if kind is ActionKind.DESTROY_WALL:
        return DestroyWall(source, target)
    if kind is ActionKind.ATTACK_CITY:
        return AttackCity(source, target)
    return GenerateCity(source, target)
