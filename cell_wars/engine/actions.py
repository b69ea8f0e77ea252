"""Action validation and application.

Every action goes through the same shared checks before any
variant-specific logic runs:
1. Source (and target, if any) must be on the grid
2. A targeted action may not target its own source cell
3. The source cell must hold a city
4. That city must belong to the acting faction

Variant checks then run in full before the first mutation, so a rejected
action never leaves the grid partially changed.
"""

import logging
from dataclasses import dataclass

from ..models import (
    Action,
    ActionError,
    AttackCity,
    City,
    CityOwner,
    DestroyWall,
    GameError,
    GenerateCity,
    GridWorld,
    Position,
    Produce,
    UpgradeAttack,
    UpgradeProduce,
)
from ..utils import (
    ACTION_RANGE,
    ATTACK_RANGE,
    CITY_FOUNDING_COST,
    NEW_CITY_LEVEL,
    RUIN_CLEANUP_COST,
    WALL_DEMOLITION_COST,
    GameRNG,
)
from . import economy
from .combat import AttackResult, resolve_attack

logger = logging.getLogger(__name__)


@dataclass
class ActionOutcome:
    """What an applied action did.

    Attributes:
        action: The applied action
        message: Short human-readable summary for the status line
        attack: Combat details for AttackCity, None otherwise
    """

    action: Action
    message: str
    attack: AttackResult | None = None


def apply_action(
    grid: GridWorld,
    action: Action,
    rng: GameRNG,
    actor: CityOwner = CityOwner.PLAYER,
) -> ActionOutcome:
    """Validate and apply an action to the grid.

    Args:
        grid: Grid to mutate in place
        action: Action to apply
        rng: Random number generator (used by attacks)
        actor: Faction performing the action

    Returns:
        ActionOutcome describing the applied effect

    Raises:
        ActionError: If the action is rejected; the grid is unchanged
    """
    if actor is CityOwner.DESTROYED:
        raise ValueError("Only the player or the computer can act")

    city = _validate_source(grid, action, actor)

    match action:
        case Produce():
            income = economy.produce(city)
            outcome = ActionOutcome(action, f"Produced {income} resources.")
        case UpgradeAttack():
            economy.upgrade_attack(city)
            outcome = ActionOutcome(
                action, f"Combat readiness raised to level {city.combat_level}."
            )
        case UpgradeProduce():
            economy.upgrade_production(city)
            outcome = ActionOutcome(
                action, f"Production raised to level {city.production_level}."
            )
        case DestroyWall(source=source, target=target):
            outcome = _destroy_wall(grid, action, city, source, target)
        case AttackCity(source=source, target=target):
            outcome = _attack_city(grid, action, city, source, target, actor, rng)
        case GenerateCity(source=source, target=target):
            outcome = _generate_city(grid, action, city, source, target, actor)
        case _:
            raise TypeError(f"Unknown action: {action!r}")

    logger.info(f"{actor.value} {type(action).__name__} at {action.source}: {outcome.message}")
    return outcome


def _validate_source(grid: GridWorld, action: Action, actor: CityOwner) -> City:
    """Run the checks shared by every action and return the acting city."""
    grid.require_in_bounds(action.source)

    target = getattr(action, "target", None)
    if target is not None:
        grid.require_in_bounds(target)
        if target == action.source:
            raise ActionError(GameError.TARGET_IS_SOURCE)

    try:
        city = grid.city_at(action.source)
    except ActionError as e:
        if e.error is GameError.NO_CITY_AT_TARGET:
            raise ActionError(GameError.NO_CITY_AT_SOURCE) from e
        raise

    if city.owner is not actor:
        raise ActionError(GameError.NOT_YOUR_CITY)
    return city


def _require_range(source: Position, target: Position, reach: int) -> None:
    distance = source.distance_to(target)
    if distance > reach:
        raise ActionError(
            GameError.TARGET_OUT_OF_RANGE,
            f"The target is {distance} tiles away (range {reach}).",
        )


def _destroy_wall(
    grid: GridWorld, action: DestroyWall, city: City, source: Position, target: Position
) -> ActionOutcome:
    """Demolish a wall or clean up a ruin, turning the target into an empty tile."""
    cell = grid.cell_at(target)
    if cell.blocked:
        cost = WALL_DEMOLITION_COST
        message = f"Wall demolished for {cost} resources."
    elif cell.has_ruin:
        cost = RUIN_CLEANUP_COST
        message = f"Ruin cleaned up for {cost} resources."
    else:
        raise ActionError(GameError.TARGET_NOT_OBSTACLE)

    _require_range(source, target, ACTION_RANGE)
    economy.spend(city, cost)
    cell.clear()
    return ActionOutcome(action, message)


def _attack_city(
    grid: GridWorld,
    action: AttackCity,
    city: City,
    source: Position,
    target: Position,
    actor: CityOwner,
    rng: GameRNG,
) -> ActionOutcome:
    """Attack an enemy city; the combat module decides and applies the outcome."""
    defender = grid.city_at(target)
    if defender.owner is not actor.opponent:
        raise ActionError(GameError.TARGET_NOT_ENEMY)
    _require_range(source, target, ATTACK_RANGE)

    result = resolve_attack(city, defender, rng)
    if result.attacker_won:
        message = (
            f"Victory ({result.attacker_roll} vs {result.defender_roll}): "
            f"city at {target} destroyed, {result.plunder} resources plundered."
        )
    else:
        message = (
            f"Repelled ({result.attacker_roll} vs {result.defender_roll}): "
            f"lost {result.attacker_losses} resources."
        )
    return ActionOutcome(action, message, attack=result)


def _generate_city(
    grid: GridWorld,
    action: GenerateCity,
    city: City,
    source: Position,
    target: Position,
    actor: CityOwner,
) -> ActionOutcome:
    """Found a new level-1 city on an empty tile."""
    cell = grid.cell_at(target)
    if not cell.is_empty:
        raise ActionError(GameError.TARGET_NOT_EMPTY)
    _require_range(source, target, ACTION_RANGE)

    economy.spend(city, CITY_FOUNDING_COST)
    cell.city = City(
        owner=actor,
        production_level=NEW_CITY_LEVEL,
        combat_level=NEW_CITY_LEVEL,
        resources=0,
    )
    return ActionOutcome(action, f"New city founded at {target} for {CITY_FOUNDING_COST} resources.")
