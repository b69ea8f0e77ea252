"""Combat resolution between two cities.

This module handles:
1. Rolling a city's attack strength from its combat level
2. Deciding an attack from both sides' rolls
3. Applying the outcome (ruin and plunder, or attacker losses)
"""

import logging
from dataclasses import dataclass

from ..models.city import City, CityOwner
from ..utils import ROLL_WINDOW, GameRNG
from .economy import drain

logger = logging.getLogger(__name__)


@dataclass
class AttackResult:
    """Result of an attack.

    Attributes:
        attacker_roll: Attacker's strength roll
        defender_roll: Defender's strength roll
        winner: "attacker" or "defender" (ties go to the defender)
        plunder: Resources taken from a destroyed defender
        attacker_losses: Resources the attacker lost after a failed attack
    """

    attacker_roll: int
    defender_roll: int
    winner: str
    plunder: int = 0
    attacker_losses: int = 0

    @property
    def attacker_won(self) -> bool:
        return self.winner == "attacker"


def roll_range(city: City) -> tuple[int, int]:
    """Inclusive bounds of a city's attack roll.

    The window is [max(combat_level - 5, 0) + 1, combat_level + 1], six
    values wide once combat_level reaches 5 and narrower below that.
    """
    low = max(city.combat_level - ROLL_WINDOW, 0) + 1
    high = city.combat_level + 1
    return low, high


def roll_for_attack(city: City, rng: GameRNG) -> int:
    """Roll a city's attack strength.

    Depends only on combat_level and the RNG; the city is not modified.

    Args:
        city: City rolling for strength
        rng: Random number generator

    Returns:
        Integer uniformly drawn from roll_range(city)
    """
    low, high = roll_range(city)
    return rng.randint(low, high)


def resolve_attack(attacker: City, defender: City, rng: GameRNG) -> AttackResult:
    """Resolve an attack and apply its outcome to both cities.

    Combat rules:
    - Both cities roll; the attacker wins only with a strictly higher roll
    - Attacker wins: defender becomes a ruin, attacker takes its resources
    - Defender wins: attacker loses resources equal to the defender's roll

    Args:
        attacker: Attacking city
        defender: Defending city
        rng: Random number generator

    Returns:
        AttackResult describing the rolls and consequences
    """
    attacker_roll = roll_for_attack(attacker, rng)
    defender_roll = roll_for_attack(defender, rng)

    if attacker_roll > defender_roll:
        plunder = defender.resources
        attacker.resources += plunder
        defender.resources = 0
        defender.owner = CityOwner.DESTROYED
        result = AttackResult(
            attacker_roll=attacker_roll,
            defender_roll=defender_roll,
            winner="attacker",
            plunder=plunder,
        )
    else:
        losses = drain(attacker, defender_roll)
        result = AttackResult(
            attacker_roll=attacker_roll,
            defender_roll=defender_roll,
            winner="defender",
            attacker_losses=losses,
        )

    logger.debug(f"Attack roll {attacker_roll} vs {defender_roll}: {result.winner} wins")
    return result
