"""City economy: production, power and upgrades.

All quantities are non-negative integers. Spending checks the balance
first and leaves the city untouched when it cannot pay, so resources
never go negative.
"""

import math

from ..models.city import City
from ..models.errors import ActionError, GameError
from ..utils import UPGRADE_COST_PER_LEVEL


def produce(city: City) -> int:
    """Collect one round of resources.

    Income is ceil(production_level / 2), so it never decreases the
    stockpile and depends only on the production level.

    Args:
        city: City to produce at

    Returns:
        Amount of resources produced
    """
    income = math.ceil(city.production_level / 2)
    city.resources += income
    return income


def power(city: City) -> int:
    """Summarize a city's overall strength as a single number.

    power = ceil((combat_level + production_level + ceil(resources / 2)) / 3)

    Example: combat 3, production 2, resources 5 gives a bonus of 3, a sum
    of 8 and a power of 3.
    """
    resource_bonus = math.ceil(city.resources / 2)
    return math.ceil((city.combat_level + city.production_level + resource_bonus) / 3)


def attack_upgrade_cost(city: City) -> int:
    return city.combat_level * UPGRADE_COST_PER_LEVEL


def production_upgrade_cost(city: City) -> int:
    return city.production_level * UPGRADE_COST_PER_LEVEL


def can_afford(city: City, amount: int) -> bool:
    return city.resources >= amount


def spend(city: City, amount: int) -> None:
    """Deduct amount from the city's resources.

    Raises:
        ActionError: NOT_ENOUGH_RESOURCES if the city cannot pay; the city
            is left unchanged
    """
    if not can_afford(city, amount):
        raise ActionError(
            GameError.NOT_ENOUGH_RESOURCES,
            f"Not enough resources: need {amount}, have {city.resources}.",
        )
    city.resources -= amount


def drain(city: City, amount: int) -> int:
    """Remove up to amount resources, stopping at zero.

    Returns:
        Amount actually removed
    """
    lost = min(city.resources, max(amount, 0))
    city.resources -= lost
    return lost


def upgrade_attack(city: City) -> None:
    """Raise combat_level by one, paying combat_level * 5 resources.

    Raises:
        ActionError: NOT_ENOUGH_RESOURCES if the city cannot pay
    """
    spend(city, attack_upgrade_cost(city))
    city.combat_level += 1


def upgrade_production(city: City) -> None:
    """Raise production_level by one, paying production_level * 5 resources.

    Raises:
        ActionError: NOT_ENOUGH_RESOURCES if the city cannot pay
    """
    spend(city, production_upgrade_cost(city))
    city.production_level += 1
