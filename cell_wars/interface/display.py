"""Text shown to the player about cells, turns and outcomes."""

from ..engine import economy
from ..models import ActionKind, Cell, CityOwner, Difficulty, GameSession, GameState
from ..utils import CITY_FOUNDING_COST, RUIN_CLEANUP_COST, WALL_DEMOLITION_COST

HOW_TO_PLAY_OPTION = "how_to_play"
QUIT_OPTION = "quit"

HOW_TO_PLAY = (
    "The goal of the game is to destroy your opponent's cities.\n"
    "You both start out with one city, and must gather resources.\n"
    "Each city can act once per turn: produce, upgrade, attack, demolish or build.\n"
    f"Walls cost {WALL_DEMOLITION_COST} to demolish, ruins {RUIN_CLEANUP_COST} to clean up, "
    f"and a new city costs {CITY_FOUNDING_COST}."
)

OUTCOME_MESSAGES = {
    GameState.PLAYER_WON: "Victory! Every enemy city lies in ruins.",
    GameState.COMPUTER_WON: "Defeat. Your last city has fallen.",
    GameState.STALEMATE: "Stalemate. Neither side prevailed.",
    GameState.ABANDONED: "Game abandoned.",
}


def describe_cell(cell: Cell) -> str:
    """Describe a cell from the player's point of view.

    Enemy statistics stay hidden; the player's own cities show their levels,
    resources and overall power.
    """
    if cell.blocked:
        return (
            "Wall.\n"
            "\t- Cannot build a city here.\n"
            f"\t- Can be destroyed for {WALL_DEMOLITION_COST} Resources."
        )

    city = cell.city
    if city is None:
        return f"Empty tile.\n\t- A new city can be built here for {CITY_FOUNDING_COST} Resources."

    if city.owner is CityOwner.DESTROYED:
        return (
            "A destroyed city.\n"
            "\t- It is, effectively, now just an obstacle.\n"
            f"\t- Can be cleaned up for {RUIN_CLEANUP_COST} Resources, turning it into an empty tile."
        )
    if city.owner is CityOwner.COMPUTER:
        return "Enemy city.\n\t- Statistics unknown."

    return (
        "Your city.\n"
        f"\t- Productivity Level: {city.production_level}"
        f" (upgrade: {economy.production_upgrade_cost(city)})\n"
        f"\t- Combat Readiness Level: {city.combat_level}"
        f" (upgrade: {economy.attack_upgrade_cost(city)})\n"
        f"\t- Resources: {city.resources}\n"
        f"\t- Overall Power: {economy.power(city)}"
    )


def turn_banner(session: GameSession) -> str:
    """One-line header: turn number, difficulty and whose move it is."""
    if session.state.is_terminal:
        return OUTCOME_MESSAGES[session.state]
    whose = "Your turn" if session.state is GameState.PLAYER_TURN else "Computer's turn"
    return f"Turn {session.turn} - {session.difficulty.label} - {whose}"


def action_menu_labels(kinds: list[ActionKind]) -> list[tuple[str, str]]:
    """(option id, label) pairs for the city action menu."""
    return [(kind.value, kind.label) for kind in kinds]


def start_menu_options() -> list[tuple[str, str]]:
    """(option id, label) pairs for the start menu.

    One entry per difficulty tier, the default marked with "(*)", followed
    by How To Play and Quit.
    """
    default = Difficulty.default()
    options = []
    for tier in Difficulty:
        marker = " (*)" if tier is default else ""
        options.append((tier.value, f"Play: {tier.label}{marker}"))
    options.append((HOW_TO_PLAY_OPTION, "How To Play"))
    options.append((QUIT_OPTION, "Quit"))
    return options
