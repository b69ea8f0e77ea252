"""Classified errors raised when an action is rejected."""

from enum import Enum


class GameError(Enum):
    """Classification of rejected actions.

    Every member is recoverable: a rejected action is simply not applied
    and the caller decides whether to re-prompt.
    """

    INVALID_POSITION = "invalid_position"
    NO_CITY_AT_SOURCE = "no_city_at_source"
    NO_CITY_AT_TARGET = "no_city_at_target"
    TARGET_IS_SOURCE = "target_is_source"
    NEED_TARGET_POSITION = "need_target_position"
    NOT_ENOUGH_RESOURCES = "not_enough_resources"
    NOT_YOUR_CITY = "not_your_city"
    TARGET_NOT_OBSTACLE = "target_not_obstacle"
    TARGET_NOT_ENEMY = "target_not_enemy"
    TARGET_NOT_EMPTY = "target_not_empty"
    TARGET_OUT_OF_RANGE = "target_out_of_range"
    CITY_ALREADY_ACTED = "city_already_acted"

    def describe(self) -> str:
        """Short human-readable explanation for the status line."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    GameError.INVALID_POSITION: "That position is off the map.",
    GameError.NO_CITY_AT_SOURCE: "There is no city there to act from.",
    GameError.NO_CITY_AT_TARGET: "There is no city at the target.",
    GameError.TARGET_IS_SOURCE: "A city cannot target itself.",
    GameError.NEED_TARGET_POSITION: "That action needs a target.",
    GameError.NOT_ENOUGH_RESOURCES: "Not enough resources.",
    GameError.NOT_YOUR_CITY: "That is not your city.",
    GameError.TARGET_NOT_OBSTACLE: "Only walls and ruins can be demolished.",
    GameError.TARGET_NOT_ENEMY: "You can only attack enemy cities.",
    GameError.TARGET_NOT_EMPTY: "New cities need an empty tile.",
    GameError.TARGET_OUT_OF_RANGE: "The target is out of range.",
    GameError.CITY_ALREADY_ACTED: "That city has already acted this turn.",
}


class ActionError(Exception):
    """Raised when an action fails validation, with classification."""

    def __init__(self, error: GameError, message: str | None = None):
        """Initialize action error.

        Args:
            error: Classification of the error
            message: Human-readable message (defaults to the error's description)
        """
        self.error = error
        self.message = message or error.describe()
        super().__init__(self.message)
