"""Turn state machine.

This module sequences play:
1. SETUP → PLAYER_TURN once the map exists and the first turn begins
2. PLAYER_TURN accepts cursor moves, interactions and actions, one action
   per city per turn
3. END_TURN hands over to COMPUTER_TURN, where the injected opponent picks
   zero or more actions
4. Control returns to PLAYER_TURN with the turn counter incremented

Victory is checked after every applied action and after each hand-over.
PLAYER_WON, COMPUTER_WON, STALEMATE and ABANDONED are terminal.
"""

import logging

from ..models import (
    Action,
    ActionError,
    ActionKind,
    CityOwner,
    Command,
    GameError,
    GameSession,
    GameState,
    GenerateCity,
    Position,
    build_action,
    move_delta,
)
from .actions import ActionOutcome, apply_action
from .opponent import Opponent, idle_opponent
from .victory import check_victory

logger = logging.getLogger(__name__)


class TurnController:
    """Drives a GameSession through its turn cycle.

    The controller is the only component that changes ``session.state``.
    Rejected actions never escape as exceptions: they become the session's
    status message and ``last_error``.
    """

    def __init__(
        self,
        session: GameSession,
        opponent: Opponent = idle_opponent,
        max_turns: int | None = None,
    ):
        """Initialize turn controller.

        Args:
            session: Session to drive (must be in SETUP state)
            opponent: Callable choosing the computer's actions each turn
            max_turns: Declare a stalemate after this many turns (None = no limit)
        """
        if max_turns is not None and max_turns < 1:
            raise ValueError(f"Invalid max_turns: {max_turns} (must be >= 1)")
        self.session = session
        self.opponent = opponent
        self.max_turns = max_turns
        self.pending_kind: ActionKind | None = None  # Targeted action awaiting a target
        self.pending_source: Position | None = None
        self.last_error: GameError | None = None

    @property
    def state(self) -> GameState:
        return self.session.state

    @property
    def is_over(self) -> bool:
        return self.session.state.is_terminal

    # =========================================================================
    # STATE TRANSITIONS
    # =========================================================================

    def start(self) -> None:
        """Begin the first player turn.

        Raises:
            RuntimeError: If the session is not in SETUP state
        """
        if self.state is not GameState.SETUP:
            raise RuntimeError(f"Cannot start a game in state {self.state.value}")
        self.session.turn = 1
        self.session.acted.clear()
        self._set_state(GameState.PLAYER_TURN)
        self._check_victory()

    def end_turn(self) -> None:
        """Finish the player's turn and run the computer's turn.

        Raises:
            RuntimeError: If it is not the player's turn
        """
        self._require_player_turn()
        self.cancel_pending()
        self.session.acted.clear()
        self._set_state(GameState.COMPUTER_TURN)
        if self._check_victory():
            return

        self._run_computer_turn()
        if self.is_over:
            return

        if self.max_turns is not None and self.session.turn >= self.max_turns:
            logger.info(f"Turn limit {self.max_turns} reached without a winner")
            self._set_state(GameState.STALEMATE)
            return

        self.session.turn += 1
        self.session.acted.clear()
        self._set_state(GameState.PLAYER_TURN)

    def quit(self) -> None:
        """Abandon the game. Has no effect once the game is over."""
        if self.is_over:
            return
        self.cancel_pending()
        self._set_state(GameState.ABANDONED)

    # =========================================================================
    # PLAYER INPUT
    # =========================================================================

    def handle_command(self, command: Command) -> list[ActionKind]:
        """Apply one decoded input command.

        Args:
            command: Command from the input layer

        Returns:
            Action kinds to offer when INTERACT opens a city menu, else an
            empty list
        """
        if self.is_over or command is Command.NONE:
            return []
        self._require_player_turn()

        if command.is_move:
            dx, dy = move_delta(command)
            self.session.move_cursor(dx, dy)
            self.session.status_message = None
            return []
        if command is Command.INTERACT:
            return self.interact()
        if command is Command.END_TURN:
            self.end_turn()
            return []
        if command is Command.QUIT:
            self.quit()
        return []

    def interact(self) -> list[ActionKind]:
        """Interact with the cell under the cursor.

        With a targeted action pending, the cursor cell becomes its target and
        the action is submitted. Otherwise the cell is inspected: the player's
        own cities return the menu of action kinds, anything else sets a
        status message.
        """
        self._require_player_turn()
        cursor = self.session.cursor

        if self.pending_kind is not None:
            kind, source = self.pending_kind, self.pending_source
            self.cancel_pending()
            self.submit_kind(kind, source, cursor)
            return []

        cell = self.session.grid.cell_at(cursor)
        if cell.blocked:
            self.session.status_message = "That's just a wall."
            return []
        if cell.city is None:
            self.session.status_message = "Empty tile."
            return []
        if cell.city.owner is CityOwner.DESTROYED:
            self.session.status_message = "A destroyed city. It can be cleaned up."
            return []
        if cell.city.owner is CityOwner.COMPUTER:
            self.session.status_message = "Enemy city. Statistics unknown."
            return []
        if cursor in self.session.acted:
            self._reject(GameError.CITY_ALREADY_ACTED, GameError.CITY_ALREADY_ACTED.describe())
            return []
        return list(ActionKind)

    def choose_action(self, kind: ActionKind) -> ActionOutcome | None:
        """Pick an action from the menu of the city under the cursor.

        Target-less actions are submitted immediately. Targeted actions wait
        for the next interaction, which supplies the target.

        Returns:
            ActionOutcome if an action was applied, None otherwise
        """
        self._require_player_turn()
        source = self.session.cursor
        if kind.needs_target:
            self.pending_kind = kind
            self.pending_source = source
            self.session.status_message = f"{kind.label}: move to a target and press Enter."
            return None
        return self.submit_kind(kind, source)

    def cancel_pending(self) -> None:
        self.pending_kind = None
        self.pending_source = None

    def submit_kind(
        self, kind: ActionKind, source: Position, target: Position | None = None
    ) -> ActionOutcome | None:
        """Build an action from a menu choice and submit it."""
        try:
            action = build_action(kind, source, target)
        except ActionError as e:
            self._reject(e.error, e.message)
            return None
        return self.submit(action)

    def submit(self, action: Action) -> ActionOutcome | None:
        """Apply a player action.

        Args:
            action: Action for one of the player's cities

        Returns:
            ActionOutcome if applied, None if rejected (see ``last_error``
            and the session's status message)
        """
        self._require_player_turn()
        if action.source in self.session.acted:
            self._reject(GameError.CITY_ALREADY_ACTED, GameError.CITY_ALREADY_ACTED.describe())
            return None

        try:
            outcome = apply_action(
                self.session.grid, action, self.session.rng, actor=CityOwner.PLAYER
            )
        except ActionError as e:
            self._reject(e.error, e.message)
            return None

        self._mark_acted(action)
        self.session.status_message = outcome.message
        self.last_error = None
        self._check_victory()
        return outcome

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    def _run_computer_turn(self) -> None:
        """Ask the opponent for actions and apply them as the computer."""
        actions = self.opponent(self.session)
        logger.debug(f"Opponent chose {len(actions)} action(s) on turn {self.session.turn}")

        for action in actions:
            if self.is_over:
                break
            if action.source in self.session.acted:
                logger.warning(f"Computer city at {action.source} already acted; skipping")
                continue
            try:
                apply_action(self.session.grid, action, self.session.rng, actor=CityOwner.COMPUTER)
            except ActionError as e:
                logger.warning(f"Computer action {action} rejected: {e.message}")
                continue
            self._mark_acted(action)
            self._check_victory()

    def _mark_acted(self, action: Action) -> None:
        """Use up the acting city, and a city it founded, for this turn."""
        self.session.acted.add(action.source)
        if isinstance(action, GenerateCity):
            self.session.acted.add(action.target)

    def _check_victory(self) -> bool:
        """Move to a terminal state if a faction has been eliminated."""
        outcome = check_victory(self.session.grid)
        if outcome is None:
            return False
        self._set_state(outcome)
        return True

    def _reject(self, error: GameError, message: str) -> None:
        logger.info(f"Action rejected: {error.value}")
        self.last_error = error
        self.session.status_message = message

    def _require_player_turn(self) -> None:
        if self.state is not GameState.PLAYER_TURN:
            raise RuntimeError(f"Not the player's turn (state: {self.state.value})")

    def _set_state(self, new_state: GameState) -> None:
        old_state = self.session.state
        if old_state.is_terminal:
            raise RuntimeError(f"Game already finished ({old_state.value})")
        logger.info(f"Turn {self.session.turn}: {old_state.value} -> {new_state.value}")
        self.session.state = new_state
