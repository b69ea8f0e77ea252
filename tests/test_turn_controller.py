"""Tests for the turn state machine."""

import pytest

from cell_wars.engine import TurnController, generate_map
from cell_wars.models import (
    ActionKind,
    AttackCity,
    City,
    CityOwner,
    Command,
    Difficulty,
    GameError,
    GenerateCity,
    GameSession,
    GameState,
    GridWorld,
    Position,
    Produce,
    UpgradeAttack,
)

PLAYER_POS = Position(2, 2)
COMPUTER_POS = Position(4, 4)
WALL_POS = Position(3, 2)


def create_basic_session(player_combat=3, player_resources=4, computer_combat=1):
    """Create a session with one city per faction and a wall, in SETUP state."""
    grid = GridWorld(10)
    grid.cell_at(PLAYER_POS).city = City(
        owner=CityOwner.PLAYER,
        production_level=2,
        combat_level=player_combat,
        resources=player_resources,
    )
    grid.cell_at(COMPUTER_POS).city = City(
        owner=CityOwner.COMPUTER, production_level=1, combat_level=computer_combat, resources=0
    )
    grid.cell_at(WALL_POS).blocked = True
    return GameSession(grid=grid, difficulty=Difficulty.STANDARD, cursor=PLAYER_POS, seed=42)


def started_controller(**kwargs):
    opponent = kwargs.pop("opponent", None)
    max_turns = kwargs.pop("max_turns", None)
    session = create_basic_session(**kwargs)
    if opponent is None:
        controller = TurnController(session, max_turns=max_turns)
    else:
        controller = TurnController(session, opponent=opponent, max_turns=max_turns)
    controller.start()
    return controller


class TestLifecycle:
    """State transitions."""

    def test_start(self):
        controller = TurnController(create_basic_session())
        assert controller.state is GameState.SETUP

        controller.start()

        assert controller.state is GameState.PLAYER_TURN
        assert controller.session.turn == 1

    def test_start_twice(self):
        controller = started_controller()
        with pytest.raises(RuntimeError):
            controller.start()

    def test_start_generated_map(self):
        session = generate_map(Difficulty.EASY, seed=42)
        controller = TurnController(session)
        controller.start()
        assert controller.state is GameState.PLAYER_TURN

    def test_end_turn_returns_to_player(self):
        controller = started_controller()
        controller.end_turn()
        assert controller.state is GameState.PLAYER_TURN
        assert controller.session.turn == 2

    def test_end_turn_before_start(self):
        controller = TurnController(create_basic_session())
        with pytest.raises(RuntimeError, match="Not the player's turn"):
            controller.end_turn()

    def test_quit_abandons(self):
        controller = started_controller()
        controller.handle_command(Command.QUIT)
        assert controller.state is GameState.ABANDONED
        assert controller.is_over

    def test_terminal_state_is_sticky(self):
        controller = started_controller()
        controller.quit()

        assert controller.handle_command(Command.END_TURN) == []
        assert controller.handle_command(Command.MOVE_LEFT) == []
        controller.quit()
        assert controller.state is GameState.ABANDONED
        with pytest.raises(RuntimeError):
            controller.end_turn()

    def test_max_turns_stalemate(self):
        controller = started_controller(max_turns=2)
        controller.end_turn()
        assert controller.state is GameState.PLAYER_TURN
        controller.end_turn()
        assert controller.state is GameState.STALEMATE

    def test_invalid_max_turns(self):
        with pytest.raises(ValueError, match="Invalid max_turns"):
            TurnController(create_basic_session(), max_turns=0)


class TestCommands:
    """Cursor movement and interaction."""

    def test_move_clears_status(self):
        controller = started_controller()
        controller.session.status_message = "old news"
        controller.handle_command(Command.MOVE_RIGHT)
        assert controller.session.cursor == Position(3, 2)
        assert controller.session.status_message is None

    def test_none_command_is_ignored(self):
        controller = started_controller()
        assert controller.handle_command(Command.NONE) == []
        assert controller.session.cursor == PLAYER_POS

    def test_interact_on_wall(self):
        controller = started_controller()
        controller.session.cursor = WALL_POS
        assert controller.handle_command(Command.INTERACT) == []
        assert controller.session.status_message == "That's just a wall."

    def test_interact_on_empty_and_enemy(self):
        controller = started_controller()
        controller.session.cursor = Position(0, 0)
        controller.interact()
        assert controller.session.status_message == "Empty tile."

        controller.session.cursor = COMPUTER_POS
        controller.interact()
        assert controller.session.status_message == "Enemy city. Statistics unknown."

    def test_interact_on_own_city_offers_menu(self):
        controller = started_controller()
        kinds = controller.handle_command(Command.INTERACT)
        assert kinds == list(ActionKind)

    def test_end_turn_command(self):
        controller = started_controller()
        controller.handle_command(Command.END_TURN)
        assert controller.session.turn == 2


class TestActions:
    """Submitting actions during the player's turn."""

    def test_submit_produce(self):
        controller = started_controller()
        outcome = controller.submit(Produce(PLAYER_POS))
        assert outcome is not None
        assert controller.session.grid.city_at(PLAYER_POS).resources == 5
        assert controller.session.status_message == outcome.message
        assert controller.last_error is None

    def test_rejected_action_sets_status(self):
        controller = started_controller()
        assert controller.submit(UpgradeAttack(PLAYER_POS)) is None
        assert controller.last_error is GameError.NOT_ENOUGH_RESOURCES
        assert controller.session.status_message
        assert controller.state is GameState.PLAYER_TURN

    def test_rejected_action_does_not_use_up_city(self):
        controller = started_controller()
        controller.submit(UpgradeAttack(PLAYER_POS))
        assert controller.submit(Produce(PLAYER_POS)) is not None

    def test_no_city_at_source(self):
        controller = started_controller()
        assert controller.submit(Produce(Position(0, 0))) is None
        assert controller.last_error is GameError.NO_CITY_AT_SOURCE

    def test_one_action_per_city_per_turn(self):
        controller = started_controller()
        controller.submit(Produce(PLAYER_POS))
        assert controller.submit(Produce(PLAYER_POS)) is None
        assert controller.last_error is GameError.CITY_ALREADY_ACTED
        assert controller.session.grid.city_at(PLAYER_POS).resources == 5

        controller.end_turn()
        assert controller.submit(Produce(PLAYER_POS)) is not None
        assert controller.session.grid.city_at(PLAYER_POS).resources == 6

    def test_founded_city_waits_for_next_turn(self):
        """A city founded this turn cannot act until the next one."""
        controller = started_controller(player_resources=20)
        new_city = Position(1, 1)
        assert controller.submit(GenerateCity(PLAYER_POS, new_city)) is not None

        assert controller.submit(Produce(new_city)) is None
        assert controller.last_error is GameError.CITY_ALREADY_ACTED
        assert controller.session.grid.city_at(new_city).resources == 0

        controller.end_turn()
        assert controller.submit(Produce(new_city)) is not None

    def test_computer_founded_city_waits_for_next_turn(self):
        def expander(session):
            return [GenerateCity(COMPUTER_POS, Position(5, 5)), Produce(Position(5, 5))]

        session = create_basic_session()
        session.grid.city_at(COMPUTER_POS).resources = 20
        controller = TurnController(session, opponent=expander)
        controller.start()
        controller.end_turn()

        assert controller.session.grid.city_at(Position(5, 5)).owner is CityOwner.COMPUTER
        assert controller.session.grid.city_at(Position(5, 5)).resources == 0

    def test_interact_after_acting(self):
        controller = started_controller()
        controller.submit(Produce(PLAYER_POS))
        assert controller.interact() == []
        assert controller.last_error is GameError.CITY_ALREADY_ACTED

    def test_choose_targetless_action(self):
        controller = started_controller()
        outcome = controller.choose_action(ActionKind.PRODUCE)
        assert outcome is not None
        assert controller.session.grid.city_at(PLAYER_POS).resources == 5

    def test_choose_targeted_action_then_pick_target(self):
        controller = started_controller(player_resources=12)
        assert controller.choose_action(ActionKind.DESTROY_WALL) is None
        assert controller.pending_kind is ActionKind.DESTROY_WALL

        controller.handle_command(Command.MOVE_RIGHT)
        controller.handle_command(Command.INTERACT)

        assert controller.pending_kind is None
        assert controller.session.grid.cell_at(WALL_POS).is_empty
        assert controller.session.grid.city_at(PLAYER_POS).resources == 2

    def test_targeting_the_source_is_rejected(self):
        controller = started_controller()
        controller.choose_action(ActionKind.GENERATE_CITY)
        controller.interact()
        assert controller.last_error is GameError.TARGET_IS_SOURCE
        assert controller.pending_kind is None

    def test_end_turn_cancels_pending(self):
        controller = started_controller()
        controller.choose_action(ActionKind.ATTACK_CITY)
        controller.end_turn()
        assert controller.pending_kind is None


class TestVictory:
    """Win detection wired into the turn loop."""

    def test_player_wins_by_destroying_last_enemy_city(self):
        controller = started_controller(player_combat=20)
        outcome = controller.submit(AttackCity(PLAYER_POS, COMPUTER_POS))
        assert outcome.attack.attacker_won
        assert controller.state is GameState.PLAYER_WON
        with pytest.raises(RuntimeError):
            controller.submit(Produce(PLAYER_POS))

    def test_computer_wins_through_opponent(self):
        def aggressive(session):
            return [AttackCity(COMPUTER_POS, PLAYER_POS)]

        controller = started_controller(player_combat=1, computer_combat=20, opponent=aggressive)
        controller.end_turn()
        assert controller.state is GameState.COMPUTER_WON

    def test_victory_beats_turn_limit(self):
        def aggressive(session):
            return [AttackCity(COMPUTER_POS, PLAYER_POS)]

        controller = started_controller(
            player_combat=1, computer_combat=20, opponent=aggressive, max_turns=1
        )
        controller.end_turn()
        assert controller.state is GameState.COMPUTER_WON


class TestOpponent:
    """The injected computer opponent."""

    def test_idle_opponent_keeps_game_alive(self):
        controller = started_controller()
        for _ in range(5):
            controller.end_turn()
        assert controller.state is GameState.PLAYER_TURN
        assert controller.session.turn == 6

    def test_opponent_actions_applied_as_computer(self):
        seen = []

        def producer(session):
            seen.append(session.state)
            return [Produce(COMPUTER_POS)]

        controller = started_controller(opponent=producer)
        controller.end_turn()

        assert seen == [GameState.COMPUTER_TURN]
        assert controller.session.grid.city_at(COMPUTER_POS).resources == 1

    def test_invalid_opponent_actions_are_skipped(self):
        def cheater(session):
            return [
                Produce(PLAYER_POS),  # not its city
                Produce(COMPUTER_POS),
                Produce(COMPUTER_POS),  # already acted
            ]

        controller = started_controller(opponent=cheater)
        controller.end_turn()

        assert controller.state is GameState.PLAYER_TURN
        assert controller.session.grid.city_at(PLAYER_POS).resources == 4
        assert controller.session.grid.city_at(COMPUTER_POS).resources == 1

    def test_player_cities_can_act_after_computer_turn(self):
        def producer(session):
            return [Produce(COMPUTER_POS)]

        controller = started_controller(opponent=producer)
        controller.submit(Produce(PLAYER_POS))
        controller.end_turn()
        assert controller.session.acted == set()
        assert controller.submit(Produce(PLAYER_POS)) is not None
