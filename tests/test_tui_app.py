"""Tests for the Textual app, driven headless through Textual's test pilot."""

import asyncio

from cell_wars.engine import TurnController, generate_map
from cell_wars.interface import MapRenderer
from cell_wars.interface.tui_app import CellWarsTUI
from cell_wars.models import Difficulty, GameState


def run_app(app, scenario):
    """Run ``scenario(app, pilot)`` against a headless app."""

    async def runner():
        async with app.run_test() as pilot:
            await scenario(app, pilot)

    asyncio.run(runner())


class TestStartMenu:
    """The app opens on the start menu when no game was prepared."""

    def test_menu_shown_until_difficulty_chosen(self):
        app = CellWarsTUI(seed=5)

        async def scenario(app, pilot):
            assert app.controller is None
            assert app.start_panel.display
            assert not app.game_panel.display

        run_app(app, scenario)

    def test_choosing_difficulty_generates_map(self):
        app = CellWarsTUI(seed=5, max_turns=3)

        async def scenario(app, pilot):
            app.choose_start_option("hard")
            await pilot.pause()

            assert app.controller.state is GameState.PLAYER_TURN
            assert app.controller.max_turns == 3
            assert app.session.difficulty is Difficulty.HARD
            assert not app.start_panel.display
            assert app.game_panel.display

        run_app(app, scenario)

        expected = generate_map(Difficulty.HARD, seed=5)
        renderer = MapRenderer()
        assert renderer.render(app.session, markup=False) == renderer.render(
            expected, markup=False
        )

    def test_select_default_with_enter(self):
        app = CellWarsTUI(seed=5)

        async def scenario(app, pilot):
            await pilot.press("enter")
            await pilot.pause()
            assert app.session is not None
            assert app.session.difficulty is Difficulty.STANDARD

        run_app(app, scenario)

    def test_how_to_play_keeps_menu_open(self):
        app = CellWarsTUI()

        async def scenario(app, pilot):
            app.choose_start_option("how_to_play")
            await pilot.pause()
            assert app.controller is None
            assert app.start_panel.display

        run_app(app, scenario)

    def test_quit_from_menu(self):
        app = CellWarsTUI()

        async def scenario(app, pilot):
            app.choose_start_option("quit")
            await pilot.pause()

        run_app(app, scenario)
        assert app.return_value is None
        assert app.controller is None


class TestGameScreen:
    """A prepared controller skips the start menu."""

    def create_app(self):
        session = generate_map(Difficulty.EASY, seed=3)
        return CellWarsTUI(TurnController(session))

    def test_starts_first_turn_on_mount(self):
        app = self.create_app()

        async def scenario(app, pilot):
            assert app.controller.state is GameState.PLAYER_TURN
            assert app.session.turn == 1
            assert not app.start_panel.display

        run_app(app, scenario)

    def test_end_turn_key(self):
        app = self.create_app()

        async def scenario(app, pilot):
            await pilot.press("s")
            await pilot.pause()
            assert app.session.turn == 2

        run_app(app, scenario)

    def test_quit_key_abandons(self):
        app = self.create_app()

        async def scenario(app, pilot):
            await pilot.press("Q")
            await pilot.pause()

        run_app(app, scenario)
        assert app.return_value is GameState.ABANDONED
