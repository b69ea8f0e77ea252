"""Textual TUI application for Cell Wars.

This module provides the terminal user interface: a start menu for picking
the difficulty, then the grid with its cursor, details of the highlighted
cell, a status line, and the per-city action menu. All game rules live in
the engine; the app only decodes keys, forwards commands to the
TurnController and redraws.
"""

import logging

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from ..engine import TurnController, generate_map
from ..models import ActionKind, Command, Difficulty, GameSession, GameState
from .display import (
    HOW_TO_PLAY,
    HOW_TO_PLAY_OPTION,
    QUIT_OPTION,
    action_menu_labels,
    describe_cell,
    start_menu_options,
    turn_banner,
)
from .keys import INSTRUCTIONS, key_to_command
from .renderer import MapRenderer

logger = logging.getLogger(__name__)


class MapPanel(Static):
    """Widget to display the grid."""

    def __init__(self, *args, **kwargs):
        """Initialize map panel."""
        super().__init__(*args, **kwargs)
        self.renderer = MapRenderer()
        self.border_title = "Map"

    def update_map(self, session: GameSession) -> None:
        self.update(self.renderer.render(session))


class CellInfo(Static):
    """Widget describing the cell under the cursor."""

    def update_info(self, session: GameSession) -> None:
        cell = session.grid.cell_at(session.cursor)
        self.update(describe_cell(cell).replace("\t", "  "))


class StatusLine(Static):
    """Widget for the turn banner and the transient status message."""

    def update_status(self, session: GameSession, hint: str | None = None) -> None:
        lines = [f"[bold cyan]{turn_banner(session)}[/bold cyan]"]
        message = hint or session.status_message
        if message:
            lines.append(f"[yellow]{escape(message)}[/yellow]")
        self.update("\n".join(lines))


class CellWarsTUI(App):
    """Cell Wars TUI application.

    Without a controller the app opens on the start menu and generates the
    map once a difficulty is picked. ``run()`` returns the final GameState,
    or None if the player quits from the start menu.
    """

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #start_panel {
        align: center middle;
    }

    #start_title {
        width: 60;
        content-align: center middle;
        text-style: bold;
    }

    #start_menu {
        width: 60;
        height: auto;
        border: solid green;
    }

    #start_info {
        width: 60;
        height: auto;
    }

    #map_container {
        width: 36;
        border: solid green;
    }

    #side_panel {
        width: 1fr;
    }

    #cell_info {
        height: 1fr;
        border: solid blue;
    }

    #action_menu {
        height: auto;
        max-height: 10;
        border: solid cyan;
    }

    #status_line {
        height: 3;
        border: solid cyan;
    }

    #instructions {
        height: 1;
        color: black;
        background: cyan;
    }
    """

    def __init__(
        self,
        controller: TurnController | None = None,
        *args,
        seed: int | None = None,
        max_turns: int | None = None,
        **kwargs,
    ):
        """Initialize the TUI app.

        Args:
            controller: Controller driving an already generated session, or
                None to show the start menu first
            seed: Map seed used when a game is started from the menu
            max_turns: Turn limit used when a game is started from the menu
        """
        super().__init__(*args, **kwargs)
        self.controller = controller
        self.session = controller.session if controller else None
        self.seed = seed
        self.max_turns = max_turns
        self.start_panel = None
        self.start_info = None
        self.game_panel = None
        self.map_panel = None
        self.cell_info = None
        self.status_line = None
        self.action_menu = None
        self.hint: str | None = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        self.start_panel = Vertical(id="start_panel")
        with self.start_panel:
            yield Static("Welcome to Cell Wars!", id="start_title")
            start_menu = OptionList(
                *[Option(label, id=option_id) for option_id, label in start_menu_options()],
                id="start_menu",
            )
            start_menu.border_title = "Choose an option"
            yield start_menu
            self.start_info = Static("", id="start_info")
            yield self.start_info
        self.game_panel = Vertical(id="game_panel")
        with self.game_panel:
            with Horizontal():
                self.map_panel = MapPanel(id="map_container")
                yield self.map_panel
                with Vertical(id="side_panel"):
                    self.cell_info = CellInfo(id="cell_info")
                    self.cell_info.border_title = "Cell"
                    yield self.cell_info
                    self.action_menu = OptionList(id="action_menu")
                    self.action_menu.border_title = "Actions"
                    self.action_menu.display = False
                    yield self.action_menu
            self.status_line = StatusLine(id="status_line")
            yield self.status_line
            yield Static(INSTRUCTIONS, id="instructions")
        yield Footer()

    def on_mount(self) -> None:
        """Show the start menu, or start the first turn and draw."""
        self.title = "Cell Wars"
        if self.controller is None:
            self.game_panel.display = False
            start_menu = self.query_one("#start_menu", OptionList)
            start_menu.highlighted = list(Difficulty).index(Difficulty.default())
            start_menu.focus()
            return
        self.start_panel.display = False
        if self.session.state is GameState.SETUP:
            self.controller.start()
        self.draw()

    def start_game(self, difficulty: Difficulty) -> None:
        """Generate a map for the chosen difficulty and begin the first turn."""
        logger.info(f"Starting a new game on {difficulty.label}")
        self.session = generate_map(difficulty, seed=self.seed)
        self.controller = TurnController(self.session, max_turns=self.max_turns)
        self.controller.start()
        self.start_panel.display = False
        self.game_panel.display = True
        self.set_focus(None)
        self.draw()

    def choose_start_option(self, option_id: str) -> None:
        """Act on a start menu entry."""
        if option_id == HOW_TO_PLAY_OPTION:
            self.start_info.update(HOW_TO_PLAY)
        elif option_id == QUIT_OPTION:
            self.exit(None)
        else:
            self.start_game(Difficulty(option_id))

    def draw(self) -> None:
        """Refresh every panel from the session."""
        if self.session is None:
            return
        if self.map_panel:
            self.map_panel.update_map(self.session)
        if self.cell_info:
            self.cell_info.update_info(self.session)
        if self.status_line:
            self.status_line.update_status(self.session, self.hint)

    def on_key(self, event: events.Key) -> None:
        """Decode keys into commands while no menu is open."""
        if self.controller is None:
            if event.key == "escape":
                event.stop()
                self.exit(None)
            return

        if self.action_menu is not None and self.action_menu.display:
            if event.key == "escape":
                event.stop()
                self.close_menu()
            return

        if self.controller.is_over:
            event.stop()
            self.exit(self.session.state)
            return

        if event.key in ("h", "question_mark"):
            event.stop()
            self.hint = HOW_TO_PLAY
            self.draw()
            return

        command = key_to_command(event.key)
        if command is Command.NONE:
            return
        event.stop()
        self.hint = None

        kinds = self.controller.handle_command(command)
        if self.session.state is GameState.ABANDONED:
            self.exit(self.session.state)
            return
        if kinds:
            self.open_menu(kinds)
        self.draw()

    def open_menu(self, kinds: list[ActionKind]) -> None:
        """Show the action menu for the city under the cursor."""
        self.action_menu.clear_options()
        self.action_menu.add_options(
            [Option(label, id=option_id) for option_id, label in action_menu_labels(kinds)]
        )
        self.action_menu.display = True
        self.action_menu.highlighted = 0
        self.action_menu.focus()

    def close_menu(self) -> None:
        self.action_menu.display = False
        self.set_focus(None)
        self.draw()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Forward a start menu choice or the chosen city action."""
        event.stop()
        if event.option_list.id == "start_menu":
            self.choose_start_option(event.option.id)
            return
        kind = ActionKind(event.option.id)
        self.close_menu()
        self.controller.choose_action(kind)
        self.draw()

    def _handle_exception(self, error: Exception) -> None:
        """Log errors raised inside the app before Textual shuts it down."""
        logger.error(f"Unhandled error in the game UI: {error}", exc_info=error)
        super()._handle_exception(error)
