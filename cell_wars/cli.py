"""Command-line entry point for Cell Wars."""

import argparse
import logging

from .engine import TurnController, generate_map
from .interface.display import OUTCOME_MESSAGES
from .interface.tui_app import CellWarsTUI
from .models import Difficulty

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="cell-wars",
        description="Cell Wars - Turn-based Territory Control Game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Pick a difficulty from the start menu
  %(prog)s --difficulty hard --seed 42      # Skip the menu, reproducible hard map
  %(prog)s --max-turns 50                   # Declare a stalemate after 50 turns
  %(prog)s --debug --log-file debug.log     # Verbose engine logging
        """,
    )

    parser.add_argument(
        "--difficulty",
        choices=[tier.value for tier in Difficulty],
        default=None,
        help="Difficulty tier; skips the start menu (default: choose in the menu)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for map generation and combat (default: random)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="End in a stalemate after this many turns (default: no limit)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="cell_wars.log",
        metavar="FILE",
        help="Log file (the terminal is owned by the game UI; default: cell_wars.log)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Process exit status: 0 after a normal exit, 1 if the game crashed
    """
    args = parse_args(argv)

    # The TUI owns stdout, so log to a file
    log_level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.FileHandler(args.log_file, mode="w")],
        force=True,
    )

    controller = None
    if args.difficulty is not None:
        session = generate_map(Difficulty.from_name(args.difficulty), seed=args.seed)
        controller = TurnController(session, max_turns=args.max_turns)

    app = CellWarsTUI(controller, seed=args.seed, max_turns=args.max_turns)
    try:
        final_state = app.run(mouse=False)
    except Exception:
        logger.error("Game crashed", exc_info=True)
        print(f"Oops. The game crashed; details were written to {args.log_file}.")
        return 1

    # Errors inside the app are handled by Textual and only show up here
    if app.return_code:
        logger.error(f"Game UI exited with return code {app.return_code}")
        print(f"Oops. The game crashed; details were written to {args.log_file}.")
        return 1

    print(OUTCOME_MESSAGES.get(final_state, "Goodbye."))
    return 0
