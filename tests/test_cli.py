"""Tests for the command-line entry point."""

import logging

import pytest

from cell_wars import cli
from cell_wars.engine import TurnController
from cell_wars.interface.tui_app import CellWarsTUI


@pytest.fixture
def headless(monkeypatch):
    """Run the app without a real terminal."""
    original_run = CellWarsTUI.run

    def headless_run(self, *args, **kwargs):
        kwargs["headless"] = True
        return original_run(self, *args, **kwargs)

    monkeypatch.setattr(CellWarsTUI, "run", headless_run)


@pytest.fixture
def release_log_file():
    """Detach the file handler main() installs on the root logger."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


class TestParseArgs:
    def test_defaults(self):
        args = cli.parse_args([])
        assert args.difficulty is None
        assert args.seed is None
        assert args.max_turns is None
        assert args.log_file == "cell_wars.log"
        assert not args.debug

    def test_all_options(self):
        args = cli.parse_args(
            ["--difficulty", "hard", "--seed", "7", "--max-turns", "20", "--debug"]
        )
        assert args.difficulty == "hard"
        assert args.seed == 7
        assert args.max_turns == 20
        assert args.debug

    def test_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            cli.parse_args(["--difficulty", "impossible"])


def test_crash_inside_app_is_logged_and_fails(tmp_path, monkeypatch, headless, release_log_file):
    """An error raised inside the app exits with status 1 and lands in the log."""

    def broken_start(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(TurnController, "start", broken_start)
    log_file = tmp_path / "crash.log"

    rc = cli.main(["--difficulty", "standard", "--seed", "1", "--log-file", str(log_file)])

    assert rc == 1
    log_text = log_file.read_text()
    assert "RuntimeError: boom" in log_text
    assert "[ERROR]" in log_text
