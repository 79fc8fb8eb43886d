"""Tests for the CLI, config, and logging helpers.

Output is captured with capsys; colours are disabled so assertions can
match plain text.
"""

import pytest

from tilegrid import cli
from tilegrid.config import Config
from tilegrid.logging_utils import Color, colored, log_debug


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv("TILEGRID_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    monkeypatch.setattr(Config, "NO_COLOR", True)
    monkeypatch.setattr(Config, "DIAGONAL_MOVEMENT", False)


def test_colored_respects_no_color(monkeypatch):
    assert colored("hi", Color.BLUE) == "hi"

    monkeypatch.delenv("TILEGRID_NO_COLOR")
    monkeypatch.setattr(Config, "NO_COLOR", False)
    assert colored("hi", Color.BLUE, bold=True) == f"{Color.BOLD.value}{Color.BLUE.value}hi{Color.RESET.value}"


def test_colored_follows_config_not_raw_env(monkeypatch):
    # Env var alone does nothing until Config.reload() picks it up
    monkeypatch.setattr(Config, "NO_COLOR", False)
    assert colored("hi", Color.CYAN) == f"{Color.CYAN.value}hi{Color.RESET.value}"

    Config.reload()
    assert Config.NO_COLOR is True
    assert colored("hi", Color.CYAN) == "hi"


def test_log_debug_only_at_debug_level(capsys, monkeypatch):
    log_debug("hidden")
    assert capsys.readouterr().out == ""

    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
    log_debug("shown")
    assert "[d] shown" in capsys.readouterr().out


def test_config_validate_and_reload(monkeypatch):
    monkeypatch.setenv("TILEGRID_LOG_LEVEL", "verbose")
    monkeypatch.setenv("TILEGRID_DIAGONAL_MOVEMENT", "yes")
    Config.reload()
    try:
        assert Config.DIAGONAL_MOVEMENT is True
        with pytest.raises(ValueError):
            Config.validate()
    finally:
        monkeypatch.delenv("TILEGRID_LOG_LEVEL")
        monkeypatch.delenv("TILEGRID_DIAGONAL_MOVEMENT")
        Config.reload()

    Config.validate()
    assert "Log Level: INFO" in Config.display()


def test_distance_command(capsys):
    assert cli.main(["distance", "0", "0", "3", "4", "--no-diagonal"]) == 0
    out = capsys.readouterr().out
    assert "[•] tile moves: 7" in out
    assert "[•] euclidean: 5" in out

    assert cli.main(["distance", "0", "0", "3", "4", "--diagonal"]) == 0
    assert "tile moves: 4" in capsys.readouterr().out


def test_directions_command_draws_compass(capsys):
    assert cli.main(["directions", "--diagonals"]) == 0
    out = capsys.readouterr().out
    assert "8 directions" in out
    assert "up_left" in out
    assert "↖ ↑ ↗\n← @ →\n↙ ↓ ↘" in out


def test_render_compass_orthogonal_only():
    assert cli.render_compass(("up", "right", "down", "left")) == "  ↑  \n← @ →\n  ↓  "


def test_offset_command_with_origin(capsys):
    assert cli.main(["offset", "down_right", "--from", "2", "2"]) == 0
    out = capsys.readouterr().out
    assert "down_right: x=+1 y=+1" in out
    assert "(2, 2) -> (3, 3)" in out


def test_unknown_direction_exits_with_error(capsys):
    assert cli.main(["offset", "north"]) == 2
    out = capsys.readouterr().out
    assert "[!] Unknown direction 'north'" in out


def test_config_command(capsys):
    assert cli.main(["config"]) == 0
    assert "tilegrid Configuration:" in capsys.readouterr().out
