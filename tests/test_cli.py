"""Tests for argument parsing in wsnake.cli."""

import pytest

from wsnake.cli import build_parser, config_from_args, main


def test_defaults_follow_config():
    args = build_parser().parse_args([])
    config = config_from_args(args)
    assert config.grid_size == 20
    assert config.tick_ms == 115
    assert config.food_strategy == "rejection"
    assert args.mute is False
    assert args.log_level == "WARNING"


def test_flags_override_environment(monkeypatch):
    monkeypatch.setenv("WSNAKE_TICK_MS", "80")
    monkeypatch.setenv("WSNAKE_SEED", "1")
    args = build_parser().parse_args(
        ["--tick-ms", "150", "--food-strategy", "exact", "--log-level", "debug"]
    )

    config = config_from_args(args)

    assert config.tick_ms == 150
    assert config.seed == 1
    assert config.food_strategy == "exact"
    assert args.log_level == "DEBUG"


def test_unknown_strategy_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--food-strategy", "nearest"])


def test_invalid_config_exits_before_opening_window():
    with pytest.raises(SystemExit) as excinfo:
        main(["--grid-size", "1"])
    assert excinfo.value.code == 2


def test_bad_log_level_from_environment_exits_cleanly(monkeypatch):
    monkeypatch.setenv("WSNAKE_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as excinfo:
        main(["--grid-size", "1"])
    assert excinfo.value.code == 2


def test_oversized_grid_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--grid-size", "200"])
    assert excinfo.value.code == 2
