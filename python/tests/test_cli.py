"""Command-line entry point."""

from __future__ import annotations

from typer.testing import CliRunner

import main

runner = CliRunner()


def test_show_prints_rules_and_solution() -> None:
    result = runner.invoke(main.app, ["--show", "-n", "3", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Start:" in result.output
    assert "Solution:" in result.output


def test_seed_from_environment_is_reproducible() -> None:
    first = runner.invoke(main.app, ["--show"], env={"SORTLE_SEED": "9"})
    second = runner.invoke(main.app, ["--show"], env={"SORTLE_SEED": "9"})
    assert first.exit_code == 0, first.output
    assert first.output == second.output


def test_tile_count_is_bounded() -> None:
    result = runner.invoke(main.app, ["--show", "-n", "9"])
    assert result.exit_code != 0
