"""Tests for the --examples flag on commands and groups."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from imperium_calendar.cli import cli


@pytest.mark.usefixtures("_isolated_config")
@pytest.mark.parametrize(
    "args",
    [
        ["decode"],
        ["encode"],
        ["checks"],
        ["convert"],
        ["convert", "to-gregorian"],
        ["convert", "from-gregorian"],
        ["convert", "table"],
        ["duration"],
        ["duration", "of"],
        ["duration", "from"],
    ],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "imperium" in result.output
