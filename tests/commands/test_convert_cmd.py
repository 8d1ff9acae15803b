"""Tests for the convert and duration command groups."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from imperium_calendar.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestToGregorianCommand:
    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "to-gregorian", "001.M1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0001-01-01T00:00:00"

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "to-gregorian", "M41"])
        assert result.exit_code == 0
        assert "gregorian: 40001-01-01T00:00:00" in result.stdout

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "to-gregorian", "x.M41"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_CODE"


@pytest.mark.usefixtures("_isolated_config")
class TestFromGregorianCommand:
    def test_default_is_approximation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "from-gregorian", "1970-01-01"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "9.001.970.M2"

    def test_exact(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "convert", "from-gregorian", "1970-01-01", "--exact"]
        )
        assert result.stdout.strip() == "001.970.M2"

    def test_approximate_overrides_config(
        self, cli_runner: CliRunner, config_root: Path
    ) -> None:
        (config_root / "imperium.toml").write_text("[convert]\nmake_approximation = false\n")
        exact = cli_runner.invoke(cli, ["-q", "convert", "from-gregorian", "1970-01-01"])
        assert exact.stdout.strip() == "001.970.M2"
        approximate = cli_runner.invoke(
            cli, ["-q", "convert", "from-gregorian", "1970-01-01", "--approximate"]
        )
        assert approximate.stdout.strip() == "9.001.970.M2"

    def test_both_flags_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["convert", "from-gregorian", "1970-01-01", "--exact", "--approximate"]
        )
        assert result.exit_code == 2
        assert "mutually exclusive" in result.stderr

    def test_invalid_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "from-gregorian", "tomorrow"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_DATE"


@pytest.mark.usefixtures("_isolated_config")
class TestTableCommand:
    def test_quiet_rows(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "convert", "table", "35"])
        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 1000
        assert lines[0] == "001.M35\t34001-01-01T00:00:00"

    def test_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "convert", "table", "0"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "OUT_OF_RANGE"


@pytest.mark.usefixtures("_isolated_config")
class TestDurationCommands:
    def test_duration_of(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "duration", "of", "001.M1"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["duration"] == 0

    def test_duration_of_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "of", "001.M1"])
        assert "duration: 0" in result.stdout

    def test_duration_from(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "from", "0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "001.001.M1"

    def test_round_trip(self, cli_runner: CliRunner) -> None:
        of = cli_runner.invoke(cli, ["--json", "duration", "of", "3.996.636.M41"])
        seconds = json.loads(of.stdout)["data"]["duration"]
        back = cli_runner.invoke(cli, ["--json", "duration", "from", str(seconds)])
        data = json.loads(back.stdout)["data"]
        assert data["millennium"] == 41
        assert data["year"] == 636

    def test_negative_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "from", "--", "-100"])
        assert result.exit_code == 0
        assert "before the start" in result.stderr
