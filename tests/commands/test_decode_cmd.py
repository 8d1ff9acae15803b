"""Tests for the decode and encode commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from imperium_calendar.cli import cli


@pytest.mark.usefixtures("_isolated_config")
class TestDecodeCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "3.996.636.M41"])
        assert result.exit_code == 0
        assert "code: 3.996.636.M41" in result.stdout
        assert "check_number: 3 (Indirect)" in result.stdout

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "123.M41"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "decode"
        assert data["data"]["year"] == 123
        assert data["data"]["check_number"] is None

    def test_quiet_prints_canonical_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "0.1.234.456.M35"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1.234.456.M35"

    def test_warnings_go_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "5.123.m31"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "5.123.M31"
        assert result.stderr.startswith("WARNING: ")
        assert 'prefix is "M"' in result.stderr

    def test_json_warnings_in_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "5.123.m31"])
        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["warnings"]) == 1
        assert result.stderr == ""

    def test_invalid_code_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "1.2x4.M41"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_CODE"

    def test_invalid_code_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "M4x"])
        assert result.exit_code == 1
        assert result.stderr.startswith("ERROR")

    def test_missing_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_config")
class TestEncodeCommand:
    def test_all_elements(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "encode", "-m", "41", "-y", "636", "-f", "996", "-k", "3"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "3.996.636.M41"

    def test_long_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "encode", "--millennium", "35", "--year", "1000", "--check", "5"]
        )
        assert result.stdout.strip() == "5.000.M35"

    def test_default_millennium(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode"])
        assert result.stdout.strip() == "M41"

    def test_clamped(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "encode", "-y", "5000"])
        assert json.loads(result.stdout)["data"]["year"] == 1000

    def test_fraction_without_year_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "-f", "500"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "M41"
        assert "year fraction" in result.stderr

    def test_non_integer_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["encode", "-y", "abc"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_config")
class TestChecksCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["checks"])
        assert result.exit_code == 0
        assert "Approximation" in result.stdout
        assert "Sub-Corroborated" in result.stdout

    def test_quiet_rows(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "checks"])
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 10
        assert lines[9] == "9\tApproximation"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "checks"])
        assert json.loads(result.stdout)["data"]["count"] == 10
