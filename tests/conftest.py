"""Shared pytest fixtures for imperium tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from imperium_calendar.config.settings import ImperiumSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no imperium.toml above it.

    Clears ``IMPERIUM_*`` variables so the developer's environment cannot
    leak into settings.
    """
    for name in list(os.environ):
        if name.startswith("IMPERIUM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(config_root: Path) -> ImperiumSettings:
    """Default settings, as if no config file existed."""
    return ImperiumSettings.from_cli(config_path=str(config_root / "missing.toml"))


@pytest.fixture
def strict_settings(config_root: Path) -> ImperiumSettings:
    """Settings with ``[codec] warnings_as_errors = true``."""
    toml = config_root / "imperium.toml"
    toml.write_text("[codec]\nwarnings_as_errors = true\n")
    return ImperiumSettings.from_cli(config_path=str(toml))


@pytest.fixture
def _isolated_config(config_root: Path) -> None:
    """Run CLI tests from an empty directory.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command
    test classes.
    """
