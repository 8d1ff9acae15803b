"""Tests for ImperiumSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from imperium_calendar.config.settings import ImperiumSettings
from imperium_calendar.domain.gregorian import MAKR_CONSTANT


class TestDefaults:
    def test_all_defaults(self, config_root: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.codec.warnings_as_errors is False
        assert settings.convert.make_approximation is True
        assert settings.convert.makr_constant == MAKR_CONSTANT

    def test_frozen(self, settings: ImperiumSettings) -> None:
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_discovered_by_walk_up(self, config_root: Path) -> None:
        toml = config_root / "imperium.toml"
        toml.write_text("[codec]\nwarnings_as_errors = true\n")
        child = config_root / "sub" / "deep"
        child.mkdir(parents=True)
        settings = ImperiumSettings.from_cli(search_root=child)
        assert settings.codec.warnings_as_errors is True
        assert settings.config_path == toml

    def test_sparse_override(self, config_root: Path) -> None:
        """Only overridden fields change — rest keeps defaults."""
        (config_root / "imperium.toml").write_text("[convert]\nmakr_constant = 0.5\n")
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.convert.makr_constant == 0.5
        assert settings.convert.make_approximation is True

    def test_explicit_config_path(self, config_root: Path) -> None:
        custom = config_root / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[convert]\nmake_approximation = false\n")
        settings = ImperiumSettings.from_cli(config_path=str(custom))
        assert settings.convert.make_approximation is False
        assert settings.config_path == custom

    def test_config_path_is_the_only_toml_record(self, config_root: Path) -> None:
        (config_root / "imperium.toml").write_text("[codec]\nwarnings_as_errors = true\n")
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.config_path == (config_root / "imperium.toml").resolve()
        assert not hasattr(ImperiumSettings, "_toml_path")

    def test_explicit_missing_path_uses_defaults(self, config_root: Path) -> None:
        (config_root / "imperium.toml").write_text("[codec]\nwarnings_as_errors = true\n")
        settings = ImperiumSettings.from_cli(config_path=str(config_root / "missing.toml"))
        assert settings.config_path is None
        assert settings.codec.warnings_as_errors is False

    def test_invalid_toml(self, config_root: Path) -> None:
        (config_root / "imperium.toml").write_text("[codec\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ImperiumSettings.from_cli(search_root=config_root)


class TestCliFlags:
    def test_cli_flags_override(self, config_root: Path) -> None:
        settings = ImperiumSettings.from_cli(
            search_root=config_root,
            json_output=True,
            quiet=True,
            verbose=True,
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, config_root: Path) -> None:
        """CLI flags take priority over TOML values."""
        (config_root / "imperium.toml").write_text("quiet = true\n")
        settings = ImperiumSettings.from_cli(search_root=config_root, quiet=False)
        assert settings.quiet is False


class TestEnvVars:
    def test_env_var_override(self, config_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMPERIUM_QUIET", "true")
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.quiet is True

    def test_nested_env_var_override(
        self, config_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("IMPERIUM_CODEC__WARNINGS_AS_ERRORS", "true")
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.codec.warnings_as_errors is True

    def test_env_beats_toml(self, config_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (config_root / "imperium.toml").write_text("[convert]\nmakr_constant = 0.5\n")
        monkeypatch.setenv("IMPERIUM_CONVERT__MAKR_CONSTANT", "0.25")
        settings = ImperiumSettings.from_cli(search_root=config_root)
        assert settings.convert.makr_constant == 0.25
