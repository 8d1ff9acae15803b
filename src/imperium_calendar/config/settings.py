"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``IMPERIUM_*`` prefix
  3. TOML file    — ``imperium.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`imperium_calendar.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from imperium_calendar.config.discovery import find_config
from imperium_calendar.config.models import CodecConfig, ConvertConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``imperium.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ImperiumSettings(BaseSettings):
    """Unified settings for the imperium CLI and services.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "IMPERIUM_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    codec: CodecConfig = Field(default_factory=CodecConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> ImperiumSettings:
        """Construct settings from CLI invocation.

        Discovers ``imperium.toml`` via walk-up from *search_root* (or uses
        an explicit *config_path*) and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(search_root)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
