"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, imperium.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from imperium_calendar.domain.gregorian import MAKR_CONSTANT

# --- imperium.toml sections ---


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    warnings_as_errors: bool = False


class ConvertConfig(BaseModel):
    """[convert] section."""

    model_config = {"frozen": True}

    make_approximation: bool = True
    makr_constant: float = Field(default=MAKR_CONSTANT, gt=0)


class ImperiumConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    codec: CodecConfig = Field(default_factory=CodecConfig)
    convert: ConvertConfig = Field(default_factory=ConvertConfig)
