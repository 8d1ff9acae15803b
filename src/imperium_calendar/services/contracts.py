"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``year`` vs ``year_count``)
fail fast in tests and during development.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class DatePayload(BaseModel):
    """An imperial date flattened to element counts.

    ``year_fraction`` is reported even when it is left out of ``code``.
    """

    model_config = ConfigDict(extra="allow")

    code: str
    millennium: int = Field(ge=1)
    year: int | None = Field(default=None, ge=1, le=1000)
    year_fraction: int | None = Field(default=None, ge=1, le=1000)
    check_number: int | None = Field(default=None, ge=0, le=9)
    check_description: str | None = None
    duration: int


class CheckNumberItem(BaseModel):
    """One row of the check-number table."""

    index: int
    description: str


class CheckNumbersResultData(BaseModel):
    """Payload contract for ``CodecService.check_numbers``."""

    count: int
    items: list[CheckNumberItem]


class GregorianResultData(BaseModel):
    """Payload contract for ``ConvertService.to_gregorian``."""

    code: str
    gregorian: str
    year: int
    day_of_year: int
    hour: int


class TableItem(BaseModel):
    """One imperial date and its Gregorian equivalent."""

    code: str
    gregorian: str


class MillenniumTableResultData(BaseModel):
    """Payload contract for ``ConvertService.millennium_table``."""

    millennium: int
    count: int
    items: list[TableItem]
