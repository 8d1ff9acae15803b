"""ImperialDate — a complete date and its duration arithmetic.

A date is a mandatory millennium plus an optional year, year fraction,
and check number. Its code form is e.g. ``3.996.636.M41``: check number,
year fraction, year, millennium.

INVARIANT: the year fraction only appears in the code when the year is
also present. A lone year fraction reads exactly like a year, so it is
left out of the code, though it is still held and still counts towards
the duration.
"""

from __future__ import annotations

import math
from fractions import Fraction

from pydantic import BaseModel, Field, field_validator

from imperium_calendar.domain.check_numbers import CheckNumber
from imperium_calendar.domain.elements import (
    DEFAULT_MILLENNIUM_COUNT,
    ELEMENT_SPECS,
    FRACTIONS_PER_YEAR,
    YEARS_PER_MILLENNIUM,
    DurationElement,
)
from imperium_calendar.domain.types import ElementKind

# Digits kept when splitting a duration into years. Durations are whole
# seconds and can fall just short of a year boundary.
_YEAR_ROUNDING_DIGITS = 5


def _require_kind(element: DurationElement | None, kind: ElementKind) -> DurationElement | None:
    if element is not None and element.kind != kind:
        msg = f"expected a {kind} element, got {element.kind}"
        raise ValueError(msg)
    return element


class ImperialDate(BaseModel):
    """A date in the imperial calendar."""

    model_config = {"frozen": True}

    millennium: DurationElement = Field(
        default_factory=lambda: DurationElement.from_count(
            ElementKind.MILLENNIUM, DEFAULT_MILLENNIUM_COUNT
        )
    )
    year: DurationElement | None = None
    year_fraction: DurationElement | None = None
    check_number: CheckNumber | None = None

    @field_validator("millennium")
    @classmethod
    def _millennium_kind(cls, element: DurationElement) -> DurationElement:
        _require_kind(element, ElementKind.MILLENNIUM)
        return element

    @field_validator("year")
    @classmethod
    def _year_kind(cls, element: DurationElement | None) -> DurationElement | None:
        return _require_kind(element, ElementKind.YEAR)

    @field_validator("year_fraction")
    @classmethod
    def _year_fraction_kind(cls, element: DurationElement | None) -> DurationElement | None:
        return _require_kind(element, ElementKind.YEAR_FRACTION)

    # --- Code form ---

    @property
    def includes_year_fraction_in_code(self) -> bool:
        return self.year is not None and self.year_fraction is not None

    @property
    def codifiable(self) -> list[DurationElement | CheckNumber]:
        """Elements that appear in the code, most significant first."""
        elements: list[DurationElement | CheckNumber] = [self.millennium]
        if self.year is not None:
            elements.append(self.year)
        if self.includes_year_fraction_in_code and self.year_fraction is not None:
            elements.append(self.year_fraction)
        if self.check_number is not None:
            elements.append(self.check_number)
        return elements

    @property
    def code(self) -> str:
        from imperium_calendar.domain.codes import encode_date

        return encode_date(self)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_code(cls, code: str, *, warnings: list[str] | None = None) -> ImperialDate:
        from imperium_calendar.domain.codes import decode_date

        return decode_date(code, warnings=warnings)

    # --- Duration ---

    @property
    def duration(self) -> int:
        """Seconds from the start of the calendar, summed over the elements."""
        total = self.millennium.duration
        for element in (self.year, self.year_fraction):
            if element is not None:
                total += element.duration
        return total

    @classmethod
    def from_duration(cls, duration: float | Fraction) -> ImperialDate:
        """Split *duration* seconds into a millennium, year, and year fraction.

        Always yields a year and a year fraction, and never a check number,
        whatever the date that produced the duration held.
        """
        millennia = Fraction(duration) / ELEMENT_SPECS[ElementKind.MILLENNIUM].unit
        whole_millennia = math.floor(millennia)

        years = round((millennia - whole_millennia) * YEARS_PER_MILLENNIUM, _YEAR_ROUNDING_DIGITS)
        whole_years = math.floor(years)

        fractions = (years - whole_years) * FRACTIONS_PER_YEAR

        return cls(
            millennium=DurationElement.from_value(ElementKind.MILLENNIUM, whole_millennia),
            year=DurationElement.from_value(ElementKind.YEAR, whole_years),
            year_fraction=DurationElement.from_value(
                ElementKind.YEAR_FRACTION, math.floor(fractions)
            ),
        )

    # --- Numbers ---

    @classmethod
    def from_numbers(
        cls,
        millennium: int = DEFAULT_MILLENNIUM_COUNT,
        year: int | None = None,
        year_fraction: int | None = None,
        check_number: int | None = None,
    ) -> ImperialDate:
        """Build a date from element counts and a check-number index.

        ``None`` leaves the matching optional element out.
        """
        return cls(
            millennium=DurationElement.from_count(ElementKind.MILLENNIUM, millennium),
            year=None if year is None else DurationElement.from_count(ElementKind.YEAR, year),
            year_fraction=(
                None
                if year_fraction is None
                else DurationElement.from_count(ElementKind.YEAR_FRACTION, year_fraction)
            ),
            check_number=None if check_number is None else CheckNumber.from_index(check_number),
        )
