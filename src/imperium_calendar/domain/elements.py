"""Duration-bearing date elements: millennium, year, and year fraction.

Each element stores a single ``count`` (1-based, as printed in a code).
The other views are derived from it:

- ``value``: the floored, 0-based form (``count - 1``) used in arithmetic.
  The 41st millennium runs from year 40,001 to 41,000, so its value is 40.
- ``duration``: ``value`` multiplied by the kind's unit, in whole seconds.
  Units are exact fractions, so durations of arbitrarily large
  millennia are exact integers.

The three kinds share one model and differ only in their ``ElementSpec``
(unit, bounds, and code width).

INVARIANT: ``count`` is clamped to the kind's bounds on every construction,
including the ``with_*`` replacements.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from pydantic import BaseModel, ValidationInfo, field_validator

from imperium_calendar.domain.types import ElementKind

GREGORIAN_YEAR_DAYS = Fraction("365.2425")
SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_GREGORIAN_YEAR = GREGORIAN_YEAR_DAYS * SECONDS_PER_DAY

YEARS_PER_MILLENNIUM = 1000
FRACTIONS_PER_YEAR = 1000

DEFAULT_MILLENNIUM_COUNT = 41


@dataclass(frozen=True)
class ElementSpec:
    """Constants that parameterise one kind of duration element."""

    kind: ElementKind
    unit: Fraction  # seconds per unit of value
    minimum: int
    maximum: int | None
    code_width: int | None = None


ELEMENT_SPECS: dict[ElementKind, ElementSpec] = {
    ElementKind.MILLENNIUM: ElementSpec(
        kind=ElementKind.MILLENNIUM,
        unit=YEARS_PER_MILLENNIUM * SECONDS_PER_GREGORIAN_YEAR,
        minimum=1,
        maximum=None,
    ),
    ElementKind.YEAR: ElementSpec(
        kind=ElementKind.YEAR,
        unit=SECONDS_PER_GREGORIAN_YEAR,
        minimum=1,
        maximum=YEARS_PER_MILLENNIUM,
        code_width=3,
    ),
    ElementKind.YEAR_FRACTION: ElementSpec(
        kind=ElementKind.YEAR_FRACTION,
        unit=SECONDS_PER_GREGORIAN_YEAR / FRACTIONS_PER_YEAR,
        minimum=1,
        maximum=FRACTIONS_PER_YEAR,
        code_width=3,
    ),
}


def clamp(value: int, minimum: int | None = None, maximum: int | None = None) -> int:
    """Clamp *value* into ``[minimum, maximum]``; a ``None`` bound is open.

    Examples:
        >>> clamp(1001, 1, 1000)
        1000
        >>> clamp(-3, 1)
        1
        >>> clamp(7)
        7
    """
    if minimum is not None and value < minimum:
        return minimum
    if maximum is not None and value > maximum:
        return maximum
    return value


class DurationElement(BaseModel):
    """A millennium, year, or year fraction of an imperial date."""

    model_config = {"frozen": True}

    kind: ElementKind
    count: int

    @field_validator("kind")
    @classmethod
    def _duration_kind(cls, kind: ElementKind) -> ElementKind:
        if kind not in ELEMENT_SPECS:
            msg = f"{kind} is not a duration element"
            raise ValueError(msg)
        return kind

    @field_validator("count")
    @classmethod
    def _clamp_count(cls, count: int, info: ValidationInfo) -> int:
        kind = info.data.get("kind")
        if kind is None:
            return count
        spec = ELEMENT_SPECS[kind]
        return clamp(count, spec.minimum, spec.maximum)

    # --- Derived views ---

    @property
    def spec(self) -> ElementSpec:
        return ELEMENT_SPECS[self.kind]

    @property
    def value(self) -> int:
        """The floored, 0-based magnitude."""
        return self.count - 1

    @property
    def duration(self) -> int:
        """Whole seconds represented by this element from the calendar epoch."""
        return int(self.value * self.spec.unit)

    @property
    def number(self) -> int:
        """The number printed in the element's code, i.e. its count."""
        return self.count

    @property
    def code(self) -> str:
        from imperium_calendar.domain.codes import encode_element

        return encode_element(self)

    def __str__(self) -> str:
        return self.code

    # --- Construction ---

    @classmethod
    def from_count(cls, kind: ElementKind, count: int) -> DurationElement:
        return cls(kind=kind, count=int(count))

    @classmethod
    def from_value(cls, kind: ElementKind, value: int) -> DurationElement:
        return cls(kind=kind, count=int(value) + 1)

    @classmethod
    def from_duration(cls, kind: ElementKind, duration: float | Fraction) -> DurationElement:
        """Build the element holding the whole units contained in *duration* seconds."""
        value = math.floor(Fraction(duration) / ELEMENT_SPECS[kind].unit)
        return cls.from_value(kind, value)

    def with_count(self, count: int) -> DurationElement:
        return self.from_count(self.kind, count)

    def with_value(self, value: int) -> DurationElement:
        return self.from_value(self.kind, value)

    def with_duration(self, duration: float | Fraction) -> DurationElement:
        return self.from_duration(self.kind, duration)


def millennium(count: int = DEFAULT_MILLENNIUM_COUNT) -> DurationElement:
    """A millennium element, e.g. ``millennium(41)`` for ``M41``."""
    return DurationElement.from_count(ElementKind.MILLENNIUM, count)


def year(count: int) -> DurationElement:
    """A year-within-millennium element (1 to 1,000)."""
    return DurationElement.from_count(ElementKind.YEAR, count)


def year_fraction(count: int) -> DurationElement:
    """A year-fraction element, in thousandths of a year (1 to 1,000)."""
    return DurationElement.from_count(ElementKind.YEAR_FRACTION, count)
