"""Conversion between imperial dates and proleptic Gregorian dates.

The millennium and year of an imperial date map directly onto a
Gregorian year: ``2.345.678.M37`` falls in Gregorian year 36,678. The
year fraction is converted to an hour within that year through the MAKR
constant, an empirical ratio between hours-in-year and year-fraction
count.

Conversion is lossy. A year fraction spans roughly 8.77 hours, and the
hour derived from it is floored and shifted back by one, so a Gregorian
date converted to an imperial date and back keeps its year but may move
by several hours.

Imperial dates sit far beyond the year 9999 limit of :mod:`datetime`, so
Gregorian points are held as :class:`GregorianDateTime`, which has no
upper year bound. :mod:`datetime` values are accepted and produced where
the year allows.
"""

from __future__ import annotations

import math
import re
from datetime import MAXYEAR, datetime

from pydantic import BaseModel, Field, model_validator

from imperium_calendar.domain.check_numbers import CheckNumber
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.elements import YEARS_PER_MILLENNIUM, DurationElement
from imperium_calendar.domain.types import CheckLevel, ElementKind

HOURS_PER_DAY = 24
MAKR_CONSTANT = 0.11407955

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_400_YEARS = 146_097
_DAYS_IN_100_YEARS = 36_524
_DAYS_IN_4_YEARS = 1_461

_ISO_PATTERN = re.compile(
    r"^\+?(?P<year>\d+)-(?P<month>\d{1,2})-(?P<day>\d{1,2})"
    r"(?:[T ](?P<hour>\d{1,2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?)?$"
)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_before_year(year: int) -> int:
    """Days from 0001-01-01 to the first day of *year*."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _year_and_day_from_ordinal(ordinal: int) -> tuple[int, int]:
    """Split a day ordinal (0001-01-01 is 0) into a year and 0-based day of year."""
    n400, n = divmod(ordinal, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)
    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1
    if n1 == 4 or n100 == 4:
        # Last day of a leap year.
        return year - 1, 365
    return year, n


class GregorianDateTime(BaseModel):
    """A proleptic Gregorian date and time to the second, without a time zone."""

    model_config = {"frozen": True}

    year: int = Field(ge=1)
    month: int = Field(default=1, ge=1, le=12)
    day: int = Field(default=1, ge=1, le=31)
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    @model_validator(mode="after")
    def _day_exists(self) -> GregorianDateTime:
        if self.day > days_in_month(self.year, self.month):
            msg = f"day {self.day} is out of range for {self.year:04d}-{self.month:02d}"
            raise ValueError(msg)
        return self

    @property
    def is_leap(self) -> bool:
        return is_leap_year(self.year)

    @property
    def day_of_year(self) -> int:
        """Day within the year, starting from 0 on 1 January."""
        days = sum(days_in_month(self.year, m) for m in range(1, self.month))
        return days + self.day - 1

    @property
    def hour_of_year(self) -> int:
        """Whole hours elapsed since the start of the year."""
        return self.day_of_year * HOURS_PER_DAY + self.hour

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def __str__(self) -> str:
        return self.isoformat()

    def plus_hours(self, hours: int) -> GregorianDateTime:
        """Return the point *hours* whole hours later (earlier if negative)."""
        total_hours = (
            (days_before_year(self.year) + self.day_of_year) * HOURS_PER_DAY + self.hour + hours
        )
        ordinal, hour = divmod(total_hours, HOURS_PER_DAY)
        year, day_of_year = _year_and_day_from_ordinal(ordinal)
        return self.from_day_of_year(
            year, day_of_year, hour=hour, minute=self.minute, second=self.second
        )

    # --- Construction ---

    @classmethod
    def start_of_year(cls, year: int) -> GregorianDateTime:
        return cls(year=year)

    @classmethod
    def from_day_of_year(
        cls,
        year: int,
        day_of_year: int,
        *,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> GregorianDateTime:
        month = 1
        remaining = day_of_year
        while month < 12 and remaining >= days_in_month(year, month):
            remaining -= days_in_month(year, month)
            month += 1
        return cls(
            year=year,
            month=month,
            day=remaining + 1,
            hour=hour,
            minute=minute,
            second=second,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> GregorianDateTime:
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
        )

    def to_datetime(self) -> datetime:
        """Convert to a naive :class:`datetime`; only years up to 9999 fit."""
        if self.year > MAXYEAR:
            msg = f"year {self.year} is beyond the datetime limit of {MAXYEAR}"
            raise ValueError(msg)
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    @classmethod
    def parse(cls, text: str) -> GregorianDateTime:
        """Parse ``YYYY-MM-DD`` with an optional ``THH[:MM[:SS]]`` time.

        Years may have any number of digits, e.g. ``40636-01-01T12:00``.
        """
        match = _ISO_PATTERN.match(text.strip())
        if match is None:
            msg = f"{text!r} is not a date of the form YYYY-MM-DD[THH[:MM[:SS]]]"
            raise ValueError(msg)
        fields = {key: int(value) for key, value in match.groupdict().items() if value is not None}
        return cls(**fields)


# --- Year fraction <-> hours ---


def hours_from_year_fraction(
    year_fraction: DurationElement,
    *,
    makr_constant: float = MAKR_CONSTANT,
) -> float:
    """Hours into the Gregorian year that a year fraction corresponds to."""
    return year_fraction.count / makr_constant


def year_fraction_from_hours(
    hours: float,
    *,
    makr_constant: float = MAKR_CONSTANT,
) -> DurationElement:
    """The year fraction containing the given hour of a Gregorian year.

    Examples:
        >>> year_fraction_from_hours(4816).code
        '549'
    """
    return DurationElement.from_count(ElementKind.YEAR_FRACTION, int(hours * makr_constant))


def days_from_year_fraction(
    year_fraction: DurationElement,
    *,
    makr_constant: float = MAKR_CONSTANT,
) -> float:
    """Days into the Gregorian year that a year fraction corresponds to."""
    return hours_from_year_fraction(year_fraction, makr_constant=makr_constant) / HOURS_PER_DAY


def year_fraction_from_days(
    days: float,
    *,
    makr_constant: float = MAKR_CONSTANT,
) -> DurationElement:
    """The year fraction containing the given (possibly fractional) day of a year.

    Examples:
        >>> year_fraction_from_days(200).code
        '547'
    """
    return year_fraction_from_hours(days * HOURS_PER_DAY, makr_constant=makr_constant)


# --- Dates ---


def imperial_to_gregorian(
    date: ImperialDate,
    *,
    makr_constant: float = MAKR_CONSTANT,
) -> GregorianDateTime:
    """Convert an imperial date to the start of its Gregorian hour.

    A missing year is taken as the first year of the millennium and a
    missing year fraction as the start of the year. The hour offset is
    never negative.
    """
    year_count = date.year.count if date.year is not None else 1
    gregorian_year = date.millennium.value * YEARS_PER_MILLENNIUM + year_count

    hours = 0
    if date.year_fraction is not None:
        hours = int(hours_from_year_fraction(date.year_fraction, makr_constant=makr_constant)) - 1
        # Large MAKR constants would otherwise step back into the previous year.
        hours = max(hours, 0)

    return GregorianDateTime.start_of_year(gregorian_year).plus_hours(hours)


def gregorian_to_imperial(
    point: GregorianDateTime | datetime,
    *,
    make_approximation: bool = True,
    makr_constant: float = MAKR_CONSTANT,
) -> ImperialDate:
    """Convert a Gregorian date to an imperial date.

    Dates from foreign calendars are approximations, so check number 9 is
    attached unless *make_approximation* is False.
    """
    if isinstance(point, datetime):
        point = GregorianDateTime.from_datetime(point)

    millennium_count = math.ceil(point.year / YEARS_PER_MILLENNIUM)
    year_count = point.year - (millennium_count - 1) * YEARS_PER_MILLENNIUM

    return ImperialDate(
        millennium=DurationElement.from_count(ElementKind.MILLENNIUM, millennium_count),
        year=DurationElement.from_count(ElementKind.YEAR, year_count),
        year_fraction=year_fraction_from_hours(point.hour_of_year, makr_constant=makr_constant),
        check_number=(
            CheckNumber.from_index(CheckLevel.APPROXIMATION) if make_approximation else None
        ),
    )
