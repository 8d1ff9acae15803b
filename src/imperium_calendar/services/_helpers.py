"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any

from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.elements import DurationElement
from imperium_calendar.services.contracts import DatePayload, dump_validated


def _count(element: DurationElement | None) -> int | None:
    return None if element is None else element.count


def date_payload(date: ImperialDate) -> dict[str, Any]:
    """Flatten an :class:`ImperialDate` into the validated date payload.

    Examples:
        >>> date_payload(ImperialDate.from_numbers(41, 636))["code"]
        '636.M41'
    """
    check = date.check_number
    return dump_validated(
        DatePayload,
        {
            "code": date.code,
            "millennium": date.millennium.count,
            "year": _count(date.year),
            "year_fraction": _count(date.year_fraction),
            "check_number": None if check is None else check.index,
            "check_description": None if check is None else check.description,
            "duration": date.duration,
        },
    )
