"""DurationService — dates as seconds from the start of the calendar."""

from __future__ import annotations

import structlog

from imperium_calendar.domain.codes import decode_date
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.errors import InvalidCodeError
from imperium_calendar.services._helpers import date_payload
from imperium_calendar.services.base import BaseService
from imperium_calendar.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class DurationService(BaseService):
    """Convert between date codes and durations in seconds."""

    def to_duration(self, code: str) -> ServiceResult:
        """Total seconds represented by the date *code*."""
        warnings: list[str] = []
        try:
            date = decode_date(code, warnings=warnings)
        except InvalidCodeError as exc:
            return self._invalid_code("to_duration", exc, warnings, code=code)

        logger.debug("duration.computed", code=date.code, duration=date.duration)
        return self._success("to_duration", date_payload(date), warnings)

    def from_duration(self, seconds: int) -> ServiceResult:
        """Split *seconds* into a millennium, year, and year fraction.

        The result always has a year and year fraction and never a check
        number.
        """
        warnings: list[str] = []
        if seconds < 0:
            warnings.append(
                f"The duration {seconds} is before the start of the calendar;"
                " element counts are clamped"
            )

        try:
            date = ImperialDate.from_duration(seconds)
            data = date_payload(date)
        except ValueError as exc:
            # Counts too long to render as a code
            return self._failure("from_duration", "OUT_OF_RANGE", str(exc), warnings)
        data["seconds"] = seconds
        logger.debug("duration.decomposed", seconds=seconds, code=date.code)
        return self._success("from_duration", data, warnings)
