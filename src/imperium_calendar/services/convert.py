"""ConvertService — imperial dates to and from Gregorian dates.

Conversion parameters (the MAKR constant and whether converted dates
are marked as approximations) come from the ``[convert]`` section of
the settings.
"""

from __future__ import annotations

import structlog

from imperium_calendar.domain.codes import decode_date
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.elements import YEARS_PER_MILLENNIUM
from imperium_calendar.domain.errors import InvalidCodeError
from imperium_calendar.domain.gregorian import (
    GregorianDateTime,
    gregorian_to_imperial,
    imperial_to_gregorian,
)
from imperium_calendar.services._helpers import date_payload
from imperium_calendar.services.base import BaseService
from imperium_calendar.services.contracts import (
    GregorianResultData,
    MillenniumTableResultData,
    dump_validated,
)
from imperium_calendar.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class ConvertService(BaseService):
    """Convert between imperial date codes and Gregorian dates."""

    def to_gregorian(self, code: str) -> ServiceResult:
        """Convert the date *code* to an ISO 8601 Gregorian date and time."""
        warnings: list[str] = []
        try:
            date = decode_date(code, warnings=warnings)
        except InvalidCodeError as exc:
            return self._invalid_code("to_gregorian", exc, warnings, code=code)

        point = imperial_to_gregorian(date, makr_constant=self._settings.convert.makr_constant)
        data = dump_validated(
            GregorianResultData,
            {
                "code": date.code,
                "gregorian": point.isoformat(),
                "year": point.year,
                "day_of_year": point.day_of_year,
                "hour": point.hour,
            },
        )
        logger.debug("convert.to_gregorian", code=date.code, gregorian=data["gregorian"])
        return self._success("to_gregorian", data, warnings)

    def from_gregorian(
        self,
        text: str,
        *,
        make_approximation: bool | None = None,
    ) -> ServiceResult:
        """Convert a Gregorian date (``YYYY-MM-DD[THH[:MM[:SS]]]``) to an imperial date.

        *make_approximation* defaults to the ``[convert]`` setting.
        """
        warnings: list[str] = []
        try:
            point = GregorianDateTime.parse(text)
        except ValueError as exc:
            return self._failure(
                "from_gregorian",
                "INVALID_DATE",
                f"Invalid Gregorian date {text!r}",
                warnings,
                detail={"date": text, "reason": str(exc)},
            )

        approximate = (
            self._settings.convert.make_approximation
            if make_approximation is None
            else make_approximation
        )
        date = gregorian_to_imperial(
            point,
            make_approximation=approximate,
            makr_constant=self._settings.convert.makr_constant,
        )
        data = date_payload(date)
        data["gregorian"] = point.isoformat()
        logger.debug("convert.from_gregorian", gregorian=data["gregorian"], code=date.code)
        return self._success("from_gregorian", data, warnings)

    def millennium_table(self, millennium: int) -> ServiceResult:
        """Convert every year of *millennium* to its Gregorian start date."""
        if millennium < 1:
            return self._failure(
                "millennium_table",
                "OUT_OF_RANGE",
                f"Millennium must be at least 1, got {millennium}",
                [],
                detail={"millennium": millennium},
            )

        makr_constant = self._settings.convert.makr_constant
        items: list[dict[str, str]] = []
        for year in range(1, YEARS_PER_MILLENNIUM + 1):
            date = ImperialDate.from_numbers(millennium, year)
            point = imperial_to_gregorian(date, makr_constant=makr_constant)
            items.append({"code": date.code, "gregorian": point.isoformat()})

        data = dump_validated(
            MillenniumTableResultData,
            {"millennium": millennium, "count": len(items), "items": items},
        )
        return self._success("millennium_table", data, [])
