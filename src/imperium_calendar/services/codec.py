"""CodecService — decode and encode imperial date codes."""

from __future__ import annotations

import structlog

from imperium_calendar.domain.check_numbers import describe_check_numbers
from imperium_calendar.domain.codes import decode_date
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.elements import DEFAULT_MILLENNIUM_COUNT
from imperium_calendar.domain.errors import InvalidCodeError
from imperium_calendar.services._helpers import date_payload
from imperium_calendar.services.base import BaseService
from imperium_calendar.services.contracts import CheckNumbersResultData, dump_validated
from imperium_calendar.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class CodecService(BaseService):
    """Read date codes into their elements and build codes from elements."""

    def decode(self, code: str) -> ServiceResult:
        """Decode a date code such as ``3.996.636.M41``."""
        warnings: list[str] = []
        try:
            date = decode_date(code, warnings=warnings)
        except InvalidCodeError as exc:
            return self._invalid_code("decode", exc, warnings, code=code)

        logger.debug("codec.decoded", code=code, canonical=date.code, warnings=len(warnings))
        return self._success("decode", date_payload(date), warnings)

    def encode(
        self,
        millennium: int = DEFAULT_MILLENNIUM_COUNT,
        year: int | None = None,
        year_fraction: int | None = None,
        check_number: int | None = None,
    ) -> ServiceResult:
        """Build the code for a date given as element counts.

        Out-of-range numbers are clamped. A year fraction without a year is
        kept in the payload but left out of the code, with a warning.
        """
        warnings: list[str] = []
        date = ImperialDate.from_numbers(millennium, year, year_fraction, check_number)
        if date.year_fraction is not None and not date.includes_year_fraction_in_code:
            warnings.append(
                "The year fraction is left out of the code because the date has no year"
            )

        logger.debug("codec.encoded", code=date.code)
        return self._success("encode", date_payload(date), warnings)

    def check_numbers(self) -> ServiceResult:
        """List every check number with its description."""
        items = [
            {"index": index, "description": description}
            for index, description in describe_check_numbers()
        ]
        data = dump_validated(CheckNumbersResultData, {"count": len(items), "items": items})
        return self._success("check_numbers", data, [])
