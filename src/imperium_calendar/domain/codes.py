"""Code forms of date elements and of complete dates.

Element codes:

- Millennium: ``"M"`` followed by the count, e.g. ``M41``.
- Year and year fraction: three digits, ``001`` to ``000`` (``000`` is 1,000).
- Check number: a single digit, the index.

A date code joins the element codes with periods, least significant
first, e.g. ``3.996.636.M41``. Which part is which is inferred from the
number of parts and the length of the first part alone (see
:func:`classify_parts`). A single-digit year or year fraction can never
be read back from a two- or three-part code: it is always taken to be
the check number.

Recoverable problems (blank millennium, wrong prefix, too many parts)
are appended to the optional ``warnings`` list and decoding carries on.
Text that cannot be read as an integer raises :class:`InvalidCodeError`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from imperium_calendar.domain.check_numbers import CheckNumber
from imperium_calendar.domain.dates import ImperialDate
from imperium_calendar.domain.elements import (
    DEFAULT_MILLENNIUM_COUNT,
    ELEMENT_SPECS,
    DurationElement,
)
from imperium_calendar.domain.errors import InvalidCodeError
from imperium_calendar.domain.types import ElementKind

logger = logging.getLogger(__name__)

MILLENNIUM_PREFIX = "M"
YEAR_PAD_CHAR = "0"
THOUSAND_CODE = "000"
DELIMITER = "."
MAX_CODE_PARTS = 4
# Longest integer accepted in a code part. Durations and Gregorian years
# derived from a count stay within the interpreter's int-to-str limit.
MAX_INTEGER_DIGITS = 4000

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")


def _warn(warnings: list[str] | None, message: str) -> None:
    logger.debug(message)
    if warnings is not None:
        warnings.append(message)


def _parse_int(kind: ElementKind, text: str) -> int:
    if not _INTEGER_PATTERN.match(text):
        raise InvalidCodeError(kind, text)
    if len(text.lstrip("+-")) > MAX_INTEGER_DIGITS:
        raise InvalidCodeError(kind, text, reason=f"more than {MAX_INTEGER_DIGITS} digits")
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidCodeError(kind, text, reason="too many digits") from exc


# --- Elements ---


def encode_element(element: DurationElement | CheckNumber) -> str:
    """Return the code form of a single element."""
    if isinstance(element, CheckNumber):
        return encode_check_number(element)
    if element.kind == ElementKind.MILLENNIUM:
        return f"{MILLENNIUM_PREFIX}{element.count}"
    spec = element.spec
    if element.count == spec.maximum:
        return THOUSAND_CODE
    assert spec.code_width is not None
    return str(element.count).rjust(spec.code_width, YEAR_PAD_CHAR)


def encode_check_number(check_number: CheckNumber) -> str:
    return str(check_number.index)


def _decode_three_digit(kind: ElementKind, code: str) -> DurationElement:
    spec = ELEMENT_SPECS[kind]
    width, maximum = spec.code_width, spec.maximum
    assert width is not None and maximum is not None
    # Excess characters are dropped from the start, short codes padded.
    code = code[-width:].rjust(width, YEAR_PAD_CHAR)
    if code == THOUSAND_CODE:
        count = maximum
    else:
        count = _parse_int(kind, code)
    return DurationElement.from_count(kind, count)


def decode_year(code: str) -> DurationElement:
    """Read a year code such as ``636`` or ``000``."""
    return _decode_three_digit(ElementKind.YEAR, code)


def decode_year_fraction(code: str) -> DurationElement:
    """Read a year-fraction code such as ``996``."""
    return _decode_three_digit(ElementKind.YEAR_FRACTION, code)


def decode_millennium(code: str, *, warnings: list[str] | None = None) -> DurationElement:
    """Read a millennium code such as ``M41``.

    Everything after the first character is read as the count, whether or
    not that character is the ``M`` prefix. A blank code, or one with no
    count, gives the 41st millennium.
    """
    if code == "":
        _warn(
            warnings,
            f"The millennium code is blank so the count is taken to be {DEFAULT_MILLENNIUM_COUNT}",
        )
        return DurationElement.from_count(ElementKind.MILLENNIUM, DEFAULT_MILLENNIUM_COUNT)

    given_prefix = code[0]
    if given_prefix != MILLENNIUM_PREFIX:
        _warn(
            warnings,
            f'The millennium code "{code}" starts with "{given_prefix}"'
            f' but the prefix is "{MILLENNIUM_PREFIX}"',
        )

    count_code = code[1:]
    if count_code == "":
        _warn(
            warnings,
            f'The millennium code "{code}" has no count'
            f" so the count is taken to be {DEFAULT_MILLENNIUM_COUNT}",
        )
        count = DEFAULT_MILLENNIUM_COUNT
    else:
        count = _parse_int(ElementKind.MILLENNIUM, count_code)
    return DurationElement.from_count(ElementKind.MILLENNIUM, count)


def decode_check_number(code: str) -> CheckNumber:
    """Read a check-number code; out-of-range indices are clamped."""
    return CheckNumber.from_index(_parse_int(ElementKind.CHECK_NUMBER, code))


def decode_element(
    kind: ElementKind,
    code: str,
    *,
    warnings: list[str] | None = None,
) -> DurationElement | CheckNumber:
    """Read the code of a single element of the given *kind*."""
    if kind == ElementKind.MILLENNIUM:
        return decode_millennium(code, warnings=warnings)
    if kind == ElementKind.YEAR:
        return decode_year(code)
    if kind == ElementKind.YEAR_FRACTION:
        return decode_year_fraction(code)
    return decode_check_number(code)


# --- Dates ---


@dataclass(frozen=True)
class CodeParts:
    """The parts of a date code, sorted by element. Absent parts are None."""

    millennium: str
    year: str | None = None
    year_fraction: str | None = None
    check_number: str | None = None


def split_code(code: str, *, warnings: list[str] | None = None) -> list[str]:
    """Split a date code on periods, keeping at most the last four parts."""
    parts = code.split(DELIMITER)
    if len(parts) > MAX_CODE_PARTS:
        _warn(
            warnings,
            f"The date code has {len(parts)} parts, more than the limit of {MAX_CODE_PARTS},"
            " so excess parts are removed from the start",
        )
        parts = parts[-MAX_CODE_PARTS:]
    return parts


def classify_parts(parts: list[str]) -> CodeParts:
    """Decide which element each part of a split date code belongs to.

    The last part is always the millennium. The others are placed by the
    part count and the length of the first part::

        n = 2   "5.M41"          check number if one character long
                "123.M41"        else year
        n = 3   "5.123.M41"      check number, year
                "456.123.M41"    year fraction, year
        n = 4   "6.456.123.M41"  check number, year fraction, year
    """
    if not parts:
        msg = "a date code has at least one part"
        raise ValueError(msg)

    count = len(parts)
    millennium = parts[-1]
    if count == 1:
        return CodeParts(millennium=millennium)

    first = parts[0]
    check_number = first if len(first) == 1 else None

    if count == 2:
        if check_number is not None:
            return CodeParts(millennium=millennium, check_number=check_number)
        return CodeParts(millennium=millennium, year=first)

    if count == 3:
        return CodeParts(
            millennium=millennium,
            year=parts[1],
            year_fraction=None if check_number is not None else first,
            check_number=check_number,
        )

    return CodeParts(
        millennium=millennium,
        year=parts[2],
        year_fraction=parts[1],
        check_number=first,
    )


def decode_date(code: str, *, warnings: list[str] | None = None) -> ImperialDate:
    """Read a date code such as ``3.996.636.M41`` into an :class:`ImperialDate`."""
    parts = classify_parts(split_code(code, warnings=warnings))
    return ImperialDate(
        millennium=decode_millennium(parts.millennium, warnings=warnings),
        year=None if parts.year is None else decode_year(parts.year),
        year_fraction=(
            None if parts.year_fraction is None else decode_year_fraction(parts.year_fraction)
        ),
        check_number=(
            None if parts.check_number is None else decode_check_number(parts.check_number)
        ),
    )


def encode_date(date: ImperialDate) -> str:
    """Join the codifiable elements of *date*, least significant first."""
    return DELIMITER.join(encode_element(element) for element in reversed(date.codifiable))
