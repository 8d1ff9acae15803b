"""Element kinds and check-number levels.

The four kinds of element that make up an imperial date, and the ten
check-number levels that qualify how trustworthy a date is.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ElementKind(StrEnum):
    """The components of an imperial date, most significant first."""

    MILLENNIUM = "millennium"
    YEAR = "year"
    YEAR_FRACTION = "year_fraction"
    CHECK_NUMBER = "check_number"


class CheckLevel(IntEnum):
    """Check numbers, from most to least certain."""

    HOLY_TERRA = 0
    SOL = 1
    DIRECT = 2
    INDIRECT = 3
    CORROBORATED = 4
    SUB_CORROBORATED = 5
    NON_REFERENCED_1 = 6
    NON_REFERENCED_10 = 7
    NON_REFERENCED_11_PLUS = 8
    APPROXIMATION = 9


CHECK_LEVEL_DESCRIPTIONS: dict[CheckLevel, str] = {
    CheckLevel.HOLY_TERRA: "Earth Standard Date (Holy Terra)",
    CheckLevel.SOL: "Earth Standard Date (Sol)",
    CheckLevel.DIRECT: "Direct",
    CheckLevel.INDIRECT: "Indirect",
    CheckLevel.CORROBORATED: "Corroborated",
    CheckLevel.SUB_CORROBORATED: "Sub-Corroborated",
    CheckLevel.NON_REFERENCED_1: "Non-Referenced, 1 year",
    CheckLevel.NON_REFERENCED_10: "Non-Referenced, 10 years",
    CheckLevel.NON_REFERENCED_11_PLUS: "Non-Referenced, 11+ years",
    CheckLevel.APPROXIMATION: "Approximation",
}
