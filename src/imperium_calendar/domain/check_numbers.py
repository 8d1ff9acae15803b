"""Check numbers — the certainty qualifier at the front of a date.

A check number records how a date was established, from an Earth
Standard Date taken on Holy Terra (0) to an approximation (9), e.g. a
date converted from a foreign calendar.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from imperium_calendar.domain.elements import clamp
from imperium_calendar.domain.types import CHECK_LEVEL_DESCRIPTIONS, CheckLevel

MIN_CHECK_INDEX = int(min(CheckLevel))
MAX_CHECK_INDEX = int(max(CheckLevel))


class CheckNumber(BaseModel):
    """A check number in a date, held as its index (0 to 9).

    Out-of-range indices are clamped rather than rejected.
    """

    model_config = {"frozen": True}

    index: int

    @field_validator("index")
    @classmethod
    def _clamp_index(cls, index: int) -> int:
        return clamp(index, MIN_CHECK_INDEX, MAX_CHECK_INDEX)

    @property
    def level(self) -> CheckLevel:
        return CheckLevel(self.index)

    @property
    def description(self) -> str:
        return CHECK_LEVEL_DESCRIPTIONS[self.level]

    @property
    def number(self) -> int:
        return self.index

    @property
    def code(self) -> str:
        from imperium_calendar.domain.codes import encode_check_number

        return encode_check_number(self)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def from_index(cls, index: int) -> CheckNumber:
        return cls(index=int(index))

    def with_index(self, index: int) -> CheckNumber:
        return self.from_index(index)


def describe_check_numbers() -> list[tuple[int, str]]:
    """All check numbers as ``(index, description)`` pairs in index order."""
    return [(int(level), CHECK_LEVEL_DESCRIPTIONS[level]) for level in CheckLevel]
