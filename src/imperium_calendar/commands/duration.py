"""Command group: dates as durations in seconds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.commands._base import ImperiumGroup

if TYPE_CHECKING:
    from imperium_calendar.commands._context import AppContext


@click.group(
    cls=ImperiumGroup,
    examples="""\
  imperium duration of 2.345.678.M37
  imperium duration from 1234567891234""",
)
def duration() -> None:
    """Convert dates to and from seconds since the start of the calendar."""


@duration.command(
    "of",
    examples="""\
  imperium duration of M41
  imperium --json duration of 3.996.636.M41""",
)
@click.argument("code")
@click.pass_obj
def duration_of(app: AppContext, code: str) -> None:
    """Print the duration in seconds of the date CODE."""
    app.emit(app.durations.to_duration(code))


@duration.command(
    "from",
    examples="""\
  imperium duration from 1234567891234
  imperium -q duration from 0""",
)
@click.argument("seconds", type=int)
@click.pass_obj
def duration_from(app: AppContext, seconds: int) -> None:
    """Split SECONDS into a millennium, year, and year fraction."""
    app.emit(app.durations.from_duration(seconds))
