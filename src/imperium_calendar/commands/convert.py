"""Command group: conversion to and from Gregorian dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.commands._base import ImperiumGroup

if TYPE_CHECKING:
    from imperium_calendar.commands._context import AppContext


@click.group(
    cls=ImperiumGroup,
    examples="""\
  imperium convert to-gregorian 3.996.636.M41
  imperium convert from-gregorian 1970-01-01
  imperium convert table 35""",
)
def convert() -> None:
    """Convert between imperial and Gregorian dates."""


@convert.command(
    "to-gregorian",
    examples="""\
  imperium convert to-gregorian 9.001.001.M41
  imperium -q convert to-gregorian M33""",
)
@click.argument("code")
@click.pass_obj
def to_gregorian(app: AppContext, code: str) -> None:
    """Convert the imperial date CODE to a Gregorian date and hour."""
    app.emit(app.converter.to_gregorian(code))


@convert.command(
    "from-gregorian",
    examples="""\
  imperium convert from-gregorian 1970-01-01
  imperium convert from-gregorian 2025-09-20T12:09 --exact""",
)
@click.argument("date")
@click.option("--approximate", is_flag=True, help="Mark the result with check number 9.")
@click.option("--exact", is_flag=True, help="Leave out the approximation check number.")
@click.pass_obj
def from_gregorian(app: AppContext, date: str, approximate: bool, exact: bool) -> None:
    """Convert the Gregorian DATE (YYYY-MM-DD[THH[:MM[:SS]]]) to an imperial date.

    Without --approximate or --exact, the [convert] make_approximation
    setting decides.
    """
    if approximate and exact:
        raise click.UsageError("--approximate and --exact are mutually exclusive.")
    make_approximation = False if exact else (True if approximate else None)
    app.emit(app.converter.from_gregorian(date, make_approximation=make_approximation))


@convert.command(
    "table",
    examples="""\
  imperium convert table 35
  imperium -q convert table 41 > m41.tsv""",
)
@click.argument("millennium", type=int)
@click.pass_obj
def table(app: AppContext, millennium: int) -> None:
    """Convert every year of MILLENNIUM to its Gregorian start date."""
    app.emit(app.converter.millennium_table(millennium))
