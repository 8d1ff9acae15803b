"""Command: build an imperial date code from element numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.commands._base import ImperiumCommand
from imperium_calendar.domain.elements import DEFAULT_MILLENNIUM_COUNT

if TYPE_CHECKING:
    from imperium_calendar.commands._context import AppContext


@click.command(
    cls=ImperiumCommand,
    examples="""\
  imperium encode --millennium 41 --year 999
  imperium encode -m 41 -y 636 -f 996 -k 3
  imperium -q encode -m 35 -y 1000""",
)
@click.option(
    "-m",
    "--millennium",
    type=int,
    default=DEFAULT_MILLENNIUM_COUNT,
    show_default=True,
    help="Millennium count.",
)
@click.option("-y", "--year", type=int, default=None, help="Year within the millennium (1-1000).")
@click.option(
    "-f", "--fraction", "year_fraction", type=int, default=None, help="Year fraction (1-1000)."
)
@click.option("-k", "--check", "check_number", type=int, default=None, help="Check number (0-9).")
@click.pass_obj
def encode(
    app: AppContext,
    millennium: int,
    year: int | None,
    year_fraction: int | None,
    check_number: int | None,
) -> None:
    """Build the date code for the given element numbers."""
    app.emit(app.codec.encode(millennium, year, year_fraction, check_number))
