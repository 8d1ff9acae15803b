"""Command: decode an imperial date code."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.commands._base import ImperiumCommand

if TYPE_CHECKING:
    from imperium_calendar.commands._context import AppContext


@click.command(
    cls=ImperiumCommand,
    examples="""\
  imperium decode M41
  imperium decode 999.M41
  imperium decode 3.996.636.M41
  imperium --json decode 5.123.M31""",
)
@click.argument("code")
@click.pass_obj
def decode(app: AppContext, code: str) -> None:
    """Decode CODE into its millennium, year, year fraction, and check number."""
    app.emit(app.codec.decode(code))
