"""Command: list the check numbers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.commands._base import ImperiumCommand

if TYPE_CHECKING:
    from imperium_calendar.commands._context import AppContext


@click.command(
    cls=ImperiumCommand,
    examples="""\
  imperium checks
  imperium --json checks""",
)
@click.pass_obj
def checks(app: AppContext) -> None:
    """List the check numbers and what each one means."""
    app.emit(app.codec.check_numbers())
