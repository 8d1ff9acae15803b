"""Subcommand modules for imperium.

Provides register_commands() which uses deferred imports to keep
``imperium --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from imperium_calendar.commands.convert import convert
    from imperium_calendar.commands.duration import duration

    cli.add_command(convert)
    cli.add_command(duration)

    # --- Standalone commands ---
    from imperium_calendar.commands.checks import checks
    from imperium_calendar.commands.decode import decode
    from imperium_calendar.commands.encode import encode

    cli.add_command(decode)
    cli.add_command(encode)
    cli.add_command(checks)
