"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the services built from the resolved
settings and centralized result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from imperium_calendar.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from imperium_calendar.config.settings import ImperiumSettings
    from imperium_calendar.services.codec import CodecService
    from imperium_calendar.services.convert import ConvertService
    from imperium_calendar.services.duration import DurationService
    from imperium_calendar.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: ImperiumSettings) -> None:
        self.settings = settings

        from imperium_calendar.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def codec(self) -> CodecService:
        from imperium_calendar.services.codec import CodecService

        return CodecService(self.settings)

    @property
    def durations(self) -> DurationService:
        from imperium_calendar.services.duration import DurationService

        return DurationService(self.settings)

    @property
    def converter(self) -> ConvertService:
        from imperium_calendar.services.convert import ConvertService

        return ConvertService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
