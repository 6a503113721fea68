"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Owns the settings, the conversion service and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hms.config.logging import configure_logging
from hms.output.formatters import OutputSettings, format_result
from hms.output.renderers import render_warnings
from hms.services.convert import ConvertService

if TYPE_CHECKING:
    from hms.config.settings import HmsSettings
    from hms.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: HmsSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ConvertService:
        return ConvertService(self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are part of the payload).
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
            if result.warnings and not settings.json_output:
                click.echo(render_warnings(result.warnings), err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
