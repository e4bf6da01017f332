"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Configures logging and telemetry, and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from roadhub.config.logging import configure_logging
from roadhub.output.formatters import OutputSettings, format_result
from roadhub.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from roadhub.config.settings import RoadhubSettings
    from roadhub.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RoadhubSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (in JSON mode they are already in the payload).
        * Failure: writes to stderr, exits with code 1.
        """
        output_settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
            max_listed=self.settings.output.max_listed,
        )
        output = format_result(result, settings=output_settings)
        if result.ok:
            click.echo(output)
            if not output_settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
