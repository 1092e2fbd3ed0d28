"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finpatterns.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from finpatterns.config.settings import FinSettings
    from finpatterns.services.result import ServiceResult


class AppContext:
    """Settings plus output routing for one CLI invocation."""

    def __init__(self, settings: FinSettings) -> None:
        self.settings = settings

        from finpatterns.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print a ServiceResult and set the exit status.

        * Success: stdout, normal return. Warnings go to stderr
          unless JSON output already carries them.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
