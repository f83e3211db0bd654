"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from blogctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from blogctl.config.settings import BlogSettings
    from blogctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: BlogSettings) -> None:
        self.settings = settings

        from blogctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def interactive(self) -> bool:
        """Prompts fire only without ``--no-interact``/``--json`` and on a TTY."""
        return (
            not self.settings.no_interact
            and not self.settings.json_output
            and sys.stdin.isatty()
        )

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
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
