"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the filter service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from rubyfilter.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rubyfilter.config.settings import RubySettings
    from rubyfilter.services.filter import FilterService
    from rubyfilter.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RubySettings) -> None:
        self.settings = settings

        from rubyfilter.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose, quiet=settings.quiet, log_json=settings.log_json
        )

    def service(self, **render_overrides: Any) -> FilterService:
        """Build a FilterService, applying ``[render]`` overrides given on the command line."""
        from rubyfilter.services.filter import FilterService

        overrides = {key: value for key, value in render_overrides.items() if value is not None}
        settings = self.settings
        if overrides:
            render = settings.render.model_copy(update=overrides)
            settings = settings.model_copy(update={"render": render})
        return FilterService(settings)

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
