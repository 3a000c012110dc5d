"""Root CLI group for rubyfilter with global flags and command registration."""

from __future__ import annotations

import click

from rubyfilter import __version__
from rubyfilter.commands import register_commands
from rubyfilter.commands._base import RubyGroup
from rubyfilter.commands._context import AppContext
from rubyfilter.config.settings import RubySettings
from rubyfilter.domain.types import ErrorPolicy


@click.group(cls=RubyGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rubyfilter")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--on-error",
    type=click.Choice([policy.value for policy in ErrorPolicy]),
    default=None,
    help="How to handle ruby commands whose groups cannot be aligned.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    on_error: str | None,
) -> None:
    """rubyfilter: LaTeX-like ruby annotations to HTML."""
    ctx.ensure_object(dict)
    settings = RubySettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
    )
    if on_error is not None:
        filter_config = settings.filter.model_copy(update={"on_error": ErrorPolicy(on_error)})
        settings = settings.model_copy(update={"filter": filter_config})
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
