"""Subcommand modules for rubyfilter.

Provides register_commands() which uses deferred imports to keep
``rubyfilter --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rubyfilter.commands.check import check
    from rubyfilter.commands.render import render
    from rubyfilter.commands.segments import segments

    cli.add_command(render)
    cli.add_command(segments)
    cli.add_command(check)
