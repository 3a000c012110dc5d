"""Click building blocks shared by the rubyfilter commands.

``RubyCommand`` takes an ``examples`` string and shows it through an eager
``--examples`` flag, keeping ``--help`` short. ``RubyGroup`` makes it the
default class for subcommands.
"""

from __future__ import annotations

from typing import Any

import click

# Every command reads one document, from a file or stdin.
input_argument = click.argument(
    "source",
    type=click.File("r", encoding="utf-8"),
    default="-",
    required=False,
)


class RubyCommand(click.Command):
    """Click Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class RubyGroup(click.Group):
    """Root group whose subcommands are :class:`RubyCommand` by default."""

    command_class = RubyCommand
