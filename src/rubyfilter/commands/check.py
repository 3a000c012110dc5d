"""Command: report ruby commands whose groups cannot be aligned."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from rubyfilter.commands._base import RubyCommand, input_argument

if TYPE_CHECKING:
    from rubyfilter.commands._context import AppContext


@click.command(
    cls=RubyCommand,
    examples="""\
  rubyfilter check chapter1.txt
  rubyfilter --json check chapter1.txt""",
)
@input_argument
@click.pass_obj
def check(app: AppContext, source: TextIO) -> None:
    """Check SOURCE for malformed ruby commands. Exits 1 when any are found."""
    app.emit(app.service().check(source.read()))
