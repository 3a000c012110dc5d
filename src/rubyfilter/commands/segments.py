"""Command: show how a document splits into text and ruby segments."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from rubyfilter.commands._base import RubyCommand, input_argument

if TYPE_CHECKING:
    from rubyfilter.commands._context import AppContext


@click.command(
    cls=RubyCommand,
    examples="""\
  rubyfilter segments chapter1.txt
  rubyfilter --json segments chapter1.txt""",
)
@input_argument
@click.pass_obj
def segments(app: AppContext, source: TextIO) -> None:
    """List the plain, annotation, and malformed segments of SOURCE."""
    app.emit(app.service().segments(source.read()))
