"""Command: render a document to HTML with ruby markup."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from rubyfilter.commands._base import RubyCommand, input_argument

if TYPE_CHECKING:
    from rubyfilter.commands._context import AppContext


@click.command(
    cls=RubyCommand,
    examples="""\
  rubyfilter render chapter1.txt
  echo 'これは\\ruby{鶏}{にわとり}' | rubyfilter render
  rubyfilter render chapter1.txt --open '(' --close ')'
  rubyfilter --on-error halt render chapter1.txt""",
)
@input_argument
@click.option("--open", "open_paren", default=None, help="Fallback text before the reading.")
@click.option("--close", "close_paren", default=None, help="Fallback text after the reading.")
@click.pass_obj
def render(
    app: AppContext, source: TextIO, open_paren: str | None, close_paren: str | None
) -> None:
    """Render SOURCE (default: stdin) as HTML paragraphs with <ruby> markup."""
    service = app.service(open_paren=open_paren, close_paren=close_paren)
    app.emit(service.render(source.read()))
