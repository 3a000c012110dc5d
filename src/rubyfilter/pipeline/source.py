"""Minimal event source for plain-text documents.

Blank lines separate paragraphs. Each paragraph becomes a single
:class:`Text` run with its line breaks kept, so a command whose arguments
wrap onto the next line is still one command.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from rubyfilter.pipeline.events import End, Event, Start, Text

_PARAGRAPH_BREAK = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
_LINE_BREAK_CHARS = "\r\n"

PARAGRAPH_TAG = "p"


def parse_paragraphs(text: str) -> Iterator[Event]:
    """Yield the events of *text* split into paragraphs.

    Every :class:`Text` carries its offset in *text*.

    Examples:
        >>> list(parse_paragraphs("a\\nb"))
        [Start(tag='p'), Text(text='a\\nb', offset=0), End(tag='p')]
    """
    start = 0
    for separator in _PARAGRAPH_BREAK.finditer(text):
        yield from _paragraph(text, start, separator.start())
        start = separator.end()
    yield from _paragraph(text, start, len(text))


def _paragraph(text: str, start: int, end: int) -> Iterator[Event]:
    while start < end and text[start] in _LINE_BREAK_CHARS:
        start += 1
    while end > start and text[end - 1] in _LINE_BREAK_CHARS:
        end -= 1
    if not text[start:end].strip():
        return
    yield Start(PARAGRAPH_TAG)
    yield Text(text[start:end], offset=start)
    yield End(PARAGRAPH_TAG)
