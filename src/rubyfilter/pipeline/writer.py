"""Serialize document events to HTML."""

from __future__ import annotations

import html
from collections.abc import Iterable

from rubyfilter.pipeline.events import (
    Code,
    End,
    Event,
    HardBreak,
    Html,
    SoftBreak,
    Start,
    Text,
)

# Block containers get a newline after their closing tag.
_BLOCK_TAGS = frozenset({"p", "div", "blockquote", "li", "ul", "ol", "h1", "h2", "h3"})


def write_html(events: Iterable[Event]) -> str:
    """Render *events* as an HTML string.

    ``Text`` and ``Code`` content is escaped and line breaks inside a text
    run are written as ``\\n``. ``Html`` is written verbatim.
    """
    parts: list[str] = []
    for event in events:
        if isinstance(event, Start):
            parts.append(f"<{event.tag}>")
        elif isinstance(event, End):
            parts.append(f"</{event.tag}>")
            if event.tag in _BLOCK_TAGS:
                parts.append("\n")
        elif isinstance(event, Text):
            parts.append(html.escape(event.text, quote=False).replace("\r\n", "\n"))
        elif isinstance(event, Code):
            parts.append(f"<code>{html.escape(event.text, quote=False)}</code>")
        elif isinstance(event, Html):
            parts.append(event.html)
        elif isinstance(event, SoftBreak):
            parts.append("\n")
        elif isinstance(event, HardBreak):
            parts.append("<br />\n")
    return "".join(parts)
