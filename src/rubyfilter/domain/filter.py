"""Annotation filter: split text into plain and ruby segments.

The filter is a single-pass iterator. It keeps the immutable source text, an
index marking the start of the unprocessed remainder, and at most one pending
segment queued behind a just-emitted plain prefix.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from rubyfilter.domain.arity import DEFAULT_ARITY_TABLE, ArityTable
from rubyfilter.domain.errors import RubyAlignmentError
from rubyfilter.domain.ruby import Ruby
from rubyfilter.domain.scanner import CommandMatch, CommandScanner
from rubyfilter.domain.segments import Annotation, Malformed, Plain, Segment

# Command name -> builder taking the raw arguments.
ANNOTATION_BUILDERS: dict[str, Callable[..., Ruby]] = {
    "ruby": Ruby.from_arguments,
}


class AnnotationFilter:
    """Iterate over the :class:`Segment` sequence of *text*.

    Usage::

        for segment in AnnotationFilter("これは\\\\ruby{鶏}{にわとり}"):
            ...

    Group-count mismatches surface as :class:`Malformed` segments at the
    position the annotation would have taken; the iterator never raises them.
    """

    def __init__(self, text: str, table: ArityTable = DEFAULT_ARITY_TABLE) -> None:
        unsupported = [name for name in table.names() if name not in ANNOTATION_BUILDERS]
        if unsupported:
            msg = f"No annotation builder for command(s): {', '.join(unsupported)}"
            raise ValueError(msg)
        self._text = text
        self._pos = 0
        self._pending: Segment | None = None
        self._scanner = CommandScanner(table)

    @property
    def remaining(self) -> str:
        return self._text[self._pos :]

    def __iter__(self) -> Iterator[Segment]:
        return self

    def __next__(self) -> Segment:
        if self._pending is not None:
            segment, self._pending = self._pending, None
            return segment

        if self._pos >= len(self._text):
            raise StopIteration

        match = self._scanner.scan(self._text, self._pos)
        if match is None:
            rest = Plain(self._text[self._pos :])
            self._pos = len(self._text)
            return rest

        self._pos = match.end
        segment = _build_segment(match)
        if match.start == match.origin:
            return segment

        self._pending = segment
        return Plain(match.prefix)


def _build_segment(match: CommandMatch) -> Annotation | Malformed:
    command = match.command
    build = ANNOTATION_BUILDERS[command.name]
    try:
        ruby = build(*command.args)
    except RubyAlignmentError as exc:
        return Malformed(source=match.source, error=exc.located(match.source, match.start))
    return Annotation(ruby=ruby, source=match.source)


def split_segments(text: str, table: ArityTable = DEFAULT_ARITY_TABLE) -> list[Segment]:
    """Eagerly collect the segments of *text*."""
    return list(AnnotationFilter(text, table))
