"""Event-stream adapter around :class:`AnnotationFilter`.

Every :class:`Text` event is replaced by the events of its segments, in
order: plain text stays ``Text``, annotations become ``Html`` fragments.
Every other event passes through untouched.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator

from rubyfilter.domain.arity import DEFAULT_ARITY_TABLE, ArityTable
from rubyfilter.domain.errors import RubyAlignmentError
from rubyfilter.domain.filter import AnnotationFilter
from rubyfilter.domain.segments import Annotation, Malformed, Plain, Segment
from rubyfilter.domain.types import ErrorPolicy
from rubyfilter.output.html import HtmlRenderer
from rubyfilter.pipeline.events import Event, Html, Text

logger = logging.getLogger(__name__)


class RubyEventFilter:
    """Iterator rewriting ruby commands inside the text runs of *events*.

    Args:
        events: Upstream document events.
        renderer: Renderer for annotations (default :class:`HtmlRenderer`).
        on_error: Handling of malformed ruby commands. ``raw`` keeps the
            source text, ``skip`` drops it, ``halt`` raises
            :class:`RubyAlignmentError` from ``__next__``.
        table: Registered command names.

    Attributes:
        errors: Alignment errors met so far, in input order. Their
            ``start`` is a document offset taken from the text runs.
        annotations: Number of annotations rendered so far.
    """

    def __init__(
        self,
        events: Iterable[Event],
        *,
        renderer: HtmlRenderer | None = None,
        on_error: ErrorPolicy | str = ErrorPolicy.RAW,
        table: ArityTable = DEFAULT_ARITY_TABLE,
    ) -> None:
        self._events = iter(events)
        self._queue: deque[Event] = deque()
        self._renderer = renderer or HtmlRenderer()
        self._on_error = ErrorPolicy(on_error)
        self._table = table
        self.errors: list[RubyAlignmentError] = []
        self.annotations = 0

    def __iter__(self) -> Iterator[Event]:
        return self

    def __next__(self) -> Event:
        while not self._queue:
            event = next(self._events)
            if not isinstance(event, Text):
                return event
            for offset, segment in located_segments(event, self._table):
                converted = self._convert(segment, offset)
                if converted is not None:
                    self._queue.append(converted)
        return self._queue.popleft()

    def _convert(self, segment: Segment, offset: int) -> Event | None:
        if isinstance(segment, Plain):
            return Text(segment.text, offset=offset)
        if isinstance(segment, Annotation):
            self.annotations += 1
            return Html(self._renderer.render(segment.ruby))
        return self._handle_malformed(segment, offset)

    def _handle_malformed(self, segment: Malformed, offset: int) -> Event | None:
        self.errors.append(segment.error)
        if self._on_error is ErrorPolicy.HALT:
            raise segment.error
        logger.warning(
            "Malformed ruby command %s at offset %s: %s",
            segment.source,
            segment.error.start,
            segment.error,
        )
        if self._on_error is ErrorPolicy.SKIP:
            return None
        return Text(segment.source, offset=offset)


def located_segments(
    run: Text, table: ArityTable = DEFAULT_ARITY_TABLE
) -> Iterator[tuple[int, Segment]]:
    """Yield ``(offset, segment)`` for each segment of one text run.

    Offsets count from the start of the document, not the run, and so do
    the ``start`` offsets of :class:`Malformed` errors.
    """
    offset = run.offset
    for segment in AnnotationFilter(run.text, table):
        if isinstance(segment, Malformed):
            segment = Malformed(segment.source, segment.error.located(segment.source, offset))
        yield offset, segment
        offset += len(segment.source)
