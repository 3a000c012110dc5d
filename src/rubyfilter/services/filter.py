"""FilterService: render, inspect, and check ruby notation in documents.

All three operations read the document through the same paragraph event
stream, so ``segments`` and ``check`` see exactly the commands ``render``
converts. Offsets in results count code points from the start of the
document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from rubyfilter.domain.errors import RubyAlignmentError
from rubyfilter.domain.segments import Malformed, Segment
from rubyfilter.output.html import HtmlRenderer
from rubyfilter.pipeline.events import Text
from rubyfilter.pipeline.filter import RubyEventFilter, located_segments
from rubyfilter.pipeline.source import parse_paragraphs
from rubyfilter.pipeline.writer import write_html
from rubyfilter.services.result import ServiceResult

if TYPE_CHECKING:
    from rubyfilter.config.settings import RubySettings

logger = logging.getLogger(__name__)

ALIGNMENT_ERROR_CODE = "RUBY_ALIGNMENT"
MALFORMED_CODE = "MALFORMED_RUBY"


def document_segments(text: str) -> Iterator[tuple[int, Segment]]:
    """Yield ``(offset, segment)`` over the paragraph text runs of *text*.

    Blank lines between paragraphs belong to no segment.
    """
    for event in parse_paragraphs(text):
        if isinstance(event, Text):
            yield from located_segments(event)


class FilterService:
    """Operations over a whole document held in memory.

    Usage::

        result = FilterService(settings).render(text)
        if result.ok:
            print(result.data["html"])
    """

    def __init__(self, settings: RubySettings) -> None:
        self._settings = settings

    def _renderer(self) -> HtmlRenderer:
        render = self._settings.render
        return HtmlRenderer(open_paren=render.open_paren, close_paren=render.close_paren)

    def render(self, text: str) -> ServiceResult:
        """Convert *text* to HTML paragraphs with rendered ruby."""
        events = RubyEventFilter(
            parse_paragraphs(text),
            renderer=self._renderer(),
            on_error=self._settings.filter.on_error,
        )
        try:
            html = write_html(events)
        except RubyAlignmentError as exc:
            logger.debug("Render halted on malformed ruby at offset %s", exc.start)
            return ServiceResult.failure(
                "render", ALIGNMENT_ERROR_CODE, str(exc), detail=exc.to_detail()
            )

        return ServiceResult.success(
            "render",
            {
                "html": html,
                "annotations": events.annotations,
                "malformed": len(events.errors),
            },
            warnings=[f"offset {error.start}: {error}" for error in events.errors],
        )

    def segments(self, text: str) -> ServiceResult:
        """List the segments of *text* without rendering them."""
        items: list[dict[str, Any]] = [
            {**segment.to_dict(), "start": offset} for offset, segment in document_segments(text)
        ]
        return ServiceResult.success("segments", {"items": items, "count": len(items)})

    def check(self, text: str) -> ServiceResult:
        """Report every ruby command whose groups cannot be aligned."""
        issues = [
            segment.error.to_detail()
            for _, segment in document_segments(text)
            if isinstance(segment, Malformed)
        ]
        if issues:
            return ServiceResult.failure(
                "check",
                MALFORMED_CODE,
                f"{len(issues)} malformed ruby command(s)",
                detail={"issues": issues},
            )
        return ServiceResult.success("check", {"issues": [], "count": 0})
