"""Segment types produced by the annotation filter.

A segment is one of :class:`Plain`, :class:`Annotation`, or
:class:`Malformed`. Every segment keeps its exact source slice, so joining
``segment.source`` over a full sequence reproduces the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rubyfilter.domain.errors import RubyAlignmentError
from rubyfilter.domain.ruby import Ruby
from rubyfilter.domain.types import SegmentKind


@dataclass(frozen=True)
class Plain:
    """Text outside any recognized command."""

    text: str

    @property
    def source(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"kind": SegmentKind.PLAIN.value, "source": self.text}


@dataclass(frozen=True)
class Annotation:
    """A well-formed ruby command."""

    ruby: Ruby
    source: str  # the matched ``\ruby{...}{...}`` span

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": SegmentKind.ANNOTATION.value,
            "source": self.source,
            "base": list(self.ruby.base),
            "ruby": list(self.ruby.ruby),
        }


@dataclass(frozen=True)
class Malformed:
    """A ruby command whose groups cannot be aligned."""

    source: str
    error: RubyAlignmentError

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": SegmentKind.MALFORMED.value,
            "source": self.source,
            "start": self.error.start,
            "error": str(self.error),
        }


Segment = Plain | Annotation | Malformed


def reconstruct(segments: list[Segment]) -> str:
    """Join the source spans of *segments* back into the original text."""
    return "".join(segment.source for segment in segments)
