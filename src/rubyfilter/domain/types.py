"""Classification enums shared across layers."""

from __future__ import annotations

from enum import StrEnum


class SegmentKind(StrEnum):
    """Kinds of segment produced by the annotation filter."""

    PLAIN = "plain"
    ANNOTATION = "annotation"
    MALFORMED = "malformed"


class ErrorPolicy(StrEnum):
    """What the event pipeline does with a malformed ruby command."""

    RAW = "raw"  # keep the source text
    SKIP = "skip"  # drop it
    HALT = "halt"  # raise to the caller
