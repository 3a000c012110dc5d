"""Document event kinds.

The event vocabulary is closed: consumers match on these classes and the
ruby filter only cares whether an event is a :class:`Text` run.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Start:
    """Opening of a block or inline container (``p``, ``em``, ...)."""

    tag: str


@dataclass(frozen=True)
class End:
    """Closing of the container opened by the matching :class:`Start`."""

    tag: str


@dataclass(frozen=True)
class Text:
    """A run of plain text. The only event kind the ruby filter rewrites.

    *offset* is the index of the run in the source document. It is not part
    of equality.
    """

    text: str
    offset: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Code:
    """Inline code; never scanned for commands."""

    text: str


@dataclass(frozen=True)
class Html:
    """Raw markup written to the output verbatim."""

    html: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


Event = Start | End | Text | Code | Html | SoftBreak | HardBreak
