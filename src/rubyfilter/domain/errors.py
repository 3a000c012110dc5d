"""Exception hierarchy for ruby annotation processing."""

from __future__ import annotations


class RubyFilterError(Exception):
    """Base class for all rubyfilter errors."""


class RubyAlignmentError(RubyFilterError, ValueError):
    """Base and ruby groups cannot be aligned.

    Raised when neither group mode nor per-character mode yields the same
    number of base and ruby groups. *source* and *start* locate the offending
    command in the input when the error comes from a scan.
    """

    def __init__(
        self,
        base: str,
        ruby: str,
        *,
        base_groups: int,
        ruby_groups: int,
        source: str | None = None,
        start: int | None = None,
    ) -> None:
        self.base = base
        self.ruby = ruby
        self.base_groups = base_groups
        self.ruby_groups = ruby_groups
        self.source = source
        self.start = start
        super().__init__(
            f"Cannot align {base_groups} base group(s) with "
            f"{ruby_groups} ruby group(s): {{{base}}}{{{ruby}}}"
        )

    def located(self, source: str, start: int) -> RubyAlignmentError:
        """Return a copy of this error carrying the matched span."""
        return RubyAlignmentError(
            self.base,
            self.ruby,
            base_groups=self.base_groups,
            ruby_groups=self.ruby_groups,
            source=source,
            start=start,
        )

    def to_detail(self) -> dict[str, object]:
        return {
            "base": self.base,
            "ruby": self.ruby,
            "base_groups": self.base_groups,
            "ruby_groups": self.ruby_groups,
            "source": self.source,
            "start": self.start,
        }
