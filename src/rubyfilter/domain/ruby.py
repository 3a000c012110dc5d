"""Ruby annotations: aligned groups of base text and reading text.

A ruby consists of base characters and ruby characters divided into the same
number of groups. Group *i* of the ruby text is displayed over group *i* of
the base text.

Source syntax::

    \\ruby{武|家|諸法度}{ぶ|け|しょはっと}   group mode
    \\ruby{大名}{だい|みょう}              per-character mode

In group mode both arguments are split on ``|`` and must yield the same
number of groups. When they do not and the base has no ``|`` at all, every
character of the base becomes its own group.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rubyfilter.domain.errors import RubyAlignmentError

GROUP_SEPARATOR = "|"


@dataclass(frozen=True)
class Ruby:
    """Aligned base and ruby groups.

    INVARIANT: ``len(base) == len(ruby)``.
    """

    base: tuple[str, ...]
    ruby: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.base) != len(self.ruby):
            raise RubyAlignmentError(
                GROUP_SEPARATOR.join(self.base),
                GROUP_SEPARATOR.join(self.ruby),
                base_groups=len(self.base),
                ruby_groups=len(self.ruby),
            )

    @classmethod
    def from_groups(cls, base: list[str], ruby: list[str]) -> Ruby:
        return cls(base=tuple(base), ruby=tuple(ruby))

    @classmethod
    def from_arguments(cls, base: str, ruby: str) -> Ruby:
        """Build a Ruby from the two raw ``\\ruby`` arguments.

        Raises:
            RubyAlignmentError: Neither group mode nor per-character mode
                aligns the arguments.
        """
        base_groups = base.split(GROUP_SEPARATOR)
        ruby_groups = ruby.split(GROUP_SEPARATOR)

        if len(base_groups) == len(ruby_groups):
            return cls.from_groups(base_groups, ruby_groups)

        if len(base_groups) == 1:
            chars = list(base)
            if len(chars) == len(ruby_groups):
                return cls.from_groups(chars, ruby_groups)
            raise RubyAlignmentError(
                base, ruby, base_groups=len(chars), ruby_groups=len(ruby_groups)
            )

        raise RubyAlignmentError(
            base, ruby, base_groups=len(base_groups), ruby_groups=len(ruby_groups)
        )

    def pairs(self) -> Iterator[tuple[str, str]]:
        return zip(self.base, self.ruby, strict=True)

    def __len__(self) -> int:
        return len(self.base)
