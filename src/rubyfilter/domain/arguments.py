"""Brace-delimited argument reading.

An argument is a ``{...}`` group. Inside a group a backslash escapes the
following character, so ``\\}`` does not close the group. Argument content is
returned verbatim; escapes are not removed.
"""

from __future__ import annotations

from collections.abc import Iterator


def find_close_brace(text: str, start: int = 0) -> int | None:
    """Return the index of the first unescaped ``}`` at or after *start*.

    Examples:
        >>> find_close_brace("{漢字}")
        3
        >>> find_close_brace("{a\\\\}b}")
        5
        >>> find_close_brace("{open") is None
        True
    """
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "}":
            return index
    return None


class ArgumentReader:
    """Cursor extracting consecutive ``{...}`` groups from a fixed offset.

    The head only moves forward on a successful read, so a failed read leaves
    the reader exactly where it was.
    """

    def __init__(self, text: str, head: int = 0) -> None:
        self._text = text
        self.head = head

    def next(self) -> str | None:
        """Read the group at the head, or return None without moving."""
        text = self._text
        if not text.startswith("{", self.head):
            return None
        end = find_close_brace(text, self.head + 1)
        if end is None:
            return None
        arg = text[self.head + 1 : end]
        self.head = end + 1
        return arg

    def read_exactly(self, count: int) -> tuple[str, ...] | None:
        """Read exactly *count* groups.

        Fails when fewer groups are readable or when one more complete group
        immediately follows them. The head is restored on failure.
        """
        origin = self.head
        args: list[str] = []
        for _ in range(count):
            arg = self.next()
            if arg is None:
                self.head = origin
                return None
            args.append(arg)

        before_extra = self.head
        if self.next() is not None:
            self.head = origin
            return None
        self.head = before_extra
        return tuple(args)

    @property
    def remaining(self) -> str:
        return self._text[self.head :]

    def __iter__(self) -> Iterator[str]:
        while True:
            arg = self.next()
            if arg is None:
                return
            yield arg
