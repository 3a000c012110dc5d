"""Command scanner: find the next registered ``\\name{...}`` command.

Pure functions over an immutable string. Scanning is restartable from any
offset and never mutates its input.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from rubyfilter.domain.arguments import ArgumentReader
from rubyfilter.domain.arity import DEFAULT_ARITY_TABLE, ArityTable

logger = logging.getLogger(__name__)

# Backslash followed by ASCII letters; any other character ends the name.
_COMMAND_NAME_PATTERN = re.compile(r"\\([A-Za-z]+)")


@dataclass(frozen=True)
class Command:
    """A registered command together with its raw arguments."""

    name: str
    args: tuple[str, ...]


@dataclass(frozen=True)
class CommandMatch:
    """One successful scan over *text* starting at *origin*."""

    text: str
    origin: int
    start: int  # index of the backslash
    end: int  # index just past the last closing brace
    command: Command

    @property
    def prefix(self) -> str:
        return self.text[self.origin : self.start]

    @property
    def source(self) -> str:
        return self.text[self.start : self.end]

    @property
    def suffix(self) -> str:
        return self.text[self.end :]


def match_command_name(text: str, pos: int = 0) -> tuple[str, int] | None:
    """Parse a command name at *pos*.

    Returns ``(name, end)`` where *end* is the index just past the name, or
    None when *pos* does not hold a backslash followed by a letter.

    Examples:
        >>> match_command_name("\\\\ruby{漢字}{かんじ}")
        ('ruby', 5)
        >>> match_command_name("\\\\ruby2")
        ('ruby', 5)
        >>> match_command_name("\\\\{") is None
        True
    """
    match = _COMMAND_NAME_PATTERN.match(text, pos)
    if match is None:
        return None
    return match.group(1), match.end()


class CommandScanner:
    """Find the first valid occurrence of a registered command."""

    def __init__(self, table: ArityTable = DEFAULT_ARITY_TABLE) -> None:
        self.table = table

    def scan(self, text: str, start: int = 0) -> CommandMatch | None:
        """Scan *text* from *start* for the first registered command.

        Unregistered names and registered names with the wrong number of
        arguments are left as text; scanning then resumes one character past
        the backslash.
        """
        pos = text.find("\\", start)
        while pos != -1:
            found = self._match_at(text, pos)
            if found is not None:
                command, end = found
                return CommandMatch(text=text, origin=start, start=pos, end=end, command=command)
            pos = text.find("\\", pos + 1)
        return None

    def _match_at(self, text: str, pos: int) -> tuple[Command, int] | None:
        parsed = match_command_name(text, pos)
        if parsed is None:
            return None
        name, name_end = parsed

        arity = self.table.lookup(name)
        if arity is None:
            return None

        reader = ArgumentReader(text, name_end)
        args = reader.read_exactly(arity)
        if args is None:
            logger.debug("Rejected \\%s at offset %d: expected %d argument(s)", name, pos, arity)
            return None
        return Command(name=name, args=args), reader.head
