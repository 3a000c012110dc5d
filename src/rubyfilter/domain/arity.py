"""Arity table: registered command names and their argument counts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class ArityTable:
    """Ordered ``name -> arity`` mapping.

    Lookup returns the first matching entry, so a later duplicate is shadowed
    by an earlier one.

    Examples:
        >>> ArityTable([("ruby", 2)]).lookup("ruby")
        2
        >>> ArityTable([("ruby", 2)]).lookup("rb") is None
        True
    """

    def __init__(self, entries: Iterable[tuple[str, int]]) -> None:
        self._entries: tuple[tuple[str, int], ...] = tuple(entries)
        for name, arity in self._entries:
            if not name.isascii() or not name.isalpha():
                msg = f"Command name must be ASCII letters: {name!r}"
                raise ValueError(msg)
            if arity < 0:
                msg = f"Arity must not be negative: {name}={arity}"
                raise ValueError(msg)

    def lookup(self, name: str) -> int | None:
        for entry_name, arity in self._entries:
            if entry_name == name:
                return arity
        return None

    def names(self) -> list[str]:
        """Registered names in declaration order, without duplicates."""
        return list(dict.fromkeys(name for name, _ in self._entries))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"ArityTable({list(self._entries)!r})"


DEFAULT_ARITY_TABLE = ArityTable([("ruby", 2)])
