"""Tests for the command arity table."""

from __future__ import annotations

import pytest

from rubyfilter.domain.arity import DEFAULT_ARITY_TABLE, ArityTable


class TestArityTable:
    def test_default_registers_ruby(self) -> None:
        assert DEFAULT_ARITY_TABLE.lookup("ruby") == 2

    def test_default_has_only_ruby(self) -> None:
        assert DEFAULT_ARITY_TABLE.names() == ["ruby"]

    def test_unknown_name(self) -> None:
        assert DEFAULT_ARITY_TABLE.lookup("rb") is None

    def test_lookup_is_case_sensitive(self) -> None:
        assert DEFAULT_ARITY_TABLE.lookup("Ruby") is None

    def test_first_entry_shadows_later_duplicates(self) -> None:
        table = ArityTable([("ruby", 2), ("ruby", 1)])
        assert table.lookup("ruby") == 2
        assert table.names() == ["ruby"]

    def test_contains(self) -> None:
        assert "ruby" in DEFAULT_ARITY_TABLE
        assert "foo" not in DEFAULT_ARITY_TABLE
        assert 42 not in DEFAULT_ARITY_TABLE

    def test_iteration_preserves_order(self) -> None:
        table = ArityTable([("b", 1), ("a", 0)])
        assert list(table) == [("b", 1), ("a", 0)]

    def test_rejects_non_letter_names(self) -> None:
        with pytest.raises(ValueError, match="ASCII letters"):
            ArityTable([("ruby2", 2)])

    def test_rejects_non_ascii_names(self) -> None:
        with pytest.raises(ValueError):
            ArityTable([("ルビ", 2)])

    def test_rejects_negative_arity(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            ArityTable([("ruby", -1)])
