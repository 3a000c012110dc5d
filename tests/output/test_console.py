"""Tests for the Rich console factory."""

from __future__ import annotations

from rubyfilter.output.console import create_console, get_output, style_for_kind


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("鶏")
        assert get_output(console) == "鶏\n"

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_kind_styles(self) -> None:
        assert style_for_kind("annotation") == "rf.kind.annotation"
        assert style_for_kind("unknown") == ""
