"""Tests for the HTML ruby renderer."""

from __future__ import annotations

from rubyfilter.domain.ruby import Ruby
from rubyfilter.output.html import HtmlRenderer


def _render(ruby: Ruby, renderer: HtmlRenderer | None = None) -> str:
    return (renderer or HtmlRenderer()).render(ruby)


class TestHtmlRenderer:
    def test_two_groups(self) -> None:
        ruby = Ruby.from_groups(["漢", "字"], ["かん", "じ"])
        assert _render(ruby) == (
            "<ruby>漢<rp>（</rp><rt>かん</rt><rp>）</rp>字<rp>（</rp><rt>じ</rt><rp>）</rp></ruby>"
        )

    def test_one_group(self) -> None:
        ruby = Ruby.from_groups(["境界"], ["フロンティア"])
        assert _render(ruby) == "<ruby>境界<rp>（</rp><rt>フロンティア</rt><rp>）</rp></ruby>"

    def test_custom_parens(self) -> None:
        ruby = Ruby.from_groups(["鶏"], ["にわとり"])
        renderer = HtmlRenderer(open_paren="(", close_paren=")")
        assert _render(ruby, renderer) == "<ruby>鶏<rp>(</rp><rt>にわとり</rt><rp>)</rp></ruby>"

    def test_render_into_appends(self) -> None:
        parts = ["before"]
        HtmlRenderer().render_into(Ruby.from_groups(["a"], ["b"]), parts)
        assert parts[0] == "before"
        assert parts[1] == "<ruby>"
        assert parts[-1] == "</ruby>"

    def test_group_text_is_verbatim(self) -> None:
        ruby = Ruby.from_groups(["<b>A</b>"], ["a"])
        assert _render(ruby).startswith("<ruby><b>A</b><rp>")
