"""HTML rendering of ruby annotations.

Produces ``<ruby>`` fragments with ``<rp>`` fallback parentheses for
browsers that cannot lay out ruby text::

    <ruby>漢<rp>（</rp><rt>かん</rt><rp>）</rp>字<rp>（</rp><rt>じ</rt><rp>）</rp></ruby>
"""

from __future__ import annotations

from rubyfilter.domain.ruby import Ruby

DEFAULT_OPEN_PAREN = "（"
DEFAULT_CLOSE_PAREN = "）"


class HtmlRenderer:
    """Render a :class:`Ruby` as an HTML ruby element.

    Group text is written verbatim. The fallback parentheses are
    configurable for targets that prefer ASCII or no parentheses at all.
    """

    def __init__(
        self,
        open_paren: str = DEFAULT_OPEN_PAREN,
        close_paren: str = DEFAULT_CLOSE_PAREN,
    ) -> None:
        self.open_paren = open_paren
        self.close_paren = close_paren

    def render(self, ruby: Ruby) -> str:
        parts: list[str] = []
        self.render_into(ruby, parts)
        return "".join(parts)

    def render_into(self, ruby: Ruby, parts: list[str]) -> None:
        """Append the rendered fragment of *ruby* to *parts*."""
        parts.append("<ruby>")
        for base, reading in ruby.pairs():
            parts.append(base)
            parts.append(f"<rp>{self.open_paren}</rp>")
            parts.append(f"<rt>{reading}</rt>")
            parts.append(f"<rp>{self.close_paren}</rp>")
        parts.append("</ruby>")

    def __repr__(self) -> str:
        return f"HtmlRenderer(open_paren={self.open_paren!r}, close_paren={self.close_paren!r})"
