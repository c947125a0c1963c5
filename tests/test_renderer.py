"""Tests for the HTML and plain-text renderers."""

import logging

import pytest

from inkdown import parse
from inkdown.location import SourceLocation
from inkdown.nodes import (
    Document,
    Image,
    Link,
    Node,
    Paragraph,
    TableCell,
    Text,
    ThematicBreak,
)
from inkdown.renderers import ASTRenderer, HtmlRenderer, PlainTextRenderer

LOC = SourceLocation(lineno=1, col_offset=1)


def _text(content: str) -> Text:
    return Text(location=LOC, content=content)


class TestHtmlRendererNodes:
    """Rendering hand-built nodes."""

    def test_text_verbatim(self) -> None:
        assert HtmlRenderer().render(_text("a < b")) == "a < b"

    def test_thematic_break(self) -> None:
        assert HtmlRenderer().render(ThematicBreak(location=LOC)) == "<hr>"

    def test_link(self) -> None:
        link = Link(location=LOC, url="/x", children=(_text("go"),))
        assert HtmlRenderer().render(link) == '<a href="/x">go</a>'

    def test_image(self) -> None:
        image = Image(location=LOC, url="a.png", alt="pic")
        assert HtmlRenderer().render(image) == '<img src="a.png" alt="pic">'

    @pytest.mark.parametrize(("is_header", "tag"), [(True, "th"), (False, "td")])
    def test_table_cell(self, is_header: bool, tag: str) -> None:
        cell = TableCell(location=LOC, children=(_text("c"),), is_header=is_header)
        assert HtmlRenderer().render(cell) == f"<{tag}>c</{tag}>"

    def test_document_has_no_wrapper(self) -> None:
        doc = Document(
            location=LOC,
            children=(
                Paragraph(location=LOC, children=(_text("a"),)),
                ThematicBreak(location=LOC),
            ),
        )
        assert HtmlRenderer().render(doc) == "<p>a</p><hr>"

    def test_empty_document(self) -> None:
        assert HtmlRenderer().render(Document(location=LOC, children=())) == ""

    def test_unknown_node_renders_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="inkdown")
        assert HtmlRenderer().render(Node(location=LOC)) == ""
        assert any("No HTML rendering" in r.getMessage() for r in caplog.records)


class TestHtmlRendererDocuments:
    """Rendering parsed documents."""

    def test_headings(self) -> None:
        html = HtmlRenderer().render(parse("# a\n## b\n### c"))
        assert html == "<h1>a</h1><h2>b</h2><h3>c</h3>"

    def test_raw_html_passes_through(self) -> None:
        assert HtmlRenderer().render(parse("<b>x</b>")) == "<p><b>x</b></p>"

    def test_nested_inline(self) -> None:
        html = HtmlRenderer().render(parse("*a **b** ~~c~~*"))
        assert html == "<p><em>a <strong>b</strong> <del>c</del></em></p>"


class TestEscaping:
    """Opt-in escaping."""

    def test_text_escaped(self) -> None:
        html = HtmlRenderer(escape=True).render(parse("<b>x</b> & co"))
        assert html == "<p>&lt;b&gt;x&lt;/b&gt; &amp; co</p>"

    def test_attributes_escaped(self) -> None:
        link = Link(location=LOC, url='/"q"', children=(_text("x"),))
        assert HtmlRenderer(escape=True).render(link) == '<a href="/&quot;q&quot;">x</a>'

    def test_markup_not_escaped(self) -> None:
        assert HtmlRenderer(escape=True).render(parse("**a**")) == "<p><strong>a</strong></p>"


class TestPlainTextRenderer:
    """Visible text extraction."""

    def test_strips_markup(self) -> None:
        text = PlainTextRenderer().render(parse("# Title\n- **a** b\n---"))
        assert text == "Title\na b"

    def test_image_alt_and_link_label(self) -> None:
        text = PlainTextRenderer().render(parse("see ![pic](a.png) and [docs](/d)"))
        assert text == "see pic and docs"

    def test_table_cells_space_joined(self) -> None:
        text = PlainTextRenderer().render(parse("| a | b |\n| - | - |\n| 1 | 2 |"))
        assert text == "a b\n1 2"

    def test_quote_lines_concatenate(self) -> None:
        assert PlainTextRenderer().render(parse("> a\n> b")) == "ab"


def test_renderers_satisfy_protocol() -> None:
    assert isinstance(HtmlRenderer(), ASTRenderer)
    assert isinstance(PlainTextRenderer(), ASTRenderer)
