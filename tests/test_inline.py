"""Tests for inline parsing: emphasis, links, images and literal text."""

import logging

import pytest

from inkdown import ParseConfig, parse, parse_config_context
from inkdown.nodes import Emphasis, Image, Link, Strikethrough, Strong, Text
from inkdown.parsing.inline.links import find_media


def _inlines(source: str):  # type: ignore[no-untyped-def]
    """Inline children of the single paragraph ``source`` parses to."""
    doc = parse(source)
    assert len(doc.children) == 1
    return doc.children[0].children


def _texts(nodes) -> list[str]:  # type: ignore[no-untyped-def]
    return [n.content for n in nodes if isinstance(n, Text)]


class TestEmphasis:
    """Delimiter matching."""

    @pytest.mark.parametrize(
        ("source", "node_class"),
        [("**a**", Strong), ("*a*", Emphasis), ("~~a~~", Strikethrough)],
    )
    def test_simple_span(self, source: str, node_class: type) -> None:
        (node,) = _inlines(source)
        assert isinstance(node, node_class)
        assert _texts(node.children) == ["a"]

    def test_span_followed_by_text(self) -> None:
        strong, rest = _inlines("**a** b")
        assert isinstance(strong, Strong)
        assert rest == Text(location=rest.location, content=" b")

    def test_nested_spans(self) -> None:
        (em,) = _inlines("*a **b** c*")
        assert isinstance(em, Emphasis)
        first, strong, last = em.children
        assert first.content == "a "
        assert isinstance(strong, Strong)
        assert _texts(strong.children) == ["b"]
        assert last.content == " c"

    def test_unmatched_opener_is_literal(self) -> None:
        nodes = _inlines("**a")
        assert all(isinstance(n, Text) for n in nodes)
        assert "".join(_texts(nodes)) == "**a"

    def test_unmatched_opener_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="inkdown")
        _inlines("~~a")
        assert any("Unmatched" in r.getMessage() for r in caplog.records)

    def test_single_tilde_is_literal(self) -> None:
        assert "".join(_texts(_inlines("~a~"))) == "~a~"

    def test_mismatched_delimiters_do_not_pair(self) -> None:
        """``**`` only closes on ``**``; a single ``*`` is a different delimiter."""
        nodes = _inlines("**a*")
        assert not any(isinstance(n, Strong | Emphasis) for n in nodes)

    def test_triple_star(self) -> None:
        strong, tail = _inlines("x ***a***")[1:]
        assert isinstance(strong, Strong)
        assert _texts(strong.children) == ["*", "a"]
        assert tail.content == "*"

    def test_span_location_covers_delimiters(self) -> None:
        (strong,) = _inlines("**ab**")
        assert strong.location.span == (0, 6)

    def test_disabled_bold_is_literal(self) -> None:
        with parse_config_context(ParseConfig(bold=False)):
            nodes = _inlines("**a**")
        assert "".join(_texts(nodes)) == "**a**"


class TestLinksAndImages:
    """Regex-detected media inside text tokens."""

    def test_link(self) -> None:
        (link,) = _inlines("[docs](/d)")
        assert isinstance(link, Link)
        assert link.url == "/d"
        assert _texts(link.children) == ["docs"]

    def test_link_label_location(self) -> None:
        (link,) = _inlines("[docs](/d)")
        assert link.location.span == (0, 10)
        assert link.children[0].location.span == (1, 5)

    def test_image_between_text(self) -> None:
        before, image, after = _inlines("see ![x](y.png) now")
        assert before.content == "see "
        assert image == Image(location=image.location, url="y.png", alt="x")
        assert after.content == " now"

    def test_two_links_in_one_token(self) -> None:
        first, second = _inlines("[a](b)[c](d)")
        assert (first.url, second.url) == ("b", "d")

    def test_link_inside_emphasis(self) -> None:
        (strong,) = _inlines("**[a](b)**")
        assert isinstance(strong, Strong)
        assert isinstance(strong.children[0], Link)

    def test_empty_label_and_url(self) -> None:
        (link,) = _inlines("[]()")
        assert link.url == ""
        assert _texts(link.children) == [""]

    def test_unclosed_bracket_is_text(self) -> None:
        assert _texts(_inlines("[a](b")) == ["[a](b"]

    def test_links_disabled(self) -> None:
        with parse_config_context(ParseConfig(links=False)):
            assert _texts(_inlines("[a](b)")) == ["[a](b)"]

    def test_images_disabled_leaves_bang_before_link(self) -> None:
        with parse_config_context(ParseConfig(images=False)):
            bang, link = _inlines("![a](b)")
        assert bang.content == "!"
        assert isinstance(link, Link)


class TestFindMedia:
    """Earliest match selection."""

    def test_earliest_wins(self) -> None:
        match = find_media("see [docs](/d) and ![x](y.png)")
        assert match is not None
        assert match.group(0) == "[docs](/d)"

    def test_image_wins_over_embedded_link(self) -> None:
        match = find_media("![x](y)")
        assert match is not None
        assert match.group(0) == "![x](y)"

    def test_no_match(self) -> None:
        assert find_media("plain") is None
