"""Tests for the AST visitor and transform utilities."""

import dataclasses

import pytest

from inkdown import parse
from inkdown.location import SourceLocation
from inkdown.nodes import (
    Document,
    Heading,
    Link,
    Node,
    Paragraph,
    Strong,
    Text,
)
from inkdown.visitor import BaseVisitor, child_nodes, transform

LOC = SourceLocation(lineno=1, col_offset=1)

EVERYTHING = (
    "# h\n"
    "p **s** *e* ~~d~~ [l](u) ![i](j)\n"
    "- a\n"
    "1. b\n"
    "> q\n"
    "---\n"
    "| x |\n"
    "| - |\n"
    "| y |"
)


class KindCollector(BaseVisitor[None]):
    """Collects the kind of every visited node."""

    def __init__(self) -> None:
        self.kinds: list[str] = []

    def visit_default(self, node: Node) -> None:
        self.kinds.append(node.kind)


class TestVisitorDispatch:
    """Every node kind is reached."""

    def test_visits_all_kinds(self) -> None:
        collector = KindCollector()
        collector.visit(parse(EVERYTHING))
        assert set(collector.kinds) == {
            "root",
            "heading",
            "paragraph",
            "text",
            "bold",
            "italic",
            "strikethrough",
            "link",
            "image",
            "bullet_list",
            "ordered_list",
            "list_item",
            "blockquote",
            "hr",
            "table",
            "table_row",
            "table_cell",
        }

    def test_document_order(self) -> None:
        collector = KindCollector()
        collector.visit(parse("# a\nb"))
        assert collector.kinds == ["root", "heading", "text", "paragraph", "text"]

    def test_specific_override(self) -> None:
        class LinkCollector(BaseVisitor[None]):
            def __init__(self) -> None:
                self.urls: list[str] = []

            def visit_link(self, node: Link) -> None:
                self.urls.append(node.url)

        collector = LinkCollector()
        collector.visit(parse("[a](1)\n- [b](2)\n| [c](3) |\n| - |\n| x |"))
        assert collector.urls == ["1", "2", "3"]

    def test_visit_returns_dispatch_result(self) -> None:
        class Kind(BaseVisitor[str]):
            def visit_default(self, node: Node) -> str:
                return node.kind

        assert Kind().visit(parse("x")) == "root"


class TestChildNodes:
    """Uniform child access."""

    def test_leaf_has_no_children(self) -> None:
        assert child_nodes(Text(location=LOC, content="x")) == ()

    def test_list_items(self) -> None:
        (lst,) = parse("- a\n- b").children
        assert child_nodes(lst) == lst.items


class TestTransform:
    """Immutable bottom-up rewriting."""

    def test_identity_keeps_tree(self) -> None:
        doc = parse(EVERYTHING)
        assert transform(doc, lambda n: n) == doc

    def test_rewrite_text(self) -> None:
        doc = parse("# a\nb")

        def upper(node: Node) -> Node:
            if isinstance(node, Text):
                return dataclasses.replace(node, content=node.content.upper())
            return node

        new_doc = transform(doc, upper)
        assert new_doc.children[0].children[0].content == "A"
        assert new_doc.children[1].children[0].content == "B"
        assert doc.children[0].children[0].content == "a"

    def test_demote_headings(self) -> None:
        def demote(node: Node) -> Node:
            if isinstance(node, Heading):
                return dataclasses.replace(node, level=min(node.level + 1, 3))
            return node

        levels = [h.level for h in transform(parse("# a\n## b\n### c"), demote).children]
        assert levels == [2, 3, 3]

    def test_remove_nodes(self) -> None:
        doc = parse("**a** b")
        new_doc = transform(doc, lambda n: None if isinstance(n, Strong) else n)
        (para,) = new_doc.children
        assert isinstance(para, Paragraph)
        assert [c.content for c in para.children] == [" b"]

    def test_remove_list_items(self) -> None:
        def drop_a(node: Node) -> Node | None:
            if node.kind == "list_item" and node.children[0].content == "a":  # type: ignore[attr-defined]
                return None
            return node

        new_doc = transform(parse("- a\n- b"), drop_a)
        (lst,) = new_doc.children
        assert [item.children[0].content for item in lst.items] == ["b"]

    def test_cannot_remove_root(self) -> None:
        with pytest.raises(TypeError):
            transform(parse("x"), lambda n: None if isinstance(n, Document) else n)

    def test_unchanged_subtrees_are_shared(self) -> None:
        doc = parse("a\nb")
        new_doc = transform(doc, lambda n: n)
        assert new_doc.children[0] is doc.children[0]
