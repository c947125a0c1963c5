"""AST Visitor and Transformer for inkdown.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen ASTs.

Example — collect all links:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.urls: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.urls.append(node.url)

    collector = LinkCollector()
    collector.visit(doc)

Example — demote every heading:

    def demote(node: Node) -> Node:
        if isinstance(node, Heading):
            return dataclasses.replace(node, level=min(node.level + 1, 3))
        return node

    new_doc = transform(doc, demote)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from inkdown.nodes import (
    BlockQuote,
    BulletList,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)

# Name of the field holding each container's child nodes
CHILD_FIELDS: dict[type[Node], str] = {
    Document: "children",
    Heading: "children",
    Paragraph: "children",
    ListItem: "children",
    BlockQuote: "children",
    Strong: "children",
    Emphasis: "children",
    Strikethrough: "children",
    Link: "children",
    TableCell: "children",
    BulletList: "items",
    OrderedList: "items",
    Table: "rows",
    TableRow: "cells",
}


def child_nodes(node: Node) -> tuple[Node, ...]:
    """Direct children of ``node`` (empty for leaves)."""
    field_name = CHILD_FIELDS.get(type(node))
    if field_name is None:
        return ()
    return getattr(node, field_name)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        for child in child_nodes(node):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` override."""
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_bullet_list(self, node: BulletList) -> T:
        return self.visit_default(node)

    def visit_ordered_list(self, node: OrderedList) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_thematic_break(self, node: ThematicBreak) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_table_row(self, node: TableRow) -> T:
        return self.visit_default(node)

    def visit_table_cell(self, node: TableCell) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case BulletList():
                return self.visit_bullet_list(node)
            case OrderedList():
                return self.visit_ordered_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case ThematicBreak():
                return self.visit_thematic_break(node)
            case Table():
                return self.visit_table(node)
            case TableRow():
                return self.visit_table_row(node)
            case TableCell():
                return self.visit_table_cell(node)
            case Text():
                return self.visit_text(node)
            case Strong():
                return self.visit_strong(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case _:
                return self.visit_default(node)


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent with its new children. Return ``None`` from ``fn`` to remove a
    node. The root Document cannot be removed; returning None (or a
    non-Document) for it raises TypeError.

    The original tree is untouched.
    """
    result = _transform_node(doc, fn)
    if not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    field_name = CHILD_FIELDS.get(type(node))
    if field_name is not None:
        children = getattr(node, field_name)
        new_children = tuple(
            result for child in children if (result := _transform_node(child, fn)) is not None
        )
        if new_children != children:
            node = dataclasses.replace(node, **{field_name: new_children})
    return fn(node)
