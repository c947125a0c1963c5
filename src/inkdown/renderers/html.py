"""HTML renderer for the inkdown AST.

A pure recursive walk with ``match`` dispatch: no I/O, no tree mutation.

Output rules:
- ``Text`` → its content, verbatim
- ``ThematicBreak`` → ``<hr>``
- ``Link`` → ``<a href="url">label</a>``
- ``Image`` → ``<img src="url" alt="alt">``
- ``TableCell`` → ``<th>`` or ``<td>`` by ``is_header``
- every other tagged node → ``<tag>children</tag>``
- ``Document`` → children concatenated, no wrapper, no separators
- anything unrecognised → ``""``

Literal text is NOT escaped by default: the editor preview owns the string
it injects. Pass ``escape=True`` when rendering untrusted input.

Thread Safety:
HtmlRenderer holds only its immutable options. Multiple threads can share a
single instance and call render() concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable

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
from inkdown.utils.logger import get_logger
from inkdown.utils.text import escape_html

logger = get_logger(__name__)


class HtmlRenderer:
    """Render AST nodes to HTML.

    Usage:
        >>> from inkdown import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>'

    """

    __slots__ = ("_escape",)

    def __init__(self, *, escape: bool = False) -> None:
        """Initialize renderer.

        Args:
            escape: Escape ``& < > "`` in text and attribute values
        """
        self._escape = escape

    def render(self, node: Node) -> str:
        """Render a Document (or any single node) to an HTML string."""
        return self._render_node(node)

    def _render_node(self, node: Node) -> str:
        match node:
            case Document():
                return self._render_all(node.children)
            case Text():
                return self._text(node.content)
            case ThematicBreak():
                return "<hr>"
            case Link():
                return f'<a href="{self._text(node.url)}">{self._render_all(node.children)}</a>'
            case Image():
                return f'<img src="{self._text(node.url)}" alt="{self._text(node.alt)}">'
            case TableCell():
                return self._wrap(node.tag, node.children)
            case BulletList() | OrderedList():
                return self._wrap(node.tag, node.items)
            case Table():
                return self._wrap(node.tag, node.rows)
            case TableRow():
                return self._wrap(node.tag, node.cells)
            case (
                Heading()
                | Paragraph()
                | Strong()
                | Emphasis()
                | Strikethrough()
                | ListItem()
                | BlockQuote()
            ):
                return self._wrap(node.tag, node.children)
            case _:
                logger.debug("No HTML rendering for %s; emitting nothing", type(node).__name__)
                return ""

    def _wrap(self, tag: str | None, children: Iterable[Node]) -> str:
        return f"<{tag}>{self._render_all(children)}</{tag}>"

    def _render_all(self, nodes: Iterable[Node]) -> str:
        return "".join(self._render_node(node) for node in nodes)

    def _text(self, value: str) -> str:
        return escape_html(value) if self._escape else value
