"""Plain-text renderer — the visible text of a document.

No markup. One line per block, list item and table row; table cells are
separated by a single space. Images contribute their alt text, horizontal
rules contribute nothing. Used for word counts and search snippets.

Example:
    >>> from inkdown import parse
    >>> PlainTextRenderer().render(parse("# Title\\n- **a** b\\n---"))
    'Title\\na b'
"""

from inkdown.nodes import (
    BlockQuote,
    BulletList,
    Document,
    Emphasis,
    Heading,
    Image,
    Inline,
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


class PlainTextRenderer:
    """Render AST nodes to plain text."""

    __slots__ = ()

    def render(self, node: Node) -> str:
        return "\n".join(line for line in self._lines(node) if line)

    def _lines(self, node: Node) -> list[str]:
        match node:
            case Document():
                return [line for child in node.children for line in self._lines(child)]
            case BulletList() | OrderedList():
                return [line for item in node.items for line in self._lines(item)]
            case Table():
                return [line for row in node.rows for line in self._lines(row)]
            case TableRow():
                return [" ".join(self._inline_text(cell.children) for cell in node.cells)]
            case Heading() | Paragraph() | ListItem() | BlockQuote() | TableCell():
                return [self._inline_text(node.children)]
            case ThematicBreak():
                return []
            case _:
                return [self._inline_text((node,))]  # type: ignore[arg-type]

    def _inline_text(self, inlines: tuple[Inline, ...]) -> str:
        parts: list[str] = []
        for inline in inlines:
            match inline:
                case Text():
                    parts.append(inline.content)
                case Strong() | Emphasis() | Strikethrough() | Link():
                    parts.append(self._inline_text(inline.children))
                case Image():
                    parts.append(inline.alt)
                case _:
                    pass
        return "".join(parts)
