"""Typed AST nodes for inkdown.

All AST nodes are frozen dataclasses with slots for:
- Type safety: the node set is closed, so ``match`` dispatch can be checked
- Immutability: safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document          kind "root"
│   ├── Heading           kind "heading"
│   ├── Paragraph         kind "paragraph"
│   ├── BulletList        kind "bullet_list"
│   ├── OrderedList       kind "ordered_list"
│   ├── ListItem          kind "list_item"
│   ├── BlockQuote        kind "blockquote"
│   ├── ThematicBreak     kind "hr"
│   ├── Table             kind "table"
│   ├── TableRow          kind "table_row"
│   └── TableCell         kind "table_cell"
└── Inline (inline elements)
    ├── Text              kind "text"
    ├── Strong            kind "bold"
    ├── Emphasis          kind "italic"
    ├── Strikethrough     kind "strikethrough"
    ├── Link              kind "link"
    └── Image             kind "image"

Every class carries ``kind`` (the variant name used by serialization and
the editor) and ``tag`` (the HTML element it renders to, or None).

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from inkdown.location import SourceLocation

type ListType = Literal["bullet", "ordered"]

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    kind: ClassVar[str] = "node"
    html_tag: ClassVar[str | None] = None

    location: SourceLocation

    @property
    def tag(self) -> str | None:
        """HTML element name this node renders to."""
        return self.html_tag


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content, emitted verbatim."""

    kind: ClassVar[str] = "text"

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text**
    HTML: <strong>text</strong>

    """

    kind: ClassVar[str] = "bold"
    html_tag: ClassVar[str | None] = "strong"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized (italic) text.

    Markdown: *text*
    HTML: <em>text</em>

    """

    kind: ClassVar[str] = "italic"
    html_tag: ClassVar[str | None] = "em"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Strikethrough (deleted) text.

    Markdown: ~~deleted~~
    HTML: <del>deleted</del>

    """

    kind: ClassVar[str] = "strikethrough"
    html_tag: ClassVar[str | None] = "del"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [label](url)
    HTML: <a href="url">label</a>

    The label is not inline-parsed; ``children`` is a single Text node.

    """

    kind: ClassVar[str] = "link"
    html_tag: ClassVar[str | None] = "a"

    url: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url)
    HTML: <img src="url" alt="alt">

    """

    kind: ClassVar[str] = "image"
    html_tag: ClassVar[str | None] = "img"

    url: str
    alt: str


type Inline = Text | Strong | Emphasis | Strikethrough | Link | Image


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading, levels 1 to 3.

    Markdown: # Heading
    HTML: <h1>Heading</h1>

    """

    kind: ClassVar[str] = "heading"

    level: Literal[1, 2, 3]
    children: tuple[Inline, ...]

    @property
    def tag(self) -> str:
        return f"h{self.level}"


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block (one source line).

    ``source`` keeps the literal line text. The aggregator uses it to
    recognise table rows, which are parsed as paragraphs first.

    """

    kind: ClassVar[str] = "paragraph"
    html_tag: ClassVar[str | None] = "p"

    children: tuple[Inline, ...]
    source: str = ""


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item, * item or 1. item
    HTML: <li>item</li>

    """

    kind: ClassVar[str] = "list_item"
    html_tag: ClassVar[str | None] = "li"

    children: tuple[Inline, ...]
    list_type: ListType = "bullet"


@dataclass(frozen=True, slots=True)
class BulletList(Node):
    """Unordered list: a run of consecutive bullet items."""

    kind: ClassVar[str] = "bullet_list"
    html_tag: ClassVar[str | None] = "ul"

    items: tuple[ListItem, ...]

    @property
    def list_type(self) -> ListType:
        return "bullet"


@dataclass(frozen=True, slots=True)
class OrderedList(Node):
    """Ordered list: a run of consecutive numbered items."""

    kind: ClassVar[str] = "ordered_list"
    html_tag: ClassVar[str | None] = "ol"

    items: tuple[ListItem, ...]

    @property
    def list_type(self) -> ListType:
        return "ordered"


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>quoted text</blockquote>

    Consecutive quote lines share one BlockQuote whose children are the
    concatenated inline content of every line.

    """

    kind: ClassVar[str] = "blockquote"
    html_tag: ClassVar[str | None] = "blockquote"

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or ***
    HTML: <hr>

    """

    kind: ClassVar[str] = "hr"
    html_tag: ClassVar[str | None] = "hr"


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell (th or td)."""

    kind: ClassVar[str] = "table_cell"

    children: tuple[Inline, ...]
    is_header: bool = False

    @property
    def tag(self) -> str:
        return "th" if self.is_header else "td"


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row.

    Markdown: | cell1 | cell2 |
    HTML: <tr><td>cell1</td><td>cell2</td></tr>

    """

    kind: ClassVar[str] = "table_row"
    html_tag: ClassVar[str | None] = "tr"

    cells: tuple[TableCell, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table.

    Markdown:
        | A | B |
        | - | - |
        | 1 | 2 |

    HTML: <table><tr><th>A</th>...</tr><tr><td>1</td>...</tr></table>

    The first row is always the header row; the delimiter row is consumed
    during aggregation and never stored.

    """

    kind: ClassVar[str] = "table"
    html_tag: ClassVar[str | None] = "table"

    rows: tuple[TableRow, ...]

    @property
    def head(self) -> TableRow | None:
        return self.rows[0] if self.rows else None

    @property
    def body(self) -> tuple[TableRow, ...]:
        return self.rows[1:]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    kind: ClassVar[str] = "root"

    children: tuple[Block, ...]


type Block = (
    Document
    | Heading
    | Paragraph
    | BulletList
    | OrderedList
    | ListItem
    | BlockQuote
    | ThematicBreak
    | Table
    | TableRow
    | TableCell
)
