"""Parse results with document metadata.

``ParseResult`` bundles the rendered HTML, the AST it came from and a
``DocumentMeta`` summary (word count plus per-construct statistics), the
shape the editor preview consumes.

Example:
    >>> from inkdown import Markdown
    >>> result = Markdown().parse_result("# Hi\\n[a](b) and more")
    >>> result.meta.word_count, result.meta.statistics.links
    (4, 1)

"""

from dataclasses import dataclass

from inkdown.nodes import (
    BlockQuote,
    BulletList,
    Document,
    Heading,
    Image,
    Link,
    OrderedList,
    Table,
)
from inkdown.renderers.text import PlainTextRenderer
from inkdown.visitor import BaseVisitor


@dataclass(frozen=True, slots=True)
class DocumentStatistics:
    """Counts of structural constructs in a document."""

    headings: int = 0
    links: int = 0
    images: int = 0
    tables: int = 0
    lists: int = 0
    blockquotes: int = 0


@dataclass(frozen=True, slots=True)
class DocumentMeta:
    word_count: int
    statistics: DocumentStatistics


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Rendered output of one parse.

    Attributes:
        html: Rendered HTML
        meta: Word count and statistics
        ast: The Document the HTML was rendered from

    """

    html: str
    meta: DocumentMeta
    ast: Document


class _StatisticsCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts = {
            "headings": 0,
            "links": 0,
            "images": 0,
            "tables": 0,
            "lists": 0,
            "blockquotes": 0,
        }

    def visit_heading(self, node: Heading) -> None:
        self.counts["headings"] += 1

    def visit_link(self, node: Link) -> None:
        self.counts["links"] += 1

    def visit_image(self, node: Image) -> None:
        self.counts["images"] += 1

    def visit_table(self, node: Table) -> None:
        self.counts["tables"] += 1

    def visit_bullet_list(self, node: BulletList) -> None:
        self.counts["lists"] += 1

    def visit_ordered_list(self, node: OrderedList) -> None:
        self.counts["lists"] += 1

    def visit_block_quote(self, node: BlockQuote) -> None:
        self.counts["blockquotes"] += 1


def analyze(doc: Document) -> DocumentMeta:
    """Compute word count and statistics for a parsed document.

    Words are whitespace-separated runs of the document's visible text, so
    markup characters consumed by the parser are not counted.
    """
    collector = _StatisticsCollector()
    collector.visit(doc)
    words = PlainTextRenderer().render(doc).split()
    return DocumentMeta(
        word_count=len(words),
        statistics=DocumentStatistics(**collector.counts),
    )
