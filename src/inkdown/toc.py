"""Table of contents extraction.

Walks a parsed Document and collects its headings in document order. Each
entry carries an anchor slug; repeated heading texts get ``-1``, ``-2`` ...
suffixes so every slug in one table of contents is unique.

Example:
    >>> from inkdown import parse
    >>> toc = table_of_contents(parse("# Intro\\n## Setup\\n## Setup"))
    >>> [item.slug for item in toc.items]
    ['intro', 'setup', 'setup-1']
    >>> toc.max_depth, toc.total
    (2, 3)

"""

from dataclasses import dataclass

from inkdown.nodes import Document, Heading
from inkdown.renderers.text import PlainTextRenderer
from inkdown.utils.text import slugify
from inkdown.visitor import BaseVisitor


@dataclass(frozen=True, slots=True)
class TocItem:
    """One heading in the table of contents.

    Attributes:
        text: Visible heading text (markup removed)
        level: Heading level (1-3)
        slug: Unique anchor id within the document
        position: Character offset of the heading in the source

    """

    text: str
    level: int
    slug: str
    position: int


@dataclass(frozen=True, slots=True)
class TableOfContents:
    """Headings of a document, in order."""

    items: tuple[TocItem, ...]

    @property
    def max_depth(self) -> int:
        """Deepest heading level present (0 when there are no headings)."""
        return max((item.level for item in self.items), default=0)

    @property
    def total(self) -> int:
        return len(self.items)


class _HeadingCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.items: list[TocItem] = []
        self._seen: dict[str, int] = {}
        self._text = PlainTextRenderer()

    def visit_heading(self, node: Heading) -> None:
        text = self._text.render(node)
        self.items.append(
            TocItem(
                text=text,
                level=node.level,
                slug=self._unique(slugify(text) or "section"),
                position=node.location.offset,
            )
        )

    def _unique(self, slug: str) -> str:
        count = self._seen.get(slug, 0)
        self._seen[slug] = count + 1
        if count == 0:
            return slug
        candidate = f"{slug}-{count}"
        while candidate in self._seen:
            count += 1
            candidate = f"{slug}-{count}"
        self._seen[candidate] = 1
        self._seen[slug] = count + 1
        return candidate


def table_of_contents(doc: Document) -> TableOfContents:
    """Collect the headings of ``doc`` into a TableOfContents."""
    collector = _HeadingCollector()
    collector.visit(doc)
    return TableOfContents(items=tuple(collector.items))
