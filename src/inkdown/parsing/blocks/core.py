"""Line-level block classification for inkdown.

Each source line becomes at most one raw block node. Classification is
first-match-wins:

1. exactly ``---`` / ``***``    → ThematicBreak
2. ``> ``                       → BlockQuote (one line's worth)
3. ``- `` / ``* ``              → bullet ListItem
4. ``1. ``                      → ordered ListItem
5. leading ``#`` symbol tokens  → Heading
6. anything else                → Paragraph

A disabled feature (see ParseConfig) skips its rule. Table rows are not
recognised here; they stay paragraphs until the aggregator looks at them.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from inkdown.nodes import (
    Block,
    BlockQuote,
    Heading,
    ListItem,
    Paragraph,
    ThematicBreak,
)
from inkdown.parsing.lines import line_text

if TYPE_CHECKING:
    from inkdown.config import ParseConfig
    from inkdown.location import SourceLocation
    from inkdown.tokens import Token

THEMATIC_BREAKS = frozenset({"---", "***"})
QUOTE_PREFIX = "> "
BULLET_PREFIXES = ("- ", "* ")
BULLET_MARKER = re.compile(r"^[-*]\s+")
ORDERED_PROBE = re.compile(r"^\d+\.\s")
ORDERED_MARKER = re.compile(r"^\d+\.\s+")


def drop_chars(tokens: Sequence[Token], count: int) -> list[Token]:
    """Remove the first ``count`` characters from a token run.

    Tokens wholly inside the dropped prefix disappear; a token straddling
    the boundary is replaced by its tail.

    Example:
        >>> from inkdown.lexer import tokenize
        >>> [t.value for t in drop_chars(tokenize("* **a**"), 2)]
        ['**', 'a', '**']
    """
    result: list[Token] = []
    for token in tokens:
        size = len(token.value)
        if count >= size:
            count -= size
            continue
        result.append(token.slice(count) if count else token)
        count = 0
    return result


def _lstrip_tokens(tokens: Sequence[Token]) -> Iterator[Token]:
    """Drop leading whitespace-only text from a token run."""
    stripping = True
    for token in tokens:
        if stripping and token.is_text:
            stripped = token.value.lstrip()
            if not stripped:
                continue
            if len(stripped) != len(token.value):
                token = token.slice(len(token.value) - len(stripped))
        stripping = False
        yield token


def line_location(line: Sequence[Token]) -> SourceLocation:
    """Location spanning a whole non-empty line."""
    return line[0].location.span_to(line[-1].location)


class BlockParsingMixin:
    """Mixin that classifies one line of tokens.

    Required Host Attributes:
        - _config: ParseConfig

    Required Host Methods:
        - _parse_inline(tokens) -> tuple[Inline, ...]

    """

    _config: ParseConfig

    def _parse_line(self, line: Sequence[Token]) -> Block | None:
        """Classify one line into a raw block node.

        Returns None for an empty line. Blank lines carry no node of their
        own but still end list, table and quote runs during aggregation.
        """
        if not line:
            return None

        config = self._config
        text = line_text(line)
        location = line_location(line)

        if config.horizontal_rules and text in THEMATIC_BREAKS:
            return ThematicBreak(location=location)

        if config.blockquotes and text.startswith(QUOTE_PREFIX):
            return BlockQuote(
                location=location,
                children=self._parse_inline(drop_chars(line, len(QUOTE_PREFIX))),
            )

        if config.bullet_lists and text.startswith(BULLET_PREFIXES):
            marker = BULLET_MARKER.match(text)
            return self._list_item(line, marker.end() if marker else 0, "bullet", location)

        if config.ordered_lists and ORDERED_PROBE.match(text):
            marker = ORDERED_MARKER.match(text)
            return self._list_item(line, marker.end() if marker else 0, "ordered", location)

        if config.headings and line[0].is_symbol and line[0].value.startswith("#"):
            return self._parse_heading(line, location)

        return Paragraph(location=location, children=self._parse_inline(line), source=text)

    def _list_item(
        self,
        line: Sequence[Token],
        marker_length: int,
        list_type: str,
        location: SourceLocation,
    ) -> ListItem:
        return ListItem(
            location=location,
            children=self._parse_inline(drop_chars(line, marker_length)),
            list_type=list_type,  # type: ignore[arg-type]
        )

    def _parse_heading(self, line: Sequence[Token], location: SourceLocation) -> Heading:
        """Build a heading from leading ``#`` symbols.

        The level is the number of leading ``#`` symbol tokens, clamped to
        ``max_heading_level``: ``#`` → 1, ``##`` → 2, ``#####`` → 3.
        """
        count = 0
        while count < len(line) and line[count].is_symbol and line[count].value == "#":
            count += 1

        level = min(count, self._config.max_heading_level)
        content = list(_lstrip_tokens(line[count:]))
        return Heading(
            location=location,
            level=level,  # type: ignore[arg-type]
            children=self._parse_inline(content),
        )
