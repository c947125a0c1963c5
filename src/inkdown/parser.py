"""Line-oriented parser producing a typed AST.

Consumes the lexer's token stream and builds frozen dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (emphasis, links, images)
- `BlockParsingMixin`: One line → one raw block node
- `TableParsingMixin`: Row paragraphs → table rows

Pipeline inside ``Parser.parse``:
tokens → split_into_lines → _parse_line per line → process_nodes → blocks

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share AST across threads

"""

from __future__ import annotations

from collections.abc import Iterable

from inkdown.config import ParseConfig, get_parse_config
from inkdown.location import SourceLocation
from inkdown.nodes import Block, Document
from inkdown.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TableParsingMixin,
    process_nodes,
    split_into_lines,
)
from inkdown.tokens import Token
from inkdown.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
    TableParsingMixin,
):
    """Parser for one token stream.

    Usage:
        >>> from inkdown.lexer import tokenize
        >>> parser = Parser(tokenize("# Hello\\n- a\\n- b"))
        >>> [type(block).__name__ for block in parser.parse()]
        ['Heading', 'BulletList']

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = ("_tokens", "_source_file")

    def __init__(self, tokens: Iterable[Token], source_file: str | None = None) -> None:
        """Initialize parser with a token stream.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            tokens: Tokens from the lexer (consumed once)
            source_file: Optional source file path for locations
        """
        self._tokens: list[Token] = list(tokens)
        self._source_file = source_file

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Block]:
        """Parse the token stream into top-level blocks."""
        lines = split_into_lines(self._tokens)
        raw = [self._parse_line(line) for line in lines]
        blocks = process_nodes(raw, self._parse_table_row, tables=self._config.tables)
        logger.debug("Parsed %d lines into %d blocks", len(lines), len(blocks))
        return blocks

    def document_location(self) -> SourceLocation:
        """Location spanning every token, or an empty one at 1:1."""
        if not self._tokens:
            return SourceLocation(lineno=1, col_offset=1, source_file=self._source_file)
        return self._tokens[0].location.span_to(self._tokens[-1].location)


def parse(tokens: Iterable[Token], *, source_file: str | None = None) -> Document:
    """Parse a token stream into a Document.

    The AST is rebuilt from scratch on every call.

    Example:
        >>> from inkdown.lexer import tokenize
        >>> doc = parse(tokenize("**hi**"))
        >>> doc.children[0].children[0].kind
        'bold'
    """
    parser = Parser(tokens, source_file=source_file)
    blocks = parser.parse()
    return Document(location=parser.document_location(), children=tuple(blocks))
