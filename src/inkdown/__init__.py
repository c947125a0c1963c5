"""
inkdown — Markdown to HTML for a live-preview editor

Turns a small, line-oriented Markdown dialect into a typed, immutable AST
and renders it to HTML. Every input string produces output: unmatched
syntax degrades to literal text instead of raising.

Quick Start:
    >>> from inkdown import parse, render
    >>> render(parse("# Hello **World**"))
    '<h1>Hello <strong>World</strong></h1>'

    >>> # Or use the high-level Markdown class
    >>> from inkdown import Markdown
    >>> md = Markdown()
    >>> md("- one\\n- two")
    '<ul><li>one</li><li>two</li></ul>'

Pipeline:
    source → tokenize → tokens → parse → Document → render → HTML

Installation:
    pip install inkdown              # zero runtime dependencies
"""

from collections.abc import Iterable, Sequence

from inkdown.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from inkdown.errors import ConfigError, InkdownError, SerializationError
from inkdown.incremental import ContentChange, Position, apply_changes
from inkdown.incremental import parse_incremental as _parse_incremental
from inkdown.lexer import Lexer
from inkdown.lexer import tokenize as _tokenize
from inkdown.location import SourceLocation
from inkdown.nodes import (
    Block,
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
from inkdown.parser import Parser
from inkdown.parser import parse as _parse_tokens
from inkdown.renderers.html import HtmlRenderer
from inkdown.renderers.protocol import ASTRenderer
from inkdown.renderers.text import PlainTextRenderer
from inkdown.result import DocumentMeta, DocumentStatistics, ParseResult, analyze
from inkdown.serialization import from_dict, from_json, to_dict, to_json
from inkdown.tokens import Token, TokenType
from inkdown.toc import TableOfContents, TocItem, table_of_contents
from inkdown.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def tokenize(markdown: str) -> list[Token]:
    """Split Markdown source into TEXT and SYMBOL tokens.

    Example:
        >>> [t.value for t in tokenize("**bold** text")]
        ['**', 'bold', '**', ' text']
    """
    if not isinstance(markdown, str):
        msg = f"tokenize() expects str, got {type(markdown).__name__}"
        raise TypeError(msg)
    return _tokenize(markdown)


def parse(
    tokens_or_markdown: str | Iterable[Token],
    *,
    source_file: str | None = None,
) -> Document:
    """Parse tokens (or Markdown source, as a convenience) into a Document.

    Configuration comes from the current context; see ``parse_config_context``.

    Args:
        tokens_or_markdown: Output of ``tokenize`` or a Markdown string
        source_file: Optional source file path for locations

    Raises:
        TypeError: The argument is neither a string nor a token sequence.

    Example:
        >>> doc = parse("# Title")
        >>> doc.children[0].level
        1
    """
    if isinstance(tokens_or_markdown, str):
        return _parse_tokens(
            _tokenize(tokens_or_markdown, source_file=source_file), source_file=source_file
        )
    if not isinstance(tokens_or_markdown, Iterable):
        msg = f"parse() expects str or tokens, got {type(tokens_or_markdown).__name__}"
        raise TypeError(msg)
    tokens = list(tokens_or_markdown)
    for token in tokens:
        if not isinstance(token, Token):
            msg = f"parse() expects Token items, got {type(token).__name__}"
            raise TypeError(msg)
    return _parse_tokens(tokens, source_file=source_file)


def render(ast_or_markdown: Document | str, *, escape: bool = False) -> str:
    """Render a Document (or Markdown source) to HTML.

    Raises:
        TypeError: The argument is neither a Document nor a string.

    Example:
        >>> render("---")
        '<hr>'
    """
    if isinstance(ast_or_markdown, str):
        ast_or_markdown = parse(ast_or_markdown)
    if not isinstance(ast_or_markdown, Document):
        msg = f"render() expects Document or str, got {type(ast_or_markdown).__name__}"
        raise TypeError(msg)
    return HtmlRenderer(escape=escape).render(ast_or_markdown)


def supported_features(config: ParseConfig | None = None) -> tuple[str, ...]:
    """Names of the Markdown features enabled by ``config``.

    Uses the configuration of the current context when ``config`` is None.

    Example:
        >>> "tables" in supported_features(ParseConfig(tables=False))
        False
    """
    return (config or get_parse_config()).enabled_features()


class Markdown:
    """High-level Markdown processor combining tokenizer, parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("*hi*")
        '<p><em>hi</em></p>'

        >>> # Access the AST
        >>> md.to_ast("## Heading").children[0].level
        2

        >>> # Turn features off
        >>> Markdown(config=ParseConfig(headings=False))("# not a heading")
        '<p># not a heading</p>'

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, config: ParseConfig | None = None, escape: bool = False) -> None:
        """Initialize Markdown processor.

        Args:
            config: Feature switches (defaults to everything enabled)
            escape: Escape literal text and attribute values in HTML output
        """
        self._config = config or ParseConfig()
        self._renderer = HtmlRenderer(escape=escape)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, markdown: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(markdown)

    def to_tokens(self, markdown: str) -> list[Token]:
        return tokenize(markdown)

    def to_ast(self, markdown: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source into a Document under this instance's config.

        Thread Safety:
            Sets config via ContextVar (thread-local) and restores the
            caller's config afterwards. Safe for concurrent use.

        """
        with parse_config_context(self._config):
            return parse(markdown, source_file=source_file)

    def render(self, markdown: str) -> str:
        return self._renderer.render(self.to_ast(markdown))

    def parse_result(self, markdown: str) -> ParseResult:
        """Parse and render, returning the HTML with its AST and metadata."""
        doc = self.to_ast(markdown)
        return ParseResult(html=self._renderer.render(doc), meta=analyze(doc), ast=doc)

    def parse_incremental(
        self, markdown: str, changes: Sequence[ContentChange] = ()
    ) -> ParseResult:
        """Re-parse after an edit.

        ``markdown`` is the full text after ``changes`` were applied. The
        result is identical to ``parse_result(markdown)``.
        """
        with parse_config_context(self._config):
            doc = _parse_incremental(markdown, changes)
        return ParseResult(html=self._renderer.render(doc), meta=analyze(doc), ast=doc)

    def table_of_contents(self, markdown: str) -> TableOfContents:
        return table_of_contents(self.to_ast(markdown))

    def supported_features(self) -> tuple[str, ...]:
        return supported_features(self._config)


__all__ = [
    # Version
    "__version__",
    # Pipeline
    "tokenize",
    "parse",
    "render",
    "supported_features",
    "Markdown",
    # Lexer / parser / renderers
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "PlainTextRenderer",
    "ASTRenderer",
    # Tokens and locations
    "Token",
    "TokenType",
    "SourceLocation",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "InkdownError",
    "ConfigError",
    "SerializationError",
    # Results, TOC and editing
    "ParseResult",
    "DocumentMeta",
    "DocumentStatistics",
    "analyze",
    "TableOfContents",
    "TocItem",
    "table_of_contents",
    "ContentChange",
    "Position",
    "apply_changes",
    # AST tooling
    "BaseVisitor",
    "transform",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Heading",
    "Paragraph",
    "BulletList",
    "OrderedList",
    "ListItem",
    "BlockQuote",
    "ThematicBreak",
    "Table",
    "TableRow",
    "TableCell",
    "Text",
    "Strong",
    "Emphasis",
    "Strikethrough",
    "Link",
    "Image",
]
