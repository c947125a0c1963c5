"""Symbol-oriented lexer with O(n) guaranteed performance.

The lexer does not know about lines or blocks. It splits the source into
structural symbols and the text between them; the segmenter and the block
parser recover everything else.

Scanning rules:
- ``#``, ``*`` and ``~`` start a symbol.
- ``**`` and ``~~`` pair greedily into one two-character symbol.
- ``#`` never pairs: ``###`` is three single-``#`` symbols.
- Any maximal run of other characters is one TEXT token.

The scan is total. Every ``str`` produces a token stream whose values
concatenate back to the source.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from inkdown.tokens import Token, TokenType

SYMBOL_CHARS = frozenset("#*~")
PAIRING_CHARS = frozenset("*~")


class Lexer:
    """Single-pass lexer over a Markdown source string.

    Usage:
        >>> lexer = Lexer("# Hi **there**")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(SYMBOL, '#', 1:1)
        Token(TEXT, ' Hi ', 1:2)
        Token(SYMBOL, '**', 1:6)
        Token(TEXT, 'there', 1:8)
        Token(SYMBOL, '**', 1:13)

    The ``lineno``, ``col`` and ``offset`` arguments position the first
    character of ``source``; they let a caller tokenize a fragment (such as a
    table cell) while keeping absolute locations.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_base_offset",
        "_source_file",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        *,
        lineno: int = 1,
        col: int = 1,
        offset: int = 0,
    ) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = lineno
        self._col = col
        self._base_offset = offset
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        source_len = self._source_len
        while self._pos < source_len:
            if self._source[self._pos] in SYMBOL_CHARS:
                yield self._scan_symbol()
            else:
                yield self._scan_text()

    def _scan_symbol(self) -> Token:
        """Scan one symbol, pairing ``**`` and ``~~``."""
        char = self._source[self._pos]
        end = self._pos + 1
        if char in PAIRING_CHARS and end < self._source_len and self._source[end] == char:
            end += 1
        return self._commit(TokenType.SYMBOL, end)

    def _scan_text(self) -> Token:
        """Scan a maximal run of non-symbol characters."""
        end = self._pos
        source = self._source
        source_len = self._source_len
        while end < source_len and source[end] not in SYMBOL_CHARS:
            end += 1
        return self._commit(TokenType.TEXT, end)

    def _commit(self, token_type: TokenType, end: int) -> Token:
        """Emit a token for ``source[pos:end]`` and advance past it."""
        value = self._source[self._pos : end]
        token = Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._base_offset + self._pos,
            _end_offset=self._base_offset + end,
            _source_file=self._source_file,
        )

        newlines = value.count("\n")
        if newlines:
            self._lineno += newlines
            self._col = len(value) - value.rfind("\n")
        else:
            self._col += len(value)
        self._pos = end
        return token


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize Markdown source into a list of tokens.

    Example:
        >>> [t.value for t in tokenize("~~a~~ #")]
        ['~~', 'a', '~~', ' ', '#']
    """
    return list(Lexer(source, source_file).tokenize())
