"""Pipe table rows for inkdown.

Rows are first parsed as paragraphs. The aggregator decides which of them
form a table and calls back here to turn a row paragraph into a TableRow:

| Header 1 | Header 2 |   <- header row (th cells)
| -------- | -------- |   <- delimiter row (consumed, never stored)
| Cell 1   | Cell 2   |   <- body rows (td cells)

Each cell is tokenized and inline-parsed on its own, with token positions
pointing back into the original source.
"""

from __future__ import annotations

import dataclasses
import re
from typing import TYPE_CHECKING

from inkdown.lexer import Lexer
from inkdown.nodes import Block, Paragraph, TableCell, TableRow

if TYPE_CHECKING:
    from inkdown.tokens import Token

TABLE_ROW_PATTERN = re.compile(r"^\|.*\|$")
DELIMITER_ROW_PATTERN = re.compile(r"^\|(\s*-+\s*\|)+$")


def is_table_row(node: Block) -> bool:
    """True for an existing TableRow or a paragraph shaped like ``| ... |``."""
    if isinstance(node, TableRow):
        return True
    return isinstance(node, Paragraph) and bool(TABLE_ROW_PATTERN.match(node.source.strip()))


def is_delimiter_row(node: Block) -> bool:
    """True for a paragraph shaped like ``| --- | --- |``."""
    return isinstance(node, Paragraph) and bool(DELIMITER_ROW_PATTERN.match(node.source.strip()))


def split_cells(text: str) -> list[tuple[int, str]]:
    """Split a row into ``(position, cell text)`` pairs.

    The row is trimmed, one leading and one trailing ``|`` are dropped, the
    rest is split on ``|`` and each cell is trimmed. ``position`` is the
    index of the cell's first character in ``text``.

    Example:
        >>> split_cells("| a | **b** |")
        [(2, 'a'), (6, '**b**')]
    """
    lead = len(text) - len(text.lstrip())
    trimmed = text.strip()
    if trimmed.startswith("|"):
        trimmed = trimmed[1:]
        lead += 1
    if trimmed.endswith("|"):
        trimmed = trimmed[:-1]

    cells: list[tuple[int, str]] = []
    position = lead
    for raw in trimmed.split("|"):
        stripped = raw.strip()
        offset = len(raw) - len(raw.lstrip()) if stripped else 0
        cells.append((position + offset, stripped))
        position += len(raw) + 1
    return cells


class TableParsingMixin:
    """Mixin for turning row paragraphs into TableRow nodes.

    Required Host Methods:
        - _parse_inline(tokens) -> tuple[Inline, ...]

    """

    def _parse_table_row(self, node: Paragraph | TableRow, is_header: bool) -> TableRow:
        """Build a header (``th``) or body (``td``) row from a row node."""
        if isinstance(node, TableRow):
            return dataclasses.replace(
                node,
                is_header=is_header,
                cells=tuple(dataclasses.replace(cell, is_header=is_header) for cell in node.cells),
            )

        location = node.location
        cells = tuple(
            TableCell(
                location=cell_tokens[0].location.span_to(cell_tokens[-1].location)
                if cell_tokens
                else location,
                children=self._parse_inline(cell_tokens),
                is_header=is_header,
            )
            for cell_tokens in self._tokenize_cells(node)
        )
        return TableRow(location=location, cells=cells, is_header=is_header)

    def _tokenize_cells(self, node: Paragraph) -> list[list[Token]]:
        """Tokenize every cell of a row paragraph with absolute positions."""
        location = node.location
        return [
            list(
                Lexer(
                    text,
                    location.source_file,
                    lineno=location.lineno,
                    col=location.col_offset + position,
                    offset=location.offset + position,
                ).tokenize()
            )
            for position, text in split_cells(node.source)
        ]
