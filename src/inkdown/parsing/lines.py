"""Line segmentation of the token stream.

Block syntax is line-oriented, tokens are not: one TEXT token can carry
several newlines. This module regroups tokens into lines so the block parser
can classify each line on its own.

Thread Safety:
Pure function over an immutable token sequence.

"""

from __future__ import annotations

from collections.abc import Iterable

from inkdown.tokens import Token


def split_into_lines(tokens: Iterable[Token]) -> list[list[Token]]:
    """Group tokens into source lines.

    A TEXT token containing ``\\n`` is split on it: the first piece finishes
    the line in progress, every interior piece is a line of its own, and the
    last piece starts the next line. Empty pieces are never materialised, so
    a blank source line is an empty list. Other tokens are appended to the
    line in progress, which is emitted at the end only if non-empty.

    Example:
        >>> from inkdown.lexer import tokenize
        >>> [[t.value for t in line] for line in split_into_lines(tokenize("a\\n\\n# b"))]
        [['a'], [], ['#', ' b']]
    """
    lines: list[list[Token]] = []
    current: list[Token] = []

    for token in tokens:
        if not (token.is_text and "\n" in token.value):
            current.append(token)
            continue

        start = 0
        end = token.value.find("\n")
        while end != -1:
            if end > start:
                current.append(token.slice(start, end))
            lines.append(current)
            current = []
            start = end + 1
            end = token.value.find("\n", start)

        if start < len(token.value):
            current.append(token.slice(start))

    if current:
        lines.append(current)

    return lines


def line_text(tokens: Iterable[Token]) -> str:
    """Literal text of a token run."""
    return "".join(token.value for token in tokens)
