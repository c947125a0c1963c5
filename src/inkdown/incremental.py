"""Incremental parsing entry point for editors.

Editors report each keystroke batch as a list of ``ContentChange`` ranges.
``parse_incremental`` accepts that list so callers can switch to a
region-reparsing implementation without changing call sites; every call
currently reprocesses the full source, which is always correct.

``apply_changes`` rebuilds the new source from the old one for callers
that only kept the previous text.

Thread Safety:
    Both functions are pure — safe to call from any thread.

"""

from collections.abc import Sequence
from dataclasses import dataclass

from inkdown.lexer import tokenize
from inkdown.nodes import Document
from inkdown.parser import parse
from inkdown.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Position:
    """A point in the source, as the editor reports it.

    ``line`` and ``column`` are 0-based; ``offset`` is the 0-based character
    index from the start of the document and is the only field edits use.
    """

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class ContentChange:
    """Replacement of the source between ``start`` and ``end`` with ``text``."""

    start: Position
    end: Position
    text: str


def apply_changes(source: str, changes: Sequence[ContentChange]) -> str:
    """Apply ``changes`` to ``source`` by character offset.

    Changes are interpreted against the original ``source`` and applied from
    the last to the first, so earlier offsets stay valid. Offsets outside the
    source are clamped to its bounds.

    Example:
        >>> change = ContentChange(Position(0, 2, 2), Position(0, 7, 7), "Hi")
        >>> apply_changes("# Title", [change])
        '# Hi'
    """
    result = source
    for change in sorted(changes, key=lambda c: c.start.offset, reverse=True):
        start = min(max(change.start.offset, 0), len(result))
        end = min(max(change.end.offset, start), len(result))
        result = result[:start] + change.text + result[end:]
    return result


def parse_incremental(
    source: str,
    changes: Sequence[ContentChange] = (),
    *,
    source_file: str | None = None,
) -> Document:
    """Parse ``source`` (the text after the changes) into a Document.

    Args:
        source: The complete new source text.
        changes: Edits that produced ``source``; used for logging only.
        source_file: Optional source file path for location tracking.

    Returns:
        The same Document a full ``parse`` of ``source`` would produce.

    """
    if changes:
        logger.debug("Reparsing full document for %d change(s)", len(changes))
    return parse(tokenize(source, source_file=source_file), source_file=source_file)
