"""Source positions attached to tokens and AST nodes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token or node came from in the Markdown source.

    ``lineno`` and ``col_offset`` are 1-indexed. ``offset`` and
    ``end_offset`` are absolute character positions, half-open, so
    ``source[loc.offset:loc.end_offset]`` is the covered text.

    Examples:
        >>> loc = SourceLocation(lineno=2, col_offset=3, offset=10, end_offset=14)
        >>> str(loc)
        '2:3'
        >>> str(SourceLocation(1, 1, source_file="notes.md"))
        'notes.md:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` character range."""
        return (self.offset, self.end_offset)

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Return a location running from the start of self to the end of ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes that have no source text."""
        return cls(lineno=0, col_offset=0)
