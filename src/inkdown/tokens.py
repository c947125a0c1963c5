"""Token and TokenType definitions for the inkdown lexer.

The lexer produces a flat stream of Token objects. Only two kinds exist:
structural symbols (``#``, ``*``, ``**``, ``~``, ``~~``) and runs of
ordinary text. Line structure is recovered later by the segmenter.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most tokens never have their location read during parsing.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from inkdown.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # Maximal run of non-symbol characters
    SYMBOL = auto()  # #, *, **, ~, ~~


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The raw string value from source
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from inkdown.location import SourceLocation

        end_lineno, end_col = self._advance(self.value)
        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=end_lineno,
            end_col_offset=end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` offsets into the source."""
        return (self._start_offset, self._end_offset)

    @property
    def is_symbol(self) -> bool:
        return self.type is TokenType.SYMBOL

    @property
    def is_text(self) -> bool:
        return self.type is TokenType.TEXT

    def slice(self, start: int, end: int | None = None) -> Token:
        """Return a new token covering ``value[start:end]``.

        Offsets and line/column are recomputed so the piece still points at
        the right place in the source. The original token is untouched.
        """
        if end is None:
            end = len(self.value)
        lineno, col = self._advance(self.value[:start])
        return Token(
            type=self.type,
            value=self.value[start:end],
            _lineno=lineno,
            _col=col,
            _start_offset=self._start_offset + start,
            _end_offset=self._start_offset + end,
            _source_file=self._source_file,
        )

    def _advance(self, consumed: str) -> tuple[int, int]:
        """Line/column reached after ``consumed`` starting from this token."""
        newlines = consumed.count("\n")
        if not newlines:
            return self._lineno, self._col + len(consumed)
        return self._lineno + newlines, len(consumed) - consumed.rfind("\n")
