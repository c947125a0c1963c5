"""Inline parsing package for inkdown.

Modules:
    core: InlineParsingMixin, the work-queue scanner
    links: Link and image detection inside text tokens
    emphasis: Delimiter matching for bold, italic and strikethrough
"""

from inkdown.parsing.inline.core import InlineParsingMixin

__all__ = ["InlineParsingMixin"]
