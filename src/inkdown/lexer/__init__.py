"""Lexer package for inkdown.

Turns Markdown source into a flat stream of TEXT and SYMBOL tokens.
"""

from inkdown.lexer.core import Lexer, tokenize

__all__ = ["Lexer", "tokenize"]
