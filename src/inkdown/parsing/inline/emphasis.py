"""Emphasis delimiter matching for inkdown inline parsing.

Matching is first-occurrence only: an opener pairs with the nearest later
SYMBOL token carrying the identical delimiter. There is no delimiter stack,
no flanking rules and no backtracking. An opener without a closer is
literal text.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from inkdown.nodes import Emphasis, Strikethrough, Strong

if TYPE_CHECKING:
    from inkdown.config import ParseConfig
    from inkdown.tokens import Token

# Delimiter -> (node class, ParseConfig switch)
DELIMITERS: dict[str, tuple[type[Strong | Emphasis | Strikethrough], str]] = {
    "**": (Strong, "bold"),
    "*": (Emphasis, "italic"),
    "~~": (Strikethrough, "strikethrough"),
}


class EmphasisMixin:
    """Mixin for ``**``, ``*`` and ``~~`` spans.

    Required Host Attributes:
        - _config: ParseConfig

    """

    _config: ParseConfig

    def _emphasis_class(self, token: Token) -> type[Strong | Emphasis | Strikethrough] | None:
        """Node class opened by ``token``, or None if it is not an active delimiter."""
        if not token.is_symbol:
            return None
        entry = DELIMITERS.get(token.value)
        if entry is None:
            return None
        node_class, switch = entry
        return node_class if getattr(self._config, switch) else None

    def _find_closer(self, opener: Token, candidates: Iterable[Token]) -> int | None:
        """Index in ``candidates`` of the first symbol equal to ``opener``."""
        for index, token in enumerate(candidates):
            if token.is_symbol and token.value == opener.value:
                return index
        return None
