"""Inline parsing for inkdown.

Turns the token run of one line (or one table cell) into inline AST nodes.

Tokens are consumed from an explicit work queue. At each step the front
token is tried, in priority order, as:

a. an image, b. a link (both inside TEXT tokens; the unconsumed remainder
   is pushed back onto the front of the queue),
c. an emphasis opener (``**``, ``*``, ``~~``) with a matching closer later
   in the queue; the tokens in between are parsed recursively,
d. literal text.

Thread Safety:
All state is local to one ``_parse_inline`` call.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

from inkdown.nodes import Inline, Text
from inkdown.parsing.inline.emphasis import EmphasisMixin
from inkdown.parsing.inline.links import LinkParsingMixin
from inkdown.utils.logger import get_logger

if TYPE_CHECKING:
    from inkdown.tokens import Token

logger = get_logger(__name__)


class InlineParsingMixin(LinkParsingMixin, EmphasisMixin):
    """Mixin for inline content parsing.

    Required Host Attributes:
        - _config: ParseConfig

    """

    def _parse_inline(self, tokens: Iterable[Token]) -> tuple[Inline, ...]:
        """Parse a token run into inline nodes.

        Example:
            ``**a** [b](c)`` → ``(Strong(Text('a')), Text(' '), Link('c', Text('b')))``
        """
        queue: deque[Token] = deque(tokens)
        nodes: list[Inline] = []

        while queue:
            token = queue.popleft()

            if token.is_text:
                split = self._split_media(token)
                if split is not None:
                    media_nodes, remainder = split
                    nodes.extend(media_nodes)
                    if remainder is not None:
                        queue.appendleft(remainder)
                    continue

            node_class = self._emphasis_class(token)
            if node_class is not None:
                closer_index = self._find_closer(token, queue)
                if closer_index is not None:
                    inner = [queue.popleft() for _ in range(closer_index)]
                    closer = queue.popleft()
                    nodes.append(
                        node_class(
                            location=token.location.span_to(closer.location),
                            children=self._parse_inline(inner),
                        )
                    )
                    continue
                logger.debug("Unmatched %r delimiter at %s", token.value, token.location)

            if token.value:
                nodes.append(Text(location=token.location, content=token.value))

        return tuple(nodes)
