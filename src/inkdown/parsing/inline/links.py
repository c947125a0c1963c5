"""Link and image detection for inkdown inline parsing.

Links and images live inside TEXT tokens (``[``, ``]``, ``(``, ``)`` and
``!`` are not symbols), so they are found with a regex over the token's
text. A match splits the token into ``[text before, node, remainder]``; the
remainder goes back on the parser's work queue and is scanned again.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from inkdown.nodes import Image, Inline, Link, Text

if TYPE_CHECKING:
    from inkdown.config import ParseConfig
    from inkdown.tokens import Token

IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]*)\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")


def find_media(text: str, *, links: bool = True, images: bool = True) -> re.Match[str] | None:
    """Find the earliest image or link in ``text``.

    An image wins a tie; since ``![`` starts one character before the
    ``[`` of its embedded link pattern, the image match is also the
    earlier one whenever both describe the same span.

    Example:
        >>> find_media("see [docs](/d) and ![x](y.png)").group(0)
        '[docs](/d)'
    """
    image = IMAGE_PATTERN.search(text) if images else None
    link = LINK_PATTERN.search(text) if links else None
    if image is None:
        return link
    if link is None or image.start() <= link.start():
        return image
    return link


class LinkParsingMixin:
    """Mixin for ``[label](url)`` and ``![alt](url)`` spans.

    Required Host Attributes:
        - _config: ParseConfig

    """

    _config: ParseConfig

    def _split_media(self, token: Token) -> tuple[list[Inline], Token | None] | None:
        """Split one TEXT token at its first link or image.

        Returns:
            ``(nodes, remainder)`` where ``nodes`` holds the text before the
            match (if any) followed by the Link/Image node, and ``remainder``
            is a new token for the unconsumed tail (None when nothing is
            left). Returns None when the token contains no link or image.
        """
        config = self._config
        match = find_media(token.value, links=config.links, images=config.images)
        if match is None:
            return None

        nodes: list[Inline] = []
        start, end = match.span()
        if start > 0:
            before = token.slice(0, start)
            nodes.append(Text(location=before.location, content=before.value))

        matched = token.slice(start, end)
        if match.re is IMAGE_PATTERN:
            nodes.append(Image(location=matched.location, url=match.group(2), alt=match.group(1)))
        else:
            label = token.slice(start + 1, start + 1 + len(match.group(1)))
            nodes.append(
                Link(
                    location=matched.location,
                    url=match.group(2),
                    children=(Text(location=label.location, content=label.value),),
                )
            )

        remainder = token.slice(end) if end < len(token.value) else None
        return nodes, remainder
