"""Text processing utilities for inkdown.

Example:
    >>> from inkdown.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import html as html_module
import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATOR_RUNS = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to a URL-safe anchor slug.

    Unicode word characters are kept so non-English headings still produce
    readable anchors.

    Examples:
        >>> slugify("Getting Started")
        'getting-started'
        >>> slugify("Q&A: what's new?")
        'qa-whats-new'
        >>> slugify("Café crème")
        'café-crème'
    """
    if not text:
        return ""
    text = html_module.unescape(text).lower().strip()
    text = _NON_WORD.sub("", text)
    text = _SEPARATOR_RUNS.sub(separator, text)
    return text.strip(separator)


def escape_html(text: str) -> str:
    """Escape ``& < > "`` for text content and double-quoted attributes.

    Examples:
        >>> escape_html('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")
