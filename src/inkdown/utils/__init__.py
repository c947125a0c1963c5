"""Utility modules for inkdown.

Provides:
- text: slugify, escape_html for text processing
- logger: get_logger for logging
"""

from inkdown.utils.logger import get_logger
from inkdown.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
