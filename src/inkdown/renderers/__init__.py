"""inkdown renderers.

Renderers convert typed AST nodes into output formats.

Available Renderers:
- HtmlRenderer: Renders AST to HTML
- PlainTextRenderer: Renders AST to its visible text

Thread Safety:
Renderers hold no per-render state. Safe for concurrent use.

"""

from inkdown.renderers.html import HtmlRenderer
from inkdown.renderers.protocol import ASTRenderer
from inkdown.renderers.text import PlainTextRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "PlainTextRenderer"]
