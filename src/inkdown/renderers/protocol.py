"""ASTRenderer protocol — stable interface for AST renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
``HtmlRenderer`` and ``PlainTextRenderer`` are the built-in implementations.

Example:
    from inkdown.renderers.protocol import ASTRenderer

    def preview(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from inkdown.nodes import Node


@runtime_checkable
class ASTRenderer(Protocol):
    """Protocol for AST renderers."""

    def render(self, node: Node) -> str:
        """Render an AST node (normally a Document) to a string."""
        ...
