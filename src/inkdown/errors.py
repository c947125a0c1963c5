"""Exception classes for inkdown.

Markdown input never raises: malformed syntax degrades to literal text or
plain paragraphs. These exceptions cover misuse of the library itself.
"""

from __future__ import annotations


class InkdownError(Exception):
    """Base exception for all inkdown errors."""

    pass


class ConfigError(InkdownError, ValueError):
    """Invalid ParseConfig value."""

    pass


class SerializationError(InkdownError):
    """A serialized tree could not be turned back into AST nodes.

    Raised by ``from_dict``/``from_json`` for unknown node types or
    missing fields.
    """

    def __init__(self, message: str, node_type: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the problem
            node_type: The offending ``type`` value, when known
        """
        self.node_type = node_type
        prefix = f"Node '{node_type}': " if node_type else ""
        super().__init__(f"{prefix}{message}")
