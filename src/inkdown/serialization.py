"""AST serialization — JSON round-trip for inkdown AST nodes.

Nodes serialize to the editor's node shape::

    {"type": "heading", "tag": "h1", "level": 1,
     "children": [{"type": "text", "value": "Hi", ...}], "location": {...}}

Keys are present only where meaningful: ``value`` (text), ``level``
(heading), ``listType`` (lists and items), ``url``/``alt`` (links and
images), ``isHeader`` (table rows and cells), ``source`` (paragraphs).
List, table and row containers put their items under ``children``.

JSON output uses sorted keys, so equal trees give identical strings.

Example:
    from inkdown import parse
    from inkdown.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import asdict
from typing import Any

from inkdown.errors import SerializationError
from inkdown.location import SourceLocation
from inkdown.nodes import (
    BlockQuote,
    BulletList,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)

# Registry of node kinds to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        Text,
        Strong,
        Emphasis,
        Strikethrough,
        BulletList,
        OrderedList,
        ListItem,
        Link,
        Image,
        BlockQuote,
        ThematicBreak,
        Table,
        TableRow,
        TableCell,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node (recursively) to a JSON-compatible dict."""
    data: dict[str, Any] = {"type": node.kind, "location": asdict(node.location)}
    if node.tag is not None:
        data["tag"] = node.tag

    match node:
        case Text():
            data["value"] = node.content
        case Heading():
            data["level"] = node.level
            data["children"] = [to_dict(c) for c in node.children]
        case Paragraph():
            data["children"] = [to_dict(c) for c in node.children]
            if node.source:
                data["source"] = node.source
        case ListItem():
            data["listType"] = node.list_type
            data["children"] = [to_dict(c) for c in node.children]
        case BulletList() | OrderedList():
            data["listType"] = node.list_type
            data["children"] = [to_dict(item) for item in node.items]
        case Link():
            data["url"] = node.url
            data["children"] = [to_dict(c) for c in node.children]
        case Image():
            data["url"] = node.url
            data["alt"] = node.alt
        case Table():
            data["children"] = [to_dict(row) for row in node.rows]
        case TableRow():
            data["isHeader"] = node.is_header
            data["children"] = [to_dict(cell) for cell in node.cells]
        case TableCell():
            data["isHeader"] = node.is_header
            data["children"] = [to_dict(c) for c in node.children]
        case Document() | Strong() | Emphasis() | Strikethrough() | BlockQuote():
            data["children"] = [to_dict(c) for c in node.children]
        case ThematicBreak():
            pass
    return data


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild an AST node from a dict produced by ``to_dict``.

    Raises:
        SerializationError: Unknown ``type`` or a required key is missing.
    """
    kind = data.get("type")
    node_cls = _NODE_TYPES.get(kind) if isinstance(kind, str) else None
    if node_cls is None:
        raise SerializationError("unknown node type", node_type=str(kind))

    raw_location = data.get("location")
    location = SourceLocation(**raw_location) if raw_location else SourceLocation.unknown()

    try:
        children = tuple(from_dict(c) for c in data.get("children", ()))
        return _build(node_cls, data, location, children)
    except KeyError as exc:
        raise SerializationError(f"missing key {exc.args[0]!r}", node_type=kind) from exc


def _build(
    node_cls: type[Node],
    data: dict[str, Any],
    location: SourceLocation,
    children: tuple[Any, ...],
) -> Node:
    if node_cls is Text:
        return Text(location=location, content=data["value"])
    if node_cls is Heading:
        return Heading(location=location, level=data["level"], children=children)
    if node_cls is Paragraph:
        return Paragraph(location=location, children=children, source=data.get("source", ""))
    if node_cls is ListItem:
        return ListItem(location=location, children=children, list_type=data["listType"])
    if node_cls is BulletList or node_cls is OrderedList:
        return node_cls(location=location, items=children)  # type: ignore[call-arg]
    if node_cls is Link:
        return Link(location=location, url=data["url"], children=children)
    if node_cls is Image:
        return Image(location=location, url=data["url"], alt=data.get("alt", ""))
    if node_cls is Table:
        return Table(location=location, rows=children)
    if node_cls is TableRow:
        return TableRow(location=location, cells=children, is_header=data.get("isHeader", False))
    if node_cls is TableCell:
        return TableCell(
            location=location, children=children, is_header=data.get("isHeader", False)
        )
    if node_cls is ThematicBreak:
        return ThematicBreak(location=location)
    # Document, Strong, Emphasis, Strikethrough, BlockQuote
    return node_cls(location=location, children=children)  # type: ignore[call-arg]


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize an AST node to a deterministic JSON string."""
    return json.dumps(to_dict(node), sort_keys=True, ensure_ascii=False, indent=indent)


def from_json(text: str) -> Node:
    """Deserialize a JSON string produced by ``to_json``.

    Raises:
        SerializationError: The JSON is invalid or describes an unknown node.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise SerializationError("top-level JSON value must be an object")
    return from_dict(data)
