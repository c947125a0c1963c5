"""Typed AST — build a table of contents and count links with a visitor."""

from inkdown import parse, table_of_contents
from inkdown.nodes import Link
from inkdown.visitor import BaseVisitor


class LinkCollector(BaseVisitor[None]):
    """Collect every link target in document order."""

    def __init__(self) -> None:
        self.urls: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.urls.append(node.url)


source = """# Introduction
Welcome to the [guide](/guide).

## Getting Started
- read the [install notes](/install)
- try the **examples**

### Installation
## Getting Started
"""

doc = parse(source)

print("Table of Contents:")
for item in table_of_contents(doc).items:
    indent = "  " * (item.level - 1)
    print(f"{indent}- {item.text} (#{item.slug})")

collector = LinkCollector()
collector.visit(doc)
print()
print("Links:", ", ".join(collector.urls))
