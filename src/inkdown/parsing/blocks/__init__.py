"""Block parsing package for inkdown.

Modules:
    core: BlockParsingMixin, one line of tokens → one raw block node
    table: TableParsingMixin, row paragraphs → TableRow nodes
"""

from inkdown.parsing.blocks.core import BlockParsingMixin
from inkdown.parsing.blocks.table import TableParsingMixin

__all__ = ["BlockParsingMixin", "TableParsingMixin"]
