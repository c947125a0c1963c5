"""Parsing stages for inkdown.

The Parser class composes these mixins; the segmenter and aggregator are
plain functions because they carry no configuration of their own.

Modules:
    lines: Token stream → per-line token groups
    inline: Inline span parsing (emphasis, links, images, text)
    blocks: Line classification and table rows
    aggregate: Merging list, table and quote runs into containers
"""

from inkdown.parsing.aggregate import AggregationState, process_nodes
from inkdown.parsing.blocks import BlockParsingMixin, TableParsingMixin
from inkdown.parsing.inline import InlineParsingMixin
from inkdown.parsing.lines import split_into_lines

__all__ = [
    "AggregationState",
    "BlockParsingMixin",
    "InlineParsingMixin",
    "TableParsingMixin",
    "process_nodes",
    "split_into_lines",
]
