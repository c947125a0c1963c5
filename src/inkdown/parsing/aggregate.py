"""Block aggregation: merging runs of raw line nodes into containers.

The block parser yields one node (or None for a blank line) per source
line. This pass folds an explicit AggregationState over that sequence:

- consecutive ListItems of one type become a BulletList / OrderedList;
  a type change starts a sibling list,
- a header row, a delimiter row and one or more body rows become a Table,
- consecutive BlockQuote lines become one BlockQuote.

A blank line, or a node belonging to another run, closes whatever is open.
Table candidates that never get a delimiter row and a body row are released
unchanged as the paragraphs they were parsed as.

Thread Safety:
The state is created per call and threaded through explicitly; nothing is
stored on module or instance level.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from inkdown.nodes import (
    Block,
    BlockQuote,
    BulletList,
    ListItem,
    ListType,
    OrderedList,
    Paragraph,
    Table,
    TableRow,
)
from inkdown.parsing.blocks.table import is_delimiter_row, is_table_row
from inkdown.utils.logger import get_logger

logger = get_logger(__name__)

type RowParser = Callable[[Paragraph | TableRow, bool], TableRow]


@dataclass(slots=True)
class AggregationState:
    """Accumulators carried across one aggregation pass.

    At most one of the three slots (list, table, quote) is open at a time;
    opening one closes the others, which keeps ``output`` in source order.

    """

    output: list[Block] = field(default_factory=list)

    list_type: ListType | None = None
    list_items: list[ListItem] = field(default_factory=list)

    # Original row nodes, released as-is if the table never materialises
    table_held: list[Paragraph | TableRow] = field(default_factory=list)
    table_rows: list[TableRow] = field(default_factory=list)
    delimiter_seen: bool = False

    quote_lines: list[BlockQuote] = field(default_factory=list)


def process_nodes(
    nodes: Iterable[Block | None],
    parse_row: RowParser,
    *,
    tables: bool = True,
) -> list[Block]:
    """Aggregate raw line nodes into the final block sequence.

    Args:
        nodes: One entry per source line; None marks a blank line
        parse_row: Builds a TableRow from a row node (``is_header`` flag second)
        tables: Whether pipe-table rows are grouped at all

    Returns:
        Top-level blocks for the Document
    """
    state = AggregationState()
    for node in nodes:
        fold(state, node, parse_row, tables=tables)
    close_all(state)
    return state.output


def fold(
    state: AggregationState,
    node: Block | None,
    parse_row: RowParser,
    *,
    tables: bool = True,
) -> None:
    """Feed one line's node into the state."""
    match node:
        case None:
            close_all(state)
        case ListItem():
            _close_table(state)
            _close_quote(state)
            _add_list_item(state, node)
        case BlockQuote():
            _close_list(state)
            _close_table(state)
            state.quote_lines.append(node)
        case Paragraph() | TableRow() if tables and is_table_row(node):
            _close_list(state)
            _close_quote(state)
            _add_table_row(state, node, parse_row)
        case _:
            close_all(state)
            state.output.append(node)


def close_all(state: AggregationState) -> None:
    _close_list(state)
    _close_table(state)
    _close_quote(state)


def _add_list_item(state: AggregationState, item: ListItem) -> None:
    if state.list_items and state.list_type != item.list_type:
        _close_list(state)
    state.list_type = item.list_type
    state.list_items.append(item)


def _close_list(state: AggregationState) -> None:
    if not state.list_items:
        return
    items = tuple(state.list_items)
    location = items[0].location.span_to(items[-1].location)
    if state.list_type == "ordered":
        state.output.append(OrderedList(location=location, items=items))
    else:
        state.output.append(BulletList(location=location, items=items))
    state.list_items = []
    state.list_type = None


def _add_table_row(
    state: AggregationState, node: Paragraph | TableRow, parse_row: RowParser
) -> None:
    if not state.table_held:
        if is_delimiter_row(node):
            # Delimiter without a header: not a table
            state.output.append(node)
            return
        state.table_held.append(node)
        state.table_rows.append(parse_row(node, True))
        return

    if not state.delimiter_seen:
        if is_delimiter_row(node):
            state.table_held.append(node)
            state.delimiter_seen = True
            return
        # Header not confirmed; this row becomes the new candidate
        _close_table(state)
        _add_table_row(state, node, parse_row)
        return

    state.table_held.append(node)
    state.table_rows.append(parse_row(node, False))


def _close_table(state: AggregationState) -> None:
    if not state.table_held:
        return
    held = state.table_held
    if state.delimiter_seen and len(state.table_rows) > 1:
        location = held[0].location.span_to(held[-1].location)
        state.output.append(Table(location=location, rows=tuple(state.table_rows)))
    else:
        logger.debug(
            "Table candidate at %s released: delimiter=%s, body rows=%d",
            held[0].location,
            state.delimiter_seen,
            max(len(state.table_rows) - 1, 0),
        )
        state.output.extend(held)
    state.table_held = []
    state.table_rows = []
    state.delimiter_seen = False


def _close_quote(state: AggregationState) -> None:
    if not state.quote_lines:
        return
    lines = state.quote_lines
    location = lines[0].location.span_to(lines[-1].location)
    children = tuple(child for line in lines for child in line.children)
    state.output.append(BlockQuote(location=location, children=children))
    state.quote_lines = []
