import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..columns.models import HeaderColumn
from ..columns.tree import ColumnTree

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_WIDTH = 40


@dataclass
class LayoutNode:
    """Grid position of one header column. Indices and depth are 1-based, end_index inclusive."""
    column: HeaderColumn
    start_index: int
    end_index: int
    depth: int
    children_length: int
    width: float

    @property
    def title(self):
        return self.column.title

    @property
    def is_leaf(self) -> bool:
        return self.column.is_leaf


@dataclass
class HeaderLayout:
    total_depth: int
    merged_columns: List[List[LayoutNode]] = field(default_factory=list)

    @property
    def total_columns(self) -> int:
        """Number of leaf columns, summed over the top-level nodes."""
        if not self.merged_columns:
            return 0
        return sum(node.children_length for node in self.merged_columns[0])

    def iter_nodes(self):
        for level in self.merged_columns:
            yield from level


def count_leaves(column: HeaderColumn) -> int:
    """Number of leaf columns under ``column``; a leaf counts itself."""
    if column.is_leaf:
        return 1
    return sum(count_leaves(child) for child in column.children)


def _node_width(column: HeaderColumn, column_width: float) -> float:
    width = column.width
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        return column_width
    derived = math.floor(width / 5) if width > 0 else 0
    return derived if derived > 0 else column_width


def compute_layout(
    columns: Sequence[HeaderColumn],
    column_width: float = DEFAULT_COLUMN_WIDTH,
    tree: Optional[ColumnTree] = None,
) -> HeaderLayout:
    """
    Breadth-first layout of the header tree.

    Walks one level at a time. Within a level a node starts right after the
    previous node when both share a parent (or are both top-level); the first
    child of a group starts where the group starts.

    Args:
        columns: Top-level header columns.
        column_width: Nominal width used when a column has no usable width.
        tree: Parent links for ``columns``. Built here when not given.

    Returns:
        HeaderLayout with the number of header rows and the nodes of each row.
    """
    tree = tree or ColumnTree(columns)
    layout_by_id: Dict[int, LayoutNode] = {}
    merged_columns: List[List[LayoutNode]] = []

    queue: List[HeaderColumn] = list(columns)
    next_queue: List[HeaderColumn] = []
    depth = 0

    while queue:
        level: List[LayoutNode] = []
        merged_columns.append(level)
        previous: Optional[HeaderColumn] = None

        for column in queue:
            last_node = level[-1] if level else None
            start_by_previous = last_node.end_index + 1 if last_node else 1
            parent = tree.parent_of(column)

            if parent is None:
                start_index = start_by_previous
            elif previous is not None and tree.parent_of(previous) is parent:
                start_index = start_by_previous
            else:
                start_index = layout_by_id[id(parent)].start_index

            children_length = count_leaves(column)
            node = LayoutNode(
                column=column,
                start_index=start_index,
                end_index=start_index + max(children_length - 1, 0),
                depth=depth + 1,
                children_length=children_length,
                width=_node_width(column, column_width),
            )
            level.append(node)
            layout_by_id[id(column)] = node
            previous = column

            if not column.is_leaf:
                next_queue.extend(column.children)

        logger.debug(
            f"Header level {depth + 1}: "
            f"{[(n.title, n.start_index, n.end_index) for n in level]}"
        )

        if not next_queue:
            break
        queue, next_queue = next_queue, []
        depth += 1

    return HeaderLayout(total_depth=depth + 1, merged_columns=merged_columns)
