import logging
from dataclasses import dataclass, field
from typing import Any, List

from .layout_engine import HeaderLayout
from ..utils.cell_reference import cell_coordinate

logger = logging.getLogger(__name__)

EMPTY_HEADER_CELL = ''


@dataclass(frozen=True)
class MergeRange:
    start_cell: str
    end_cell: str

    @property
    def coordinate(self) -> str:
        return f"{self.start_cell}:{self.end_cell}"


@dataclass
class HeaderGrid:
    rows: List[List[Any]]
    merges: List[MergeRange] = field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def num_columns(self) -> int:
        return len(self.rows[0]) if self.rows else 0


def build_header_grid(layout: HeaderLayout, row_offset: int = 0) -> HeaderGrid:
    """
    Builds the header rows and merge ranges for a computed layout.

    Every node's title lands at (depth, start_index). Merges, per node and in
    this order:
      - column merge across the node's span when it covers more than one column
      - row merge from the node down to the last header row when it is a leaf
        that ends above that row

    Args:
        layout: Output of compute_layout.
        row_offset: Rows above the header; merge coordinates are shifted by it.
    """
    total_depth = layout.total_depth
    total_columns = layout.total_columns
    rows = [[EMPTY_HEADER_CELL] * total_columns for _ in range(total_depth)]
    merges: List[MergeRange] = []

    for node in layout.iter_nodes():
        rows[node.depth - 1][node.start_index - 1] = node.title

        start_row = node.depth + row_offset
        start_cell = cell_coordinate(node.start_index, start_row)

        if node.start_index != node.end_index:
            merges.append(MergeRange(start_cell, cell_coordinate(node.end_index, start_row)))

        if node.is_leaf and node.depth != total_depth:
            merges.append(MergeRange(start_cell, cell_coordinate(node.end_index, total_depth + row_offset)))

    logger.debug(f"Header grid {total_depth}x{total_columns} with {len(merges)} merges")
    return HeaderGrid(rows=rows, merges=merges)
