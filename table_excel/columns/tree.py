import logging
from typing import Dict, List, Optional, Sequence

from .models import HeaderColumn

logger = logging.getLogger(__name__)


class ColumnTree:
    """
    Parent links and leaf columns for one header tree.

    Parents are kept in a side map keyed by node identity, so the caller's
    column objects are never modified. Build a new ColumnTree for every
    export/import call.
    """

    def __init__(self, columns: Sequence[HeaderColumn]):
        self.columns = list(columns)
        self._parents: Dict[int, Optional[HeaderColumn]] = {}
        self.leaves: List[HeaderColumn] = []
        self._annotate(self.columns, None)
        logger.debug(f"Annotated header tree: {len(self._parents)} nodes, {len(self.leaves)} leaf columns")

    def _annotate(self, columns: Sequence[HeaderColumn], parent: Optional[HeaderColumn]) -> None:
        for column in columns:
            self._parents[id(column)] = parent
            if column.is_leaf:
                self.leaves.append(column)
            else:
                self._annotate(column.children, column)

    def parent_of(self, column: HeaderColumn) -> Optional[HeaderColumn]:
        """Returns the parent of ``column``, or None for a top-level column."""
        return self._parents.get(id(column))

    @property
    def max_depth(self) -> int:
        return get_max_level(self.columns)


def annotate_tree(columns: Sequence[HeaderColumn]) -> ColumnTree:
    return ColumnTree(columns)


def get_leaf_columns(columns: Sequence[HeaderColumn]) -> List[HeaderColumn]:
    """Leaf columns in left-to-right order."""
    return ColumnTree(columns).leaves


def get_max_level(columns: Sequence[HeaderColumn]) -> int:
    """
    Depth of the header tree, i.e. the number of header rows.
    An empty tree still counts as one level.
    """
    max_level = 1

    def traverse(nodes: Sequence[HeaderColumn], level: int) -> None:
        nonlocal max_level
        max_level = max(max_level, level)
        for node in nodes:
            if not node.is_leaf:
                traverse(node.children, level + 1)

    traverse(columns, 1)
    return max_level
