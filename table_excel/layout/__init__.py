from .layout_engine import DEFAULT_COLUMN_WIDTH, HeaderLayout, LayoutNode, compute_layout, count_leaves
from .grid_builder import HeaderGrid, MergeRange, build_header_grid

__all__ = [
    'DEFAULT_COLUMN_WIDTH',
    'HeaderLayout',
    'LayoutNode',
    'compute_layout',
    'count_leaves',
    'HeaderGrid',
    'MergeRange',
    'build_header_grid',
]
