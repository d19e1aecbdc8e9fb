from .models import HeaderColumn, to_header_columns
from .tree import ColumnTree, annotate_tree, get_leaf_columns, get_max_level

__all__ = [
    'HeaderColumn',
    'to_header_columns',
    'ColumnTree',
    'annotate_tree',
    'get_leaf_columns',
    'get_max_level',
]
