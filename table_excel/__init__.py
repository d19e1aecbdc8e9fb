# table_excel/__init__.py
"""Grouped table columns to merged Excel headers, and Excel rows back to records."""

from .columns import HeaderColumn, annotate_tree, get_leaf_columns
from .data import ImportResult, parse_rows, project_rows
from .layout import build_header_grid, compute_layout
from .processors import (
    ExcelExportParams,
    create_export_worker,
    export_excel,
    export_workbook_bytes,
    read_excel,
    read_excel_async,
)
from .utils.cell_reference import column_label

__all__ = [
    'HeaderColumn',
    'annotate_tree',
    'get_leaf_columns',
    'ImportResult',
    'parse_rows',
    'project_rows',
    'build_header_grid',
    'compute_layout',
    'ExcelExportParams',
    'create_export_worker',
    'export_excel',
    'export_workbook_bytes',
    'read_excel',
    'read_excel_async',
    'column_label',
]
