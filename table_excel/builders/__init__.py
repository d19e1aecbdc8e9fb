# table_excel/builders/__init__.py
from .header_builder import HeaderBuilder
from .workbook_builder import SheetBuilder, WorkbookBuilder

__all__ = [
    'HeaderBuilder',
    'SheetBuilder',
    'WorkbookBuilder',
]
