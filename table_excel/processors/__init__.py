from .export_processor import (
    ExcelExportParams,
    build_workbook,
    export_excel,
    export_workbook_bytes,
)
from .export_worker import ExportWorker, create_export_worker
from .import_processor import read_excel, read_excel_async

__all__ = [
    'ExcelExportParams',
    'build_workbook',
    'export_excel',
    'export_workbook_bytes',
    'ExportWorker',
    'create_export_worker',
    'read_excel',
    'read_excel_async',
]
