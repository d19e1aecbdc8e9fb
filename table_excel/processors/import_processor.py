# table_excel/processors/import_processor.py
import asyncio
import io
import logging
from typing import Any, Optional, Sequence

import openpyxl

from ..columns.models import to_header_columns
from ..columns.tree import ColumnTree
from ..data.row_parser import ImportResult, parse_rows

logger = logging.getLogger(__name__)


def _open_workbook(file: Any) -> openpyxl.Workbook:
    if isinstance(file, (bytes, bytearray)):
        file = io.BytesIO(file)
    # Merged ranges are needed to read row-merged header titles, so no read_only mode
    return openpyxl.load_workbook(file, data_only=True)


def read_excel(file: Any, columns: Sequence[Any], sheet_index: Optional[int] = 1) -> ImportResult:
    """
    Reads records from an exported-style workbook.

    The header occupies as many rows as the header tree is deep; its last
    row carries the leaf titles. Errors from openpyxl while loading the file
    are not caught.

    Args:
        file: Path, binary file object or raw bytes of an .xlsx file.
        columns: Header tree (HeaderColumn objects or column dicts).
        sheet_index: 1-based worksheet position; 0 or None reads the first sheet.

    Raises:
        ValueError: If sheet_index is negative.
    """
    # 0 or None means the first sheet
    sheet_index = sheet_index or 1
    if sheet_index < 1:
        raise ValueError(f"Sheet index must be 1 or greater, got {sheet_index}")

    header_columns = to_header_columns(columns)
    tree = ColumnTree(header_columns)
    header_row_number = tree.max_depth

    workbook = _open_workbook(file)
    try:
        worksheet = workbook.worksheets[sheet_index - 1]
        logger.info(f"Reading sheet '{worksheet.title}' (header row {header_row_number})")
        return parse_rows(worksheet, tree.leaves, header_row_number)
    finally:
        workbook.close()


async def read_excel_async(file: Any, columns: Sequence[Any], sheet_index: Optional[int] = 1) -> ImportResult:
    """Same as read_excel, without blocking the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, read_excel, file, columns, sheet_index)
