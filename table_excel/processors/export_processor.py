# table_excel/processors/export_processor.py
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from openpyxl import Workbook
from pydantic import BaseModel, ConfigDict, Field

from ..builders.workbook_builder import WorkbookBuilder
from ..columns.models import HeaderColumn
from ..exceptions import ExportConfigError
from ..layout.layout_engine import DEFAULT_COLUMN_WIDTH
from ..styling.models import CellStyleModel, default_cell_style

logger = logging.getLogger(__name__)

FILE_NAME_REQUIRED_MESSAGE = 'file name is required'
SHEET_COUNT_MISMATCH_MESSAGE = 'sheet count does not match the number of column trees and data lists'


class ExcelExportParams(BaseModel):
    """
    Everything needed to export one workbook.

    ``sheet_names``, ``header_columns`` and ``table_datas`` are parallel
    lists, one entry per worksheet.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    sheet_names: Optional[List[str]] = Field(default=None, alias='sheetsName')
    header_columns: List[List[HeaderColumn]] = Field(default_factory=list, alias='headerColumns')
    table_datas: List[List[Dict[str, Any]]] = Field(default_factory=list, alias='tableDatas')
    style: CellStyleModel = Field(default_factory=default_cell_style)
    header_style: Optional[CellStyleModel] = Field(default=None, alias='headerStyle')
    file_name: Optional[str] = Field(default=None, alias='fileName')
    use_worker: bool = Field(default=False, alias='isWorker')
    column_width: float = Field(default=DEFAULT_COLUMN_WIDTH, alias='ColumnWidth')


def resolve_sheet_names(params: ExcelExportParams) -> List[str]:
    """Sheet names as given, or a single sheet named after the file name without extension."""
    if params.sheet_names:
        return list(params.sheet_names)
    file_name = Path(params.file_name or '').name
    return [file_name.split('.')[0] if '.' in file_name else file_name]


def check_export_params(params: ExcelExportParams) -> List[str]:
    """Raises ExportConfigError for parameters that cannot be exported; returns the sheet names."""
    if not params.file_name:
        raise ExportConfigError(FILE_NAME_REQUIRED_MESSAGE)

    sheet_names = resolve_sheet_names(params)
    if not (len(sheet_names) == len(params.header_columns) == len(params.table_datas)):
        logger.warning(
            f"Sheet count mismatch: {len(sheet_names)} sheets, "
            f"{len(params.header_columns)} column trees, {len(params.table_datas)} data lists"
        )
        raise ExportConfigError(SHEET_COUNT_MISMATCH_MESSAGE)
    return sheet_names


def build_workbook_builder(params: ExcelExportParams) -> WorkbookBuilder:
    sheet_names = check_export_params(params)

    workbook_builder = WorkbookBuilder()
    for sheet_name, columns, records in zip(sheet_names, params.header_columns, params.table_datas):
        logger.info(f"Exporting sheet '{sheet_name}' ({len(records)} records)")
        workbook_builder.add_sheet(
            sheet_name,
            columns,
            records,
            style=params.style,
            header_style=params.header_style,
            column_width=params.column_width,
        )
    return workbook_builder


def build_workbook(params: ExcelExportParams) -> Workbook:
    return build_workbook_builder(params).build()


def export_workbook_bytes(params: ExcelExportParams) -> bytes:
    """Serialized .xlsx content for ``params``. Raises ExportConfigError on bad parameters."""
    return build_workbook_builder(params).to_bytes()


def save_to_path(data: bytes, file_name: str) -> None:
    path = Path(file_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info(f"Workbook saved: '{path}'")


def log_error(message: str) -> None:
    logger.error(message)


def export_excel(
    params: ExcelExportParams,
    save_file: Callable[[bytes, str], None] = save_to_path,
    notify_error: Callable[[str], None] = log_error,
) -> bool:
    """
    Exports in the calling thread.

    Configuration problems go to ``notify_error`` and nothing is saved.
    On success the workbook bytes are handed to ``save_file`` together
    with the file name.

    Returns:
        True when a workbook was saved.
    """
    try:
        data = export_workbook_bytes(params)
    except ExportConfigError as e:
        notify_error(str(e))
        return False

    save_file(data, params.file_name)
    return True
