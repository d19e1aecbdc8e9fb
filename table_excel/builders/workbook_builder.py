import io
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from .header_builder import HeaderBuilder
from ..columns.models import HeaderColumn
from ..columns.tree import ColumnTree
from ..data.row_projector import project_rows
from ..layout.grid_builder import build_header_grid
from ..layout.layout_engine import DEFAULT_COLUMN_WIDTH, compute_layout
from ..styling.models import CellStyleModel
from ..styling.style_applier import apply_borders, apply_column_styles

logger = logging.getLogger(__name__)

DEFAULT_CREATOR = 'table_excel'


class SheetBuilder:
    """
    Builds one worksheet: merged header rows from the header tree, then one
    row per record, then the shared column styles and borders.
    """

    def __init__(
        self,
        worksheet: Worksheet,
        columns: Sequence[HeaderColumn],
        records: Sequence[Dict[str, Any]],
        style: Optional[CellStyleModel] = None,
        header_style: Optional[CellStyleModel] = None,
        column_width: float = DEFAULT_COLUMN_WIDTH,
    ):
        self.worksheet = worksheet
        self.columns = list(columns)
        self.records = list(records or [])
        self.style = style
        self.header_style = header_style
        self.column_width = column_width

    def build(self) -> Dict[str, Any]:
        tree = ColumnTree(self.columns)
        layout = compute_layout(self.columns, self.column_width, tree=tree)
        header_grid = build_header_grid(layout)

        header_builder = HeaderBuilder(self.worksheet, header_grid, start_row=1, header_style=self.header_style)
        header_info = header_builder.build() or {'first_row_index': 1, 'second_row_index': 0, 'num_columns': 0}

        data_start_row = header_info['second_row_index'] + 1
        rows = project_rows(self.records, tree.leaves)
        for offset, values in enumerate(rows):
            for col_offset, value in enumerate(values):
                self.worksheet.cell(row=data_start_row + offset, column=1 + col_offset, value=value)

        num_columns = max(header_info['num_columns'], len(tree.leaves))
        apply_column_styles(self.worksheet, self.style, num_columns, self.column_width, data_start_row)
        header_builder.apply_styles()
        # Border runs from the last header row through the last data row
        apply_borders(self.worksheet, self.style, layout.total_depth, layout.total_depth + len(rows), num_columns)

        logger.info(
            f"Sheet '{self.worksheet.title}': {layout.total_depth} header rows, "
            f"{num_columns} columns, {len(rows)} data rows"
        )
        return {
            **header_info,
            'data_start_row': data_start_row,
            'data_end_row': data_start_row + len(rows) - 1,
            'leaf_columns': tree.leaves,
        }


class WorkbookBuilder:
    def __init__(self, creator: str = DEFAULT_CREATOR):
        self.workbook = Workbook()
        # Drop the default sheet; every sheet is added explicitly
        self.workbook.remove(self.workbook.active)
        self.workbook.properties.creator = creator
        self.workbook.properties.created = datetime.now()
        self.sheet_infos: List[Dict[str, Any]] = []

    def add_sheet(
        self,
        sheet_name: str,
        columns: Sequence[HeaderColumn],
        records: Sequence[Dict[str, Any]],
        style: Optional[CellStyleModel] = None,
        header_style: Optional[CellStyleModel] = None,
        column_width: float = DEFAULT_COLUMN_WIDTH,
    ) -> Dict[str, Any]:
        worksheet = self.workbook.create_sheet(title=sheet_name)
        sheet_info = SheetBuilder(worksheet, columns, records, style, header_style, column_width).build()
        self.sheet_infos.append(sheet_info)
        return sheet_info

    def build(self) -> Workbook:
        return self.workbook

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.workbook.save(buffer)
        return buffer.getvalue()
