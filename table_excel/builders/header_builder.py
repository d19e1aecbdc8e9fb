import logging
from typing import Any, Dict, Optional
from openpyxl.worksheet.worksheet import Worksheet

from ..layout.grid_builder import EMPTY_HEADER_CELL, HeaderGrid
from ..styling.models import CellStyleModel
from ..styling.style_applier import apply_header_style
from ..utils.cell_reference import header_text

logger = logging.getLogger(__name__)


class HeaderBuilder:
    def __init__(
        self,
        worksheet: Worksheet,
        header_grid: HeaderGrid,
        start_row: int = 1,
        header_style: Optional[CellStyleModel] = None,
    ):
        """
        Writes a computed header grid into a worksheet.

        Args:
            worksheet: The worksheet to write to
            header_grid: Rows and merges from build_header_grid (built for the same start_row)
            start_row: Row of the first header line
            header_style: Optional style layered over the bold header default
        """
        self.worksheet = worksheet
        self.header_grid = header_grid
        self.start_row = start_row
        self.header_style = header_style

    def build(self) -> Optional[Dict[str, Any]]:
        if not self.header_grid.rows or self.start_row <= 0:
            return None

        for row_offset, values in enumerate(self.header_grid.rows):
            for col_offset, text in enumerate(values):
                if text == EMPTY_HEADER_CELL or text is None:
                    continue
                self.worksheet.cell(row=self.start_row + row_offset, column=1 + col_offset, value=header_text(text))

        for merge in self.header_grid.merges:
            logger.debug(f"Merging header range {merge.coordinate}")
            self.worksheet.merge_cells(merge.coordinate)

        last_row_index = self.start_row + self.header_grid.num_rows - 1
        return {
            'first_row_index': self.start_row,
            'second_row_index': last_row_index,
            'num_columns': self.header_grid.num_columns,
        }

    def apply_styles(self) -> None:
        """Styles every header cell, merged cells included so borders cover the whole range."""
        last_row = self.start_row + self.header_grid.num_rows - 1
        for row in self.worksheet.iter_rows(
            min_row=self.start_row,
            max_row=last_row,
            min_col=1,
            max_col=max(self.header_grid.num_columns, 1),
        ):
            for cell in row:
                apply_header_style(cell, self.header_style)
