# table_excel/styling/style_applier.py
from openpyxl.worksheet.worksheet import Worksheet
from openpyxl.styles import Alignment, Border, Side, Font
from openpyxl.utils import get_column_letter
from typing import Optional

from .models import AlignmentModel, BorderModel, BorderSideModel, CellStyleModel, FontModel, DEFAULT_HEADER_FONT

# Table configs written for browser spreadsheet libraries say 'middle'
_VERTICAL_ALIASES = {'middle': 'center'}


def to_font(font: Optional[FontModel]) -> Optional[Font]:
    if not font:
        return None
    return Font(**font.model_dump(exclude_none=True))


def to_alignment(alignment: Optional[AlignmentModel]) -> Optional[Alignment]:
    if not alignment:
        return None
    values = alignment.model_dump(exclude_none=True)
    if 'vertical' in values:
        values['vertical'] = _VERTICAL_ALIASES.get(values['vertical'], values['vertical'])
    return Alignment(**values)


def _to_side(side: Optional[BorderSideModel]) -> Side:
    if not side:
        return Side()
    return Side(border_style=side.style, color=side.color)


def to_border(border: Optional[BorderModel]) -> Optional[Border]:
    if not border:
        return None
    return Border(
        left=_to_side(border.left),
        right=_to_side(border.right),
        top=_to_side(border.top),
        bottom=_to_side(border.bottom),
    )


def apply_header_style(cell, header_style: Optional[CellStyleModel]):
    """
    Header cells are bold by default; a configured header style
    overrides font, alignment and border individually.
    """
    cell.font = to_font(DEFAULT_HEADER_FONT)
    if not header_style:
        return
    if header_style.font:
        cell.font = to_font(header_style.font)
    if header_style.alignment:
        cell.alignment = to_alignment(header_style.alignment)
    if header_style.border:
        cell.border = to_border(header_style.border)


def apply_column_styles(
    worksheet: Worksheet,
    style: Optional[CellStyleModel],
    num_columns: int,
    width: float,
    first_data_row: int,
):
    """
    Sets the width of every used column and the shared alignment on all of
    its cells. The shared font only goes to data rows so header fonts survive.
    """
    alignment = to_alignment(style.alignment) if style else None
    font = to_font(style.font) if style else None

    for col_idx in range(1, num_columns + 1):
        if width and width > 0:
            worksheet.column_dimensions[get_column_letter(col_idx)].width = width

    if not alignment and not font:
        return

    for row in worksheet.iter_rows(min_row=1, max_row=worksheet.max_row, min_col=1, max_col=num_columns):
        for cell in row:
            if alignment:
                cell.alignment = alignment
            if font and cell.row >= first_data_row:
                cell.font = font


def apply_borders(worksheet: Worksheet, style: Optional[CellStyleModel], start_row: int, end_row: int, num_columns: int):
    """Applies the shared border to every cell of rows start_row..end_row."""
    border = to_border(style.border) if style else None
    if not border or start_row > end_row:
        return

    for row in worksheet.iter_rows(min_row=start_row, max_row=end_row, min_col=1, max_col=num_columns):
        for cell in row:
            cell.border = border
