# Low-level cell addressing helpers shared by the header grid and the row parser.

import logging
from typing import Any

from openpyxl.cell.cell import MergedCell
from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)


def column_label(column_number: int) -> str:
    """
    Converts a 1-based column number to its spreadsheet letter label.

    Bijective base 26, no zero digit: 1 -> 'A', 26 -> 'Z', 27 -> 'AA', 703 -> 'AAA'.
    """
    if column_number < 1:
        raise ValueError(f"Column number must be positive, got {column_number}")

    letters = []
    while column_number > 0:
        remainder = (column_number - 1) % 26
        letters.append(chr(ord('A') + remainder))
        column_number = (column_number - 1) // 26
    return ''.join(reversed(letters))


def cell_coordinate(column_number: int, row_number: int) -> str:
    return f"{column_label(column_number)}{row_number}"


def get_cell_value(worksheet: Worksheet, row: int, column: int) -> Any:
    """
    Value shown at (row, column). A cell covered by a merge reads the
    value stored in the merge's top-left cell.
    """
    cell = worksheet.cell(row=row, column=column)
    if not isinstance(cell, MergedCell):
        return cell.value

    for merged_range in worksheet.merged_cells.ranges:
        min_col, min_row, max_col, max_row = merged_range.bounds
        if min_row <= row <= max_row and min_col <= column <= max_col:
            return worksheet.cell(row=min_row, column=min_col).value

    logger.debug(f"Merged cell at row {row}, column {column} has no owning range")
    return None


def header_text(title: Any) -> Any:
    """Form a header title takes in its cell: strings and numbers as-is, anything else str()'d."""
    if title is None or isinstance(title, (str, int, float)):
        return title
    return str(title)
