import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from openpyxl.worksheet.worksheet import Worksheet

from ..columns.models import HeaderColumn
from ..utils.cell_reference import get_cell_value, header_text

logger = logging.getLogger(__name__)

ROW_NUMBER_KEY = 'rowNumber'
HEADER_MISMATCH_MESSAGE = 'imported header does not match template'
REQUIRED_MESSAGE = 'row {row}: {title} is required'
INVALID_MESSAGE = 'row {row}: {title}{message}'


@dataclass
class ImportResult:
    data: List[Dict[str, Any]] = field(default_factory=list)
    validate: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'data': self.data, 'validate': self.validate}


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def get_title_dict(columns: Sequence[HeaderColumn]) -> Dict[Any, HeaderColumn]:
    """Header text -> column lookup. Later columns win when titles repeat."""
    return {header_text(column.title): column for column in columns}


def read_header_titles(worksheet: Worksheet, header_row_number: int) -> Dict[int, Any]:
    """Column index -> header title for every non-empty cell of the header row."""
    titles = {}
    for column_index in range(1, worksheet.max_column + 1):
        title = get_cell_value(worksheet, header_row_number, column_index)
        if not is_empty(title):
            titles[column_index] = title
    return titles


def parse_rows(
    worksheet: Worksheet,
    leaf_columns: Sequence[HeaderColumn],
    header_row_number: int,
) -> ImportResult:
    """
    Reads every row below the header row into a record.

    The header row must only hold titles of the configured leaf columns;
    otherwise nothing is parsed and a single header mismatch message is
    returned. Per-cell problems (missing required value, failed validate
    hook) are collected as messages and never stop parsing.

    Args:
        worksheet: Loaded openpyxl worksheet.
        leaf_columns: Leaf columns of the header tree.
        header_row_number: 1-based row holding the leaf titles.
    """
    result = ImportResult()
    header_titles = read_header_titles(worksheet, header_row_number)
    title_dict = get_title_dict(leaf_columns)

    for column_index, title in header_titles.items():
        if title not in title_dict:
            logger.warning(f"Header '{title}' in column {column_index} is not a configured column")
            result.validate.append(HEADER_MISMATCH_MESSAGE)
            return result

    for row_number in range(header_row_number + 1, worksheet.max_row + 1):
        values = {
            column_index: worksheet.cell(row=row_number, column=column_index).value
            for column_index in header_titles
        }
        if all(is_empty(value) for value in values.values()):
            continue

        record: Dict[str, Any] = {}
        for column_index, value in values.items():
            column = title_dict[header_titles[column_index]]
            empty = is_empty(value)

            if empty:
                if column.required:
                    result.validate.append(REQUIRED_MESSAGE.format(row=row_number, title=column.title))
            elif column.validate_value is not None and not column.validate_value(value):
                result.validate.append(
                    INVALID_MESSAGE.format(row=row_number, title=column.title, message=column.message)
                )

            if column.import_handler is not None:
                record[column.data_index] = column.import_handler(value)
            elif not empty:
                record[column.data_index] = value

        record[ROW_NUMBER_KEY] = row_number
        result.data.append(record)

    logger.info(f"Parsed {len(result.data)} rows with {len(result.validate)} validation messages")
    return result
