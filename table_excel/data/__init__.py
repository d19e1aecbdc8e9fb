from .row_projector import project_row, project_rows
from .row_parser import (
    HEADER_MISMATCH_MESSAGE,
    ROW_NUMBER_KEY,
    ImportResult,
    get_title_dict,
    parse_rows,
)

__all__ = [
    'project_row',
    'project_rows',
    'HEADER_MISMATCH_MESSAGE',
    'ROW_NUMBER_KEY',
    'ImportResult',
    'get_title_dict',
    'parse_rows',
]
