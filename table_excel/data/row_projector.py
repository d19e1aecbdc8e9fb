import logging
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from ..columns.models import HeaderColumn

logger = logging.getLogger(__name__)


def _is_cell_primitive(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float, Decimal))


def project_row(record: Dict[str, Any], leaf_columns: Sequence[HeaderColumn], row_index: int) -> List[Any]:
    row = []
    for column in leaf_columns:
        origin_value = record.get(column.data_index) if record else None
        value = origin_value

        if column.render is not None:
            # Only strings and numbers make it into a cell; anything else falls back to the raw value
            rendered = column.render(origin_value, record, row_index)
            value = rendered if _is_cell_primitive(rendered) else origin_value

        row.append(value)
    return row


def project_rows(records: Sequence[Dict[str, Any]], leaf_columns: Sequence[HeaderColumn]) -> List[List[Any]]:
    """
    Flattens records into spreadsheet rows, one value per leaf column.

    Args:
        records: Data records, keyed by each column's data_index.
        leaf_columns: Leaf columns in left-to-right order.

    Returns:
        One list per record, in record order.
    """
    rows = [project_row(record, leaf_columns, index) for index, record in enumerate(records)]
    logger.debug(f"Projected {len(rows)} records onto {len(leaf_columns)} columns")
    return rows
