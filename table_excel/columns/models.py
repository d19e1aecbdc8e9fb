from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Callable, List, Optional


class HeaderColumn(BaseModel):
    """
    A node of the header tree, shaped like a UI table column.

    Leaf columns map one record field to one spreadsheet column. Group columns
    (non-empty ``children``) only contribute a merged header cell.

    Accepts the camelCase keys used by table configs (``dataIndex``,
    ``importHandler``) as well as the snake_case attribute names.
    """
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    title: Any = None
    data_index: Any = Field(default=None, alias='dataIndex')
    key: Any = None
    fixed: Any = None
    # Advisory; non-numeric widths such as '20%' fall back to the nominal width
    width: Any = None
    children: Optional[List['HeaderColumn']] = None

    # Capability hooks, each invoked only when present
    render: Optional[Callable[..., Any]] = None
    validate_value: Optional[Callable[[Any], Any]] = Field(default=None, alias='validate')
    import_handler: Optional[Callable[[Any], Any]] = Field(default=None, alias='importHandler')
    required: bool = False
    message: str = ''

    @field_validator('data_index', mode='before')
    @classmethod
    def _path_to_tuple(cls, value: Any) -> Any:
        # Path-style data indexes become tuples so they can key a record
        if isinstance(value, list):
            return tuple(value)
        return value

    @property
    def is_leaf(self) -> bool:
        # An empty children list is a leaf too
        return not self.children


HeaderColumn.model_rebuild()


def to_header_columns(columns: List[Any]) -> List[HeaderColumn]:
    """Validates a list of column dicts (or HeaderColumn objects) into HeaderColumn models."""
    result = []
    for column in columns:
        if isinstance(column, HeaderColumn):
            result.append(column)
        else:
            result.append(HeaderColumn.model_validate(column))
    return result
