from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class FontModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    size: Optional[float] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    color: Optional[str] = None


class AlignmentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    horizontal: Optional[str] = None
    vertical: Optional[str] = None
    wrap_text: Optional[bool] = Field(default=None, alias='wrapText')


class BorderSideModel(BaseModel):
    style: Optional[str] = None
    color: Optional[str] = None


class BorderModel(BaseModel):
    left: Optional[BorderSideModel] = None
    right: Optional[BorderSideModel] = None
    top: Optional[BorderSideModel] = None
    bottom: Optional[BorderSideModel] = None


class CellStyleModel(BaseModel):
    """Alignment, font and border shared by a sheet's cells."""
    model_config = ConfigDict(populate_by_name=True)

    alignment: Optional[AlignmentModel] = None
    font: Optional[FontModel] = None
    border: Optional[BorderModel] = None


def default_cell_style() -> CellStyleModel:
    return CellStyleModel(
        alignment=AlignmentModel(horizontal='center', vertical='center'),
        font=FontModel(size=14),
    )


DEFAULT_HEADER_FONT = FontModel(bold=True, italic=False, size=14, name='Microsoft YaHei', color='000000')
