from .models import (
    AlignmentModel,
    BorderModel,
    BorderSideModel,
    CellStyleModel,
    FontModel,
    default_cell_style,
)

__all__ = [
    'AlignmentModel',
    'BorderModel',
    'BorderSideModel',
    'CellStyleModel',
    'FontModel',
    'default_cell_style',
]
