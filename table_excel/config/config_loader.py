# table_excel/config/config_loader.py
"""
Config Loader for JSON export jobs.

Job file structure:
    - fileName: output workbook path
    - columnWidth: nominal column width (optional, default 40)
    - style / headerStyle: CellStyleModel dicts (optional)
    - sheets: list of {name, columns, data | dataFile}

``dataFile`` and column file paths are resolved relative to the job file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from ..exceptions import ConfigLoadError
from ..layout.layout_engine import DEFAULT_COLUMN_WIDTH
from ..processors.export_processor import ExcelExportParams
from ..styling.models import CellStyleModel

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigLoadError(path, str(e)) from e


def load_columns(path) -> List[Dict[str, Any]]:
    """Loads a header tree (list of column dicts) from a JSON file."""
    columns = load_json(Path(path))
    if not isinstance(columns, list):
        raise ConfigLoadError(path, "expected a list of columns")
    return columns


class ExportConfigLoader:
    """
    Loads an export job file and turns it into ExcelExportParams.
    """

    def __init__(self, config_path):
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.raw_config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        logger.info(f"Loading export configuration from: {self.config_path}")
        self.raw_config = load_json(self.config_path)
        if not isinstance(self.raw_config, dict):
            raise ConfigLoadError(self.config_path, "expected a JSON object")
        logger.debug(f"Configuration sheets: {[s.get('name') for s in self.get_sheets()]}")

    # --- Public Interface ---

    def get_sheets(self) -> List[Dict[str, Any]]:
        return self.raw_config.get('sheets', [])

    def get_file_name(self) -> str:
        return self.raw_config.get('fileName')

    def get_column_width(self) -> float:
        return self.raw_config.get('columnWidth', DEFAULT_COLUMN_WIDTH)

    def get_sheet_columns(self, sheet: Dict[str, Any]) -> List[Dict[str, Any]]:
        columns = sheet.get('columns', [])
        if isinstance(columns, str):
            return load_columns(self.base_dir / columns)
        return columns

    def get_sheet_data(self, sheet: Dict[str, Any]) -> List[Dict[str, Any]]:
        if 'dataFile' in sheet:
            data = load_json(self.base_dir / sheet['dataFile'])
            if not isinstance(data, list):
                raise ConfigLoadError(sheet['dataFile'], "expected a list of records")
            return data
        return sheet.get('data', [])

    def get_export_params(self, file_name: str = None) -> ExcelExportParams:
        """
        Builds export parameters. ``file_name`` overrides the job's fileName.
        """
        sheets = self.get_sheets()
        params = {
            'sheetsName': [sheet.get('name') or f"Sheet{i + 1}" for i, sheet in enumerate(sheets)] or None,
            'headerColumns': [self.get_sheet_columns(sheet) for sheet in sheets],
            'tableDatas': [self.get_sheet_data(sheet) for sheet in sheets],
            'fileName': file_name or self.get_file_name(),
            'ColumnWidth': self.get_column_width(),
        }
        if 'style' in self.raw_config:
            params['style'] = CellStyleModel.model_validate(self.raw_config['style'])
        if 'headerStyle' in self.raw_config:
            params['headerStyle'] = CellStyleModel.model_validate(self.raw_config['headerStyle'])
        return ExcelExportParams.model_validate(params)
