"""Exceptions raised by table_excel."""


class TableExcelError(Exception):
    """Base exception for table_excel errors."""

    pass


class ExportConfigError(TableExcelError):
    """Raised when export parameters cannot produce a workbook.

    The message is user-facing; export entry points hand it to the error
    notifier (or the worker's error reply) instead of raising it.
    """

    pass


class ConfigLoadError(TableExcelError):
    """Raised when a JSON job or column file cannot be read."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load configuration '{path}': {reason}")
