from .config_loader import ExportConfigLoader, load_columns

__all__ = ['ExportConfigLoader', 'load_columns']
