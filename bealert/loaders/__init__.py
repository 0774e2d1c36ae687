"""
Data loaders for the BE-Alert converter
"""

from pathlib import Path

from core.exceptions import ConfigurationError
from .base import DataLoader
from .xlsx_loader import XLSXLoader, cell_to_string
from .csv_loader import CSVLoader


def get_loader(file_path: str, sheet_index: int = 0) -> DataLoader:
    """Pick a loader from the file extension."""
    suffix = Path(file_path).suffix.lower()
    if suffix in ('.xlsx', '.xlsm'):
        return XLSXLoader(file_path, sheet_index=sheet_index)
    if suffix in ('.csv', '.txt'):
        return CSVLoader(file_path)
    raise ConfigurationError(f"Unsupported input file type '{suffix}' (expected .xlsx or .csv)")


__all__ = ['DataLoader', 'XLSXLoader', 'CSVLoader', 'cell_to_string', 'get_loader']
