"""
XLSX loader

Reads one worksheet of an Excel workbook with openpyxl.
The first row holds the headers; every cell is converted to a string the
way it appears in the sheet (numeric 478123456.0 -> "478123456").
Date and time cells become empty strings.
Blank rows are kept so record positions match spreadsheet row numbers.
"""

import datetime
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, List, Tuple

import openpyxl
from openpyxl.utils.exceptions import InvalidFileException

from core.exceptions import ConfigurationError
from .base import DataLoader

logger = logging.getLogger(__name__)


def cell_to_string(value: Any) -> str:
    """
    Convert a worksheet cell to text.

    Examples:
        >>> cell_to_string(478123456.0)
        "478123456"

        >>> cell_to_string(None)
        ""
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)):
        return ''
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return str(value)
    return str(value)


class XLSXLoader(DataLoader):
    """
    Load member rows from an .xlsx workbook.

    Example:
        loader = XLSXLoader("leden.xlsx")
        records, headers = loader.load()
    """

    def __init__(self, file_path: str, sheet_index: int = 0):
        """
        Initialize XLSX loader.

        Args:
            file_path: Path to the workbook
            sheet_index: Zero-based worksheet position
        """
        self.file_path = Path(file_path)
        self.sheet_index = sheet_index

        if not self.file_path.exists():
            raise FileNotFoundError(f"XLSX file not found: {file_path}")

    def _read_rows(self) -> List[tuple]:
        try:
            wb = openpyxl.load_workbook(self.file_path, read_only=True, data_only=True)
        except (zipfile.BadZipFile, InvalidFileException, KeyError) as e:
            raise ConfigurationError(f"Not a valid XLSX workbook: {self.file_path} ({e})")

        try:
            if self.sheet_index >= len(wb.worksheets):
                raise ConfigurationError(
                    f"No sheet {self.sheet_index} in {self.file_path.name} "
                    f"({len(wb.worksheets)} sheet(s) found)"
                )
            ws = wb.worksheets[self.sheet_index]
            return list(ws.iter_rows(values_only=True))
        finally:
            wb.close()

    def load(self) -> Tuple[List[Dict[str, str]], List[str]]:
        """
        Load the worksheet.

        Returns:
            Tuple of (records, headers)

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If the workbook or sheet is unreadable or empty
        """
        rows = self._read_rows()

        if not rows:
            raise ConfigurationError(f"Empty sheet (no header row): {self.file_path}")

        header_cells = [cell_to_string(cell).strip() for cell in rows[0]]
        headers = [h for h in header_cells if h]

        records = []
        for row in rows[1:]:
            record = {}
            for header, cell in zip(header_cells, row):
                if header:
                    record[header] = cell_to_string(cell)
            records.append(record)

        logger.info(
            "Loaded %d row(s) and %d column(s) from %s",
            len(records), len(headers), self.file_path.name
        )
        return records, headers

