"""
CSV loader with auto-delimiter detection

Loads member exports saved as CSV instead of XLSX, with automatic detection of:
- Delimiter (semicolon, comma, tab, pipe)
- Encoding (UTF-8, cp1252, latin1)
"""

import csv
import logging
from typing import Dict, List, Tuple
from pathlib import Path

from core.exceptions import ConfigurationError
from .base import DataLoader

logger = logging.getLogger(__name__)

DELIMITERS = [';', ',', '\t', '|']
ENCODINGS = ['utf-8-sig', 'cp1252', 'latin1']


class CSVLoader(DataLoader):
    """
    Load member rows from a CSV file with auto-detection.

    Example:
        loader = CSVLoader("leden.csv")
        records, headers = loader.load()
    """

    def __init__(self, file_path: str):
        """
        Initialize CSV loader.

        Args:
            file_path: Path to CSV file
        """
        self.file_path = Path(file_path)

        if not self.file_path.exists():
            raise FileNotFoundError(f"CSV file not found: {file_path}")

    def load(self) -> Tuple[List[Dict[str, str]], List[str]]:
        """
        Load CSV file with auto-delimiter detection.

        Returns:
            Tuple of (records, headers)

        Raises:
            FileNotFoundError: If file doesn't exist
            ConfigurationError: If the file has no header row
        """
        encoding = self._detect_encoding()
        delimiter = self._detect_delimiter(encoding)

        records = []

        with open(self.file_path, 'r', encoding=encoding, newline='') as f:
            reader = csv.reader(f, delimiter=delimiter)
            header_cells = [h.strip() for h in next(reader, [])]
            headers = [h for h in header_cells if h]

            if not headers:
                raise ConfigurationError(f"Empty file (no header row): {self.file_path}")

            for row in reader:
                record = {}
                for header, cell in zip(header_cells, row):
                    if header:
                        record[header] = cell
                records.append(record)

        logger.info(
            "Loaded %d row(s) from %s (delimiter %r, encoding %s)",
            len(records), self.file_path.name, delimiter, encoding
        )
        return records, headers

    def _detect_delimiter(self, encoding: str) -> str:
        """
        Auto-detect CSV delimiter.

        Returns:
            Detected delimiter character
        """
        with open(self.file_path, 'r', encoding=encoding, errors='ignore') as f:
            sample = ''.join([f.readline() for _ in range(5)])

        try:
            return csv.Sniffer().sniff(sample, delimiters=''.join(DELIMITERS)).delimiter
        except csv.Error:
            # Fallback: most frequent candidate in the sample
            counts = {d: sample.count(d) for d in DELIMITERS}
            return max(counts.items(), key=lambda x: x[1])[0]

    def _detect_encoding(self) -> str:
        """
        Auto-detect file encoding.

        Returns:
            First encoding that decodes the whole file
        """
        raw = self.file_path.read_bytes()

        for encoding in ENCODINGS:
            try:
                raw.decode(encoding)
                return encoding
            except (UnicodeDecodeError, LookupError):
                continue

        return 'latin1'
