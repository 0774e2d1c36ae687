"""
Abstract base class for data loaders
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple


class DataLoader(ABC):
    """
    Abstract base class for loading member rows from a tabular source.

    All loaders must implement the load() method which returns:
    - records: List of dictionaries (header -> string value)
    - headers: List of column names
    """

    # Spreadsheet row number of the first record (row 1 holds the headers)
    first_data_row = 2

    @abstractmethod
    def load(self) -> Tuple[List[Dict[str, str]], List[str]]:
        """
        Load data from source.

        Returns:
            Tuple of (records, headers)
            - records: List[dict] - One dict per data row, values as strings
            - headers: List[str] - Column names, trimmed
        """
        pass
