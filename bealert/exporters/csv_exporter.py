"""
CSV exporter

Writes the BE-Alert BIN import file: the fixed 33-column header line
followed by one row per converted member.
"""

import csv
import logging
import os
import tempfile
from typing import Iterable, Optional
from pathlib import Path

from core.exceptions import ConfigurationError
from core.models import OutputRecord
from ..schema import OUTPUT_COLUMNS

logger = logging.getLogger(__name__)


class CSVExporter:
    """
    Export OutputRecords in the BIN format.

    Example:
        exporter = CSVExporter(delimiter=';')
        exporter.export(result.rows, "leden.csv")
    """

    COLUMNS = OUTPUT_COLUMNS

    def __init__(self, delimiter: str = ';', encoding: str = 'utf-8'):
        self.delimiter = delimiter
        self.encoding = encoding

    def export(self, records: Iterable[OutputRecord], output_path: str) -> int:
        """
        Write header and rows.

        Rows go to a temporary file beside the destination, which is moved
        into place only once complete.

        Args:
            records: Converted rows, in output order
            output_path: Path to output CSV file

        Returns:
            Number of records exported

        Raises:
            ConfigurationError: If the header or a default value does not fit the encoding
        """
        target = Path(output_path)
        target.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix='.tmp')
        count = 0
        try:
            with os.fdopen(fd, 'w', newline='', encoding=self.encoding) as f:
                writer = csv.writer(f, delimiter=self.delimiter)
                writer.writerow(self.COLUMNS)

                for record in records:
                    if record.columns != self.COLUMNS:
                        raise ValueError(f"Row {record.row_number} does not follow the BIN column layout")
                    writer.writerow(record.values)
                    count += 1

            os.replace(tmp_name, target)
        except UnicodeEncodeError as e:
            os.unlink(tmp_name)
            raise ConfigurationError(
                f"CSV_ENCODING {self.encoding} cannot hold {e.object[e.start:e.end]!r}"
            ) from e
        except BaseException:
            os.unlink(tmp_name)
            raise

        logger.info("Wrote %d row(s) to %s", count, output_path)
        return count

    @staticmethod
    def generate_filename(input_path: str, base_dir: Optional[str] = None) -> str:
        """
        Derive the output path from the input file name.

        Format: {base_dir}/{input stem}.csv
        Example: leden.xlsx -> leden.csv

        Args:
            input_path: Source spreadsheet
            base_dir: Output directory (default: from config, else next to the input)

        Returns:
            Full path to output file
        """
        source = Path(input_path)

        if base_dir is None:
            from core.config import get_config
            output_dir = get_config().get_output_dir(source)
        else:
            output_dir = Path(base_dir)

        stem = source.stem or 'output'
        return str(output_dir / f"{stem}.csv")
