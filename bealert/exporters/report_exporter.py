"""
Skipped-row report

Saves the per-row diagnostics of a conversion so the operator can fix the
source spreadsheet.
"""

from pathlib import Path
from typing import Iterable

import pandas as pd

from core.models import RowDiagnostic

REPORT_COLUMNS = ['row', 'kind', 'field', 'value', 'message']


def export_report(diagnostics: Iterable[RowDiagnostic], output_path: str) -> int:
    """Write diagnostics as CSV; returns the number of rows written."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame([d.as_dict() for d in diagnostics], columns=REPORT_COLUMNS)
    df.to_csv(output_path, index=False)
    return len(df)
