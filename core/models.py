"""
BE-Alert Converter Data Models
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class InputRecord:
    """One spreadsheet row with the 6 member fields (values already trimmed)."""
    row_number: int
    first_name: str = ""
    last_name: str = ""
    street: str = ""
    house_number: str = ""
    mobile: str = ""
    email: str = ""

    def values(self) -> Dict[str, str]:
        return {
            'first_name': self.first_name,
            'last_name': self.last_name,
            'street': self.street,
            'house_number': self.house_number,
            'mobile': self.mobile,
            'email': self.email,
        }

    def is_blank(self) -> bool:
        return not any(self.values().values())


@dataclass(frozen=True)
class OutputRecord:
    """One BIN import row: 33 values aligned with the output header."""
    row_number: int
    columns: Tuple[str, ...]
    values: Tuple[str, ...]

    def __post_init__(self):
        if len(self.columns) != len(self.values):
            raise ValueError(
                f"OutputRecord has {len(self.values)} values for {len(self.columns)} columns"
            )

    def __getitem__(self, column: str) -> str:
        return self.values[self.columns.index(column)]

    def as_list(self) -> List[str]:
        return list(self.values)

    def as_dict(self) -> Dict[str, str]:
        return dict(zip(self.columns, self.values))


@dataclass(frozen=True)
class RowDiagnostic:
    """Why a source row was left out of the output."""
    row_number: int
    kind: str
    field: str
    value: str
    message: str

    def as_dict(self) -> Dict[str, object]:
        return {
            'row': self.row_number,
            'kind': self.kind,
            'field': self.field,
            'value': self.value,
            'message': self.message,
        }


@dataclass
class ConversionResult:
    """Outcome of one batch: converted rows in source order plus diagnostics."""
    rows: List[OutputRecord] = field(default_factory=list)
    diagnostics: List[RowDiagnostic] = field(default_factory=list)
    blank_rows: int = 0
    total_rows: int = 0

    @property
    def converted(self) -> int:
        return len(self.rows)

    @property
    def skipped(self) -> int:
        return len(self.diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
