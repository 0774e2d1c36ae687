"""
Record mapper

Turns member rows into BE-Alert BIN rows. A row that cannot be converted is
reported with its spreadsheet row number and left out; it never stops the batch.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from core.exceptions import (
    RowValidationError,
    MissingRequiredField,
    MalformedHouseNumber,
    MalformedPhoneNumber,
    MalformedEmail,
    UnencodableValue,
)
from core.models import InputRecord, OutputRecord, RowDiagnostic, ConversionResult
from ..normalizers import (
    normalize_field,
    is_plausible_email,
    normalize_phone,
    PhoneFormatError,
    extract_house_number,
)
from ..schema import (
    INPUT_COLUMNS,
    OUTPUT_COLUMNS,
    DEFAULTED_COLUMNS,
    check_input_columns,
    build_default_table,
)

logger = logging.getLogger(__name__)

# InputRecord attribute -> spreadsheet header, for error messages
SOURCE_HEADERS = {attr: header for header, attr in INPUT_COLUMNS.items()}

# Mapped output column -> source header(s), for error messages
OUTPUT_TO_SOURCE = {
    'Tel/Ref.': 'Mobiel nummer',
    'Naam': 'Naam',
    'Voornaam': 'Voornaam',
    'Adres incl huisnummer': 'Straat, Huisnummer',
    'Email': 'E-mailadres',
}


def records_from_rows(rows: Iterable[Dict[str, str]], headers: Iterable[str],
                      first_row_number: int = 2) -> List[InputRecord]:
    """
    Check the source schema once and build InputRecords.

    Args:
        rows: Loader records (header -> value)
        headers: Source headers
        first_row_number: Spreadsheet row number of the first record

    Raises:
        ConfigurationError: If a required column is missing
    """
    check_input_columns(headers)

    records = []
    for offset, row in enumerate(rows):
        values = {
            attr: normalize_field(row.get(header, ''))
            for header, attr in INPUT_COLUMNS.items()
        }
        records.append(InputRecord(row_number=first_row_number + offset, **values))
    return records


class RecordMapper:
    """
    Map one InputRecord to one OutputRecord.

    Example:
        mapper = RecordMapper(build_default_table(config.fixed_values))
        output = mapper.map(record)
    """

    def __init__(self, defaults: Optional[Mapping[str, str]] = None, phone_country_code: str = '32',
                 encoding: Optional[str] = None):
        """
        Initialize record mapper.

        Args:
            defaults: Read-only table for the defaulted columns (blank when omitted)
            phone_country_code: Calling code for national phone numbers
            encoding: Output encoding every value must fit (unchecked when omitted)
        """
        self.defaults = defaults if defaults is not None else build_default_table()
        self.phone_country_code = phone_country_code
        self.encoding = encoding

        missing = [c for c in DEFAULTED_COLUMNS if c not in self.defaults]
        if missing:
            raise ValueError("Default table lacks column(s): " + ", ".join(missing))

    def map(self, record: InputRecord) -> OutputRecord:
        """
        Convert a member row.

        Raises:
            MissingRequiredField: One or more fields are empty
            MalformedHouseNumber: House number has no leading digits
            MalformedPhoneNumber: Mobile number cannot be normalized
            MalformedEmail: Email address is implausible
            UnencodableValue: A value cannot be written in the output encoding
        """
        values = {attr: normalize_field(value) for attr, value in record.values().items()}

        missing = [SOURCE_HEADERS[attr] for attr, value in values.items() if not value]
        if missing:
            raise MissingRequiredField(
                "missing " + ", ".join(missing),
                row_number=record.row_number,
                field=", ".join(missing),
            )

        house_number = extract_house_number(values['house_number'])
        if not house_number:
            raise MalformedHouseNumber(
                f"house number {record.house_number!r} does not start with a digit",
                row_number=record.row_number,
                field='Huisnummer',
                value=record.house_number,
            )

        try:
            phone = normalize_phone(values['mobile'], self.phone_country_code)
        except PhoneFormatError as e:
            raise MalformedPhoneNumber(
                f"mobile number {record.mobile!r}: {e}",
                row_number=record.row_number,
                field='Mobiel nummer',
                value=record.mobile,
            ) from e

        email = normalize_field(values['email'], 'email')
        if not is_plausible_email(email):
            raise MalformedEmail(
                f"email address {record.email!r} is not plausible",
                row_number=record.row_number,
                field='E-mailadres',
                value=record.email,
            )

        mapped = {
            'Tel/Ref.': phone,
            'Naam': normalize_field(values['last_name'], 'name'),
            'Voornaam': normalize_field(values['first_name'], 'name'),
            'Adres incl huisnummer': f"{values['street']} {house_number}",
            'Email': email,
        }

        if self.encoding:
            self._check_encodable(record, mapped)

        return OutputRecord(
            row_number=record.row_number,
            columns=OUTPUT_COLUMNS,
            values=tuple(
                mapped[column] if column in mapped else self.defaults[column]
                for column in OUTPUT_COLUMNS
            ),
        )

    def _check_encodable(self, record: InputRecord, mapped: Dict[str, str]) -> None:
        for column, value in mapped.items():
            try:
                value.encode(self.encoding)
            except UnicodeEncodeError as e:
                raise UnencodableValue(
                    f"{column} {value!r} has characters {self.encoding} cannot hold",
                    row_number=record.row_number,
                    field=OUTPUT_TO_SOURCE.get(column, column),
                    value=value,
                ) from e


def convert_records(records: Iterable[InputRecord], mapper: RecordMapper) -> ConversionResult:
    """
    Map a batch, keeping source order and collecting per-row diagnostics.

    Blank rows (all six fields empty) are counted and skipped without a diagnostic.
    """
    result = ConversionResult()

    for record in records:
        result.total_rows += 1

        if record.is_blank():
            result.blank_rows += 1
            continue

        try:
            result.rows.append(mapper.map(record))
        except RowValidationError as e:
            logger.debug("Skipping %s", e)
            result.diagnostics.append(RowDiagnostic(
                row_number=record.row_number,
                kind=e.kind,
                field=e.field,
                value=e.value,
                message=e.message,
            ))

    logger.info(
        "Converted %d of %d row(s): %d skipped, %d blank",
        result.converted, result.total_rows, result.skipped, result.blank_rows
    )
    return result
