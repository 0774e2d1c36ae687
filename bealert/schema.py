"""
Column contracts

Input: the six member columns of the municipality spreadsheet.
Output: the 33-column BE-Alert BIN import template, names and order verbatim
(including the platform's own "Telefoone 6").
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

from core.exceptions import ConfigurationError


# Spreadsheet header -> InputRecord attribute
INPUT_COLUMNS: Mapping[str, str] = MappingProxyType({
    'Voornaam': 'first_name',
    'Naam': 'last_name',
    'Straat': 'street',
    'Huisnummer': 'house_number',
    'Mobiel nummer': 'mobile',
    'E-mailadres': 'email',
})

REQUIRED_COLUMNS = tuple(INPUT_COLUMNS)

OUTPUT_COLUMNS = (
    'Tel/Ref.',
    'Civilité',
    'Naam',
    'Voornaam',
    'Adres incl huisnummer',
    'Bijkomend adres',
    'Postcode',
    'Gemeente',
    'Geboortedatum',
    'Email',
    'FAX',
    'FAX2',
    'FAX3',
    'Verdieping',
    'Aantal inwoners',
    'Telefoon 2',
    'Telefoon 3',
    'Telefoon 4',
    'Telefoon 5',
    'Telefoone 6',
    'Telefoon 7',
    'SMS',
    'SMS 2',
    'SMS 3',
    'Pager',
    'Zone libre 1',
    'Zone libre 2',
    'Zone libre 3',
    'Taal',
    'Land',
    'Rode lijst',
    'Type Contact',
    'GPS coördinaten',
)

# Output columns filled from the input row; everything else comes from the default table
MAPPED_COLUMNS = (
    'Tel/Ref.',
    'Naam',
    'Voornaam',
    'Adres incl huisnummer',
    'Email',
)

DEFAULTED_COLUMNS = tuple(c for c in OUTPUT_COLUMNS if c not in MAPPED_COLUMNS)


def missing_columns(headers: Iterable[str]) -> List[str]:
    """Required input columns absent from the given headers, in template order."""
    present = {str(h).strip() for h in headers}
    return [c for c in REQUIRED_COLUMNS if c not in present]


def check_input_columns(headers: Iterable[str]) -> None:
    """
    Fail fast when the source is not the expected member template.

    Raises:
        ConfigurationError: Naming every missing column
    """
    missing = missing_columns(headers)
    if missing:
        raise ConfigurationError(
            "Missing required column(s): " + ", ".join(missing)
        )


def build_default_table(fixed_values: Optional[Dict[str, str]] = None) -> Mapping[str, str]:
    """
    Build the read-only value table for the defaulted columns.

    Args:
        fixed_values: Output column -> value; unnamed defaulted columns stay blank

    Raises:
        ConfigurationError: If a fixed value targets a mapped or unknown column
    """
    fixed_values = fixed_values or {}

    unknown = [c for c in fixed_values if c not in DEFAULTED_COLUMNS]
    if unknown:
        raise ConfigurationError(
            "Fixed values given for non-defaulted column(s): " + ", ".join(unknown)
        )

    return MappingProxyType({
        column: str(fixed_values.get(column, ''))
        for column in DEFAULTED_COLUMNS
    })
