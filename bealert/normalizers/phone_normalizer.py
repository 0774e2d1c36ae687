"""
Phone number normalization

BE-Alert expects international numbers with a "00" prefix:
- "+32 478 12 34 56" -> "0032478123456"
- "0478/12.34.56"    -> "0032478123456"
- "478123456"        -> "0032478123456" (leading 0 lost in a numeric cell)
- "+31 6 12345678"   -> "0031612345678"

Parsing and validation use the phonenumbers metadata; anything it does not
accept as a valid number is rejected.
"""

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

# Country whose mobile numbers lose their leading 0 in numeric cells (4xx xx xx xx)
LOST_ZERO_COUNTRY_CODE = '32'


class PhoneFormatError(ValueError):
    """Raised when a number cannot be brought into the 00-prefixed format."""


def _clean(value: str) -> str:
    return ''.join(c for c in value.strip() if (c.isascii() and c.isdigit()) or c == '+')


def restore_trunk_zero(digits: str, country_code: str) -> str:
    """
    Put back the leading 0 of a Belgian mobile number stored as a number.

    Examples:
        >>> restore_trunk_zero("478123456", "32")
        "0478123456"

        >>> restore_trunk_zero("478123456", "31")
        "478123456"
    """
    if country_code == LOST_ZERO_COUNTRY_CODE and digits.startswith('4'):
        return '0' + digits
    return digits


def region_for(country_code: str) -> str:
    """Region code ("BE") for a calling code ("32")."""
    region = phonenumbers.region_code_for_country_code(int(country_code))
    if region == 'ZZ':
        raise PhoneFormatError(f"unknown country calling code {country_code!r}")
    return region


def normalize_phone(value: str, country_code: str = '32') -> str:
    """
    Normalize a free-form phone number to "00" + country code + national number.

    Args:
        value: Raw phone number as typed in the spreadsheet
        country_code: Calling code assumed for national numbers

    Returns:
        Normalized number, digits only, starting with "00"

    Raises:
        PhoneFormatError: If the number has no usable digits, a misplaced "+",
            or is not a valid number for its country
    """
    cleaned = _clean(value or '')

    if not cleaned:
        raise PhoneFormatError("no digits in phone number")

    if '+' in cleaned[1:]:
        raise PhoneFormatError("'+' is only allowed at the start")

    if cleaned.startswith('00'):
        cleaned = '+' + cleaned[2:]
    elif not cleaned.startswith('+'):
        cleaned = restore_trunk_zero(cleaned, country_code)

    try:
        parsed = phonenumbers.parse(cleaned, region_for(country_code))
    except NumberParseException as e:
        raise PhoneFormatError(f"cannot parse {cleaned!r}: {e}") from e

    if not phonenumbers.is_valid_number(parsed):
        raise PhoneFormatError(f"{cleaned!r} is not a valid phone number")

    e164 = phonenumbers.format_number(parsed, PhoneNumberFormat.E164)
    return '00' + e164[1:]
