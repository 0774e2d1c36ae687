"""
House number extraction

The BIN "Adres incl huisnummer" column takes only the numeric part.
"""


def extract_house_number(value: str) -> str:
    """
    Keep only the leading digits; stop at the first non-digit.

    Examples:
        >>> extract_house_number("11A")
        "11"

        >>> extract_house_number("12 Bus 3")
        "12"

        >>> extract_house_number("A")
        ""
    """
    digits = []
    for char in (value or '').strip():
        if char.isascii() and char.isdigit():
            digits.append(char)
        else:
            break
    return ''.join(digits)
