"""
Basic field normalization

Handles common data cleaning:
- Trim whitespace
- Collapse multiple spaces
- Lowercase email addresses
"""

from typing import Any


def normalize_field(value: Any, field_type: str = 'text') -> str:
    """
    Normalize a single field value.

    Args:
        value: Raw field value
        field_type: Type of field ('text', 'email', 'name')

    Returns:
        Normalized string value
    """
    if value is None or value == '':
        return ''

    text = str(value).strip()

    if not text:
        return ''

    # Collapse multiple spaces
    text = ' '.join(text.split())

    if field_type == 'email':
        text = text.lower()

    # Names keep their original case

    return text


def is_plausible_email(email: str) -> bool:
    """
    Minimal email check; the platform re-validates on import.

    Examples:
        >>> is_plausible_email("jan.peeters@example.be")
        True

        >>> is_plausible_email("jan.peeters@example")
        False
    """
    if not email or any(c.isspace() for c in email):
        return False

    if email.count('@') != 1:
        return False

    local, domain = email.split('@')
    if not local or not domain:
        return False

    if '.' not in domain or domain.startswith('.') or domain.endswith('.'):
        return False

    return True
