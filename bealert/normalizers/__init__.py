"""
Field normalizers for the BE-Alert converter
"""

from .field_normalizer import normalize_field, is_plausible_email
from .phone_normalizer import normalize_phone, restore_trunk_zero, PhoneFormatError
from .house_number import extract_house_number

__all__ = [
    'normalize_field',
    'is_plausible_email',
    'normalize_phone',
    'restore_trunk_zero',
    'PhoneFormatError',
    'extract_house_number',
]
