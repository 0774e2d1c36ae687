"""
Error taxonomy for the BE-Alert converter

ConfigurationError aborts a run before any row is mapped.
RowValidationError (and subclasses) only exclude the offending row.
"""

from typing import Optional


class ConverterError(Exception):
    """Base class for all converter errors."""


class ConfigurationError(ConverterError):
    """Wrong input schema, unreadable sheet layout or invalid settings."""


class RowValidationError(ConverterError):
    """A single input row cannot be converted."""

    def __init__(self, message: str, row_number: Optional[int] = None,
                 field: str = '', value: str = ''):
        super().__init__(message)
        self.message = message
        self.row_number = row_number
        self.field = field
        self.value = value

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.row_number is None:
            return self.message
        return f"row {self.row_number}: {self.message}"


class MissingRequiredField(RowValidationError):
    """One or more of the six required input fields is empty."""


class MalformedHouseNumber(RowValidationError):
    """House number does not start with a digit."""


class MalformedPhoneNumber(RowValidationError):
    """Mobile number cannot be normalized to the international format."""


class MalformedEmail(RowValidationError):
    """Email address fails the plausibility check."""


class UnencodableValue(RowValidationError):
    """A value contains characters the output encoding cannot represent."""
