"""BE-Alert Converter Core"""

from ._version import __version__
from .config import ConverterConfig, get_config, reload_config
from .models import InputRecord, OutputRecord, RowDiagnostic, ConversionResult
from .exceptions import (
    ConverterError,
    ConfigurationError,
    RowValidationError,
    MissingRequiredField,
    MalformedHouseNumber,
    MalformedPhoneNumber,
    MalformedEmail,
    UnencodableValue,
)

__all__ = [
    '__version__',
    'ConverterConfig', 'get_config', 'reload_config',
    'InputRecord', 'OutputRecord', 'RowDiagnostic', 'ConversionResult',
    'ConverterError', 'ConfigurationError', 'RowValidationError',
    'MissingRequiredField', 'MalformedHouseNumber', 'MalformedPhoneNumber',
    'MalformedEmail', 'UnencodableValue',
]
