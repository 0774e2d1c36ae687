"""
BE-Alert Converter Configuration
Centralized configuration management
"""

import codecs
import os
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv
import phonenumbers

from ._version import __version__
from .exceptions import ConfigurationError


class ConverterConfig:
    """
    Centralized configuration for the converter.
    Loads from .env and provides typed access to all settings.
    """

    def __init__(self, env_file: Optional[Path] = None):
        if env_file is None:
            env_file = Path.cwd() / '.env'

        if env_file.exists():
            load_dotenv(env_file)

        # Framework settings
        self.framework_name = "BE-Alert Converter"
        self.framework_version = __version__

        # Output directory from .env, otherwise next to the input file
        output_dir_env = os.getenv('OUTPUT_DIR', '')
        self.output_dir: Optional[Path] = Path(output_dir_env) if output_dir_env else None

        # CSV dialect of the BIN import file
        self.csv_delimiter = os.getenv('CSV_DELIMITER', ';')
        self.csv_encoding = os.getenv('CSV_ENCODING', 'utf-8')

        # Phone numbers
        self.phone_country_code = os.getenv('PHONE_COUNTRY_CODE', '32').lstrip('+')

        # Fixed column values for the municipality
        self.postcode = os.getenv('BEALERT_POSTCODE', '3570')
        self.gemeente = os.getenv('BEALERT_GEMEENTE', 'Alken')
        self.taal = os.getenv('BEALERT_TAAL', 'NL')
        self.land = os.getenv('BEALERT_LAND', 'BE')
        self.rode_lijst = os.getenv('BEALERT_RODE_LIJST', '0')
        self.type_contact = os.getenv('BEALERT_TYPE_CONTACT', 'P')

        # Source workbook
        sheet_index = os.getenv('SHEET_INDEX', '0')
        try:
            self.sheet_index = int(sheet_index)
        except ValueError:
            raise ConfigurationError(f"SHEET_INDEX must be an integer, got {sheet_index!r}")

        # Logging
        self.log_level = os.getenv('LOG_LEVEL', 'WARNING')
        log_file_env = os.getenv('LOG_FILE', '')
        self.log_file: Optional[Path] = Path(log_file_env) if log_file_env else None

        self.validate()

    def validate(self) -> None:
        if len(self.csv_delimiter) != 1:
            raise ConfigurationError(
                f"CSV_DELIMITER must be a single character, got {self.csv_delimiter!r}"
            )
        if not self.phone_country_code.isdigit():
            raise ConfigurationError(
                f"PHONE_COUNTRY_CODE must contain digits only, got {self.phone_country_code!r}"
            )
        if phonenumbers.region_code_for_country_code(int(self.phone_country_code)) == 'ZZ':
            raise ConfigurationError(
                f"PHONE_COUNTRY_CODE {self.phone_country_code!r} is not an assigned calling code"
            )
        try:
            codecs.lookup(self.csv_encoding)
        except LookupError:
            raise ConfigurationError(f"CSV_ENCODING {self.csv_encoding!r} is not a known encoding")
        if self.sheet_index < 0:
            raise ConfigurationError(f"SHEET_INDEX must not be negative, got {self.sheet_index}")

    @property
    def fixed_values(self) -> Dict[str, str]:
        """Output column -> fixed value, for the columns that are not blank."""
        return {
            'Postcode': self.postcode,
            'Gemeente': self.gemeente,
            'Taal': self.taal,
            'Land': self.land,
            'Rode lijst': self.rode_lijst,
            'Type Contact': self.type_contact,
        }

    def get_output_dir(self, input_path: Optional[Path] = None) -> Path:
        if self.output_dir is not None:
            return self.output_dir
        if input_path is not None:
            return Path(input_path).parent
        return Path.cwd()

    def get_config_status(self) -> Dict[str, Any]:
        return {
            'framework': {
                'name': self.framework_name,
                'version': self.framework_version
            },
            'csv': {
                'delimiter': self.csv_delimiter,
                'encoding': self.csv_encoding,
                'output_dir': str(self.output_dir) if self.output_dir else '(next to input)',
            },
            'defaults': {
                'phone_country_code': self.phone_country_code,
                **self.fixed_values,
            },
        }

    def __repr__(self) -> str:
        status = self.get_config_status()
        return f"ConverterConfig({status['defaults']})"


# Global config instance
_config: Optional[ConverterConfig] = None


def get_config() -> ConverterConfig:
    global _config
    if _config is None:
        _config = ConverterConfig()
    return _config


def reload_config(env_file: Optional[Path] = None) -> ConverterConfig:
    global _config
    _config = ConverterConfig(env_file)
    return _config
