"""
Shared fixtures: isolated configuration and workbook builders.
"""

from __future__ import annotations

import openpyxl
import pytest

import core.config
from core.models import InputRecord

CONFIG_VARS = [
    "OUTPUT_DIR", "CSV_DELIMITER", "CSV_ENCODING", "PHONE_COUNTRY_CODE",
    "BEALERT_POSTCODE", "BEALERT_GEMEENTE", "BEALERT_TAAL", "BEALERT_LAND",
    "BEALERT_RODE_LIJST", "BEALERT_TYPE_CONTACT", "SHEET_INDEX",
    "LOG_LEVEL", "LOG_FILE",
]

HEADERS = ["Voornaam", "Naam", "Straat", "Huisnummer", "Mobiel nummer", "E-mailadres"]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test with default settings and no stray .env file."""
    for name in CONFIG_VARS:
        # set-then-delete so values exported by load_dotenv are undone afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(core.config, "_config", None)
    yield


@pytest.fixture
def jan() -> InputRecord:
    return InputRecord(
        row_number=2,
        first_name="Jan",
        last_name="Peeters",
        street="Kerkstraat",
        house_number="12",
        mobile="0478123456",
        email="jan.peeters@example.be",
    )


@pytest.fixture
def make_xlsx(tmp_path):
    """Write rows (lists) under the given headers to an .xlsx file."""

    def _make(rows, headers=None, name="leden.xlsx"):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.append(HEADERS if headers is None else headers)
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _make
