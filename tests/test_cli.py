"""
Tests for the command line: exit codes, output files and reports.
"""

from __future__ import annotations

import csv

from bealert import cli
from bealert.cli import main, EXIT_OK, EXIT_ROWS_SKIPPED, EXIT_FATAL

GOOD_ROWS = [
    ["Jan", "Peeters", "Kerkstraat", "12", "0478123456", "jan.peeters@example.be"],
    ["Els", "Janssens", "Dorpsstraat", "7B", 499112233, "els@example.be"],
]

SOURCE_CSV = (
    "Voornaam;Naam;Straat;Huisnummer;Mobiel nummer;E-mailadres\n"
    "Jan;Peeters;Kerkstraat;12;0478123456;jan.peeters@example.be\n"
)


def read_bin(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f, delimiter=";"))


def test_convert_all_rows(make_xlsx, tmp_path):
    source = make_xlsx(GOOD_ROWS)

    code = main(["convert", str(source)])

    assert code == EXIT_OK
    rows = read_bin(tmp_path / "leden.csv")
    assert len(rows) == 3
    assert rows[1][:5] == ["0032478123456", "", "Peeters", "Jan", "Kerkstraat 12"]
    assert rows[2][:5] == ["0032499112233", "", "Janssens", "Els", "Dorpsstraat 7"]


def test_convert_with_skipped_row_and_report(make_xlsx, tmp_path):
    source = make_xlsx(GOOD_ROWS + [
        ["Piet", "Claes", "Stationsstraat", "3", "", "piet@example.be"],
    ])
    report = tmp_path / "skipped.csv"

    code = main(["convert", str(source), "-o", str(tmp_path / "out.csv"), "--report", str(report)])

    assert code == EXIT_ROWS_SKIPPED
    assert len(read_bin(tmp_path / "out.csv")) == 3
    with open(report, newline="", encoding="utf-8") as f:
        skipped = list(csv.DictReader(f))
    assert skipped[0]["row"] == "4"
    assert skipped[0]["kind"] == "MissingRequiredField"


def test_dry_run_writes_nothing(make_xlsx, tmp_path):
    source = make_xlsx(GOOD_ROWS)

    assert main(["convert", str(source), "--dry-run"]) == EXIT_OK
    assert not (tmp_path / "leden.csv").exists()


def test_missing_column_is_fatal(make_xlsx, tmp_path):
    source = make_xlsx([["Jan", "Peeters"]], headers=["Voornaam", "Naam"])

    assert main(["convert", str(source)]) == EXIT_FATAL
    assert not (tmp_path / "leden.csv").exists()


def test_missing_input_is_fatal(tmp_path):
    assert main(["convert", str(tmp_path / "missing.xlsx")]) == EXIT_FATAL


def test_existing_output_needs_overwrite(make_xlsx, tmp_path):
    source = make_xlsx(GOOD_ROWS)
    (tmp_path / "leden.csv").write_text("old")

    assert main(["convert", str(source)]) == EXIT_FATAL
    assert (tmp_path / "leden.csv").read_text() == "old"

    assert main(["convert", str(source), "--overwrite"]) == EXIT_OK
    assert len(read_bin(tmp_path / "leden.csv")) == 3


def write_source_csv(tmp_path):
    source = tmp_path / "leden.csv"
    source.write_text(SOURCE_CSV, encoding="utf-8")
    return source


def test_csv_input_cannot_overwrite_itself(tmp_path):
    source = write_source_csv(tmp_path)

    assert main(["convert", str(source), "-o", str(source), "--overwrite"]) == EXIT_FATAL
    assert source.read_text(encoding="utf-8") == SOURCE_CSV


def test_csv_input_defaults_to_bin_suffix(tmp_path):
    source = write_source_csv(tmp_path)

    assert main(["convert", str(source)]) == EXIT_OK
    assert read_bin(tmp_path / "leden_bin.csv")[1][0] == "0032478123456"
    assert source.read_text(encoding="utf-8") == SOURCE_CSV


def test_unencodable_name_skips_only_that_row(make_xlsx, tmp_path, monkeypatch):
    monkeypatch.setenv("CSV_ENCODING", "cp1252")
    source = make_xlsx(GOOD_ROWS + [
        ["Łukasz", "Nowak", "Molenstraat", "5", "0470112233", "lukasz@example.be"],
    ])
    report = tmp_path / "skipped.csv"

    code = main(["convert", str(source), "--report", str(report)])

    assert code == EXIT_ROWS_SKIPPED
    with open(tmp_path / "leden.csv", newline="", encoding="cp1252") as f:
        rows = list(csv.reader(f, delimiter=";"))
    assert [r[3] for r in rows[1:]] == ["Jan", "Els"]
    with open(report, newline="", encoding="utf-8") as f:
        skipped = list(csv.DictReader(f))
    assert skipped[0]["row"] == "4"
    assert skipped[0]["kind"] == "UnencodableValue"


# ---------------------------------------------------------------------------
# Interactive mode
# ---------------------------------------------------------------------------


def scripted(answers):
    """Stand-in for Prompt.ask/Confirm.ask; None picks the offered default."""
    queue = list(answers)

    def ask(prompt, *args, **kwargs):
        answer = queue.pop(0)
        return kwargs.get("default") if answer is None else answer

    return ask


def test_interactive_csv_input_gets_bin_output(tmp_path, monkeypatch):
    source = write_source_csv(tmp_path)
    monkeypatch.setattr(cli.Prompt, "ask", scripted(["leden.csv", str(source), None]))
    monkeypatch.setattr(cli.Confirm, "ask", scripted([False]))

    assert main([]) == EXIT_OK
    assert read_bin(tmp_path / "leden_bin.csv")[1][:4] == ["0032478123456", "", "Peeters", "Jan"]
    assert source.read_text(encoding="utf-8") == SOURCE_CSV


def test_interactive_bad_input_can_be_retried(make_xlsx, tmp_path, monkeypatch):
    make_xlsx(GOOD_ROWS)
    monkeypatch.setattr(cli.Prompt, "ask", scripted(["missing.xlsx", "leden.xlsx", None]))
    monkeypatch.setattr(cli.Confirm, "ask", scripted([True, False]))

    assert main([]) == EXIT_OK
    assert len(read_bin(tmp_path / "leden.csv")) == 3


def test_fixed_values_come_from_environment(make_xlsx, tmp_path, monkeypatch):
    monkeypatch.setenv("BEALERT_POSTCODE", "3500")
    monkeypatch.setenv("BEALERT_GEMEENTE", "Hasselt")
    source = make_xlsx(GOOD_ROWS[:1])

    assert main(["convert", str(source)]) == EXIT_OK
    assert read_bin(tmp_path / "leden.csv")[1][6:8] == ["3500", "Hasselt"]


def test_invalid_configuration_is_fatal(make_xlsx, monkeypatch):
    monkeypatch.setenv("CSV_DELIMITER", ";;")
    assert main(["convert", str(make_xlsx(GOOD_ROWS))]) == EXIT_FATAL


def test_check_command(make_xlsx):
    assert main(["check", str(make_xlsx(GOOD_ROWS))]) == EXIT_OK
    bad = make_xlsx([], headers=["Voornaam", "Naam", "Straat"], name="bad.xlsx")
    assert main(["check", str(bad)]) == EXIT_FATAL


def test_version_and_config(capsys):
    assert main(["version"]) == EXIT_OK
    assert main(["config"]) == EXIT_OK
