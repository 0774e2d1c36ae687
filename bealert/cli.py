"""
Command line interface

Usage:
    python run.py                          # Interactive mode
    python run.py convert leden.xlsx       # Convert to leden.csv
    python run.py check leden.xlsx         # Only check the required columns
    python run.py config                   # Show configuration
    python run.py version                  # Show version

Exit codes: 0 all rows converted, 1 some rows skipped, 2 fatal error.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich.prompt import Prompt, Confirm

from core import __version__
from core.config import ConverterConfig, get_config
from core.exceptions import ConfigurationError
from core.logging_config import setup_logging
from core.models import ConversionResult, InputRecord
from .banner import (
    console,
    show_banner,
    show_step,
    show_success,
    show_error,
    show_warning,
    show_info,
    show_preview_table,
    show_skipped_rows,
    show_conversion_summary,
    show_config_status,
)
from .exporters import CSVExporter, export_report
from .loaders import get_loader
from .mappers import RecordMapper, records_from_rows, convert_records
from .schema import MAPPED_COLUMNS, build_default_table, missing_columns

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ROWS_SKIPPED = 1
EXIT_FATAL = 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bealert-convert",
        description="Convert a member spreadsheet into a BE-Alert BIN import CSV",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    sub = p.add_subparsers(dest="command")

    convert = sub.add_parser("convert", help="Convert a spreadsheet to the BIN CSV format")
    convert.add_argument("input", help="Member spreadsheet (.xlsx or .csv)")
    convert.add_argument("-o", "--output", help="Output CSV (default: input name with .csv)")
    convert.add_argument("--report", help="Also write skipped rows to this CSV file")
    convert.add_argument("--dry-run", action="store_true", help="Validate and report without writing")
    convert.add_argument("--overwrite", action="store_true", help="Replace an existing output file")

    check = sub.add_parser("check", help="Check that the spreadsheet has the required columns")
    check.add_argument("input", help="Member spreadsheet (.xlsx or .csv)")

    sub.add_parser("config", help="Show configuration status")
    sub.add_parser("version", help="Show version")
    return p


def build_mapper(config: ConverterConfig) -> RecordMapper:
    return RecordMapper(
        defaults=build_default_table(config.fixed_values),
        phone_country_code=config.phone_country_code,
        encoding=config.csv_encoding,
    )


def load_records(input_path: str, config: ConverterConfig) -> List[InputRecord]:
    """Read the source and build schema-checked InputRecords."""
    loader = get_loader(input_path, sheet_index=config.sheet_index)
    rows, headers = loader.load()
    return records_from_rows(rows, headers, first_row_number=loader.first_data_row)


def default_output_path(input_path: str) -> str:
    """Input name with .csv; a .csv input gets "<stem>_bin.csv" instead."""
    output = Path(CSVExporter.generate_filename(input_path))
    if output.resolve() == Path(input_path).resolve():
        output = output.with_name(f"{output.stem}_bin.csv")
    return str(output)


def resolve_output_path(input_path: str, output_path: Optional[str]) -> str:
    output = output_path or default_output_path(input_path)
    if Path(output).resolve() == Path(input_path).resolve():
        raise ConfigurationError(f"Output would overwrite the input file: {input_path}")
    return output


def convert_file(input_path: str, output_path: Optional[str], config: ConverterConfig,
                 dry_run: bool = False, report_path: Optional[str] = None) -> ConversionResult:
    """
    Load, map and (unless dry_run) export one spreadsheet.

    Raises:
        ConfigurationError: Wrong file type, empty sheet or missing columns
        OSError: Source unreadable or destination unwritable
    """
    records = load_records(input_path, config)
    result = convert_records(records, build_mapper(config))

    if not dry_run:
        exporter = CSVExporter(delimiter=config.csv_delimiter, encoding=config.csv_encoding)
        exporter.export(result.rows, output_path)

    if report_path:
        export_report(result.diagnostics, report_path)

    return result


def exit_code_for(result: ConversionResult) -> int:
    return EXIT_OK if result.ok else EXIT_ROWS_SKIPPED


def report_result(result: ConversionResult, output_path: str = ""):
    if result.diagnostics:
        show_skipped_rows(result.diagnostics)
    show_conversion_summary(result, output_path)


def cmd_convert(args: argparse.Namespace, config: ConverterConfig) -> int:
    output_path = resolve_output_path(args.input, args.output)

    if not args.dry_run and Path(output_path).exists() and not args.overwrite:
        show_error(f"Output file already exists: {output_path} (use --overwrite)")
        return EXIT_FATAL

    result = convert_file(
        args.input, output_path, config,
        dry_run=args.dry_run, report_path=args.report,
    )

    report_result(result, "" if args.dry_run else output_path)
    if args.report:
        show_info(f"Skipped-row report: {args.report}")
    return exit_code_for(result)


def cmd_check(args: argparse.Namespace, config: ConverterConfig) -> int:
    loader = get_loader(args.input, sheet_index=config.sheet_index)
    rows, headers = loader.load()

    missing = missing_columns(headers)
    if missing:
        show_error("Missing required column(s): " + ", ".join(missing))
        return EXIT_FATAL

    show_success(f"Columns OK ({len(rows)} data row(s))")
    return EXIT_OK


def cmd_config(config: ConverterConfig) -> int:
    show_config_status(config.get_config_status())
    return EXIT_OK


def interactive(config: ConverterConfig) -> int:
    """Prompt-driven conversion; loops until the user stops."""
    show_banner()
    code = EXIT_OK

    while True:
        show_step(1, "Select spreadsheet", "Path to the member .xlsx (drag the file into the terminal)")
        input_path = Prompt.ask("[cyan]Input file[/cyan]").strip().strip('"\'')

        try:
            records = load_records(input_path, config)
        except (ConfigurationError, OSError) as e:
            show_error(f"Input error: {e}")
            code = EXIT_FATAL
            if not Confirm.ask("\n[cyan]Try another file?[/cyan]", default=True):
                return code
            continue

        show_success(f"Columns OK, {len(records)} row(s) found")

        show_step(2, "Choose output")
        suggested = default_output_path(input_path)
        while True:
            answer = Prompt.ask("[cyan]Output file[/cyan]", default=suggested).strip().strip('"\'')
            try:
                output_path = resolve_output_path(input_path, answer)
                break
            except ConfigurationError as e:
                show_error(str(e))
        if Path(output_path).exists() and not Confirm.ask(
                f"[yellow]{output_path} exists. Overwrite?[/yellow]", default=False):
            show_warning("Nothing written")
            continue

        show_step(3, "Convert")
        result = convert_records(records, build_mapper(config))
        try:
            exporter = CSVExporter(delimiter=config.csv_delimiter, encoding=config.csv_encoding)
            exporter.export(result.rows, output_path)
        except (ConfigurationError, OSError) as e:
            show_error(f"Cannot write {output_path}: {e}")
            code = EXIT_FATAL
        else:
            if result.rows:
                show_preview_table([r.as_dict() for r in result.rows], list(MAPPED_COLUMNS))
            report_result(result, output_path)
            code = exit_code_for(result)

        if not Confirm.ask("\n[cyan]Convert another file?[/cyan]", default=False):
            return code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "version":
        console.print(f"bealert-convert {__version__}")
        return EXIT_OK

    try:
        config = get_config()
    except ConfigurationError as e:
        show_error(f"Configuration error: {e}")
        return EXIT_FATAL

    setup_logging(
        "DEBUG" if args.verbose else config.log_level,
        log_file=config.log_file,
        console=console,
    )

    try:
        if args.command == "convert":
            return cmd_convert(args, config)
        if args.command == "check":
            return cmd_check(args, config)
        if args.command == "config":
            return cmd_config(config)
        return interactive(config)
    except ConfigurationError as e:
        show_error(str(e))
        return EXIT_FATAL
    except OSError as e:
        logger.debug("I/O failure", exc_info=True)
        show_error(f"I/O error: {e}")
        return EXIT_FATAL
    except KeyboardInterrupt:
        show_warning("Cancelled")
        return EXIT_FATAL
