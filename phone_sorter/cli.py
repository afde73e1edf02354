"""Command line interface for sorting phone number lists by state."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigurationError, build_options, load_configuration
from .ingestion import UnsupportedFileTypeError, export_records, load_lines, write_archive, write_artifacts
from .models import RunCallbacks
from .orchestrator import process_lines
from .reports import ReportGenerator

LOGGER = logging.getLogger(__name__)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Validate US phone numbers and sort them into per-state lists",
    )
    parser.add_argument("input", help="Path to the input file (.txt, one number per line, or CSV/XLSX)")
    parser.add_argument("output", help="Directory where the report files should be written")
    parser.add_argument(
        "--config",
        help="Optional processing configuration file (YAML or JSON)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Number of lines processed between progress updates",
    )
    parser.add_argument(
        "--keep-country-code",
        dest="strip_country_code",
        action="store_const",
        const=False,
        default=None,
        help="Do not strip a leading US country code from 11 digit numbers",
    )
    parser.add_argument(
        "--no-group-by-state",
        dest="group_by_state",
        action="store_const",
        const=False,
        default=None,
        help="Skip writing one file per state",
    )
    parser.add_argument(
        "--column",
        help="Spreadsheet column containing the phone numbers",
    )
    parser.add_argument(
        "--zip",
        action="store_true",
        help="Also bundle the report files into phone-numbers-results.zip",
    )
    parser.add_argument(
        "--export-records",
        help="Write every classified record to this CSV or Excel file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = load_configuration(args.config) if args.config else {}
        options = build_options(
            config,
            strip_country_code=args.strip_country_code,
            group_by_state=args.group_by_state,
            batch_size=args.batch_size,
        )
    except ConfigurationError as exc:
        LOGGER.error("%s", exc)
        return 1

    try:
        lines = load_lines(args.input, column=args.column)
    except UnsupportedFileTypeError as exc:
        LOGGER.error("%s", exc)
        return 1

    callbacks = RunCallbacks(
        on_progress=lambda fraction, processed: LOGGER.debug(
            "Progress %.0f%% (%s numbers)", fraction * 100, processed
        ),
    )
    run = process_lines(lines, options, callbacks)
    snapshot = run.snapshot()
    report = ReportGenerator(snapshot)

    output_dir = Path(args.output)
    write_artifacts(output_dir, report)
    if args.zip:
        write_archive(output_dir / "phone-numbers-results.zip", report)
    if args.export_records:
        export_records([*snapshot.valid_records, *snapshot.invalid_records], args.export_records)

    LOGGER.info(
        "Processed %s lines: %s valid, %s invalid across %s states",
        snapshot.total,
        snapshot.valid_count,
        snapshot.invalid_count,
        len(snapshot.distinct_states),
    )
    LOGGER.info("Reports written to %s", output_dir.resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
