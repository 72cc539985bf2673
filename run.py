# run.py
"""
Command-line entrypoint: load a datastandard JSON file and print the report
for one category as CSV, Markdown or JSON, or write it to a DOCX file.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config import DEFAULTS, OUTPUT_FORMATS, OutputConfig, ReportConfig
from datastandard_loader import load_datastandard
from logger import get_logger, set_level
from models import CyclicAttributeError, DatastandardFormatError, DuplicateIdError, InvalidReferenceError
from report_service import ReportService
from utils import RENDERERS, materialize_rows, render_csv, write_docx

LOGGER = get_logger(__name__)

EXIT_OK = 0
# 1 and 2 belong to Python and argparse (uncaught error, usage error)
EXIT_NOT_FOUND = 3
EXIT_BAD_FORMAT = 4
EXIT_BAD_DATA = 5


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Build the attribute report for a datastandard category")
    ap.add_argument("datastandard", help="Path to datastandard JSON")
    ap.add_argument("category", help="Id of the category to report on")
    ap.add_argument("--format", choices=OUTPUT_FORMATS, default=DEFAULTS.output.format)
    ap.add_argument("--output", "-o", help="Write to this file instead of stdout (required for docx)")
    ap.add_argument("--title", default=DEFAULTS.output.docx_title, help="Heading for docx output")
    ap.add_argument("--delimiter", default=DEFAULTS.output.csv_delimiter, help="CSV field delimiter")
    ap.add_argument("--log-level", default=DEFAULTS.log_level)
    ap.add_argument("--no-cycle-check", action="store_true",
                    help="Trust the attribute graph to be acyclic")
    return ap


def write_report(rows: List[List[str]], out: OutputConfig, output: Optional[str]) -> None:
    if out.format == "docx":
        write_docx(rows, output, table_style=out.docx_table_style, title=out.docx_title)
        return

    if out.format == "csv":
        text = render_csv(rows, delimiter=out.csv_delimiter)
    else:
        text = RENDERERS[out.format](rows)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        LOGGER.info("Report written to %s", output)
    else:
        sys.stdout.write(text)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.format == "docx" and not args.output:
        ap.error("--output is required for docx format")
    set_level(args.log_level)

    report_cfg = ReportConfig(detect_cycles=not args.no_cycle_check)
    out_cfg = OutputConfig(format=args.format, csv_delimiter=args.delimiter, docx_title=args.title)

    try:
        datastandard = load_datastandard(args.datastandard)
        rows = materialize_rows(ReportService(report_cfg).report(datastandard, args.category))
    except FileNotFoundError as e:
        sys.stderr.write(f"[ERROR] {e}\n")
        return EXIT_NOT_FOUND
    except DatastandardFormatError as e:
        sys.stderr.write(f"[ERROR] {e}\n")
        return EXIT_BAD_FORMAT
    except (InvalidReferenceError, DuplicateIdError, CyclicAttributeError) as e:
        sys.stderr.write(f"[ERROR] {e}\n")
        return EXIT_BAD_DATA

    write_report(rows, out_cfg, args.output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
