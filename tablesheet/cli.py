#!/usr/bin/env python3
"""
TableSheet CLI — write a CSV or JSON-lines file into a workbook as a structured Excel table.

USAGE:
  python -m tablesheet.cli export orders.csv                          # exports/orders.xlsx, sheet "orders"
  python -m tablesheet.cli export orders.csv --sheet "Open Orders"    # custom sheet/table name
  python -m tablesheet.cli export orders.csv --parse-dates placed_at  # datetime column formatting
  python -m tablesheet.cli export events.jsonl --json-lines -o out/events.xlsx
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from tablesheet import config
from tablesheet.excel.writer import ExcelWriter
from tablesheet.frames import DataFrameTableSheet


def _read_frame(args) -> pd.DataFrame:
    """Load the input file with pandas."""
    if args.json_lines:
        frame = pd.read_json(args.input, lines=True)
        for col in args.parse_dates or []:
            frame[col] = pd.to_datetime(frame[col])
        return frame
    return pd.read_csv(args.input, parse_dates=args.parse_dates or False)


def cmd_export(args):
    """Export one input file to a workbook."""
    print("\n" + "=" * 70)
    print("  TABLESHEET — EXPORT")
    print("=" * 70)

    src = Path(args.input)
    frame = _read_frame(args)
    sheet_name = args.sheet or src.stem
    output = Path(args.output) if args.output else config.OUTPUT_DIR / f"{src.stem}.xlsx"

    ew = ExcelWriter()
    sheet = DataFrameTableSheet(frame, sheet_name)
    _, table = sheet.build_table_sheet(ew, start_row=args.start_row)
    path = ew.save(output)

    print(f"\n  {len(frame):,} rows x {len(sheet)} columns → table {table.displayName} ({table.ref})")
    print(f"  Output: {path.resolve()}")
    print("=" * 70 + "\n")
    return path


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="TableSheet — write records to structured Excel tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export a CSV/JSON-lines file to .xlsx")
    export_parser.add_argument("input", help="Input file")
    export_parser.add_argument("--sheet", help="Worksheet name (default: input file stem)")
    export_parser.add_argument("-o", "--output", help=f"Output .xlsx (default: {config.OUTPUT_DIR}/<stem>.xlsx)")
    export_parser.add_argument("--start-row", type=int, default=1, help="Header row (default 1)")
    export_parser.add_argument("--json-lines", action="store_true", help="Input is JSON lines")
    export_parser.add_argument("--parse-dates", action="append", metavar="COLUMN", help="Parse column as datetime")
    export_parser.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
