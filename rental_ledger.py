"""
Rental ledger
- Price car rentals (with duration discounts) and split each price between
  driver, owner, insurance, assistance and the platform.
- Rental modifications are overlaid on their rental before pricing.

Run:
  python rental_ledger.py -i data.json -o output.json -m modifications

Dependencies:
  pip install openpyxl pydantic
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from computations import DISCOUNT_LADDER, compute_actor_totals
from config import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH, load_dataset, save_document
from csv_handler import export_actions_to_csv
from excel_export import export_excel
from models import RentalLedgerError
from reports import ReportMode, build_report

logger = logging.getLogger("rental_ledger")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Compute rental prices and actor actions')
    parser.add_argument('-i', '--input', default=DEFAULT_INPUT_PATH,
                        help='Dataset JSON with cars, rentals and rental_modifications')
    parser.add_argument('-o', '--output', default=DEFAULT_OUTPUT_PATH,
                        help='Report JSON to write')
    parser.add_argument('-m', '--mode', choices=[m.value for m in ReportMode],
                        default=ReportMode.MODIFICATIONS.value,
                        help='Report shape')
    parser.add_argument('--flat-rate', action='store_true',
                        help='Price without duration discounts (prices mode only)')
    parser.add_argument('--csv', metavar='PATH', help='Also export actions to CSV')
    parser.add_argument('--excel', metavar='PATH', help='Also export the report to Excel')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mode = ReportMode(args.mode)
    if args.flat_rate and mode is not ReportMode.PRICES:
        logger.warning("--flat-rate only applies to the prices mode; ignored")

    try:
        store = load_dataset(args.input)
        document = build_report(store, mode, ladder=() if args.flat_rate else DISCOUNT_LADDER)
    except OSError as ex:
        logger.error("Cannot read %s: %s", args.input, ex)
        return 1
    except json.JSONDecodeError as ex:
        logger.error("Invalid JSON in %s: %s", args.input, ex)
        return 1
    except RentalLedgerError as ex:
        logger.error("Aborted, no report written: %s", ex)
        return 1

    try:
        save_document(document, args.output)
    except OSError as ex:
        logger.error("Cannot write report to %s: %s", args.output, ex)
        return 1

    if mode is not ReportMode.PRICES:
        for who, amount in compute_actor_totals(document).items():
            logger.info("  %-10s %+d", who, amount)
    elif args.csv:
        logger.warning("--csv needs an actions report; skipped for prices mode")

    try:
        if args.csv and mode is not ReportMode.PRICES:
            export_actions_to_csv(document, args.csv)
        if args.excel:
            export_excel(document, args.excel)
    except OSError as ex:
        logger.error("Export failed: %s", ex)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
