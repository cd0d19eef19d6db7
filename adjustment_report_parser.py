#!/usr/bin/env python3
"""CLI for converting adjustment statement exports into totalled CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from adjustment_report import (
    AdjustmentReportParser,
    currency_string,
    sanity,
    type_totals,
    write_blocks,
    write_csv,
    write_json,
)
from project_paths import ARTIFACT_CSV_DIR


def default_csv_name(report_path: Path) -> Path:
    return ARTIFACT_CSV_DIR / f"{Path(report_path).stem}.csv"


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Parse an Adjustment Detail statement (text or PDF export) into a totalled CSV."
    )
    ap.add_argument("report", type=Path, help="Statement text or PDF path")
    ap.add_argument("--csv", type=Path, default=None, help="Output CSV path (default: artifacts/csv/<name>.csv)")
    ap.add_argument("--json", type=Path, default=None, help="Optional JSON output path for the parsed records")
    ap.add_argument("--blocks", type=Path, default=None, help="Optional JSON output path for the raw token blocks")
    ap.add_argument("--print-totals", action="store_true", help="Print per-type totals after parsing")
    ap.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics (default: WARNING)")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    parser = AdjustmentReportParser(args.report)
    blocks = parser.extract_raw_blocks()
    if args.blocks:
        write_blocks(blocks, args.blocks)
    records = parser.parse_blocks(blocks)

    csv_path = args.csv or default_csv_name(args.report)
    write_csv(records, csv_path)
    if args.json:
        write_json(records, args.json)

    stats = sanity(records, parser.diagnostics)
    by_type = ", ".join(f"{t}={n}" for t, n in stats["by_type"].items())
    print(f"Rows: {stats['count']}  ({by_type})")
    print(f"Grand Total: {currency_string(stats['grand_total'])}")
    print(f"Diagnostics: {stats['diagnostics']}")
    print(f"CSV: {csv_path}")
    if args.json:
        print(f"JSON: {args.json}")
    if args.blocks:
        print(f"Blocks: {args.blocks}")
    if args.print_totals:
        print("\nPer-type totals:")
        for t, total in type_totals(records):
            print(f"  {t}: {currency_string(total)}")


if __name__ == "__main__":
    main()
