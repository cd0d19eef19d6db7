#!/usr/bin/env python3
"""Generate archive artifacts for a single adjustment statement.

Parses the statement and writes the totalled CSV plus the raw token blocks
JSON under ``AdjustmentArchive/<stem>/``.

Example
-------
    python scripts/build_report_archive.py data/originals/"Adjustments Aug 2023.txt"
"""
from __future__ import annotations

import argparse
from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from adjustment_report import AdjustmentReportParser, write_blocks, write_csv


def build_archive(report: Path, archive_dir: Path = Path("AdjustmentArchive")) -> Path:
    report = Path(report)
    out_dir = Path(archive_dir) / report.stem
    out_dir.mkdir(parents=True, exist_ok=True)

    parser = AdjustmentReportParser(report)
    blocks = parser.extract_raw_blocks()
    records = parser.parse_blocks(blocks)

    csv_out = out_dir / f"{report.stem}.csv"
    write_blocks(blocks, out_dir / "blocks.json")
    write_csv(records, csv_out)
    return csv_out


def main() -> None:
    ap = argparse.ArgumentParser(description="Archive adjustment statement artifacts")
    ap.add_argument("report", type=Path, help="Statement text or PDF path")
    ap.add_argument("--archive-dir", type=Path, default=Path("AdjustmentArchive"), help="Archive output directory")
    args = ap.parse_args()

    csv_out = build_archive(args.report, args.archive_dir)
    print(f"Archive updated: {csv_out}")


if __name__ == "__main__":
    main()
