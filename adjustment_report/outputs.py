from __future__ import annotations

import csv
import io
import json
from dataclasses import asdict
from pathlib import Path
from typing import List

from .models import AdjustmentRecord, RecordBlock
from .stats import currency_string, sort_records, total_amount, type_totals

SUPER_HEADING = "Adjustment Detail by Statement Date"
HEADING = ["Account No", "Client", "Amount", "Type", "Reason", "Adjusted By"]


def record_row(r: AdjustmentRecord) -> List[str]:
    fields = [r.account_no, r.client, r.amount, r.type, r.reason, r.adjusted_by]
    return ["" if v is None else v for v in fields]


def render_csv(records: List[AdjustmentRecord]) -> str:
    """Render totals, heading and sorted records as fully quoted CSV text.

    The statement date is used for grouping upstream and is not a column.
    """
    ordered = sort_records(records)
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    w.writerow([SUPER_HEADING])
    for type_name, total in type_totals(records):
        w.writerow(["", "", currency_string(total), f"{type_name} Total"])
    w.writerow(["", "", currency_string(total_amount(ordered)), "Grand Total"])
    w.writerow(HEADING)
    for r in ordered:
        w.writerow(record_row(r))
    return buf.getvalue()


def write_csv(records: List[AdjustmentRecord], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    text = render_csv(records)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        f.write(text)


def write_json(records: List[AdjustmentRecord], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(
            [
                {
                    **asdict(r),
                    "numeric_amount": None if r.numeric_amount is None else float(r.numeric_amount),
                }
                for r in records
            ],
            f,
            ensure_ascii=False,
            indent=2,
        )


def write_blocks(blocks: List[RecordBlock], out_path: Path) -> None:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump([asdict(b) for b in blocks], f, ensure_ascii=False, indent=2)
