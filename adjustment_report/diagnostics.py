from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .heuristics import parse_number
from .models import VALID_TYPES, AdjustmentRecord, Diagnostic

logger = logging.getLogger(__name__)

UNEXPECTED_TYPE = "UNEXPECTED TYPE"
NON_NUMERIC_ACCOUNT_NO = "NON-NUMERIC ACCOUNT NO"
UNDEFINED_REASON = "UNDEFINED REASON"
UNDEFINED_ADJUSTED_BY = "UNDEFINED Adjusted By"
MISSING_AMOUNT = "AMOUNT IS MISSING"
NON_NUMERIC_AMOUNT = "NON-NUMERIC AMOUNT"


def is_numeric(value: Optional[str]) -> bool:
    return parse_number(value) is not None


def check_record(record: AdjustmentRecord, rows: Sequence[Sequence[str]], line_number: int) -> List[Diagnostic]:
    """Return every anomaly found in ``record``; the record is not modified."""
    codes: List[str] = []
    if record.type not in VALID_TYPES:
        codes.append(UNEXPECTED_TYPE)
    if not is_numeric(record.account_no):
        codes.append(NON_NUMERIC_ACCOUNT_NO)
    if record.reason is None:
        codes.append(UNDEFINED_REASON)
    if record.adjusted_by is None:
        codes.append(UNDEFINED_ADJUSTED_BY)
    if not record.amount:
        codes.append(MISSING_AMOUNT)
    if record.numeric_amount is None or not record.numeric_amount.is_finite():
        codes.append(NON_NUMERIC_AMOUNT)

    block = [list(row) for row in rows]
    return [Diagnostic(code, line_number, block, record) for code in codes]


def log_diagnostic(diag: Diagnostic) -> None:
    logger.warning("%s line=%d block=%r record=%r", diag.code, diag.line_number, diag.block, diag.record)


def log_type_summary(records: Sequence[AdjustmentRecord]) -> Dict[Optional[str], List[AdjustmentRecord]]:
    """Log the distinct types seen, plus the records of any unexpected type."""
    by_type: Dict[Optional[str], List[AdjustmentRecord]] = {}
    for r in records:
        by_type.setdefault(r.type, []).append(r)
    logger.info("Types seen: %s", list(by_type))
    for t, rs in by_type.items():
        if t not in VALID_TYPES:
            logger.warning("Unexpected type %r: %r", t, rs)
    return by_type
