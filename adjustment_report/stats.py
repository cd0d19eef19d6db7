from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Sequence, Tuple

from .heuristics import parse_number
from .models import AdjustmentRecord

UNKNOWN_TYPE = "Unknown"
_CENTS = Decimal("0.01")


def currency_string(value: Decimal) -> str:
    """Format like ``$1,234.50``."""
    value = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"${value:,.2f}"


def _account_key(account_no) -> Tuple[int, Decimal]:
    # Non-numeric account numbers go after the numeric ones.
    value = parse_number(account_no)
    if value is None:
        return (1, Decimal(0))
    return (0, value)


def sort_records(records: Sequence[AdjustmentRecord]) -> List[AdjustmentRecord]:
    """Order by type, then numerically by account number."""
    return sorted(records, key=lambda r: (r.type or "", _account_key(r.account_no)))


def total_amount(records: Sequence[AdjustmentRecord]) -> Decimal:
    return sum(
        (r.numeric_amount for r in records if r.numeric_amount is not None),
        Decimal("0.00"),
    )


def group_by_type(records: Sequence[AdjustmentRecord]) -> Dict[str, List[AdjustmentRecord]]:
    groups: Dict[str, List[AdjustmentRecord]] = {}
    for r in records:
        groups.setdefault(r.type or UNKNOWN_TYPE, []).append(r)
    return groups


def type_totals(records: Sequence[AdjustmentRecord]) -> List[Tuple[str, Decimal]]:
    """Per-type sums, in order of each type's first appearance."""
    return [(t, total_amount(rs)) for t, rs in group_by_type(records).items()]


def sanity(records: Sequence[AdjustmentRecord], diagnostics: Sequence = ()) -> Dict[str, object]:
    """Basic stats by type, plus the grand total."""
    by_type = {t: len(rs) for t, rs in group_by_type(records).items()}
    return {
        "count": len(records),
        "by_type": by_type,
        "grand_total": total_amount(records),
        "diagnostics": len(diagnostics),
    }
