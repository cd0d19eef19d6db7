from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


VALID_TYPES = ("Account", "Invoiced")


@dataclass
class RecordBlock:
    """Tokenised rows belonging to one adjustment prior to record building."""

    rows: List[List[str]]        # row 0 is the date line, row 1 the header labels
    line_number: int             # line that closed the block (diagnostics only)


@dataclass
class AdjustmentRecord:
    date: Optional[str] = None           # e.g. "Thursday 31 August 2023"
    account_no: Optional[str] = None     # keep as str, usually numeric
    client: Optional[str] = None
    amount: Optional[str] = None         # as printed, e.g. "$343.35"
    type: Optional[str] = None           # "Account" or "Invoiced"
    reason: Optional[str] = None         # may be the literal "null"
    adjusted_by: Optional[str] = None    # staff code, e.g. "KAB478"
    numeric_amount: Optional[Decimal] = None
    layout: str = "six-column"           # "six-column", "split-row" or "heuristic"


@dataclass
class Diagnostic:
    """A data-quality defect found in a built record. Never fatal."""

    code: str
    line_number: int
    block: List[List[str]] = field(default_factory=list)
    record: Optional[AdjustmentRecord] = None
