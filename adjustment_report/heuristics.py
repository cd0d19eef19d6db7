"""Best-effort reconstruction of records whose block fits no known layout.

Some statement rows degrade into free text: header labels bleed into data
rows, date subtotals trail the record and columns wrap unpredictably.  This
module drops the noise and then picks fields out of the remaining tokens by
position and by content.  The steps run in a fixed order and each relies on
the cleanup done by the ones before it.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import List, Optional, Sequence

from .models import VALID_TYPES, AdjustmentRecord

HEADER_LABELS = ("Account No", "Client", "Amount", "Type", "Reason", "Adjusted By")

MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

DATE_TOTAL = "Date Total:"

NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(text: Optional[str]) -> Optional[Decimal]:
    """Plain ASCII decimal or exponent notation only; anything else is None."""
    if text is None or not NUMBER.fullmatch(text.strip()):
        return None
    return Decimal(text.strip())


def strip_labels(token: str) -> str:
    """Remove the first occurrence of every header label from ``token``."""
    for label in HEADER_LABELS:
        token = token.replace(label, "", 1).strip()
    return token


def looks_like_month_total(token: str) -> bool:
    """``"August 2023"`` style subtotal captions; ``"August rebill"`` is kept."""
    if not token.startswith(MONTHS):
        return False
    parts = token.split()
    return len(parts) > 1 and bool(NUMBER.fullmatch(parts[1]))


def _index_of(tokens: Sequence[str], predicate) -> Optional[int]:
    for i, tok in enumerate(tokens):
        if predicate(tok):
            return i
    return None


def flatten_tokens(rows: Sequence[Sequence[str]]) -> List[str]:
    tokens = [strip_labels(tok) for row in rows for tok in row]
    return [tok.strip() for tok in tokens if tok.strip()]


def reconstruct(rows: Sequence[Sequence[str]]) -> AdjustmentRecord:
    """Rebuild a whole record from the tokens of a degenerate block.

    Any partial record built from a canonical layout is discarded; the
    result here starts from scratch.
    """
    tokens = flatten_tokens(rows)

    cut = tokens.index(DATE_TOTAL) if DATE_TOTAL in tokens else None
    if cut is not None:
        del tokens[cut:cut + 2]

    tokens = [tok for tok in tokens if not looks_like_month_total(tok)]

    r = AdjustmentRecord(layout="heuristic")
    if tokens:
        r.date = tokens[0]
    elif rows and rows[0]:
        # Header-only block: every token was a label.
        r.date = rows[0][0]
    if len(tokens) > 1:
        r.account_no = tokens[1]

    consumed = {0, 1}

    amount_idx = _index_of(tokens, lambda t: "$" in t)
    if amount_idx is not None:
        r.amount = tokens[amount_idx]
        consumed.add(amount_idx)

    type_idx = _index_of(tokens, lambda t: t in VALID_TYPES)
    if type_idx is not None:
        r.type = tokens[type_idx]
        if type_idx + 1 < len(tokens):
            r.reason = tokens[type_idx + 1]
        if type_idx + 2 < len(tokens):
            r.adjusted_by = tokens[type_idx + 2]
        consumed.update((type_idx, type_idx + 1, type_idx + 2))

    # The cut index comes from before the month-total filter, as the
    # subtotal pair sat at that position in the flattened block.
    remaining = tokens if cut is None else tokens[:cut]
    r.client = " ".join(tok for i, tok in enumerate(remaining) if i not in consumed)
    return r
