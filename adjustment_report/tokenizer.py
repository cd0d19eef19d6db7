from __future__ import annotations

import re
from typing import List, Optional

# Columns in the exported report are separated by wide whitespace gaps.
_COLUMN_GAP = re.compile(r"\t{3,}|\s{3,}")
_TAB_RUN = re.compile(r"\t+")

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
SECTION_MARKERS = ("Client Account Adjustments", "Invoiced Adjustments", "Adjustment Total")


def tokenize_line(line: str) -> List[str]:
    """Split one report line into field tokens.

    Pieces separated by three or more spaces/tabs are fields. A piece that
    still holds tab-separated parts is re-split: two parts become two fields,
    three or more collapse into ``"<all but last joined>" , "<last>"`` which
    repairs ``label<TAB>label<TAB>value`` runs.
    """
    line = line.strip().replace('"', "")
    if not line:
        return []

    tokens: List[str] = []
    for piece in _COLUMN_GAP.split(line):
        if not piece.strip():
            continue
        parts = _TAB_RUN.split(piece)
        if len(parts) > 2:
            tokens.append(" ".join(parts[:-1]))
            tokens.append(parts[-1])
        elif len(parts) == 2:
            tokens.extend(parts)
        else:
            tokens.append(piece)
    return tokens


def _first_word(line: str) -> Optional[str]:
    words = line.split()
    return words[0] if words else None


def is_block_terminator(line: str) -> bool:
    """True when ``line`` ends the record accumulated so far.

    Weekday rows (the date line of the next record) and the section headings
    share this single check.
    """
    if _first_word(line) in WEEKDAYS:
        return True
    tokens = tokenize_line(line)
    return bool(tokens) and tokens[0] in SECTION_MARKERS


def opens_block(line: str) -> bool:
    """True for date rows, which start the next record rather than being dropped."""
    return _first_word(line) in WEEKDAYS
