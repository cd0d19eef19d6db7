# -*- coding: utf-8 -*-
"""
Core logic for rebuilding "Adjustment Detail by Statement Date" records from
exported, whitespace-aligned statement text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from functools import reduce
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .diagnostics import check_record, log_diagnostic, log_type_summary
from .heuristics import parse_number, reconstruct
from .models import VALID_TYPES, AdjustmentRecord, Diagnostic, RecordBlock
from .sources import read_report_lines
from .tokenizer import is_block_terminator, opens_block, tokenize_line

logger = logging.getLogger(__name__)

# Header label -> AdjustmentRecord attribute
LABEL_FIELDS = {
    "Account No": "account_no",
    "Client": "client",
    "Amount": "amount",
    "Type": "type",
    "Reason": "reason",
    "Adjusted By": "adjusted_by",
}


@dataclass
class _Fold:
    """Segmenter state carried from one line to the next."""

    rows: List[List[str]] = field(default_factory=list)
    line_number: int = 0
    blocks: List[RecordBlock] = field(default_factory=list)


# ------------------------------
# Parser
# ------------------------------
class AdjustmentReportParser:
    _amount_noise = re.compile(r"[$, ]")

    def __init__(self, report_path: Optional[Path] = None):
        self.report_path = Path(report_path) if report_path is not None else None
        self.diagnostics: List[Diagnostic] = []

    # ---------- helpers ----------
    @staticmethod
    def _money_to_decimal(s: str) -> Optional[Decimal]:
        s = AdjustmentReportParser._amount_noise.sub("", s)
        if s == "":
            return Decimal("0.00")
        return parse_number(s)

    @staticmethod
    def _find_prefixed(rows: Sequence[Sequence[str]], prefix: str) -> Optional[str]:
        for row in rows:
            for tok in row:
                if tok.startswith(prefix):
                    return tok.split(prefix, 2)[1]
        return None

    # ---------- segmentation ----------
    @staticmethod
    def _step(state: _Fold, line: str) -> _Fold:
        state.line_number += 1
        if is_block_terminator(line):
            if state.rows:
                state.blocks.append(RecordBlock(state.rows, state.line_number))
            state.rows = []
            if not opens_block(line):
                return state
        tokens = tokenize_line(line)
        if tokens:
            state.rows.append(tokens)
        return state

    def segment(self, lines: Iterable[str]) -> List[RecordBlock]:
        """Cut the line stream into record blocks.

        Weekday rows end the previous block and become row 0 of the next one;
        section headings only end the previous block.
        """
        state = reduce(self._step, lines, _Fold())
        if state.rows:
            state.blocks.append(RecordBlock(state.rows, state.line_number))
        return state.blocks

    def extract_raw_blocks(self) -> List[RecordBlock]:
        if self.report_path is None:
            raise ValueError("No report path given")
        return self.segment(read_report_lines(self.report_path))

    # ---------- record building ----------
    @staticmethod
    def _zip_labels(r: AdjustmentRecord, labels: Sequence[str], values: Sequence[str], label_range: range, offset: int) -> None:
        for i in label_range:
            if i >= len(labels) or i - offset >= len(values):
                continue
            attr = LABEL_FIELDS.get(labels[i])
            if attr:
                setattr(r, attr, values[i - offset])

    def _build_canonical(self, rows: Sequence[Sequence[str]]) -> Tuple[AdjustmentRecord, bool]:
        r = AdjustmentRecord(date=rows[0][0])
        labels = rows[1] if len(rows) > 1 else []
        data = rows[2] if len(rows) > 2 else None

        if data is not None and len(data) == 6:
            self._zip_labels(r, labels, data, range(0, 6), 0)
            return r, r.type in VALID_TYPES

        if data is not None and len(data) == 4:
            # Amount and Type wrap onto the following line; the first row
            # keeps Account No/Client and Reason/Adjusted By.
            r.layout = "split-row"
            self._zip_labels(r, labels, data, range(0, 2), 0)
            if len(rows) > 3:
                self._zip_labels(r, labels, rows[3], range(2, 4), 2)
            self._zip_labels(r, labels, data, range(4, 6), 2)
            return r, r.type in VALID_TYPES

        return r, False

    def build_record(self, block: RecordBlock) -> Optional[AdjustmentRecord]:
        rows = block.rows
        if not rows:
            return None

        r, matched = self._build_canonical(rows)
        if not matched:
            logger.debug("Line %d: no canonical layout, reconstructing from tokens", block.line_number)
            r = reconstruct(rows)

        if r.reason is None:
            r.reason = self._find_prefixed(rows, "Reason ")
        if r.adjusted_by is None:
            r.adjusted_by = self._find_prefixed(rows, "Adjusted By ")

        if r.amount:
            r.numeric_amount = self._money_to_decimal(r.amount)

        for diag in check_record(r, rows, block.line_number):
            log_diagnostic(diag)
            self.diagnostics.append(diag)
        return r

    def parse_blocks(self, blocks: List[RecordBlock]) -> List[AdjustmentRecord]:
        records = [r for r in (self.build_record(b) for b in blocks) if r is not None]
        log_type_summary(records)
        return records

    # ---------- main extraction ----------
    def parse_lines(self, lines: Iterable[str]) -> List[AdjustmentRecord]:
        return self.parse_blocks(self.segment(lines))

    def extract(self) -> List[AdjustmentRecord]:
        blocks = self.extract_raw_blocks()
        return self.parse_blocks(blocks)
