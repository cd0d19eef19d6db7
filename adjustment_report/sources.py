from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

import pdfplumber

_LINE_BREAKS = re.compile(r"[\r\n]+")


def split_lines(text: str) -> List[str]:
    """Split report text on runs of CR/LF characters."""
    return _LINE_BREAKS.split(text)


def read_pdf_text(pdf_path: Path) -> str:
    """Extract page text with horizontal spacing preserved.

    ``layout=True`` keeps the column gaps as whitespace runs, which is what
    the tokenizer splits on.
    """
    logging.getLogger("pdfminer").setLevel(logging.ERROR)
    pages: List[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text(layout=True) or "")
    return "\n".join(pages)


def read_report_lines(report_path: Path, encoding: str = "utf-8-sig") -> List[str]:
    """Read a whole statement (text export or PDF) as a list of lines.

    Raises
    ------
    OSError
        If the report cannot be read. Nothing is retried.
    """
    report_path = Path(report_path)
    if report_path.suffix.lower() == ".pdf":
        text = read_pdf_text(report_path)
    else:
        text = report_path.read_text(encoding=encoding)
    return split_lines(text)
