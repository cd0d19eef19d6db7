from .models import AdjustmentRecord, Diagnostic, RecordBlock
from .parser import AdjustmentReportParser
from .outputs import (
    render_csv,
    write_csv,
    write_json,
    write_blocks,
)
from .stats import sanity, type_totals, currency_string
