import json
import tempfile
import unittest
from decimal import Decimal
from pathlib import Path

from adjustment_report import AdjustmentRecord, RecordBlock, render_csv, write_blocks, write_csv, write_json


def sample_records():
    return [
        AdjustmentRecord(
            date="Thursday 31 August 2023", account_no="241760", client="USDA NAHMS Study/Dr. Bettina",
            amount="$343.35", type="Invoiced", reason="null", adjusted_by="KAB478",
            numeric_amount=Decimal("343.35"),
        ),
        AdjustmentRecord(
            date="Friday 1 September 2023", account_no="241761", client="Jane Doe",
            amount="$1,010.00", type="Account", reason="Courtesy credit", adjusted_by="AB12",
            numeric_amount=Decimal("1010.00"), layout="split-row",
        ),
    ]


class TestRenderCsv(unittest.TestCase):
    def test_layout(self):
        lines = render_csv(sample_records()).splitlines()
        self.assertEqual(
            lines,
            [
                '"Adjustment Detail by Statement Date"',
                '"","","$343.35","Invoiced Total"',
                '"","","$1,010.00","Account Total"',
                '"","","$1,353.35","Grand Total"',
                '"Account No","Client","Amount","Type","Reason","Adjusted By"',
                '"241761","Jane Doe","$1,010.00","Account","Courtesy credit","AB12"',
                '"241760","USDA NAHMS Study/Dr. Bettina","$343.35","Invoiced","null","KAB478"',
            ],
        )

    def test_crlf_terminated(self):
        text = render_csv(sample_records())
        self.assertIn('"Adjustment Detail by Statement Date"\r\n', text)

    def test_missing_fields_render_empty(self):
        r = AdjustmentRecord(date="Friday 1 September 2023", account_no="1")
        lines = render_csv([r]).splitlines()
        self.assertEqual(lines[1], '"","","$0.00","Unknown Total"')
        self.assertEqual(lines[-1], '"1","","","","",""')

    def test_empty_input(self):
        lines = render_csv([]).splitlines()
        self.assertEqual(
            lines,
            [
                '"Adjustment Detail by Statement Date"',
                '"","","$0.00","Grand Total"',
                '"Account No","Client","Amount","Type","Reason","Adjusted By"',
            ],
        )


class TestWriters(unittest.TestCase):
    def test_write_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            write_csv(sample_records(), tmp / "out" / "report.csv")
            text = (tmp / "out" / "report.csv").read_bytes().decode("utf-8")
            self.assertEqual(text, render_csv(sample_records()))

            write_json(sample_records(), tmp / "records.json")
            data = json.loads((tmp / "records.json").read_text(encoding="utf-8"))
            self.assertEqual(data[1]["numeric_amount"], 1010.0)
            self.assertEqual(data[1]["layout"], "split-row")

            write_blocks([RecordBlock([["Friday 1 September 2023"]], 3)], tmp / "blocks.json")
            blocks = json.loads((tmp / "blocks.json").read_text(encoding="utf-8"))
            self.assertEqual(blocks, [{"rows": [["Friday 1 September 2023"]], "line_number": 3}])


if __name__ == "__main__":
    unittest.main()
