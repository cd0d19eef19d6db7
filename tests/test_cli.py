import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import pypdfium2 as pdfium

from adjustment_report import AdjustmentReportParser
from adjustment_report.sources import read_report_lines, split_lines
from adjustment_report_parser import default_csv_name, main
from project_paths import ARTIFACT_CSV_DIR

REPORT = (
    "Client Account Adjustments\r\n"
    "Thursday 31 August 2023\r\n"
    "Account No   Client   Amount   Type   Reason   Adjusted By\r\n"
    "\"241760\"   \"USDA NAHMS Study/Dr. Bettina\"   \"$343.35\"   \"Invoiced\"   \"null\"   \"KAB478\"\r\n"
    "\r\n"
    "Friday 1 September 2023\r\n"
    "Account No   Client   Amount   Type   Reason   Adjusted By\r\n"
    "241761   Jane Doe   Courtesy credit   AB12\r\n"
    "$1,010.00   Account\r\n"
    "Adjustment Total      $1,353.35\r\n"
)


class TestSources(unittest.TestCase):
    def test_split_lines_on_break_runs(self):
        self.assertEqual(split_lines("a\r\n\r\nb\nc"), ["a", "b", "c"])

    def test_text_report(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "input.txt"
            path.write_text(REPORT, encoding="utf-8")
            records = AdjustmentReportParser(path).extract()
        self.assertEqual([r.account_no for r in records], ["241760", "241761"])
        self.assertEqual(records[0].client, "USDA NAHMS Study/Dr. Bettina")

    def test_byte_order_mark_dropped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "input.txt"
            path.write_bytes(b"\xef\xbb\xbf" + REPORT.split("\r\n", 1)[1].encode("utf-8"))
            lines = read_report_lines(path)
            records = AdjustmentReportParser(path).extract()
        self.assertEqual(lines[0], "Thursday 31 August 2023")
        self.assertEqual(records[0].date, "Thursday 31 August 2023")
        self.assertEqual(len(records), 2)

    def test_missing_report_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(OSError):
                read_report_lines(Path(tmpdir) / "missing.txt")

    def test_blank_pdf_yields_no_records(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.pdf"
            doc = pdfium.PdfDocument.new()
            doc.new_page(1, 1)
            doc.save(str(path))
            records = AdjustmentReportParser(path).extract()
        self.assertEqual(records, [])


class TestCli(unittest.TestCase):
    def test_default_csv_name(self):
        self.assertEqual(default_csv_name(Path("reports/Aug 2023.txt")), ARTIFACT_CSV_DIR / "Aug 2023.csv")

    def test_end_to_end(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            report = tmp / "input.txt"
            report.write_text(REPORT, encoding="utf-8")
            out = tmp / "output.csv"
            blocks = tmp / "blocks.json"
            argv = [
                "adjustment_report_parser.py", str(report),
                "--csv", str(out), "--blocks", str(blocks), "--print-totals",
            ]
            with patch("sys.argv", argv):
                with io.StringIO() as buf, contextlib.redirect_stdout(buf):
                    main()
                    output = buf.getvalue()
            lines = out.read_text(encoding="utf-8").splitlines()
            self.assertTrue(blocks.exists())

        self.assertIn("Rows: 2", output)
        self.assertIn("Grand Total: $1,353.35", output)
        self.assertIn("Invoiced: $343.35", output)
        self.assertEqual(lines[0], '"Adjustment Detail by Statement Date"')
        self.assertEqual(lines[3], '"","","$1,353.35","Grand Total"')
        self.assertEqual(lines[5], '"241761","Jane Doe","$1,010.00","Account","Courtesy credit","AB12"')
        self.assertEqual(len(lines), 7)


if __name__ == "__main__":
    unittest.main()
