"""Tests for the processing flow."""
import unittest
import tempfile
import shutil
from decimal import Decimal
from pathlib import Path

from salesreport.config.settings import AppSettings
from salesreport.orchestrator.processor import SalesReportProcessor, RunResult
from salesreport.utils.exceptions import ReadError, ReportError

SALES_DATA = (
    "Product1, 01/01/2022, 100.00\n"
    "Product2, 01/02/2022, 200.00\n"
    "Product3, 02/10/2022\n"
    "product1, 02/11/2022, 50.00\n"
)


def make_settings() -> AppSettings:
    return AppSettings(
        app_name="SalesReport",
        app_version="test",
        log_level="INFO",
        log_to_file=False,
        logs_dir="logs",
        log_file="test.log",
        log_max_file_size_mb=1,
        log_backup_count=1,
        input_encoding="utf-8",
        report_encoding="utf-8"
    )


class TestSalesReportProcessor(unittest.TestCase):
    """Test SalesReportProcessor functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        self.input_path = self.test_dir / "sales.txt"
        self.input_path.write_text(SALES_DATA, encoding="utf-8")
        self.output_path = self.test_dir / "report.txt"
        self.displayed = []
        self.processor = SalesReportProcessor(
            make_settings(),
            display=lambda totals, title: self.displayed.append((title, totals))
        )

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_load_displays_overall_totals(self):
        records, summary = self.processor.load(self.input_path)

        self.assertEqual(len(records), 3)
        self.assertEqual(len(summary.by_product), 3)
        self.assertEqual([title for title, _ in self.displayed], [
            "Total sales by Product:",
            "Total sales by Month:",
        ])
        self.assertEqual(self.displayed[1][1], [("January", Decimal("300.00")), ("February", Decimal("50.00"))])

    def test_run_writes_filtered_report(self):
        result = self.processor.run(self.input_path, self.output_path, ["PRODUCT1"])

        self.assertIsInstance(result, RunResult)
        self.assertEqual(result.records_read, 3)
        self.assertEqual(result.records_matched, 2)
        self.assertTrue(result.report_written)

        lines = self.output_path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines[0], "Filtered product(s): PRODUCT1")
        self.assertIn("Product1, 01/01/2022, 100.00", lines)
        self.assertIn("product1, 02/11/2022, 50.00", lines)
        self.assertNotIn("Product2, 01/02/2022, 200.00", lines)
        self.assertIn("January: $100.00", lines)
        self.assertIn("February: $50.00", lines)

    def test_run_displays_filtered_totals(self):
        self.processor.run(self.input_path, self.output_path, ["Product2"])

        self.assertEqual([title for title, _ in self.displayed], [
            "Total sales by Product:",
            "Total sales by Month:",
            "Total sales by Filtered product:",
            "Total sales by Filtered product group by Month:",
        ])
        self.assertEqual(self.displayed[2][1], [("Product2", Decimal("200.00"))])

    def test_run_without_matches_skips_report(self):
        result = self.processor.run(self.input_path, self.output_path, [])

        self.assertEqual(result.records_read, 3)
        self.assertFalse(result.report_written)
        self.assertFalse(self.output_path.exists())
        self.assertEqual(len(self.displayed), 2)

    def test_missing_input_raises_read_error(self):
        with self.assertRaises(ReadError):
            self.processor.run(self.test_dir / "absent.txt", self.output_path, ["Product1"])
        self.assertFalse(self.output_path.exists())

    def test_bad_destination_raises_report_error(self):
        with self.assertRaises(ReportError):
            self.processor.run(self.input_path, self.test_dir / "no" / "report.txt", ["Product1"])


if __name__ == "__main__":
    unittest.main()
