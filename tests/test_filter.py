"""Tests for product name filtering."""
import unittest
from datetime import date
from decimal import Decimal

from salesreport.sales.models import SaleRecord
from salesreport.sales.filter import filter_sales


class TestFilterSales(unittest.TestCase):
    """Test filter_sales functionality."""

    def setUp(self):
        """Set up test fixtures."""
        self.records = [
            SaleRecord("Product1", date(2022, 1, 1), Decimal("100")),
            SaleRecord("Product2", date(2022, 1, 2), Decimal("200")),
            SaleRecord("Product1", date(2022, 1, 3), Decimal("300")),
        ]

    def test_single_match(self):
        filtered = filter_sales(self.records, ["Product2"])
        self.assertEqual(len(filtered), 1)
        self.assertEqual(filtered[0].name, "Product2")

    def test_case_and_whitespace_insensitive(self):
        for match in ["product1", "PRODUCT1", " Product1 ", "\tpRODUCT1"]:
            with self.subTest(match=match):
                filtered = filter_sales(self.records, [match])
                self.assertEqual([r.amount for r in filtered], [Decimal("100"), Decimal("300")])

    def test_unrelated_matches_excluded(self):
        self.assertEqual(filter_sales(self.records, ["Product", "Product12", "Widget"]), [])

    def test_input_order_preserved(self):
        filtered = filter_sales(self.records, ["product2", "product1"])
        self.assertEqual(filtered, self.records)

    def test_empty_matches_yields_nothing(self):
        self.assertEqual(filter_sales(self.records, []), [])
        self.assertEqual(filter_sales(self.records * 50, []), [])

    def test_input_not_mutated(self):
        snapshot = list(self.records)
        filter_sales(self.records, ["Product1"])
        self.assertEqual(self.records, snapshot)

    def test_no_multi_character_case_expansion(self):
        records = [SaleRecord("Straße", date(2022, 1, 1), Decimal("1"))]
        self.assertEqual(filter_sales(records, ["STRASSE"]), [])
        self.assertEqual(filter_sales(records, ["STRAßE"]), records)

    def test_record_name_not_retrimmed(self):
        records = [SaleRecord(" Padded ", date(2022, 1, 1), Decimal("1"))]
        self.assertEqual(filter_sales(records, ["Padded"]), [])


if __name__ == "__main__":
    unittest.main()
