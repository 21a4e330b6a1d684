"""Sales record processing module."""
from .models import SaleRecord, SalesSummary, SalesTotals
from .parser import parse_line, parse_lines, read_sales
from .aggregator import Aggregator, aggregate, product_key, month_key, MONTH_NAMES
from .filter import filter_sales

__all__ = [
    "SaleRecord",
    "SalesSummary",
    "SalesTotals",
    "parse_line",
    "parse_lines",
    "read_sales",
    "Aggregator",
    "aggregate",
    "product_key",
    "month_key",
    "MONTH_NAMES",
    "filter_sales"
]
