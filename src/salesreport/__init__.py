"""SalesReport: sales file analysis and filtered report generation."""

__version__ = "1.0.0"
