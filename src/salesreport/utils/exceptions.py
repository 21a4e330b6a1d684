"""Custom exception classes for SalesReport."""


class SalesReportError(Exception):
    """Base exception for SalesReport."""
    pass


class ConfigError(SalesReportError):
    """Configuration-related errors."""
    pass


class ReadError(SalesReportError):
    """Sales data file could not be opened or read."""
    pass


class ReportError(SalesReportError):
    """Report destination could not be created or written."""
    pass
