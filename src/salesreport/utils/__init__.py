"""Utility modules."""
from .logger import get_logger, configure_logging, set_run_context
from .exceptions import (
    SalesReportError,
    ConfigError,
    ReadError,
    ReportError
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_run_context",
    "SalesReportError",
    "ConfigError",
    "ReadError",
    "ReportError"
]
