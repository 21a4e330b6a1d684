"""Processing orchestration module."""
from .processor import SalesReportProcessor, RunResult

__all__ = ["SalesReportProcessor", "RunResult"]
