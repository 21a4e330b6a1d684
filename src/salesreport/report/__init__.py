"""Report output module."""
from .writer import ReportWriter, render_report, write_report, format_amount, format_date
from .console import display_totals

__all__ = ["ReportWriter", "render_report", "write_report", "format_amount", "format_date", "display_totals"]
