"""Sales report processing flow.

One run reads the sales file, shows overall totals, narrows the records
to the requested products, shows their totals and writes the report.
File errors are not handled here; they reach the caller unchanged.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from salesreport.config.settings import AppSettings, get_settings
from salesreport.sales.models import SaleRecord, SalesSummary, SalesTotals
from salesreport.sales.parser import read_sales
from salesreport.sales.aggregator import Aggregator
from salesreport.sales.filter import filter_sales
from salesreport.report.writer import ReportWriter, BY_PRODUCT_TITLE, BY_MONTH_TITLE
from salesreport.report.console import display_totals
from salesreport.utils.logger import get_logger, set_run_context

logger = get_logger()

ALL_PRODUCTS_TITLE = "Total sales by Product:"
ALL_MONTHS_TITLE = "Total sales by Month:"


@dataclass
class RunResult:
    input_path: str
    output_path: str
    records_read: int = 0
    records_matched: int = 0
    report_written: bool = False


class SalesReportProcessor:
    """Orchestrates the flow: read -> summarize -> filter -> report."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        display: Callable[[SalesTotals, str], None] = display_totals
    ):
        self.settings = settings or get_settings()
        self.display = display
        self.aggregator = Aggregator()
        self.writer = ReportWriter(encoding=self.settings.report_encoding, aggregator=self.aggregator)

    def load(self, input_path: Union[str, Path]) -> Tuple[List[SaleRecord], SalesSummary]:
        """Read the sales file and show its overall totals."""
        set_run_context(Path(input_path).name)
        records = read_sales(input_path, encoding=self.settings.input_encoding)
        summary = self.aggregator.summarize(records)

        self.display(summary.by_product, ALL_PRODUCTS_TITLE)
        self.display(summary.by_month, ALL_MONTHS_TITLE)
        return records, summary

    def report(
        self,
        records: Sequence[SaleRecord],
        output_path: Union[str, Path],
        matches: Sequence[str],
        result: RunResult
    ) -> RunResult:
        """Filter records, show the filtered totals and write the report."""
        result.records_read = len(records)

        if not matches:
            logger.info("No search strings entered. Exiting.")
            return result

        filtered = filter_sales(records, matches)
        result.records_matched = len(filtered)

        filtered_summary = self.aggregator.summarize(filtered)
        self.display(filtered_summary.by_product, BY_PRODUCT_TITLE)
        self.display(filtered_summary.by_month, BY_MONTH_TITLE)

        self.writer.write(output_path, filtered, matches)
        result.report_written = True

        logger.info(
            f"Run complete: {result.records_read} records read, "
            f"{result.records_matched} matched, report saved to {output_path}"
        )
        return result

    def run(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        matches: Sequence[str]
    ) -> RunResult:
        """Run the full pipeline for one input file."""
        result = RunResult(input_path=str(input_path), output_path=str(output_path))

        try:
            records, _ = self.load(input_path)
            return self.report(records, output_path, matches, result)
        finally:
            set_run_context(None)
