"""Filtered sales report writer."""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP, localcontext
from pathlib import Path
from typing import List, Optional, Sequence, Union

from salesreport.sales.models import EXACT_CONTEXT, SaleRecord, SalesTotals
from salesreport.sales.aggregator import Aggregator
from salesreport.utils.logger import get_logger
from salesreport.utils.exceptions import ReportError

logger = get_logger()

HEADER_TEMPLATE = "Filtered product(s): {}"
PRODUCTS_TITLE = "Products Information:"
BY_PRODUCT_TITLE = "Total sales by Filtered product:"
BY_MONTH_TITLE = "Total sales by Filtered product group by Month:"

CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Two decimals, half away from zero, comma thousands separators."""
    with localcontext(EXACT_CONTEXT):
        return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):,.2f}"


def format_date(value: date) -> str:
    """MM/dd/yyyy, zero padded."""
    return f"{value.month:02d}/{value.day:02d}/{value.year:04d}"


def format_total(key: str, total: Decimal) -> str:
    return f"{key}: ${format_amount(total)}"


class ReportWriter:
    """Renders filtered sale records and their totals to a text file."""

    def __init__(self, encoding: Optional[str] = None, aggregator: Optional[Aggregator] = None):
        self.encoding = encoding
        self.aggregator = aggregator or Aggregator()

    def render(self, records: Sequence[SaleRecord], matches: Sequence[str]) -> List[str]:
        """Build the report lines, without line terminators."""
        lines = [HEADER_TEMPLATE.format(", ".join(matches)), "", PRODUCTS_TITLE]

        for record in records:
            lines.append(f"{record.name}, {format_date(record.date)}, {format_amount(record.amount)}")

        lines.extend(["", BY_PRODUCT_TITLE])
        lines.extend(self._format_totals(self.aggregator.by_product(records)))

        lines.extend(["", BY_MONTH_TITLE])
        lines.extend(self._format_totals(self.aggregator.by_month(records)))

        return lines

    def write(self, destination: Union[str, Path], records: Sequence[SaleRecord], matches: Sequence[str]) -> None:
        """
        Write the report, replacing any previous content of destination.

        Raises:
            ReportError: If the destination cannot be created or written
        """
        lines = self.render(records, matches)
        try:
            with open(destination, "w", encoding=self.encoding) as f:
                for line in lines:
                    f.write(line + "\n")
        except (OSError, UnicodeError) as e:
            raise ReportError(f"Error writing the sales data file: {e}") from e

        logger.info(f"Wrote report with {len(records)} records to {destination}")

    @staticmethod
    def _format_totals(totals: SalesTotals) -> List[str]:
        return [format_total(key, total) for key, total in totals]


def render_report(records: Sequence[SaleRecord], matches: Sequence[str]) -> List[str]:
    """Build the report lines for records."""
    return ReportWriter().render(records, matches)


def write_report(
    destination: Union[str, Path],
    records: Sequence[SaleRecord],
    matches: Sequence[str],
    encoding: Optional[str] = None
) -> None:
    """Write the filtered report to destination."""
    ReportWriter(encoding=encoding).write(destination, records, matches)
