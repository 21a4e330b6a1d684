"""Sales aggregation module."""
from decimal import Decimal, localcontext
from typing import Callable, Dict, Iterable, List

from .models import EXACT_CONTEXT, SaleRecord, SalesSummary, SalesTotals
from salesreport.utils.logger import get_logger

logger = get_logger()

# English month names, independent of the host locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December"
)


def product_key(record: SaleRecord) -> str:
    """Group by exact product name."""
    return record.name


def month_key(record: SaleRecord) -> str:
    """Group by English full month name of the sale date."""
    return MONTH_NAMES[record.date.month - 1]


def aggregate(records: Iterable[SaleRecord], key_of: Callable[[SaleRecord], str]) -> SalesTotals:
    """
    Sum sale amounts per key and rank the groups.

    Args:
        records: Sale records
        key_of: Function giving the group key of a record

    Returns:
        (key, total) pairs sorted by total, highest first. Groups with
        equal totals keep the order in which their key first appeared.
    """
    totals: Dict[str, Decimal] = {}
    with localcontext(EXACT_CONTEXT):
        for record in records:
            key = key_of(record)
            totals[key] = totals.get(key, Decimal(0)) + record.amount

    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


class Aggregator:
    """Aggregates sale records by product and month."""

    def aggregate(self, records: Iterable[SaleRecord], key_of: Callable[[SaleRecord], str]) -> SalesTotals:
        return aggregate(records, key_of)

    def by_product(self, records: Iterable[SaleRecord]) -> SalesTotals:
        return aggregate(records, product_key)

    def by_month(self, records: Iterable[SaleRecord]) -> SalesTotals:
        return aggregate(records, month_key)

    def summarize(self, records: List[SaleRecord]) -> SalesSummary:
        """Aggregate records both by product and by month."""
        summary = SalesSummary(
            by_product=self.by_product(records),
            by_month=self.by_month(records)
        )

        logger.info(
            f"Aggregated {len(records)} records into {len(summary.by_product)} products "
            f"and {len(summary.by_month)} months"
        )

        return summary
