"""Data models for sales processing."""
from dataclasses import dataclass, field
from datetime import date
from decimal import Context, Decimal, MAX_EMAX, MAX_PREC, MIN_EMIN
from typing import List, Tuple

# (key, total) pairs ranked by total, highest first
SalesTotals = List[Tuple[str, Decimal]]

# Unbounded precision for sums and rounding of money amounts
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


@dataclass(frozen=True)
class SaleRecord:
    """One sale read from the input file."""
    name: str
    date: date
    amount: Decimal


@dataclass(frozen=True)
class SalesSummary:
    """Totals of one record sequence by product and by month."""
    by_product: SalesTotals = field(default_factory=list)
    by_month: SalesTotals = field(default_factory=list)
