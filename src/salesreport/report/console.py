"""Console display of sales totals."""
import sys
from typing import Optional, TextIO

from salesreport.sales.models import SalesTotals
from .writer import format_total


def display_totals(totals: SalesTotals, title: str, stream: Optional[TextIO] = None) -> None:
    """Print a blank line, the title, then one line per total."""
    out = stream or sys.stdout
    print(f"\n{title}", file=out)
    for key, total in totals:
        print(format_total(key, total), file=out)
