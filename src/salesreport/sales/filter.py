"""Product name filtering."""
from typing import Iterable, List, Sequence

from .models import SaleRecord
from salesreport.utils.logger import get_logger

logger = get_logger()


def _fold(text: str) -> str:
    # Simple per-character upper-casing; chars whose upper form expands
    # (e.g. "ß" -> "SS") are left as they are.
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in text)


def filter_sales(records: Iterable[SaleRecord], matches: Sequence[str]) -> List[SaleRecord]:
    """
    Keep records whose name equals one of the match strings.

    Comparison ignores case and surrounding whitespace of each match
    string. An empty matches sequence keeps nothing.
    """
    wanted = {_fold(match.strip()) for match in matches}
    if not wanted:
        return []

    filtered = [record for record in records if _fold(record.name) in wanted]
    logger.info(f"Filter matched {len(filtered)} records for {len(wanted)} search strings")
    return filtered
