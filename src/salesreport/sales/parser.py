"""Sales data file parsing."""
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .models import SaleRecord
from salesreport.utils.logger import get_logger
from salesreport.utils.exceptions import ReadError

logger = get_logger()

FIELD_DELIMITER = ","
FIELD_COUNT = 3

# MM/dd/yyyy, zero padded, nothing else
DATE_PATTERN = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")
# Plain decimal with period separator and one optional leading or
# trailing sign: 5, -5, 5-, 5., .5, 1234.567
AMOUNT_PATTERN = re.compile(
    r"(?P<lead>[+-]?)(?P<number>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?P<trail>[+-]?)"
)
# Largest magnitude of a 96-bit decimal: 2**96 - 1
MAX_AMOUNT = Decimal(2 ** 96 - 1)


def parse_date(text: str) -> Optional[date]:
    """Parse an exact MM/dd/yyyy date, or return None."""
    match = DATE_PATTERN.fullmatch(text)
    if not match:
        return None
    month, day, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_amount(text: str) -> Optional[Decimal]:
    """
    Parse a period-separated decimal amount, or return None.

    Amounts whose magnitude exceeds MAX_AMOUNT are rejected.
    """
    match = AMOUNT_PATTERN.fullmatch(text)
    if not match or (match.group("lead") and match.group("trail")):
        return None
    try:
        amount = Decimal(match.group("lead") + match.group("trail") + match.group("number"))
    except InvalidOperation:
        return None
    if amount.copy_abs() > MAX_AMOUNT:
        return None
    return amount


def parse_line(line: str) -> Optional[SaleRecord]:
    """
    Parse one "name, MM/dd/yyyy, amount" line.

    Returns None when the line does not split into exactly three fields
    or when the date or amount does not parse.
    """
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        return None

    sale_date = parse_date(parts[1].strip())
    if sale_date is None:
        return None

    amount = parse_amount(parts[2].strip())
    if amount is None:
        return None

    return SaleRecord(name=parts[0].strip(), date=sale_date, amount=amount)


def parse_lines(lines: Iterable[str]) -> List[SaleRecord]:
    """Parse lines into sale records, skipping malformed lines."""
    records: List[SaleRecord] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        record = parse_line(line.rstrip("\r\n"))
        if record is None:
            skipped += 1
            logger.debug(f"Skipping malformed line {line_number}: {line.rstrip()!r}")
            continue
        records.append(record)

    logger.info(f"Parsed {len(records)} sale records, skipped {skipped} lines")
    return records


def read_sales(path: Union[str, Path], encoding: Optional[str] = "utf-8-sig") -> List[SaleRecord]:
    """
    Read sale records from a text file.

    Args:
        path: Input file path
        encoding: Text encoding of the file

    Returns:
        Records of every well-formed line, in file order

    Raises:
        ReadError: If the file cannot be opened, read or decoded
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            lines = f.readlines()
    except (OSError, UnicodeError) as e:
        raise ReadError(f"Error reading the sales data file: {e}") from e

    logger.info(f"Read {len(lines)} lines from {path}")
    return parse_lines(lines)
