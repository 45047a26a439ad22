"""
Parsing of Achieva transaction dates.

The transaction list labels each row with a date such as "June 2, 2020".
Only that exact shape is accepted: a full English month name, a one or
two digit day and a four digit year.  Anything else yields ``None``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Dict, Optional

MONTHS: Dict[str, int] = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

_DATE_RE = re.compile(r"^([A-Za-z]+)\s+(\d{1,2}),\s+(\d{4})$")


def parse_achieva_date(text: Optional[str]) -> Optional[date]:
    """Parse ``"<Month> <Day>, <Year>"`` into a ``date``.

    >>> parse_achieva_date("June 2, 2020")
    datetime.date(2020, 6, 2)
    >>> parse_achieva_date("Jun 2, 2020") is None
    True

    Days outside the month (e.g. "February 31, 2021") are rejected by
    ``datetime.date`` and also return ``None``.
    """
    if not text:
        return None
    match = _DATE_RE.match(text.strip())
    if not match:
        return None
    month = MONTHS.get(match.group(1).lower())
    if month is None:
        return None
    try:
        return date(int(match.group(3)), month, int(match.group(2)))
    except ValueError:
        return None
