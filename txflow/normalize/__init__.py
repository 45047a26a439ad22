"""
Normalization helpers for txflow.

This package holds the pure functions applied to every extracted
field: whitespace and placeholder cleanup for text cells, date parsing
for the transaction date label, and the `TransactionRecord` schema with
its fixed CSV header.
"""

from .schema import CSV_HEADERS, TransactionRecord  # noqa: F401
from .text import normalize_text  # noqa: F401
from .dates import parse_achieva_date  # noqa: F401
