"""
CSS selectors describing the Achieva transaction grid.

Each collapsed transaction is a ``.transaction-details`` element inside
``#transaction_grid_wrapper``.  When a row has been expanded in the
browser, its details are rendered in the element that immediately
follows it, which carries one of several accordion class names.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class Selectors:
    """Selectors used by the record extractor and batch scanner."""

    scope: str = "#transaction_grid_wrapper"
    row: str = ".transaction-details"
    detail_panels: Tuple[str, ...] = (
        ".transaction-details-accordion",
        ".transaction-accordion-panel",
        ".expanded-transaction",
        ".accordion-panel",
    )
    date_label: str = ".date .screenreader-only"
    description: str = ".description"
    debit: str = ".amount.trans-debit"
    credit: str = ".amount.trans-credit"
    balance: str = ".balance"
    detail_summary: str = ".summary"
    detail_description: str = ".description"
    detail_account: str = ".account"
    detail_check_number: str = ".check-number"
    detail_category: str = ".category"
    detail_amount: str = ".amount"
    detail_memo: str = ".transaction-memo"

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


DEFAULT_SELECTORS = Selectors()
