# normalize/schema.py
from dataclasses import dataclass, astuple
from datetime import date
from typing import Optional, Tuple

CSV_HEADERS = [
    "Date", "MainDescription", "Debit", "Credit", "Balance",
    "ExpandedDescription", "Account", "CheckNumber", "Category",
    "ExpandedAmount", "Memo",
]


@dataclass(frozen=True)
class TransactionRecord:
    raw_date_text: str = ""
    description: str = ""
    debit_text: str = ""
    credit_text: str = ""
    balance_text: str = ""
    expanded_description: str = ""   # from the detail panel's .summary
    account: str = ""
    check_number: str = ""
    category: str = ""
    expanded_amount_text: str = ""
    memo: str = ""
    parsed_date: Optional[date] = None  # not serialized

    def to_csv_row(self) -> Tuple[str, ...]:
        # Column order matches CSV_HEADERS; parsed_date is the trailing field.
        return astuple(self)[: len(CSV_HEADERS)]
