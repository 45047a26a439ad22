"""
Record extractor.

Maps one collapsed summary row, plus its expanded detail panel when the
panel is present, to a `TransactionRecord`.  Missing elements are never
an error: the corresponding field is simply left empty.  Only an
exception raised while reading the row is reported, as a
`RowExtractionError` wrapped in an `ExtractionResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import RowExtractionError
from ..normalize.dates import parse_achieva_date
from ..normalize.schema import TransactionRecord
from ..normalize.text import normalize_text
from .selectors import DEFAULT_SELECTORS, Selectors
from .tree import TreeQuery


@dataclass(frozen=True)
class FragmentPair:
    """A summary row and its optional detail panel, in document order."""

    position: int
    summary: Any
    detail: Optional[Any] = None


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of extracting one row: either a record or an error."""

    position: int
    record: Optional[TransactionRecord] = None
    error: Optional[RowExtractionError] = None

    @classmethod
    def success(cls, position: int, record: TransactionRecord) -> "ExtractionResult":
        return cls(position=position, record=record)

    @classmethod
    def failure(cls, error: RowExtractionError) -> "ExtractionResult":
        return cls(position=error.position, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def _read(query: TreeQuery, node: Any, selector: str) -> str:
    """Normalized text of the first ``selector`` match under ``node``, or ""."""
    found = query.select_one(node, selector)
    return normalize_text(query.text_of(found) if found is not None else "")


def _read_date_label(query: TreeQuery, node: Any, selector: str) -> str:
    found = query.select_one(node, selector)
    if found is None:
        return ""
    return query.text_of(found).replace("Date:", "", 1).strip()


def extract_record(
    pair: FragmentPair,
    query: TreeQuery,
    selectors: Selectors = DEFAULT_SELECTORS,
) -> TransactionRecord:
    """Build a `TransactionRecord` from a fragment pair.

    Args:
        pair: The summary row and optional detail panel.
        query: Tree access used for every lookup.
        selectors: Element selectors; defaults to the Achieva layout.

    Returns:
        The record.  Fields whose element is absent are empty strings and
        ``parsed_date`` is ``None`` when the date label does not parse.

    Raises:
        RowExtractionError: if reading the row itself fails.
    """
    try:
        row = pair.summary
        raw_date = _read_date_label(query, row, selectors.date_label)
        fields = {
            "raw_date_text": raw_date,
            "parsed_date": parse_achieva_date(raw_date),
            "description": _read(query, row, selectors.description),
            "debit_text": _read(query, row, selectors.debit),
            "credit_text": _read(query, row, selectors.credit),
            "balance_text": _read(query, row, selectors.balance),
        }
        summary = None
        if pair.detail is not None:
            summary = query.select_one(pair.detail, selectors.detail_summary)
        if summary is not None:
            fields.update(
                expanded_description=_read(query, summary, selectors.detail_description),
                account=_read(query, summary, selectors.detail_account),
                check_number=_read(query, summary, selectors.detail_check_number),
                category=_read(query, summary, selectors.detail_category),
                expanded_amount_text=_read(query, summary, selectors.detail_amount),
                memo=_read(query, summary, selectors.detail_memo),
            )
    except Exception as exc:  # noqa: BLE001
        raise RowExtractionError(pair.position, f"{type(exc).__name__}: {exc}") from exc
    return TransactionRecord(**fields)


def extract_result(
    pair: FragmentPair,
    query: TreeQuery,
    selectors: Selectors = DEFAULT_SELECTORS,
) -> ExtractionResult:
    """Like `extract_record` but returns the error instead of raising it."""
    try:
        return ExtractionResult.success(pair.position, extract_record(pair, query, selectors))
    except RowExtractionError as exc:
        return ExtractionResult.failure(exc)
