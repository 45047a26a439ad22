"""
Batch scanner.

Walks every transaction row in the grid once, in document order, and
folds the per‑row extraction results into an `ExtractionBatch`.  A row
that fails is recorded in ``failures`` and produces no CSV line, so
``len(rows) == fragment_count - len(failures)`` after every scan.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Tuple

from ..errors import RowExtractionError
from ..export.write_csv import format_row
from ..normalize.schema import TransactionRecord
from .record import ExtractionResult, FragmentPair, extract_result
from .selectors import DEFAULT_SELECTORS, Selectors
from .tree import TreeQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionBatch:
    """The finished result of one scan.

    Attributes:
        rows: Serialized CSV lines (without header), in document order.
        dates: Successfully parsed transaction dates.
        failures: Errors for rows that were skipped.
        records: The records behind ``rows``, in the same order.
        fragment_count: Number of summary rows found in the page.
    """

    rows: Tuple[str, ...] = ()
    dates: Tuple[date, ...] = ()
    failures: Tuple[RowExtractionError, ...] = ()
    records: Tuple[TransactionRecord, ...] = ()
    fragment_count: int = 0

    @property
    def undercount(self) -> int:
        """How many rows in the page have no line in the output."""
        return self.fragment_count - len(self.rows)


@dataclass
class _BatchBuilder:
    rows: List[str] = field(default_factory=list)
    dates: List[date] = field(default_factory=list)
    failures: List[RowExtractionError] = field(default_factory=list)
    records: List[TransactionRecord] = field(default_factory=list)

    def add(self, result: ExtractionResult) -> None:
        if result.ok:
            record = result.record
            self.records.append(record)
            self.rows.append(format_row(record))
            if record.parsed_date is not None:
                self.dates.append(record.parsed_date)
        else:
            logger.error("Error scraping transaction %d: %s", result.position, result.error)
            self.failures.append(result.error)

    def freeze(self, fragment_count: int) -> ExtractionBatch:
        return ExtractionBatch(
            rows=tuple(self.rows),
            dates=tuple(self.dates),
            failures=tuple(self.failures),
            records=tuple(self.records),
            fragment_count=fragment_count,
        )


def _pair(query: TreeQuery, position: int, row, selectors: Selectors) -> FragmentPair:
    try:
        detail = query.find_next_sibling_matching(row, selectors.detail_panels)
    except Exception as exc:  # noqa: BLE001
        raise RowExtractionError(position, f"{type(exc).__name__}: {exc}") from exc
    return FragmentPair(position=position, summary=row, detail=detail)


def scan(query: TreeQuery, selectors: Selectors = DEFAULT_SELECTORS) -> ExtractionBatch:
    """Extract every transaction row reachable through ``query``.

    Args:
        query: Read‑only access to the page.  The page is not modified.
        selectors: Element selectors; defaults to the Achieva layout.

    Returns:
        A frozen `ExtractionBatch`.
    """
    fragments = query.find_all_in(selectors.scope, selectors.row)
    logger.debug("Found %d transaction rows under %s", len(fragments), selectors.scope)
    builder = _BatchBuilder()
    for position, row in enumerate(fragments):
        try:
            pair = _pair(query, position, row, selectors)
        except RowExtractionError as exc:
            builder.add(ExtractionResult.failure(exc))
            continue
        builder.add(extract_result(pair, query, selectors))
    return builder.freeze(len(fragments))
