"""
Export pipeline for one page snapshot.

Chains the steps of an export: parse the page, strip check images from
the transaction grid, scan the rows, serialize the CSV, name it after
the observed date range and hand it to the saver.  Row failures are
reported in the log and in the returned batch; they never stop the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from bs4 import BeautifulSoup

from ..extract.scanner import ExtractionBatch, scan
from ..extract.selectors import DEFAULT_SELECTORS, Selectors
from ..extract.tree import SoupTreeQuery, strip_images as _strip_images
from .naming import artifact_name
from .write_csv import Saver, emit, serialize_batch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """What one export produced."""

    filename: str
    payload: str
    batch: ExtractionBatch


def run_export(
    page: Union[str, BeautifulSoup],
    *,
    now: datetime,
    saver: Saver,
    selectors: Selectors = DEFAULT_SELECTORS,
    strip_images: bool = True,
) -> ExportResult:
    """Export every transaction in ``page`` as one CSV artifact.

    Args:
        page: Raw HTML of the rendered transaction list, or an already
            parsed soup.  A soup is modified in place when
            ``strip_images`` is set.
        now: Run timestamp used in the filename.
        saver: Receives the encoded payload and the filename.
        selectors: Element selectors; defaults to the Achieva layout.
        strip_images: Remove ``<img>`` elements from the grid first.

    Returns:
        The filename, the payload and the finished batch.
    """
    soup = page if isinstance(page, BeautifulSoup) else BeautifulSoup(page, "html.parser")
    if strip_images:
        _strip_images(soup, selectors.scope)
    batch = scan(SoupTreeQuery(soup), selectors)
    if batch.failures:
        logger.warning(
            "Encountered errors on %d of %d transactions: %s",
            len(batch.failures),
            batch.fragment_count,
            "; ".join(str(err) for err in batch.failures),
        )
    else:
        logger.info("No errors encountered.")
    payload = serialize_batch(batch)
    filename = artifact_name(batch, now)
    emit(payload, filename, saver)
    logger.info("Exported %d transactions to %s", len(batch.rows), filename)
    return ExportResult(filename=filename, payload=payload, batch=batch)
