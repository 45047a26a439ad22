"""Artifact filename derived from the run time and the batch's date range."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..extract.scanner import ExtractionBatch

UNKNOWN = "unknown"


def format_ymd(value: Optional[date]) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else UNKNOWN


def format_timestamp(now: datetime) -> str:
    return now.strftime("%Y-%m-%d_%H%M%S")


def artifact_name(batch: "ExtractionBatch", now: datetime) -> str:
    """Return ``achieva_full_<now>_<earliest>_to_<latest>.csv``.

    ``now`` is passed in rather than read from the clock so the name is
    reproducible.  Both boundaries are ``unknown`` when no date parsed.
    """
    earliest = min(batch.dates) if batch.dates else None
    latest = max(batch.dates) if batch.dates else None
    return f"achieva_full_{format_timestamp(now)}_{format_ymd(earliest)}_to_{format_ymd(latest)}.csv"
