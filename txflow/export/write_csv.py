"""
CSV writer for extracted transactions.

The output format is fixed: the 11 column header from `CSV_HEADERS`,
then one line per record with every value wrapped in double quotes and
every line terminated by ``\\n``.  Embedded double quotes are written
as‑is (they are not doubled); downstream tools that need strict RFC 4180
input must account for that.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Union

from ..normalize.schema import CSV_HEADERS, TransactionRecord

if TYPE_CHECKING:
    from ..extract.scanner import ExtractionBatch

logger = logging.getLogger(__name__)

Saver = Callable[[bytes, str], None]

HEADER_LINE = ",".join(CSV_HEADERS)


def format_row(record: TransactionRecord) -> str:
    """Serialize one record as a quoted CSV line (no trailing newline)."""
    return ",".join(f'"{value}"' for value in record.to_csv_row())


def serialize_batch(batch: "ExtractionBatch") -> str:
    """Return the full CSV payload for ``batch``: header plus every row."""
    return "".join(f"{line}\n" for line in (HEADER_LINE, *batch.rows))


class DirectorySaver:
    """Saver writing each payload to ``out_dir/filename``."""

    def __init__(self, out_dir: Union[str, os.PathLike]) -> None:
        self.out_dir = Path(out_dir)
        self.last_path: Path | None = None

    def __call__(self, payload: bytes, filename: str) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        path = self.out_dir / filename
        path.write_bytes(payload)
        self.last_path = path
        logger.debug("Wrote %d bytes to %s", len(payload), path)


def emit(payload: str, filename: str, saver: Saver) -> None:
    """Hand the UTF‑8 encoded payload and its filename to ``saver``."""
    saver(payload.encode("utf-8"), filename)
