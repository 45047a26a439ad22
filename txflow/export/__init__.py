"""
Export subsystem for txflow.

Turns a finished `ExtractionBatch` into the CSV payload, derives the
artifact filename from the run time and the observed date range, and
hands both to a saver.  `pipeline.run_export` chains the whole export
for a single page snapshot.
"""

from .naming import artifact_name  # noqa: F401
from .write_csv import DirectorySaver, emit, format_row, serialize_batch  # noqa: F401
