"""
Txflow package for exporting Achieva transaction history to CSV.

This package contains submodules for extracting transaction rows from a
rendered online‑banking page, normalizing their text and dates, and
writing the result as a single CSV artifact.  Each submodule implements
one step of the export.

The high‑level flow is:

1. **extract** – Walk the transaction grid of a parsed page snapshot.
   Every collapsed summary row is paired with its expanded detail panel
   (when the panel is present in the page) and mapped to a
   `TransactionRecord`.  A row that cannot be read is recorded as a
   failure and skipped; missing sub‑fields simply become empty strings.
2. **normalize** – Helpers to strip whitespace runs and UI placeholder
   text, and to parse Achieva's "June 2, 2020" dates.
3. **export** – Serialize the batch to CSV, derive a filename from the
   run time and the observed date range, and hand both to a saver.
4. **cli** – Command line entry point reading a saved HTML snapshot.

Acquiring the page (logging in, scrolling, expanding panels) belongs to
the browser layer and is not part of this package.
"""

from importlib import metadata

try:
    __version__ = metadata.version("txflow")
except metadata.PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0"
