"""
Extraction subsystem for txflow.

The `extract` package reads transaction rows out of a parsed page.  It
never talks to BeautifulSoup directly outside of `tree.py`: the record
extractor and the batch scanner only use the small `TreeQuery`
interface, so tests can run against any in‑memory tree.
"""

from .record import FragmentPair, extract_record, extract_result  # noqa: F401
from .scanner import ExtractionBatch, scan  # noqa: F401
from .selectors import DEFAULT_SELECTORS, Selectors  # noqa: F401
from .tree import SoupTreeQuery, TreeQuery, strip_images  # noqa: F401
