"""
Text cleanup for extracted cell values.

Achieva renders placeholder strings such as "Add a category" inside the
same elements that hold real data.  They are removed here together with
any layout whitespace so that every CSV cell is a single trimmed line.
"""

from __future__ import annotations

import re
from typing import Optional

PLACEHOLDER_PHRASES = ("Add a category", "Uncategorized", "Transaction memo")

_WHITESPACE_RE = re.compile(r"\s+")
_PLACEHOLDER_RE = re.compile("|".join(re.escape(p) for p in PLACEHOLDER_PHRASES), re.I)


def normalize_text(text: Optional[str]) -> str:
    """Collapse whitespace, drop UI placeholders and trim.

    Args:
        text: Raw text of an element, or ``None`` when the element is
            missing.

    Returns:
        The cleaned string; empty when ``text`` is ``None`` or blank.
    """
    if not text:
        return ""
    cleaned = _WHITESPACE_RE.sub(" ", text)
    # Removing one phrase can join the halves of another; repeat until stable.
    while True:
        stripped = _WHITESPACE_RE.sub(" ", _PLACEHOLDER_RE.sub("", cleaned))
        if stripped == cleaned:
            break
        cleaned = stripped
    return cleaned.strip()
