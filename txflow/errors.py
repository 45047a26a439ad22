"""Exception types raised by txflow."""

from __future__ import annotations


class TxflowError(Exception):
    """Base class for all txflow errors."""


class RowExtractionError(TxflowError):
    """A transaction row could not be read at all.

    Missing sub‑fields never raise this; only a failure while reading the
    row's own structure does.  ``position`` is the zero‑based document
    order index of the summary fragment.
    """

    def __init__(self, position: int, message: str) -> None:
        super().__init__(f"row {position}: {message}")
        self.position = position


class ConfigError(TxflowError):
    """The export configuration file is invalid."""
