"""Tests for text cleanup of extracted cell values."""

from __future__ import annotations

import re

import pytest  # type: ignore

from txflow.normalize.text import PLACEHOLDER_PHRASES, normalize_text


@pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
def test_empty_input_yields_empty_string(value) -> None:
    assert normalize_text(value) == ""


def test_collapses_whitespace_and_trims() -> None:
    assert normalize_text("  COFFEE\n\t SHOP   #12 ") == "COFFEE SHOP #12"


def test_removes_placeholders_case_insensitively() -> None:
    assert normalize_text("Add a category") == ""
    assert normalize_text("uncategorized") == ""
    assert normalize_text("TRANSACTION MEMO paid rent") == "paid rent"
    assert normalize_text("Groceries Add a Category") == "Groceries"


def test_removes_placeholder_embedded_in_words() -> None:
    # Phrases are removed regardless of surrounding context.
    assert normalize_text("xUncategorizedy") == "xy"


@pytest.mark.parametrize(
    "value",
    [
        "a Uncategorized b",
        "Add a category\n\nTransaction memo\tnote",
        "  x  Add a category  y  ",
        "UNCATEGORIZED  Uncategorized",
        "Add a Uncategorized category",
        "UncatUncategorizedegorized",
        "Transaction Add a category memo",
    ],
)
def test_output_has_no_whitespace_runs_or_placeholders(value: str) -> None:
    out = normalize_text(value)
    assert not re.search(r"\s{2,}", out)
    for phrase in PLACEHOLDER_PHRASES:
        assert phrase.lower() not in out.lower()
    assert out == out.strip()


def test_phrases_formed_by_a_removal_are_removed_too() -> None:
    assert normalize_text("Add a Uncategorized category") == ""
    assert normalize_text("x UncatUncategorizedegorized y") == "x y"
