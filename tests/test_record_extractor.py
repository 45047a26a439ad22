"""Tests for mapping a summary row and detail panel to a record."""

from __future__ import annotations

from dataclasses import fields
from datetime import date

import pytest  # type: ignore

from txflow.errors import RowExtractionError
from txflow.extract.record import FragmentPair, extract_record, extract_result
from txflow.extract.tree import SoupTreeQuery
from txflow.normalize.schema import CSV_HEADERS, TransactionRecord

from pages import detail_panel, page, summary_row


def _pair(html: str, position: int = 0) -> tuple[FragmentPair, SoupTreeQuery]:
    query = SoupTreeQuery.from_html(html)
    rows = query.find_all_in("#transaction_grid_wrapper", ".transaction-details")
    row = rows[position]
    detail = query.find_next_sibling_matching(
        row, (".transaction-details-accordion", ".accordion-panel")
    )
    return FragmentPair(position=position, summary=row, detail=detail), query


def test_collapsed_row_only() -> None:
    pair, query = _pair(page(summary_row(credit="$10.00")))
    record = extract_record(pair, query)
    assert record.raw_date_text == "June 2, 2020"
    assert record.parsed_date == date(2020, 6, 2)
    assert record.description == "COFFEE SHOP"
    assert record.debit_text == "-$4.50"
    assert record.credit_text == "$10.00"
    assert record.balance_text == "$1,000.00"
    assert record.expanded_description == ""
    assert record.category == ""
    assert record.memo == ""


def test_expanded_panel_fields_are_normalized() -> None:
    html = page(
        summary_row(),
        detail_panel(
            description="COFFEE\n   SHOP #12",
            check_number="1042",
            category="Groceries",
            memo="Transaction memo  weekly run",
        ),
    )
    pair, query = _pair(html)
    record = extract_record(pair, query)
    assert record.expanded_description == "COFFEE SHOP #12"
    assert record.account == "Checking ****1234"
    assert record.check_number == "1042"
    assert record.category == "Groceries"
    assert record.expanded_amount_text == "-$4.50"
    assert record.memo == "weekly run"


def test_placeholder_category_becomes_empty() -> None:
    pair, query = _pair(page(summary_row(), detail_panel(category="Add a category")))
    assert extract_record(pair, query).category == ""


def test_missing_sub_nodes_become_empty_strings() -> None:
    html = page(summary_row(date=None, description=None, debit=None, balance=None))
    pair, query = _pair(html)
    record = extract_record(pair, query)
    assert record == TransactionRecord()
    assert record.parsed_date is None


def test_unparseable_date_keeps_raw_text() -> None:
    pair, query = _pair(page(summary_row(date="Pending")))
    record = extract_record(pair, query)
    assert record.raw_date_text == "Pending"
    assert record.parsed_date is None


def test_panel_without_summary_region_leaves_expanded_fields_empty() -> None:
    pair, query = _pair(page(summary_row(), detail_panel(with_summary=False)))
    assert pair.detail is not None
    record = extract_record(pair, query)
    assert record.account == ""
    assert record.expanded_amount_text == ""


def test_record_always_has_eleven_string_columns() -> None:
    pair, query = _pair(page(summary_row(date=None, debit=None)))
    row = extract_record(pair, query).to_csv_row()
    assert len(row) == len(CSV_HEADERS) == 11
    assert all(isinstance(value, str) for value in row)
    assert [f.name for f in fields(TransactionRecord)][-1] == "parsed_date"


class _BrokenQuery(SoupTreeQuery):
    """Raises on any lookup under a node carrying ``data-broken``."""

    def select_one(self, node, selector):
        if node.has_attr("data-broken"):
            raise AttributeError("node is detached")
        return super().select_one(node, selector)


def test_structural_failure_raises_row_extraction_error() -> None:
    html = page(summary_row().replace('class="transaction-details"', 'class="transaction-details" data-broken'))
    query = _BrokenQuery.from_html(html)
    row = query.find_all_in("#transaction_grid_wrapper", ".transaction-details")[0]
    pair = FragmentPair(position=3, summary=row)
    with pytest.raises(RowExtractionError) as excinfo:
        extract_record(pair, query)
    assert excinfo.value.position == 3
    assert isinstance(excinfo.value.__cause__, AttributeError)

    result = extract_result(pair, query)
    assert not result.ok
    assert result.record is None
    assert result.position == 3


def test_extract_result_success() -> None:
    pair, query = _pair(page(summary_row()))
    result = extract_result(pair, query)
    assert result.ok
    assert result.record.description == "COFFEE SHOP"


def test_nested_block_text_is_space_separated() -> None:
    html = page(
        summary_row(description="<div>ACH DEBIT</div><div>CITY UTILITIES</div>"),
        detail_panel(memo="<p>June</p><p>bill</p>"),
    )
    pair, query = _pair(html)
    record = extract_record(pair, query)
    assert record.description == "ACH DEBIT CITY UTILITIES"
    assert record.memo == "June bill"
