"""
Tests for single-column sorting
"""

import pytest

from vowsync.schemas.table import SortConfig
from vowsync.services.columns import GUEST_BASE_COLUMNS, ITEM_BASE_COLUMNS, generate_item_event_columns
from vowsync.services.pivot_service import pivot_guests, pivot_items
from vowsync.services.sort_service import sort_rows, text_key


def ids(rows):
    return [row["id"] if isinstance(row, dict) else row.id for row in rows]


@pytest.fixture
def records():
    return [
        {"id": "a", "score": 2, "name": "beta"},
        {"id": "b", "score": None, "name": "Alpha"},
        {"id": "c", "score": 1, "name": "álpha"},
        {"id": "d", "score": 2, "name": "Gamma"},
        {"id": "e", "name": "delta"},
    ]


def test_no_column_keeps_order(records):
    result = sort_rows(records, SortConfig())
    assert result == records
    assert result is not records


def test_ascending_with_stable_ties_and_missing_last(records):
    assert ids(sort_rows(records, SortConfig(column="score"))) == ["c", "a", "d", "b", "e"]


def test_descending_keeps_ties_and_missing_last(records):
    assert ids(sort_rows(records, SortConfig(column="score", direction="desc"))) == ["a", "d", "c", "b", "e"]


def test_sort_is_idempotent(records):
    config = SortConfig(column="name")
    once = sort_rows(records, config)
    assert sort_rows(once, config) == once


def test_text_ignores_case_and_accents(records):
    # "Alpha" and "álpha" collate equal and keep input order
    assert ids(sort_rows(records, SortConfig(column="name"))) == ["b", "c", "a", "e", "d"]
    assert text_key("Álpha") == text_key("alpha")


def test_input_is_not_mutated(records):
    snapshot = [dict(r) for r in records]
    sort_rows(records, SortConfig(column="score", direction="desc"))
    assert records == snapshot


def test_booleans_true_first():
    rows = [{"id": "x", "flag": False}, {"id": "y", "flag": True}, {"id": "z", "flag": None}]
    assert ids(sort_rows(rows, SortConfig(column="flag"))) == ["y", "x", "z"]
    assert ids(sort_rows(rows, SortConfig(column="flag", direction="desc"))) == ["x", "y", "z"]


def test_date_columns_sort_chronologically_with_invalid_last(guests, attendance):
    dated = [
        guests[0].model_copy(update={"rsvp_deadline": "2025-05-01"}),
        guests[1].model_copy(update={"rsvp_deadline": "not a date"}),
        guests[2].model_copy(update={"rsvp_deadline": "2025-04-15"}),
    ]
    rows = pivot_guests(dated, attendance).rows

    asc = sort_rows(rows, SortConfig(column="rsvp_deadline"), GUEST_BASE_COLUMNS)
    desc = sort_rows(rows, SortConfig(column="rsvp_deadline", direction="desc"), GUEST_BASE_COLUMNS)
    assert ids(asc) == ["g3", "g1", "g2"]
    assert ids(desc) == ["g1", "g3", "g2"]


def test_event_quantity_column(items, quantities):
    rows = pivot_items(items, quantities)
    columns = ITEM_BASE_COLUMNS + generate_item_event_columns({"reception": "Reception"})

    result = sort_rows(rows, SortConfig(column="event_reception", direction="desc"), columns)
    assert ids(result) == ["chairs", "napkins", "arch"]


def test_offset_timestamps_sort_by_instant(guests, attendance):
    """10:00+02:00 is 08:00 UTC, earlier than 09:00 UTC"""
    stamped = [
        guests[0].model_copy(update={"created_at": "2025-01-01T10:00:00+02:00"}),
        guests[1].model_copy(update={"created_at": "2025-01-01T09:00:00+00:00"}),
    ]
    rows = pivot_guests(stamped, attendance).rows

    asc = sort_rows(rows, SortConfig(column="created_at"), GUEST_BASE_COLUMNS)
    desc = sort_rows(rows, SortConfig(column="created_at", direction="desc"), GUEST_BASE_COLUMNS)
    assert ids(asc) == ["g1", "g2"]
    assert ids(desc) == ["g2", "g1"]
