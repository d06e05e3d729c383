"""
Tests for the column filter engine and shared guest/item filters
"""

import logging

import pytest

from vowsync.schemas.guest import GuestFilters
from vowsync.schemas.item import ItemFilters
from vowsync.schemas.table import ColumnFilter
from vowsync.services.columns import GUEST_BASE_COLUMNS, ITEM_BASE_COLUMNS, generate_guest_event_columns
from vowsync.services.filter_service import (
    apply_filters,
    apply_guest_filters,
    apply_item_filters,
    get_nested_value,
    guest_filters_active,
    is_empty,
    normalize_value,
)
from vowsync.services.pivot_service import pivot_guests, pivot_items


@pytest.fixture
def pivoted(guests, attendance, events):
    return pivot_guests(guests, attendance, events)


@pytest.fixture
def rows(pivoted):
    return pivoted.rows


@pytest.fixture
def columns(pivoted):
    return GUEST_BASE_COLUMNS + generate_guest_event_columns(pivoted.events)


def ids(rows):
    return [row.id for row in rows]


def test_no_filters_returns_same_sequence(rows, columns):
    assert apply_filters(rows, [], columns) is rows


def test_filters_only_narrow(rows, columns):
    one = [ColumnFilter(column="guest_type", operator="equals", value="adult")]
    two = one + [ColumnFilter(column="invitation_status", operator="equals", value="confirmed")]

    first = apply_filters(rows, one, columns)
    second = apply_filters(rows, two, columns)

    assert ids(first) == ["g1", "g3"]
    assert ids(second) == ["g1"]
    assert set(ids(second)) <= set(ids(first)) <= set(ids(rows))


def test_equals_is_case_insensitive(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="name", operator="equals", value="  BEN carter")], columns)
    assert ids(result) == ["g2"]


def test_range_on_offset_timestamps(guests, attendance, events):
    stamped = [
        guests[0].model_copy(update={"created_at": "2025-01-01T10:00:00+02:00"}),
        guests[1].model_copy(update={"created_at": "2025-01-01T09:00:00Z"}),
    ]
    rows = pivot_guests(stamped, attendance, events).rows

    after = apply_filters(rows, [ColumnFilter(column="created_at", operator="gte", value="2025-01-01T08:30:00Z")],
                          GUEST_BASE_COLUMNS)
    before = apply_filters(rows, [ColumnFilter(column="created_at", operator="lte", value="2025-01-01T10:30:00+02:00")],
                           GUEST_BASE_COLUMNS)
    assert ids(after) == ["g2"]
    assert ids(before) == ["g1"]


def test_contains(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="email", operator="contains", value="EXAMPLE")], columns)
    assert ids(result) == ["g1"]


def test_in_with_null_token(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="table_number", operator="in", value=["2", "__null__"])], columns)
    assert ids(result) == ["g2", "g3"]


def test_range_on_numbers(items, quantities):
    rows = pivot_items(items, quantities)
    gte = apply_filters(rows, [ColumnFilter(column="total_required", operator="gte", value=100)], ITEM_BASE_COLUMNS)
    lte = apply_filters(rows, [ColumnFilter(column="cost_per_unit", operator="lte", value="10")], ITEM_BASE_COLUMNS)

    assert ids(gte) == ["chairs", "napkins"]
    # Missing values never satisfy a range
    assert ids(lte) == ["napkins"]


def test_range_on_dates(guests, attendance, events):
    dated = [
        guests[0].model_copy(update={"rsvp_received_date": "2025-02-01"}),
        guests[1].model_copy(update={"rsvp_received_date": "2025-03-15"}),
        guests[2],
    ]
    rows = pivot_guests(dated, attendance, events).rows
    result = apply_filters(rows, [ColumnFilter(column="rsvp_received_date", operator="gte", value="2025-03-01")],
                           GUEST_BASE_COLUMNS)
    assert ids(result) == ["g2"]


def test_zero_and_false_are_not_empty():
    assert not is_empty(0)
    assert not is_empty(False)
    assert is_empty(None)
    assert is_empty("")


def test_is_empty_and_is_not_empty(rows, columns):
    empty = apply_filters(rows, [ColumnFilter(column="table_number", operator="isEmpty")], columns)
    filled = apply_filters(rows, [ColumnFilter(column="table_number", operator="isNotEmpty")], columns)
    assert ids(empty) == ["g3"]
    assert ids(filled) == ["g1", "g2"]


def test_boolean_false_is_a_value(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="has_plus_one", operator="isNotEmpty")], columns)
    assert ids(result) == ["g1", "g2", "g3"]


def test_event_attendance_filter(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="event_ceremony_attending", operator="equals", value=True)],
                           columns)
    assert ids(result) == ["g1"]


def test_missing_attendance_reads_as_empty(rows, columns):
    result = apply_filters(rows, [ColumnFilter(column="event_reception_attending", operator="equals", value="false")],
                           columns)
    # g2 and g3 have no reception relation and read as None, not false
    assert ids(result) == []
    missing = apply_filters(rows, [ColumnFilter(column="event_reception_attending", operator="isEmpty")], columns)
    assert ids(missing) == ["g2", "g3"]


def test_shuttle_values_normalize_to_yes_no(rows, columns):
    yes = apply_filters(rows, [ColumnFilter(column="event_ceremony_shuttle", operator="equals", value="yes")], columns)
    no = apply_filters(rows, [ColumnFilter(column="event_ceremony_shuttle", operator="equals", value="no")], columns)
    assert ids(yes) == ["g1"]
    assert ids(no) == ["g2", "g3"]


@pytest.mark.parametrize("bad_filter", [
    ColumnFilter(column="name", operator="startsWith", value="B"),
    ColumnFilter(column="no_such_column", operator="equals", value="x"),
    ColumnFilter(column="has_plus_one", operator="contains", value="t"),
    ColumnFilter(column="name", operator="in", value="Ben"),
    ColumnFilter(column="table_position", operator="gte", value=None),
])
def test_unusable_filters_are_ignored(rows, columns, bad_filter, caplog):
    with caplog.at_level(logging.WARNING, logger="vowsync.services.filter_service"):
        result = apply_filters(rows, [bad_filter], columns)

    assert ids(result) == ["g1", "g2", "g3"]
    assert "Ignoring filter" in caplog.text


def test_bad_filter_does_not_disable_good_ones(rows, columns):
    filters = [
        ColumnFilter(column="name", operator="fuzzy", value="x"),
        ColumnFilter(column="guest_type", operator="equals", value="child"),
    ]
    assert ids(apply_filters(rows, filters, columns)) == ["g2"]


def test_nested_lookup():
    row = {"a": {"b": {"c": 0}}}
    assert get_nested_value(row, "a.b.c") == 0
    assert get_nested_value(row, "a.x.c") is None


def test_filter_applies_when_only_later_rows_have_the_field():
    rows = [{"id": "a"}, {"id": "b", "vendor": "Hire Co"}, {"id": "c", "vendor": "Linen Ltd"}]
    result = apply_filters(rows, [ColumnFilter(column="vendor", operator="equals", value="hire co")])
    assert [row["id"] for row in result] == ["b"]


def test_normalize_value():
    assert normalize_value(None) == "__null__"
    assert normalize_value(True) == "true"
    assert normalize_value(3.0) == "3"
    assert normalize_value(" Mixed ") == "mixed"
    assert normalize_value(None, "event_attendance.e1.shuttle_to_event") == "no"


def test_guest_search_matches_name_only(rows):
    assert ids(apply_guest_filters(rows, GuestFilters(search="zoë"))) == ["g1"]
    assert ids(apply_guest_filters(rows, GuestFilters(search="example.com"))) == []


def test_shared_guest_filters(rows):
    assert ids(apply_guest_filters(rows, GuestFilters(type="adult"))) == ["g1", "g3"]
    assert ids(apply_guest_filters(rows, GuestFilters(invitation_status="pending"))) == ["g2"]
    assert ids(apply_guest_filters(rows, GuestFilters(table_number="none"))) == ["g3"]
    assert ids(apply_guest_filters(rows, GuestFilters(event_id="ceremony"))) == ["g1"]
    assert ids(apply_guest_filters(rows, GuestFilters())) == ["g1", "g2", "g3"]


def test_guest_filters_active():
    assert not guest_filters_active(GuestFilters())
    assert not guest_filters_active(GuestFilters(search="   "))
    assert guest_filters_active(GuestFilters(type="child"))


def test_shared_item_filters(items, quantities):
    rows = pivot_items(items, quantities)
    assert ids(apply_item_filters(rows, ItemFilters(search="LINEN"))) == ["napkins"]
    assert ids(apply_item_filters(rows, ItemFilters(supplier="Hire Co"))) == ["chairs"]
    assert ids(apply_item_filters(rows, ItemFilters(availability_status="unknown"))) == ["arch"]
    assert ids(apply_item_filters(rows, ItemFilters(aggregation_method="ADD"))) == ["napkins", "arch"]
