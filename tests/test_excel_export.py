"""
Tests for Excel/CSV export of table views
"""

import io

import pandas as pd
import pytest

from vowsync.schemas.event import WeddingEvent
from vowsync.schemas.guest import GuestAttendance
from vowsync.services.excel_service import ExcelService
from vowsync.services.table_service import build_guest_table, build_item_table


@pytest.fixture
def guest_view(guests, attendance, events):
    return build_guest_table(guests, attendance, events)


def read_workbook(content: bytes) -> pd.DataFrame:
    return pd.read_excel(io.BytesIO(content))


def test_export_rows_xlsx(guest_view):
    """Workbook has one row per guest and flattened event headers"""
    content = ExcelService.export_rows(guest_view.rows, guest_view.columns)

    assert content is not None
    assert len(content) > 0

    df = read_workbook(content)
    assert len(df) == 3
    for col in ["Name", "Email", "Ceremony - Attending", "Ceremony - Shuttle", "Reception - Attending"]:
        assert col in df.columns
    assert "Pickup" not in df.columns


def test_booleans_rendered_yes_no(guest_view):
    df = ExcelService.build_dataframe(guest_view.rows, guest_view.columns)

    assert list(df["Ceremony - Attending"]) == ["Yes", "No", "No"]
    assert list(df["Ceremony - Shuttle"]) == ["Yes", "No", "No"]
    assert list(df["Plus One"]) == ["No", "Yes", "No"]


def test_export_respects_row_limit(guest_view):
    df = ExcelService.build_dataframe(guest_view.rows, guest_view.columns, max_rows=2)
    assert list(df["Name"]) == ["Zoë Adams", "Ben Carter"]


def test_export_rows_csv_has_bom(guest_view):
    text = ExcelService.export_rows_csv(guest_view.rows, guest_view.columns)

    assert text.startswith("\ufeff")
    header = text[1:].splitlines()[0]
    assert header.startswith("Name,Email,")
    assert "Zoë Adams" in text


def test_item_export_quantity_headers(items, quantities, events):
    view = build_item_table(items, quantities, events)
    df = read_workbook(ExcelService.export_rows(view.rows, view.columns))

    assert list(df["Description"]) == ["Chiavari chairs", "Linen napkins", "Flower arch"]
    assert list(df["Reception - Quantity"].fillna(0)) == [120, 90, 0]


def test_events_sharing_a_name_keep_their_own_values(guests):
    events = [WeddingEvent(id="e1", event_name="Party", event_order=1),
              WeddingEvent(id="e2", event_name="Party", event_order=2)]
    attendance = [GuestAttendance(guest_id="g1", event_id="e1", attending=True)]
    view = build_guest_table(guests, attendance, events)

    df = ExcelService.build_dataframe(view.rows, view.columns)

    positions = [i for i, header in enumerate(df.columns) if header == "Party - Attending"]
    assert len(positions) == 2
    first, second = positions
    assert list(df.iloc[:, first]) == ["Yes", "No", "No"]
    assert list(df.iloc[:, second]) == ["No", "No", "No"]


def test_export_empty_view():
    df = ExcelService.build_dataframe([], [])
    assert df.empty
