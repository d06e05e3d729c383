"""
Tests for bar order calculations and percentage validation
"""

import pytest

from vowsync.schemas.bar_order import BarOrderItem, ConsumptionModel
from vowsync.services.bar_order_service import BarOrderService


@pytest.fixture
def consumption():
    return ConsumptionModel(
        event_duration_hours=5,
        first_hours=2,
        first_hours_drinks_per_hour=2,
        remaining_hours_drinks_per_hour=1
    )


def test_exact_total_is_valid_without_message():
    result = BarOrderService.validate_percentage_total(1.0)
    assert result.is_valid
    assert not result.is_warning
    assert not result.is_error
    assert result.message is None


def test_float_sum_of_thirds_counts_as_exact():
    items = [BarOrderItem(percentage=1 / 3) for _ in range(3)]
    assert BarOrderService.validate_items(items).message is None


def test_ninety_five_percent_warns_below_target():
    result = BarOrderService.validate_percentage_total(0.95)
    assert result.is_valid
    assert result.is_warning
    assert result.message == "Total is 95.0%, 5.0% below the 100% target."


def test_band_edges_are_warnings():
    assert BarOrderService.validate_percentage_total(0.9).is_warning
    assert BarOrderService.validate_percentage_total(1.1).is_warning


def test_over_band_is_error_and_states_direction():
    result = BarOrderService.validate_percentage_total(1.11)
    assert result.is_error
    assert not result.is_valid
    assert result.message == (
        "Total percentage must be between 90% and 110%. "
        "Current: 111.0% (11.0% above the 100% target)"
    )


def test_under_band_blocks_save():
    items = [BarOrderItem(percentage=0.5), BarOrderItem(percentage=0.3)]
    assert BarOrderService.should_block_save(items)
    assert "below" in BarOrderService.validate_items(items).message


def test_servings_and_units(consumption):
    per_person = BarOrderService.servings_per_person(consumption)
    assert per_person == 7

    item = BarOrderItem(percentage=0.4, servings_per_unit=6, cost_per_unit=120)
    values = BarOrderService.item_values(item, per_person, 100)
    assert values.calculated_servings == pytest.approx(280)
    assert values.units_needed == 47
    assert values.total_cost == 47 * 120


def test_units_with_no_servings_per_unit():
    assert BarOrderService.units_needed(100, 0) == 0


def test_recalculate_returns_copies(consumption):
    items = [BarOrderItem(percentage=0.5, servings_per_unit=4), BarOrderItem(percentage=0.5, servings_per_unit=1)]
    updated = BarOrderService.recalculate_items(items, consumption, 10)

    assert [i.units_needed for i in updated] == [9, 35]
    assert all(i.units_needed == 0 for i in items)

    summary = BarOrderService.summarize(updated)
    assert summary.total_units == 44
    assert summary.item_count == 2
    assert summary.total_cost == 0


def test_status_workflow():
    assert BarOrderService.next_status("draft") == "confirmed"
    assert BarOrderService.next_status("delivered") is None
    assert BarOrderService.next_status("unknown") is None
    assert BarOrderService.status_badge("ordered").label == "Ordered"
    assert BarOrderService.status_badge("bogus").label == "Draft"
    assert not BarOrderService.can_edit_order("delivered")
