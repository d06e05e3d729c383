"""
Shared fixtures: a small wedding with three guests, two events and items
"""

import pytest

from vowsync.schemas.event import MealOption, WeddingEvent
from vowsync.schemas.guest import Guest, GuestAttendance
from vowsync.schemas.item import ItemEventQuantity, WeddingItem


@pytest.fixture
def events():
    return [
        WeddingEvent(id="reception", event_name="Reception", event_order=2, event_location="Barn",
                     event_start_time="18:00", shuttle_from_location="Hotel",
                     shuttle_departure_to_event="17:15", shuttle_departure_from_event="23:30"),
        WeddingEvent(id="ceremony", event_name="Ceremony", event_order=1, event_location="Chapel",
                     event_start_time="15:30"),
    ]


@pytest.fixture
def guests():
    return [
        Guest(id="g1", wedding_id="w1", name="Zoë Adams", guest_type="adult", invitation_status="confirmed",
              table_number="1", email="zoe@example.com", starter_choice=2),
        Guest(id="g2", wedding_id="w1", name="Ben Carter", guest_type="child", invitation_status="pending",
              table_number="2", has_plus_one=True),
        Guest(id="g3", wedding_id="w1", name="amy Brooks", guest_type="adult", invitation_status="declined"),
    ]


@pytest.fixture
def attendance():
    return [
        GuestAttendance(guest_id="g1", event_id="ceremony", attending=True, shuttle_to_event="Yes"),
        GuestAttendance(guest_id="g1", event_id="reception", attending=True),
        GuestAttendance(guest_id="g2", event_id="ceremony", attending=True),
        # Later duplicate wins
        GuestAttendance(guest_id="g2", event_id="ceremony", attending=False),
        # Orphan, no such guest
        GuestAttendance(guest_id="ghost", event_id="ceremony", attending=True),
    ]


@pytest.fixture
def meal_options():
    return [
        MealOption(option_number=1, meal_name="Soup", course_type="starter"),
        MealOption(option_number=2, meal_name="Salad", course_type="starter"),
        MealOption(option_number=1, meal_name="Beef", course_type="main"),
    ]


@pytest.fixture
def items():
    return [
        WeddingItem(id="chairs", wedding_id="w1", description="Chiavari chairs", category="Furniture",
                    aggregation_method="MAX", number_available=100, cost_per_unit=25, supplier_name="Hire Co"),
        WeddingItem(id="napkins", wedding_id="w1", description="Linen napkins", category="Linen",
                    aggregation_method="ADD", number_available=120, cost_per_unit=5, supplier_name="Linen Ltd"),
        WeddingItem(id="arch", wedding_id="w1", description="Flower arch", category="Decor"),
    ]


@pytest.fixture
def quantities():
    return [
        ItemEventQuantity(item_id="chairs", event_id="ceremony", quantity_required=80, event_name="Ceremony"),
        ItemEventQuantity(item_id="chairs", event_id="reception", quantity_required=120, event_name="Reception"),
        ItemEventQuantity(item_id="napkins", event_id="ceremony", quantity_required=30, event_name="Ceremony"),
        ItemEventQuantity(item_id="napkins", event_id="reception", quantity_required=90, event_name="Reception"),
        ItemEventQuantity(item_id="arch", event_id="ceremony", quantity_required=1, event_name="Ceremony"),
    ]
