"""
Pivot one-to-many event relations into flat table rows.

Guests carry per-event attendance and items carry per-event quantities. Both
are pivoted the same way: one row per entity, in entity order, with a
mapping event_id -> relation payload. Relations whose owner is not in the
entity list are dropped, and when a (entity, event) pair appears twice the
later relation wins.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, TypeVar

from vowsync.core.config import DisplayConfig, DEFAULT_DISPLAY_CONFIG
from vowsync.schemas.event import EventColumnMeta, MealOption, MealOptionLookup, WeddingEvent
from vowsync.schemas.guest import EventAttendanceData, Guest, GuestAttendance, GuestTableRow
from vowsync.schemas.item import ItemEventQuantity, ItemTableRow, WeddingItem
from vowsync.services.item_service import ItemService

logger = logging.getLogger(__name__)

R = TypeVar("R")


class GuestPivot(NamedTuple):
    rows: List[GuestTableRow]
    events: List[EventColumnMeta]
    meal_lookup: MealOptionLookup


def group_relations(
    entity_ids: Iterable[str],
    relations: Iterable[R],
    owner_field: str
) -> Dict[str, Dict[str, R]]:
    """entity_id -> event_id -> relation, last write wins, orphans dropped"""
    grouped: Dict[str, Dict[str, R]] = {entity_id: {} for entity_id in entity_ids}
    dropped = 0

    for relation in relations:
        bucket = grouped.get(getattr(relation, owner_field))
        if bucket is None:
            dropped += 1
            continue
        bucket[relation.event_id] = relation

    if dropped:
        logger.debug("Dropped %d relations without a matching %s", dropped, owner_field)
    return grouped


def build_event_meta(
    events: Sequence[WeddingEvent],
    config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
) -> List[EventColumnMeta]:
    """Event column metadata ordered by event_order and capped at max_event_columns"""
    ordered = sorted(events, key=lambda e: e.event_order)[:config.max_event_columns]
    return [
        EventColumnMeta(
            id=event.id,
            name=event.event_name,
            order=event.event_order,
            color=f"hsl({(index * 36) % 360}, 70%, 90%)",
            event_location=event.event_location,
            event_start_time=event.event_start_time,
            event_end_time=event.event_end_time,
            shuttle_from_location=event.shuttle_from_location,
            shuttle_departure_to_event=event.shuttle_departure_to_event,
            shuttle_departure_from_event=event.shuttle_departure_from_event,
        )
        for index, event in enumerate(ordered)
    ]


def build_meal_lookup(meal_options: Iterable[MealOption]) -> MealOptionLookup:
    lookup = MealOptionLookup()
    for option in meal_options:
        getattr(lookup, option.course_type)[option.option_number] = option.meal_name
    return lookup


def pivot_guests(
    guests: Sequence[Guest],
    attendance: Iterable[GuestAttendance],
    events: Sequence[WeddingEvent] = (),
    meal_options: Iterable[MealOption] = (),
    config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
) -> GuestPivot:
    """Guests plus attendance relations -> guest table rows, event columns and meal names"""
    grouped = group_relations((g.id for g in guests), attendance, "guest_id")

    rows = []
    for guest in guests:
        event_attendance = {
            event_id: EventAttendanceData(
                attending=record.attending,
                shuttle_to_event=record.shuttle_to_event,
                shuttle_from_event=record.shuttle_from_event,
            )
            for event_id, record in grouped[guest.id].items()
        }
        rows.append(GuestTableRow(**guest.model_dump(), event_attendance=event_attendance))

    return GuestPivot(rows=rows, events=build_event_meta(events, config), meal_lookup=build_meal_lookup(meal_options))


def pivot_items(items: Sequence[WeddingItem], quantities: Iterable[ItemEventQuantity]) -> List[ItemTableRow]:
    """Items plus per-event quantities -> item table rows with availability and MAX markers"""
    grouped = group_relations((i.id for i in items), quantities, "item_id")

    rows = []
    for item in items:
        relations = list(grouped[item.id].values())
        amounts = [q.quantity_required for q in relations]

        total_required = item.total_required
        if total_required is None:
            total_required = ItemService.calculate_total_required(item.aggregation_method, amounts)

        total_cost = item.total_cost
        if total_cost is None:
            total_cost = ItemService.calculate_total_cost(total_required, item.cost_per_unit)

        availability = ItemService.check_availability(total_required, item.number_available)
        fields = item.model_dump(exclude={"total_required", "total_cost"})

        rows.append(ItemTableRow(
            **fields,
            total_required=total_required,
            total_cost=total_cost,
            availability_status=availability.status,
            shortage_amount=availability.shortage,
            event_quantities=ItemService.mark_max_rows(relations, item.aggregation_method),
            event_quantity_map={q.event_id: q.quantity_required for q in relations},
        ))
    return rows


def pivot(
    entities: Sequence,
    relations: Iterable,
    events: Sequence[WeddingEvent] = (),
    meal_options: Iterable[MealOption] = (),
    config: Optional[DisplayConfig] = None
) -> List:
    """Dispatch on the entity kind; returns the pivoted rows only"""
    config = config or DEFAULT_DISPLAY_CONFIG
    if entities and isinstance(entities[0], WeddingItem):
        return pivot_items(entities, relations)
    return pivot_guests(entities, relations, events, meal_options, config).rows
