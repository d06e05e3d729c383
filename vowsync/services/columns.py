"""
Column definitions for the guest, item and vendor tables, and which filter
operators each cell type accepts
"""

from typing import Dict, FrozenSet, Iterable, List

from vowsync.schemas.event import EventColumnMeta
from vowsync.schemas.table import CellType, ColumnDef, FilterOperator
from vowsync.schemas.vendor import VENDOR_STATUS_OPTIONS, VENDOR_TYPE_OPTIONS
from vowsync.utils.formatting import format_time

_TEXT_OPERATORS = frozenset({
    FilterOperator.EQUALS, FilterOperator.CONTAINS, FilterOperator.IN,
    FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY,
})
_FLAG_OPERATORS = frozenset({
    FilterOperator.EQUALS, FilterOperator.IN,
    FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY,
})
_RANGE_OPERATORS = frozenset({
    FilterOperator.EQUALS, FilterOperator.IN, FilterOperator.GTE, FilterOperator.LTE,
    FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY,
})

OPERATOR_COMPATIBILITY: Dict[CellType, FrozenSet[FilterOperator]] = {
    CellType.TEXT: _TEXT_OPERATORS,
    CellType.TEXTAREA: _TEXT_OPERATORS,
    # Only presence is filterable on masked values
    CellType.MASKED: frozenset({FilterOperator.IS_EMPTY, FilterOperator.IS_NOT_EMPTY}),
    CellType.ENUM: _TEXT_OPERATORS,
    CellType.BADGE: _TEXT_OPERATORS,
    CellType.BOOLEAN: _FLAG_OPERATORS,
    CellType.SHUTTLE_TOGGLE: _FLAG_OPERATORS,
    CellType.NUMBER: _RANGE_OPERATORS,
    CellType.CURRENCY: _RANGE_OPERATORS,
    CellType.PERCENTAGE: _RANGE_OPERATORS,
    CellType.MEAL: _RANGE_OPERATORS,
    CellType.EVENT_QUANTITY: _RANGE_OPERATORS,
    CellType.DATE: _RANGE_OPERATORS | {FilterOperator.CONTAINS},
    CellType.DATETIME: _RANGE_OPERATORS | {FilterOperator.CONTAINS},
    # Read-only info cells are rendered from event metadata, not row data
    CellType.SHUTTLE_INFO: frozenset(),
}

DATE_CELL_TYPES = frozenset({CellType.DATE, CellType.DATETIME})


def is_operator_compatible(cell_type: CellType, operator: FilterOperator) -> bool:
    return operator in OPERATOR_COMPATIBILITY.get(cell_type, frozenset())


def _col(id: str, header: str, category: str, type: CellType, **kwargs) -> ColumnDef:
    return ColumnDef(id=id, header=header, field=kwargs.pop("field", id), category=category, type=type, **kwargs)


GUEST_BASE_COLUMNS: List[ColumnDef] = [
    # Basic info
    _col("name", "Name", "basic", CellType.TEXT, editable=True, width=180),
    _col("email", "Email", "basic", CellType.TEXT, editable=True, width=200),
    _col("phone", "Phone", "basic", CellType.TEXT, editable=True),
    _col("email_valid", "Email Valid", "basic", CellType.BOOLEAN, editable=True, width=100),
    _col("guest_type", "Type", "basic", CellType.ENUM, editable=True, width=110,
         enum_options=["adult", "child", "vendor", "staff"]),
    _col("gender", "Gender", "basic", CellType.ENUM, editable=True, width=110, enum_options=["male", "female"]),
    _col("wedding_party_side", "Side", "basic", CellType.ENUM, editable=True, width=110,
         enum_options=["bride", "groom"]),
    _col("wedding_party_role", "Role", "basic", CellType.ENUM, editable=True),

    # RSVP
    _col("invitation_status", "RSVP Status", "rsvp", CellType.ENUM, editable=True,
         enum_options=["pending", "invited", "confirmed", "declined"]),
    _col("rsvp_deadline", "RSVP Deadline", "rsvp", CellType.DATE, editable=True),
    _col("rsvp_received_date", "RSVP Received", "rsvp", CellType.DATE, editable=True),
    _col("rsvp_method", "RSVP Method", "rsvp", CellType.ENUM, editable=True,
         enum_options=["email", "phone", "in_person", "online"]),
    _col("has_plus_one", "Plus One", "rsvp", CellType.BOOLEAN, editable=True, width=100),
    _col("plus_one_name", "Plus One Name", "rsvp", CellType.TEXT, editable=True, requires_plus_one=True),
    _col("plus_one_confirmed", "+1 Confirmed", "rsvp", CellType.BOOLEAN, editable=True,
         width=110, requires_plus_one=True),
    _col("notes", "Notes", "rsvp", CellType.TEXT, editable=True, width=200),

    # Seating
    _col("table_number", "Table", "seating", CellType.TEXT, editable=True, width=100),
    _col("table_position", "Seat", "seating", CellType.NUMBER, editable=True, width=90),

    # Dietary
    _col("dietary_restrictions", "Dietary", "dietary", CellType.TEXT, editable=True, width=160),
    _col("allergies", "Allergies", "dietary", CellType.TEXT, editable=True, width=160),
    _col("dietary_notes", "Diet Notes", "dietary", CellType.TEXT, editable=True, width=200),

    # Meals
    _col("starter_choice", "Starter", "meals", CellType.MEAL, editable=True, width=160, course_type="starter"),
    _col("main_choice", "Main", "meals", CellType.MEAL, editable=True, width=160, course_type="main"),
    _col("dessert_choice", "Dessert", "meals", CellType.MEAL, editable=True, width=160, course_type="dessert"),
    _col("plus_one_starter_choice", "+1 Starter", "meals", CellType.MEAL, editable=True, width=160,
         course_type="starter", requires_plus_one=True),
    _col("plus_one_main_choice", "+1 Main", "meals", CellType.MEAL, editable=True, width=160,
         course_type="main", requires_plus_one=True),
    _col("plus_one_dessert_choice", "+1 Dessert", "meals", CellType.MEAL, editable=True, width=160,
         course_type="dessert", requires_plus_one=True),

    # Other
    _col("created_at", "Created", "other", CellType.DATETIME, width=170),
    _col("updated_at", "Updated", "other", CellType.DATETIME, width=170),
    _col("id", "ID", "other", CellType.TEXT, width=120),
]


def _location_and_time(location, time) -> str:
    return f"{location or 'TBD'}, {format_time(time)}"


def generate_guest_event_columns(events: Iterable[EventColumnMeta]) -> List[ColumnDef]:
    """Five columns per event: attending, shuttle toggle, pickup, event and return info"""
    columns: List[ColumnDef] = []
    for event in events:
        common = {"category": "event", "event_id": event.id, "event_name": event.name}
        columns.extend([
            _col(f"event_{event.id}_attending", "Attending", type=CellType.BOOLEAN,
                 field=f"event_attendance.{event.id}.attending", editable=True, width=90, min_width=70, **common),
            _col(f"event_{event.id}_shuttle", "Shuttle", type=CellType.SHUTTLE_TOGGLE,
                 field=f"event_attendance.{event.id}.shuttle_to_event", editable=True, width=90, min_width=70,
                 **common),
            _col(f"event_{event.id}_pickup", "Pickup", type=CellType.SHUTTLE_INFO,
                 field=f"_event_meta.{event.id}.pickup", width=160, min_width=120,
                 display_value=_location_and_time(event.shuttle_from_location, event.shuttle_departure_to_event),
                 **common),
            _col(f"event_{event.id}_event_info", "Event", type=CellType.SHUTTLE_INFO,
                 field=f"_event_meta.{event.id}.event", width=160, min_width=120,
                 display_value=_location_and_time(event.event_location, event.event_start_time),
                 **common),
            _col(f"event_{event.id}_return", "Return", type=CellType.SHUTTLE_INFO,
                 field=f"_event_meta.{event.id}.return", width=160, min_width=120,
                 display_value=_location_and_time(event.shuttle_from_location, event.shuttle_departure_from_event),
                 **common),
        ])
    return columns


ITEM_BASE_COLUMNS: List[ColumnDef] = [
    _col("description", "Description", "basic", CellType.TEXT, editable=True, width=220),
    _col("category", "Category", "basic", CellType.ENUM, editable=True),
    _col("aggregation_method", "Aggregation", "basic", CellType.ENUM, editable=True, width=120,
         enum_options=["ADD", "MAX"]),
    _col("supplier_name", "Supplier", "basic", CellType.TEXT, editable=True, width=160),
    _col("total_required", "Required", "inventory", CellType.NUMBER, width=100),
    _col("number_available", "Available", "inventory", CellType.NUMBER, editable=True, width=100),
    _col("availability_status", "Status", "inventory", CellType.BADGE, width=120,
         enum_options=["sufficient", "shortage", "unknown"]),
    _col("cost_per_unit", "Cost/Unit", "cost", CellType.CURRENCY, editable=True, width=120),
    _col("total_cost", "Total Cost", "cost", CellType.CURRENCY, width=120),
    _col("cost_details", "Cost Details", "cost", CellType.TEXTAREA, editable=True, width=200),
    _col("notes", "Notes", "other", CellType.TEXTAREA, editable=True, width=200),
    _col("created_at", "Created", "other", CellType.DATETIME, width=170),
    _col("updated_at", "Updated", "other", CellType.DATETIME, width=170),
]


def generate_item_event_columns(events: Dict[str, str]) -> List[ColumnDef]:
    """One quantity column per event, keyed by event id -> event name"""
    return [
        _col(f"event_{event_id}", name or event_id, "event", CellType.EVENT_QUANTITY,
             field=f"event_quantity_map.{event_id}", editable=True, width=110,
             event_id=event_id, event_name=name)
        for event_id, name in events.items()
    ]


VENDOR_BASE_COLUMNS: List[ColumnDef] = [
    # Basic info
    _col("vendor_type", "Type", "basic", CellType.ENUM, editable=True, width=140, min_width=120,
         enum_options=VENDOR_TYPE_OPTIONS),
    _col("company_name", "Company", "basic", CellType.TEXT, editable=True, width=200),
    _col("contact_name", "Contact", "basic", CellType.TEXT, editable=True, width=160, min_width=120),
    _col("status", "Status", "basic", CellType.ENUM, editable=True, width=100, min_width=90,
         enum_options=VENDOR_STATUS_OPTIONS),

    # Contact
    _col("contact_email", "Email", "contact", CellType.TEXT, editable=True, width=200),
    _col("contact_phone", "Phone", "contact", CellType.TEXT, editable=True, width=140, min_width=120),
    _col("address", "Address", "contact", CellType.TEXT, editable=True, width=250),
    _col("website", "Website", "contact", CellType.TEXT, editable=True, width=200),
    _col("notes", "Notes", "contact", CellType.TEXTAREA, editable=True, width=250),

    # Contract
    _col("contract_signed", "Signed", "contract", CellType.BOOLEAN, editable=True, width=80, min_width=70),
    _col("contract_date", "Contract Date", "contract", CellType.DATE, editable=True, width=130, min_width=110),
    _col("contract_expiry_date", "Expiry Date", "contract", CellType.DATE, editable=True, width=130, min_width=110),
    _col("contract_value", "Value", "contract", CellType.CURRENCY, editable=True, width=120),
    _col("cancellation_policy", "Cancellation Policy", "contract", CellType.TEXT, editable=True, width=200),
    _col("cancellation_fee_percentage", "Cancel Fee %", "contract", CellType.PERCENTAGE, editable=True,
         width=110, min_width=90),

    # Insurance
    _col("insurance_required", "Insurance Required", "insurance", CellType.BOOLEAN, editable=True, width=90,
         min_width=80),
    _col("insurance_verified", "Insurance Verified", "insurance", CellType.BOOLEAN, editable=True, width=90,
         min_width=80),
    _col("insurance_expiry_date", "Insurance Expiry", "insurance", CellType.DATE, editable=True, width=140,
         min_width=120),

    # Banking
    _col("bank_name", "Bank", "banking", CellType.TEXT, editable=True),
    _col("account_name", "Account Name", "banking", CellType.TEXT, editable=True, width=180),
    _col("account_number", "Account #", "banking", CellType.MASKED, editable=True, width=120),
    _col("branch_code", "Branch Code", "banking", CellType.TEXT, editable=True, width=110, min_width=90),
    _col("swift_code", "SWIFT", "banking", CellType.TEXT, editable=True, width=110, min_width=90),

    # Read-only counts of related records
    _col("contacts_count", "Contacts", "aggregates", CellType.NUMBER, width=90, min_width=80),
    _col("payments_count", "Payments", "aggregates", CellType.NUMBER, width=90, min_width=80),
    _col("invoices_count", "Invoices", "aggregates", CellType.NUMBER, width=90, min_width=80),

    _col("created_at", "Created", "metadata", CellType.DATETIME, width=160),
    _col("updated_at", "Updated", "metadata", CellType.DATETIME, width=160),
]

def build_column_field_map(columns: Iterable[ColumnDef]) -> Dict[str, str]:
    """Column id -> field path"""
    return {column.id: column.field for column in columns}


def build_column_type_map(columns: Iterable[ColumnDef]) -> Dict[str, CellType]:
    """Field path -> cell type"""
    return {column.field: column.type for column in columns}
