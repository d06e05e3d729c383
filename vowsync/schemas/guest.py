"""
Guest-related Pydantic schemas
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel

from vowsync.schemas.event import MealOption, WeddingEvent
from vowsync.schemas.table import ColumnFilter, SortConfig


class Guest(BaseModel):
    """Guest row as delivered by the data-access layer"""
    id: str
    wedding_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    email_valid: bool = True
    guest_type: Literal["adult", "child", "vendor", "staff"] = "adult"
    gender: Optional[Literal["male", "female"]] = None
    wedding_party_side: Optional[Literal["bride", "groom"]] = None
    wedding_party_role: Optional[str] = None

    # RSVP
    invitation_status: Literal["pending", "invited", "confirmed", "declined"] = "pending"
    rsvp_deadline: Optional[str] = None
    rsvp_received_date: Optional[str] = None
    rsvp_method: Optional[Literal["email", "phone", "in_person", "online"]] = None
    has_plus_one: bool = False
    plus_one_name: Optional[str] = None
    plus_one_confirmed: bool = False
    notes: Optional[str] = None

    # Seating
    table_number: Optional[str] = None
    table_position: Optional[int] = None

    # Dietary
    dietary_restrictions: Optional[str] = None
    allergies: Optional[str] = None
    dietary_notes: Optional[str] = None

    # Meals (option numbers 1-5)
    starter_choice: Optional[int] = None
    main_choice: Optional[int] = None
    dessert_choice: Optional[int] = None
    plus_one_starter_choice: Optional[int] = None
    plus_one_main_choice: Optional[int] = None
    plus_one_dessert_choice: Optional[int] = None

    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class GuestAttendance(BaseModel):
    """Per-event attendance relation"""
    guest_id: str
    event_id: str
    attending: bool = False
    shuttle_to_event: Optional[str] = None
    shuttle_from_event: Optional[str] = None


class EventAttendanceData(BaseModel):
    """Attendance payload stored on a table row; shuttle fields are "Yes" or None"""
    attending: bool = False
    shuttle_to_event: Optional[str] = None
    shuttle_from_event: Optional[str] = None

    class Config:
        frozen = True


NOT_ATTENDING = EventAttendanceData()


class GuestTableRow(Guest):
    """Guest with pivoted event attendance keyed by event id"""
    event_attendance: Dict[str, EventAttendanceData] = {}

    class Config:
        frozen = True

    def attendance_for(self, event_id: str) -> EventAttendanceData:
        """Attendance for an event, reading a missing relation as not attending"""
        return self.event_attendance.get(event_id, NOT_ATTENDING)


class GuestFilters(BaseModel):
    """Shared guest filters used by both card and table views"""
    search: str = ""
    type: str = "all"
    invitation_status: str = "all"
    table_number: Optional[str] = None
    event_id: Optional[str] = None

    class Config:
        frozen = True


class GuestTableRequest(BaseModel):
    """Payload for building the guest table view"""
    guests: List[Guest]
    events: List[WeddingEvent] = []
    attendance: List[GuestAttendance] = []
    meal_options: List[MealOption] = []
    filters: GuestFilters = GuestFilters()
    column_filters: List[ColumnFilter] = []
    sort: SortConfig = SortConfig()
