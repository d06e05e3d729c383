"""
Event-related Pydantic schemas
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel


class WeddingEvent(BaseModel):
    """Event row as loaded for the attendance columns"""
    id: str
    event_name: str
    event_order: int = 0
    event_date: Optional[str] = None
    event_start_time: Optional[str] = None
    event_end_time: Optional[str] = None
    event_location: Optional[str] = None
    shuttle_from_location: Optional[str] = None
    shuttle_departure_to_event: Optional[str] = None
    shuttle_departure_from_event: Optional[str] = None


class EventColumnMeta(BaseModel):
    """Event metadata for column generation"""
    id: str
    name: str
    order: int
    color: str
    event_location: Optional[str] = None
    event_start_time: Optional[str] = None
    event_end_time: Optional[str] = None
    shuttle_from_location: Optional[str] = None
    shuttle_departure_to_event: Optional[str] = None
    shuttle_departure_from_event: Optional[str] = None


class MealOption(BaseModel):
    option_number: int
    meal_name: str
    course_type: Literal["starter", "main", "dessert"]


class MealOptionLookup(BaseModel):
    """Meal names keyed by course and option number"""
    starter: Dict[int, str] = {}
    main: Dict[int, str] = {}
    dessert: Dict[int, str] = {}
