"""
Table view schemas shared by the guest, item and vendor tables
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel


class CellType(str, Enum):
    """Cell data type, drives rendering, sorting and filter compatibility"""
    TEXT = "text"
    TEXTAREA = "textarea"
    MASKED = "masked"
    BOOLEAN = "boolean"
    ENUM = "enum"
    DATE = "date"
    DATETIME = "datetime"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    MEAL = "meal"
    SHUTTLE_TOGGLE = "shuttle-toggle"
    SHUTTLE_INFO = "shuttle-info"
    BADGE = "badge"
    EVENT_QUANTITY = "event-quantity"


class FilterOperator(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    IN = "in"
    GTE = "gte"
    LTE = "lte"
    IS_EMPTY = "isEmpty"
    IS_NOT_EMPTY = "isNotEmpty"


class ColumnDef(BaseModel):
    """Column definition for a table view"""
    id: str
    header: str
    field: str
    category: str
    type: CellType
    editable: bool = False
    width: int = 150
    min_width: int = 100
    enum_options: Optional[List[str]] = None
    event_id: Optional[str] = None
    event_name: Optional[str] = None
    course_type: Optional[Literal["starter", "main", "dessert"]] = None
    requires_plus_one: bool = False
    display_value: Optional[str] = None

    class Config:
        frozen = True


class SortConfig(BaseModel):
    """Sort configuration; column None keeps input order"""
    column: Optional[str] = None
    direction: Literal["asc", "desc"] = "asc"

    class Config:
        frozen = True


class ColumnFilter(BaseModel):
    """Declarative column predicate.

    The operator stays a plain string so unknown operators reach the filter
    engine, which treats them as no-ops instead of failing the request.
    """
    column: str
    operator: str
    value: Any = None

    class Config:
        frozen = True


class TableViewResult(BaseModel):
    """Output of the view-model pipeline"""
    rows: List[Any]
    total_count: int
    filtered_count: int
    has_active_filters: bool
    facet_values: Dict[str, List[str]]
    columns: List[ColumnDef] = []
    events: List[Any] = []
    meal_lookup: Optional[Any] = None
