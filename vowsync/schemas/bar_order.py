"""
Bar order schemas
"""

from typing import List, Literal, Optional
from pydantic import BaseModel

BarOrderStatus = Literal["draft", "confirmed", "ordered", "delivered"]


class BarOrderItem(BaseModel):
    """Beverage line; percentage is a fraction of total servings (0.4 = 40%)"""
    id: Optional[str] = None
    item_name: Optional[str] = None
    percentage: float
    servings_per_unit: float = 1
    cost_per_unit: Optional[float] = None
    units_needed: int = 0
    total_cost: Optional[float] = None


class ConsumptionModel(BaseModel):
    event_duration_hours: float
    first_hours: float
    first_hours_drinks_per_hour: float
    remaining_hours_drinks_per_hour: float


class ItemValues(BaseModel):
    calculated_servings: float
    units_needed: int
    total_cost: Optional[float] = None


class BarOrderSummary(BaseModel):
    total_units: int
    total_cost: float
    total_percentage: float
    item_count: int


class PercentageValidation(BaseModel):
    total: float
    is_valid: bool
    is_warning: bool
    is_error: bool
    message: Optional[str] = None


class BarOrderStatusBadge(BaseModel):
    label: str
    severity: str
    description: str


class BarOrderValidateRequest(BaseModel):
    items: List[BarOrderItem]


class BarOrderSummaryRequest(BaseModel):
    items: List[BarOrderItem]
    consumption: Optional[ConsumptionModel] = None
    guest_count_adults: int = 0
