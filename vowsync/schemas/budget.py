"""
Budget tracking schemas
"""

from typing import List, Literal, Optional
from pydantic import BaseModel

BudgetLevel = Literal["on-track", "near-budget", "at-budget", "over-budget"]


class BudgetProgress(BaseModel):
    """Percentage-of-budget classification used by progress bars"""
    percent: float
    status: Literal["normal", "warning", "danger"]


class BudgetStatusBadge(BaseModel):
    label: str
    status: BudgetLevel
    over_amount: Optional[float] = None


class BudgetCategory(BaseModel):
    id: str
    category_name: str
    projected_amount: float = 0
    actual_amount: float = 0


class BudgetCategoryDisplay(BudgetCategory):
    """Category with the computed financial fields the table shows"""
    invoiced_unpaid: float
    total_committed: float
    remaining: float
    percentage_spent: float
    is_near_limit: bool
    is_over_budget: bool
    status_badge: BudgetStatusBadge


class BudgetOverview(BaseModel):
    total_budget: float
    total_spent: float
    remaining: float
    percent_spent: int


class BudgetPieSlice(BaseModel):
    name: str
    value: float
    percentage: int


class BudgetImpactPreview(BaseModel):
    """Before/after view of recording a payment against a category"""
    category_id: Optional[str] = None
    category_name: Optional[str] = None
    current_actual: float
    new_actual: float
    change_amount: float
    new_percentage_spent: float
    will_trigger_warning: bool
    will_exceed_budget: bool


class BudgetStatusRequest(BaseModel):
    spent: float
    total: float


class BudgetImpactRequest(BaseModel):
    category: BudgetCategory
    payment_amount: float


class BudgetOverviewRequest(BaseModel):
    categories: List[BudgetCategory]
