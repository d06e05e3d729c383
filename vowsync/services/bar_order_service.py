"""
Bar order calculations and percentage validation

Client-side preview of the consumption model. Stored orders carry the same
values as generated columns; these functions mirror them for what-if views.
"""

import math
from typing import Dict, List, Optional

from vowsync.schemas.bar_order import (
    BarOrderItem,
    BarOrderStatusBadge,
    BarOrderSummary,
    ConsumptionModel,
    ItemValues,
    PercentageValidation,
)

TARGET_PERCENT = 100.0
MIN_ACCEPTABLE_PERCENT = 90.0
MAX_ACCEPTABLE_PERCENT = 110.0

BAR_ORDER_STATUSES = ["draft", "confirmed", "ordered", "delivered"]

BAR_ORDER_STATUS_CONFIG: Dict[str, BarOrderStatusBadge] = {
    "draft": BarOrderStatusBadge(label="Draft", severity="muted", description="Order is being planned and can be modified"),
    "confirmed": BarOrderStatusBadge(label="Confirmed", severity="info", description="Order details are finalized and ready to place"),
    "ordered": BarOrderStatusBadge(label="Ordered", severity="warning", description="Order has been placed with the vendor"),
    "delivered": BarOrderStatusBadge(label="Delivered", severity="success", description="Order has been received and completed"),
}


def _distance_from_target(display_percentage: float) -> str:
    diff = display_percentage - TARGET_PERCENT
    direction = "above" if diff > 0 else "below"
    return f"{abs(diff):.1f}% {direction} the {TARGET_PERCENT:.0f}% target"


class BarOrderService:
    """Servings, units, costs and percentage checks for bar orders"""

    @staticmethod
    def servings_per_person(model: ConsumptionModel) -> float:
        """(first hours * rate) + (remaining hours * remaining rate)

        e.g. a 5 hour event at 2 drinks/hour for 2 hours then 1/hour is
        2*2 + 3*1 = 7 servings per person.
        """
        first_hours_servings = model.first_hours * model.first_hours_drinks_per_hour
        remaining_hours = max(model.event_duration_hours - model.first_hours, 0)
        return first_hours_servings + remaining_hours * model.remaining_hours_drinks_per_hour

    @staticmethod
    def item_servings(total_servings_per_person: float, percentage: float, guest_count_adults: int) -> float:
        return total_servings_per_person * percentage * guest_count_adults

    @staticmethod
    def units_needed(calculated_servings: float, servings_per_unit: float) -> int:
        if servings_per_unit <= 0:
            return 0
        return math.ceil(calculated_servings / servings_per_unit)

    @staticmethod
    def item_total_cost(units_needed: int, cost_per_unit: Optional[float]) -> Optional[float]:
        if cost_per_unit is None:
            return None
        return units_needed * cost_per_unit

    @staticmethod
    def item_values(item: BarOrderItem, total_servings_per_person: float, guest_count_adults: int) -> ItemValues:
        calculated_servings = BarOrderService.item_servings(total_servings_per_person, item.percentage, guest_count_adults)
        units = BarOrderService.units_needed(calculated_servings, item.servings_per_unit)
        return ItemValues(
            calculated_servings=calculated_servings,
            units_needed=units,
            total_cost=BarOrderService.item_total_cost(units, item.cost_per_unit)
        )

    @staticmethod
    def summarize(items: List[BarOrderItem]) -> BarOrderSummary:
        return BarOrderSummary(
            total_units=sum(item.units_needed for item in items),
            total_cost=sum(item.total_cost or 0 for item in items),
            total_percentage=sum(item.percentage for item in items),
            item_count=len(items)
        )

    @staticmethod
    def recalculate_items(
        items: List[BarOrderItem],
        model: ConsumptionModel,
        guest_count_adults: int
    ) -> List[BarOrderItem]:
        """Fresh copies of the items with units and cost derived from the consumption model"""
        per_person = BarOrderService.servings_per_person(model)
        result = []
        for item in items:
            values = BarOrderService.item_values(item, per_person, guest_count_adults)
            result.append(item.model_copy(update={
                "units_needed": values.units_needed,
                "total_cost": values.total_cost,
            }))
        return result

    @staticmethod
    def validate_percentage_total(total_percentage: float) -> PercentageValidation:
        """Check the summed item fractions against the 100% target.

        Exactly 100% is valid; 90-110% saves with a warning; anything else
        blocks saving. Messages state the actual total and which side of the
        target it falls on.
        """
        display_percentage = round(total_percentage * 100, 6)

        if abs(display_percentage - TARGET_PERCENT) < 0.01:
            return PercentageValidation(total=total_percentage, is_valid=True, is_warning=False, is_error=False)

        if MIN_ACCEPTABLE_PERCENT <= display_percentage <= MAX_ACCEPTABLE_PERCENT:
            return PercentageValidation(
                total=total_percentage,
                is_valid=True,
                is_warning=True,
                is_error=False,
                message=f"Total is {display_percentage:.1f}%, {_distance_from_target(display_percentage)}."
            )

        return PercentageValidation(
            total=total_percentage,
            is_valid=False,
            is_warning=False,
            is_error=True,
            message=(
                f"Total percentage must be between {MIN_ACCEPTABLE_PERCENT:.0f}% and "
                f"{MAX_ACCEPTABLE_PERCENT:.0f}%. Current: {display_percentage:.1f}% "
                f"({_distance_from_target(display_percentage)})"
            )
        )

    @staticmethod
    def validate_items(items: List[BarOrderItem]) -> PercentageValidation:
        return BarOrderService.validate_percentage_total(sum(item.percentage for item in items))

    @staticmethod
    def should_block_save(items: List[BarOrderItem]) -> bool:
        return BarOrderService.validate_items(items).is_error

    # -------- workflow status --------

    @staticmethod
    def status_badge(status: str) -> BarOrderStatusBadge:
        return BAR_ORDER_STATUS_CONFIG.get(status, BAR_ORDER_STATUS_CONFIG["draft"])

    @staticmethod
    def next_status(status: str) -> Optional[str]:
        """Next step in draft -> confirmed -> ordered -> delivered, None at the end"""
        if status not in BAR_ORDER_STATUSES:
            return None
        index = BAR_ORDER_STATUSES.index(status)
        if index + 1 < len(BAR_ORDER_STATUSES):
            return BAR_ORDER_STATUSES[index + 1]
        return None

    @staticmethod
    def can_edit_order(status: str) -> bool:
        return status != "delivered"
