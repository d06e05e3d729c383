"""
Wedding item quantity, availability and cost helpers
"""

from typing import Dict, Iterable, List, Optional

from vowsync.schemas.item import (
    AvailabilityStatus,
    ItemEventQuantity,
    ItemEventQuantityDisplay,
    ItemSummary,
    WeddingItem,
)


class ItemService:
    """Service for wedding item calculations"""

    @staticmethod
    def calculate_total_required(aggregation_method: str, quantities: List[int]) -> int:
        """ADD sums the per-event quantities, MAX takes the largest"""
        if not quantities:
            return 0
        if aggregation_method == "ADD":
            return sum(quantities)
        return max(quantities)

    @staticmethod
    def check_availability(total_required: int, number_available: Optional[int]) -> AvailabilityStatus:
        if number_available is None:
            return AvailabilityStatus(status="unknown", message="Availability not set")

        if number_available >= total_required:
            return AvailabilityStatus(status="sufficient", message=f"{number_available} available")

        shortage = total_required - number_available
        return AvailabilityStatus(status="shortage", shortage=shortage, message=f"Short by {shortage}")

    @staticmethod
    def calculate_total_cost(total_required: int, cost_per_unit: Optional[float]) -> Optional[float]:
        if cost_per_unit is None:
            return None
        return total_required * cost_per_unit

    @staticmethod
    def mark_max_rows(quantities: Iterable[ItemEventQuantity], aggregation_method: str) -> List[ItemEventQuantityDisplay]:
        """Flag the event rows that set the total for MAX items"""
        quantities = list(quantities)
        max_quantity = max((q.quantity_required for q in quantities), default=0)
        highlight = aggregation_method == "MAX" and max_quantity > 0

        return [
            ItemEventQuantityDisplay(
                event_id=q.event_id,
                event_name=q.event_name,
                quantity_required=q.quantity_required,
                is_max=highlight and q.quantity_required == max_quantity
            )
            for q in quantities
        ]

    @staticmethod
    def event_names(quantities: Iterable[ItemEventQuantity]) -> Dict[str, str]:
        """Event id -> name in first-seen order, for generating quantity columns"""
        names: Dict[str, str] = {}
        for q in quantities:
            if q.event_name or q.event_id not in names:
                names[q.event_id] = q.event_name or q.event_id
        return names

    @staticmethod
    def calculate_summary(items: List[WeddingItem]) -> ItemSummary:
        total_cost = 0.0
        items_with_cost = 0
        counts = {"shortage": 0, "sufficient": 0, "unknown": 0}

        for item in items:
            if item.total_cost is not None:
                total_cost += item.total_cost
                items_with_cost += 1

            availability = ItemService.check_availability(item.total_required or 0, item.number_available)
            counts[availability.status] += 1

        return ItemSummary(
            total_items=len(items),
            total_cost=total_cost,
            items_with_cost=items_with_cost,
            items_without_cost=len(items) - items_with_cost,
            shortage_count=counts["shortage"],
            sufficient_count=counts["sufficient"],
            unknown_availability_count=counts["unknown"]
        )
