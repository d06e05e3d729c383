"""
Bar order API routes
"""

from fastapi import APIRouter

from vowsync.schemas.bar_order import BarOrderSummaryRequest, BarOrderValidateRequest
from vowsync.services.bar_order_service import BarOrderService
from vowsync.utils.responses import success_response

router = APIRouter()


@router.post("/validate")
async def validate_bar_order(request: BarOrderValidateRequest):
    """Percentage split check; is_error means the order cannot be saved"""
    validation = BarOrderService.validate_items(request.items)
    return success_response(message=validation.message or "Percentages add up", data=validation)


@router.post("/summary")
async def bar_order_summary(request: BarOrderSummaryRequest):
    """Totals for an order, recalculating units and cost when a consumption model is given"""
    items = request.items
    servings_per_person = None
    if request.consumption is not None:
        items = BarOrderService.recalculate_items(items, request.consumption, request.guest_count_adults)
        servings_per_person = BarOrderService.servings_per_person(request.consumption)

    return success_response(
        message="Bar order summary",
        data={
            "items": items,
            "summary": BarOrderService.summarize(items),
            "validation": BarOrderService.validate_items(items),
            "servings_per_person": servings_per_person,
        }
    )
