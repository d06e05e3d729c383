"""
Finance API routes - vendor payment/invoice badges and budget tracking
"""

from fastapi import APIRouter, Depends

from vowsync.core.config import DisplayConfig, get_display_config
from vowsync.schemas.budget import BudgetImpactRequest, BudgetOverviewRequest, BudgetStatusRequest
from vowsync.schemas.vendor import InvoiceStatusRequest, PaymentStatusRequest
from vowsync.services.budget_service import BudgetService
from vowsync.services.status_service import StatusService
from vowsync.utils.formatting import format_currency
from vowsync.utils.responses import success_response

router = APIRouter()


@router.post("/payments/status")
async def payment_statuses(
    request: PaymentStatusRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Classify each scheduled payment; an unparseable due date fails the request"""
    data = [
        {
            "id": payment.id,
            "display": StatusService.classify_payment(payment, request.today, config),
            "can_edit": StatusService.can_edit(payment),
            "can_mark_as_paid": StatusService.can_mark_as_paid(payment),
            "delete_check": StatusService.can_delete_payment(payment),
        }
        for payment in request.payments
    ]
    return success_response(message=f"Classified {len(data)} payments", data=data)


@router.post("/invoices/status")
async def invoice_statuses(
    request: InvoiceStatusRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    data = [
        {
            "id": invoice.id,
            "display": StatusService.classify_invoice(invoice, request.today, config),
            "can_edit": StatusService.can_edit(invoice),
        }
        for invoice in request.invoices
    ]
    return success_response(message=f"Classified {len(data)} invoices", data=data)


@router.post("/budget/status")
async def budget_status(
    request: BudgetStatusRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Progress tier and badge for spent against total"""
    progress = BudgetService.classify_budget(request.spent, request.total, config)
    return success_response(
        message="Budget status",
        data={
            "progress": progress,
            "badge": BudgetService.budget_status_badge(request.total, request.spent, config),
        }
    )


@router.post("/budget/impact")
async def budget_impact(
    request: BudgetImpactRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Preview of recording a payment against a category"""
    preview = BudgetService.impact_for_category(request.category, request.payment_amount, config)
    return success_response(
        message=f"{request.category.category_name} after {format_currency(request.payment_amount, config)}",
        data=preview
    )


@router.post("/budget/overview")
async def budget_overview(
    request: BudgetOverviewRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Totals, per-category rows and allocation chart"""
    return success_response(
        message="Budget overview",
        data={
            "overview": BudgetService.calculate_overview(request.categories),
            "categories": [BudgetService.classify_budget_category(c, config) for c in request.categories],
            "allocation": BudgetService.pie_chart_data(request.categories),
        }
    )
