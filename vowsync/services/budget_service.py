"""
Budget status and calculation service
"""

from typing import List, Optional

from vowsync.core.config import DisplayConfig, DEFAULT_DISPLAY_CONFIG
from vowsync.schemas.budget import (
    BudgetCategory,
    BudgetCategoryDisplay,
    BudgetImpactPreview,
    BudgetOverview,
    BudgetPieSlice,
    BudgetProgress,
    BudgetStatusBadge,
)
from vowsync.utils.formatting import format_currency

# Floating point tolerance for "exactly at budget"
AT_BUDGET_PERCENT = 99.99

BUDGET_LEVEL_LABELS = {
    "on-track": "On Track",
    "near-budget": "Near Budget",
    "at-budget": "At Budget",
    "over-budget": "Over Budget",
}


def percent_of(amount: float, total: float) -> float:
    """amount / total * 100, defined as 0 when total is 0"""
    if total == 0:
        return 0.0
    return amount / total * 100


class BudgetService:
    """Budget percentages, status tiers and payment/invoice arithmetic"""

    @staticmethod
    def classify_budget(
        spent: float,
        total: float,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> BudgetProgress:
        """Progress-bar tier: normal below the warning threshold, warning up to 100%, danger from 100%"""
        percent = percent_of(spent, total)
        if percent >= 100:
            status = "danger"
        elif percent >= config.budget_warning_percent:
            status = "warning"
        else:
            status = "normal"
        return BudgetProgress(percent=percent, status=status)

    @staticmethod
    def budget_level(percentage_spent: float, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> str:
        if percentage_spent > 100:
            return "over-budget"
        if percentage_spent >= AT_BUDGET_PERCENT:
            return "at-budget"
        if percentage_spent >= config.budget_warning_percent:
            return "near-budget"
        return "on-track"

    @staticmethod
    def budget_status_badge(
        projected_amount: float,
        actual_amount: float,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> BudgetStatusBadge:
        """Category badge; a zero projection is always on track"""
        if projected_amount == 0:
            return BudgetStatusBadge(label=BUDGET_LEVEL_LABELS["on-track"], status="on-track")

        level = BudgetService.budget_level(percent_of(actual_amount, projected_amount), config)
        if actual_amount > projected_amount:
            level = "over-budget"
        over_amount = actual_amount - projected_amount if level == "over-budget" else None
        return BudgetStatusBadge(label=BUDGET_LEVEL_LABELS[level], status=level, over_amount=over_amount)

    @staticmethod
    def classify_budget_category(
        category: BudgetCategory,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> BudgetCategoryDisplay:
        projected = category.projected_amount or 0
        actual = category.actual_amount or 0

        # Committed but not yet paid
        invoiced_unpaid = max(0.0, projected - actual)
        total_committed = actual + invoiced_unpaid
        remaining = max(0.0, projected - total_committed)
        percentage_spent = percent_of(actual, projected)

        return BudgetCategoryDisplay(
            **category.model_dump(),
            invoiced_unpaid=invoiced_unpaid,
            total_committed=total_committed,
            remaining=remaining,
            percentage_spent=percentage_spent,
            is_near_limit=config.budget_warning_percent <= percentage_spent < 100,
            is_over_budget=actual > projected,
            status_badge=BudgetService.budget_status_badge(projected, actual, config)
        )

    @staticmethod
    def calculate_overview(categories: List[BudgetCategory]) -> BudgetOverview:
        total_budget = sum(c.projected_amount or 0 for c in categories)
        total_spent = sum(c.actual_amount or 0 for c in categories)
        return BudgetOverview(
            total_budget=total_budget,
            total_spent=total_spent,
            remaining=total_budget - total_spent,
            percent_spent=round(percent_of(total_spent, total_budget))
        )

    @staticmethod
    def pie_chart_data(categories: List[BudgetCategory]) -> List[BudgetPieSlice]:
        """Allocation share per category by projected amount"""
        total_budget = sum(c.projected_amount or 0 for c in categories)
        if total_budget == 0:
            return []
        return [
            BudgetPieSlice(
                name=c.category_name,
                value=c.projected_amount,
                percentage=round(c.projected_amount / total_budget * 100)
            )
            for c in categories
            if c.projected_amount > 0
        ]

    @staticmethod
    def calculate_budget_impact(
        current_actual: float,
        payment_amount: float,
        projected: float,
        category: Optional[BudgetCategory] = None,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> BudgetImpactPreview:
        """Preview how a pending payment moves a category against its projection.

        The warning and exceed flags are independent: a payment that pushes a
        category past 100% exceeds the budget without triggering the warning.
        """
        new_actual = current_actual + payment_amount
        new_percentage = percent_of(new_actual, projected)
        return BudgetImpactPreview(
            category_id=category.id if category else None,
            category_name=category.category_name if category else None,
            current_actual=current_actual,
            new_actual=new_actual,
            change_amount=payment_amount,
            new_percentage_spent=new_percentage,
            will_trigger_warning=config.budget_warning_percent <= new_percentage < 100,
            will_exceed_budget=new_actual > projected
        )

    @staticmethod
    def impact_for_category(
        category: BudgetCategory,
        payment_amount: float,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> BudgetImpactPreview:
        return BudgetService.calculate_budget_impact(
            current_actual=category.actual_amount or 0,
            payment_amount=payment_amount,
            projected=category.projected_amount or 0,
            category=category,
            config=config
        )

    # -------- invoice / payment arithmetic --------

    @staticmethod
    def determine_payment_status(total_paid: float, invoice_total: float) -> str:
        if total_paid >= invoice_total:
            return "paid"
        if total_paid > 0:
            return "partially_paid"
        return "unpaid"

    @staticmethod
    def calculate_remaining_balance(invoice_total: float, total_paid: float) -> float:
        return max(0.0, invoice_total - total_paid)

    @staticmethod
    def validate_payment_amount(
        payment_amount: float,
        invoice_total: float,
        already_paid: float,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> Optional[str]:
        """Error message when a payment exceeds what is left on the invoice, else None"""
        remaining = BudgetService.calculate_remaining_balance(invoice_total, already_paid)
        if payment_amount > remaining:
            return (
                f"Payment amount ({format_currency(payment_amount, config)}) exceeds "
                f"remaining balance ({format_currency(remaining, config)})"
            )
        return None

    @staticmethod
    def calculate_vat(amount: float, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> float:
        return round(amount * config.vat_rate, 2)

    @staticmethod
    def calculate_invoice_total(amount: float, config: DisplayConfig = DEFAULT_DISPLAY_CONFIG) -> float:
        return round(amount + BudgetService.calculate_vat(amount, config), 2)
