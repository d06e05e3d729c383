"""
Payment and invoice status classification based on dates
"""

from datetime import date
from typing import Optional

from vowsync.core.config import DisplayConfig, DEFAULT_DISPLAY_CONFIG
from vowsync.schemas.vendor import (
    DeleteCheck,
    DisplayStatus,
    InvoiceDisplayStatus,
    PaymentDisplayStatus,
    Severity,
    VendorInvoice,
    VendorPayment,
)
from vowsync.utils.dates import days_between, parse_date, today_for


def _overdue_label(days_overdue: int) -> str:
    if days_overdue == 1:
        return "Overdue by 1 day"
    return f"Overdue by {days_overdue} days"


def _due_soon_label(days_until_due: int) -> str:
    if days_until_due == 0:
        return "Due today"
    if days_until_due == 1:
        return "Due tomorrow"
    return f"Due in {days_until_due} days"


class StatusService:
    """Derives badge statuses for vendor payments and invoices"""

    @staticmethod
    def classify_payment(
        payment: VendorPayment,
        today: Optional[date] = None,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> DisplayStatus:
        """Classify a scheduled payment.

        Priority: paid > cancelled > overdue > due soon (within
        ``config.due_soon_days``) > pending. Days are counted as calendar days
        so a payment due yesterday is overdue by exactly one day regardless of
        the time of day.
        """
        if payment.paid_date or payment.status == "paid":
            return DisplayStatus(status=PaymentDisplayStatus.PAID, label="Paid", severity=Severity.SUCCESS)

        if payment.status == "cancelled":
            return DisplayStatus(status=PaymentDisplayStatus.CANCELLED, label="Cancelled", severity=Severity.MUTED)

        today = today or today_for(config)
        days_until_due = days_between(today, parse_date(payment.due_date, "due_date"))

        if days_until_due < 0:
            return DisplayStatus(
                status=PaymentDisplayStatus.OVERDUE,
                label=_overdue_label(abs(days_until_due)),
                severity=Severity.DANGER,
                days_until_due=days_until_due
            )

        if days_until_due <= config.due_soon_days:
            return DisplayStatus(
                status=PaymentDisplayStatus.DUE_SOON,
                label=_due_soon_label(days_until_due),
                severity=Severity.WARNING,
                days_until_due=days_until_due
            )

        return DisplayStatus(
            status=PaymentDisplayStatus.PENDING,
            label="Pending",
            severity=Severity.INFO,
            days_until_due=days_until_due
        )

    @staticmethod
    def classify_invoice(
        invoice: VendorInvoice,
        today: Optional[date] = None,
        config: DisplayConfig = DEFAULT_DISPLAY_CONFIG
    ) -> DisplayStatus:
        """Classify an invoice: paid > cancelled > overdue > partially paid > unpaid"""
        if invoice.paid_date or invoice.status == "paid":
            return DisplayStatus(status=InvoiceDisplayStatus.PAID, label="Paid", severity=Severity.SUCCESS)

        if invoice.status == "cancelled":
            return DisplayStatus(status=InvoiceDisplayStatus.CANCELLED, label="Cancelled", severity=Severity.MUTED)

        today = today or today_for(config)
        days_until_due = days_between(today, parse_date(invoice.due_date, "due_date"))

        if days_until_due < 0:
            return DisplayStatus(
                status=InvoiceDisplayStatus.OVERDUE,
                label=_overdue_label(abs(days_until_due)),
                severity=Severity.DANGER,
                days_until_due=days_until_due
            )

        if invoice.status == "partially_paid":
            return DisplayStatus(
                status=InvoiceDisplayStatus.PARTIAL,
                label="Partially Paid",
                severity=Severity.WARNING,
                days_until_due=days_until_due
            )

        return DisplayStatus(
            status=InvoiceDisplayStatus.UNPAID,
            label="Unpaid",
            severity=Severity.INFO,
            days_until_due=days_until_due
        )

    @staticmethod
    def is_settled(record) -> bool:
        return bool(record.paid_date) or record.status in ("paid", "cancelled")

    @staticmethod
    def can_edit(record) -> bool:
        """Only unpaid, non-cancelled payments/invoices can be edited or marked paid"""
        return not StatusService.is_settled(record)

    @staticmethod
    def can_mark_as_paid(record) -> bool:
        return not StatusService.is_settled(record)

    @staticmethod
    def can_delete_payment(payment: VendorPayment) -> DeleteCheck:
        if payment.paid_date or payment.status == "paid":
            return DeleteCheck(
                can_delete=True,
                warning="This payment has been marked as paid. Deleting it will remove the payment record."
            )
        return DeleteCheck(can_delete=True)
