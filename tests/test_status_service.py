"""
Tests for payment and invoice status classification
"""

import pytest
from datetime import date

from vowsync.core.config import DisplayConfig
from vowsync.core.exceptions import InvalidDateFormat, VowSyncError
from vowsync.schemas.vendor import (
    InvoiceDisplayStatus,
    PaymentDisplayStatus,
    Severity,
    VendorInvoice,
    VendorPayment,
)
from vowsync.services.status_service import StatusService

TODAY = date(2025, 3, 10)


def classify(**fields):
    return StatusService.classify_payment(VendorPayment(**fields), TODAY)


def test_paid_date_wins_over_everything():
    """A payment with a paid date is paid even if it looks overdue or cancelled"""
    result = classify(status="cancelled", due_date="2025-01-01", paid_date="2025-01-02")
    assert result.status == PaymentDisplayStatus.PAID
    assert result.label == "Paid"
    assert result.severity == Severity.SUCCESS


def test_paid_status_without_date():
    assert classify(status="paid", due_date="2025-01-01").status == PaymentDisplayStatus.PAID


def test_cancelled_beats_overdue():
    result = classify(status="cancelled", due_date="2025-01-01")
    assert result.status == PaymentDisplayStatus.CANCELLED
    assert result.severity == Severity.MUTED


def test_overdue_by_one_day_is_singular():
    result = classify(due_date="2025-03-09")
    assert result.status == PaymentDisplayStatus.OVERDUE
    assert result.label == "Overdue by 1 day"
    assert result.days_until_due == -1
    assert result.severity == Severity.DANGER


def test_overdue_plural():
    assert classify(due_date="2025-03-01").label == "Overdue by 9 days"


def test_overdue_with_datetime_string_counts_calendar_days():
    """Time of day does not change the day count"""
    assert classify(due_date="2025-03-09T23:59:00Z").label == "Overdue by 1 day"


@pytest.mark.parametrize("due_date,label", [
    ("2025-03-10", "Due today"),
    ("2025-03-11", "Due tomorrow"),
    ("2025-03-17", "Due in 7 days"),
])
def test_due_soon_labels(due_date, label):
    result = classify(due_date=due_date)
    assert result.status == PaymentDisplayStatus.DUE_SOON
    assert result.label == label
    assert result.severity == Severity.WARNING


def test_due_soon_boundary_is_inclusive():
    """Seven days out is due soon, eight days out is pending"""
    assert classify(due_date="2025-03-17").status == PaymentDisplayStatus.DUE_SOON
    result = classify(due_date="2025-03-18")
    assert result.status == PaymentDisplayStatus.PENDING
    assert result.days_until_due == 8


def test_due_soon_window_comes_from_config():
    config = DisplayConfig(due_soon_days=3)
    payment = VendorPayment(due_date="2025-03-14")
    assert StatusService.classify_payment(payment, TODAY, config).status == PaymentDisplayStatus.PENDING


def test_date_objects_are_accepted():
    assert classify(due_date=date(2025, 3, 11)).label == "Due tomorrow"


def test_invalid_due_date_raises():
    with pytest.raises(InvalidDateFormat) as exc_info:
        classify(due_date="next tuesday")

    assert exc_info.value.field == "due_date"
    assert exc_info.value.error_code == "invalid_date_format"
    assert isinstance(exc_info.value, VowSyncError)
    assert isinstance(exc_info.value, ValueError)


def test_invoice_priority():
    """paid > cancelled > overdue > partially paid > unpaid"""
    def status(**fields):
        return StatusService.classify_invoice(VendorInvoice(**fields), TODAY).status

    assert status(status="paid", due_date="2025-01-01") == InvoiceDisplayStatus.PAID
    assert status(status="cancelled", due_date="2025-01-01") == InvoiceDisplayStatus.CANCELLED
    assert status(status="partially_paid", due_date="2025-01-01") == InvoiceDisplayStatus.OVERDUE
    assert status(status="partially_paid", due_date="2025-04-01") == InvoiceDisplayStatus.PARTIAL
    assert status(status="unpaid", due_date="2025-04-01") == InvoiceDisplayStatus.UNPAID


def test_partial_invoice_label():
    invoice = VendorInvoice(status="partially_paid", due_date="2025-04-01")
    result = StatusService.classify_invoice(invoice, TODAY)
    assert result.label == "Partially Paid"
    assert result.severity == Severity.WARNING


def test_edit_guards():
    pending = VendorPayment(due_date="2025-04-01")
    paid = VendorPayment(due_date="2025-04-01", paid_date="2025-03-01")
    cancelled = VendorPayment(status="cancelled", due_date="2025-04-01")

    assert StatusService.can_edit(pending)
    assert StatusService.can_mark_as_paid(pending)
    assert not StatusService.can_edit(paid)
    assert not StatusService.can_mark_as_paid(cancelled)


def test_deleting_paid_payment_warns():
    paid = StatusService.can_delete_payment(VendorPayment(status="paid", due_date="2025-04-01"))
    pending = StatusService.can_delete_payment(VendorPayment(due_date="2025-04-01"))

    assert paid.can_delete and paid.warning
    assert pending.can_delete and pending.warning is None
