"""
Vendor, payment and invoice schemas
"""

from datetime import date
from enum import Enum
from typing import List, Literal, Optional, Union
from pydantic import BaseModel

from vowsync.schemas.table import ColumnFilter, SortConfig


class Severity(str, Enum):
    """Colour tier a badge is rendered with"""
    SUCCESS = "success"
    MUTED = "muted"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class PaymentDisplayStatus(str, Enum):
    PAID = "paid"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    PENDING = "pending"


class InvoiceDisplayStatus(str, Enum):
    PAID = "paid"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"
    PARTIAL = "partial"
    UNPAID = "unpaid"


class DisplayStatus(BaseModel):
    """Classified status with its human label and severity tier"""
    status: Union[PaymentDisplayStatus, InvoiceDisplayStatus]
    label: str
    severity: Severity
    days_until_due: Optional[int] = None

    class Config:
        frozen = True


class VendorPayment(BaseModel):
    """Scheduled vendor payment snapshot"""
    id: Optional[str] = None
    status: str = "pending"
    due_date: Union[date, str]
    paid_date: Optional[Union[date, str]] = None
    amount: Optional[float] = None


class VendorInvoice(BaseModel):
    """Vendor invoice snapshot"""
    id: Optional[str] = None
    status: Literal["unpaid", "partially_paid", "paid", "overdue", "cancelled"] = "unpaid"
    due_date: Union[date, str]
    paid_date: Optional[Union[date, str]] = None
    amount: Optional[float] = None
    vat_amount: Optional[float] = None


class DeleteCheck(BaseModel):
    can_delete: bool
    warning: Optional[str] = None


class PaymentStatusRequest(BaseModel):
    payments: List[VendorPayment]
    today: Optional[date] = None


class InvoiceStatusRequest(BaseModel):
    invoices: List[VendorInvoice]
    today: Optional[date] = None


VENDOR_TYPE_OPTIONS = [
    "Catering", "Photography", "Videography", "Flowers", "Music/DJ", "Venue", "Transportation",
    "Officiant", "Hair/Makeup", "Rentals", "Decor", "Cake", "Stationery", "Beverages", "Other",
]
VENDOR_STATUS_OPTIONS = ["active", "inactive", "backup"]


class Vendor(BaseModel):
    """Vendor record with contract, insurance and banking details"""
    id: str
    wedding_id: str

    # Basic info
    vendor_type: str = "Other"
    company_name: str
    contact_name: str = ""
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None

    # Contract
    contract_signed: bool = False
    contract_date: Optional[str] = None
    contract_expiry_date: Optional[str] = None
    contract_value: Optional[float] = None
    cancellation_policy: Optional[str] = None
    cancellation_fee_percentage: Optional[float] = None
    insurance_required: bool = False
    insurance_verified: bool = False
    insurance_expiry_date: Optional[str] = None

    # Banking
    bank_name: Optional[str] = None
    account_name: Optional[str] = None
    account_number: Optional[str] = None
    branch_code: Optional[str] = None
    swift_code: Optional[str] = None

    notes: Optional[str] = None
    status: str = "active"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class VendorTableRow(Vendor):
    """Vendor with read-only counts of its related records"""
    contacts_count: int = 0
    payments_count: int = 0
    invoices_count: int = 0

    class Config:
        frozen = True


class VendorLink(BaseModel):
    """Any related record (contact, scheduled payment, invoice) that points at a vendor"""
    vendor_id: str


class VendorFilters(BaseModel):
    """Shared vendor filters; contract_status is "signed", "unsigned" or "all" """
    search: str = ""
    vendor_type: str = "all"
    status: str = "all"
    contract_status: Literal["all", "signed", "unsigned"] = "all"

    class Config:
        frozen = True


class VendorTableRequest(BaseModel):
    """Payload for building the vendor table view"""
    vendors: List[Vendor]
    contacts: List[VendorLink] = []
    payments: List[VendorLink] = []
    invoices: List[VendorLink] = []
    filters: VendorFilters = VendorFilters()
    column_filters: List[ColumnFilter] = []
    sort: SortConfig = SortConfig(column="company_name")
