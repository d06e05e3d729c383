"""
Pydantic schemas package
"""

from .common import *
from .table import *
from .event import *
from .guest import *
from .item import *
from .vendor import *
from .budget import *
from .bar_order import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "CellType",
    "FilterOperator",
    "ColumnDef",
    "ColumnFilter",
    "SortConfig",
    "TableViewResult",
    "WeddingEvent",
    "EventColumnMeta",
    "MealOption",
    "MealOptionLookup",
    "Guest",
    "GuestAttendance",
    "EventAttendanceData",
    "GuestTableRow",
    "GuestFilters",
    "GuestTableRequest",
    "WeddingItem",
    "ItemEventQuantity",
    "ItemEventQuantityDisplay",
    "ItemTableRow",
    "ItemFilters",
    "ItemTableRequest",
    "DisplayStatus",
    "VendorPayment",
    "VendorInvoice",
    "Vendor",
    "VendorTableRow",
    "VendorLink",
    "VendorFilters",
    "VendorTableRequest",
    "BudgetCategory",
    "BudgetImpactPreview",
    "BarOrderItem",
    "PercentageValidation",
]
