"""
Vendor table API routes
"""

from fastapi import APIRouter
from fastapi.responses import Response

from vowsync.schemas.vendor import VendorTableRequest
from vowsync.services.excel_service import ExcelService
from vowsync.services.table_service import build_vendor_table
from vowsync.services.vendor_service import VendorService
from vowsync.utils.responses import success_response, file_response

router = APIRouter()


def _vendor_table(request: VendorTableRequest):
    return build_vendor_table(
        request.vendors,
        request.contacts,
        request.payments,
        request.invoices,
        filters=request.filters,
        column_filters=request.column_filters,
        sort=request.sort
    )


@router.post("/table")
async def vendor_table(request: VendorTableRequest):
    """Vendors with contact, payment and invoice counts; flags fields that fail their format check"""
    result = _vendor_table(request)

    invalid_fields = {}
    for vendor in request.vendors:
        errors = VendorService.field_errors(vendor)
        if errors:
            invalid_fields[vendor.id] = errors

    return success_response(
        message=f"Showing {result.filtered_count} of {result.total_count} vendors",
        data={
            "table": result,
            "invalid_fields": invalid_fields
        }
    )


@router.post("/table/export.xlsx")
async def export_vendor_table_xlsx(request: VendorTableRequest) -> Response:
    """Download the current vendor view as an Excel workbook; account numbers are masked"""
    result = _vendor_table(request)
    return file_response(ExcelService.export_rows(result.rows, result.columns), "vendors.xlsx")
