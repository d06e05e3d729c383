"""
Guest table API routes
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from vowsync.core.config import DisplayConfig, get_display_config
from vowsync.schemas.guest import GuestTableRequest
from vowsync.schemas.table import TableViewResult
from vowsync.services.excel_service import ExcelService
from vowsync.services.table_service import build_guest_table
from vowsync.utils.responses import success_response, file_response

router = APIRouter()


def _build(request: GuestTableRequest, config: DisplayConfig) -> TableViewResult:
    return build_guest_table(
        request.guests,
        request.attendance,
        request.events,
        request.meal_options,
        filters=request.filters,
        column_filters=request.column_filters,
        sort=request.sort,
        config=config
    )


@router.post("/table")
async def guest_table(
    request: GuestTableRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Pivoted, filtered and sorted guest rows with counts and facets"""
    result = _build(request, config)
    return success_response(
        message=f"Showing {result.filtered_count} of {result.total_count} guests",
        data={"table": result}
    )


@router.post("/table/export.xlsx")
async def export_guest_table_xlsx(
    request: GuestTableRequest,
    config: DisplayConfig = Depends(get_display_config)
) -> Response:
    """Download the current guest view as an Excel workbook"""
    result = _build(request, config)
    return file_response(ExcelService.export_rows(result.rows, result.columns), "guests.xlsx")


@router.post("/table/export.csv")
async def export_guest_table_csv(
    request: GuestTableRequest,
    config: DisplayConfig = Depends(get_display_config)
) -> Response:
    """Download the current guest view as CSV"""
    result = _build(request, config)
    return file_response(
        ExcelService.export_rows_csv(result.rows, result.columns),
        "guests.csv",
        media_type="text/csv; charset=utf-8"
    )
