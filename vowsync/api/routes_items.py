"""
Wedding item table API routes
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from vowsync.core.config import DisplayConfig, get_display_config
from vowsync.schemas.item import ItemTableRequest
from vowsync.services.excel_service import ExcelService
from vowsync.services.item_service import ItemService
from vowsync.services.table_service import build_item_table
from vowsync.utils.responses import success_response, file_response

router = APIRouter()


@router.post("/table")
async def item_table(
    request: ItemTableRequest,
    config: DisplayConfig = Depends(get_display_config)
):
    """Items with per-event quantity columns, availability and cost summary"""
    result = build_item_table(
        request.items,
        request.quantities,
        request.events,
        filters=request.filters,
        column_filters=request.column_filters,
        sort=request.sort,
        config=config
    )
    return success_response(
        message=f"Showing {result.filtered_count} of {result.total_count} items",
        data={
            "table": result,
            "summary": ItemService.calculate_summary(result.rows)
        }
    )


@router.post("/table/export.xlsx")
async def export_item_table_xlsx(
    request: ItemTableRequest,
    config: DisplayConfig = Depends(get_display_config)
) -> Response:
    """Download the current item view as an Excel workbook"""
    result = build_item_table(
        request.items,
        request.quantities,
        request.events,
        filters=request.filters,
        column_filters=request.column_filters,
        sort=request.sort,
        config=config
    )
    return file_response(ExcelService.export_rows(result.rows, result.columns), "items.xlsx")
