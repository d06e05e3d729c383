"""
Excel/CSV export service for the flattened table rows
"""

import io
import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from vowsync.core.config import settings
from vowsync.schemas.table import CellType, ColumnDef
from vowsync.services.filter_service import get_nested_value
from vowsync.services.vendor_service import VendorService

logger = logging.getLogger(__name__)

# Info columns render event metadata, there is nothing per row to export
SKIPPED_TYPES = {CellType.SHUTTLE_INFO}

EVENT_HEADER_LABELS = {
    CellType.BOOLEAN: "Attending",
    CellType.SHUTTLE_TOGGLE: "Shuttle",
}


class ExcelService:
    """Service for exporting table views"""

    SHEET_NAME = "Export"

    @staticmethod
    def export_header(column: ColumnDef) -> str:
        """Event columns get the event name prefixed, e.g. 'Ceremony - Attending'"""
        if column.event_name and column.category == "event":
            label = EVENT_HEADER_LABELS.get(column.type)
            if label:
                return f"{column.event_name} - {label}"
            if column.type == CellType.EVENT_QUANTITY:
                return f"{column.event_name} - Quantity"
        return column.header

    @staticmethod
    def cell_value(value: Any, column: ColumnDef) -> Any:
        if column.type == CellType.MASKED:
            return VendorService.mask_account_number(value)
        if column.type == CellType.SHUTTLE_TOGGLE:
            return "Yes" if value == "Yes" else "No"
        if isinstance(value, bool):
            return "Yes" if value else "No"
        if column.type == CellType.BOOLEAN and value is None:
            return "No"
        return value

    @staticmethod
    def build_dataframe(
        rows: Sequence[Any],
        columns: Sequence[ColumnDef],
        max_rows: Optional[int] = None
    ) -> pd.DataFrame:
        """One DataFrame column per exportable column, in column order"""
        limit = settings.MAX_EXPORT_ROWS if max_rows is None else max_rows
        if len(rows) > limit:
            logger.warning("Export truncated to %d of %d rows", limit, len(rows))
            rows = rows[:limit]

        exported = [column for column in columns if column.type not in SKIPPED_TYPES]
        headers = [ExcelService.export_header(column) for column in exported]

        # Keyed by column id; two events may share a name and so a header
        data: List[Dict[str, Any]] = []
        for row in rows:
            data.append({
                column.id: ExcelService.cell_value(get_nested_value(row, column.field), column)
                for column in exported
            })

        df = pd.DataFrame(data, columns=[column.id for column in exported])
        df.columns = headers
        return df

    @staticmethod
    def export_rows(rows: Sequence[Any], columns: Sequence[ColumnDef], max_rows: Optional[int] = None) -> bytes:
        """Export rows to an xlsx workbook"""
        df = ExcelService.build_dataframe(rows, columns, max_rows)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=ExcelService.SHEET_NAME)

        return buffer.getvalue()

    @staticmethod
    def export_rows_csv(rows: Sequence[Any], columns: Sequence[ColumnDef], max_rows: Optional[int] = None) -> str:
        """Export rows to CSV text; the BOM lets Excel detect UTF-8"""
        df = ExcelService.build_dataframe(rows, columns, max_rows)
        return "\ufeff" + df.to_csv(index=False)
