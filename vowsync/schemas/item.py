"""
Wedding item Pydantic schemas
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel

from vowsync.schemas.event import WeddingEvent
from vowsync.schemas.table import ColumnFilter, SortConfig

AggregationMethod = Literal["ADD", "MAX"]


class WeddingItem(BaseModel):
    """Wedding item (furniture, linen, decor...) owned by a wedding"""
    id: str
    wedding_id: str
    description: str
    category: str
    aggregation_method: AggregationMethod = "ADD"
    total_required: Optional[int] = None
    number_available: Optional[int] = None
    cost_per_unit: Optional[float] = None
    cost_details: Optional[str] = None
    total_cost: Optional[float] = None
    supplier_name: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ItemEventQuantity(BaseModel):
    """Quantity of an item needed at one event"""
    item_id: str
    event_id: str
    quantity_required: int
    event_name: Optional[str] = None


class ItemEventQuantityDisplay(BaseModel):
    event_id: str
    event_name: Optional[str] = None
    quantity_required: int
    is_max: bool = False

    class Config:
        frozen = True


class AvailabilityStatus(BaseModel):
    status: Literal["sufficient", "shortage", "unknown"]
    message: str
    shortage: Optional[int] = None


class ItemTableRow(WeddingItem):
    """Wedding item flattened for the table view"""
    total_required: int = 0
    availability_status: Literal["sufficient", "shortage", "unknown"] = "unknown"
    shortage_amount: Optional[int] = None
    event_quantities: List[ItemEventQuantityDisplay] = []
    event_quantity_map: Dict[str, int] = {}

    class Config:
        frozen = True


class ItemFilters(BaseModel):
    """Shared item filters used by both card and table views"""
    search: str = ""
    category: str = "all"
    supplier: str = "all"
    aggregation_method: str = "all"
    availability_status: str = "all"

    class Config:
        frozen = True


class ItemSummary(BaseModel):
    total_items: int
    total_cost: float
    items_with_cost: int
    items_without_cost: int
    shortage_count: int
    sufficient_count: int
    unknown_availability_count: int


class ItemTableRequest(BaseModel):
    """Payload for building the item table view"""
    items: List[WeddingItem]
    quantities: List[ItemEventQuantity] = []
    events: List[WeddingEvent] = []
    filters: ItemFilters = ItemFilters()
    column_filters: List[ColumnFilter] = []
    sort: SortConfig = SortConfig()
