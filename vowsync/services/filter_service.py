"""
Filter engine for pivoted table rows.

Column filters are AND-combined. A filter that cannot be applied (unknown
operator, a column the rows do not have, an operator the column type does
not support, or a value of the wrong shape) is skipped with a warning so one
bad filter never blanks the whole table.
"""

import logging
from datetime import date
from numbers import Number
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from vowsync.schemas.guest import GuestFilters
from vowsync.schemas.item import ItemFilters
from vowsync.schemas.vendor import VendorFilters
from vowsync.schemas.table import CellType, ColumnDef, ColumnFilter, FilterOperator
from vowsync.services.columns import build_column_field_map, build_column_type_map, is_operator_compatible
from vowsync.utils.dates import try_parse_datetime

logger = logging.getLogger(__name__)

MISSING = object()
NULL_TOKEN = "__null__"
SHUTTLE_FIELDS = ("shuttle_to_event", "shuttle_from_event")

Predicate = Callable[[Any], bool]


# -------- field access --------

def _child(container: Any, key: str) -> Any:
    if isinstance(container, dict):
        return container.get(key, MISSING)
    return getattr(container, key, MISSING)


def has_root_field(row: Any, path: str) -> bool:
    return _child(row, path.split(".", 1)[0]) is not MISSING


def get_nested_value(row: Any, path: str) -> Any:
    """Walk a dot path such as ``event_attendance.<event_id>.attending``; missing keys read as None"""
    current = row
    for key in path.split("."):
        if current is None:
            return None
        current = _child(current, key)
        if current is MISSING:
            return None
    return current


# -------- normalization --------

def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def normalize_value(value: Any, field: str = "") -> str:
    """Canonical string used by equals / in comparisons"""
    if field.endswith(SHUTTLE_FIELDS):
        return "yes" if value == "Yes" else "no"
    if value is None:
        return NULL_TOKEN
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip().casefold()


def _normalize_filter_value(value: Any) -> str:
    if isinstance(value, str) and value == NULL_TOKEN:
        return NULL_TOKEN
    return normalize_value(value)


def is_empty(value: Any) -> bool:
    """None and "" are empty; 0 and False are values"""
    return value is None or (isinstance(value, str) and value == "")


def _coerce_pair(row_value: Any, bound: Any):
    """Bring a row value and a range bound to comparable types, or None"""
    if is_number(row_value):
        try:
            return row_value, float(bound)
        except (TypeError, ValueError):
            return None
    if isinstance(row_value, (str, date)):
        left = try_parse_datetime(row_value)
        right = try_parse_datetime(bound) if not is_number(bound) else None
        if left is not None and right is not None:
            return left, right
    return None


# -------- compilation --------

def _value_shape_ok(operator: FilterOperator, value: Any) -> bool:
    if operator == FilterOperator.IN:
        return isinstance(value, (list, tuple, set, frozenset))
    if operator in (FilterOperator.GTE, FilterOperator.LTE):
        return value is not None and not isinstance(value, (bool, list, tuple, set, frozenset, dict))
    if operator in (FilterOperator.EQUALS, FilterOperator.CONTAINS):
        return not isinstance(value, (list, tuple, set, frozenset, dict))
    return True


def _build_predicate(operator: FilterOperator, path: str, value: Any) -> Predicate:
    if operator == FilterOperator.EQUALS:
        expected = _normalize_filter_value(value)
        return lambda row: normalize_value(get_nested_value(row, path), path) == expected

    if operator == FilterOperator.CONTAINS:
        needle = "" if value is None else str(value).casefold()
        def contains(row):
            found = get_nested_value(row, path)
            return needle in ("" if found is None else str(found).casefold())
        return contains

    if operator == FilterOperator.IN:
        allowed = {_normalize_filter_value(v) for v in value}
        return lambda row: normalize_value(get_nested_value(row, path), path) in allowed

    if operator in (FilterOperator.GTE, FilterOperator.LTE):
        def in_range(row):
            pair = _coerce_pair(get_nested_value(row, path), value)
            if pair is None:
                return False
            try:
                left, right = pair
                return left >= right if operator == FilterOperator.GTE else left <= right
            except TypeError:
                return False
        return in_range

    if operator == FilterOperator.IS_EMPTY:
        return lambda row: is_empty(get_nested_value(row, path))

    return lambda row: not is_empty(get_nested_value(row, path))


def compile_filter(
    column_filter: ColumnFilter,
    field_map: Dict[str, str],
    type_map: Dict[str, CellType],
    rows: Sequence[Any]
) -> Optional[Predicate]:
    """Predicate for one filter, or None when the filter should be ignored"""
    try:
        operator = FilterOperator(column_filter.operator)
    except ValueError:
        logger.warning("Ignoring filter on %r: unknown operator %r", column_filter.column, column_filter.operator)
        return None

    path = field_map.get(column_filter.column, column_filter.column)
    if not any(has_root_field(row, path) for row in rows):
        logger.warning("Ignoring filter on %r: rows have no field %r", column_filter.column, path)
        return None

    cell_type = type_map.get(path)
    if cell_type is not None and not is_operator_compatible(cell_type, operator):
        logger.warning("Ignoring filter on %r: %s not supported for %s columns",
                       column_filter.column, operator.value, cell_type.value)
        return None

    if not _value_shape_ok(operator, column_filter.value):
        logger.warning("Ignoring filter on %r: %s cannot take value %r",
                       column_filter.column, operator.value, column_filter.value)
        return None

    return _build_predicate(operator, path, column_filter.value)


def apply_filters(
    rows: Sequence[Any],
    filters: Sequence[ColumnFilter],
    columns: Optional[Iterable[ColumnDef]] = None
) -> Sequence[Any]:
    """Rows matching every applicable filter; no filters returns ``rows`` itself"""
    if not filters or not rows:
        return rows

    columns = list(columns or [])
    field_map = build_column_field_map(columns)
    type_map = build_column_type_map(columns)

    predicates = [
        predicate
        for predicate in (compile_filter(f, field_map, type_map, rows) for f in filters)
        if predicate is not None
    ]
    if not predicates:
        return rows

    return [row for row in rows if all(predicate(row) for predicate in predicates)]


# -------- free-text search and shared filters --------

def apply_search(rows: Sequence[Any], search: Optional[str], field: str) -> Sequence[Any]:
    """Case-insensitive match on the display name field only"""
    term = (search or "").strip().casefold()
    if not term:
        return rows
    return [row for row in rows if term in str(get_nested_value(row, field) or "").casefold()]


def _active(value: Optional[str]) -> bool:
    return bool(value) and value != "all"


def apply_guest_filters(rows: Sequence[Any], filters: GuestFilters) -> List[Any]:
    """Card/table shared guest filters: search, type, RSVP status, table, event"""
    result = list(apply_search(rows, filters.search, "name"))

    if _active(filters.type):
        result = [row for row in result if row.guest_type == filters.type]

    if _active(filters.invitation_status):
        result = [row for row in result if row.invitation_status == filters.invitation_status]

    if _active(filters.table_number):
        if filters.table_number == "none":
            result = [row for row in result if not row.table_number]
        else:
            result = [row for row in result if row.table_number == filters.table_number]

    if filters.event_id:
        result = [row for row in result if row.attendance_for(filters.event_id).attending]

    return result


def apply_item_filters(rows: Sequence[Any], filters: ItemFilters) -> List[Any]:
    """Card/table shared item filters: search, category, supplier, aggregation, availability"""
    result = list(apply_search(rows, filters.search, "description"))

    if _active(filters.category):
        result = [row for row in result if row.category == filters.category]

    if _active(filters.supplier):
        result = [row for row in result if row.supplier_name == filters.supplier]

    if _active(filters.aggregation_method):
        result = [row for row in result if row.aggregation_method == filters.aggregation_method]

    if _active(filters.availability_status):
        result = [row for row in result if row.availability_status == filters.availability_status]

    return result


VENDOR_SEARCH_FIELDS = ("company_name", "contact_name", "contact_email", "notes")


def apply_vendor_filters(rows: Sequence[Any], filters: VendorFilters) -> List[Any]:
    """Card/table shared vendor filters: search, type, status, contract signed"""
    result = list(rows)

    term = filters.search.strip().casefold()
    if term:
        result = [
            row for row in result
            if any(term in str(get_nested_value(row, field) or "").casefold() for field in VENDOR_SEARCH_FIELDS)
        ]

    if _active(filters.vendor_type):
        result = [row for row in result if row.vendor_type == filters.vendor_type]

    if _active(filters.status):
        result = [row for row in result if row.status == filters.status]

    if _active(filters.contract_status):
        signed = filters.contract_status == "signed"
        result = [row for row in result if row.contract_signed is signed]

    return result


def guest_filters_active(filters: GuestFilters) -> bool:
    return bool(filters.search.strip()) or _active(filters.type) or _active(filters.invitation_status) \
        or _active(filters.table_number) or bool(filters.event_id)


def item_filters_active(filters: ItemFilters) -> bool:
    return bool(filters.search.strip()) or _active(filters.category) or _active(filters.supplier) \
        or _active(filters.aggregation_method) or _active(filters.availability_status)


def vendor_filters_active(filters: VendorFilters) -> bool:
    return bool(filters.search.strip()) or _active(filters.vendor_type) or _active(filters.status) \
        or _active(filters.contract_status)
