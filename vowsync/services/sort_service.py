"""
Stable single-column sorting for table rows.

Missing values (None, absent keys, unparseable dates) always go last, in
both directions; the direction only flips the order of present values. Ties
keep their input order.
"""

import unicodedata
from typing import Any, Iterable, List, Optional, Sequence

from vowsync.schemas.table import CellType, ColumnDef, SortConfig
from vowsync.services.columns import DATE_CELL_TYPES, build_column_field_map, build_column_type_map
from vowsync.services.filter_service import is_number, get_nested_value
from vowsync.utils.dates import try_parse_datetime


def text_key(value: Any) -> str:
    """Case- and accent-insensitive collation key"""
    decomposed = unicodedata.normalize("NFKD", str(value))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def _sort_key_factory(values: List[Any], cell_type: Optional[CellType]):
    """Pick one comparison kind for the whole column so keys never mix types"""
    if cell_type in DATE_CELL_TYPES:
        return try_parse_datetime
    if all(isinstance(v, bool) for v in values):
        # True before False ascending
        return lambda v: not v
    if all(is_number(v) for v in values):
        return float
    return text_key


def sort_rows(
    rows: Sequence[Any],
    config: SortConfig,
    columns: Optional[Iterable[ColumnDef]] = None
) -> List[Any]:
    """New list of rows ordered by ``config``; the input is never mutated"""
    if not config.column:
        return list(rows)

    columns = list(columns or [])
    path = build_column_field_map(columns).get(config.column, config.column)
    cell_type = build_column_type_map(columns).get(path)

    values = [get_nested_value(row, path) for row in rows]
    present = [v for v in values if v is not None]
    key_for = _sort_key_factory(present, cell_type)

    keyed = []
    trailing = []
    for row, value in zip(rows, values):
        key = key_for(value) if value is not None else None
        if key is None:
            trailing.append(row)
        else:
            keyed.append((key, row))

    # sorted() is stable, including with reverse=True
    ordered = sorted(keyed, key=lambda pair: pair[0], reverse=config.direction == "desc")
    return [row for _, row in ordered] + trailing
