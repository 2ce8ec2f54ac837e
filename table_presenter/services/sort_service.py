"""Single-column stable sorting for table records."""

from __future__ import annotations

import numbers
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import Any, List, Sequence, Tuple

from table_presenter.config import SORT_ASC
from table_presenter.models import ColumnSpec, Record, SortState
from table_presenter.utils.helpers import is_missing, normalize_text

# Values of different types never compare directly; they are grouped by type.
_NUMBER_RANK = 0
_DATE_RANK = 1
_TEXT_RANK = 2
_OTHER_RANK = 3


def _date_key(value: date) -> datetime:
    """Return a naive UTC datetime so dates, datetimes and Timestamps compare."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def sort_key(value: Any) -> Tuple[int, Any]:
    """Return a key giving numbers, dates and text their natural ordering."""
    if isinstance(value, (numbers.Real, Decimal)):
        return _NUMBER_RANK, value
    if isinstance(value, date):
        return _DATE_RANK, _date_key(value)
    if isinstance(value, str):
        return _TEXT_RANK, value
    return _OTHER_RANK, normalize_text(value)


def sort_records(records: Sequence[Record], sort_state: SortState) -> List[Record]:
    """Return a new list ordered by the sort column; missing values go last."""
    key = sort_state.key
    present = [record for record in records if not is_missing(record.get(key))]
    missing = [record for record in records if is_missing(record.get(key))]

    # sorted() stays stable with reverse=True, so ties keep input order.
    ordered = sorted(present, key=lambda record: sort_key(record.get(key)), reverse=sort_state.descending)
    return ordered + missing


def next_sort_state(current: SortState, key: str) -> SortState:
    """Toggle the direction on the active column, otherwise sort the new column ascending."""
    if current.key == key:
        return current.toggled()
    return SortState(key, SORT_ASC)


def is_sortable(columns: Sequence[ColumnSpec], key: str) -> bool:
    """Return True when key names a column that may become the sort key."""
    return any(column.key == key and column.is_sortable for column in columns)
